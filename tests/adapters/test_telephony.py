from __future__ import annotations

from wifinominator.adapters import (
    INVALID_SUBSCRIPTION_ID,
    CarrierIdentityResolver,
    StaticCarrierResolver,
    TelephonyConfig,
)
from wifinominator.schemas import EapMethod, SavedConfiguration, SecurityType


def sim_config(carrier_id: int = -1) -> SavedConfiguration:
    return SavedConfiguration(
        network_id=1,
        ssid="carrier",
        security=SecurityType.EAP,
        eap_method=EapMethod.SIM,
        carrier_id=carrier_id,
    )


def test_known_carrier_resolves_its_subscription():
    resolver = StaticCarrierResolver(
        config=TelephonyConfig(carrier_subscriptions={100: 3}, default_data_subscription=1)
    )

    assert resolver.best_subscription_for(sim_config(100)) == 3
    assert resolver.best_subscription_for(sim_config(200)) is None
    assert isinstance(resolver, CarrierIdentityResolver)


def test_unknown_carrier_uses_default_data_subscription():
    resolver = StaticCarrierResolver(
        config=TelephonyConfig(default_data_subscription=1, present_subscriptions=(1,))
    )

    assert resolver.best_subscription_for(sim_config()) == 1
    assert resolver.is_sim_present(1) is True
    assert resolver.is_sim_present(2) is False


def test_invalid_subscription_never_resolves_or_is_present():
    resolver = StaticCarrierResolver(
        config=TelephonyConfig(
            carrier_subscriptions={100: INVALID_SUBSCRIPTION_ID},
            present_subscriptions=(INVALID_SUBSCRIPTION_ID,),
        )
    )

    assert resolver.best_subscription_for(sim_config(100)) is None
    assert resolver.is_sim_present(INVALID_SUBSCRIPTION_ID) is False
