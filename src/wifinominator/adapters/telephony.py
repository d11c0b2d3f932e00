"""Static carrier identity resolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schemas import UNKNOWN_CARRIER_ID, SavedConfiguration

INVALID_SUBSCRIPTION_ID = -1


@dataclass
class TelephonyConfig:
    """Subscription layout for the static resolver."""

    carrier_subscriptions: dict[int, int] = field(default_factory=dict)
    default_data_subscription: int | None = None
    present_subscriptions: tuple[int, ...] = ()


class StaticCarrierResolver:
    """Resolve subscriptions from a fixed carrier table.

    A configuration with a known carrier id resolves to that carrier's
    subscription; one with an unknown carrier id falls back to the default
    data subscription.
    """

    def __init__(self, *, config: TelephonyConfig | None = None) -> None:
        self._config = config or TelephonyConfig()
        self._present = set(self._config.present_subscriptions)

    def best_subscription_for(self, configuration: SavedConfiguration) -> int | None:
        if configuration.carrier_id == UNKNOWN_CARRIER_ID:
            subscription_id = self._config.default_data_subscription
        else:
            subscription_id = self._config.carrier_subscriptions.get(configuration.carrier_id)
        if subscription_id is None or not is_valid_subscription(subscription_id):
            return None
        return subscription_id

    def is_sim_present(self, subscription_id: int) -> bool:
        return is_valid_subscription(subscription_id) and subscription_id in self._present


def is_valid_subscription(subscription_id: int) -> bool:
    return subscription_id > INVALID_SUBSCRIPTION_ID
