"\"\"\"Dependency injection container for the nominator.\"\"\""

from __future__ import annotations

from dependency_injector import containers, providers

from .adapters import InMemoryConfigurationStore, StaticCarrierResolver, TelephonyConfig
from .core import SavedNetworkNominator, build_filters
from .pipeline import NominationPipeline


class NominatorContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    configuration_store = providers.Factory(InMemoryConfigurationStore)

    telephony_config = providers.Singleton(TelephonyConfig)

    carrier_resolver = providers.Singleton(
        StaticCarrierResolver,
        config=telephony_config,
    )

    filters = providers.Factory(
        build_filters,
        resolver=carrier_resolver,
        names=config.filters,
    )

    nominator = providers.Factory(
        SavedNetworkNominator,
        store=configuration_store,
        resolver=carrier_resolver,
        filters=filters,
    )

    pipeline = providers.Factory(
        NominationPipeline,
        nominator_factory=nominator.provider,
    )


def create_container(*, settings: dict | None = None) -> NominatorContainer:
    """Instantiate container with optional overrides."""

    container = NominatorContainer()

    if not settings:
        return container

    nominator_settings = settings.get("nominator", {}) if isinstance(settings, dict) else {}
    if nominator_settings:
        container.config.override(nominator_settings)

    telephony_settings = settings.get("telephony") if isinstance(settings, dict) else None
    if telephony_settings:
        telephony_config = TelephonyConfig(
            carrier_subscriptions=dict(telephony_settings.get("carrier_subscriptions", {})),
            default_data_subscription=telephony_settings.get("default_data_subscription"),
            present_subscriptions=tuple(telephony_settings.get("present_subscriptions", ())),
        )
        container.telephony_config.override(providers.Object(telephony_config))

    return container
