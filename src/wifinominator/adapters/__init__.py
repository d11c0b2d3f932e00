"\"\"\"External collaborator contracts and reference implementations.\"\"\""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import SavedConfiguration, ScanObservation
from .config_store import InMemoryConfigurationStore
from .telephony import INVALID_SUBSCRIPTION_ID, StaticCarrierResolver, TelephonyConfig


@runtime_checkable
class ConfigurationStore(Protocol):
    """Saved network store contract.

    Implementations map a scan observation to the saved configurations whose
    network identity matches it. Lookups must not mutate configurations.
    """

    def lookup(self, observation: ScanObservation) -> list[SavedConfiguration]:
        """Return zero or more configurations matching the observation."""


@runtime_checkable
class CarrierIdentityResolver(Protocol):
    """SIM and carrier identity contract."""

    def best_subscription_for(self, configuration: SavedConfiguration) -> int | None:
        """Return the subscription id best matching the configuration, if any."""

    def is_sim_present(self, subscription_id: int) -> bool:
        """Return True when the subscription's SIM is inserted and ready."""


__all__ = [
    "CarrierIdentityResolver",
    "ConfigurationStore",
    "INVALID_SUBSCRIPTION_ID",
    "InMemoryConfigurationStore",
    "StaticCarrierResolver",
    "TelephonyConfig",
]
