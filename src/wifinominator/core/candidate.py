"""Value types shared by the nominator and its filters."""

from __future__ import annotations

from dataclasses import dataclass

from ..schemas import SavedConfiguration, ScanObservation


@dataclass(frozen=True, slots=True)
class CandidatePair:
    """An observation paired with one saved configuration it matched."""

    observation: ScanObservation
    configuration: SavedConfiguration

    def describe(self) -> str:
        return f"{self.configuration.describe()}@{self.observation.bssid}"


@dataclass(frozen=True, slots=True)
class NominationContext:
    """Per-call flags passed through to every filter."""

    fresh_scan: bool = True
    untrusted_allowed: bool = False
    current_network_id: int | None = None
    current_bssid: str | None = None


@dataclass(frozen=True, slots=True)
class SubscriptionResolution:
    """Subscription resolved for a SIM based configuration."""

    subscription_id: int | None
    sim_present: bool

    @property
    def available(self) -> bool:
        return self.subscription_id is not None and self.sim_present
