"\"\"\"Core nomination engine components.\"\"\""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import SavedConfiguration, ScanObservation

# NOTE: keep imports explicit for export clarity.
from .candidate import CandidatePair, NominationContext, SubscriptionResolution
from .filters import (
    DEFAULT_FILTER_NAMES,
    REQUIRED_FILTER_NAMES,
    AutojoinFilter,
    BssidPinFilter,
    EphemeralFilter,
    ExternalScoresFilter,
    SelectionStatusFilter,
    SimAvailabilityFilter,
    build_filters,
    validate_filter_chain,
)
from .nominator import SavedNetworkNominator


@runtime_checkable
class CandidateListener(Protocol):
    """Receiver for each eligible (observation, configuration) pair."""

    def on_connectable(
        self,
        observation: ScanObservation,
        configuration: SavedConfiguration,
    ) -> None:
        """Handle one connectable candidate."""


@runtime_checkable
class NominationFilter(Protocol):
    """Eligibility predicate evaluated for each candidate pair."""

    name: str

    def accepts(self, pair: CandidatePair, context: NominationContext) -> bool:
        """Return True when the pair stays eligible."""


class CandidateCollector:
    """Listener recording every nominated pair in call order."""

    def __init__(self) -> None:
        self.candidates: list[CandidatePair] = []

    def on_connectable(
        self,
        observation: ScanObservation,
        configuration: SavedConfiguration,
    ) -> None:
        self.candidates.append(
            CandidatePair(observation=observation, configuration=configuration)
        )

    def __len__(self) -> int:
        return len(self.candidates)


__all__ = [
    "CandidateCollector",
    "CandidateListener",
    "CandidatePair",
    "NominationContext",
    "NominationFilter",
    "SavedNetworkNominator",
    "SubscriptionResolution",
    "DEFAULT_FILTER_NAMES",
    "REQUIRED_FILTER_NAMES",
    "AutojoinFilter",
    "BssidPinFilter",
    "EphemeralFilter",
    "ExternalScoresFilter",
    "SelectionStatusFilter",
    "SimAvailabilityFilter",
    "build_filters",
    "validate_filter_chain",
]
