"\"\"\"Saved network candidate nomination.\"\"\""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Iterator

import structlog

from ..schemas import SavedConfiguration, ScanObservation
from .candidate import CandidatePair, NominationContext
from .filters import build_filters

if TYPE_CHECKING:
    from ..adapters import CarrierIdentityResolver, ConfigurationStore
    from . import CandidateListener


class SavedNetworkNominator:
    """Nominate saved networks seen in a scan as connection candidates.

    Every (observation, configuration) pair returned by the configuration
    store runs through the filter chain in declared order, stopping at the
    first rejection. Pairs passing every filter are reported once each. The
    nominator keeps no state between passes and never modifies a
    configuration.
    """

    name = "saved_network"

    def __init__(
        self,
        store: "ConfigurationStore",
        resolver: "CarrierIdentityResolver",
        *,
        filters: Iterable[Any] | None = None,
    ) -> None:
        self._store = store
        self._filters = list(filters) if filters is not None else build_filters(resolver)
        self._logger = structlog.get_logger(__name__)

    @property
    def filter_names(self) -> list[str]:
        return [getattr(item, "name", type(item).__name__) for item in self._filters]

    def nominate(
        self,
        observations: Iterable[ScanObservation],
        listener: "CandidateListener",
        *,
        fresh_scan: bool = True,
        untrusted_allowed: bool = False,
        current_network_id: int | None = None,
        current_bssid: str | None = None,
    ) -> None:
        context = NominationContext(
            fresh_scan=fresh_scan,
            untrusted_allowed=untrusted_allowed,
            current_network_id=current_network_id,
            current_bssid=current_bssid,
        )
        nominated = 0
        for pair in self.iter_candidates(observations, context):
            listener.on_connectable(pair.observation, pair.configuration)
            nominated += 1
        self._logger.info(
            "nomination.pass_complete",
            nominator=self.name,
            nominated=nominated,
            fresh_scan=fresh_scan,
        )

    def iter_candidates(
        self,
        observations: Iterable[ScanObservation],
        context: NominationContext | None = None,
    ) -> Iterator[CandidatePair]:
        """Yield eligible pairs lazily, in observation then store order."""
        context = context or NominationContext()
        for observation in observations:
            seen: set[int] = set()
            for configuration in self._lookup(observation):
                if configuration.network_id in seen:
                    continue
                seen.add(configuration.network_id)
                pair = CandidatePair(observation=observation, configuration=configuration)
                if self._passes(pair, context):
                    self._logger.debug(
                        "nomination.candidate",
                        network=configuration.describe(),
                        bssid=observation.bssid,
                        level=observation.level,
                    )
                    yield pair

    def _lookup(self, observation: ScanObservation) -> list[SavedConfiguration]:
        try:
            return list(self._store.lookup(observation))
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(
                "store.lookup_failed",
                ssid=observation.ssid,
                bssid=observation.bssid,
                error=str(exc),
            )
            return []

    def _passes(self, pair: CandidatePair, context: NominationContext) -> bool:
        for candidate_filter in self._filters:
            name = getattr(candidate_filter, "name", type(candidate_filter).__name__)
            try:
                accepted = candidate_filter.accepts(pair, context)
            except Exception as exc:  # noqa: BLE001
                self._logger.warning(
                    "nomination.filter_failed",
                    filter=name,
                    candidate=pair.describe(),
                    error=str(exc),
                )
                return False
            if not accepted:
                self._logger.debug(
                    "nomination.skipped",
                    filter=name,
                    candidate=pair.describe(),
                )
                return False
        return True
