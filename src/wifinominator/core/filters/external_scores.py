"""External scoring opt-out filter."""

from __future__ import annotations

from ..candidate import CandidatePair, NominationContext


class ExternalScoresFilter:
    """Reject networks that are scored by an external network scorer."""

    name = "external_scores"

    def accepts(self, pair: CandidatePair, context: NominationContext) -> bool:
        return not pair.configuration.use_external_scores
