"\"\"\"Network-selection status filter.\"\"\""

from __future__ import annotations

from ..candidate import CandidatePair, NominationContext


class SelectionStatusFilter:
    """Reject networks whose network-selection status is disabled."""

    name = "selection_status"

    def accepts(self, pair: CandidatePair, context: NominationContext) -> bool:
        return pair.configuration.selection_enabled
