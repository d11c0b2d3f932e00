"""User auto-join preference filter."""

from __future__ import annotations

from ..candidate import CandidatePair, NominationContext


class AutojoinFilter:
    """Reject networks the user has excluded from automatic connection."""

    name = "autojoin"

    def accepts(self, pair: CandidatePair, context: NominationContext) -> bool:
        return pair.configuration.allow_autojoin
