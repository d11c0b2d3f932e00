"""Ephemeral and passpoint network filter."""

from __future__ import annotations

from ..candidate import CandidatePair, NominationContext


class EphemeralFilter:
    """Reject configurations that are not durable user-saved networks.

    Ephemeral and passpoint configurations live in the store without being
    persisted; other nominators propose them.
    """

    name = "ephemeral"

    def accepts(self, pair: CandidatePair, context: NominationContext) -> bool:
        configuration = pair.configuration
        return not (configuration.ephemeral or configuration.passpoint)
