"\"\"\"BSSID pinning filter.\"\"\""

from __future__ import annotations

from ..candidate import CandidatePair, NominationContext


class BssidPinFilter:
    """Reject observations from other access points than a pinned BSSID."""

    name = "bssid_pin"

    def accepts(self, pair: CandidatePair, context: NominationContext) -> bool:
        pinned = pair.configuration.pinned_bssid
        return pinned is None or pinned == pair.observation.bssid
