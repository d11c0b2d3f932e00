"""SIM availability filter for SIM based EAP networks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...schemas import SavedConfiguration
from ..candidate import CandidatePair, NominationContext, SubscriptionResolution

if TYPE_CHECKING:
    from ...adapters import CarrierIdentityResolver


class SimAvailabilityFilter:
    """Reject SIM based networks whose subscription SIM is not present.

    Configurations that do not authenticate with SIM, AKA or AKA' pass
    through without consulting the resolver.
    """

    name = "sim_availability"

    def __init__(self, resolver: "CarrierIdentityResolver") -> None:
        self._resolver = resolver

    def resolve(self, configuration: SavedConfiguration) -> SubscriptionResolution:
        subscription_id = self._resolver.best_subscription_for(configuration)
        if subscription_id is None:
            return SubscriptionResolution(subscription_id=None, sim_present=False)
        return SubscriptionResolution(
            subscription_id=subscription_id,
            sim_present=self._resolver.is_sim_present(subscription_id),
        )

    def accepts(self, pair: CandidatePair, context: NominationContext) -> bool:
        if not pair.configuration.requires_sim:
            return True
        return self.resolve(pair.configuration).available
