"""Ranking engine bound to one configuration."""

from typing import Optional

from listing_recs.models.config import EngineConfig
from listing_recs.models.listing import Listing, ListingDraft

from .personalized import get_personalized_recommendations
from .pricing import PriceEstimate, estimate_price
from .similar import ScoredListing, rank_similar


class RankingEngine:
    """
    Applies the configured weights and policy to ranking calls.
    Holds no state beyond its config; safe to share across threads.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def rank_similar(
        self,
        reference: Listing,
        population: list[Listing],
        limit: Optional[int] = None,
    ) -> list[ScoredListing]:
        """Scored nearest neighbors of reference, with per-factor breakdowns."""
        return rank_similar(
            reference,
            population,
            self.config.policy.similar_limit if limit is None else limit,
            weights=self.config.weights,
            policy=self.config.policy,
        )

    def similar(
        self,
        reference: Listing,
        population: list[Listing],
        limit: Optional[int] = None,
    ) -> list[Listing]:
        """Listings most similar to reference, most similar first."""
        return [s.listing for s in self.rank_similar(reference, population, limit)]

    def recommend(
        self,
        history: list[Listing],
        population: list[Listing],
        limit: Optional[int] = None,
        *,
        exclude_history: bool = False,
    ) -> list[Listing]:
        """Personalized listings for a history; popularity ranking when history is empty."""
        return get_personalized_recommendations(
            history,
            population,
            self.config.policy.personalized_limit if limit is None else limit,
            weights=self.config.preferences,
            exclude_history=exclude_history,
        )

    def estimate_price(self, draft: ListingDraft, population: list[Listing]) -> PriceEstimate:
        return estimate_price(draft, population, self.config.policy)

    def predict_price(self, draft: ListingDraft, population: list[Listing]) -> float:
        return self.estimate_price(draft, population).predicted_price
