"""Listing similarity, recommendation and price suggestion engine."""

from listing_recs.models import EngineConfig, Listing, ListingDraft
from listing_recs.ranking import (
    RankingEngine,
    get_personalized_recommendations,
    get_similar_listings,
    predict_optimal_price,
)
from listing_recs.scoring import score_pair

__all__ = [
    "EngineConfig",
    "Listing",
    "ListingDraft",
    "RankingEngine",
    "get_personalized_recommendations",
    "get_similar_listings",
    "predict_optimal_price",
    "score_pair",
]
