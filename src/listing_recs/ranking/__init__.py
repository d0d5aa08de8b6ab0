"""Ranking facade: similar listings, personalized recommendations and price prediction."""

from .engine import RankingEngine
from .personalized import (
    get_personalized_recommendations,
    preference_score,
    rank_personalized,
    rank_popular,
)
from .pricing import PriceEstimate, estimate_price, find_comparables, predict_optimal_price
from .similar import ScoredListing, get_similar_listings, rank_similar

__all__ = [
    "PriceEstimate",
    "RankingEngine",
    "ScoredListing",
    "estimate_price",
    "find_comparables",
    "get_personalized_recommendations",
    "get_similar_listings",
    "predict_optimal_price",
    "preference_score",
    "rank_personalized",
    "rank_popular",
    "rank_similar",
]
