"""Content-based personalized ranking from a user's listing history."""

import logging
from typing import Optional

from listing_recs.models.config import PreferenceWeights
from listing_recs.models.listing import Listing
from listing_recs.models.profile import PreferenceProfile

from .similar import ScoredListing, top_n

logger = logging.getLogger(__name__)

DEFAULT_PERSONALIZED_LIMIT = 8


def rank_popular(population: list[Listing], limit: int = DEFAULT_PERSONALIZED_LIMIT) -> list[Listing]:
    """Cold-start ranking: rating x review count, descending, population order on ties."""
    ranked = sorted(population, key=lambda l: l.popularity, reverse=True)
    return ranked[: max(0, limit)]


def preference_score(
    listing: Listing,
    profile: PreferenceProfile,
    weights: Optional[PreferenceWeights] = None,
) -> float:
    """
    Profile-to-listing match. Distinct from the pairwise listing scorer:
    type and city are membership tests against everything the user has seen,
    price and bedrooms compare against the history means.
    """
    w = weights or PreferenceWeights()
    score = 0.0

    if listing.property_type in profile.preferred_types:
        score += w.type
    if listing.city in profile.preferred_cities:
        score += w.city

    if profile.avg_price > 0:
        price_diff = abs(listing.base_price - profile.avg_price)
        score += max(0.0, w.price - (price_diff / profile.avg_price) * w.price)

    bedroom_diff = abs(listing.bedrooms - profile.avg_bedrooms)
    score += max(0.0, w.bedrooms - bedroom_diff * w.bedroom_step)

    score += (listing.average_rating / 5) * w.rating
    return max(0.0, min(1.0, score))


def rank_personalized(
    history: list[Listing],
    population: list[Listing],
    limit: int = DEFAULT_PERSONALIZED_LIMIT,
    *,
    weights: Optional[PreferenceWeights] = None,
    exclude_history: bool = False,
) -> list[ScoredListing]:
    """Score population against the history profile. Requires a non-empty history."""
    profile = PreferenceProfile.from_history(history)
    seen = {l.id for l in history} if exclude_history else set()
    scored = [
        ScoredListing(listing=l, score=preference_score(l, profile, weights))
        for l in population
        if l.id not in seen
    ]
    return top_n(scored, limit)


def get_personalized_recommendations(
    history: list[Listing],
    population: list[Listing],
    limit: int = DEFAULT_PERSONALIZED_LIMIT,
    *,
    weights: Optional[PreferenceWeights] = None,
    exclude_history: bool = False,
) -> list[Listing]:
    """
    Recommend listings for a user.
    Empty history falls back to popularity (rank_popular); otherwise content-based.
    """
    if not history:
        logger.debug("Empty history: popularity fallback over %d listings", len(population))
        return rank_popular(population, limit)
    return [
        s.listing
        for s in rank_personalized(
            history,
            population,
            limit,
            weights=weights,
            exclude_history=exclude_history,
        )
    ]
