"""Pairwise listing similarity: eight weighted sub-scores combined into one score."""

from typing import Optional

from pydantic import BaseModel

from listing_recs.models.config import ScoringPolicy, ScoringWeights
from listing_recs.models.listing import Listing

from .normalize import PopulationBounds
from .similarity import cosine, feature_vector, geo_proximity, jaccard


class PairwiseBreakdown(BaseModel):
    """Sub-scores (each in [0, 1]) and their weighted total."""

    type: float
    location: float
    geo: float
    price: float
    capacity: float
    rating: float
    amenities: float
    features: float
    total: float


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def location_match(a: Listing, b: Listing, partial_score: float = 0.5) -> float:
    """1.0 for the same city, partial_score for the same state/province, else 0.0."""
    if a.city and a.city == b.city:
        return 1.0
    if a.state and a.state == b.state:
        return partial_score
    return 0.0


def price_closeness(price_a: float, price_b: float) -> float:
    """Relative price difference against the pair's mean price; 0.0 when both are free."""
    avg = (price_a + price_b) / 2
    if avg <= 0:
        return 0.0
    return max(0.0, 1.0 - abs(price_a - price_b) / avg)


def capacity_closeness(a: Listing, b: Listing, scale: float = 10.0) -> float:
    diff = abs(a.max_guests - b.max_guests) + abs(a.bedrooms - b.bedrooms)
    return max(0.0, 1.0 - diff / scale)


def rating_closeness(rating_a: float, rating_b: float, scale: float = 5.0) -> float:
    return max(0.0, 1.0 - abs(rating_a - rating_b) / scale)


def compute_breakdown(
    a: Listing,
    b: Listing,
    bounds: PopulationBounds,
    weights: Optional[ScoringWeights] = None,
    policy: Optional[ScoringPolicy] = None,
) -> PairwiseBreakdown:
    """
    Score a pair against precomputed population bounds.
    Every sub-score is symmetric in (a, b), so the total is too.
    """
    w = weights or ScoringWeights()
    p = policy or ScoringPolicy()

    subscores = {
        "type": 1.0 if a.property_type == b.property_type else 0.0,
        "location": location_match(a, b, p.partial_location_score),
        "geo": geo_proximity(a, b, p.geo_cutoff_km, p.earth_radius_km),
        "price": price_closeness(a.base_price, b.base_price),
        "capacity": capacity_closeness(a, b, p.capacity_scale),
        "rating": rating_closeness(a.average_rating, b.average_rating, p.rating_scale),
        "amenities": jaccard(a.amenities, b.amenities),
        "features": _clamp01(
            cosine(
                feature_vector(a, bounds, p.bedroom_scale),
                feature_vector(b, bounds, p.bedroom_scale),
            )
        ),
    }
    total = sum(getattr(w, name) * value for name, value in subscores.items())
    return PairwiseBreakdown(**subscores, total=_clamp01(total))


def score_pair(
    a: Listing,
    b: Listing,
    population: list[Listing],
    weights: Optional[ScoringWeights] = None,
    policy: Optional[ScoringPolicy] = None,
) -> float:
    """Similarity of two listings in [0, 1]; bounds come from the given population."""
    bounds = PopulationBounds.from_listings(population)
    return compute_breakdown(a, b, bounds, weights, policy).total
