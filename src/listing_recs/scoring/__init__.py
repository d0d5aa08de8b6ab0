"""Listing similarity scoring: normalization, primitives and the pairwise scorer."""

from .normalize import PopulationBounds, normalize
from .pairwise import PairwiseBreakdown, compute_breakdown, score_pair
from .similarity import cosine, feature_vector, geo_proximity, haversine_km, jaccard

__all__ = [
    "PairwiseBreakdown",
    "PopulationBounds",
    "compute_breakdown",
    "cosine",
    "feature_vector",
    "geo_proximity",
    "haversine_km",
    "jaccard",
    "normalize",
    "score_pair",
]
