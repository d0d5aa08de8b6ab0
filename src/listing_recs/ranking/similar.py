"""Nearest-neighbor retrieval for a single reference listing."""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from listing_recs.models.config import ScoringPolicy, ScoringWeights
from listing_recs.models.listing import Listing
from listing_recs.scoring import PairwiseBreakdown, PopulationBounds, compute_breakdown

logger = logging.getLogger(__name__)

DEFAULT_SIMILAR_LIMIT = 4


class ScoredListing(BaseModel):
    """A listing paired with its relevance score for one ranking call."""

    listing: Listing
    score: float = Field(..., ge=0, le=1)
    breakdown: Optional[PairwiseBreakdown] = Field(
        default=None,
        description="Per-factor scores (similar-listing ranking only)",
    )


def top_n(scored: list[ScoredListing], limit: int) -> list[ScoredListing]:
    """
    Stable descending sort by score, then slice.
    Ties keep population order, so results are reproducible.
    """
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return ranked[: max(0, limit)]


def rank_similar(
    reference: Listing,
    population: list[Listing],
    limit: int = DEFAULT_SIMILAR_LIMIT,
    *,
    weights: Optional[ScoringWeights] = None,
    policy: Optional[ScoringPolicy] = None,
) -> list[ScoredListing]:
    """
    Score every candidate except the reference itself and return the top `limit`.
    Normalization bounds are taken from the full population, reference included.
    """
    candidates = [l for l in population if l.id != reference.id]
    if not candidates:
        return []

    bounds = PopulationBounds.from_listings(population)
    scored: list[ScoredListing] = []
    for candidate in candidates:
        breakdown = compute_breakdown(reference, candidate, bounds, weights, policy)
        scored.append(ScoredListing(listing=candidate, score=breakdown.total, breakdown=breakdown))

    ranked = top_n(scored, limit)
    logger.debug(
        "Ranked %d candidates for %s; returning %d",
        len(candidates),
        reference.id,
        len(ranked),
    )
    return ranked


def get_similar_listings(
    reference: Listing,
    population: list[Listing],
    limit: int = DEFAULT_SIMILAR_LIMIT,
    *,
    weights: Optional[ScoringWeights] = None,
    policy: Optional[ScoringPolicy] = None,
) -> list[Listing]:
    """Top `limit` listings most similar to reference, most similar first."""
    return [
        s.listing
        for s in rank_similar(reference, population, limit, weights=weights, policy=policy)
    ]
