"""Price suggestion from comparable listings in the same type and city."""

import logging
import math
from typing import Optional

from pydantic import BaseModel, Field

from listing_recs.models.config import ScoringPolicy
from listing_recs.models.listing import Listing, ListingDraft

logger = logging.getLogger(__name__)


class PriceEstimate(BaseModel):
    """Predicted price plus a summary of the comparables it was derived from."""

    predicted_price: float = Field(..., description="Rounded prediction, or the fallback price unchanged")
    used_fallback: bool = Field(..., description="True when no comparables were found")
    comparable_count: int = 0
    average_price: Optional[float] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    price_per_bedroom: Optional[float] = None
    price_per_guest: Optional[float] = None


def round_to_step(value: float, step: int) -> int:
    """Round half up to the nearest multiple of step."""
    return int(math.floor(value / step + 0.5)) * step


def find_comparables(draft: ListingDraft, population: list[Listing]) -> list[Listing]:
    """Listings sharing the draft's exact property type and city."""
    return [
        l
        for l in population
        if l.property_type == draft.property_type and l.city == draft.city
    ]


def estimate_price(
    draft: ListingDraft,
    population: list[Listing],
    policy: Optional[ScoringPolicy] = None,
) -> PriceEstimate:
    """
    Blend mean price-per-bedroom and price-per-guest of comparables 50/50,
    apply a rating premium band of 0.8x..1.2x, round to the policy step.
    Without comparables the draft's own price (or the policy default) is returned unchanged.
    """
    p = policy or ScoringPolicy()
    comparables = find_comparables(draft, population)

    if not comparables:
        fallback = draft.base_price if draft.base_price else p.default_price
        logger.debug(
            "No comparables for %s/%s; using fallback price %s",
            draft.property_type,
            draft.city,
            fallback,
        )
        return PriceEstimate(predicted_price=fallback, used_fallback=True)

    count = len(comparables)
    prices = [l.base_price for l in comparables]
    per_bedroom = sum(l.base_price / (l.bedrooms or 1) for l in comparables) / count
    per_guest = sum(l.base_price / (l.max_guests or 1) for l in comparables) / count

    predicted = (draft.bedrooms or 1) * per_bedroom * 0.5 + (draft.max_guests or 2) * per_guest * 0.5
    if draft.average_rating:
        predicted *= 0.8 + (draft.average_rating / 5) * 0.4

    return PriceEstimate(
        predicted_price=float(round_to_step(predicted, p.price_rounding_step)),
        used_fallback=False,
        comparable_count=count,
        average_price=sum(prices) / count,
        min_price=min(prices),
        max_price=max(prices),
        price_per_bedroom=per_bedroom,
        price_per_guest=per_guest,
    )


def predict_optimal_price(
    draft: ListingDraft,
    population: list[Listing],
    policy: Optional[ScoringPolicy] = None,
) -> float:
    """Suggested nightly price for a draft listing."""
    return estimate_price(draft, population, policy).predicted_price
