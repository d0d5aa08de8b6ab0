"""Preference profile derived from a user's listing history."""

from pydantic import BaseModel, Field

from listing_recs.models.listing import Listing


class PreferenceProfile(BaseModel):
    """Aggregate preferences used for content-based ranking."""

    avg_price: float = 0.0
    avg_bedrooms: float = 0.0
    preferred_types: list[str] = Field(default_factory=list, description="Distinct, first-seen order")
    preferred_cities: list[str] = Field(default_factory=list, description="Distinct, first-seen order")

    @classmethod
    def from_history(cls, history: list[Listing]) -> "PreferenceProfile":
        """Build profile from visited/booked listings. Empty history gives an empty profile."""
        if not history:
            return cls()
        count = len(history)
        return cls(
            avg_price=sum(l.base_price for l in history) / count,
            avg_bedrooms=sum(l.bedrooms for l in history) / count,
            preferred_types=list(dict.fromkeys(l.property_type for l in history)),
            preferred_cities=list(dict.fromkeys(l.city for l in history)),
        )
