"""Min/max feature normalization over a candidate population."""

from dataclasses import dataclass

from listing_recs.models.listing import Listing


def normalize(value: float, minimum: float, maximum: float) -> float:
    """
    Map value onto [0, 1] using observed bounds.
    Degenerate bounds (min == max) give the midpoint 0.5; out-of-range values are clamped.
    """
    if maximum == minimum:
        return 0.5
    scaled = (value - minimum) / (maximum - minimum)
    return max(0.0, min(1.0, scaled))


@dataclass(frozen=True)
class PopulationBounds:
    """Observed min/max of the normalized attributes across a population."""

    min_price: float = 0.0
    max_price: float = 0.0
    min_guests: float = 0.0
    max_guests: float = 0.0
    min_rating: float = 0.0
    max_rating: float = 0.0

    @classmethod
    def from_listings(cls, population: list[Listing]) -> "PopulationBounds":
        """Compute bounds; an empty population yields degenerate (0, 0) bounds."""
        if not population:
            return cls()
        prices = [l.base_price for l in population]
        guests = [l.max_guests for l in population]
        ratings = [l.average_rating for l in population]
        return cls(
            min_price=min(prices),
            max_price=max(prices),
            min_guests=min(guests),
            max_guests=max(guests),
            min_rating=min(ratings),
            max_rating=max(ratings),
        )
