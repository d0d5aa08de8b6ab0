"""Shared builders for listing-recs tests."""

from listing_recs.models.listing import Listing

DA_LAT = (11.9404, 108.4583)
HA_NOI = (21.0285, 105.8542)


def make_listing(listing_id: str, **kwargs) -> Listing:
    """Listing with sensible defaults; override any field via kwargs."""
    defaults = {
        "id": listing_id,
        "property_type": "VILLA",
        "city": "Đà Lạt",
        "state": "Lâm Đồng",
        "base_price": 1_000_000,
        "bedrooms": 2,
        "max_guests": 4,
        "average_rating": 4.5,
        "total_reviews": 10,
        "amenities": ["wifi", "kitchen"],
        "latitude": DA_LAT[0],
        "longitude": DA_LAT[1],
        "title": f"Listing {listing_id}",
    }
    defaults.update(kwargs)
    return Listing(**defaults)
