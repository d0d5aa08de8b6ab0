"""Pytest fixtures for listing-recs tests."""

import json
from pathlib import Path

import pytest

from listing_recs.models.listing import Listing

from .helpers import DA_LAT, HA_NOI, make_listing


@pytest.fixture
def villa_x() -> Listing:
    return make_listing(
        "x",
        base_price=3_500_000,
        bedrooms=4,
        max_guests=8,
        average_rating=4.9,
        total_reviews=120,
        amenities=["wifi", "pool", "garden", "bbq"],
        featured=True,
    )


@pytest.fixture
def villa_y() -> Listing:
    return make_listing(
        "y",
        base_price=3_200_000,
        bedrooms=4,
        max_guests=7,
        average_rating=4.7,
        total_reviews=80,
        amenities=["wifi", "pool", "garden"],
        latitude=11.9465,
        longitude=108.4419,
    )


@pytest.fixture
def apartment_z() -> Listing:
    return make_listing(
        "z",
        property_type="APARTMENT",
        city="Hà Nội",
        state="Hà Nội",
        base_price=1_200_000,
        bedrooms=2,
        max_guests=4,
        average_rating=4.7,
        total_reviews=200,
        amenities=["wifi", "elevator"],
        latitude=HA_NOI[0],
        longitude=HA_NOI[1],
    )


@pytest.fixture
def population(villa_x: Listing, villa_y: Listing, apartment_z: Listing) -> list[Listing]:
    """Three-listing population: two Đà Lạt villas and a Hà Nội apartment."""
    return [villa_x, villa_y, apartment_z]


@pytest.fixture
def raw_listing_record() -> dict:
    """Raw storefront record using camelCase keys."""
    return {
        "id": "lst-1",
        "title": "Villa đồi thông",
        "propertyType": "VILLA",
        "city": "Đà Lạt",
        "state": "Lâm Đồng",
        "basePrice": "3,500,000",
        "bedrooms": 4,
        "maxGuests": "8",
        "averageRating": 4.9,
        "totalReviews": 120,
        "amenities": "wifi, pool, garden",
        "latitude": DA_LAT[0],
        "longitude": DA_LAT[1],
        "featured": True,
        "images": ["https://example.com/1.jpg"],
        "host": {"name": "Minh"},
        "status": "ACTIVE",
        "createdAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def catalog_file(tmp_path: Path, raw_listing_record: dict) -> Path:
    """Catalog JSON with the three-listing scenario in raw form."""
    records = [
        raw_listing_record | {"id": "x"},
        raw_listing_record
        | {
            "id": "y",
            "basePrice": 3_200_000,
            "maxGuests": 7,
            "averageRating": 4.7,
            "featured": False,
        },
        {
            "id": "z",
            "propertyType": "APARTMENT",
            "city": "Hà Nội",
            "basePrice": 1_200_000,
            "bedrooms": 2,
            "maxGuests": 4,
            "averageRating": 4.7,
            "totalReviews": 200,
            "latitude": HA_NOI[0],
            "longitude": HA_NOI[1],
        },
    ]
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return path
