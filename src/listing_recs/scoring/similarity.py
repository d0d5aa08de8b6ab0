"""Similarity primitives: geographic proximity, set overlap and vector alignment."""

import math
from typing import Optional, Sequence

from listing_recs.models.listing import Listing

from .normalize import PopulationBounds, normalize

EARTH_RADIUS_KM = 6371.0
GEO_CUTOFF_KM = 100.0
BEDROOM_SCALE = 10.0


def haversine_km(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Great-circle distance in km between two (lat, lng) points in decimal degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push a slightly past 1 for antipodal points
    a = min(1.0, a)
    return radius_km * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def geo_proximity(
    a: Listing,
    b: Listing,
    cutoff_km: float = GEO_CUTOFF_KM,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """
    Linear decay from 1.0 (same point) to 0.0 at cutoff_km.
    Listings without coordinates get 0.0.
    """
    if not (a.has_coordinates and b.has_coordinates):
        return 0.0
    distance = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude, radius_km)
    return max(0.0, 1.0 - distance / cutoff_km)


def jaccard(a: Sequence[str], b: Sequence[str]) -> float:
    """Jaccard index of two tag collections; 0.0 when both are empty."""
    set_a, set_b = set(a), set(b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def cosine(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity; 0.0 on dimension mismatch or zero magnitude."""
    if len(a) != len(b):
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    mag_a = math.sqrt(sum(x * x for x in a))
    mag_b = math.sqrt(sum(y * y for y in b))
    if mag_a == 0 or mag_b == 0:
        return 0.0
    return max(-1.0, min(1.0, dot / (mag_a * mag_b)))


def feature_vector(
    listing: Listing,
    bounds: PopulationBounds,
    bedroom_scale: Optional[float] = None,
) -> tuple[float, float, float, float, float]:
    """[price, guests, bedrooms, rating, featured], each in [0, 1]."""
    return (
        normalize(listing.base_price, bounds.min_price, bounds.max_price),
        normalize(listing.max_guests, bounds.min_guests, bounds.max_guests),
        normalize(listing.bedrooms, 0, bedroom_scale or BEDROOM_SCALE),
        normalize(listing.average_rating, bounds.min_rating, bounds.max_rating),
        1.0 if listing.featured else 0.0,
    )
