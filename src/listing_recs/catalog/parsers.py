"""Adapter from raw catalog records to validated Listing models."""

import math
from typing import Any, Optional

from pydantic import ValidationError

from listing_recs.models.listing import Listing
from listing_recs.models.raw import RawListing

from .constants import COORD_FIELDS, FLOAT_FIELDS, INT_FIELDS, LIST_SEPARATOR


def parse_number(value: Any) -> Optional[float]:
    """
    Parse numeric field; None/blank -> None. Accepts '1,200,000' style strings.
    Non-finite values (inf, nan) are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        text = str(value).strip().replace(",", "").replace("_", "")
        if not text:
            return None
        try:
            num = float(text)
        except ValueError:
            raise ValueError(f"Not a number: {value!r}") from None
    if not math.isfinite(num):
        raise ValueError(f"Not a finite number: {value!r}")
    return num


def parse_count(value: Any) -> int:
    """Whole-number field; None/blank -> 0. Fractional counts are rejected, not truncated."""
    num = parse_number(value)
    if num is None:
        return 0
    if not num.is_integer():
        raise ValueError(f"Not an integer: {value!r}")
    return int(num)


def parse_tags(value: Any) -> list[str]:
    """Amenity/image list from list or comma-separated string; blanks dropped, order kept."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(LIST_SEPARATOR)
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        raise ValueError(f"Expected a list or comma-separated string, got {value!r}")
    return [str(v).strip() for v in items if v is not None and str(v).strip()]


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "y")
    return bool(value)


def normalize_listing(raw: RawListing) -> Listing:
    """
    Map a raw record to Listing.
    Missing numerics become 0, missing coordinates stay None.
    Raises ValueError naming the record when the shape is invalid.
    """
    fields = raw.canonical_fields()
    listing_id = raw.listing_id
    try:
        for name in INT_FIELDS:
            fields[name] = parse_count(fields.get(name))
        for name in FLOAT_FIELDS:
            num = parse_number(fields.get(name))
            fields[name] = num if num is not None else 0.0
        for name in COORD_FIELDS:
            fields[name] = parse_number(fields.get(name))
        fields["amenities"] = parse_tags(fields.get("amenities"))
        fields["images"] = parse_tags(fields.get("images"))
        fields["featured"] = parse_bool(fields.get("featured"))
        for name in ("property_type", "city", "title"):
            fields[name] = str(fields.get(name) or "").strip()
        state = str(fields.get("state") or "").strip()
        fields["state"] = state or None
        fields["id"] = listing_id
        return Listing.model_validate(fields)
    except (ValidationError, ValueError) as e:
        raise ValueError(f"Invalid listing {listing_id or '<missing id>'}: {e}") from e


def parse_catalog(records: list[dict[str, Any]]) -> list[Listing]:
    """Normalize a list of raw records, preserving order."""
    return [normalize_listing(RawListing(data=r)) for r in records]
