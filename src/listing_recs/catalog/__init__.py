"""Catalog loading: raw records from JSON files to validated listings."""

import json
from pathlib import Path
from typing import Optional

from listing_recs.models.listing import Listing

from .parsers import normalize_listing, parse_catalog


def load_catalog(path: str | Path) -> list[Listing]:
    """Load listings from a JSON file holding a list of records or {"listings": [...]}."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("listings", [])
    if not isinstance(data, list):
        raise ValueError(f"Catalog {path} must contain a list of listings")
    return parse_catalog(data)


def find_listing(population: list[Listing], listing_id: str) -> Optional[Listing]:
    """First listing with the given id, or None."""
    return next((l for l in population if l.id == listing_id), None)


__all__ = ["find_listing", "load_catalog", "normalize_listing", "parse_catalog"]
