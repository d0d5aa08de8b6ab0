"""Raw listing representation before normalization."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from listing_recs.models.listing import Listing

logger = logging.getLogger(__name__)

# Storefront (camelCase) key -> Listing field
FIELD_ALIASES: dict[str, str] = {
    "listingId": "id",
    "propertyType": "property_type",
    "basePrice": "base_price",
    "maxGuests": "max_guests",
    "averageRating": "average_rating",
    "totalReviews": "total_reviews",
    "lat": "latitude",
    "lng": "longitude",
    "isFeatured": "featured",
    "hostName": "host_name",
}

_LISTING_FIELDS = frozenset(Listing.model_fields)


class RawListing(BaseModel):
    """
    Flexible raw catalog record as handed over by the caller.
    Keys may follow the storefront's camelCase naming or snake_case.
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def listing_id(self) -> str:
        """Identifier under either naming, stripped; empty string if absent."""
        value = self.data.get("id", self.data.get("listingId"))
        return str(value or "").strip()

    def canonical_fields(self) -> dict[str, Any]:
        """
        Rename aliased keys to Listing field names and drop unknown keys.
        A nested host object contributes its name as host_name.
        Values are returned as-is; coercion happens in the catalog parsers.
        """
        fields: dict[str, Any] = {}
        dropped: list[str] = []
        for key, value in self.data.items():
            name = FIELD_ALIASES.get(key, key)
            if name == "host" and isinstance(value, dict):
                fields.setdefault("host_name", value.get("name"))
            elif name in _LISTING_FIELDS:
                fields[name] = value
            else:
                dropped.append(key)
        if dropped:
            logger.debug("Dropped unknown listing fields: %s", ", ".join(sorted(dropped)))
        return fields
