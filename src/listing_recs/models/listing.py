"""Catalog listing models consumed by the scoring and ranking engine."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Listing(BaseModel):
    """Read-only catalog item. Display fields are passed through untouched."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = Field(..., min_length=1, description="Unique listing identifier")

    property_type: str = Field(default="", description="e.g. 'VILLA', 'APARTMENT'")
    city: str = Field(default="", description="Primary region tag")
    state: Optional[str] = Field(default=None, description="Secondary region tag")

    base_price: float = Field(default=0.0, ge=0)
    bedrooms: int = Field(default=0, ge=0)
    max_guests: int = Field(default=0, ge=0)
    average_rating: float = Field(default=0.0, ge=0, le=5)
    total_reviews: int = Field(default=0, ge=0)

    amenities: list[str] = Field(default_factory=list)

    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    featured: bool = False

    title: str = ""
    images: list[str] = Field(default_factory=list)
    host_name: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def popularity(self) -> float:
        """Rating weighted by review volume."""
        return self.average_rating * self.total_reviews


class ListingDraft(BaseModel):
    """Partial listing description used for price prediction."""

    model_config = ConfigDict(allow_inf_nan=False)

    property_type: str = ""
    city: str = ""
    bedrooms: Optional[int] = Field(default=None, ge=0)
    max_guests: Optional[int] = Field(default=None, ge=0)
    average_rating: Optional[float] = Field(default=None, ge=0, le=5)
    base_price: Optional[float] = Field(
        default=None,
        ge=0,
        description="Caller-stated price, returned when no comparables exist",
    )
