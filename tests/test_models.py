"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from listing_recs.models.listing import Listing, ListingDraft
from listing_recs.models.raw import RawListing


class TestListing:
    """Tests for Listing model."""

    def test_minimal_required_fields(self) -> None:
        """Listing requires only id; other fields default."""
        listing = Listing(id="l-1")
        assert listing.property_type == ""
        assert listing.base_price == 0.0
        assert listing.bedrooms == 0
        assert listing.amenities == []
        assert listing.latitude is None
        assert listing.featured is False
        assert listing.has_coordinates is False

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Listing(id="")

    @pytest.mark.parametrize(
        "field,value",
        [
            ("latitude", 90.5),
            ("latitude", -91),
            ("longitude", 181),
            ("base_price", -1),
            ("bedrooms", -2),
            ("average_rating", 5.5),
        ],
    )
    def test_out_of_range_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            Listing(id="l-1", **{field: value})

    @pytest.mark.parametrize("field", ["base_price", "average_rating", "latitude", "longitude"])
    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            Listing(id="a", **{field: value})

    def test_frozen(self) -> None:
        """Engine input is read-only."""
        listing = Listing(id="l-1", base_price=100)
        with pytest.raises(ValidationError):
            listing.base_price = 200

    def test_popularity(self) -> None:
        assert Listing(id="l-1", average_rating=4.5, total_reviews=10).popularity == 45.0

    def test_display_fields_pass_through(self) -> None:
        listing = Listing(id="l-1", title="Nhà gỗ", images=["a.jpg"], host_name="Lan")
        data = listing.model_dump(mode="json")
        assert data["title"] == "Nhà gỗ"
        assert data["images"] == ["a.jpg"]
        assert data["host_name"] == "Lan"


class TestListingDraft:
    """Tests for ListingDraft."""

    def test_all_optional(self) -> None:
        draft = ListingDraft()
        assert draft.bedrooms is None
        assert draft.base_price is None

    def test_rating_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ListingDraft(average_rating=6)

    def test_non_finite_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ListingDraft(base_price=float("inf"))


class TestRawListing:
    """Tests for RawListing."""

    def test_holds_arbitrary_data(self) -> None:
        raw = RawListing(data={"propertyType": "VILLA", "whatever": [1, 2]})
        assert raw.data["whatever"] == [1, 2]

    def test_canonical_fields_renames_aliases(self) -> None:
        raw = RawListing(data={"listingId": "l-1", "propertyType": "VILLA", "maxGuests": 6})
        fields = raw.canonical_fields()
        assert fields == {"id": "l-1", "property_type": "VILLA", "max_guests": 6}

    def test_canonical_fields_drops_unknown_keys(self) -> None:
        raw = RawListing(data={"id": "l-1", "status": "ACTIVE", "createdAt": "2024-01-01"})
        assert raw.canonical_fields() == {"id": "l-1"}

    def test_host_object_contributes_name(self) -> None:
        raw = RawListing(data={"id": "l-1", "host": {"name": "Lan", "id": "h-9"}})
        assert raw.canonical_fields()["host_name"] == "Lan"

    def test_listing_id(self) -> None:
        assert RawListing(data={"id": " l-1 "}).listing_id == "l-1"
        assert RawListing(data={"listingId": "l-2"}).listing_id == "l-2"
        assert RawListing(data={}).listing_id == ""
