"""Data models for catalog listings, preferences and engine configuration."""

from listing_recs.models.config import EngineConfig, PreferenceWeights, ScoringPolicy, ScoringWeights
from listing_recs.models.listing import Listing, ListingDraft
from listing_recs.models.profile import PreferenceProfile
from listing_recs.models.raw import RawListing

__all__ = [
    "EngineConfig",
    "Listing",
    "ListingDraft",
    "PreferenceProfile",
    "PreferenceWeights",
    "RawListing",
    "ScoringPolicy",
    "ScoringWeights",
]
