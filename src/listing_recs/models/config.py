"""Engine configuration: scoring weights and policy constants."""

import math
from pathlib import Path

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field, model_validator


class ScoringWeights(BaseModel):
    """Weights of the eight pairwise sub-scores. Must sum to 1.0."""

    type: float = Field(default=0.25, ge=0)
    location: float = Field(default=0.20, ge=0)
    geo: float = Field(default=0.10, ge=0)
    price: float = Field(default=0.15, ge=0)
    capacity: float = Field(default=0.10, ge=0)
    rating: float = Field(default=0.10, ge=0)
    amenities: float = Field(default=0.05, ge=0)
    features: float = Field(default=0.05, ge=0)

    @model_validator(mode="after")
    def _check_total(self) -> "ScoringWeights":
        if not math.isclose(self.total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Scoring weights must sum to 1.0 (got {self.total:.6f})")
        return self

    @property
    def total(self) -> float:
        return math.fsum(self.model_dump().values())


class PreferenceWeights(BaseModel):
    """
    Maximum contribution of each profile-to-listing factor.
    Bedroom closeness loses `bedroom_step` per bedroom of difference.
    """

    type: float = Field(default=0.30, ge=0)
    city: float = Field(default=0.20, ge=0)
    price: float = Field(default=0.20, ge=0)
    bedrooms: float = Field(default=0.15, ge=0)
    bedroom_step: float = Field(default=0.03, ge=0)
    rating: float = Field(default=0.15, ge=0)


class ScoringPolicy(BaseModel):
    """Heuristic constants of the ranking and pricing formulas."""

    partial_location_score: float = Field(
        default=0.5,
        ge=0,
        le=1,
        description="Location score when only the state/province matches",
    )
    geo_cutoff_km: float = Field(default=100.0, gt=0, description="Geo score is 0 at or beyond this")
    earth_radius_km: float = Field(default=6371.0, gt=0)
    capacity_scale: float = Field(default=10.0, gt=0)
    rating_scale: float = Field(default=5.0, gt=0)
    bedroom_scale: float = Field(default=10.0, gt=0, description="Fixed upper bound for bedroom feature")

    price_rounding_step: int = Field(default=100_000, gt=0)
    default_price: float = Field(default=1_000_000, ge=0)

    similar_limit: int = Field(default=4, ge=0)
    personalized_limit: int = Field(default=8, ge=0)


class EngineConfig(BaseModel):
    """Full engine configuration; defaults reproduce the production heuristics."""

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    preferences: PreferenceWeights = Field(default_factory=PreferenceWeights)
    policy: ScoringPolicy = Field(default_factory=ScoringPolicy)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "EngineConfig":
        """Load config from YAML file. Supports nested (weights/preferences/policy) or flat policy keys."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        policy_fields = set(ScoringPolicy.model_fields)
        policy = dict(data.get("policy") or {})
        for key in policy_fields:
            if key in data and key not in policy:
                policy[key] = data[key]
        return cls.model_validate(
            {
                "weights": data.get("weights") or {},
                "preferences": data.get("preferences") or {},
                "policy": policy,
            }
        )
