"""Pipeline orchestration: load catalog → rank → JSON-ready results."""

from pathlib import Path
from typing import Optional

from listing_recs.catalog import find_listing, load_catalog
from listing_recs.models.config import EngineConfig
from listing_recs.models.listing import ListingDraft
from listing_recs.ranking import RankingEngine


def run_similar(
    catalog_path: Path,
    listing_id: str,
    *,
    config: Optional[EngineConfig] = None,
    limit: Optional[int] = None,
    explain: bool = False,
) -> list[dict]:
    """
    Rank listings similar to listing_id within the catalog.
    Returns dicts with listing and score; breakdown included when explain=True.
    """
    population = load_catalog(catalog_path)
    reference = find_listing(population, listing_id)
    if reference is None:
        raise ValueError(f"Listing not found in catalog: {listing_id}")

    engine = RankingEngine(config)
    ranked = engine.rank_similar(reference, population, limit)
    exclude = None if explain else {"breakdown"}
    return [s.model_dump(mode="json", exclude=exclude) for s in ranked]


def run_recommend(
    catalog_path: Path,
    history_ids: list[str],
    *,
    config: Optional[EngineConfig] = None,
    limit: Optional[int] = None,
    exclude_history: bool = False,
) -> list[dict]:
    """Personalized recommendations for listing ids the user interacted with."""
    population = load_catalog(catalog_path)
    history = []
    for listing_id in history_ids:
        listing = find_listing(population, listing_id)
        if listing is None:
            raise ValueError(f"History listing not found in catalog: {listing_id}")
        history.append(listing)

    engine = RankingEngine(config)
    results = engine.recommend(history, population, limit, exclude_history=exclude_history)
    return [l.model_dump(mode="json") for l in results]


def run_predict_price(
    catalog_path: Path,
    draft: ListingDraft,
    *,
    config: Optional[EngineConfig] = None,
) -> dict:
    """Price estimate for a draft listing against the catalog."""
    population = load_catalog(catalog_path)
    engine = RankingEngine(config)
    return engine.estimate_price(draft, population).model_dump(mode="json")
