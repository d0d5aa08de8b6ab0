"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="listing-recs",
        description="Similar listings, personalized recommendations and price suggestions",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Engine config YAML (weights, preferences, policy)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log ranking decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # similar
    similar_parser = subparsers.add_parser("similar", help="Listings most similar to one listing")
    similar_parser.add_argument("--catalog", type=Path, required=True, help="Catalog JSON file")
    similar_parser.add_argument("--listing", type=str, required=True, help="Reference listing id")
    similar_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Max results (default: 4, or policy.similar_limit)",
    )
    similar_parser.add_argument(
        "--explain",
        action="store_true",
        help="Include per-factor score breakdown",
    )
    similar_parser.add_argument("--output", type=Path, default=None, help="Write results to file")

    # recommend
    recommend_parser = subparsers.add_parser("recommend", help="Personalized recommendations")
    recommend_parser.add_argument("--catalog", type=Path, required=True, help="Catalog JSON file")
    recommend_parser.add_argument(
        "--history",
        nargs="*",
        default=[],
        metavar="LISTING_ID",
        help="Listing ids the user booked or viewed (empty: popular listings)",
    )
    recommend_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Max results (default: 8, or policy.personalized_limit)",
    )
    recommend_parser.add_argument(
        "--exclude-history",
        action="store_true",
        help="Do not recommend listings already in the history",
    )
    recommend_parser.add_argument("--output", type=Path, default=None, help="Write results to file")

    # predict-price
    price_parser = subparsers.add_parser("predict-price", help="Suggest a price from comparables")
    price_parser.add_argument("--catalog", type=Path, required=True, help="Catalog JSON file")
    price_parser.add_argument("--type", dest="property_type", type=str, required=True, help="Property type")
    price_parser.add_argument("--city", type=str, required=True, help="City")
    price_parser.add_argument("--bedrooms", type=int, default=None)
    price_parser.add_argument("--guests", dest="max_guests", type=int, default=None)
    price_parser.add_argument("--rating", dest="average_rating", type=float, default=None)
    price_parser.add_argument(
        "--base-price",
        type=float,
        default=None,
        help="Current price, returned unchanged when no comparables exist",
    )
    price_parser.add_argument("--output", type=Path, default=None, help="Write result to file")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "similar":
        _run_similar(args)
    elif args.command == "recommend":
        _run_recommend(args)
    elif args.command == "predict-price":
        _run_predict_price(args)
    else:
        parser.print_help()


def _load_config(args: argparse.Namespace):
    import yaml

    from listing_recs.models.config import EngineConfig

    if args.config is None:
        return EngineConfig()
    try:
        return EngineConfig.from_yaml(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"Invalid config {args.config}: {e}")


def _write(data, output: Optional[Path], summary: str) -> None:
    """Dump JSON to file (with a one-line summary) or stdout."""
    text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    if output:
        output.write_text(text, encoding="utf-8")
        print(f"{summary} (wrote to {output})")
    else:
        print(text)


def _run_similar(args: argparse.Namespace) -> None:
    """Run similar command."""
    from listing_recs.pipeline import run_similar

    config = _load_config(args)
    try:
        results = run_similar(
            args.catalog,
            args.listing,
            config=config,
            limit=args.limit,
            explain=args.explain,
        )
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(1)
    _write(results, args.output, f"Found {len(results)} similar listings")


def _run_recommend(args: argparse.Namespace) -> None:
    """Run recommend command."""
    from listing_recs.pipeline import run_recommend

    config = _load_config(args)
    try:
        results = run_recommend(
            args.catalog,
            args.history,
            config=config,
            limit=args.limit,
            exclude_history=args.exclude_history,
        )
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(1)
    _write(results, args.output, f"Recommended {len(results)} listings")


def _run_predict_price(args: argparse.Namespace) -> None:
    """Run predict-price command."""
    from listing_recs.models.listing import ListingDraft
    from listing_recs.pipeline import run_predict_price

    config = _load_config(args)
    try:
        draft = ListingDraft(
            property_type=args.property_type,
            city=args.city,
            bedrooms=args.bedrooms,
            max_guests=args.max_guests,
            average_rating=args.average_rating,
            base_price=args.base_price,
        )
    except ValidationError as e:
        raise SystemExit(f"Invalid listing description: {e}")
    try:
        result = run_predict_price(args.catalog, draft, config=config)
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(1)
    _write(result, args.output, f"Suggested price {result['predicted_price']:,.0f}")


if __name__ == "__main__":
    main()
