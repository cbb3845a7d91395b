"""Command-line interface for seo-search-box."""

import argparse
import json
import sys

from seo_search_box import __version__, classify, get_suggested_type, route_search
from seo_search_box.classification.engine import PROFILES, ClassifierConfig
from seo_search_box.exceptions import SeoSearchBoxError


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="seo-search-box",
        description="Detect whether search input is a keyword, URL, phone, address or business",
    )
    parser.add_argument("query", help="Search box input to classify")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--profile",
        default="full",
        help=f"Detector cascade profile: {', '.join(PROFILES)} (default: full)",
    )
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Only print the live-typing type hint (or 'none')",
    )
    parser.add_argument(
        "--route",
        action="store_true",
        help="Include the report route and cache policy",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"seo-search-box {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        config = ClassifierConfig.for_profile(args.profile)
    except SeoSearchBoxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.suggest:
        print(get_suggested_type(args.query, config=config) or "none")
        return 0

    result = classify(args.query, config=config)
    route = route_search(result) if args.route else None

    if args.json:
        payload = result.model_dump(exclude_none=True)
        if route is not None:
            payload["route"] = route.model_dump()
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_formatted(result, route)

    return 0


def _print_formatted(result, route) -> None:
    """Print result in human-readable format."""
    print()
    print("  seo-search-box")
    print()

    meta = result.metadata
    fields = [
        ("Type", result.type),
        ("Value", result.value),
        ("Normalized", result.normalized),
        ("Confidence", f"{result.confidence:.2f}"),
        ("Detector", result.detector),
        ("Domain", meta.domain),
        ("Protocol", meta.protocol),
        ("Path", meta.path),
        ("Phone", meta.phone_formatted),
        ("Country Code", meta.country_code),
        ("Lat/Lng", "yes" if meta.is_lat_lng else None),
    ]
    if route is not None:
        fields.extend(
            [
                ("Report", route.report),
                ("Cache Key", route.cache_key),
                ("Cache TTL", f"{route.ttl_seconds}s"),
            ]
        )

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<14} {display}")

    print()


if __name__ == "__main__":
    sys.exit(main())
