"""
Command-line interface for the application.

This module provides the main entry point for the CLI. Each invocation builds
one ``CatalogCache`` and passes it to the command handler.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from recreation_catalog import __version__
from recreation_catalog.cache import CatalogCache
from recreation_catalog.config import get_settings
from recreation_catalog.datasources.ridb import fetch_all_campsites
from recreation_catalog.errors import CatalogError
from recreation_catalog.flows.build import build_site
from recreation_catalog.log import configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterable

    from recreation_catalog.schemas import Campsite


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="recreation-catalog",
        description="Cached access to recreation.gov (RIDB) facilities and campsites",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    facility_parser = subparsers.add_parser("facility", help="Show a facility")
    facility_parser.add_argument("facility_id", help="RIDB facility ID")
    facility_parser.add_argument(
        "--refresh", action="store_true", help="Fetch again even if cached"
    )
    facility_parser.add_argument("--json", action="store_true", help="Print JSON")

    campsites_parser = subparsers.add_parser("campsites", help="List a facility's campsites")
    campsites_parser.add_argument("facility_id", help="RIDB facility ID")
    campsites_parser.add_argument(
        "--query", type=str, default=None, help="Only list campsites matching this text"
    )
    campsites_parser.add_argument("--json", action="store_true", help="Print JSON")

    campsite_parser = subparsers.add_parser("campsite", help="Show a single campsite")
    campsite_parser.add_argument("campsite_id", help="RIDB campsite ID")
    campsite_parser.add_argument("--json", action="store_true", help="Print JSON")

    build_parser = subparsers.add_parser("build", help="Build static pages for facilities")
    build_parser.add_argument("facility_ids", nargs="+", help="RIDB facility IDs")
    build_parser.add_argument(
        "--site-dir",
        type=Path,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )

    return parser


def _print_campsites(campsites: Iterable[Campsite]) -> None:
    for site in sorted(campsites, key=lambda c: (c.name, c.campsite_id)):
        reservable = "reservable" if site.reservable else "first-come"
        print(
            f"{site.campsite_id:>8}  {site.name:<12} {site.type_of_use:<10} "
            f"{reservable:<11} {site.url}"
        )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"RIDB: {settings.ridb_base_url}")
    print(f"API key set: {'yes' if settings.ridb_api_key else 'no'}")
    return 0


def cmd_facility(args: argparse.Namespace, cache: CatalogCache) -> int:
    """Handle the 'facility' command."""
    facility = cache.get_facility(args.facility_id, refresh=args.refresh)
    if facility is None:
        print(f"Facility {args.facility_id} not found.", file=sys.stderr)
        return 1

    if args.json:
        print(facility.model_dump_json(indent=2))
        return 0

    print(f"{facility.name} ({facility.facility_id})")
    if facility.phone:
        print(f"Phone: {facility.phone}")
    if facility.email:
        print(f"Email: {facility.email}")
    if facility.stay_limit:
        print(f"Stay limit: {facility.stay_limit}")
    print(f"Reservable: {'yes' if facility.reservable else 'no'}")
    print(f"Campsites: {facility.campsites.size}")
    return 0


def cmd_campsites(args: argparse.Namespace, cache: CatalogCache) -> int:
    """Handle the 'campsites' command.

    With ``--query`` the filtered list is fetched directly and not cached,
    since it is not the facility's complete collection.
    """
    if args.query:
        campsites = fetch_all_campsites(
            cache.catalog,
            args.facility_id,
            args.query,
            page_size=cache.page_size,
            max_pages=cache.max_pages,
            display_base_url=cache.display_base_url,
        )
    else:
        campsites = cache.get_all_campsites(args.facility_id)
        if campsites is None:
            print(f"Facility {args.facility_id} not found.", file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps([c.model_dump(mode="json") for c in campsites], indent=2))
        return 0

    if campsites.size == 0:
        print("No campsites.")
        return 0
    _print_campsites(campsites)
    return 0


def cmd_campsite(args: argparse.Namespace, cache: CatalogCache) -> int:
    """Handle the 'campsite' command."""
    campsite = cache.get_campsite(args.campsite_id)
    if campsite is None:
        print(f"Campsite {args.campsite_id} not found.", file=sys.stderr)
        return 1

    if args.json:
        print(campsite.model_dump_json(indent=2))
        return 0

    print(f"{campsite.name} ({campsite.campsite_id})")
    print(f"Type of use: {campsite.type_of_use}")
    print(f"Reservable: {'yes' if campsite.reservable else 'no'}")
    if campsite.permitted_equipment:
        print(f"Equipment: {', '.join(campsite.equipment_names)}")
    for attr in campsite.attributes:
        print(f"  {attr.name}: {attr.value}")
    print(campsite.url)
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: render facility pages to the site dir."""
    result = build_site(args.facility_ids, site_dir=args.site_dir)
    print(f"Built {result['pages']} pages in {result['output']}")
    if result["missing"]:
        print(f"Not found: {', '.join(result['missing'])}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(settings.log_level, debug=args.debug or settings.debug)

    cache_commands = {
        "facility": cmd_facility,
        "campsites": cmd_campsites,
        "campsite": cmd_campsite,
    }

    try:
        if args.command == "info":
            return cmd_info(args)
        if args.command == "build":
            return cmd_build(args)
        handler = cache_commands.get(args.command)
        if handler is None:
            parser.print_help()
            return 1
        return handler(args, CatalogCache.from_settings(settings))
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
