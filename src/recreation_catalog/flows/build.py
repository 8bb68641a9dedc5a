"""
Prefect flow for building a static site of facility pages.

One ``CatalogCache`` is created per flow run and handed to every task, so a
facility requested twice is fetched once. For each facility the site gets a
summary page and a campsite list; ``index.html`` links them all.

Run locally:
    python -m recreation_catalog.flows.build 232831 232447

Run with Prefect dashboard:
    prefect server start &
    python -m recreation_catalog.flows.build 232831
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NONE

from recreation_catalog.cache import CatalogCache
from recreation_catalog.config import get_settings
from recreation_catalog.renderers import render_page
from recreation_catalog.renderers.campsites import build_campsite_list_html
from recreation_catalog.renderers.facility import build_facility_html, build_facility_index_html
from recreation_catalog.schemas import Facility  # noqa: TC001 (task signatures are inspected at runtime)


def create_cache() -> CatalogCache:
    """Cache for one flow run, backed by RIDB as configured."""
    return CatalogCache.from_settings(get_settings())


# =============================================================================
# Tasks
# =============================================================================


# The cache is shared mutable state; keep Prefect from hashing or persisting it.
@task(name="load-facility", cache_policy=NONE)
def load_facility(cache: CatalogCache, facility_id: str, refresh: bool = False) -> Facility | None:
    """Resolve a facility (and its campsites) through the cache."""
    return cache.get_facility(facility_id, refresh=refresh)


@task(name="render-facility", cache_policy=NONE)
def render_facility(facility: Facility, updated: str) -> dict[str, str]:
    """Render the summary and campsite pages for one facility.

    Returns a mapping of site-relative path to page HTML.
    """
    fid = facility.facility_id
    summary = build_facility_html(facility, campsites_href=f"{fid}/campsites.html")
    campsites = build_campsite_list_html(facility.campsites)
    return {
        f"facility/{fid}.html": render_page(facility.name, summary, updated),
        f"facility/{fid}/campsites.html": render_page(
            f"{facility.name}: campsites", campsites, updated
        ),
    }


@task(name="write-site", cache_policy=NONE)
def write_site(pages: dict[str, str], site_dir: Path) -> list[Path]:
    """Write rendered pages under ``site_dir``."""
    written: list[Path] = []
    for rel, html in pages.items():
        output_path = site_dir / rel
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w") as f:
            f.write(html)
        written.append(output_path)
    return written


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-site", log_prints=True)
def build_site(
    facility_ids: list[str],
    site_dir: Path | None = None,
    refresh: bool = False,
) -> dict[str, Any]:
    """
    Build static pages for the given facilities.

    Facilities the catalog does not know are skipped. A catalog failure
    fails the flow run.
    """
    site_dir = site_dir or get_settings().site_dir
    cache = create_cache()
    updated = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M")

    pages: dict[str, str] = {}
    facilities: list[Facility] = []
    missing: list[str] = []
    for facility_id in facility_ids:
        print(f"Loading facility {facility_id}...")
        facility = load_facility(cache, facility_id, refresh=refresh)
        if facility is None:
            print(f"Warning: facility {facility_id} not found. Skipping.")
            missing.append(facility_id)
            continue
        facilities.append(facility)
        pages.update(render_facility(facility, updated))

    pages["index.html"] = render_page(
        "Facilities", build_facility_index_html(facilities), updated
    )

    print("Writing site...")
    written = write_site(pages, site_dir)

    print(f"Site built: {site_dir} ({len(facilities)} facilities)")
    return {
        "facilities": len(facilities),
        "campsites": cache.campsites.size,
        "missing": missing,
        "pages": len(written),
        "output": str(site_dir),
    }


if __name__ == "__main__":
    result = build_site(sys.argv[1:])
    print(f"Flow complete: {result}")
