"""Render every page of the site to static HTML.

Each URL is written to ``<output>/<path>/index.html`` so the tree can be
served by any static file host.  The contact form and tax estimator are
exported as their empty GET forms.

Usage examples:
    # Export to ./site
    python -m scripts.export_site

    # Export somewhere else, skipping location pages
    python -m scripts.export_site --output /tmp/maco --skip-locations
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from fastapi.testclient import TestClient

from data.blog import BLOG_POSTS
from data.services import SERVICES
from maco.config import get_settings
from maco.locations import generate_location_paths
from main import app

log = logging.getLogger("export")

STATIC_PAGES = (
    "/",
    "/about",
    "/services",
    "/locations",
    "/blog",
    "/testimonials",
    "/contact",
    "/tools/tax-estimator",
)


def site_urls(include_locations: bool = True) -> list[str]:
    """Every URL the site serves over GET, static pages first."""
    urls = list(STATIC_PAGES)
    urls += [f"/services/{s.slug}" for s in SERVICES]
    urls += [f"/blog/{p.slug}" for p in BLOG_POSTS]
    if include_locations:
        urls += ["/locations/" + "/".join(path) for path in generate_location_paths()]
    return urls


def output_file(output_dir: Path, url: str) -> Path:
    """``/services/vat`` → ``<output_dir>/services/vat/index.html``."""
    return output_dir.joinpath(*[part for part in url.split("/") if part], "index.html")


def export_site(output_dir: Path, include_locations: bool = True) -> dict[str, int]:
    """Render all pages into *output_dir*.

    Pages that do not return 200 are logged and skipped, and a ``404.html``
    is written at the root.

    Returns:
        Counts of ``written`` and ``failed`` pages.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = failed = 0

    with TestClient(app) as client:
        for url in site_urls(include_locations):
            response = client.get(url)
            if response.status_code != 200:
                log.warning("Skipping %s (HTTP %d)", url, response.status_code)
                failed += 1
                continue
            target = output_file(output_dir, url)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(response.text, encoding="utf-8")
            written += 1

        not_found = client.get("/__missing__")
        (output_dir / "404.html").write_text(not_found.text, encoding="utf-8")

    return {"written": written, "failed": failed}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--output", type=Path, default=Path("site"), help="Output directory (default: ./site)")
    p.add_argument("--skip-locations", action="store_true", help="Skip location landing pages")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    t0 = time.time()
    log.info("Exporting site to %s …", args.output)
    counts = export_site(args.output, include_locations=not args.skip_locations)
    log.info(
        "Wrote %d pages (%d skipped) in %.1fs",
        counts["written"], counts["failed"], time.time() - t0,
    )


if __name__ == "__main__":
    main()
