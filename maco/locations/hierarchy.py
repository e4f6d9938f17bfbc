"""Location lookups, URL slug resolution and static path generation.

A location page URL is the slug trail from the nation down to the place::

    /locations/england                                  nation
    /locations/england/london                           region
    /locations/england/south-east/kent                  county (with region)
    /locations/wales/south-glamorgan                    county (no region)
    /locations/england/south-east/kent/maidstone        city in county + region
    /locations/england/london/croydon                   borough in region only

Parent levels are referenced by *name* in the dataset, so the trail slugs for
ancestors are derived with :func:`slugify`.  Every path produced by
:func:`location_path` resolves back to the same location through
:func:`resolve_hierarchy`.

All functions take an optional ``locations`` sequence; when omitted the
cached dataset from :func:`maco.locations.parse.load_locations` is used.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional, Sequence

from maco.locations.models import Location, LocationHierarchy, LocationType
from maco.locations.parse import load_locations

logger = logging.getLogger(__name__)

#: Returned by :func:`generate_location_paths` when the dataset is unavailable.
FALLBACK_PATHS: tuple[tuple[str, ...], ...] = (
    ("england",),
    ("scotland",),
    ("wales",),
    ("northern-ireland",),
    ("england", "london"),
    ("england", "london", "croydon"),
)

_WHITESPACE = re.compile(r"\s+")


def slugify(text: str) -> str:
    """``"South East"`` → ``"south-east"``."""
    return _WHITESPACE.sub("-", text.strip().lower())


def _same(a: Optional[str], b: Optional[str]) -> bool:
    return a is not None and b is not None and a.lower() == b.lower()


def _slug_of(name: Optional[str]) -> Optional[str]:
    return slugify(name) if name else None


def _dataset(locations: Optional[Sequence[Location]]) -> Sequence[Location]:
    return load_locations() if locations is None else locations


def _find(locations: Iterable[Location], predicate: Callable[[Location], bool]) -> Optional[Location]:
    return next((loc for loc in locations if predicate(loc)), None)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_location_by_slug(slug: str, locations: Optional[Sequence[Location]] = None) -> Optional[Location]:
    return _find(_dataset(locations), lambda loc: loc.slug == slug)


def get_locations_by_type(
    location_type: LocationType | str,
    locations: Optional[Sequence[Location]] = None,
) -> list[Location]:
    wanted = LocationType(location_type)
    return [loc for loc in _dataset(locations) if loc.type is wanted]


def get_locations_by_nation(nation: str, locations: Optional[Sequence[Location]] = None) -> list[Location]:
    return [loc for loc in _dataset(locations) if _same(loc.nation, nation)]


def get_locations_by_region(
    nation: str,
    region: str,
    locations: Optional[Sequence[Location]] = None,
) -> list[Location]:
    return [
        loc for loc in _dataset(locations)
        if _same(loc.nation, nation) and _same(loc.region, region)
    ]


def get_locations_by_county(
    nation: str,
    county: str,
    locations: Optional[Sequence[Location]] = None,
) -> list[Location]:
    return [
        loc for loc in _dataset(locations)
        if _same(loc.nation, nation) and _same(loc.county, county)
    ]


def get_children(location: Location, locations: Optional[Sequence[Location]] = None) -> list[Location]:
    """Locations one level below *location* in the URL hierarchy."""
    data = _dataset(locations)

    if location.type is LocationType.nation:
        return [
            loc for loc in data
            if _same(loc.nation, location.name)
            and (
                loc.type is LocationType.region
                or (loc.type is LocationType.county and loc.region is None)
                or (loc.type.is_settlement and loc.region is None and loc.county is None)
            )
        ]
    if location.type is LocationType.region:
        return [
            loc for loc in data
            if _same(loc.nation, location.nation)
            and _same(loc.region, location.name)
            and (
                loc.type is LocationType.county
                or (loc.type.is_settlement and loc.county is None)
            )
        ]
    if location.type is LocationType.county:
        return [
            loc for loc in data
            if loc.type.is_settlement
            and _same(loc.nation, location.nation)
            and _same(loc.county, location.name)
        ]
    return []


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve_hierarchy(
    slugs: Sequence[str],
    locations: Optional[Sequence[Location]] = None,
) -> LocationHierarchy:
    """Match a URL slug sequence against the nation → region → county → city tree.

    The second segment is tried as a region of the nation first, then as a
    county, then as a settlement placed directly under the nation.  When a
    region matched, the third segment is a county of that region, or failing
    that a settlement of the region that has no county.  A settlement only
    matches under its own nation and region, so ``wales/kent/maidstone`` stops
    at Wales.  Segments beyond the fourth are ignored.  Never raises; unmatched levels are left as ``None``.
    """
    data = _dataset(locations)
    slugs = [s for s in slugs if s]
    result = LocationHierarchy()

    if len(slugs) >= 1:
        result.nation = _find(
            data, lambda loc: loc.type is LocationType.nation and loc.slug == slugs[0],
        )

    if len(slugs) >= 2:
        result.region = _find(data, lambda loc: (
            loc.type is LocationType.region
            and loc.slug == slugs[1]
            and slugify(loc.nation) == slugs[0]
        ))
        if result.region is None:
            result.county = _find(data, lambda loc: (
                loc.type is LocationType.county
                and loc.slug == slugs[1]
                and slugify(loc.nation) == slugs[0]
            ))
        if result.region is None and result.county is None and len(slugs) == 2:
            result.city = _find(data, lambda loc: (
                loc.type.is_settlement
                and loc.slug == slugs[1]
                and loc.region is None
                and loc.county is None
                and slugify(loc.nation) == slugs[0]
            ))

    if len(slugs) >= 3:
        if result.region is not None:
            result.county = _find(data, lambda loc: (
                loc.type is LocationType.county
                and loc.slug == slugs[2]
                and _slug_of(loc.region) == slugs[1]
                and slugify(loc.nation) == slugs[0]
            ))
            if result.county is None:
                result.city = _find(data, lambda loc: (
                    loc.type.is_settlement
                    and loc.slug == slugs[2]
                    and loc.county is None
                    and _slug_of(loc.region) == slugs[1]
                    and slugify(loc.nation) == slugs[0]
                ))
        else:
            result.city = _find(data, lambda loc: (
                loc.type.is_settlement
                and loc.slug == slugs[2]
                and _slug_of(loc.county) == slugs[1]
                and slugify(loc.nation) == slugs[0]
            ))

    if len(slugs) >= 4:
        result.city = _find(data, lambda loc: (
            loc.type.is_settlement
            and loc.slug == slugs[3]
            and _slug_of(loc.county) == slugs[2]
            and _slug_of(loc.region) == slugs[1]
            and slugify(loc.nation) == slugs[0]
        ))

    return result


# ---------------------------------------------------------------------------
# Path generation
# ---------------------------------------------------------------------------


def location_path(location: Location) -> list[str]:
    """Canonical slug trail for *location*, e.g. ``["england", "london", "croydon"]``."""
    nation = slugify(location.nation)
    region = _slug_of(location.region)
    county = _slug_of(location.county)

    if location.type is LocationType.nation:
        return [location.slug]
    if location.type is LocationType.region:
        return [nation, location.slug]
    if location.type is LocationType.county:
        return [nation, region, location.slug] if region else [nation, location.slug]

    trail = [nation]
    if region:
        trail.append(region)
    if county:
        trail.append(county)
    trail.append(location.slug)
    return trail


def location_url(location: Location) -> str:
    return "/locations/" + "/".join(location_path(location))


def generate_location_paths(locations: Optional[Sequence[Location]] = None) -> list[list[str]]:
    """Slug trails for every location page, in dataset order.

    Falls back to :data:`FALLBACK_PATHS` when the dataset could not be loaded.
    """
    data = _dataset(locations)
    if not data:
        logger.warning("Could not generate location paths; using fallback paths")
        return [list(path) for path in FALLBACK_PATHS]
    return [location_path(loc) for loc in data]
