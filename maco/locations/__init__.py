"""UK geography dataset: parsing, lookups and URL hierarchy resolution."""

from maco.locations.hierarchy import (
    FALLBACK_PATHS,
    generate_location_paths,
    get_children,
    get_location_by_slug,
    get_locations_by_county,
    get_locations_by_nation,
    get_locations_by_region,
    get_locations_by_type,
    location_path,
    location_url,
    resolve_hierarchy,
    slugify,
)
from maco.locations.models import Location, LocationHierarchy, LocationType
from maco.locations.parse import clear_cache, load_locations, parse_locations_csv

__all__ = [
    "FALLBACK_PATHS",
    "Location",
    "LocationHierarchy",
    "LocationType",
    "clear_cache",
    "generate_location_paths",
    "get_children",
    "get_location_by_slug",
    "get_locations_by_county",
    "get_locations_by_nation",
    "get_locations_by_region",
    "get_locations_by_type",
    "load_locations",
    "location_path",
    "location_url",
    "parse_locations_csv",
    "resolve_hierarchy",
    "slugify",
]
