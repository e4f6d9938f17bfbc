"""Load the UK geography dataset from CSV.

Expected columns (in any order)::

    type,name,slug,nation,region,county,lat,lng,population,postcodes_sample,nearby,
    service_focus,local_industries,economy_description

Only the first four are required.  ``postcodes_sample`` is space-separated;
``nearby``, ``service_focus`` and ``local_industries`` are comma-separated
inside a quoted cell.  Blank cells become ``None`` or an
empty list.  Rows that cannot be turned into a :class:`Location` are skipped
and reported in the log.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import pandas as pd
from pydantic import ValidationError

from maco.config import get_settings
from maco.locations.models import Location, LocationType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("type", "name", "slug", "nation")

_TYPES = {t.value for t in LocationType}


def _text(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def _split(value: str, sep: Optional[str]) -> list[str]:
    return [part.strip() for part in value.split(sep) if part.strip()]


def _to_float(value: str) -> Optional[float]:
    value = value.strip()
    return float(value) if value else None


def _to_int(value: str) -> Optional[int]:
    value = value.strip().replace(",", "")
    return int(float(value)) if value else None


def _row_to_location(row: dict[str, str]) -> Location:
    return Location(
        type=LocationType(row["type"].strip().lower()),
        name=row["name"].strip(),
        slug=row["slug"].strip(),
        nation=row["nation"].strip(),
        region=_text(row.get("region", "")),
        county=_text(row.get("county", "")),
        lat=_to_float(row.get("lat", "")),
        lng=_to_float(row.get("lng", "")),
        population=_to_int(row.get("population", "")),
        postcodes_sample=_split(row.get("postcodes_sample", ""), None),
        nearby=_split(row.get("nearby", ""), ","),
        service_focus=_split(row.get("service_focus", ""), ","),
        local_industries=_split(row.get("local_industries", ""), ","),
        economy_description=_text(row.get("economy_description", "")),
    )


def parse_locations_csv(path: Path) -> list[Location]:
    """Parse *path* into a list of :class:`Location` records.

    A missing or malformed file is logged and yields an empty list, so pages
    that depend on the dataset degrade to "not found" rather than erroring.
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except FileNotFoundError:
        logger.error("Locations CSV not found: %s", path)
        return []
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        logger.error("Error parsing locations CSV %s: %s", path, exc)
        return []

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        logger.error("Locations CSV %s is missing columns: %s", path, missing)
        return []

    locations: list[Location] = []
    skipped: list[str] = []

    for row in df.to_dict(orient="records"):
        if row["type"].strip().lower() not in _TYPES or not row["slug"].strip():
            skipped.append(row["name"] or row["slug"] or "<blank>")
            continue
        try:
            locations.append(_row_to_location(row))
        except (ValueError, ValidationError) as exc:
            logger.warning("Skipping location row %r: %s", row.get("slug"), exc)
            skipped.append(row["slug"])

    if skipped:
        logger.warning(
            "[locations] skipped %d invalid row(s): %s",
            len(skipped), sorted(skipped),
        )

    logger.info("Loaded %d locations from %s", len(locations), path)
    return locations


@lru_cache
def _load_cached(path: Path) -> tuple[Location, ...]:
    return tuple(parse_locations_csv(path))


def load_locations(path: Optional[Path] = None) -> list[Location]:
    """Return the dataset, parsed once per path and cached for the process."""
    return list(_load_cached(Path(path or get_settings().locations_csv)))


def clear_cache() -> None:
    """Forget previously loaded datasets (used by tests and after edits)."""
    _load_cached.cache_clear()
