"""JSON endpoints.

Endpoints:
    POST /api/tax/estimate                 - Income tax and NI estimate
    GET  /api/locations/resolve/{slugs}    - Resolve a slug trail to its hierarchy
    GET  /api/locations/paths              - Every location page path
    GET  /api/health                       - Health check
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from maco.config import get_settings
from maco.locations import (
    LocationHierarchy,
    generate_location_paths,
    load_locations,
    resolve_hierarchy,
)
from maco.tax import TAX_YEARS, TaxCalculation, TaxEstimateRequest, UnknownTaxYearError, calculate_tax

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@router.post("/tax/estimate", response_model=TaxCalculation)
def estimate_tax(
    body: TaxEstimateRequest,
    tax_year: Optional[str] = Query(default=None, description="e.g. '2025/26'"),
):
    year = tax_year or get_settings().default_tax_year
    try:
        return calculate_tax(body, year)
    except UnknownTaxYearError:
        logger.info("Unknown tax year requested: %s", year)
        raise HTTPException(
            status_code=400,
            detail=f"Unknown tax year '{year}'. Available: {sorted(TAX_YEARS)}",
        )


@router.get("/locations/resolve/{slugs:path}", response_model=LocationHierarchy)
def resolve_location(slugs: str):
    hierarchy = resolve_hierarchy(slugs.split("/"))
    if hierarchy.current is None:
        raise HTTPException(status_code=404, detail=f"Location '{slugs}' not found")
    return hierarchy


@router.get("/locations/paths")
def location_paths():
    paths = generate_location_paths()
    return {"count": len(paths), "paths": ["/".join(p) for p in paths]}


@router.get("/health")
def health():
    return {"status": "ok", "locations": len(load_locations())}
