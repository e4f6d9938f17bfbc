"""Page builders: turn URL slugs and the datasets into template context.

Usage::

    from pages.builder import build_location_page

    page = build_location_page(["england", "london", "croydon"])
    if page is None:
        ...  # 404
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from maco.content.catalogue import relevant_services
from maco.content.models import FAQ, CaseStudy, Service
from maco.locations import (
    Location,
    LocationType,
    get_children,
    get_location_by_slug,
    get_locations_by_type,
    load_locations,
    location_url,
    resolve_hierarchy,
)
from pages.models import Breadcrumb, LocationPage, LocationsIndex

logger = logging.getLogger(__name__)

NEARBY_LIMIT = 5
MAJOR_CITY_POPULATION = 200_000
MAJOR_CITY_LIMIT = 12


def build_location_page(
    slugs: Sequence[str],
    locations: Optional[Sequence[Location]] = None,
) -> Optional[LocationPage]:
    """Build the landing page for a ``/locations/...`` URL.

    Args:
        slugs:      URL segments after ``/locations/``.
        locations:  Dataset to resolve against.  Defaults to the cached CSV.

    Returns:
        The page for the deepest level matched, or ``None`` when any segment
        did not match a level of the hierarchy.
    """
    data = load_locations() if locations is None else locations
    hierarchy = resolve_hierarchy(slugs, data)
    location = hierarchy.current
    if location is None or len(hierarchy.trail) != len([s for s in slugs if s]):
        logger.info("No location matched /locations/%s", "/".join(slugs))
        return None

    return LocationPage(
        location=location,
        hierarchy=hierarchy,
        breadcrumbs=location_breadcrumbs(hierarchy.trail),
        services=relevant_services(location),
        nearby=nearby_locations(location, data),
        children=get_children(location, data),
        faqs=local_faqs(location),
        case_study=local_case_study(location),
    )


def build_locations_index(locations: Optional[Sequence[Location]] = None) -> LocationsIndex:
    data = load_locations() if locations is None else locations
    settlements = [loc for loc in data if loc.type.is_settlement]
    major = [loc for loc in settlements if (loc.population or 0) > MAJOR_CITY_POPULATION]
    return LocationsIndex(
        nations=get_locations_by_type(LocationType.nation, data),
        regions=get_locations_by_type(LocationType.region, data),
        major_cities=major[:MAJOR_CITY_LIMIT],
    )


def location_breadcrumbs(trail: Sequence[Location]) -> list[Breadcrumb]:
    crumbs = [Breadcrumb(label="Home", href="/"), Breadcrumb(label="Locations", href="/locations")]
    crumbs.extend(Breadcrumb(label=loc.name, href=location_url(loc)) for loc in trail)
    return crumbs


def service_breadcrumbs(service: Service) -> list[Breadcrumb]:
    return [
        Breadcrumb(label="Home", href="/"),
        Breadcrumb(label="Services", href="/services"),
        Breadcrumb(label=service.title, href=f"/services/{service.slug}"),
    ]


def nearby_locations(
    location: Location,
    locations: Sequence[Location],
    limit: int = NEARBY_LIMIT,
) -> list[Location]:
    """Resolve *location*'s ``nearby`` slugs, skipping any not in the dataset."""
    found = [get_location_by_slug(slug, locations) for slug in location.nearby]
    return [loc for loc in found if loc is not None][:limit]


# ---------------------------------------------------------------------------
# Generated copy
# ---------------------------------------------------------------------------


def local_faqs(location: Location) -> list[FAQ]:
    name = location.name
    industries = ", ".join(location.local_industries) or "business"
    return [
        FAQ(
            question=f"Do you provide accounting services in {name}?",
            answer=(
                f"Yes, we provide comprehensive accounting services to businesses in {name} "
                "and surrounding areas. Our services include bookkeeping, payroll, VAT returns, "
                "and tax planning, all delivered remotely or with local visits as needed."
            ),
        ),
        FAQ(
            question=f"How quickly can you start helping my {name} business?",
            answer=(
                "We can typically start working with new clients within 48 hours. For "
                f"businesses in {name}, we offer a free initial consultation to understand your "
                "needs and can begin setup immediately after agreement."
            ),
        ),
        FAQ(
            question=f"Do you understand the local business environment in {name}?",
            answer=(
                f"Absolutely. We work with many businesses across {name} and understand the "
                f"local {industries} sectors. Our expertise helps businesses navigate "
                "industry-specific challenges and opportunities."
            ),
        ),
        FAQ(
            question=f"What makes your service different for {name} businesses?",
            answer=(
                "We combine local knowledge with modern technology, offering cloud-based "
                f"solutions that work seamlessly for {name} businesses. Our team understands "
                "the unique challenges facing businesses in the area and provides tailored "
                "solutions."
            ),
        ),
    ]


def local_case_study(location: Location) -> CaseStudy:
    industry = location.local_industries[0] if location.local_industries else "local"
    return CaseStudy(
        title=f"{location.name} Business Success",
        description=(
            f"A growing {industry} business in {location.name} needed professional "
            "accounting support to manage their expansion."
        ),
        result=(
            "Implemented comprehensive bookkeeping and VAT management, resulting in 30% time "
            "savings and improved cash flow visibility, enabling successful business growth "
            f"in the {location.name} market."
        ),
    )
