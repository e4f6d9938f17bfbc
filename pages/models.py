"""View models handed to the templates.

Hierarchy:
    Breadcrumb          -- one link in a page's breadcrumb trail
    LocationPage        -- everything a location landing page renders
    LocationsIndex      -- nations, regions and major cities for /locations
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from maco.content.models import FAQ, CaseStudy, Service
from maco.locations.models import Location, LocationHierarchy


class Breadcrumb(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    href: str


class LocationPage(BaseModel):
    """A resolved location and the content generated for it."""

    model_config = ConfigDict(extra="ignore")

    location: Location = Field(description="Deepest level matched from the URL.")
    hierarchy: LocationHierarchy
    breadcrumbs: list[Breadcrumb]
    services: list[Service] = Field(description="Services matching the location's focus tags.")
    nearby: list[Location] = Field(default_factory=list)
    children: list[Location] = Field(default_factory=list)
    faqs: list[FAQ]
    case_study: CaseStudy


class LocationsIndex(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nations: list[Location]
    regions: list[Location]
    major_cities: list[Location] = Field(
        description="Cities and boroughs above the population threshold.",
    )
