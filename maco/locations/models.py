"""Domain models for UK geography.

Hierarchy:
    LocationType        -- nation, region, county, city or borough
    Location            -- one row of the geography dataset
    LocationHierarchy   -- nation → region → county → city resolved from a URL
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationType(str, Enum):
    """Geographic level.  Determines a location's depth in the hierarchy."""

    nation = "nation"
    region = "region"
    county = "county"
    city = "city"
    borough = "borough"

    @property
    def is_settlement(self) -> bool:
        """True for the leaf levels (cities and boroughs)."""
        return self in (LocationType.city, LocationType.borough)


class Location(BaseModel):
    """A single place from the UK locations dataset."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    slug: str
    type: LocationType
    nation: str = Field(description="Name of the ancestor nation, e.g. 'England'.")
    region: Optional[str] = Field(default=None, description="Name of the ancestor region, if any.")
    county: Optional[str] = Field(default=None, description="Name of the ancestor county, if any.")
    lat: Optional[float] = None
    lng: Optional[float] = None
    population: Optional[int] = None
    postcodes_sample: list[str] = Field(
        default_factory=list,
        description="Representative postcode districts, e.g. ['CR0', 'CR2'].",
    )
    nearby: list[str] = Field(
        default_factory=list,
        description="Slugs of nearby locations, used for internal linking.",
    )
    service_focus: list[str] = Field(
        default_factory=list,
        description="Service tags matched against service slugs and ids.",
    )
    local_industries: list[str] = Field(default_factory=list)
    economy_description: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None


class LocationHierarchy(BaseModel):
    """The levels matched for one URL slug sequence.  Unmatched levels are None."""

    model_config = ConfigDict(extra="ignore")

    nation: Optional[Location] = None
    region: Optional[Location] = None
    county: Optional[Location] = None
    city: Optional[Location] = None

    @property
    def current(self) -> Optional[Location]:
        """The deepest level found: city, then county, region, nation."""
        return self.city or self.county or self.region or self.nation

    @property
    def trail(self) -> list[Location]:
        """Matched levels from the nation downwards, for breadcrumbs."""
        return [
            level
            for level in (self.nation, self.region, self.county, self.city)
            if level is not None
        ]
