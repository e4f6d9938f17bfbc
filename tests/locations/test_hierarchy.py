"""Tests for slug resolution, lookups and path generation."""
import logging

import pytest

from maco.locations import (
    FALLBACK_PATHS,
    LocationType,
    generate_location_paths,
    get_children,
    get_location_by_slug,
    get_locations_by_county,
    get_locations_by_nation,
    get_locations_by_region,
    get_locations_by_type,
    load_locations,
    location_path,
    location_url,
    resolve_hierarchy,
    slugify,
)


def _names(locations):
    return sorted(loc.name for loc in locations)


# ---------------------------------------------------------------------------
# slugify
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("England", "england"),
        ("South East", "south-east"),
        ("Yorkshire and the Humber", "yorkshire-and-the-humber"),
        ("  Kingston  upon Thames ", "kingston-upon-thames"),
    ],
)
def test_slugify(text, expected):
    """Lower-cases and replaces every whitespace run with one hyphen."""
    assert slugify(text) == expected


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class TestLookups:
    def test_by_slug(self, locations):
        assert get_location_by_slug("kent", locations).name == "Kent"
        assert get_location_by_slug("atlantis", locations) is None

    def test_by_type_accepts_enum_or_string(self, locations):
        assert _names(get_locations_by_type("region", locations)) == ["London", "South East"]
        assert _names(get_locations_by_type(LocationType.borough, locations)) == ["Bromley", "Croydon"]

    def test_by_nation_is_case_insensitive(self, locations):
        assert _names(get_locations_by_nation("wales", locations)) == [
            "Cardiff", "Newport", "South Glamorgan", "Wales",
        ]

    def test_by_region(self, locations):
        assert _names(get_locations_by_region("England", "London", locations)) == [
            "Bromley", "Croydon", "London",
        ]

    def test_by_county(self, locations):
        assert _names(get_locations_by_county("England", "kent", locations)) == ["Maidstone"]


class TestChildren:
    def test_nation_children_are_regions(self, locations):
        england = get_location_by_slug("england", locations)
        assert _names(get_children(england, locations)) == ["London", "South East"]

    def test_nation_without_regions(self, locations):
        """Wales: region-less counties and settlements sit directly under the nation."""
        wales = get_location_by_slug("wales", locations)
        assert _names(get_children(wales, locations)) == ["Newport", "South Glamorgan"]

    def test_region_children(self, locations):
        london = get_location_by_slug("london", locations)
        south_east = get_location_by_slug("south-east", locations)
        assert _names(get_children(london, locations)) == ["Bromley", "Croydon"]
        assert _names(get_children(south_east, locations)) == ["Kent"]

    def test_county_children(self, locations):
        kent = get_location_by_slug("kent", locations)
        assert _names(get_children(kent, locations)) == ["Maidstone"]

    def test_settlement_has_no_children(self, locations):
        assert get_children(get_location_by_slug("maidstone", locations), locations) == []


# ---------------------------------------------------------------------------
# resolve_hierarchy
# ---------------------------------------------------------------------------


class TestResolveHierarchy:
    def test_nation(self, locations):
        h = resolve_hierarchy(["england"], locations)
        assert h.nation.slug == "england"
        assert h.current.slug == "england"
        assert h.region is None

    def test_region(self, locations):
        h = resolve_hierarchy(["england", "london"], locations)
        assert h.region.slug == "london"
        assert h.current is h.region

    def test_county_within_region(self, locations):
        h = resolve_hierarchy(["england", "south-east", "kent"], locations)
        assert h.region.slug == "south-east"
        assert h.county.slug == "kent"
        assert h.city is None

    def test_city_in_county_and_region(self, locations):
        h = resolve_hierarchy(["england", "south-east", "kent", "maidstone"], locations)
        assert [loc.slug for loc in h.trail] == ["england", "south-east", "kent", "maidstone"]
        assert h.current.slug == "maidstone"

    def test_borough_directly_under_region(self, locations):
        """London boroughs have no county; the third segment falls back to a settlement."""
        h = resolve_hierarchy(["england", "london", "croydon"], locations)
        assert h.county is None
        assert h.city.slug == "croydon"

    def test_county_when_nation_has_no_region(self, locations):
        h = resolve_hierarchy(["wales", "south-glamorgan", "cardiff"], locations)
        assert h.region is None
        assert h.county.slug == "south-glamorgan"
        assert h.city.slug == "cardiff"

    def test_settlement_directly_under_nation(self, locations):
        h = resolve_hierarchy(["wales", "newport"], locations)
        assert h.city.slug == "newport"
        assert [loc.slug for loc in h.trail] == ["wales", "newport"]

    def test_unknown_nation(self, locations):
        h = resolve_hierarchy(["scotland"], locations)
        assert h.current is None
        assert h.trail == []

    def test_partial_match_keeps_deepest_found(self, locations):
        h = resolve_hierarchy(["england", "atlantis"], locations)
        assert h.current.slug == "england"

    def test_region_must_belong_to_nation(self, locations):
        h = resolve_hierarchy(["wales", "london"], locations)
        assert h.region is None
        assert h.current.slug == "wales"

    def test_settlement_must_belong_to_nation(self, locations):
        """A county slug from another nation does not lend its settlements."""
        h = resolve_hierarchy(["wales", "kent", "maidstone"], locations)
        assert h.county is None
        assert h.city is None
        assert h.current.slug == "wales"

    def test_settlement_must_belong_to_region(self, locations):
        h = resolve_hierarchy(["england", "london", "kent", "maidstone"], locations)
        assert h.region.slug == "london"
        assert h.county is None
        assert h.city is None
        assert h.current.slug == "london"

    def test_borough_under_wrong_region(self, locations):
        h = resolve_hierarchy(["england", "south-east", "croydon"], locations)
        assert h.city is None
        assert h.current.slug == "south-east"

    def test_empty_segments_ignored(self, locations):
        assert resolve_hierarchy(["england", "", "london"], locations).region.slug == "london"

    def test_extra_segments_ignored(self, locations):
        h = resolve_hierarchy(["england", "south-east", "kent", "maidstone", "extra"], locations)
        assert h.current.slug == "maidstone"

    def test_no_segments(self, locations):
        assert resolve_hierarchy([], locations).current is None


# ---------------------------------------------------------------------------
# Path generation
# ---------------------------------------------------------------------------


class TestLocationPaths:
    def test_paths(self, locations):
        paths = {loc.slug: location_path(loc) for loc in locations}
        assert paths["england"] == ["england"]
        assert paths["london"] == ["england", "london"]
        assert paths["kent"] == ["england", "south-east", "kent"]
        assert paths["south-glamorgan"] == ["wales", "south-glamorgan"]
        assert paths["croydon"] == ["england", "london", "croydon"]
        assert paths["maidstone"] == ["england", "south-east", "kent", "maidstone"]
        assert paths["cardiff"] == ["wales", "south-glamorgan", "cardiff"]
        assert paths["newport"] == ["wales", "newport"]

    def test_url(self, locations):
        croydon = get_location_by_slug("croydon", locations)
        assert location_url(croydon) == "/locations/england/london/croydon"

    def test_every_sample_path_round_trips(self, locations):
        for loc in locations:
            assert resolve_hierarchy(location_path(loc), locations).current == loc

    def test_every_bundled_path_round_trips(self):
        """Each generated path in the shipped dataset resolves to its own location."""
        data = load_locations()
        assert data
        for loc, path in zip(data, generate_location_paths(data)):
            h = resolve_hierarchy(path, data)
            assert h.current == loc, path
            assert h.nation.name == loc.nation, path
            assert len(h.trail) == len(path), path

    def test_fallback_when_dataset_empty(self, caplog):
        with caplog.at_level(logging.WARNING):
            paths = generate_location_paths([])
        assert paths == [list(p) for p in FALLBACK_PATHS]
        assert ["england", "london", "croydon"] in paths
        assert "fallback" in caplog.text
