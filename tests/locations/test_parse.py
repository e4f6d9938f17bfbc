"""Tests for loading the UK locations CSV."""
import logging

from data import LOCATIONS_CSV
from maco.locations import LocationType, clear_cache, load_locations, parse_locations_csv


HEADER = "type,name,slug,nation,region,county,lat,lng,population,postcodes_sample,nearby,service_focus\n"


def _write(tmp_path, body, header=HEADER):
    path = tmp_path / "locations.csv"
    path.write_text(header + body, encoding="utf-8")
    return path


class TestParseSample:
    def test_row_count(self, locations):
        """All 11 rows of the sample become locations."""
        assert len(locations) == 11

    def test_types_parsed(self, locations):
        types = {loc.slug: loc.type for loc in locations}
        assert types["england"] is LocationType.nation
        assert types["london"] is LocationType.region
        assert types["kent"] is LocationType.county
        assert types["croydon"] is LocationType.borough
        assert types["maidstone"] is LocationType.city

    def test_blank_cells_become_none(self, locations):
        """Blank region/county → None, not empty string."""
        wales = next(loc for loc in locations if loc.slug == "wales")
        assert wales.region is None
        assert wales.county is None
        assert wales.postcodes_sample == []
        assert wales.nearby == []

    def test_lists_and_numbers(self, locations):
        croydon = next(loc for loc in locations if loc.slug == "croydon")
        assert croydon.postcodes_sample == ["CR0", "CR2"]
        assert croydon.nearby == ["bromley", "maidstone", "nowhere"]
        assert croydon.service_focus == ["bookkeeping", "personal-tax"]
        assert croydon.local_industries == ["retail", "technology"]
        assert croydon.population == 390_719
        assert croydon.lat == 51.3762
        assert croydon.has_coordinates

    def test_optional_columns_may_be_absent(self, tmp_path):
        """Only type, name, slug and nation are required."""
        path = _write(tmp_path, "nation,England,england,England\n", header="type,name,slug,nation\n")
        [england] = parse_locations_csv(path)
        assert england.population is None
        assert not england.has_coordinates
        assert england.local_industries == []
        assert england.economy_description is None


class TestInvalidInput:
    def test_missing_file_returns_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert parse_locations_csv(tmp_path / "nope.csv") == []
        assert "not found" in caplog.text

    def test_empty_file_returns_empty(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert parse_locations_csv(path) == []

    def test_missing_required_column(self, tmp_path, caplog):
        path = _write(tmp_path, "England,england\n", header="name,slug\n")
        with caplog.at_level(logging.ERROR):
            assert parse_locations_csv(path) == []
        assert "missing columns" in caplog.text

    def test_invalid_rows_skipped(self, tmp_path, caplog):
        """Unknown type, blank slug and non-numeric latitude are each skipped."""
        body = (
            "nation,England,england,England,,,,,,,,\n"
            "village,Nowhere,nowhere,England,,,,,,,,\n"
            "city,Blank,,England,,,,,,,,\n"
            "city,Bad Lat,bad-lat,England,,,abc,0,,,,\n"
        )
        path = _write(tmp_path, body)
        with caplog.at_level(logging.WARNING):
            result = parse_locations_csv(path)
        assert [loc.slug for loc in result] == ["england"]
        assert "skipped 3 invalid row(s)" in caplog.text

    def test_population_with_thousands_separator(self, tmp_path):
        path = _write(tmp_path, 'nation,England,england,England,,,,,"56,536,419",,,\n')
        [england] = parse_locations_csv(path)
        assert england.population == 56_536_419


class TestLoadLocations:
    def test_cached_per_path(self, sample_csv):
        clear_cache()
        first = load_locations(sample_csv)
        sample_csv.write_text(HEADER, encoding="utf-8")
        assert load_locations(sample_csv) == first

        clear_cache()
        assert load_locations(sample_csv) == []

    def test_bundled_dataset_loads(self):
        """The shipped CSV parses without dropping rows."""
        data = load_locations(LOCATIONS_CSV)
        assert len(data) == 112
