"""Shared fixtures: a small locations CSV and a client for the app."""
import pytest
from fastapi.testclient import TestClient

from maco.locations import parse_locations_csv


SAMPLE_CSV = """\
type,name,slug,nation,region,county,lat,lng,population,postcodes_sample,nearby,service_focus,local_industries
nation,England,england,England,,,52.3555,-1.1743,56536419,,"wales",bookkeeping,
nation,Wales,wales,Wales,,,52.1307,-3.7837,3107500,,,,
region,London,london,England,London,,51.5074,-0.1278,8866180,EC1 WC2,,"payroll,vat",
region,South East,south-east,England,South East,,51.2787,-0.5217,9294023,,,,
county,Kent,kent,England,South East,,51.2787,0.5217,1576069,ME14,,,
county,South Glamorgan,south-glamorgan,Wales,,,51.4816,-3.1791,484000,,,,
borough,Croydon,croydon,England,London,,51.3762,-0.0982,390719,CR0 CR2,"bromley,maidstone,nowhere","bookkeeping,personal-tax","retail,technology"
borough,Bromley,bromley,England,London,,51.4039,0.0198,330000,,,,
city,Maidstone,maidstone,England,South East,Kent,51.2704,0.5227,177800,ME14 ME15,,,
city,Cardiff,cardiff,Wales,,South Glamorgan,51.4816,-3.1791,362400,CF10,,,
city,Newport,newport,Wales,,,51.5842,-2.9977,159600,,,,
"""


@pytest.fixture
def sample_csv(tmp_path):
    """Write SAMPLE_CSV to a temp file and return its path."""
    path = tmp_path / "locations.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def locations(sample_csv):
    """Parsed SAMPLE_CSV: 11 locations across England and Wales."""
    return parse_locations_csv(sample_csv)


@pytest.fixture
def client():
    """TestClient for the full app, backed by the bundled dataset."""
    from main import app

    with TestClient(app) as c:
        yield c
