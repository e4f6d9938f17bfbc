"""Static site content and the UK locations dataset."""

from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent

LOCATIONS_CSV = DATA_DIR / "uk-locations.csv"
