"""Tests for the static site export CLI."""
from pathlib import Path

from scripts.export_site import STATIC_PAGES, export_site, main, output_file, site_urls


class TestSiteUrls:
    def test_static_pages_first(self):
        urls = site_urls(include_locations=False)
        assert tuple(urls[: len(STATIC_PAGES)]) == STATIC_PAGES
        assert "/services/inheritance-tax-estate-planning" in urls
        assert "/blog/making-tax-digital-smes-2024" in urls
        assert len(urls) == len(STATIC_PAGES) + 16 + 6

    def test_location_urls(self):
        urls = site_urls()
        assert "/locations/england/london/croydon" in urls
        assert "/locations/northern-ireland/armagh/armagh-city" in urls

    def test_output_file(self):
        out = Path("/tmp/site")
        assert output_file(out, "/") == out / "index.html"
        assert output_file(out, "/services/vat") == out / "services" / "vat" / "index.html"


def test_export_without_locations(tmp_path):
    counts = export_site(tmp_path, include_locations=False)
    assert counts == {"written": 30, "failed": 0}
    assert (tmp_path / "index.html").exists()
    assert "VAT Services" in (tmp_path / "services" / "vat" / "index.html").read_text(encoding="utf-8")
    assert "Page not found" in (tmp_path / "404.html").read_text(encoding="utf-8")


def test_every_location_page_exports(tmp_path):
    """Each generated location path renders, so nothing is skipped."""
    counts = export_site(tmp_path)
    assert counts == {"written": 30 + 112, "failed": 0}
    assert (tmp_path / "locations" / "wales" / "south-glamorgan" / "cardiff" / "index.html").exists()


def test_cli(tmp_path):
    main(["--output", str(tmp_path / "out"), "--skip-locations"])
    assert (tmp_path / "out" / "about" / "index.html").exists()
