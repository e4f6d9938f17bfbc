"""Tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from maco.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_tax_year == "2024/25"
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_TAX_YEAR", "2025/26")
    monkeypatch.setenv("CONTACT_EMAIL", "hello@example.co.uk")
    settings = Settings(_env_file=None)
    assert settings.default_tax_year == "2025/26"
    assert settings.contact_email == "hello@example.co.uk"


@pytest.mark.parametrize("year", ["2019/20", "2025-26", ""])
def test_unknown_default_tax_year_rejected(monkeypatch, year):
    """A year without published rates fails at load, not on the first estimate."""
    monkeypatch.setenv("DEFAULT_TAX_YEAR", year)
    with pytest.raises(ValidationError, match="unknown tax year"):
        Settings(_env_file=None)
