"""Application settings and the firm's static business identity.

Settings are read from the environment (or a ``.env`` file at the project
root) and exposed through :func:`get_settings`.  The business identity shown
in headers, footers and the contact page lives in :data:`SITE`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from data import LOCATIONS_CSV
from maco.tax import TAX_YEARS


class Settings(BaseSettings):
    """Deployment-specific settings.

    Attributes:
        site_url: Public origin used for absolute links.
        contact_email: Address shown on the contact page and in the footer.
        locations_csv: Path to the UK geography dataset.
        default_tax_year: Tax year used by the estimator when none is given.
        log_level: Root log level for the app and CLI entry points.
    """

    site_url: str = Field(default="https://macoaccountants.co.uk", validation_alias="SITE_URL")
    contact_email: str = Field(default="info@macoaccountants.co.uk", validation_alias="CONTACT_EMAIL")
    locations_csv: Path = Field(
        default=LOCATIONS_CSV,
        validation_alias="LOCATIONS_CSV",
    )
    default_tax_year: str = Field(default="2024/25", validation_alias="DEFAULT_TAX_YEAR")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("default_tax_year")
    @classmethod
    def known_tax_year(cls, v: str) -> str:
        """Reject a default year the calculator has no rates for."""
        if v not in TAX_YEARS:
            raise ValueError(f"unknown tax year '{v}', expected one of {sorted(TAX_YEARS)}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Uses ``lru_cache`` so the .env file is read at most once per process.
    """
    return Settings()


# ---------------------------------------------------------------------------
# Business identity
# ---------------------------------------------------------------------------


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str
    city: str
    postcode: str
    country: str


class SocialLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None


class SiteConfig(BaseModel):
    """Contact details and opening hours rendered on every page."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    phone: str
    whatsapp: Optional[str] = None
    consultation_url: Optional[str] = None
    address: Address
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    business_hours: dict[str, str] = Field(
        description="Day name (lower-case) to opening hours, e.g. 'monday': '9:00 AM - 6:00 PM'.",
    )


SITE = SiteConfig(
    name="MA & CO Accountants",
    description=(
        "Professional accountancy services in Croydon, UK. Expert bookkeeping, payroll, "
        "VAT, tax planning, and business advisory services for SMEs across the UK."
    ),
    phone="020 8158 8499",
    whatsapp="020 3890 1933",
    consultation_url="https://calendly.com/maandcoaccountants-info/15-minute-free-consultation",
    address=Address(
        street="Delamare Crescent",
        city="Croydon",
        postcode="CR0 2FL",
        country="United Kingdom",
    ),
    social_links=SocialLinks(
        linkedin="https://www.linkedin.com/company/ma-co-accountants/",
        twitter="https://x.com/majed80898093",
        facebook="https://www.facebook.com/profile.php?id=100087637215976",
    ),
    business_hours={
        "monday": "9:00 AM - 6:00 PM",
        "tuesday": "9:00 AM - 6:00 PM",
        "wednesday": "9:00 AM - 6:00 PM",
        "thursday": "9:00 AM - 6:00 PM",
        "friday": "9:00 AM - 5:00 PM",
        "saturday": "Closed",
        "sunday": "Closed",
    },
)

#: Primary navigation shown in the page header: (label, href).
NAVIGATION: tuple[tuple[str, str], ...] = (
    ("Home", "/"),
    ("Services", "/services"),
    ("Locations", "/locations"),
    ("Tax Estimator", "/tools/tax-estimator"),
    ("Blog", "/blog"),
    ("Testimonials", "/testimonials"),
    ("About", "/about"),
    ("Contact", "/contact"),
)
