"""Hand-authored site content: services, blog posts and testimonials.

All content is static and immutable at runtime; instances are frozen.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceCategory(str, Enum):
    compliance = "compliance"
    management = "management"
    tax = "tax"
    specialist = "specialist"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[ServiceCategory, str] = {
    ServiceCategory.compliance: "Compliance & Core Accounting",
    ServiceCategory.management: "Management & Advisory",
    ServiceCategory.tax: "Tax Strategy",
    ServiceCategory.specialist: "Specialist Services",
}


class FAQ(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


class CaseStudy(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    result: str


class Service(BaseModel):
    """One entry in the service catalogue."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    title: str
    description: str
    meta_title: str
    meta_description: str
    category: ServiceCategory
    icon: str = Field(description="Icon name used by the templates, e.g. 'BookOpen'.")
    features: list[str]
    benefits: list[str]
    case_study: CaseStudy
    faqs: list[FAQ] = Field(default_factory=list)


class BlogPost(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    title: str
    excerpt: str
    content: str = Field(description="Body as a list of paragraphs separated by blank lines.")
    author: str
    published_at: date
    tags: list[str] = Field(default_factory=list)
    reading_time: int = Field(ge=1, description="Estimated reading time in minutes.")

    @property
    def paragraphs(self) -> list[str]:
        return [p.strip() for p in self.content.split("\n\n") if p.strip()]


class Testimonial(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    company: str
    role: str
    content: str
    rating: int = Field(ge=1, le=5)
    location: Optional[str] = None
