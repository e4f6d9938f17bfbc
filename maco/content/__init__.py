"""Service catalogue, blog posts and testimonials.

The content itself lives in :mod:`data`; lookups are in
:mod:`maco.content.catalogue`.
"""

from maco.content.models import (
    CATEGORY_LABELS,
    FAQ,
    BlogPost,
    CaseStudy,
    Service,
    ServiceCategory,
    Testimonial,
)

__all__ = [
    "CATEGORY_LABELS",
    "FAQ",
    "BlogPost",
    "CaseStudy",
    "Service",
    "ServiceCategory",
    "Testimonial",
]
