"""Lookups over the static content lists in :mod:`data`."""

from __future__ import annotations

from typing import Optional, Sequence

from data.blog import BLOG_POSTS
from data.services import SERVICES
from data.testimonials import TESTIMONIALS
from maco.content.models import BlogPost, Service, ServiceCategory, Testimonial
from maco.locations.models import Location

#: Number of services shown on a location page.
RELEVANT_SERVICES_LIMIT = 6


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------


def get_service(slug: str, services: Sequence[Service] = SERVICES) -> Optional[Service]:
    return next((s for s in services if s.slug == slug), None)


def services_by_category(services: Sequence[Service] = SERVICES) -> dict[ServiceCategory, list[Service]]:
    """Services grouped by category, categories in declaration order."""
    grouped: dict[ServiceCategory, list[Service]] = {c: [] for c in ServiceCategory}
    for service in services:
        grouped[service.category].append(service)
    return grouped


def relevant_services(
    location: Location,
    limit: int = RELEVANT_SERVICES_LIMIT,
    services: Sequence[Service] = SERVICES,
) -> list[Service]:
    """Services matching any of the location's focus tags.

    A service matches when its slug or id contains a tag.  Falls back to the
    first *limit* services when nothing matches.
    """
    matched = [
        service for service in services
        if any(tag in service.slug or tag in service.id for tag in location.service_focus)
    ]
    return (matched or list(services))[:limit]


# ---------------------------------------------------------------------------
# Blog
# ---------------------------------------------------------------------------


def list_posts(posts: Sequence[BlogPost] = BLOG_POSTS) -> list[BlogPost]:
    """All posts, newest first."""
    return sorted(posts, key=lambda p: p.published_at, reverse=True)


def get_post(slug: str, posts: Sequence[BlogPost] = BLOG_POSTS) -> Optional[BlogPost]:
    return next((p for p in posts if p.slug == slug), None)


def related_posts(post: BlogPost, limit: int = 3, posts: Sequence[BlogPost] = BLOG_POSTS) -> list[BlogPost]:
    """Other posts ranked by number of shared tags, newest first on ties."""
    tags = set(post.tags)
    scored = [
        (len(tags.intersection(other.tags)), other)
        for other in list_posts(posts)
        if other.slug != post.slug
    ]
    scored = [item for item in scored if item[0] > 0]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [other for _, other in scored[:limit]]


# ---------------------------------------------------------------------------
# Testimonials
# ---------------------------------------------------------------------------


def average_rating(testimonials: Sequence[Testimonial] = TESTIMONIALS) -> float:
    if not testimonials:
        return 0.0
    return round(sum(t.rating for t in testimonials) / len(testimonials), 1)
