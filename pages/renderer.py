"""Jinja2 rendering for the HTML pages.

Every template extends ``base.html`` and can use the ``site`` and
``navigation`` globals plus the ``gbp`` and ``percent`` filters.  :func:`render`
adds the current ``settings`` to each context.

Usage::

    from pages.renderer import render

    return render(request, "service.html", {"service": service})
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse

from maco.config import NAVIGATION, SITE, get_settings
from maco.locations import location_url
from maco.tax import format_gbp

__all__ = ["TEMPLATES_DIR", "render", "templates"]

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _percent(value: float) -> str:
    return f"{value:.1f}%"


def _long_date(value: date) -> str:
    return f"{value.day} {value:%B %Y}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["gbp"] = format_gbp
templates.env.filters["percent"] = _percent
templates.env.filters["long_date"] = _long_date
templates.env.filters["location_url"] = location_url
templates.env.globals["site"] = SITE
templates.env.globals["navigation"] = NAVIGATION


def render(
    request: Request,
    name: str,
    context: Optional[dict[str, Any]] = None,
    status_code: int = 200,
) -> HTMLResponse:
    context = {"settings": get_settings(), **(context or {})}
    return templates.TemplateResponse(request, name, context, status_code=status_code)
