from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from maco.content.catalogue import get_service, services_by_category
from pages.builder import service_breadcrumbs
from pages.renderer import render

router = APIRouter(prefix="/services", tags=["services"])

RELATED_LIMIT = 3


@router.get("", response_class=HTMLResponse)
def list_services(request: Request):
    return render(request, "services.html", {"categories": services_by_category()})


@router.get("/{slug}", response_class=HTMLResponse)
def service_detail(request: Request, slug: str):
    service = get_service(slug)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Service '{slug}' not found")

    same_category = services_by_category()[service.category]
    related = [s for s in same_category if s.slug != service.slug][:RELATED_LIMIT]
    return render(request, "service.html", {
        "service": service,
        "related": related,
        "breadcrumbs": service_breadcrumbs(service),
    })
