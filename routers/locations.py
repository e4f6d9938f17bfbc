from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from pages.builder import build_location_page, build_locations_index
from pages.renderer import render

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_class=HTMLResponse)
def list_locations(request: Request):
    return render(request, "locations.html", {"index": build_locations_index()})


@router.get("/{slugs:path}", response_class=HTMLResponse)
def location_detail(request: Request, slugs: str):
    page = build_location_page(slugs.split("/"))
    if page is None:
        raise HTTPException(status_code=404, detail=f"Location '{slugs}' not found")

    return render(request, "location.html", {
        "page": page,
        "location": page.location,
        "breadcrumbs": page.breadcrumbs,
    })
