from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from data.services import SERVICES
from data.testimonials import TESTIMONIALS
from maco.content.catalogue import average_rating, list_posts
from pages.renderer import render

router = APIRouter(tags=["pages"])

HOME_SERVICES = 8
HOME_TESTIMONIALS = 3
HOME_POSTS = 3


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return render(request, "home.html", {
        "services": SERVICES[:HOME_SERVICES],
        "testimonials": TESTIMONIALS[:HOME_TESTIMONIALS],
        "average_rating": average_rating(),
        "posts": list_posts()[:HOME_POSTS],
    })


@router.get("/about", response_class=HTMLResponse)
def about(request: Request):
    return render(request, "about.html")


@router.get("/testimonials", response_class=HTMLResponse)
def testimonials(request: Request):
    return render(request, "testimonials.html", {
        "testimonials": TESTIMONIALS,
        "average_rating": average_rating(),
    })
