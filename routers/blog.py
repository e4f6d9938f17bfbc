from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from maco.content.catalogue import get_post, list_posts, related_posts
from pages.models import Breadcrumb
from pages.renderer import render

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", response_class=HTMLResponse)
def list_blog_posts(request: Request):
    return render(request, "blog.html", {"posts": list_posts()})


@router.get("/{slug}", response_class=HTMLResponse)
def blog_post(request: Request, slug: str):
    post = get_post(slug)
    if post is None:
        raise HTTPException(status_code=404, detail=f"Blog post '{slug}' not found")

    return render(request, "post.html", {
        "post": post,
        "related": related_posts(post),
        "breadcrumbs": [
            Breadcrumb(label="Home", href="/"),
            Breadcrumb(label="Blog", href="/blog"),
            Breadcrumb(label=post.title, href=f"/blog/{post.slug}"),
        ],
    })
