import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from maco.config import get_settings
from maco.locations import load_locations
from pages.renderer import render
from routers import api, blog, contact, locations, pages, services, tools

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the locations dataset at startup and report its size."""
    count = len(load_locations())
    if count:
        logger.info("Serving %d locations", count)
    else:
        logger.warning("No locations loaded; location pages will return 404")
    yield


app = FastAPI(title="MA & CO Accountants", lifespan=lifespan)

app.include_router(pages.router)
app.include_router(services.router)
app.include_router(locations.router)
app.include_router(blog.router)
app.include_router(contact.router)
app.include_router(tools.router)
app.include_router(api.router)


@app.exception_handler(StarletteHTTPException)
async def _not_found_page(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 404 or request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)
    detail = None if exc.detail == "Not Found" else exc.detail
    return render(request, "404.html", {"detail": detail}, status_code=404)


if __name__ == "__main__":
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
