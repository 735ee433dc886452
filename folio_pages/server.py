"""Serve the site dynamically with FastAPI.

Every request re-reads content from disk and re-renders the page; nothing is
cached between requests. Unknown routes and unknown or broken posts all
answer with the shared not-found page and status 404.
"""

from __future__ import annotations

import logging
import typing as typ

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .pages import PageRenderer

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .generator.models import PageResult

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def _respond(result: PageResult) -> HTMLResponse:
    return HTMLResponse(content=result.html, status_code=result.status)


def create_app(site: SiteConfig) -> FastAPI:
    """Build the FastAPI application serving every page of ``site``."""
    pages = PageRenderer(site)
    app = FastAPI(title=site.name, docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/", response_class=HTMLResponse)
    def home() -> HTMLResponse:
        return _respond(pages.home_page())

    @app.get("/blog/", response_class=HTMLResponse)
    def blog(search: str | None = None) -> HTMLResponse:
        return _respond(pages.blog_page(search))

    @app.get("/blogpost/{slug}/", response_class=HTMLResponse)
    def blog_post(slug: str) -> HTMLResponse:
        return _respond(pages.post_page(slug))

    @app.get("/contact/", response_class=HTMLResponse)
    def contact() -> HTMLResponse:
        return _respond(pages.contact_page())

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        request: Request, exc: StarletteHTTPException
    ) -> HTMLResponse:
        if exc.status_code == 404:
            logger.info("No route for %s", request.url.path)
            return _respond(pages.not_found_page())
        return HTMLResponse(content=str(exc.detail), status_code=exc.status_code)

    return app


def run_server(
    site: SiteConfig, *, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> None:
    """Serve ``site`` with uvicorn until interrupted."""
    uvicorn.run(create_app(site), host=host, port=port, log_level="info")


__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "create_app", "run_server"]
