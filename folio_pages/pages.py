"""Render the site's pages and convert post failures into not-found pages.

:class:`PageRenderer` owns the Jinja environment and wires the content
loader, markdown renderer, and outline extractor together for each request.
It is the page boundary: :meth:`PageRenderer.post_page` never raises for a
missing or broken post. Unknown slugs and render failures both produce the
shared not-found page with status 404; render failures are logged first.

Typical usage from the HTTP server or static builder:

>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> pages = PageRenderer(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> pages.post_page("javascript-closures").status  # doctest: +SKIP
200
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .content import ContentError, ContentLoader, PostNotFoundError
from .generator.models import PageResult
from .generator.outline import extract_outline
from .generator.renderer import MarkdownRenderer, RenderError
from .listing import PostSummary, filter_posts, sort_posts, summarize
from .widgets import WidgetLoader

if typ.TYPE_CHECKING:
    from .config import SiteConfig

logger = logging.getLogger(__name__)


class PageRenderer:
    """Render full HTML documents for every route of the site."""

    def __init__(
        self, site: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer, content loader, and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration providing copy, navigation, the content
            directory, and widget settings.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``folio_pages/templates``.
        """
        self.site = site
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.loader = ContentLoader(site.content_dir)
        self.renderer = MarkdownRenderer(site.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def home_page(self) -> PageResult:
        """Render the landing page with its search form and service cards."""
        html = self._render("home_page.jinja", active="home", home=self.site.home)
        return PageResult(status=200, html=html)

    def blog_page(self, search: str | None = None) -> PageResult:
        """Render the listing, optionally filtered by ``search``."""
        term = (search or "").strip()
        posts = filter_posts(self.post_summaries(), term)
        html = self._render(
            "blog_page.jinja",
            active="blog",
            blog=self.site.blog,
            posts=posts,
            search=term,
        )
        return PageResult(status=200, html=html)

    def post_page(self, slug: str) -> PageResult:
        """Render a single post, or the not-found page when it cannot be shown.

        Returns
        -------
        PageResult
            Status 200 with the article and its outline, or status 404 when
            the slug is unknown or any load/render stage fails.
        """
        try:
            post = self.loader.load(slug)
            body_html = self.renderer.render(post.body)
        except PostNotFoundError:
            logger.info("No post for slug %r", slug)
            return self.not_found_page()
        except (ContentError, RenderError):
            logger.exception("Failed to render post %r", slug)
            return self.not_found_page()
        outline = extract_outline(body_html)
        html = self._render(
            "post_page.jinja",
            active="blog",
            post=post,
            body_html=Markup(body_html),
            outline=outline,
            pygments_css=Markup(self.renderer.stylesheet),
        )
        return PageResult(status=200, html=html)

    def contact_page(self) -> PageResult:
        """Render the contact page, mounting the map widget when configured."""
        widgets = self._widgets()
        map_enabled = widgets.mount(self.site.contact.map)
        html = self._render(
            "contact_page.jinja",
            active="contact",
            contact=self.site.contact,
            map_enabled=map_enabled,
            widgets=widgets,
        )
        return PageResult(status=200, html=html)

    def not_found_page(self) -> PageResult:
        """Render the shared not-found page."""
        return PageResult(status=404, html=self._render("not_found.jinja", active=None))

    def post_summaries(self) -> list[PostSummary]:
        """Return listing cards for every readable post, newest first."""
        summaries: list[PostSummary] = []
        for slug in self.loader.slugs():
            try:
                post = self.loader.load(slug)
            except ContentError:
                logger.exception("Skipping unreadable post %r", slug)
                continue
            summaries.append(
                summarize(
                    post, self.site.blog.categories, self.site.blog.default_category
                )
            )
        return sort_posts(summaries)

    def _widgets(self) -> WidgetLoader:
        """Return a fresh loader with the site-wide chat widget mounted."""
        widgets = WidgetLoader()
        widgets.mount(self.site.chat)
        return widgets

    def _render(
        self,
        template_name: str,
        *,
        active: str | None,
        widgets: WidgetLoader | None = None,
        **context: typ.Any,
    ) -> str:
        """Render ``template_name`` with the shared chrome context."""
        template = self.env.get_template(template_name)
        html = template.render(
            site=self.site,
            nav_links=self.site.nav_links,
            active=active,
            widgets=widgets or self._widgets(),
            **context,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["PageRenderer"]
