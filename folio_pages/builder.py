"""Write the whole site as a static HTML bundle.

:class:`SiteBuilder` renders every route through :class:`PageRenderer` and
writes ``index.html`` files mirroring the URL layout, so the bundle can be
served by any static host: ``/`` -> ``index.html``, ``/blog/`` ->
``blog/index.html``, ``/blogpost/<slug>/`` -> ``blogpost/<slug>/index.html``,
``/contact/`` -> ``contact/index.html``, plus ``404.html``.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> builder = SiteBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from .pages import PageRenderer

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .generator.models import PageResult

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Render every page of the site into an output directory."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        output_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration.
        output_dir : Path, optional
            Override for the bundle directory; defaults to ``site.output_dir``.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.site = site
        self.output_dir = output_dir or site.output_dir
        self.pages = PageRenderer(site, templates_dir=templates_dir)

    def run(self) -> list[Path]:
        """Render and write every page, returning the written paths.

        Posts that resolve to the not-found page are logged and skipped, so a
        broken post never produces a file under ``blogpost/``.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        written = [
            self._write("index.html", self.pages.home_page()),
            self._write("blog/index.html", self.pages.blog_page()),
        ]
        for slug in self.pages.loader.slugs():
            result = self.pages.post_page(slug)
            if not result.found:
                logger.warning("Skipping post %r: rendered as not found", slug)
                continue
            written.append(self._write(f"blogpost/{slug}/index.html", result))
        written.append(self._write("contact/index.html", self.pages.contact_page()))
        written.append(self._write("404.html", self.pages.not_found_page()))
        return written

    def _write(self, relative: str, result: PageResult) -> Path:
        output_path = self.output_dir / relative
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.html, encoding="utf-8")
        return output_path


__all__ = ["SiteBuilder"]
