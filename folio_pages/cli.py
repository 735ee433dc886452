"""Cyclopts CLI entrypoint for building and serving the folio website.

The ``folio`` console script defined here can render the whole site into a
static bundle (``folio build``) or serve it dynamically, re-rendering each
request from the markdown content directory (``folio serve``). Options can
also be supplied through ``FOLIO_*`` environment variables.

Examples
--------
Build the site with the default configuration:

>>> from folio_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from folio_pages.cli import app
>>> app(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter

from .builder import SiteBuilder
from .config import load_site_config
from .server import DEFAULT_HOST, DEFAULT_PORT, run_server

if typ.TYPE_CHECKING:
    from .config import SiteConfig

DEFAULT_CONFIG = Path("config/site.yaml")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = App(name="folio", help="Build or serve the folio blog and portfolio site.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def _load_site(config: Path, map_api_key: str | None) -> SiteConfig:
    """Load the site config, applying a map API key override when given."""
    site = load_site_config(config)
    if map_api_key and site.contact.map is not None:
        site.contact.map = dc.replace(site.contact.map, api_key=map_api_key)
    return site


@app.command(help="Render every page into a static HTML bundle.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="FOLIO_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="FOLIO_OUTPUT_DIR"),
    ] = None,
    map_api_key: typ.Annotated[
        str | None,
        Parameter(help="Map widget API key", env_var="FOLIO_MAP_API_KEY"),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="FOLIO_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Build the static site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``FOLIO_CONFIG``).
    output_dir : Path or None, optional
        Override for the bundle directory; defaults to the configured
        ``output_dir``.
    map_api_key : str or None, optional
        API key for the contact page map; overrides the config value.
    log_level : str, optional
        Standard logging level name.

    Returns
    -------
    None
        Writes the bundle and prints each generated path.
    """
    _configure_logging(log_level)
    site = _load_site(config, map_api_key)
    for path in SiteBuilder(site, output_dir=output_dir).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Serve the site, rendering each request from markdown.")
def serve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="FOLIO_CONFIG")
    ] = DEFAULT_CONFIG,
    host: typ.Annotated[
        str, Parameter(help="Interface to bind", env_var="FOLIO_HOST")
    ] = DEFAULT_HOST,
    port: typ.Annotated[
        int, Parameter(help="Port to listen on", env_var="FOLIO_PORT")
    ] = DEFAULT_PORT,
    map_api_key: typ.Annotated[
        str | None,
        Parameter(help="Map widget API key", env_var="FOLIO_MAP_API_KEY"),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="FOLIO_LOG_LEVEL")
    ] = "INFO",
) -> None:
    """Serve the site over HTTP until interrupted."""
    _configure_logging(log_level)
    site = _load_site(config, map_api_key)
    run_server(site, host=host, port=port)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``folio`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
