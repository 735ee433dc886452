r"""Load blog posts from markdown files with YAML front matter.

Each post lives in the content directory as ``<slug>.md`` (or
``<slug>.markdown``). An optional leading ``---`` block carries YAML metadata
such as ``title``, ``description``, ``image`` and ``date``; everything after
the block is the markdown body. Records are built fresh on every call and are
never cached, so edits on disk show up on the next render.

Example
-------
>>> from folio_pages.content import split_front_matter
>>> metadata, body = split_front_matter("---\ntitle: Hello\n---\n# Hello\n")
>>> metadata["title"], body
('Hello', '# Hello\n')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import re
import typing as typ
from pathlib import Path

from frontmatter.default_handlers import YAMLHandler

from ._constants import CONTENT_EXTENSIONS, SLUG_PATTERN

if typ.TYPE_CHECKING:
    import collections.abc as cabc

H1_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$", re.MULTILINE)
IMAGE_KEYS = ("image", "imageUrl", "image_url", "cover")
FRONT_MATTER_BOUNDARY = re.compile(r"^-{3,}[ \t]*$", re.MULTILINE)
LEADING_NEWLINE = re.compile(r"\A\r?\n")

_FRONT_MATTER = YAMLHandler(fm_boundary=FRONT_MATTER_BOUNDARY)


class ContentError(Exception):
    """Raised when a content file exists but cannot be read as a post."""


class PostNotFoundError(ContentError, LookupError):
    """Raised when no content file matches the requested slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"No post found for slug '{slug}'.")


@dc.dataclass(frozen=True, slots=True)
class PostRecord:
    """A single blog post read from disk.

    Attributes
    ----------
    slug : str
        URL-safe identifier derived from the filename.
    title : str
        Front-matter title, else the first level-one heading, else the slug.
    description : str
        Front-matter description; empty when absent.
    image_url : str or None
        Optional cover image reference.
    body : str
        Markdown text following the front-matter block.
    metadata : dict[str, Any]
        Raw front-matter mapping, empty when the file has none.
    published : date or None
        Parsed ``date`` field when present and valid.
    """

    slug: str
    title: str
    description: str
    body: str
    image_url: str | None = None
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)
    published: dt.date | None = None

    @property
    def tags(self) -> list[str]:
        """Return front-matter tags as strings, accepting a list or CSV."""
        raw = self.metadata.get("tags")
        if isinstance(raw, str):
            return [tag.strip() for tag in raw.split(",") if tag.strip()]
        if isinstance(raw, list):
            return [str(tag).strip() for tag in raw if str(tag).strip()]
        return []


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its YAML metadata mapping and markdown body.

    Only a leading ``---`` block is recognised. The body is the text after
    the closing ``---`` line, byte for byte; without a block it is ``text``
    unchanged.

    Raises
    ------
    ContentError
        If the block is unterminated, cannot be loaded as YAML (including
        values such as impossible dates), or is not a mapping.
    """
    if not _FRONT_MATTER.detect(text):
        return {}, text
    try:
        raw, body = _FRONT_MATTER.split(text)
    except ValueError as exc:
        msg = "Front matter block is missing its closing '---' line."
        raise ContentError(msg) from exc
    try:
        metadata = _FRONT_MATTER.load(raw)
    except Exception as exc:
        msg = f"Invalid front matter: {exc}"
        raise ContentError(msg) from exc
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        msg = "Front matter must be a mapping of keys to values."
        raise ContentError(msg)
    return dict(metadata), LEADING_NEWLINE.sub("", body, count=1)


class ContentLoader:
    """Resolve slugs to markdown files inside a content directory."""

    def __init__(
        self,
        content_dir: Path,
        *,
        extensions: cabc.Sequence[str] = CONTENT_EXTENSIONS,
    ) -> None:
        self.content_dir = content_dir
        self.extensions = tuple(extensions)

    def load(self, slug: str) -> PostRecord:
        """Read the post for ``slug``.

        Parameters
        ----------
        slug : str
            Identifier from the route; must be URL-safe.

        Returns
        -------
        PostRecord
            Metadata and body for the post.

        Raises
        ------
        PostNotFoundError
            If the slug is malformed or no matching file exists.
        ContentError
            If the file cannot be decoded or its front matter is invalid.
        """
        path = self._resolve_path(slug)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Content file '{path}' is not valid UTF-8."
            raise ContentError(msg) from exc
        try:
            metadata, body = split_front_matter(text)
        except ContentError as exc:
            msg = f"Content file '{path}' has invalid front matter."
            raise ContentError(msg) from exc
        return _build_record(slug, metadata, body)

    def slugs(self) -> list[str]:
        """Return the sorted slugs of every content file."""
        if not self.content_dir.is_dir():
            return []
        found = {
            path.stem
            for path in self.content_dir.iterdir()
            if path.is_file()
            and path.suffix in self.extensions
            and SLUG_PATTERN.fullmatch(path.stem)
        }
        return sorted(found)

    def iter_posts(self) -> cabc.Iterator[PostRecord]:
        """Yield a freshly loaded record for every slug."""
        for slug in self.slugs():
            yield self.load(slug)

    def _resolve_path(self, slug: str) -> Path:
        if not SLUG_PATTERN.fullmatch(slug):
            raise PostNotFoundError(slug)
        for extension in self.extensions:
            candidate = self.content_dir / f"{slug}{extension}"
            if candidate.is_file():
                return candidate
        raise PostNotFoundError(slug)


def _build_record(slug: str, metadata: dict[str, typ.Any], body: str) -> PostRecord:
    """Assemble a PostRecord, tolerating missing or oddly typed fields."""
    title = _optional_text(metadata.get("title")) or _first_heading(body)
    description = _optional_text(metadata.get("description")) or ""
    image_url = next(
        (
            value
            for value in (_optional_text(metadata.get(key)) for key in IMAGE_KEYS)
            if value
        ),
        None,
    )
    return PostRecord(
        slug=slug,
        title=title or slug.replace("-", " ").replace("_", " ").title(),
        description=description,
        body=body,
        image_url=image_url,
        metadata=metadata,
        published=_parse_date(metadata.get("date")),
    )


def _optional_text(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _first_heading(body: str) -> str | None:
    match = H1_PATTERN.search(body)
    return match.group(1).strip() if match else None


def _parse_date(value: object | None) -> dt.date | None:
    """Return a date parsed from YAML scalars, or None when unusable."""
    match value:
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                return dt.datetime.fromisoformat(sanitized).date()
            except ValueError:
                return None
        case _:
            return None


__all__ = [
    "ContentError",
    "ContentLoader",
    "PostNotFoundError",
    "PostRecord",
    "split_front_matter",
]
