"""Render post markdown into HTML with heading anchors and highlighted code.

The pipeline is fixed and linear: markdown is converted by Python-Markdown
(raw HTML passes through untouched), the result is parsed into a BeautifulSoup
tree, headings receive ids and anchor links, fenced code blocks are replaced
with Pygments output, and the tree is serialised back to a single string.
"""

from __future__ import annotations

import re
from html import escape

from bs4 import BeautifulSoup, Tag
from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .headings import add_heading_anchors, assign_heading_ids

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
LANGUAGE_CLASS_PREFIXES = ("language-", "lang-")
MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "sane_lists", "attr_list")


class RenderError(RuntimeError):
    """Raised when any stage of the markdown pipeline fails."""


class MarkdownRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, text: str) -> str:
        """Render a post body into an HTML string.

        Parameters
        ----------
        text : str
            Markdown body, optionally containing raw HTML.

        Returns
        -------
        str
            Serialised HTML. Whitespace-only input yields ``""``.

        Raises
        ------
        RenderError
            If any pipeline stage fails; no partial document is returned.
        """
        try:
            normalized = self._normalize_fenced_blocks(text)
            if not normalized.strip():
                return ""
            html = self._convert(normalized)
            soup = BeautifulSoup(html, "html.parser")
            assign_heading_ids(soup)
            add_heading_anchors(soup)
            self._highlight_code_blocks(soup)
            return str(soup)
        except Exception as exc:
            msg = f"Failed to render markdown: {exc}"
            raise RenderError(msg) from exc

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with an optional language tag.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata applied.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        return self._attach_language_attribute(html, lang)

    @staticmethod
    def _convert(text: str) -> str:
        md = Markdown(extensions=list(MARKDOWN_EXTENSIONS))
        return md.convert(text)

    def _highlight_code_blocks(self, soup: BeautifulSoup) -> None:
        """Replace each ``<pre><code>`` block with Pygments markup."""
        for pre in soup.find_all("pre"):
            code = pre.find("code", recursive=False)
            if code is None or pre.find_parent("div", class_="codehilite"):
                continue
            highlighted = self.code_block(code.get_text(), _code_language(code))
            fragment = BeautifulSoup(highlighted, "html.parser")
            pre.replace_with(fragment)

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


def _code_language(code: Tag) -> str | None:
    """Return the declared language from a ``language-*`` class, if any."""
    for css_class in code.get("class") or []:
        for prefix in LANGUAGE_CLASS_PREFIXES:
            if css_class.startswith(prefix) and len(css_class) > len(prefix):
                return css_class[len(prefix) :]
    return None


__all__ = ["MarkdownRenderer", "RenderError"]
