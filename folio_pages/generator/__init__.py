"""Utilities for rendering posts and extracting page outlines."""

from .models import OutlineEntry, PageResult
from .outline import extract_outline
from .renderer import MarkdownRenderer, RenderError

__all__ = [
    "MarkdownRenderer",
    "OutlineEntry",
    "PageResult",
    "RenderError",
    "extract_outline",
]
