"""Unit tests for loading posts from the content directory.

These tests exercise :class:`folio_pages.content.ContentLoader` against
throwaway directories: slug resolution, front-matter parsing, title
fallbacks, date handling, and the errors raised for missing or unreadable
files.

Usage
-----
Run ``pytest tests/test_content.py -v``. Only pytest's ``tmp_path`` fixture
is required.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from folio_pages.content import (
    ContentError,
    ContentLoader,
    PostNotFoundError,
    split_front_matter,
)

from .samples import CLOSURES_POST, UNDATED_POST, write_post

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_load_reads_front_matter_and_body(tmp_path: Path) -> None:
    write_post(tmp_path, "javascript-closures", CLOSURES_POST)
    post = ContentLoader(tmp_path).load("javascript-closures")
    assert post.slug == "javascript-closures"
    assert post.title == "Understanding JavaScript Closures"
    assert post.description.startswith("A comprehensive explanation")
    assert post.image_url == "https://picsum.photos/400/300?random=3"
    assert post.published == dt.date(2024, 2, 2)
    assert post.tags == ["javascript"]
    assert post.body.startswith("# Understanding JavaScript Closures"), (
        "expected the front-matter block to be stripped from the body"
    )


def test_title_falls_back_to_first_heading(tmp_path: Path) -> None:
    write_post(tmp_path, "loose-notes", UNDATED_POST)
    post = ContentLoader(tmp_path).load("loose-notes")
    assert post.title == "Notes Without Front Matter"
    assert post.description == ""
    assert post.published is None
    assert post.metadata == {}


def test_title_falls_back_to_slug(tmp_path: Path) -> None:
    write_post(tmp_path, "plain_text-post", "No headings here.\n")
    assert ContentLoader(tmp_path).load("plain_text-post").title == "Plain Text Post"


def test_tags_accept_comma_separated_string(tmp_path: Path) -> None:
    write_post(tmp_path, "tagged", "---\ntags: css, tailwind ,\n---\nBody\n")
    assert ContentLoader(tmp_path).load("tagged").tags == ["css", "tailwind"]


def test_unparseable_date_is_ignored(tmp_path: Path) -> None:
    write_post(tmp_path, "odd-date", "---\ndate: sometime soon\n---\nBody\n")
    assert ContentLoader(tmp_path).load("odd-date").published is None


def test_iso_timestamp_date_is_parsed(tmp_path: Path) -> None:
    write_post(tmp_path, "stamped", '---\ndate: "2024-05-01T08:30:00Z"\n---\nBody\n')
    assert ContentLoader(tmp_path).load("stamped").published == dt.date(2024, 5, 1)


def test_markdown_extension_is_supported(tmp_path: Path) -> None:
    (tmp_path / "long-form.markdown").write_text("# Long Form\n", encoding="utf-8")
    loader = ContentLoader(tmp_path)
    assert loader.slugs() == ["long-form"]
    assert loader.load("long-form").title == "Long Form"


def test_missing_slug_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(PostNotFoundError) as excinfo:
        ContentLoader(tmp_path).load("does-not-exist")
    assert excinfo.value.slug == "does-not-exist"
    assert isinstance(excinfo.value, LookupError)


@pytest.mark.parametrize("slug", ["../secrets", "", "nested/post", ".hidden"])
def test_malformed_slug_raises_not_found(tmp_path: Path, slug: str) -> None:
    with pytest.raises(PostNotFoundError):
        ContentLoader(tmp_path).load(slug)


def test_invalid_front_matter_raises_content_error(tmp_path: Path) -> None:
    write_post(tmp_path, "broken", "---\ntitle: [unclosed\n---\nBody\n")
    with pytest.raises(ContentError) as excinfo:
        ContentLoader(tmp_path).load("broken")
    assert not isinstance(excinfo.value, PostNotFoundError)


def test_invalid_utf8_raises_content_error(tmp_path: Path) -> None:
    (tmp_path / "binary.md").write_bytes(b"\xff\xfe\x00broken")
    with pytest.raises(ContentError, match="not valid UTF-8"):
        ContentLoader(tmp_path).load("binary")


def test_slugs_are_sorted_and_filtered(tmp_path: Path) -> None:
    write_post(tmp_path, "b-post", "B\n")
    write_post(tmp_path, "a-post", "A\n")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    (tmp_path / "drafts").mkdir()
    assert ContentLoader(tmp_path).slugs() == ["a-post", "b-post"]


def test_slugs_empty_when_directory_missing(tmp_path: Path) -> None:
    assert ContentLoader(tmp_path / "missing").slugs() == []


def test_edits_are_visible_on_next_load(tmp_path: Path) -> None:
    path = write_post(tmp_path, "live", "---\ntitle: First\n---\nBody\n")
    loader = ContentLoader(tmp_path)
    assert loader.load("live").title == "First"
    path.write_text("---\ntitle: Second\n---\nBody\n", encoding="utf-8")
    assert loader.load("live").title == "Second"


def test_split_front_matter_without_block() -> None:
    text = "# Title\n\nText\n"
    assert split_front_matter(text) == ({}, text)


def test_body_is_exact_text_after_block(tmp_path: Path) -> None:
    body = "    indented code\n\ntext\n"
    write_post(tmp_path, "indented", f"---\ntitle: T\n---\n{body}")
    loaded = ContentLoader(tmp_path).load("indented").body
    assert loaded == body, (
        f"expected the body to keep its leading indentation, got {loaded!r}"
    )


def test_body_keeps_blank_lines_after_block() -> None:
    metadata, body = split_front_matter("---\ntitle: T\n---\n\n\nText\n")
    assert metadata == {"title": "T"}
    assert body == "\n\nText\n"


def test_impossible_date_raises_content_error(tmp_path: Path) -> None:
    write_post(tmp_path, "bad-date", "---\ndate: 2024-13-45\n---\n# Hi\n")
    with pytest.raises(ContentError) as excinfo:
        ContentLoader(tmp_path).load("bad-date")
    assert not isinstance(excinfo.value, PostNotFoundError)


def test_brace_delimited_text_is_plain_body(tmp_path: Path) -> None:
    text = "{\nnot json\n}\nBody\n"
    write_post(tmp_path, "braces", text)
    post = ContentLoader(tmp_path).load("braces")
    assert post.metadata == {}
    assert post.body == text


def test_unterminated_block_raises_content_error() -> None:
    with pytest.raises(ContentError, match="closing"):
        split_front_matter("---\ntitle: T\n")


def test_non_mapping_front_matter_raises_content_error() -> None:
    with pytest.raises(ContentError, match="mapping"):
        split_front_matter("---\n- a\n- b\n---\nBody\n")
