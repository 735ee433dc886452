"""HTTP-level tests for the FastAPI application.

The application is exercised through ``fastapi.testclient.TestClient`` so the
routing, status codes, and the shared not-found page are verified exactly as
a browser would see them.

Usage
-----
Run ``pytest tests/test_server.py -v`` after installing the test extra
(``pip install -e .[test]``), which provides ``httpx`` for the test client.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from folio_pages.server import create_app

from .samples import write_post

if typ.TYPE_CHECKING:
    from folio_pages.config import SiteConfig


@pytest.fixture
def client(site: SiteConfig) -> TestClient:
    """Return a test client bound to the sample site."""
    return TestClient(create_app(site))


def test_home_route(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Hi, I&#39;m Jason" in response.text


def test_blog_route_with_search(client: TestClient) -> None:
    response = client.get("/blog/", params={"search": "closures"})
    assert response.status_code == 200
    soup = BeautifulSoup(response.text, "html.parser")
    assert [card["data-slug"] for card in soup.select("article.post-card")] == [
        "javascript-closures"
    ]


def test_post_route_renders_article(client: TestClient) -> None:
    response = client.get("/blogpost/javascript-closures/")
    assert response.status_code == 200
    soup = BeautifulSoup(response.text, "html.parser")
    assert soup.find("article", class_="prose") is not None
    assert soup.find("aside", class_="on-this-page") is not None


def test_unknown_post_is_404(client: TestClient) -> None:
    response = client.get("/blogpost/does-not-exist/")
    assert response.status_code == 404
    assert "This page could not be found." in response.text


def test_unknown_route_uses_not_found_page(client: TestClient) -> None:
    response = client.get("/no/such/page")
    assert response.status_code == 404
    soup = BeautifulSoup(response.text, "html.parser")
    heading = soup.find("h1")
    assert heading is not None
    assert heading.get_text() == "404"


def test_contact_route(client: TestClient) -> None:
    response = client.get("/contact/")
    assert response.status_code == 200
    assert "hello@example.com" in response.text


def test_content_changes_show_without_restart(
    site: SiteConfig, client: TestClient
) -> None:
    assert client.get("/blogpost/fresh-post/").status_code == 404
    write_post(site.content_dir, "fresh-post", "# Fresh Post\n\n## Part One\n")
    response = client.get("/blogpost/fresh-post/")
    assert response.status_code == 200
    assert "Fresh Post" in response.text
