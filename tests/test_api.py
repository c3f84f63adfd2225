"""
Tests for the view helpers API.
"""

import asyncio
import re

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from view_helpers.api.app import app
from view_helpers.api.templating import create_templates
from view_helpers.dto import ShortenUrlRequest
from view_helpers.handlers import HelperHandler
from view_helpers.helpers import ShortenUrl
from view_helpers.repositories import RedisUrlShortener
from view_helpers.services import PluginManager


@pytest.fixture
def client():
    """Create a test client (lifespan runs inside the context manager)."""
    with TestClient(app) as test_client:
        yield test_client


def test_home(client):
    """Home page renders with the default language."""
    response = client.get("/", params={"count": 1234567})
    assert response.status_code == 200
    assert "Library search" in response.text
    assert "1,234,567 records" in response.text
    assert "NoILS" in response.text


def test_home_uses_language_cookie(client):
    client.cookies.set("language", "de")
    response = client.get("/", params={"count": 1234567})
    assert response.status_code == 200
    assert "Bibliothekssuche" in response.text
    assert "1.234.567 Datensätze" in response.text


def test_home_unknown_language_falls_back(client):
    client.cookies.set("language", "xx")
    response = client.get("/", params={"count": 1000})
    assert "1,000 records" in response.text


def test_csp_header(client):
    response = client.get("/helpers")
    policy = response.headers["content-security-policy"]
    assert re.search(r"'nonce-[A-Za-z0-9+/=]{44}'", policy)


def test_nonce_differs_between_requests(client):
    first = client.get("/helpers").headers["content-security-policy"]
    second = client.get("/helpers").headers["content-security-policy"]
    assert first != second


def test_list_helpers(client):
    response = client.get("/helpers")
    assert response.status_code == 200
    data = response.json()
    assert "LocalizedNumber" in data["helpers"]
    assert data["aliases"]["localizedNumber"] == "LocalizedNumber"
    assert data["aliases"]["searchOptions"] == "SearchOptions"


def test_shorten_with_none_shortener(client):
    url = "http://testserver/Record/123"
    response = client.post("/shorten", json={"url": url})
    assert response.status_code == 200
    assert response.json() == {"url": url, "short_url": url}


def test_shorten_rejects_empty_url(client):
    response = client.post("/shorten", json={"url": ""})
    assert response.status_code == 422


def test_resolve_unknown_short_link(client):
    response = client.get("/short/abc123", follow_redirects=False)
    assert response.status_code == 404


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["url_shortener"] == "none"


def test_shorten_foreign_url_is_bad_request(fake_redis):
    """A URL from another site is rejected before anything is stored."""
    shortener = RedisUrlShortener(redis_client=fake_redis, base_url="https://lib.example.org")
    helpers = PluginManager("view helper manager")
    helpers.register("ShortenUrl", lambda: ShortenUrl(shortener), aliases=["shortenUrl"])
    handler = HelperHandler(templates=create_templates(), url_shortener=shortener, shortener_mode="redis")

    with pytest.raises(HTTPException) as excinfo:
        asyncio.run(handler.shorten_url(ShortenUrlRequest(url="https://evil.example.com/phish"), helpers))

    assert excinfo.value.status_code == 400
    assert fake_redis.data == {}


def test_short_link_redirects_on_site(fake_redis):
    shortener = RedisUrlShortener(redis_client=fake_redis, base_url="https://lib.example.org")
    handler = HelperHandler(templates=create_templates(), url_shortener=shortener, shortener_mode="redis")
    short_id = shortener.shorten("https://lib.example.org/Record/1").rsplit("/", 1)[1]

    response = asyncio.run(handler.resolve_short_url(short_id))

    assert response.status_code == 301
    assert response.headers["location"] == "https://lib.example.org/Record/1"
