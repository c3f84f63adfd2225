"""
Tests for the view helper classes.
"""

import pytest

from conftest import CountingNonceGenerator, RecordingContentLoader, RecordingShortener
from view_helpers.exceptions import ServiceNotFoundError
from view_helpers.helpers import (
    AddThis,
    ContentLoader,
    Cookie,
    CspNonce,
    Feedback,
    GeoCoords,
    GoogleAnalytics,
    Ils,
    KeepAlive,
    SearchOptions,
    SearchParams,
    ShortenUrl,
    SystemEmail,
)
from view_helpers.repositories import NoIlsConnection, RequestCookieManager
from view_helpers.services import PluginManager


@pytest.mark.parametrize("value", ["abc123", "", False])
def test_add_this_returns_key(value):
    """AddThis returns the configured key unchanged."""
    assert AddThis(value)() is value


@pytest.mark.parametrize("value", [True, False])
def test_feedback_returns_flag(value):
    assert Feedback(value)() is value


@pytest.mark.parametrize("value", [0, 1, 600])
def test_keep_alive_returns_interval(value):
    assert KeepAlive(value)() == value


def test_system_email_and_geo_coords():
    assert SystemEmail("")() == ""
    assert SystemEmail("help@lib.example.org")() == "help@lib.example.org"
    assert GeoCoords(False)() is False
    assert GeoCoords("24.9,60.1,25.0,60.2")() == "24.9,60.1,25.0,60.2"


def test_google_analytics_key_and_universal_flag():
    helper = GoogleAnalytics("UA-1234", universal=True)
    assert helper() == "UA-1234"
    assert helper.is_universal() is True
    assert GoogleAnalytics(False).is_universal() is False


def test_ils_returns_same_connection():
    connection = NoIlsConnection()
    assert Ils(connection)() is connection


def test_cookie_returns_same_manager():
    manager = RequestCookieManager({"ui": "standard"})
    assert Cookie(manager)() is manager


def test_content_loader_delegates_isbn():
    """ContentLoader forwards the ISBN and returns the loader's result as is."""
    sentinel = object()
    loader = RecordingContentLoader(sentinel)
    helper = ContentLoader(loader)

    assert helper("9780262033848") is sentinel
    assert loader.calls == ["9780262033848"]


def test_shorten_url_delegates():
    shortener = RecordingShortener(result="https://s.example/x")
    helper = ShortenUrl(shortener)

    assert helper("https://lib.example.org/Record/123") == "https://s.example/x"
    assert shortener.calls == ["https://lib.example.org/Record/123"]


@pytest.fixture
def search_manager():
    manager = PluginManager("search options manager")
    manager.register("Solr", lambda: {"backend": "Solr"})
    manager.register("Summon", lambda: {"backend": "Summon"})
    return manager


@pytest.mark.parametrize("helper_class", [SearchOptions, SearchParams])
def test_search_lookup_defaults_to_solr(helper_class, search_manager):
    """Calling without a type is the same as asking for Solr."""
    helper = helper_class(search_manager)
    assert helper() is helper("Solr")
    assert helper()["backend"] == "Solr"
    assert helper("Summon")["backend"] == "Summon"


@pytest.mark.parametrize("helper_class", [SearchOptions, SearchParams])
def test_search_lookup_unknown_type_propagates(helper_class, search_manager):
    with pytest.raises(ServiceNotFoundError):
        helper_class(search_manager)("Primo")


def test_csp_nonce_calls_generator_every_time():
    """The helper does not cache; each call reaches the generator."""
    generator = CountingNonceGenerator()
    helper = CspNonce(generator)

    first = helper()
    second = helper()

    assert first != second
    assert generator.count == 2


def test_csp_nonce_error_propagates():
    class BrokenGenerator:
        def get_nonce(self):
            raise RuntimeError("no entropy")

    with pytest.raises(RuntimeError, match="no entropy"):
        CspNonce(BrokenGenerator())()


def test_delegate_errors_are_not_wrapped():
    class FailingShortener:
        def shorten(self, url):
            raise ConnectionError("shortener down")

    with pytest.raises(ConnectionError):
        ShortenUrl(FailingShortener())("https://lib.example.org/")
