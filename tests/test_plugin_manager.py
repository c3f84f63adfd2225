"""
Tests for PluginManager and the registries built on it.
"""

import pytest

from view_helpers.config import Settings
from view_helpers.entities import SearchOptionsEntity, SearchParamsEntity
from view_helpers.exceptions import ServiceNotFoundError
from view_helpers.repositories import (
    CspNonceGenerator,
    DictTranslator,
    NoIlsConnection,
    NoneUrlShortener,
    NullContentLoader,
    RequestCookieManager,
)
from view_helpers.services import (
    HelperContainer,
    PluginManager,
    build_helper_manager,
    build_search_options_manager,
    build_search_params_manager,
)


def test_shared_registration_is_cached():
    manager = PluginManager()
    manager.register("thing", object)
    assert manager.get("thing") is manager.get("thing")


def test_non_shared_registration_is_rebuilt():
    manager = PluginManager()
    manager.register("thing", object, shared=False)
    assert manager.get("thing") is not manager.get("thing")


def test_alias_resolves_to_same_instance():
    manager = PluginManager()
    manager.register("KeepAlive", object, aliases=["keepAlive"])
    assert manager.has("keepAlive")
    assert manager.get("keepAlive") is manager.get("KeepAlive")
    assert manager.aliases() == {"keepAlive": "KeepAlive"}


def test_unknown_name_raises_service_not_found():
    manager = PluginManager("search options manager")
    with pytest.raises(ServiceNotFoundError) as excinfo:
        manager.get("Primo")
    assert isinstance(excinfo.value, KeyError)
    assert "Primo" in str(excinfo.value)
    assert "search options manager" in str(excinfo.value)


def test_reregister_drops_cached_instance():
    manager = PluginManager()
    manager.register("thing", lambda: "old")
    assert manager.get("thing") == "old"
    manager.register("thing", lambda: "new")
    assert manager.get("thing") == "new"


def test_search_managers():
    settings = Settings(search_backends="Solr, Summon")
    options = build_search_options_manager(settings)
    params = build_search_params_manager(options, settings.search_backend_names)

    assert options.names() == ["Solr", "Summon"]
    solr_options = options.get("Solr")
    assert isinstance(solr_options, SearchOptionsEntity)
    assert solr_options is options.get("Solr")

    first = params.get("Solr")
    second = params.get("Solr")
    assert isinstance(first, SearchParamsEntity)
    assert first is not second
    assert first.options is solr_options


def test_search_params_limit_and_sort_fallbacks():
    params = SearchParamsEntity(options=SearchOptionsEntity(backend_id="Solr"), limit=7, sort="bogus")
    assert params.get_limit() == 20
    assert params.get_sort() == "relevance"
    params.limit = 40
    params.sort = "year"
    assert params.get_limit() == 40
    assert params.get_sort() == "year"


@pytest.fixture
def container():
    settings = Settings()
    options = build_search_options_manager(settings)
    return HelperContainer(
        ils_connection=NoIlsConnection(),
        url_shortener=NoneUrlShortener(),
        translator=DictTranslator(),
        search_options_manager=options,
        search_params_manager=build_search_params_manager(options, settings.search_backend_names),
        content_loaders={
            "authornotes": NullContentLoader("authornotes"),
            "summaries": NullContentLoader("summaries"),
        },
    )


def test_helper_manager_registers_template_names(container):
    request_container = container.for_request(CspNonceGenerator(), RequestCookieManager({}))
    settings = Settings(feedback_tab_enabled=True, session_keep_alive=30, site_email="a@b.org")
    helpers = build_helper_manager(request_container, settings)

    assert helpers.get("feedback")() is True
    assert helpers.get("keepAlive")() == 30
    assert helpers.get("systemEmail")() == "a@b.org"
    assert helpers.get("ils")().get_driver_name() == "NoILS"
    assert helpers.get("authorNotes")("123") == []
    assert helpers.get("summaries")("123") == []
    assert helpers.get("shortenUrl")("http://x/y") == "http://x/y"
    assert helpers.get("searchOptions")().backend_id == "Solr"
    assert helpers.get("localizedNumber")(1234.5, 2) == "1,234.50"
    assert helpers.get("cookie")().get_path() == "/"
    nonce = helpers.get("cspNonce")()
    assert nonce == helpers.get("cspNonce")()


def test_request_scoped_helpers_need_request_collaborators(container):
    helpers = build_helper_manager(container, Settings())
    with pytest.raises(RuntimeError):
        helpers.get("cspNonce")
    with pytest.raises(RuntimeError):
        helpers.get("cookie")
