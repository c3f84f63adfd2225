#!/usr/bin/env python3
"""
Demo script for view helpers.

This script builds the helpers the way a request does and calls them the
way templates do, in English, German and Finnish.
"""

from view_helpers.config import Settings
from view_helpers.languages import STRINGS
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
    build_helper_manager,
    build_search_options_manager,
    build_search_params_manager,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def build_container(settings: Settings) -> HelperContainer:
    options = build_search_options_manager(settings)
    return HelperContainer(
        ils_connection=NoIlsConnection(),
        url_shortener=NoneUrlShortener(),
        translator=DictTranslator(STRINGS, locale="en"),
        search_options_manager=options,
        search_params_manager=build_search_params_manager(options, settings.search_backend_names),
        content_loaders={"authornotes": NullContentLoader(), "summaries": NullContentLoader()},
    )


def demo_config_helpers(settings: Settings) -> None:
    """Demonstrate helpers that return configured values."""
    print_section("Configured Values")

    helpers = build_helper_manager(build_container(settings), settings)
    for name in ("addThis", "feedback", "keepAlive", "systemEmail", "geocoords", "googleanalytics"):
        print(f"  {name:16} -> {helpers.get(name)()!r}")


def demo_localized_numbers(settings: Settings) -> None:
    """Demonstrate localizedNumber in several languages."""
    print_section("Localized Numbers")

    container = build_container(settings)
    for locale in ("en", "de", "fi"):
        request_container = container.for_request(
            nonce_generator=CspNonceGenerator(),
            cookie_manager=RequestCookieManager({"language": locale}),
            translator=container.translator.with_locale(locale),
        )
        helpers = build_helper_manager(request_container, settings)
        formatted = helpers.get("localizedNumber")(1234567.891, 2)
        print(f"  {locale}: {formatted}")


def demo_search_helpers(settings: Settings) -> None:
    """Demonstrate searchOptions and searchParams lookups."""
    print_section("Search Backends")

    helpers = build_helper_manager(build_container(settings), settings)
    for backend_id in settings.search_backend_names:
        options = helpers.get("searchOptions")(backend_id)
        params = helpers.get("searchParams")(backend_id)
        print(f"  {backend_id}: limit={params.get_limit()} sort={params.get_sort()} "
              f"sorts={', '.join(options.sort_options)}")


def main() -> None:
    """Run all demos."""
    print("\n🚀 View Helpers Demo")
    print("=" * 70)
    print("This demo calls the helpers the way templates do")
    print("(English, German & Finnish)")

    settings = Settings(
        addthis_key="ra-demo",
        feedback_tab_enabled=True,
        session_keep_alive=60,
        site_email="library@example.org",
        search_backends="Solr,Summon",
    )

    demo_config_helpers(settings)
    demo_localized_numbers(settings)
    demo_search_helpers(settings)

    print("\n" + "=" * 70)
    print("✅ Demo completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
