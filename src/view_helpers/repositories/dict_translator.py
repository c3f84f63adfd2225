"""In-memory translator."""

from typing import Mapping


class DictTranslator:
    """Translator backed by per-locale string tables.

    Satisfies the Translator protocol. Placeholders in the form
    ``%%name%%`` are replaced from ``tokens``.

    Example:
        ```python
        translator = DictTranslator(
            {"de": {"number_decimal_point": ",", "number_thousands_separator": "."}},
            locale="de",
        )
        translator.translate("number_decimal_point", {}, ".")  # ","
        ```
    """

    def __init__(
        self,
        strings: Mapping[str, Mapping[str, str]] | None = None,
        locale: str = "en",
    ) -> None:
        self._strings = {lang: dict(table) for lang, table in (strings or {}).items()}
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    def with_locale(self, locale: str) -> "DictTranslator":
        """Return a translator sharing these tables for another locale."""
        return DictTranslator(self._strings, locale=locale)

    def translate(
        self,
        key: str,
        tokens: dict[str, str] | None = None,
        default: str | None = None,
    ) -> str:
        text = self._strings.get(self._locale, {}).get(key)
        if text is None:
            text = key if default is None else default
        for token, value in (tokens or {}).items():
            text = text.replace(f"%%{token}%%", str(value))
        return text
