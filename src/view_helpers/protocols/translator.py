"""Translator protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Translator(Protocol):
    """Looks up localized strings."""

    def translate(
        self,
        key: str,
        tokens: dict[str, str] | None = None,
        default: str | None = None,
    ) -> str:
        """Translate a key.

        Args:
            key: Translation key (e.g. "number_decimal_point")
            tokens: Values substituted for %%token%% placeholders
            default: Returned when the key has no translation; the key
                itself is returned when this is None

        Returns:
            The translated string
        """
        ...
