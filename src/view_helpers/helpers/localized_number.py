"""Locale-aware number formatting helper."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from markupsafe import Markup, escape

from view_helpers.protocols import Translator

DECIMAL_POINT_KEY = "number_decimal_point"
THOUSANDS_SEPARATOR_KEY = "number_thousands_separator"
DEFAULT_DECIMAL_POINT = "."
DEFAULT_THOUSANDS_SEPARATOR = ","


def format_number(
    number: float | int | str | Decimal,
    decimals: int = 0,
    decimal_point: str = DEFAULT_DECIMAL_POINT,
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR,
) -> str:
    """Format a number with grouped thousands.

    Rounds half away from zero, so 2.5 becomes "3" and -2.5 becomes "-3".
    Infinities and NaN are returned as "inf", "-inf" and "nan".

    Args:
        number: Value to format
        decimals: Digits after the decimal point (negative values count as 0)
        decimal_point: Separator between integer and fractional part
        thousands_separator: Separator between groups of three digits

    Returns:
        The formatted number
    """
    decimals = max(int(decimals), 0)
    value = Decimal(str(number))
    if value.is_nan():
        return "nan"
    if value.is_infinite():
        return "-inf" if value < 0 else "inf"

    # enough precision for every integer digit plus the requested decimals
    with localcontext() as context:
        context.prec = max(value.adjusted() + 1, 1) + decimals + 2
        value = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    if value == 0:
        # avoid "-0.00"
        value = abs(value)
    formatted = f"{value:,.{decimals}f}"
    return "".join(
        thousands_separator if char == "," else decimal_point if char == "." else char
        for char in formatted
    )


class LocalizedNumber:
    """Format numbers with the separators of the active language.

    The separators come from the ``number_decimal_point`` and
    ``number_thousands_separator`` translation strings and fall back to
    "." and "," when a language does not define them. The result is
    returned as Markup so template autoescaping leaves it alone.

    Example:
        ```python
        helper = LocalizedNumber(DictTranslator({"de": {...}}, locale="de"))
        helper(1234.5, 2)  # "1.234,50"
        ```
    """

    def __init__(self, translator: Translator) -> None:
        self._translator = translator

    def __call__(
        self,
        number: float | int | str | Decimal,
        decimals: int = 0,
        escape_html: bool = True,
    ) -> Markup | str:
        decimal_point = self._translator.translate(DECIMAL_POINT_KEY, {}, DEFAULT_DECIMAL_POINT)
        thousands_separator = self._translator.translate(
            THOUSANDS_SEPARATOR_KEY, {}, DEFAULT_THOUSANDS_SEPARATOR
        )
        result = format_number(number, decimals, decimal_point, thousands_separator)
        return escape(result) if escape_html else result
