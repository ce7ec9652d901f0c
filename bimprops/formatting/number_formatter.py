"""Number parsing and display formatting using Babel.

Provides the numeric rules used for Double property values:
- Invariant parsing ('.' decimal separator, ',' grouping) for edits
- Lenient parsing (invariant first, then a current locale) for loaded data
- Fixed two-digit display formatting
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Iterable, Optional

from babel.numbers import NumberFormatError as BabelNumberFormatError
from babel.numbers import format_decimal, parse_decimal

# Babel has no culture-neutral locale; en_US carries the same separators.
INVARIANT_LOCALE = "en_US"

DISPLAY_PATTERN = "0.00"
DISPLAY_QUANTUM = Decimal("0.01")

# Enough digits for the largest float plus two decimals
DISPLAY_PRECISION = 400


class NumberParseError(ValueError):
    """Raised when text cannot be parsed as a finite number."""

    def __init__(self, text: str, locales: Iterable[str]):
        self.text = text
        self.locales = list(locales)
        super().__init__(
            f"'{text}' is not a valid number (tried locales: {', '.join(self.locales)})"
        )


def parse_number(text: str, locales: Iterable[str] = (INVARIANT_LOCALE,)) -> float:
    """Parse text as a finite float, trying each locale in order.

    Args:
        text: Text to parse (surrounding whitespace is ignored)
        locales: Locales whose separators are tried, first match wins

    Returns:
        Parsed float value

    Raises:
        NumberParseError: If no locale yields a finite number
    """
    locales = [loc for loc in dict.fromkeys(locales) if loc]
    candidate = text.strip() if isinstance(text, str) else ""

    for locale in locales:
        if not candidate:
            break
        try:
            value: Decimal = parse_decimal(candidate, locale=locale)
        except BabelNumberFormatError:
            continue
        if not value.is_finite():
            continue
        # Finite decimals such as 1e400 still overflow to inf as floats
        number = float(value)
        if math.isfinite(number):
            return number

    raise NumberParseError(text, locales)


def coerce_number(value: Any, current_locale: Optional[str] = None) -> Optional[float]:
    """Convert a raw JSON value to a float, or None when it is not numeric.

    Native JSON numbers are taken as-is. Any other value is converted to
    text and parsed with invariant rules, then with current_locale.
    Booleans are never treated as numbers.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None

    locales = [INVARIANT_LOCALE]
    if current_locale:
        locales.append(current_locale)
    try:
        return parse_number(str(value), locales)
    except NumberParseError:
        return None


def format_display(value: Optional[float]) -> str:
    """Format a number with exactly two fractional digits and no grouping.

    Midpoints round away from zero, computed on the exact binary value.

    Examples:
        123.45 -> "123.45"
        -1.5 -> "-1.50"
        0.125 -> "0.13"
        None -> ""
    """
    if value is None:
        return ""
    with localcontext() as ctx:
        ctx.prec = DISPLAY_PRECISION
        ctx.rounding = ROUND_HALF_UP
        rounded = Decimal(value).quantize(DISPLAY_QUANTUM)
        return format_decimal(rounded, format=DISPLAY_PATTERN, locale=INVARIANT_LOCALE)
