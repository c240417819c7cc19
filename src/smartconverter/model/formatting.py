"""
Value Parsing & Formatting
==========================
Turns the raw text of the input field into a number and numbers into the
strings shown on the conversion cards.

Rules:
    - Empty or malformed input is worth 0.0. No error ever reaches the user.
    - Empty input always displays as the literal "0", whatever the computed
      result would format to (e.g. Celsius → Fahrenheit of 0.0 is 32).
    - Results use the locale's grouping with 0 to 2 fraction digits.
      Rounding is done by QLocale: the decimal of the binary double rounded
      to 2 places, exact ties going half-up (away from zero).
"""
from __future__ import annotations

import math
import re
from typing import Optional

from PySide6.QtCore import QLocale

from smartconverter.config import MAX_FRACTION_DIGITS, EMPTY_DISPLAY

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_DECIMAL_NUMERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_value(raw: str) -> float:
    """Parse the input text, returning 0.0 for anything that is not a decimal numeral."""
    if not raw or _DECIMAL_NUMERAL.fullmatch(raw) is None:
        return 0.0
    value = float(raw)
    # "1e999" is well-formed but overflows
    if not math.isfinite(value):
        return 0.0
    return value


def format_value(raw: str, num: float, locale: Optional[QLocale] = None) -> str:
    """
    Format a conversion result for display.

    Args:
        raw: The raw input text the result was computed from.
        num: The computed result.
        locale: Locale used for grouping and the decimal point.
            Defaults to the application's default locale.
    """
    if not raw:
        return EMPTY_DISPLAY

    loc = locale if locale is not None else QLocale()
    text = loc.toString(float(num), "f", MAX_FRACTION_DIGITS)

    # Fixed notation always writes MAX_FRACTION_DIGITS digits; drop the trailing zeros.
    decimal_point = loc.decimalPoint()
    if decimal_point in text:
        text = text.rstrip(loc.zeroDigit()).removesuffix(decimal_point)

    if _is_zero(text, loc):
        return EMPTY_DISPLAY
    return text


def display_input(raw: str) -> str:
    """The source value shown on every card."""
    return raw if raw else EMPTY_DISPLAY


def _is_zero(text: str, loc: QLocale) -> bool:
    """True for "0" and its signed variants ("-0" from tiny negative results)."""
    unsigned = text.removeprefix(loc.negativeSign()).removeprefix(loc.positiveSign())
    return unsigned == loc.zeroDigit()
