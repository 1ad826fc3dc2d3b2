#!/usr/bin/env python3
"""
Currency Input Parsing and Display Utilities

Normalizes loosely formatted amount text (typed, spoken or scanned) into a
validated number, and formats numbers for display.

Parsing Rules:
- Currency symbols ($ € £ ¥ ₹), whitespace and letters are stripped
- When both '.' and ',' appear, the one that appears last is the decimal point
- A single comma followed by at most 2 characters is a decimal comma
- Any other commas are thousands separators
- Several dots are thousands separators when every group after the first
  has exactly 3 digits (1.000.000); otherwise only the last dot is kept

Key Principles:
- Every function is total: invalid input yields a sentinel, never an exception
- Parse failure is signalled with ``math.nan``; callers test with ``math.isfinite``
- Stored amounts are NUMERIC(10,2), so the largest accepted amount is 99,999,999.99
"""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Union

AmountInput = Union[str, int, float, Decimal, None]

MAX_AMOUNT = 99_999_999.99
CURRENCY_SYMBOLS = "$€£¥₹"

FORMAT_ERROR_MESSAGE = "Please enter a valid number (e.g., 1000 or 1,000.50)"
NOT_POSITIVE_ERROR_MESSAGE = "Amount must be greater than zero"

_STRIP_RE = re.compile(rf"[{re.escape(CURRENCY_SYMBOLS)}]|\s|[a-zA-Z]")
_NUMBER_PREFIX_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_THOUSANDS_GROUP_RE = re.compile(r"[0-9]{3}")
_NUMERIC_KEYBOARD_RE = re.compile(r"[^0-9.,-]")


def _is_finite(value: float | int | Decimal) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float is still finite
        return True
    except ValueError:
        # signaling NaN Decimal
        return False


def _normalize_separators(cleaned: str) -> str:
    """Rewrite thousands/decimal separators so only a single '.' remains as decimal point."""
    dot_count = cleaned.count(".")
    comma_count = cleaned.count(",")

    if dot_count and comma_count:
        # Whichever separator appears last is the decimal point
        decimal_index = max(cleaned.rfind("."), cleaned.rfind(","))
        integer_part = cleaned[:decimal_index].replace(".", "").replace(",", "")
        return f"{integer_part}.{cleaned[decimal_index + 1:]}"

    if comma_count:
        comma_index = cleaned.rfind(",")
        if comma_count == 1 and len(cleaned) - comma_index - 1 <= 2:
            # 100,50 -> 100.50
            return cleaned.replace(",", ".")
        # 1,000 or 1,000,000
        return cleaned.replace(",", "")

    if dot_count > 1:
        groups = cleaned.split(".")
        if all(_THOUSANDS_GROUP_RE.fullmatch(group) for group in groups[1:]):
            # 1.000.000 -> 1000000
            return "".join(groups)
        # 1.000.50 -> 1000.50
        last_dot = cleaned.rfind(".")
        return cleaned[:last_dot].replace(".", "") + cleaned[last_dot:]

    return cleaned


def _parse_float_prefix(text: str) -> float:
    """Parse the leading numeric portion of text, ignoring anything after it."""
    match = _NUMBER_PREFIX_RE.match(text)
    if not match:
        return math.nan
    try:
        result = float(match.group(0))
    except (ValueError, OverflowError):
        return math.nan
    return result if math.isfinite(result) else math.nan


def parse_amount(value: AmountInput) -> float:
    """
    Parse a currency string into a number.

    Numbers are passed through unchanged. Blank or unparseable text
    returns ``math.nan``.

    Args:
        value: Raw amount like '$1,234.56', '1.234.567,89', '100,50' or a number

    Returns:
        Parsed amount, or NaN if the text holds no number

    Examples:
        parse_amount("$1,234.56") -> 1234.56
        parse_amount("1.234.567,89") -> 1234567.89
        parse_amount("100,50") -> 100.5
        parse_amount("1,000") -> 1000.0
        parse_amount("") -> nan
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, Decimal):
        return math.nan if value.is_nan() else float(value)
    if value is None:
        return math.nan

    text = str(value)
    if not text.strip():
        return math.nan

    cleaned = _STRIP_RE.sub("", text)
    return _parse_float_prefix(_normalize_separators(cleaned))


def is_valid_amount(value: AmountInput) -> bool:
    """Check if a value parses to a positive amount within the storage limit."""
    parsed = parse_amount(value)
    return _is_finite(parsed) and 0 < parsed <= MAX_AMOUNT


def amount_validation_error(value: AmountInput) -> str | None:
    """
    Get a user-facing validation message for an amount.

    Checks run in order: format, sign, upper bound.

    Args:
        value: Raw amount as entered

    Returns:
        Error message, or None if the amount is valid
    """
    parsed = parse_amount(value)

    if not _is_finite(parsed):
        return FORMAT_ERROR_MESSAGE

    if parsed <= 0:
        return NOT_POSITIVE_ERROR_MESSAGE

    if parsed > MAX_AMOUNT:
        return f"Amount exceeds maximum limit of {format_for_display(MAX_AMOUNT)}"

    return None


def format_for_display(value: float | int | Decimal, show_cents: bool = True) -> str:
    """
    Format a number with thousands separators for display (no currency symbol).

    Halves round away from zero, applied to the exact binary value of the
    float, so 1234.5 shows as "1,235" but 1.005 (stored as 1.00499...) shows
    as "1.00".

    Args:
        value: Amount to format
        show_cents: Show two fraction digits when True, none when False

    Returns:
        Formatted string like "1,234.56" or "1,235"; "0" for NaN/infinity

    Examples:
        format_for_display(1234.5) -> "1,234.50"
        format_for_display(1234.5, show_cents=False) -> "1,235"
    """
    try:
        if not _is_finite(value):
            return "0"
    except TypeError:
        return "0"

    exact = Decimal(value)
    exponent = Decimal("0.01") if show_cents else Decimal("1")
    # Precision must cover every integer digit plus the cents
    context = Context(prec=max(28, exact.adjusted() + 3), rounding=ROUND_HALF_UP)
    rounded = exact.quantize(exponent, context=context)
    if rounded.is_zero():
        rounded = abs(rounded)

    return f"{rounded:,.2f}" if show_cents else f"{rounded:,.0f}"


def sanitize_numeric_input(text: str) -> str:
    """Strip everything except digits, '.', ',' and '-' from numeric keyboard input."""
    return _NUMERIC_KEYBOARD_RE.sub("", text)


def parse_amount_to_cents(value: AmountInput) -> int | None:
    """
    Parse and validate an amount, returning integer cents for storage.

    Args:
        value: Raw amount as entered

    Returns:
        Amount in cents (1234 for '$12.34'), or None if the amount is invalid

    Examples:
        parse_amount_to_cents("$1,234.56") -> 123456
        parse_amount_to_cents("abc") -> None
    """
    if not is_valid_amount(value):
        return None
    # repr() keeps the shortest round-tripping digits, avoiding binary artifacts
    decimal_amount = Decimal(repr(float(parse_amount(value))))
    return int((decimal_amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
