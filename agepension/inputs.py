"""Fail-soft normalisation of user-entered amounts and flags."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
import re
from typing import Any

ZERO = Decimal("0")
# Larger amounts are treated as this value so arithmetic stays inside the decimal context.
MAX_AMOUNT = Decimal("1E+15")

_NON_NUMERIC_RE = re.compile(r"[^\d.]")
_TRUE_TOKENS = {"1", "true", "yes", "y", "on"}


def sanitize_currency(raw: str | None) -> str:
    """Strip everything except digits and the first decimal point."""
    if raw is None:
        return ""
    cleaned = _NON_NUMERIC_RE.sub("", str(raw))
    first, sep, rest = cleaned.partition(".")
    if not sep:
        return first
    return f"{first}.{rest.replace('.', '')}"


def parse_amount(value: Any) -> Decimal | None:
    """Parse a monetary value, returning None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(str(value))
    else:
        text = str(value).replace(",", "").replace("$", "").strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None
    if not amount.is_finite():
        return None
    return cap_amount(amount)


def cap_amount(value: Decimal) -> Decimal:
    """Limit the magnitude of an amount to MAX_AMOUNT."""
    return max(-MAX_AMOUNT, min(value, MAX_AMOUNT))


def to_amount(value: Any) -> Decimal:
    """Normalise an input amount; anything malformed, missing or negative counts as zero."""
    amount = parse_amount(value)
    if amount is None or amount < 0:
        return ZERO
    return amount


def to_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    return str(value).strip().lower() in _TRUE_TOKENS


def clamp(value: Decimal, maximum: Decimal) -> Decimal:
    return max(ZERO, min(value, maximum))
