"""Deemed income on financial assets."""

from __future__ import annotations

from decimal import Decimal

from .inputs import ZERO, cap_amount
from .schema import RateSchedule


def annual_deemed_income(financial_assets: Decimal, status: str, schedule: RateSchedule) -> Decimal:
    """Deem the lower rate up to the status threshold and the upper rate on the remainder."""
    if financial_assets <= 0:
        return ZERO

    financial_assets = cap_amount(financial_assets)
    threshold = schedule.deeming_threshold(status)
    lower_part = min(financial_assets, threshold)
    upper_part = max(ZERO, financial_assets - threshold)
    return lower_part * schedule.deeming_lower_rate + upper_part * schedule.deeming_upper_rate


def deemed_income(financial_assets: Decimal, status: str, schedule: RateSchedule) -> Decimal:
    annual = annual_deemed_income(financial_assets, status, schedule)
    if annual == 0:
        return ZERO
    return annual / schedule.periods_per_year
