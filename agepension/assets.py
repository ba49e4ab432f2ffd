"""Age Pension assets test."""

from __future__ import annotations

from decimal import Decimal

from .inputs import ZERO, clamp
from .schema import RateSchedule


def assets_test(total_assets: Decimal, status: str, is_homeowner: bool, schedule: RateSchedule) -> Decimal:
    maximum = schedule.max_benefit(status)
    full_limit, cutoff = schedule.asset_limits(status, is_homeowner)

    # Checked before tapering so nothing is payable at or beyond the cut-off.
    if total_assets >= cutoff:
        return ZERO

    excess = max(ZERO, total_assets - full_limit)
    reduction = (excess / schedule.assets_taper_unit) * schedule.assets_taper_rate
    return clamp(maximum - reduction, maximum)
