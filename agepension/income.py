"""Age Pension income test."""

from __future__ import annotations

from decimal import Decimal

from .inputs import ZERO, cap_amount, clamp
from .schema import Claimant, IncomeProfile, RateSchedule


def adjusted_income(claimant: Claimant, schedule: RateSchedule) -> Decimal:
    """Other income less the Work Bonus, if eligible. Unused Work Bonus is not carried forward."""
    disregard = schedule.work_bonus if claimant.earned_income_disregard_eligible else ZERO
    return max(ZERO, cap_amount(claimant.other_income_per_period) - disregard)


def assessable_income(profile: IncomeProfile, deemed_income: Decimal, status: str, schedule: RateSchedule) -> Decimal:
    # Disregard is per claimant; the free area applies to the couple's combined income.
    other = sum((adjusted_income(c, schedule) for c in profile.claimants_for(status)), ZERO)
    return other + max(ZERO, cap_amount(deemed_income))


def income_test(profile: IncomeProfile, deemed_income: Decimal, status: str, schedule: RateSchedule) -> Decimal:
    maximum = schedule.max_benefit(status)
    total = assessable_income(profile, deemed_income, status, schedule)
    excess = max(ZERO, total - schedule.income_free_area(status))
    reduction = excess * schedule.income_taper_rate(status)
    return clamp(maximum - reduction, maximum)
