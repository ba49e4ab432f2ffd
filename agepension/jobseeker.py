"""JobSeeker Payment estimate.

A claimant over the asset limit gets nothing. Otherwise the maximum rate plus
Energy Supplement is reduced by a two-band personal income taper and, for a
couple, by a taper on the partner's income above the partner free area.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .inputs import ZERO, cap_amount, to_amount, to_flag
from .rate_data import JOBSEEKER_STATUS_ALIASES
from .rates import get_jobseeker_schedule
from .schema import JobSeekerSchedule, normalize_status


@dataclass(frozen=True, slots=True)
class JobSeekerInput:
    status: str = "single"
    has_children: bool = False
    is_homeowner: bool = False
    income_per_period: Decimal = ZERO
    partner_income_per_period: Decimal = ZERO
    assets: Decimal = ZERO

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "jobseeker") -> "JobSeekerInput":
        raw_status = data.get("status", "single")
        status = JOBSEEKER_STATUS_ALIASES.get(str(raw_status).strip().lower(), raw_status)
        return cls(
            status=normalize_status(status, f"{path}.status"),
            has_children=to_flag(data.get("children", False)),
            is_homeowner=to_flag(data.get("homeowner", False)),
            income_per_period=to_amount(data.get("income")),
            partner_income_per_period=to_amount(data.get("partner_income")),
            assets=to_amount(data.get("assets")),
        )


@dataclass(frozen=True, slots=True)
class JobSeekerResult:
    status: str
    maximum_payment: Decimal
    personal_income_reduction: Decimal
    partner_income_reduction: Decimal
    income_reduction: Decimal
    payment: Decimal
    asset_limit: Decimal
    is_asset_ineligible: bool
    annualized_payment: Decimal


def personal_income_reduction(income: Decimal, schedule: JobSeekerSchedule) -> Decimal:
    income = cap_amount(income)
    if income <= schedule.income_free_area:
        return ZERO
    lower_band = min(income, schedule.lower_taper_limit) - schedule.income_free_area
    upper_band = max(ZERO, income - schedule.lower_taper_limit)
    return lower_band * schedule.lower_taper_rate + upper_band * schedule.upper_taper_rate


def partner_income_reduction(partner_income: Decimal, status: str, schedule: JobSeekerSchedule) -> Decimal:
    if status != "couple":
        return ZERO
    excess = max(ZERO, cap_amount(partner_income) - schedule.partner_free_area)
    return excess * schedule.partner_taper_rate


def assess_jobseeker(jobseeker_input: JobSeekerInput, schedule: JobSeekerSchedule | None = None) -> JobSeekerResult:
    schedule = schedule or get_jobseeker_schedule()
    status = jobseeker_input.status
    maximum = schedule.max_payment(status, jobseeker_input.has_children)
    limit = schedule.asset_limit(status, jobseeker_input.is_homeowner)

    if cap_amount(jobseeker_input.assets) > limit:
        return JobSeekerResult(
            status=status,
            maximum_payment=maximum,
            personal_income_reduction=ZERO,
            partner_income_reduction=ZERO,
            income_reduction=ZERO,
            payment=ZERO,
            asset_limit=limit,
            is_asset_ineligible=True,
            annualized_payment=ZERO,
        )

    personal = personal_income_reduction(jobseeker_input.income_per_period, schedule)
    partner = partner_income_reduction(jobseeker_input.partner_income_per_period, status, schedule)
    reduction = personal + partner
    payment = max(ZERO, maximum - reduction)
    return JobSeekerResult(
        status=status,
        maximum_payment=maximum,
        personal_income_reduction=personal,
        partner_income_reduction=partner,
        income_reduction=reduction,
        payment=payment,
        asset_limit=limit,
        is_asset_ineligible=False,
        annualized_payment=payment * schedule.periods_per_year,
    )
