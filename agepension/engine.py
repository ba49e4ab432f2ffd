"""Benefit resolution: run both means tests and pay the lower result."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .assets import assets_test
from .deeming import deemed_income
from .income import income_test
from .inputs import ZERO, clamp
from .rates import get_schedule
from .schema import CalculationInput, RateSchedule


@dataclass(frozen=True, slots=True)
class CalculationResult:
    status: str
    maximum_benefit: Decimal
    income_test_amount: Decimal
    assets_test_amount: Decimal
    payable_amount: Decimal
    deemed_income_per_period: Decimal
    total_assessable_assets: Decimal
    per_person_amount: Decimal
    annualized_amount: Decimal
    annualized_per_person_amount: Decimal
    binding_test: str


def _binding_test(income_amount: Decimal, assets_amount: Decimal) -> str:
    if income_amount < assets_amount:
        return "income"
    if assets_amount < income_amount:
        return "assets"
    return "both"


def resolve(
    income_test_amount: Decimal,
    assets_test_amount: Decimal,
    status: str,
    schedule: RateSchedule,
    *,
    deemed_income_per_period: Decimal = ZERO,
    total_assessable_assets: Decimal = ZERO,
) -> CalculationResult:
    """Pay the lower of the two tests and derive per-person and annual figures.

    Couples are split 50/50; individual entitlements that differ are not modelled.
    """
    maximum = schedule.max_benefit(status)
    payable = clamp(min(income_test_amount, assets_test_amount), maximum)
    per_person = payable / 2 if status == "couple" else payable
    return CalculationResult(
        status=status,
        maximum_benefit=maximum,
        income_test_amount=income_test_amount,
        assets_test_amount=assets_test_amount,
        payable_amount=payable,
        deemed_income_per_period=deemed_income_per_period,
        total_assessable_assets=total_assessable_assets,
        per_person_amount=per_person,
        annualized_amount=payable * schedule.periods_per_year,
        annualized_per_person_amount=per_person * schedule.periods_per_year,
        binding_test=_binding_test(income_test_amount, assets_test_amount),
    )


def calculate(calc_input: CalculationInput, schedule: RateSchedule | None = None) -> CalculationResult:
    schedule = schedule or get_schedule()
    status = calc_input.household.status
    total_assets = calc_input.assets.total_assessable_assets

    deemed = deemed_income(calc_input.assets.deemable_financial_assets, status, schedule)
    income_amount = income_test(calc_input.income, deemed, status, schedule)
    assets_amount = assets_test(total_assets, status, calc_input.household.is_homeowner, schedule)

    return resolve(
        income_amount,
        assets_amount,
        status,
        schedule,
        deemed_income_per_period=deemed,
        total_assessable_assets=total_assets,
    )
