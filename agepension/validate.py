"""Semantic validation for calculation inputs and rate schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .inputs import parse_amount
from .rate_data import CSHC_STATUSES, HOMEOWNER_KEYS, HOUSEHOLD_STATUSES, JOBSEEKER_STATUS_ALIASES
from .schema import RateSchedule

ASSET_FIELDS = ("non_deemed", "financial")
CLAIMANT_FIELDS = ("other_income",)
CSHC_AMOUNT_FIELDS = (
    "taxable_income",
    "foreign_income",
    "investment_losses",
    "employer_benefits",
    "reportable_super",
    "account_based_pension_balance",
)
JOBSEEKER_AMOUNT_FIELDS = ("income", "partner_income", "assets")


@dataclass(slots=True)
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _check_section(result: ValidationResult, data: dict[str, Any], key: str, path: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        result.errors.append(f"{path}: expected object")
        return None
    return value


def _check_enum(result: ValidationResult, path: str, value: Any, allowed: tuple[str, ...]) -> None:
    normalized = str(value).strip().lower() if value is not None else ""
    if normalized not in allowed:
        expected = ", ".join(allowed)
        result.errors.append(f"{path}: '{value}' is not valid; expected one of [{expected}]")


def _check_amount(result: ValidationResult, path: str, value: Any) -> None:
    if value is None or value == "":
        return
    amount = parse_amount(value)
    if amount is None:
        result.warnings.append(f"{path}: '{value}' is not a number; treated as 0")
    elif amount < 0:
        result.warnings.append(f"{path}: negative amount {value} treated as 0")


def validate_input_data(data: dict[str, Any]) -> ValidationResult:
    result = ValidationResult()

    household = _check_section(result, data, "household", "household") or {}
    status = household.get("status", "single")
    _check_enum(result, "household.status", status, HOUSEHOLD_STATUSES)
    is_couple = str(status).strip().lower() == "couple"

    assets = _check_section(result, data, "assets", "assets") or {}
    for key in ASSET_FIELDS:
        _check_amount(result, f"assets.{key}", assets.get(key))

    income = _check_section(result, data, "income", "income") or {}
    for who in ("self", "partner"):
        claimant = _check_section(result, income, who, f"income.{who}")
        if claimant is None:
            continue
        for key in CLAIMANT_FIELDS:
            _check_amount(result, f"income.{who}.{key}", claimant.get(key))

    partner = income.get("partner")
    if isinstance(partner, dict) and partner and not is_couple:
        result.warnings.append("income.partner: ignored for single households")

    cshc = _check_section(result, data, "cshc", "cshc")
    if cshc is not None:
        _check_enum(result, "cshc.status", cshc.get("status", "single"), CSHC_STATUSES)
        for key in CSHC_AMOUNT_FIELDS:
            _check_amount(result, f"cshc.{key}", cshc.get(key))
        _check_amount(result, "cshc.children", cshc.get("children"))

    jobseeker = _check_section(result, data, "jobseeker", "jobseeker")
    if jobseeker is not None:
        allowed = HOUSEHOLD_STATUSES + tuple(JOBSEEKER_STATUS_ALIASES)
        _check_enum(result, "jobseeker.status", jobseeker.get("status", "single"), allowed)
        for key in JOBSEEKER_AMOUNT_FIELDS:
            _check_amount(result, f"jobseeker.{key}", jobseeker.get(key))

    return result


def _check_non_negative(result: ValidationResult, path: str, value: Decimal) -> None:
    if value < 0:
        result.errors.append(f"{path}: must be >= 0")


def validate_schedule(schedule: RateSchedule) -> ValidationResult:
    result = ValidationResult()

    if schedule.periods_per_year <= 0:
        result.errors.append("periods_per_year: must be > 0")
    _check_non_negative(result, "max_rate.single", schedule.max_rate_single)
    _check_non_negative(result, "max_rate.couple_each", schedule.max_rate_couple_each)
    _check_non_negative(result, "work_bonus", schedule.work_bonus)
    _check_non_negative(result, "assets_test.taper_rate", schedule.assets_taper_rate)
    if schedule.assets_taper_unit <= 0:
        result.errors.append("assets_test.taper_unit: must be > 0")

    for status in HOUSEHOLD_STATUSES:
        _check_non_negative(result, f"income_test.free_area.{status}", schedule.income_free_area(status))
        _check_non_negative(result, f"income_test.taper_rate.{status}", schedule.income_taper_rate(status))
        _check_non_negative(result, f"deeming.threshold.{status}", schedule.deeming_threshold(status))
        for is_homeowner, label in HOMEOWNER_KEYS.items():
            limit, cutoff = schedule.asset_limits(status, is_homeowner)
            _check_non_negative(result, f"assets_test.full_limit.{status}.{label}", limit)
            if cutoff <= limit:
                result.errors.append(f"assets_test.cutoff.{status}.{label}: must be > full_limit")

    _check_non_negative(result, "deeming.lower_rate", schedule.deeming_lower_rate)
    _check_non_negative(result, "deeming.upper_rate", schedule.deeming_upper_rate)
    if schedule.deeming_lower_rate > schedule.deeming_upper_rate:
        result.warnings.append("deeming.lower_rate: exceeds upper_rate; deeming is not progressive")

    return result
