"""Display-boundary rounding and text/JSON summaries."""

from __future__ import annotations

from dataclasses import asdict
from decimal import ROUND_HALF_UP, Decimal
import json
from pathlib import Path
from typing import Any

from .cshc import CSHCResult
from .engine import CalculationResult
from .jobseeker import JobSeekerResult
from .schema import CalculationInput, JobSeekerSchedule, RateSchedule

_BINDING_LABELS = {
    "income": "Income test applies",
    "assets": "Assets test applies",
    "both": "Income and assets tests give the same result",
}

_PERIOD_NAMES = {1: "year", 12: "month", 26: "fortnight", 52: "week"}


def period_label(periods_per_year: int) -> str:
    """Name of one payment period, e.g. 'fortnight' for 26 periods a year."""
    return _PERIOD_NAMES.get(periods_per_year, f"period (1/{periods_per_year} year)")


def round_whole(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_aud(value: Decimal, places: int = 0) -> str:
    exponent = Decimal(1).scaleb(-places)
    rounded = value.quantize(exponent, rounding=ROUND_HALF_UP)
    if rounded < 0:
        return f"-${-rounded:,.{places}f}"
    return f"${rounded:,.{places}f}"


def _display_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return round_whole(value)
    return value


def result_to_display(result: CalculationResult | CSHCResult | JobSeekerResult) -> dict[str, Any]:
    """Whole-dollar view of a result; the only place amounts are rounded."""
    return {key: _display_value(value) for key, value in asdict(result).items()}


def result_to_json(
    result: CalculationResult,
    cshc: CSHCResult | None = None,
    jobseeker: JobSeekerResult | None = None,
) -> str:
    payload: dict[str, Any] = {"age_pension": result_to_display(result)}
    if cshc is not None:
        payload["cshc"] = result_to_display(cshc)
    if jobseeker is not None:
        payload["jobseeker"] = result_to_display(jobseeker)
    return json.dumps(payload, indent=2)


def _money(value: Decimal) -> str:
    return format_aud(value)


def _money_cents(value: Decimal) -> str:
    return format_aud(value, 2)


def render_summary(calc_input: CalculationInput, result: CalculationResult, schedule: RateSchedule) -> str:
    household = calc_input.household
    couple = household.is_couple
    period = period_label(schedule.periods_per_year)
    lines = [
        f"Rates effective: {schedule.effective_date}",
        f"Household: {household.status}, {'homeowner' if household.is_homeowner else 'non-homeowner'}",
        f"Total assessable assets: {_money(result.total_assessable_assets)}",
        f"Deemed income (per {period}): {_money(result.deemed_income_per_period)}",
        f"Income test result: {_money(result.income_test_amount)}",
        f"Assets test result: {_money(result.assets_test_amount)}",
    ]
    if couple:
        lines.append(f"Estimated pension (combined / {period}): {_money(result.payable_amount)}")
        lines.append(f"Estimated pension (each / {period}): {_money(result.per_person_amount)}")
        lines.append(f"Annual (combined): {_money(result.annualized_amount)}")
        lines.append(f"Annual (each): {_money(result.annualized_per_person_amount)}")
    else:
        lines.append(f"Estimated pension (per {period}): {_money(result.payable_amount)}")
        lines.append(f"Annual: {_money(result.annualized_amount)}")
    lines.append(_BINDING_LABELS[result.binding_test])
    return "\n".join(lines)


def render_cshc_summary(result: CSHCResult) -> str:
    verdict = "Likely eligible" if result.is_eligible else "Likely not eligible"
    gap_label = "Headroom under threshold" if result.gap > 0 else "Amount over threshold"
    return "\n".join(
        [
            f"CSHC: {verdict}",
            f"Adjusted taxable income: {_money(result.adjusted_taxable_income)}",
            f"Deemed income (annual): {_money(result.deemed_income)}",
            f"Total assessable income: {_money(result.total_assessable_income)}",
            f"Income threshold: {_money(result.income_threshold)}",
            f"{gap_label}: {_money(abs(result.gap))}",
        ]
    )


def render_jobseeker_summary(result: JobSeekerResult, schedule: JobSeekerSchedule) -> str:
    period = period_label(schedule.periods_per_year)
    lines = [
        f"JobSeeker rates effective: {schedule.effective_date}",
        f"Maximum payment incl. Energy Supplement (per {period}): {_money_cents(result.maximum_payment)}",
    ]
    if result.is_asset_ineligible:
        lines.append(f"Assets exceed the limit of {_money_cents(result.asset_limit)}; no payment")
    else:
        lines.append(f"Income reduction: {_money_cents(result.personal_income_reduction)}")
        if result.status == "couple":
            lines.append(f"Partner income reduction: {_money_cents(result.partner_income_reduction)}")
    lines.append(f"Estimated JobSeeker Payment (per {period}): {_money_cents(result.payment)}")
    lines.append(f"Annual: {_money_cents(result.annualized_payment)}")
    return "\n".join(lines)


def write_report(path: str | Path, content: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
