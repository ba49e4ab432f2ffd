"""Commonwealth Seniors Health Card income test.

Eligibility compares adjusted taxable income plus deemed income on
account-based pensions against an annual threshold that depends on
relationship status and the number of dependent children. The assets test
does not apply to the card.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .deeming import annual_deemed_income
from .inputs import ZERO, cap_amount, parse_amount, to_amount
from .rate_data import CSHC_STATUSES
from .rates import CSHCThresholds, get_cshc_thresholds, get_schedule
from .schema import RateSchedule, SchemaError


_MAX_CHILDREN = 99


@dataclass(frozen=True, slots=True)
class CSHCInput:
    status: str = "single"
    children: int = 0
    taxable_income: Decimal = ZERO
    foreign_income: Decimal = ZERO
    investment_losses: Decimal = ZERO
    employer_benefits: Decimal = ZERO
    reportable_super: Decimal = ZERO
    account_based_pension_balance: Decimal = ZERO

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "cshc") -> "CSHCInput":
        status = str(data.get("status", "single")).strip().lower()
        if status not in CSHC_STATUSES:
            expected = ", ".join(CSHC_STATUSES)
            raise SchemaError(f"{path}.status: '{data.get('status')}' is not valid; expected one of [{expected}]")
        children = parse_amount(data.get("children"))
        return cls(
            status=status,
            children=max(0, int(children)) if children is not None else 0,
            taxable_income=to_amount(data.get("taxable_income")),
            foreign_income=to_amount(data.get("foreign_income")),
            investment_losses=to_amount(data.get("investment_losses")),
            employer_benefits=to_amount(data.get("employer_benefits")),
            reportable_super=to_amount(data.get("reportable_super")),
            account_based_pension_balance=to_amount(data.get("account_based_pension_balance")),
        )


@dataclass(frozen=True, slots=True)
class CSHCResult:
    adjusted_taxable_income: Decimal
    deemed_income: Decimal
    total_assessable_income: Decimal
    income_threshold: Decimal
    is_eligible: bool
    gap: Decimal


def _deeming_status(status: str) -> str:
    # Illness-separated couples are deemed on the combined couple threshold.
    return "single" if status == "single" else "couple"


def assess_cshc(
    cshc_input: CSHCInput,
    schedule: RateSchedule | None = None,
    thresholds: CSHCThresholds | None = None,
) -> CSHCResult:
    schedule = schedule or get_schedule()
    thresholds = thresholds or get_cshc_thresholds(schedule.effective_date)

    ati = sum(
        (
            cap_amount(amount)
            for amount in (
                cshc_input.taxable_income,
                cshc_input.foreign_income,
                cshc_input.investment_losses,
                cshc_input.employer_benefits,
                cshc_input.reportable_super,
            )
        ),
        ZERO,
    )
    deemed = annual_deemed_income(cshc_input.account_based_pension_balance, _deeming_status(cshc_input.status), schedule)
    total = ati + deemed
    children = min(max(0, cshc_input.children), _MAX_CHILDREN)
    threshold = thresholds.income_threshold(cshc_input.status) + thresholds.child_add_on * children

    return CSHCResult(
        adjusted_taxable_income=ati,
        deemed_income=deemed,
        total_assessable_income=total,
        income_threshold=threshold,
        is_eligible=total < threshold,
        gap=threshold - total,
    )
