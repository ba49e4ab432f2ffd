import copy
from decimal import Decimal
import json
from pathlib import Path

from agepension.schema import AssetHolding, CalculationInput, Claimant, HouseholdProfile, IncomeProfile

CENT = Decimal("0.01")


def write_json(tmp_path: Path, data: dict, filename: str = "input.json") -> Path:
    path = tmp_path / filename
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def clone_input(data: dict) -> dict:
    return copy.deepcopy(data)


def cents(value: Decimal) -> Decimal:
    return value.quantize(CENT)


def make_input(
    status: str = "single",
    homeowner: bool = True,
    non_deemed: str = "0",
    financial: str = "0",
    incomes: tuple[tuple[str, bool], ...] = (("0", False),),
) -> CalculationInput:
    return CalculationInput(
        household=HouseholdProfile(status=status, is_homeowner=homeowner),
        assets=AssetHolding(non_deemed_assets=Decimal(non_deemed), deemable_financial_assets=Decimal(financial)),
        income=IncomeProfile(
            claimants=tuple(
                Claimant(other_income_per_period=Decimal(amount), earned_income_disregard_eligible=eligible)
                for amount, eligible in incomes
            )
        ),
    )
