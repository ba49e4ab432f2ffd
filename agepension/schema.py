"""Calculation input and rate schedule dataclasses, plus JSON loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .inputs import ZERO, cap_amount, to_amount, to_flag
from .rate_data import HOMEOWNER_KEYS, HOUSEHOLD_STATUSES


class SchemaError(ValueError):
    """Raised when raw JSON cannot be parsed into schema objects."""


class ScheduleLookupError(LookupError):
    """Raised when a rate schedule has no entry for the requested key."""


def _expect_dict(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(f"{path}: expected object")
    return value


def _require(data: dict[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise SchemaError(f"{path}.{key}: missing required field")
    return data[key]


def _optional(data: dict[str, Any], key: str, default: Any = None) -> Any:
    return data.get(key, default)


def _decimal(value: Any, path: str) -> Decimal:
    if isinstance(value, bool):
        raise SchemaError(f"{path}: expected number")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise SchemaError(f"{path}: expected number, got {value!r}") from exc
    if not amount.is_finite():
        raise SchemaError(f"{path}: expected finite number")
    return amount


def _by_status(data: dict[str, Any], path: str) -> Mapping[str, Decimal]:
    return MappingProxyType(
        {status: _decimal(_require(data, status, path), f"{path}.{status}") for status in HOUSEHOLD_STATUSES}
    )


def _by_cell(data: dict[str, Any], path: str) -> Mapping[tuple[str, bool], Decimal]:
    cells: dict[tuple[str, bool], Decimal] = {}
    for status in HOUSEHOLD_STATUSES:
        row = _expect_dict(_require(data, status, path), f"{path}.{status}")
        for is_homeowner, key in HOMEOWNER_KEYS.items():
            cells[(status, is_homeowner)] = _decimal(_require(row, key, f"{path}.{status}"), f"{path}.{status}.{key}")
    return MappingProxyType(cells)


def _positive_decimal(value: Any, path: str) -> Decimal:
    amount = _decimal(value, path)
    if amount <= 0:
        raise SchemaError(f"{path}: must be > 0")
    return amount


def _periods_per_year(data: dict[str, Any], path: str) -> int:
    periods = _require(data, "periods_per_year", path)
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise SchemaError(f"{path}.periods_per_year: expected integer")
    if periods <= 0:
        raise SchemaError(f"{path}.periods_per_year: must be > 0")
    return periods


def normalize_status(value: Any, path: str = "household.status") -> str:
    status = str(value).strip().lower() if value is not None else ""
    if status not in HOUSEHOLD_STATUSES:
        expected = ", ".join(HOUSEHOLD_STATUSES)
        raise SchemaError(f"{path}: '{value}' is not valid; expected one of [{expected}]")
    return status


@dataclass(frozen=True, slots=True)
class HouseholdProfile:
    status: str = "single"
    is_homeowner: bool = True

    @property
    def is_couple(self) -> bool:
        return self.status == "couple"

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "household") -> "HouseholdProfile":
        return cls(
            status=normalize_status(_optional(data, "status", "single"), f"{path}.status"),
            is_homeowner=to_flag(_optional(data, "homeowner", True)),
        )


@dataclass(frozen=True, slots=True)
class AssetHolding:
    non_deemed_assets: Decimal = ZERO
    deemable_financial_assets: Decimal = ZERO

    @property
    def total_assessable_assets(self) -> Decimal:
        return cap_amount(self.non_deemed_assets) + cap_amount(self.deemable_financial_assets)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssetHolding":
        return cls(
            non_deemed_assets=to_amount(_optional(data, "non_deemed")),
            deemable_financial_assets=to_amount(_optional(data, "financial")),
        )


@dataclass(frozen=True, slots=True)
class Claimant:
    other_income_per_period: Decimal = ZERO
    earned_income_disregard_eligible: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Claimant":
        return cls(
            other_income_per_period=to_amount(_optional(data, "other_income")),
            earned_income_disregard_eligible=to_flag(_optional(data, "work_bonus", False)),
        )


@dataclass(frozen=True, slots=True)
class IncomeProfile:
    claimants: tuple[Claimant, ...] = field(default_factory=tuple)

    def claimants_for(self, status: str) -> tuple[Claimant, ...]:
        """Return the claimants assessed for a household: one for single, two for couple."""
        count = 2 if status == "couple" else 1
        padded = self.claimants + tuple(Claimant() for _ in range(max(0, count - len(self.claimants))))
        return padded[:count]

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "income") -> "IncomeProfile":
        claimants = [Claimant.from_dict(_expect_dict(_optional(data, "self", {}), f"{path}.self"))]
        partner_raw = _optional(data, "partner")
        if partner_raw is not None:
            claimants.append(Claimant.from_dict(_expect_dict(partner_raw, f"{path}.partner")))
        return cls(claimants=tuple(claimants))


@dataclass(frozen=True, slots=True)
class CalculationInput:
    household: HouseholdProfile = field(default_factory=HouseholdProfile)
    assets: AssetHolding = field(default_factory=AssetHolding)
    income: IncomeProfile = field(default_factory=IncomeProfile)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalculationInput":
        return cls(
            household=HouseholdProfile.from_dict(_expect_dict(_optional(data, "household", {}), "household")),
            assets=AssetHolding.from_dict(_expect_dict(_optional(data, "assets", {}), "assets")),
            income=IncomeProfile.from_dict(_expect_dict(_optional(data, "income", {}), "income")),
        )


@dataclass(frozen=True, slots=True)
class RateSchedule:
    """Versioned, read-only Age Pension rates. Per-period figures use one period unit."""

    effective_date: str
    periods_per_year: int
    max_rate_single: Decimal
    max_rate_couple_each: Decimal
    income_free_areas: Mapping[str, Decimal]
    income_taper_rates: Mapping[str, Decimal]
    full_benefit_limits: Mapping[tuple[str, bool], Decimal]
    hard_cutoffs: Mapping[tuple[str, bool], Decimal]
    assets_taper_rate: Decimal
    assets_taper_unit: Decimal
    deeming_thresholds: Mapping[str, Decimal]
    deeming_lower_rate: Decimal
    deeming_upper_rate: Decimal
    work_bonus: Decimal

    def max_benefit(self, status: str) -> Decimal:
        if status == "single":
            return self.max_rate_single
        if status == "couple":
            return self.max_rate_couple_each * 2
        raise ScheduleLookupError(f"max_rate: no entry for status '{status}'")

    def income_free_area(self, status: str) -> Decimal:
        return self._lookup(self.income_free_areas, status, "income_test.free_area")

    def income_taper_rate(self, status: str) -> Decimal:
        return self._lookup(self.income_taper_rates, status, "income_test.taper_rate")

    def deeming_threshold(self, status: str) -> Decimal:
        return self._lookup(self.deeming_thresholds, status, "deeming.threshold")

    def asset_limits(self, status: str, is_homeowner: bool) -> tuple[Decimal, Decimal]:
        """Return (full_benefit_limit, hard_cutoff) for a household."""
        key = (status, bool(is_homeowner))
        limit = self._lookup(self.full_benefit_limits, key, "assets_test.full_limit")
        cutoff = self._lookup(self.hard_cutoffs, key, "assets_test.cutoff")
        return limit, cutoff

    def _lookup(self, table: Mapping[Any, Decimal], key: Any, name: str) -> Decimal:
        try:
            return table[key]
        except KeyError:
            raise ScheduleLookupError(f"{name}: no entry for {key!r} in schedule {self.effective_date}") from None

    @classmethod
    def from_dict(cls, data: dict[str, Any], effective_date: str, path: str = "schedule") -> "RateSchedule":
        max_rate = _expect_dict(_require(data, "max_rate", path), f"{path}.max_rate")
        income = _expect_dict(_require(data, "income_test", path), f"{path}.income_test")
        assets = _expect_dict(_require(data, "assets_test", path), f"{path}.assets_test")
        deeming = _expect_dict(_require(data, "deeming", path), f"{path}.deeming")

        return cls(
            effective_date=effective_date,
            periods_per_year=_periods_per_year(data, path),
            max_rate_single=_decimal(_require(max_rate, "single", f"{path}.max_rate"), f"{path}.max_rate.single"),
            max_rate_couple_each=_decimal(_require(max_rate, "couple_each", f"{path}.max_rate"), f"{path}.max_rate.couple_each"),
            income_free_areas=_by_status(
                _expect_dict(_require(income, "free_area", f"{path}.income_test"), f"{path}.income_test.free_area"),
                f"{path}.income_test.free_area",
            ),
            income_taper_rates=_by_status(
                _expect_dict(_require(income, "taper_rate", f"{path}.income_test"), f"{path}.income_test.taper_rate"),
                f"{path}.income_test.taper_rate",
            ),
            full_benefit_limits=_by_cell(
                _expect_dict(_require(assets, "full_limit", f"{path}.assets_test"), f"{path}.assets_test.full_limit"),
                f"{path}.assets_test.full_limit",
            ),
            hard_cutoffs=_by_cell(
                _expect_dict(_require(assets, "cutoff", f"{path}.assets_test"), f"{path}.assets_test.cutoff"),
                f"{path}.assets_test.cutoff",
            ),
            assets_taper_rate=_decimal(_require(assets, "taper_rate", f"{path}.assets_test"), f"{path}.assets_test.taper_rate"),
            assets_taper_unit=_positive_decimal(
                _require(assets, "taper_unit", f"{path}.assets_test"), f"{path}.assets_test.taper_unit"
            ),
            deeming_thresholds=_by_status(
                _expect_dict(_require(deeming, "threshold", f"{path}.deeming"), f"{path}.deeming.threshold"),
                f"{path}.deeming.threshold",
            ),
            deeming_lower_rate=_decimal(_require(deeming, "lower_rate", f"{path}.deeming"), f"{path}.deeming.lower_rate"),
            deeming_upper_rate=_decimal(_require(deeming, "upper_rate", f"{path}.deeming"), f"{path}.deeming.upper_rate"),
            work_bonus=_decimal(_optional(data, "work_bonus", "0"), f"{path}.work_bonus"),
        )


@dataclass(frozen=True, slots=True)
class JobSeekerSchedule:
    """Read-only JobSeeker Payment rates for one effective date."""

    effective_date: str
    periods_per_year: int
    max_rate_single: Decimal
    max_rate_single_with_children: Decimal
    max_rate_couple: Decimal
    energy_supplements: Mapping[str, Decimal]
    asset_limits: Mapping[tuple[str, bool], Decimal]
    income_free_area: Decimal
    lower_taper_limit: Decimal
    lower_taper_rate: Decimal
    upper_taper_rate: Decimal
    partner_free_area: Decimal
    partner_taper_rate: Decimal

    def max_payment(self, status: str, has_children: bool = False) -> Decimal:
        """Base rate plus Energy Supplement, per person."""
        if status == "single":
            base = self.max_rate_single_with_children if has_children else self.max_rate_single
        elif status == "couple":
            base = self.max_rate_couple
        else:
            raise ScheduleLookupError(f"jobseeker.max_rate: no entry for status '{status}'")
        return base + self.energy_supplements[status]

    def asset_limit(self, status: str, is_homeowner: bool) -> Decimal:
        key = (status, bool(is_homeowner))
        try:
            return self.asset_limits[key]
        except KeyError:
            raise ScheduleLookupError(
                f"jobseeker.asset_limit: no entry for {key!r} in schedule {self.effective_date}"
            ) from None

    @classmethod
    def from_dict(cls, data: dict[str, Any], effective_date: str, path: str = "jobseeker") -> "JobSeekerSchedule":
        max_rate = _expect_dict(_require(data, "max_rate", path), f"{path}.max_rate")
        energy = _expect_dict(_require(data, "energy_supplement", path), f"{path}.energy_supplement")
        income = _expect_dict(_require(data, "income_test", path), f"{path}.income_test")
        partner = _expect_dict(_require(data, "partner_income", path), f"{path}.partner_income")

        def rate(section: dict[str, Any], key: str, section_path: str) -> Decimal:
            return _decimal(_require(section, key, section_path), f"{section_path}.{key}")

        free_area = rate(income, "free_area", f"{path}.income_test")
        lower_taper_limit = rate(income, "lower_taper_limit", f"{path}.income_test")
        if lower_taper_limit < free_area:
            raise SchemaError(f"{path}.income_test.lower_taper_limit: must be >= free_area")

        return cls(
            effective_date=effective_date,
            periods_per_year=_periods_per_year(data, path),
            max_rate_single=rate(max_rate, "single", f"{path}.max_rate"),
            max_rate_single_with_children=rate(max_rate, "single_with_children", f"{path}.max_rate"),
            max_rate_couple=rate(max_rate, "couple", f"{path}.max_rate"),
            energy_supplements=_by_status(energy, f"{path}.energy_supplement"),
            asset_limits=_by_cell(
                _expect_dict(_require(data, "asset_limit", path), f"{path}.asset_limit"),
                f"{path}.asset_limit",
            ),
            income_free_area=free_area,
            lower_taper_limit=lower_taper_limit,
            lower_taper_rate=rate(income, "lower_taper_rate", f"{path}.income_test"),
            upper_taper_rate=rate(income, "upper_taper_rate", f"{path}.income_test"),
            partner_free_area=rate(partner, "free_area", f"{path}.partner_income"),
            partner_taper_rate=rate(partner, "taper_rate", f"{path}.partner_income"),
        )


def _read_json_object(path: str | Path, name: str) -> dict[str, Any]:
    source = Path(path)
    raw = json.loads(source.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise SchemaError(f"{name}: root must be a JSON object")
    return raw


def load_input_data(path: str | Path) -> dict[str, Any]:
    """Read a calculation input document without normalising it."""
    return _read_json_object(path, "input")


def load_input(path: str | Path) -> CalculationInput:
    """Load calculation input JSON into immutable dataclasses."""
    return CalculationInput.from_dict(load_input_data(path))


def load_schedule(path: str | Path) -> RateSchedule:
    """Load a rate schedule JSON document; its ``effective_date`` field names the snapshot."""
    raw = _read_json_object(path, "schedule")
    effective_date = str(_require(raw, "effective_date", "schedule"))
    return RateSchedule.from_dict(raw, effective_date)
