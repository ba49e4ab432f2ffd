"""Lookup of rate schedules shipped with the package."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from .rate_data import AGE_PENSION_RATES, CSHC_STATUSES, CSHC_THRESHOLDS, DEFAULT_EFFECTIVE_DATE, JOBSEEKER_RATES
from .schema import JobSeekerSchedule, RateSchedule, ScheduleLookupError, SchemaError


@dataclass(frozen=True, slots=True)
class CSHCThresholds:
    effective_date: str
    income_thresholds: Mapping[str, Decimal]
    child_add_on: Decimal

    def income_threshold(self, status: str) -> Decimal:
        try:
            return self.income_thresholds[status]
        except KeyError:
            raise ScheduleLookupError(f"cshc.income_threshold: no entry for status '{status}'") from None


def available_effective_dates() -> list[str]:
    return sorted(AGE_PENSION_RATES)


@lru_cache(maxsize=None)
def get_schedule(effective_date: str | None = None) -> RateSchedule:
    """Return the shared, read-only schedule for an effective date (default: latest snapshot)."""
    date = effective_date or DEFAULT_EFFECTIVE_DATE
    if date not in AGE_PENSION_RATES:
        expected = ", ".join(available_effective_dates())
        raise ScheduleLookupError(f"no Age Pension rates for effective date '{date}'; available: [{expected}]")
    return RateSchedule.from_dict(AGE_PENSION_RATES[date], date, path=f"rates[{date}]")


@lru_cache(maxsize=None)
def get_cshc_thresholds(effective_date: str | None = None) -> CSHCThresholds:
    date = effective_date or DEFAULT_EFFECTIVE_DATE
    if date not in CSHC_THRESHOLDS:
        raise ScheduleLookupError(f"no CSHC thresholds for effective date '{date}'")
    raw = CSHC_THRESHOLDS[date]
    thresholds = raw["income_threshold"]
    missing = [status for status in CSHC_STATUSES if status not in thresholds]
    if missing:
        raise SchemaError(f"cshc[{date}].income_threshold: missing {', '.join(missing)}")
    return CSHCThresholds(
        effective_date=date,
        income_thresholds=MappingProxyType({status: Decimal(thresholds[status]) for status in CSHC_STATUSES}),
        child_add_on=Decimal(raw["child_add_on"]),
    )


@lru_cache(maxsize=None)
def get_jobseeker_schedule(effective_date: str | None = None) -> JobSeekerSchedule:
    date = effective_date or DEFAULT_EFFECTIVE_DATE
    if date not in JOBSEEKER_RATES:
        expected = ", ".join(sorted(JOBSEEKER_RATES))
        raise ScheduleLookupError(f"no JobSeeker rates for effective date '{date}'; available: [{expected}]")
    return JobSeekerSchedule.from_dict(JOBSEEKER_RATES[date], date, path=f"jobseeker[{date}]")
