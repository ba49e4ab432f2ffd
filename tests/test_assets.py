from decimal import Decimal

import pytest

from agepension.assets import assets_test
from agepension.schema import ScheduleLookupError

CELLS = [("single", True), ("single", False), ("couple", True), ("couple", False)]


@pytest.mark.parametrize(("status", "homeowner"), CELLS)
def test_below_full_limit_pays_maximum(schedule, status, homeowner):
    limit, _ = schedule.asset_limits(status, homeowner)
    assert assets_test(limit, status, homeowner, schedule) == schedule.max_benefit(status)
    assert assets_test(Decimal("0"), status, homeowner, schedule) == schedule.max_benefit(status)


def test_single_homeowner_taper(schedule):
    # $100,000 over the limit at $3 per $1,000
    assert assets_test(Decimal("421500"), "single", True, schedule) == Decimal("878.70")


def test_couple_non_homeowner_taper(schedule):
    assert assets_test(Decimal("839500"), "couple", False, schedule) == Decimal("1477.00")


def test_partial_thousand_tapers_proportionally(schedule):
    assert assets_test(Decimal("482000"), "couple", True, schedule) == Decimal("1775.50")


@pytest.mark.parametrize(("status", "homeowner"), CELLS)
def test_at_or_beyond_cutoff_is_exactly_zero(schedule, status, homeowner):
    _, cutoff = schedule.asset_limits(status, homeowner)
    assert assets_test(cutoff, status, homeowner, schedule) == 0
    assert assets_test(cutoff + 1, status, homeowner, schedule) == 0
    assert assets_test(cutoff * 3, status, homeowner, schedule) == 0


@pytest.mark.parametrize(("status", "homeowner"), CELLS)
def test_assets_test_is_non_increasing_and_clamped(schedule, status, homeowner):
    results = [assets_test(Decimal(amount), status, homeowner, schedule) for amount in range(0, 1_500_001, 10_000)]
    maximum = schedule.max_benefit(status)
    assert all(later <= earlier for earlier, later in zip(results, results[1:]))
    assert all(0 <= value <= maximum for value in results)


def test_homeowner_limits_are_lower(schedule):
    amount = Decimal("600000")
    assert assets_test(amount, "single", True, schedule) < assets_test(amount, "single", False, schedule)


def test_unknown_status_is_a_lookup_error(schedule):
    with pytest.raises(ScheduleLookupError):
        assets_test(Decimal("1000"), "widowed", True, schedule)
