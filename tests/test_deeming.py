from decimal import Decimal

import pytest

from agepension.deeming import annual_deemed_income, deemed_income
from tests.helpers import cents


def test_zero_assets_deem_nothing(schedule):
    assert deemed_income(Decimal("0"), "single", schedule) == 0
    assert annual_deemed_income(Decimal("0"), "couple", schedule) == 0


def test_negative_assets_deem_nothing(schedule):
    assert deemed_income(Decimal("-5000"), "single", schedule) == 0


def test_tiered_rates_for_single(schedule):
    annual = annual_deemed_income(Decimal("100000"), "single", schedule)
    # 64,200 at 0.75% + 35,800 at 2.75%
    assert annual == Decimal("1466")
    assert cents(deemed_income(Decimal("100000"), "single", schedule)) == Decimal("56.38")


def test_couple_uses_combined_threshold(schedule):
    annual = annual_deemed_income(Decimal("300000"), "couple", schedule)
    assert annual == Decimal("6126")
    assert cents(deemed_income(Decimal("300000"), "couple", schedule)) == Decimal("235.62")


@pytest.mark.parametrize("status", ["single", "couple"])
def test_threshold_is_deemed_entirely_at_lower_rate(schedule, status):
    threshold = schedule.deeming_threshold(status)
    expected = threshold * schedule.deeming_lower_rate / schedule.periods_per_year
    assert deemed_income(threshold, status, schedule) == expected


@pytest.mark.parametrize("status", ["single", "couple"])
def test_no_jump_at_threshold(schedule, status):
    threshold = schedule.deeming_threshold(status)
    step = Decimal("0.01")
    below = deemed_income(threshold - step, status, schedule)
    at = deemed_income(threshold, status, schedule)
    above = deemed_income(threshold + step, status, schedule)

    assert below < at < above
    tolerance = Decimal("1e-20")
    assert abs((above - at) - step * schedule.deeming_upper_rate / schedule.periods_per_year) < tolerance
    assert abs((at - below) - step * schedule.deeming_lower_rate / schedule.periods_per_year) < tolerance


def test_deemed_income_grows_with_assets(schedule):
    values = [deemed_income(Decimal(amount), "single", schedule) for amount in range(0, 500_001, 25_000)]
    assert values == sorted(values)
