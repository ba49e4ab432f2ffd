import copy
from decimal import Decimal

import pytest

from agepension.inputs import MAX_AMOUNT
from agepension.rate_data import AGE_PENSION_RATES, JOBSEEKER_RATES
from agepension.schema import (
    AssetHolding,
    CalculationInput,
    Claimant,
    IncomeProfile,
    JobSeekerSchedule,
    RateSchedule,
    ScheduleLookupError,
    SchemaError,
    load_input,
    load_schedule,
)
from tests.helpers import clone_input, write_json


def _schedule_dict() -> dict:
    data = copy.deepcopy(AGE_PENSION_RATES["2025-09-20"])
    data["effective_date"] = "custom"
    return data


def test_load_input_from_file(tmp_path, sample_input_dict):
    calc_input = load_input(write_json(tmp_path, sample_input_dict))

    assert calc_input.household.status == "single"
    assert calc_input.household.is_homeowner is True
    assert calc_input.assets.non_deemed_assets == Decimal("200000")
    assert calc_input.assets.deemable_financial_assets == Decimal("100000")
    assert calc_input.assets.total_assessable_assets == Decimal("300000")
    assert calc_input.income.claimants == (Claimant(Decimal("300"), False),)


def test_status_is_case_insensitive(sample_input_dict):
    data = clone_input(sample_input_dict)
    data["household"]["status"] = " Couple "
    assert CalculationInput.from_dict(data).household.status == "couple"


def test_unknown_status_raises_schema_error(sample_input_dict):
    data = clone_input(sample_input_dict)
    data["household"]["status"] = "widowed"
    with pytest.raises(SchemaError, match="household.status"):
        CalculationInput.from_dict(data)


def test_section_must_be_object(sample_input_dict):
    data = clone_input(sample_input_dict)
    data["assets"] = [1, 2]
    with pytest.raises(SchemaError, match="assets: expected object"):
        CalculationInput.from_dict(data)


def test_root_must_be_object(tmp_path):
    path = tmp_path / "input.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(SchemaError, match="root must be a JSON object"):
        load_input(path)


def test_empty_document_uses_defaults():
    calc_input = CalculationInput.from_dict({})
    assert calc_input.household.status == "single"
    assert calc_input.assets.total_assessable_assets == 0
    assert calc_input.income.claimants == (Claimant(),)


def test_claimants_for_pads_and_truncates():
    one = IncomeProfile(claimants=(Claimant(Decimal("10"), True),))
    two = IncomeProfile(claimants=(Claimant(Decimal("10"), True), Claimant(Decimal("20"), False)))

    assert one.claimants_for("couple") == (Claimant(Decimal("10"), True), Claimant())
    assert two.claimants_for("single") == (Claimant(Decimal("10"), True),)
    assert IncomeProfile().claimants_for("single") == (Claimant(),)


def test_load_schedule_from_file(tmp_path, schedule):
    loaded = load_schedule(write_json(tmp_path, _schedule_dict(), "schedule.json"))

    assert loaded.effective_date == "custom"
    assert loaded.max_benefit("couple") == Decimal("1777.00")
    assert loaded.asset_limits("couple", False) == (Decimal("739500"), Decimal("1332000"))
    assert loaded.full_benefit_limits == schedule.full_benefit_limits


def test_schedule_missing_cell_is_rejected():
    data = _schedule_dict()
    del data["assets_test"]["cutoff"]["couple"]["non_homeowner"]
    with pytest.raises(SchemaError, match="assets_test.cutoff.couple.non_homeowner: missing required field"):
        RateSchedule.from_dict(data, "custom")


def test_schedule_rejects_non_numeric_rate():
    data = _schedule_dict()
    data["deeming"]["upper_rate"] = "high"
    with pytest.raises(SchemaError, match="deeming.upper_rate"):
        RateSchedule.from_dict(data, "custom")


def test_schedule_requires_integer_periods():
    data = _schedule_dict()
    data["periods_per_year"] = "26"
    with pytest.raises(SchemaError, match="periods_per_year"):
        RateSchedule.from_dict(data, "custom")


def test_load_schedule_requires_effective_date(tmp_path):
    data = _schedule_dict()
    del data["effective_date"]
    with pytest.raises(SchemaError, match="effective_date"):
        load_schedule(write_json(tmp_path, data, "schedule.json"))


@pytest.mark.parametrize(
    "lookup",
    [
        lambda s: s.max_benefit("widowed"),
        lambda s: s.income_free_area("widowed"),
        lambda s: s.income_taper_rate("widowed"),
        lambda s: s.deeming_threshold("widowed"),
        lambda s: s.asset_limits("widowed", True),
    ],
)
def test_lookup_outside_key_space_raises(schedule, lookup):
    with pytest.raises(ScheduleLookupError):
        lookup(schedule)


@pytest.mark.parametrize("periods", [0, -26])
def test_schedule_rejects_non_positive_periods(periods):
    data = _schedule_dict()
    data["periods_per_year"] = periods
    with pytest.raises(SchemaError, match="periods_per_year: must be > 0"):
        RateSchedule.from_dict(data, "custom")


@pytest.mark.parametrize("unit", ["0", "-1000"])
def test_schedule_rejects_non_positive_taper_unit(unit):
    data = _schedule_dict()
    data["assets_test"]["taper_unit"] = unit
    with pytest.raises(SchemaError, match="assets_test.taper_unit: must be > 0"):
        RateSchedule.from_dict(data, "custom")


def test_asset_and_claimant_sections_parse_without_path():
    assets = AssetHolding.from_dict({"non_deemed": "1,000", "financial": "-5"})
    claimant = Claimant.from_dict({"other_income": "$120", "work_bonus": "yes"})

    assert assets == AssetHolding(non_deemed_assets=Decimal("1000"), deemable_financial_assets=Decimal("0"))
    assert claimant == Claimant(other_income_per_period=Decimal("120"), earned_income_disregard_eligible=True)


def test_huge_assets_are_capped_in_total():
    assets = AssetHolding(non_deemed_assets=Decimal("9E+999999"), deemable_financial_assets=Decimal("9E+999999"))
    assert assets.total_assessable_assets == 2 * MAX_AMOUNT


def _jobseeker_dict() -> dict:
    return copy.deepcopy(JOBSEEKER_RATES["2025-09-20"])


def test_jobseeker_schedule_from_dict():
    schedule = JobSeekerSchedule.from_dict(_jobseeker_dict(), "custom")

    assert schedule.max_payment("single") == Decimal("776.80")
    assert schedule.max_payment("single", has_children=True) == Decimal("831.00")
    assert schedule.max_payment("couple") == Decimal("708.90")
    assert schedule.asset_limit("couple", False) == Decimal("693500")


def test_jobseeker_schedule_rejects_inverted_bands():
    data = _jobseeker_dict()
    data["income_test"]["lower_taper_limit"] = "100"
    with pytest.raises(SchemaError, match="lower_taper_limit"):
        JobSeekerSchedule.from_dict(data, "custom")


def test_jobseeker_schedule_missing_asset_cell():
    data = _jobseeker_dict()
    del data["asset_limit"]["single"]["homeowner"]
    with pytest.raises(SchemaError, match="asset_limit.single.homeowner: missing required field"):
        JobSeekerSchedule.from_dict(data, "custom")


def test_jobseeker_lookup_outside_key_space_raises():
    schedule = JobSeekerSchedule.from_dict(_jobseeker_dict(), "custom")
    with pytest.raises(ScheduleLookupError):
        schedule.max_payment("widowed")
    with pytest.raises(ScheduleLookupError):
        schedule.asset_limit("widowed", True)
