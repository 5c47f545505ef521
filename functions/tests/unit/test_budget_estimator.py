"""
Unit Tests for the Budget Estimator.

Tests:
- Total cost = area (sq ft) x base cost x location multiplier
- Grade and location monotonicity
- Location normalisation and fallback to the default multiplier
- Breakdown stays within 1% of the total
- Partial cost constant overrides
"""

import pytest

from models.budget import BudgetInput, CostCategory, QualityGrade
from services.area_calculator import area_result
from services.budget_estimator import (
    estimate_budget,
    estimate_component_cost,
    get_location_multiplier,
)
from services.cost_constants import DEFAULT_COST_CONSTANTS, merge_cost_constants


def _estimate(area, location="default", grade=QualityGrade.STANDARD, custom=None):
    return estimate_budget(BudgetInput(
        area=area,
        location=location,
        quality_grade=grade,
        custom_cost_constants=custom,
    ))


# =============================================================================
# Totals
# =============================================================================


def test_standard_grade_default_location(area_100_sq_m):
    result = _estimate(area_100_sq_m)

    assert result.cost_per_sq_ft == 1200
    assert result.total_cost == pytest.approx(1076.39 * 1200, abs=1)
    assert result.cost_per_sq_m == pytest.approx(1200 * 10.7639, abs=0.01)
    assert result.area.sq_ft == pytest.approx(1076.39)
    assert result.area.sq_m == pytest.approx(100)


def test_location_multiplier_applied(area_1000_sq_ft):
    result = _estimate(area_1000_sq_ft, location="mumbai")

    assert result.cost_per_sq_ft == pytest.approx(1620)
    assert result.total_cost == pytest.approx(1_620_000, abs=1)
    assert isinstance(result.total_cost, int)


def test_grades_are_monotone(area_1000_sq_ft):
    basic = _estimate(area_1000_sq_ft, grade=QualityGrade.BASIC)
    standard = _estimate(area_1000_sq_ft, grade=QualityGrade.STANDARD)
    premium = _estimate(area_1000_sq_ft, grade=QualityGrade.PREMIUM)

    assert basic.total_cost < standard.total_cost < premium.total_cost


def test_locations_are_monotone_in_multiplier(area_1000_sq_ft):
    patna = _estimate(area_1000_sq_ft, location="patna")
    pune = _estimate(area_1000_sq_ft, location="pune")
    mumbai = _estimate(area_1000_sq_ft, location="mumbai")

    assert patna.total_cost < pune.total_cost < mumbai.total_cost


def test_location_is_normalized(area_1000_sq_ft):
    assert (
        _estimate(area_1000_sq_ft, location="  Mumbai ").total_cost
        == _estimate(area_1000_sq_ft, location="mumbai").total_cost
    )


def test_result_keeps_location_as_given(area_1000_sq_ft):
    assert _estimate(area_1000_sq_ft, location="  Mumbai ").location == "  Mumbai "


def test_unknown_location_uses_default_multiplier(area_1000_sq_ft):
    unknown = _estimate(area_1000_sq_ft, location="atlantis")
    default = _estimate(area_1000_sq_ft, location="default")

    assert unknown.total_cost == default.total_cost
    assert unknown.cost_per_sq_ft == 1200


def test_missing_default_multiplier_falls_back_to_one():
    constants = DEFAULT_COST_CONSTANTS.model_copy(update={"location_multipliers": {"pune": 1.15}})

    assert get_location_multiplier("atlantis", constants) == 1.0


def test_zero_multiplier_is_not_replaced_by_default():
    constants = merge_cost_constants({"locationMultipliers": {"freezone": 0}})

    assert get_location_multiplier("freezone", constants) == 0


def test_accepts_camel_case_dict(area_1000_sq_ft):
    result = estimate_budget({
        "area": area_1000_sq_ft.to_dict(),
        "location": "pune",
        "qualityGrade": "basic",
    })

    assert result.cost_per_sq_ft == pytest.approx(920)


# =============================================================================
# Breakdown
# =============================================================================


@pytest.mark.parametrize("grade", list(QualityGrade))
@pytest.mark.parametrize("location", ["mumbai", "patna", "default", "navi mumbai"])
def test_breakdown_within_one_percent_of_total(area_1000_sq_ft, grade, location):
    result = _estimate(area_1000_sq_ft, location=location, grade=grade)

    assert abs(result.breakdown.total - result.total_cost) <= result.total_cost * 0.01


def test_breakdown_categories(area_1000_sq_ft):
    breakdown = _estimate(area_1000_sq_ft).breakdown

    assert breakdown.foundation == 180_000
    assert breakdown.structure == 420_000
    assert breakdown.finishing == 300_000
    assert breakdown.electrical == 96_000
    assert breakdown.plumbing == 84_000
    assert breakdown.miscellaneous == 120_000


def test_component_cost():
    assert estimate_component_cost(1_000_000, CostCategory.FOUNDATION) == 150_000
    assert estimate_component_cost(1_000_000, "electrical") == 80_000


def test_component_cost_rounds_half_up():
    # 15% of 10 = 1.5
    assert estimate_component_cost(10, "foundation") == 2


# =============================================================================
# Overrides
# =============================================================================


def test_override_replaces_only_given_grade(area_1000_sq_ft):
    custom = {"baseCostPerSqFt": {"standard": 2000}}

    standard = _estimate(area_1000_sq_ft, custom=custom)
    basic = _estimate(area_1000_sq_ft, grade=QualityGrade.BASIC, custom=custom)

    assert standard.cost_per_sq_ft == 2000
    assert basic.cost_per_sq_ft == 800


def test_override_adds_location_without_dropping_others(area_1000_sq_ft):
    custom = {"locationMultipliers": {"shimla": 1.5}}

    assert _estimate(area_1000_sq_ft, location="shimla", custom=custom).cost_per_sq_ft == pytest.approx(1800)
    assert _estimate(area_1000_sq_ft, location="mumbai", custom=custom).cost_per_sq_ft == pytest.approx(1620)


def test_override_breakdown_percentage(area_1000_sq_ft):
    custom = {"costBreakdownPercentages": {"foundation": 20}}
    breakdown = _estimate(area_1000_sq_ft, custom=custom).breakdown

    assert breakdown.foundation == 240_000
    assert breakdown.structure == 420_000


def test_override_does_not_mutate_defaults(area_1000_sq_ft):
    _estimate(area_1000_sq_ft, custom={"baseCostPerSqFt": {"standard": 5000}})

    assert DEFAULT_COST_CONSTANTS.base_cost_per_sq_ft.standard == 1200


def test_base_constants_parameter(area_1000_sq_ft):
    base = merge_cost_constants({"baseCostPerSqFt": {"premium": 3000}})
    result = estimate_budget(
        BudgetInput(area=area_1000_sq_ft, location="default", quality_grade="premium"),
        base_constants=base,
    )

    assert result.cost_per_sq_ft == 3000
