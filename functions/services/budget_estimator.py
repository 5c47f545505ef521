"""Budget estimator.

Total Cost = Area (sq ft) x Base Cost per sq ft x Location Multiplier,
split across categories by the configured breakdown percentages.

Each category is rounded on its own and never reconciled against the total,
so the breakdown can differ from ``total_cost`` by a few rupees.
"""

from typing import Optional, Union

from models.budget import (
    BudgetArea,
    BudgetInput,
    BudgetResult,
    CostBreakdown,
    CostCategory,
    CostConstants,
    QualityGrade,
)
from services.cost_constants import DEFAULT_COST_CONSTANTS, DEFAULT_LOCATION, merge_cost_constants
from utils.rounding import round_half_up, round_int


def normalize_location(location: str) -> str:
    return location.lower().strip()


def get_location_multiplier(location: str, constants: CostConstants) -> float:
    """Multiplier for a location, falling back to 'default' and then 1.0."""
    multipliers = constants.location_multipliers
    multiplier = multipliers.get(normalize_location(location))
    if multiplier is None:
        multiplier = multipliers.get(DEFAULT_LOCATION)
    return 1.0 if multiplier is None else multiplier


def get_base_cost_per_sq_ft(quality_grade: Union[QualityGrade, str], constants: CostConstants) -> float:
    return constants.base_cost_per_sq_ft.for_grade(quality_grade)


def _category_cost(total_cost: float, category: CostCategory, constants: CostConstants) -> int:
    percentage = constants.cost_breakdown_percentages.for_category(category)
    return round_int((total_cost * percentage) / 100)


def estimate_budget(
    budget_input: Union[BudgetInput, dict],
    base_constants: Optional[CostConstants] = None
) -> BudgetResult:
    """Estimate a construction budget.

    Args:
        budget_input: Area, location, quality grade and optional partial
            cost constants override.
        base_constants: Table the override merges over (defaults to
            DEFAULT_COST_CONSTANTS).

    Returns:
        BudgetResult with totals, per-unit costs and category breakdown.
    """
    if isinstance(budget_input, dict):
        budget_input = BudgetInput.model_validate(budget_input)

    constants = merge_cost_constants(
        budget_input.custom_cost_constants,
        base=base_constants or DEFAULT_COST_CONSTANTS
    )
    area = budget_input.area

    base_cost_per_sq_ft = get_base_cost_per_sq_ft(budget_input.quality_grade, constants)
    location_multiplier = get_location_multiplier(budget_input.location, constants)

    area_sq_ft = area.area_in_sq_ft
    cost_per_sq_ft = base_cost_per_sq_ft * location_multiplier
    total_cost = area_sq_ft * cost_per_sq_ft
    cost_per_sq_m = total_cost / area.area_in_sq_m

    breakdown = CostBreakdown(**{
        category.value: _category_cost(total_cost, category, constants)
        for category in CostCategory
    })

    return BudgetResult(
        total_cost=round_int(total_cost),
        cost_per_sq_ft=round_half_up(cost_per_sq_ft, 2),
        cost_per_sq_m=round_half_up(cost_per_sq_m, 2),
        breakdown=breakdown,
        area=BudgetArea(
            sq_ft=round_half_up(area_sq_ft, 2),
            sq_m=round_half_up(area.area_in_sq_m, 2),
        ),
        quality_grade=budget_input.quality_grade,
        location=budget_input.location,
    )


def estimate_component_cost(
    total_cost: float,
    component: Union[CostCategory, str],
    constants: Optional[CostConstants] = None
) -> int:
    """Cost share of a single breakdown category."""
    return _category_cost(total_cost, CostCategory(component), constants or DEFAULT_COST_CONSTANTS)
