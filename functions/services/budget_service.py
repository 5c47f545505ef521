"""Budget service for BuildMarket.

Validates area and location, then runs the budget estimator against the
configured cost constants.
"""

from typing import Any, Dict, Optional, Union

import structlog

from config.errors import ValidationError
from models.area import AreaResult
from models.budget import (
    BudgetInput,
    BudgetResult,
    CostCategory,
    CostConstants,
    CostConstantsOverride,
    QualityGrade,
)
from services import budget_estimator
from services.cost_constants import DEFAULT_COST_CONSTANTS
from validators.calculator_validators import validate_budget_area, validate_location

logger = structlog.get_logger(__name__)


class BudgetService:
    """Validated entry point for budget estimation.

    Args:
        cost_constants: Base cost table, e.g. from load_cost_constants()
            (defaults to DEFAULT_COST_CONSTANTS). Per-call overrides merge
            over it.
    """

    def __init__(self, cost_constants: Optional[CostConstants] = None):
        self.cost_constants = cost_constants or DEFAULT_COST_CONSTANTS

    def estimate_budget(
        self,
        area: AreaResult,
        location: str,
        quality_grade: Union[QualityGrade, str],
        custom_cost_constants: Optional[Union[CostConstantsOverride, Dict[str, Any]]] = None
    ) -> BudgetResult:
        """Estimate a construction budget.

        Raises:
            ValidationError: If the area (sq ft) or location is invalid, or
                the quality grade is unknown.
        """
        validate_budget_area(area.area_in_sq_ft).raise_for_error("area")
        validate_location(location).raise_for_error("location")

        try:
            quality_grade = QualityGrade(quality_grade)
        except ValueError:
            raise ValidationError(message=f"Unknown quality grade: {quality_grade}", field="qualityGrade")

        result = budget_estimator.estimate_budget(BudgetInput(
            area=area,
            location=location,
            quality_grade=quality_grade,
            custom_cost_constants=custom_cost_constants,
        ), base_constants=self.cost_constants)

        logger.info(
            "budget_estimated",
            location=location,
            quality_grade=quality_grade.value,
            area_sq_ft=result.area.sq_ft,
            total_cost=result.total_cost,
            custom_constants=custom_cost_constants is not None,
        )
        return result

    def estimate_component_cost(self, total_cost: float, component: Union[CostCategory, str]) -> int:
        """Cost share for one breakdown category.

        Raises:
            ValidationError: If total_cost is not positive or the category
                is unknown.
        """
        if total_cost <= 0:
            raise ValidationError(message="Total cost must be greater than 0", field="totalCost")
        try:
            component = CostCategory(component)
        except ValueError:
            raise ValidationError(message=f"Unknown cost component: {component}", field="component")

        return budget_estimator.estimate_component_cost(total_cost, component, self.cost_constants)


budget_service = BudgetService()
