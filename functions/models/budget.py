"""Budget estimation models.

Defines the cost constants table, its partial override shape, and the
budget estimator's input and result records. All money is INR.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from models.area import AreaResult
from models.base import CamelModel


# =============================================================================
# ENUMS
# =============================================================================


class QualityGrade(str, Enum):
    """Construction quality grade driving the base cost per sq ft."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class CostCategory(str, Enum):
    """Budget breakdown categories."""

    FOUNDATION = "foundation"
    STRUCTURE = "structure"
    FINISHING = "finishing"
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"
    MISCELLANEOUS = "miscellaneous"


# =============================================================================
# COST CONSTANTS
# =============================================================================


class GradeRates(CamelModel):
    """Per-sq-ft rate for each quality grade."""

    basic: float
    standard: float
    premium: float

    def for_grade(self, grade: QualityGrade) -> float:
        return getattr(self, QualityGrade(grade).value)


class CostBreakdownPercentages(CamelModel):
    """Share of the total cost per category. Sums to 100 by convention only."""

    foundation: float
    structure: float
    finishing: float
    electrical: float
    plumbing: float
    miscellaneous: float

    def for_category(self, category: CostCategory) -> float:
        return getattr(self, CostCategory(category).value)


class MaterialRates(CamelModel):
    """Unit material prices."""

    cement_bag: float = Field(..., alias="cementBag", description="Per 50 kg bag")
    steel_kg: float = Field(..., alias="steelKg", description="Per kg")
    brick_per_1000: float = Field(..., alias="brickPer1000", description="Per 1000 bricks")
    sand_cft: float = Field(..., alias="sandCft", description="Per cubic foot")
    aggregate_cft: float = Field(..., alias="aggregateCft", description="Per cubic foot")


class CostConstants(CamelModel):
    """Complete cost configuration used by the budget estimator."""

    base_cost_per_sq_ft: GradeRates = Field(..., alias="baseCostPerSqFt")
    labor_cost_per_sq_ft: GradeRates = Field(..., alias="laborCostPerSqFt")
    location_multipliers: Dict[str, float] = Field(..., alias="locationMultipliers")
    cost_breakdown_percentages: CostBreakdownPercentages = Field(..., alias="costBreakdownPercentages")
    material_rates_per_unit: MaterialRates = Field(..., alias="materialRatesPerUnit")


class CostConstantsOverride(CamelModel):
    """Partial cost configuration.

    Each section lists only the keys to override; unspecified keys keep
    their default values when merged.
    """

    base_cost_per_sq_ft: Optional[Dict[str, float]] = Field(default=None, alias="baseCostPerSqFt")
    labor_cost_per_sq_ft: Optional[Dict[str, float]] = Field(default=None, alias="laborCostPerSqFt")
    location_multipliers: Optional[Dict[str, float]] = Field(default=None, alias="locationMultipliers")
    cost_breakdown_percentages: Optional[Dict[str, float]] = Field(default=None, alias="costBreakdownPercentages")
    material_rates_per_unit: Optional[Dict[str, float]] = Field(default=None, alias="materialRatesPerUnit")


# =============================================================================
# BUDGET INPUT / RESULT
# =============================================================================


class BudgetInput(CamelModel):
    area: AreaResult
    location: str
    quality_grade: QualityGrade = Field(..., alias="qualityGrade")
    custom_cost_constants: Optional[CostConstantsOverride] = Field(
        default=None, alias="customCostConstants"
    )


class CostBreakdown(CamelModel):
    """Rupee amount per category, each rounded independently."""

    foundation: int
    structure: int
    finishing: int
    electrical: int
    plumbing: int
    miscellaneous: int

    @property
    def total(self) -> int:
        return (
            self.foundation + self.structure + self.finishing +
            self.electrical + self.plumbing + self.miscellaneous
        )


class BudgetArea(CamelModel):
    sq_ft: float = Field(..., alias="sqFt")
    sq_m: float = Field(..., alias="sqM")


class BudgetResult(CamelModel):
    """Estimated construction budget.

    ``breakdown.total`` may differ from ``total_cost`` by a few rupees
    because each category is rounded on its own.
    """

    total_cost: int = Field(..., alias="totalCost")
    cost_per_sq_ft: float = Field(..., alias="costPerSqFt")
    cost_per_sq_m: float = Field(..., alias="costPerSqM")
    breakdown: CostBreakdown
    area: BudgetArea
    quality_grade: QualityGrade = Field(..., alias="qualityGrade")
    location: str
