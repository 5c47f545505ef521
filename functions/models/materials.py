"""Material quantity models.

Inputs and results for the concrete, masonry, finishing and services
calculators. Lengths are metres and areas square metres unless a field
name says otherwise.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from models.area import Unit
from models.base import CamelModel


# =============================================================================
# CONCRETE
# =============================================================================


class MixRatio(CamelModel):
    """Concrete mix ratio, e.g. 1:2:4. Parts are relative weights."""

    cement: float = Field(..., description="Cement parts")
    sand: float = Field(..., description="Sand parts")
    aggregate: float = Field(..., description="Aggregate parts")

    @property
    def total_parts(self) -> float:
        return self.cement + self.sand + self.aggregate


class MaterialInput(CamelModel):
    """Slab or footing to be cast."""

    area: float = Field(..., description="Area in square metres")
    thickness: float = Field(..., description="Thickness in the given unit")
    mix_ratio: MixRatio = Field(..., alias="mixRatio")
    unit: Unit = Field(default=Unit.METERS, description="Unit of thickness")


class CementQuantity(CamelModel):
    bags: int = Field(..., description="Number of 50 kg bags")
    weight: float = Field(..., description="Total weight in kg")


class BulkQuantity(CamelModel):
    """Loose material volume in cubic metres and cubic feet."""

    volume: float = Field(..., description="Volume in cubic metres")
    volume_in_cft: float = Field(..., alias="volumeInCft", description="Volume in cubic feet")


class MaterialResult(CamelModel):
    """Concrete material breakdown."""

    volume: float = Field(..., description="Wet concrete volume in cubic metres")
    cement: CementQuantity
    sand: BulkQuantity
    aggregate: BulkQuantity


# =============================================================================
# MASONRY
# =============================================================================


class BrickSize(CamelModel):
    """Brick dimensions in metres (default 190 x 90 x 90 mm)."""

    length: float = 0.19
    width: float = 0.09
    height: float = 0.09


# =============================================================================
# FINISHES
# =============================================================================


class PaintResult(CamelModel):
    liters: int
    tins: int
    coverage_note: str = Field(..., alias="coverageNote")


class TileSize(CamelModel):
    """Tile dimensions in millimetres (default 600 x 600)."""

    length: float = 600
    width: float = 600


class TileResult(CamelModel):
    tiles: int = Field(..., description="Tiles including wastage")
    boxes: int
    wastage: int = Field(..., description="Extra tiles allowed for cutting and breakage")


class FlooringType(str, Enum):
    """Flooring material with an INR/sqft rate range."""

    VITRIFIED = "vitrified"
    MARBLE = "marble"
    GRANITE = "granite"
    WOODEN = "wooden"
    CERAMIC = "ceramic"


class FlooringResult(CamelModel):
    sqft: float
    sqm: float
    estimated_cost_min: int = Field(..., alias="estimatedCostMin")
    estimated_cost_max: int = Field(..., alias="estimatedCostMax")


# =============================================================================
# SERVICES (ELECTRICAL, PLUMBING, WATERPROOFING)
# =============================================================================


class ElectricalResult(CamelModel):
    light_points: int = Field(..., alias="lightPoints")
    fan_points: int = Field(..., alias="fanPoints")
    socket_points: int = Field(..., alias="socketPoints")
    total_points: int = Field(..., alias="totalPoints")
    wiring_length_meters: int = Field(..., alias="wiringLengthMeters")
    estimated_cost: int = Field(..., alias="estimatedCost")


class PlumbingResult(CamelModel):
    cpvc_length_meters: float = Field(..., alias="cpvcLengthMeters")
    pvc_length_meters: float = Field(..., alias="pvcLengthMeters")
    fittings: int
    estimated_cost: int = Field(..., alias="estimatedCost")


class WaterproofingResult(CamelModel):
    liquid_membrane_liters: int = Field(..., alias="liquidMembraneLiters")
    estimated_cost: int = Field(..., alias="estimatedCost")


# =============================================================================
# MATERIAL COST
# =============================================================================


class MaterialCostEstimate(CamelModel):
    """Rupee cost of a concrete/masonry material take-off."""

    cement: int
    sand: int
    aggregate: int
    steel: int = 0
    bricks: int = 0
    total: int
    currency: Optional[str] = "INR"
