"""Area models for the unit conversion and area engine.

All areas are canonical in square metres; square feet are carried
alongside for display.
"""

from enum import Enum

from pydantic import Field

from models.base import CamelModel


class Unit(str, Enum):
    """Linear unit of a measurement."""

    FEET = "ft"
    METERS = "m"


class AreaInput(CamelModel):
    """Rectangular plot dimensions."""

    length: float = Field(..., description="Length in the given unit")
    width: float = Field(..., description="Width in the given unit")
    unit: Unit = Field(default=Unit.METERS, description="Unit of length and width")


class AreaResult(CamelModel):
    """An area reported in both square metres and square feet.

    ``area`` and ``area_in_sq_m`` are always equal.
    """

    area: float = Field(..., description="Area in square metres (canonical)")
    area_in_sq_ft: float = Field(..., alias="areaInSqFt", description="Area in square feet")
    area_in_sq_m: float = Field(..., alias="areaInSqM", description="Area in square metres")
