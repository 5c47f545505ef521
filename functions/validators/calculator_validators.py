"""Input validation for the area, material and budget calculators.

Each validator returns a ValidationResult and never raises. Callers check the
result before invoking a calculation engine; the engines trust their inputs.
"""

from typing import Optional, Union

from models.area import Unit
from validators.result import ValidationResult

MAX_DIMENSION = 10000
MAX_THICKNESS_M = 10
MAX_THICKNESS_FT = 33
MAX_MIX_PARTS = 10
MAX_BUDGET_AREA_SQ_FT = 100000
MAX_LOCATION_LENGTH = 100


def validate_area_input(
    length: float,
    width: float,
    unit: Union[Unit, str] = Unit.METERS
) -> ValidationResult:
    """Validate plot dimensions: both positive and at most 10,000."""
    if length <= 0:
        return ValidationResult.fail("Length must be greater than 0")

    if width <= 0:
        return ValidationResult.fail("Width must be greater than 0")

    if length > MAX_DIMENSION:
        return ValidationResult.fail("Length exceeds maximum allowed value (10,000)")

    if width > MAX_DIMENSION:
        return ValidationResult.fail("Width exceeds maximum allowed value (10,000)")

    return ValidationResult.ok()


def validate_thickness(thickness: float, unit: Union[Unit, str] = Unit.METERS) -> ValidationResult:
    """Validate slab thickness: positive, at most 10 m or 33 ft."""
    if thickness <= 0:
        return ValidationResult.fail("Thickness must be greater than 0")

    if unit == Unit.METERS and thickness > MAX_THICKNESS_M:
        return ValidationResult.fail("Thickness exceeds maximum allowed value (10m)")

    if unit == Unit.FEET and thickness > MAX_THICKNESS_FT:
        return ValidationResult.fail("Thickness exceeds maximum allowed value (33ft)")

    return ValidationResult.ok()


def validate_mix_ratio(cement: float, sand: float, aggregate: float) -> ValidationResult:
    """Validate concrete mix parts: each in (0, 10]."""
    if cement <= 0 or sand <= 0 or aggregate <= 0:
        return ValidationResult.fail("All mix ratio values must be greater than 0")

    if cement > MAX_MIX_PARTS or sand > MAX_MIX_PARTS or aggregate > MAX_MIX_PARTS:
        return ValidationResult.fail("Mix ratio values exceed maximum allowed (10)")

    return ValidationResult.ok()


def validate_budget_area(area: float) -> ValidationResult:
    """Validate a budget area in square feet: (0, 100,000]."""
    if area <= 0:
        return ValidationResult.fail("Area must be greater than 0")

    if area > MAX_BUDGET_AREA_SQ_FT:
        return ValidationResult.fail("Area exceeds maximum allowed value (100,000 sq ft)")

    return ValidationResult.ok()


def validate_location(location: Optional[str]) -> ValidationResult:
    """Validate a location name: non-blank, at most 100 characters."""
    if not location or not location.strip():
        return ValidationResult.fail("Location is required")

    if len(location) > MAX_LOCATION_LENGTH:
        return ValidationResult.fail("Location name is too long")

    return ValidationResult.ok()
