"""Input validators for BuildMarket calculators and payments."""

from validators.result import ValidationResult
from validators.calculator_validators import (
    validate_area_input,
    validate_thickness,
    validate_mix_ratio,
    validate_budget_area,
    validate_location,
)
from validators.payment_validators import (
    validate_amount,
    validate_service,
    validate_status_transition,
    validate_currency,
    validate_callback_data,
)

__all__ = [
    "ValidationResult",
    "validate_area_input",
    "validate_thickness",
    "validate_mix_ratio",
    "validate_budget_area",
    "validate_location",
    "validate_amount",
    "validate_service",
    "validate_status_transition",
    "validate_currency",
    "validate_callback_data",
]
