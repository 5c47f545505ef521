"""Validation result shared by all input validators."""

from dataclasses import dataclass
from typing import Optional

from config.errors import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validator. Validators return this and never raise."""
    valid: bool = True
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_error(self, field: Optional[str] = None) -> None:
        """Raise ValidationError carrying the validator's message if invalid.

        Raises:
            ValidationError: If the result is not valid.
        """
        if not self.valid:
            raise ValidationError(message=self.error or "Invalid input", field=field)
