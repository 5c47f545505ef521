"""BuildMarket error handling.

Custom exceptions and error codes for the calculation core.
"""

from typing import Optional, Dict, Any


# Error Codes
class ErrorCode:
    """Error code constants."""

    # Validation Errors (1xxx)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Configuration Errors (2xxx)
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    COST_CONSTANTS_INVALID = "COST_CONSTANTS_INVALID"
    COST_CONSTANTS_NOT_FOUND = "COST_CONSTANTS_NOT_FOUND"

    # Payment Errors (3xxx)
    PAYMENT_UNKNOWN_SERVICE = "PAYMENT_UNKNOWN_SERVICE"


class BuildMarketError(Exception):
    """Base exception for BuildMarket errors.

    Provides structured error information for API responses.

    Attributes:
        code: Error code from ErrorCode constants
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API response.

        Returns:
            Dictionary with code, message, and details.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def __repr__(self) -> str:
        return f"BuildMarketError(code={self.code!r}, message={self.message!r})"


class ValidationError(BuildMarketError):
    """Validation-specific error."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict] = None):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details={**(details or {}), "field": field} if field else details
        )
        self.field = field


class ConfigurationError(BuildMarketError):
    """Configuration loading error."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCode.CONFIGURATION_ERROR,
        source: Optional[str] = None,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            details={**(details or {}), "source": source} if source else details
        )
        self.source = source
