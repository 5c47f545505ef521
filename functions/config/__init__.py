"""BuildMarket configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
"""

from config.settings import settings
from config.errors import BuildMarketError, ConfigurationError, ErrorCode, ValidationError

__all__ = [
    "settings",
    "BuildMarketError",
    "ConfigurationError",
    "ErrorCode",
    "ValidationError",
]
