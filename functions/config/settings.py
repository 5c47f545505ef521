"""BuildMarket configuration settings.

Loads configuration from environment variables with sensible defaults.
A local .env file is honoured for development.
"""

import os
from typing import Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load .env file for local overrides (log level, analytics capacity, etc.)
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Analytics Configuration
    analytics_max_events: int = field(default_factory=lambda: int(os.getenv("ANALYTICS_MAX_EVENTS", "10000")))
    analytics_debug_logging: bool = field(default_factory=lambda: _env_flag("ANALYTICS_DEBUG_LOGGING"))

    # Pricing Configuration
    currency: str = field(default_factory=lambda: os.getenv("CURRENCY", "INR"))
    cost_constants_path: Optional[str] = field(default_factory=lambda: os.getenv("COST_CONSTANTS_PATH") or None)

    def validate(self) -> None:
        """Validate settings values.

        Raises:
            ValueError: If a setting is out of range.
        """
        if self.analytics_max_events <= 0:
            raise ValueError("ANALYTICS_MAX_EVENTS must be a positive integer")
        if not self.currency:
            raise ValueError("CURRENCY must not be empty")


# Singleton settings instance
settings = Settings()
