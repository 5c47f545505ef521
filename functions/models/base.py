"""Shared pydantic base for BuildMarket records."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class CamelModel(BaseModel):
    """Base model accepting snake_case or camelCase keys.

    JSON output uses the camelCase aliases expected by the mobile and web
    clients.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
