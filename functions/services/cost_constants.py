"""Default cost constants and override merging.

The default table can be overridden per call or from a JSON file supplied by
admin configuration. Overrides merge shallowly per section: a partial
``locationMultipliers`` override adds or replaces cities without dropping the
rest.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
from pydantic import BaseModel, ValidationError as PydanticValidationError

from config.errors import ConfigurationError, ErrorCode
from config.settings import settings
from models.budget import (
    CostBreakdownPercentages,
    CostConstants,
    CostConstantsOverride,
    GradeRates,
    MaterialRates,
)

logger = structlog.get_logger(__name__)

DEFAULT_LOCATION = "default"


# =============================================================================
# DEFAULT TABLE (INR)
# =============================================================================


DEFAULT_COST_CONSTANTS = CostConstants(
    # Material cost per sq ft (excludes labour)
    base_cost_per_sq_ft=GradeRates(basic=800, standard=1200, premium=1800),
    labor_cost_per_sq_ft=GradeRates(basic=400, standard=600, premium=700),
    location_multipliers={
        # Metro cities
        "mumbai": 1.35,
        "delhi": 1.28,
        "bangalore": 1.22,
        "pune": 1.15,
        "hyderabad": 1.14,
        "chennai": 1.12,
        "kolkata": 1.05,
        "ahmedabad": 1.10,
        # Tier 2 cities
        "noida": 1.22,
        "gurgaon": 1.25,
        "faridabad": 1.18,
        "thane": 1.28,
        "navi mumbai": 1.22,
        "navi_mumbai": 1.22,
        "chandigarh": 1.12,
        "kochi": 1.08,
        "indore": 0.95,
        "nagpur": 0.95,
        "coimbatore": 0.98,
        "visakhapatnam": 0.96,
        "surat": 1.08,
        "vadodara": 1.00,
        "goa": 1.18,
        # Tier 3 cities
        "jaipur": 0.95,
        "lucknow": 0.90,
        "bhopal": 0.88,
        "patna": 0.85,
        "bhubaneswar": 0.90,
        "agra": 0.88,
        "varanasi": 0.85,
        "ranchi": 0.87,
        "guwahati": 0.90,
        "amritsar": 0.92,
        "mysore": 0.96,
        "mysuru": 0.96,
        "madurai": 0.94,
        "nashik": 1.02,
        "aurangabad": 0.95,
        "dehradun": 0.96,
        "raipur": 0.88,
        DEFAULT_LOCATION: 1.0,
    },
    cost_breakdown_percentages=CostBreakdownPercentages(
        foundation=15,
        structure=35,
        finishing=25,
        electrical=8,
        plumbing=7,
        miscellaneous=10,
    ),
    material_rates_per_unit=MaterialRates(
        cement_bag=380,
        steel_kg=60,
        brick_per_1000=7500,
        sand_cft=45,
        aggregate_cft=55,
    ),
)

# Sorted city names for location pickers
CITY_LIST: List[str] = sorted(
    name for name in DEFAULT_COST_CONSTANTS.location_multipliers if name != DEFAULT_LOCATION
)


# =============================================================================
# MERGING
# =============================================================================


def _merge_section(base: BaseModel, override: Optional[Dict[str, float]]) -> BaseModel:
    """Shallow-merge override keys (snake_case or camelCase) over a section."""
    if not override:
        return base

    model_cls = type(base)
    aliases = {name: (info.alias or name) for name, info in model_cls.model_fields.items()}
    merged = base.model_dump(by_alias=True)
    for key, value in override.items():
        merged[aliases.get(key, key)] = value
    return model_cls.model_validate(merged)


def merge_cost_constants(
    override: Optional[Union[CostConstantsOverride, Dict[str, Any]]] = None,
    base: CostConstants = DEFAULT_COST_CONSTANTS
) -> CostConstants:
    """Merge a partial override over a cost constants table.

    Every section is merged independently, so keys the override does not
    mention keep their base values.

    Args:
        override: Partial constants (model or camelCase/snake_case dict).
        base: Table to merge over (defaults to DEFAULT_COST_CONSTANTS).

    Returns:
        A new CostConstants; ``base`` is never mutated.
    """
    if override is None:
        return base
    if isinstance(override, dict):
        override = CostConstantsOverride.model_validate(override)

    location_multipliers = dict(base.location_multipliers)
    location_multipliers.update(override.location_multipliers or {})

    return CostConstants(
        base_cost_per_sq_ft=_merge_section(base.base_cost_per_sq_ft, override.base_cost_per_sq_ft),
        labor_cost_per_sq_ft=_merge_section(base.labor_cost_per_sq_ft, override.labor_cost_per_sq_ft),
        location_multipliers=location_multipliers,
        cost_breakdown_percentages=_merge_section(
            base.cost_breakdown_percentages, override.cost_breakdown_percentages
        ),
        material_rates_per_unit=_merge_section(
            base.material_rates_per_unit, override.material_rates_per_unit
        ),
    )


# =============================================================================
# EXTERNAL CONFIGURATION
# =============================================================================


def load_cost_constants(path: Optional[Union[str, Path]] = None) -> CostConstants:
    """Load a JSON override file and merge it over the defaults.

    Args:
        path: JSON file in CostConstantsOverride shape. Falls back to
            settings.cost_constants_path; with neither, returns the defaults.

    Returns:
        Merged cost constants.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed.
    """
    path = path or settings.cost_constants_path
    if not path:
        return DEFAULT_COST_CONSTANTS

    source = str(path)
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.error("cost_constants_not_found", path=source)
        raise ConfigurationError(
            message=f"Cost constants file not found: {source}",
            code=ErrorCode.COST_CONSTANTS_NOT_FOUND,
            source=source
        )
    except OSError as e:
        logger.error("cost_constants_unreadable", path=source, error=str(e))
        raise ConfigurationError(
            message=f"Cost constants file could not be read: {source}",
            code=ErrorCode.COST_CONSTANTS_INVALID,
            source=source
        )
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("cost_constants_invalid_json", path=source, error=str(e))
        raise ConfigurationError(
            message=f"Cost constants file is not valid JSON: {e}",
            code=ErrorCode.COST_CONSTANTS_INVALID,
            source=source
        )

    if not isinstance(raw, dict):
        raise ConfigurationError(
            message="Cost constants file must contain a JSON object",
            code=ErrorCode.COST_CONSTANTS_INVALID,
            source=source
        )

    try:
        constants = merge_cost_constants(raw)
    except PydanticValidationError as e:
        errors = [f"{err['loc']}: {err['msg']}" for err in e.errors()]
        logger.error("cost_constants_invalid", path=source, errors=errors)
        raise ConfigurationError(
            message="Cost constants file failed validation",
            code=ErrorCode.COST_CONSTANTS_INVALID,
            source=source,
            details={"errors": errors}
        )

    logger.info(
        "cost_constants_loaded",
        path=source,
        sections=[key for key, value in raw.items() if value]
    )
    return constants
