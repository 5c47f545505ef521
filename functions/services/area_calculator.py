"""Unit conversion and area engine.

Pure functions deriving plot, built-up, carpet and multi-floor areas. All
results are canonical in square metres with square feet alongside.

The engine does no validation: callers run the calculator validators first.
"""

from typing import Union

from models.area import AreaInput, AreaResult, Unit

# Exactly 10.7639, not 1 / 0.3048**2
SQ_FT_PER_SQ_M = 10.7639
M_PER_FT = 0.3048

DEFAULT_BUILT_UP_PERCENTAGE = 70
DEFAULT_CARPET_PERCENTAGE = 75


def sq_m_to_sq_ft(sq_m: float) -> float:
    """Convert square metres to square feet."""
    return sq_m * SQ_FT_PER_SQ_M


def sq_ft_to_sq_m(sq_ft: float) -> float:
    """Convert square feet to square metres."""
    return sq_ft / SQ_FT_PER_SQ_M


def area_result(area_sq_m: float) -> AreaResult:
    """Build an AreaResult from an area in square metres."""
    return AreaResult(
        area=area_sq_m,
        area_in_sq_m=area_sq_m,
        area_in_sq_ft=sq_m_to_sq_ft(area_sq_m),
    )


def calculate_plot_area(area_input: Union[AreaInput, dict]) -> AreaResult:
    """Calculate a rectangular plot area.

    Feet dimensions are converted to metres one by one before multiplying.

    Args:
        area_input: Length, width and unit of the plot.

    Returns:
        Plot area in both units.
    """
    if isinstance(area_input, dict):
        area_input = AreaInput.model_validate(area_input)

    length_m = area_input.length
    width_m = area_input.width

    if area_input.unit == Unit.FEET:
        length_m = area_input.length * M_PER_FT
        width_m = area_input.width * M_PER_FT

    return area_result(length_m * width_m)


def calculate_built_up_area(
    plot_area: AreaResult,
    built_up_percentage: float = DEFAULT_BUILT_UP_PERCENTAGE
) -> AreaResult:
    """Built-up area = plot area x built-up percentage."""
    return area_result((plot_area.area * built_up_percentage) / 100)


def calculate_carpet_area(
    built_up_area: AreaResult,
    carpet_percentage: float = DEFAULT_CARPET_PERCENTAGE
) -> AreaResult:
    """Carpet area = built-up area x carpet percentage."""
    return area_result((built_up_area.area * carpet_percentage) / 100)


def calculate_multi_floor_area(single_floor_area: AreaResult, number_of_floors: int) -> AreaResult:
    """Total area across identical floors."""
    return area_result(single_floor_area.area * number_of_floors)
