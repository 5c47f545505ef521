"""
Unit Tests for the Unit Conversion & Area Engine.

Tests:
- sq m <-> sq ft conversion uses exactly 10.7639
- Plot area in metres and feet
- Built-up, carpet and multi-floor derivations
"""

import pytest

from models.area import AreaInput, AreaResult, Unit
from services.area_calculator import (
    SQ_FT_PER_SQ_M,
    area_result,
    calculate_built_up_area,
    calculate_carpet_area,
    calculate_multi_floor_area,
    calculate_plot_area,
    sq_ft_to_sq_m,
    sq_m_to_sq_ft,
)


# =============================================================================
# Conversions
# =============================================================================


def test_conversion_constant_is_exact():
    assert SQ_FT_PER_SQ_M == 10.7639
    assert sq_m_to_sq_ft(1) == 10.7639
    assert sq_ft_to_sq_m(10.7639) == 1


@pytest.mark.parametrize("value", [0.5, 1, 12.34, 100, 9999.99, 1e6, 123456789.0])
def test_conversion_round_trip(value):
    assert sq_ft_to_sq_m(sq_m_to_sq_ft(value)) == pytest.approx(value, rel=1e-9)
    assert sq_m_to_sq_ft(sq_ft_to_sq_m(value)) == pytest.approx(value, rel=1e-9)


def test_area_result_keeps_sq_m_canonical():
    result = area_result(42.5)

    assert result.area == 42.5
    assert result.area_in_sq_m == result.area
    assert result.area_in_sq_ft == 42.5 * 10.7639


# =============================================================================
# Plot area
# =============================================================================


def test_plot_area_in_meters(plot_10x10_m):
    result = calculate_plot_area(plot_10x10_m)

    assert result.area == pytest.approx(100)
    assert result.area_in_sq_m == pytest.approx(100)
    assert result.area_in_sq_ft == pytest.approx(1076.39)


def test_plot_area_in_feet(plot_10x10_ft):
    """Each dimension is converted to metres before multiplying."""
    result = calculate_plot_area(plot_10x10_ft)

    assert result.area == pytest.approx(3.048 * 3.048)
    assert result.area_in_sq_m == pytest.approx(9.29, abs=0.01)
    assert result.area_in_sq_ft == pytest.approx(100, abs=0.01)


def test_plot_area_accepts_camel_case_dict():
    result = calculate_plot_area({"length": 20, "width": 5, "unit": "m"})

    assert isinstance(result, AreaResult)
    assert result.area == 100


def test_plot_area_defaults_to_meters():
    assert AreaInput(length=2, width=3).unit == Unit.METERS
    assert calculate_plot_area(AreaInput(length=2, width=3)).area == 6


def test_area_result_serializes_with_camel_case_keys(plot_10x10_m):
    data = calculate_plot_area(plot_10x10_m).to_dict()

    assert set(data) == {"area", "areaInSqFt", "areaInSqM"}


# =============================================================================
# Derived areas
# =============================================================================


def test_built_up_area_default_percentage(area_100_sq_m):
    assert calculate_built_up_area(area_100_sq_m).area == pytest.approx(70)


def test_built_up_area_custom_percentage(area_100_sq_m):
    result = calculate_built_up_area(area_100_sq_m, 60)

    assert result.area == pytest.approx(60)
    assert result.area_in_sq_ft == pytest.approx(60 * 10.7639)


def test_carpet_area_default_percentage(area_100_sq_m):
    built_up = calculate_built_up_area(area_100_sq_m)

    assert calculate_carpet_area(built_up).area == pytest.approx(52.5)


def test_multi_floor_area(area_100_sq_m):
    result = calculate_multi_floor_area(area_100_sq_m, 3)

    assert result.area == pytest.approx(300)
    assert result.area_in_sq_ft == pytest.approx(3229.17)
