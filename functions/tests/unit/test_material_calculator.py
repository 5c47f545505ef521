"""
Unit Tests for the Material Quantity Engine.

Tests:
- Concrete take-off for a standard 1:2:4 slab
- Brick counts with mortar and wastage
- Steel, paint, tiles, flooring, electrical, plumbing, waterproofing
- Material cost pricing against the default rates
"""

import math

import pytest

from models.area import Unit
from models.budget import CostConstants
from models.materials import BrickSize, FlooringType, MaterialInput, MixRatio, TileSize
from services.cost_constants import merge_cost_constants
from services.material_calculator import (
    calculate_bricks,
    calculate_electrical_wiring,
    calculate_flooring,
    calculate_material_quantities,
    calculate_paint,
    calculate_plumbing_pipes,
    calculate_steel,
    calculate_tiles,
    calculate_volume,
    calculate_waterproofing,
    estimate_material_cost,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def slab_input():
    """100 m² slab, 100 mm thick, M15 (1:2:4)."""
    return MaterialInput(
        area=100,
        thickness=0.1,
        mix_ratio=MixRatio(cement=1, sand=2, aggregate=4),
    )


# =============================================================================
# Concrete
# =============================================================================


def test_volume_in_meters():
    assert calculate_volume(100, 0.1) == pytest.approx(10)


def test_volume_converts_feet_thickness():
    assert calculate_volume(10, 1, Unit.FEET) == pytest.approx(3.048)


def test_material_quantities_for_standard_slab(slab_input):
    result = calculate_material_quantities(slab_input)

    # wet 10 m³ -> dry 15.4 m³ split 1:2:4
    assert result.volume == pytest.approx(10)
    assert result.cement.weight == pytest.approx(3168)
    assert result.cement.bags == 64
    assert result.sand.volume == pytest.approx(4.4)
    assert result.sand.volume_in_cft == pytest.approx(155.38)
    assert result.aggregate.volume == pytest.approx(8.8)
    assert result.aggregate.volume_in_cft == pytest.approx(310.77)


def test_cement_bags_round_up():
    # dry 1.54 m³ all cement -> 2217.6 kg -> 44.35 bags
    result = calculate_material_quantities(MaterialInput(
        area=1,
        thickness=1,
        mix_ratio=MixRatio(cement=1, sand=0.000001, aggregate=0.000001),
    ))

    assert result.cement.bags == 45


def test_material_quantities_accepts_camel_case_dict():
    result = calculate_material_quantities({
        "area": 100,
        "thickness": 0.1,
        "mixRatio": {"cement": 1, "sand": 2, "aggregate": 4},
    })

    assert result.cement.bags == 64


def test_mix_ratio_need_not_be_normalized(slab_input):
    doubled = slab_input.model_copy(update={"mix_ratio": MixRatio(cement=2, sand=4, aggregate=8)})

    assert calculate_material_quantities(doubled) == calculate_material_quantities(slab_input)


def test_material_result_serializes_with_camel_case_keys(slab_input):
    data = calculate_material_quantities(slab_input).to_dict()

    assert set(data["sand"]) == {"volume", "volumeInCft"}


# =============================================================================
# Masonry & steel
# =============================================================================


def test_bricks_include_five_percent_wastage():
    # 0.25 x 0.125 m face with no mortar -> 32 per m², 33.6 with wastage
    size = BrickSize(length=0.25, width=0.1, height=0.125)

    assert calculate_bricks(1, size, mortar_thickness=0) == 34


def test_bricks_default_size_and_mortar():
    count = calculate_bricks(10)
    base = math.ceil(10 / ((0.19 + 0.01) * (0.09 + 0.01)))

    assert count == math.ceil(base * 1.05)
    assert count >= 520


def test_steel_default_rate():
    assert calculate_steel(10) == 1000


def test_steel_custom_rate():
    assert calculate_steel(10, 120) == 1200


def test_steel_rounds_half_up():
    assert calculate_steel(0.025, 100) == 3
    assert calculate_steel(0.005, 100) == 1


# =============================================================================
# Finishes
# =============================================================================


def test_paint_defaults():
    result = calculate_paint(100)

    assert result.liters == 17
    assert result.tins == 1
    assert result.coverage_note == "2 coat(s) at 12 m²/L"


def test_paint_tins_round_up():
    result = calculate_paint(250, coats=1, coverage_per_liter=10)

    assert result.liters == 25
    assert result.tins == 2


def test_tiles_default_size():
    result = calculate_tiles(10)

    # 10 / 0.36 -> 28 tiles, 3 wastage
    assert result.tiles == 31
    assert result.wastage == 3
    assert result.boxes == 8


def test_tiles_custom_size_and_wastage():
    result = calculate_tiles(2, TileSize(length=500, width=500), wastage_percent=0, tiles_per_box=8)

    assert result.tiles == 8
    assert result.wastage == 0
    assert result.boxes == 1


def test_flooring_vitrified_default():
    result = calculate_flooring(10)

    assert result.sqft == pytest.approx(107.64)
    assert result.sqm == 10
    assert result.estimated_cost_min == 5382
    assert result.estimated_cost_max == 12917


def test_flooring_marble_costs_more_than_ceramic():
    marble = calculate_flooring(20, FlooringType.MARBLE)
    ceramic = calculate_flooring(20, "ceramic")

    assert marble.estimated_cost_min > ceramic.estimated_cost_min
    assert marble.estimated_cost_max > ceramic.estimated_cost_max


# =============================================================================
# Services
# =============================================================================


def test_electrical_wiring_single_floor():
    result = calculate_electrical_wiring(1000)

    # 92.903 m²
    assert result.light_points == 10
    assert result.fan_points == 8
    assert result.socket_points == 12
    assert result.total_points == 30
    assert result.wiring_length_meters == 750
    assert result.estimated_cost == 5250


def test_electrical_wiring_scales_with_floors():
    single = calculate_electrical_wiring(1000, floors=1)
    double = calculate_electrical_wiring(1000, floors=2)

    assert double.total_points > single.total_points


def test_plumbing_pipes():
    result = calculate_plumbing_pipes(2)

    assert result.cpvc_length_meters == 40
    assert result.pvc_length_meters == 55
    assert result.fittings == 29
    assert result.estimated_cost == 15500


def test_plumbing_pipes_multiple_floors():
    result = calculate_plumbing_pipes(1, kitchens=1, floors=3)

    assert result.cpvc_length_meters == 75
    assert result.pvc_length_meters == 105


def test_waterproofing():
    result = calculate_waterproofing(50, 10)

    assert result.liquid_membrane_liters == 120
    assert result.estimated_cost == 24000


def test_waterproofing_defaults():
    result = calculate_waterproofing(12.3)

    assert result.liquid_membrane_liters == 25
    assert result.estimated_cost == 5000


# =============================================================================
# Material cost
# =============================================================================


def test_material_cost_with_default_rates(slab_input):
    result = estimate_material_cost(
        calculate_material_quantities(slab_input),
        bricks=2000,
        steel_kg=1000,
    )

    assert result.cement == 64 * 380
    assert result.sand == 6992
    assert result.aggregate == 17092
    assert result.steel == 60000
    assert result.bricks == 15000
    assert result.total == result.cement + result.sand + result.aggregate + result.steel + result.bricks
    assert result.currency == "INR"


def test_material_cost_uses_overridden_rates(slab_input):
    constants: CostConstants = merge_cost_constants({"materialRatesPerUnit": {"cementBag": 400}})
    result = estimate_material_cost(calculate_material_quantities(slab_input), constants=constants)

    assert result.cement == 64 * 400
    assert result.steel == 0
    assert result.bricks == 0
