"""Material quantity engine.

Pure functions deriving concrete, masonry, steel, finishing and services
quantities from areas and volumes using standard site formulas. Inputs are
metric unless a parameter name says otherwise.

The engine does no validation: callers run the calculator validators first.
"""

import math
from typing import Dict, Optional, Tuple, Union

from models.area import Unit
from models.budget import CostConstants
from models.materials import (
    BrickSize,
    BulkQuantity,
    CementQuantity,
    ElectricalResult,
    FlooringResult,
    FlooringType,
    MaterialCostEstimate,
    MaterialInput,
    MaterialResult,
    PaintResult,
    PlumbingResult,
    TileResult,
    TileSize,
    WaterproofingResult,
)
from services.area_calculator import M_PER_FT, SQ_FT_PER_SQ_M
from services.cost_constants import DEFAULT_COST_CONSTANTS
from utils.rounding import round_half_up, round_int

# =============================================================================
# CONSTANTS
# =============================================================================

CEMENT_BAG_WEIGHT_KG = 50
CEMENT_DENSITY_KG_PER_M3 = 1440
DRY_VOLUME_MULTIPLIER = 1.54
CFT_PER_M3 = 35.3147

DEFAULT_MORTAR_THICKNESS_M = 0.01
BRICK_WASTAGE_FACTOR = 1.05

DEFAULT_STEEL_KG_PER_M3 = 100

PAINT_LITERS_PER_TIN = 20

SQ_M_PER_SQ_FT = 0.092903
SQ_M_PER_LIGHT_POINT = 10
SQ_M_PER_FAN_POINT = 12
SQ_M_PER_SOCKET_POINT = 8
WIRING_METERS_PER_POINT = 25
COST_PER_ELECTRICAL_POINT = 175

CPVC_METERS_PER_BATHROOM = 15
CPVC_METERS_PER_KITCHEN = 10
PVC_METERS_PER_BATHROOM = 20
PVC_METERS_PER_KITCHEN = 15
FITTINGS_PER_METER = 0.3
CPVC_COST_PER_METER = 250
PVC_COST_PER_METER = 100

WATERPROOFING_COST_PER_LITER = 200

# INR per sq ft (min, max)
FLOORING_COST_PER_SQFT: Dict[FlooringType, Tuple[int, int]] = {
    FlooringType.VITRIFIED: (50, 120),
    FlooringType.MARBLE: (100, 400),
    FlooringType.GRANITE: (80, 250),
    FlooringType.WOODEN: (150, 500),
    FlooringType.CERAMIC: (30, 80),
}


# =============================================================================
# CONCRETE
# =============================================================================


def calculate_volume(area: float, thickness: float, unit: Union[Unit, str] = Unit.METERS) -> float:
    """Wet volume in cubic metres (area x thickness)."""
    thickness_m = thickness * M_PER_FT if unit == Unit.FEET else thickness
    return area * thickness_m


def calculate_material_quantities(material_input: Union[MaterialInput, dict]) -> MaterialResult:
    """Calculate cement, sand and aggregate for a concrete pour.

    The wet volume is bulked up by 1.54 to the dry volume, which is split
    between materials in proportion to the mix ratio parts.

    Args:
        material_input: Area (m²), thickness, mix ratio and thickness unit.

    Returns:
        MaterialResult with cement bags/weight and sand/aggregate volumes.
    """
    if isinstance(material_input, dict):
        material_input = MaterialInput.model_validate(material_input)

    mix = material_input.mix_ratio
    wet_volume = calculate_volume(material_input.area, material_input.thickness, material_input.unit)
    dry_volume = wet_volume * DRY_VOLUME_MULTIPLIER
    total_parts = mix.total_parts

    cement_volume = (dry_volume * mix.cement) / total_parts
    sand_volume = (dry_volume * mix.sand) / total_parts
    aggregate_volume = (dry_volume * mix.aggregate) / total_parts

    cement_weight = cement_volume * CEMENT_DENSITY_KG_PER_M3
    cement_bags = math.ceil(cement_weight / CEMENT_BAG_WEIGHT_KG)

    return MaterialResult(
        volume=wet_volume,
        cement=CementQuantity(bags=cement_bags, weight=round_half_up(cement_weight, 2)),
        sand=BulkQuantity(
            volume=round_half_up(sand_volume, 2),
            volume_in_cft=round_half_up(sand_volume * CFT_PER_M3, 2),
        ),
        aggregate=BulkQuantity(
            volume=round_half_up(aggregate_volume, 2),
            volume_in_cft=round_half_up(aggregate_volume * CFT_PER_M3, 2),
        ),
    )


# =============================================================================
# MASONRY & STEEL
# =============================================================================


def calculate_bricks(
    wall_area: float,
    brick_size: Optional[BrickSize] = None,
    mortar_thickness: float = DEFAULT_MORTAR_THICKNESS_M
) -> int:
    """Bricks for a wall face, including 5% wastage.

    Wastage is applied after rounding the base count up.
    """
    brick_size = brick_size or BrickSize()
    brick_area_with_mortar = (
        (brick_size.length + mortar_thickness) * (brick_size.height + mortar_thickness)
    )
    number_of_bricks = math.ceil(wall_area / brick_area_with_mortar)
    return math.ceil(number_of_bricks * BRICK_WASTAGE_FACTOR)


def calculate_steel(concrete_volume: float, steel_per_cubic_meter: float = DEFAULT_STEEL_KG_PER_M3) -> int:
    """Reinforcement steel in kg (typically 80-120 kg per m³ of RCC)."""
    return round_int(concrete_volume * steel_per_cubic_meter)


# =============================================================================
# FINISHES
# =============================================================================


def calculate_paint(wall_area: float, coats: int = 2, coverage_per_liter: float = 12) -> PaintResult:
    """Paint for walls or ceilings; one litre covers ~12 m² per coat."""
    liters = math.ceil((wall_area * coats) / coverage_per_liter)
    return PaintResult(
        liters=liters,
        tins=math.ceil(liters / PAINT_LITERS_PER_TIN),
        coverage_note=f"{coats} coat(s) at {coverage_per_liter:g} m²/L",
    )


def calculate_tiles(
    floor_area: float,
    tile_size_mm: Optional[TileSize] = None,
    wastage_percent: float = 10,
    tiles_per_box: int = 4
) -> TileResult:
    """Tiles and boxes for a floor or wall area (default 600x600 mm)."""
    tile_size_mm = tile_size_mm or TileSize()
    tile_sq_m = (tile_size_mm.length / 1000) * (tile_size_mm.width / 1000)
    base = math.ceil(floor_area / tile_sq_m)
    wastage = math.ceil(base * (wastage_percent / 100))
    total = base + wastage
    return TileResult(tiles=total, boxes=math.ceil(total / tiles_per_box), wastage=wastage)


def calculate_flooring(
    area_sqm: float,
    flooring_type: Union[FlooringType, str] = FlooringType.VITRIFIED
) -> FlooringResult:
    """Flooring cost range for an area."""
    sqft = area_sqm * SQ_FT_PER_SQ_M
    rate_min, rate_max = FLOORING_COST_PER_SQFT[FlooringType(flooring_type)]
    return FlooringResult(
        sqft=round_half_up(sqft, 2),
        sqm=area_sqm,
        estimated_cost_min=round_int(sqft * rate_min),
        estimated_cost_max=round_int(sqft * rate_max),
    )


# =============================================================================
# SERVICES
# =============================================================================


def calculate_electrical_wiring(built_up_area_sqft: float, floors: int = 1) -> ElectricalResult:
    """Electrical points, wiring length and cost.

    Roughly one light per 10 m², one fan per 12 m² and one socket per 8 m².
    """
    total_sqm = built_up_area_sqft * SQ_M_PER_SQ_FT * floors
    light_points = math.ceil(total_sqm / SQ_M_PER_LIGHT_POINT)
    fan_points = math.ceil(total_sqm / SQ_M_PER_FAN_POINT)
    socket_points = math.ceil(total_sqm / SQ_M_PER_SOCKET_POINT)
    total_points = light_points + fan_points + socket_points
    return ElectricalResult(
        light_points=light_points,
        fan_points=fan_points,
        socket_points=socket_points,
        total_points=total_points,
        wiring_length_meters=total_points * WIRING_METERS_PER_POINT,
        estimated_cost=total_points * COST_PER_ELECTRICAL_POINT,
    )


def calculate_plumbing_pipes(bathrooms: int, kitchens: int = 1, floors: int = 1) -> PlumbingResult:
    """CPVC (supply) and PVC (drainage) pipe lengths, fittings and cost."""
    cpvc = (bathrooms * CPVC_METERS_PER_BATHROOM + kitchens * CPVC_METERS_PER_KITCHEN) * floors
    pvc = (bathrooms * PVC_METERS_PER_BATHROOM + kitchens * PVC_METERS_PER_KITCHEN) * floors
    return PlumbingResult(
        cpvc_length_meters=cpvc,
        pvc_length_meters=pvc,
        fittings=math.ceil((cpvc + pvc) * FITTINGS_PER_METER),
        estimated_cost=round_int(cpvc * CPVC_COST_PER_METER + pvc * PVC_COST_PER_METER),
    )


def calculate_waterproofing(
    roof_area_sqm: float,
    bathroom_area_sqm: float = 0,
    coats: int = 2
) -> WaterproofingResult:
    """Liquid membrane for roof and wet areas."""
    liters = math.ceil((roof_area_sqm + bathroom_area_sqm) * coats)
    return WaterproofingResult(
        liquid_membrane_liters=liters,
        estimated_cost=liters * WATERPROOFING_COST_PER_LITER,
    )


# =============================================================================
# MATERIAL COST
# =============================================================================


def estimate_material_cost(
    materials: MaterialResult,
    bricks: int = 0,
    steel_kg: float = 0,
    constants: CostConstants = DEFAULT_COST_CONSTANTS
) -> MaterialCostEstimate:
    """Price a concrete take-off (plus optional bricks and steel) in rupees."""
    rates = constants.material_rates_per_unit
    cement = round_int(materials.cement.bags * rates.cement_bag)
    sand = round_int(materials.sand.volume_in_cft * rates.sand_cft)
    aggregate = round_int(materials.aggregate.volume_in_cft * rates.aggregate_cft)
    steel = round_int(steel_kg * rates.steel_kg)
    brick_cost = round_int(bricks / 1000 * rates.brick_per_1000)
    return MaterialCostEstimate(
        cement=cement,
        sand=sand,
        aggregate=aggregate,
        steel=steel,
        bricks=brick_cost,
        total=cement + sand + aggregate + steel + brick_cost,
    )
