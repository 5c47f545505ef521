"""Calculator service for BuildMarket.

Validates caller input and delegates to the area and material engines.
Invalid input raises ValidationError with the validator's message; the
engines are only ever called with validated input.
"""

from typing import Optional, Union

import structlog

from config.errors import ValidationError
from models.area import AreaInput, AreaResult
from models.materials import (
    BrickSize,
    ElectricalResult,
    FlooringResult,
    FlooringType,
    MaterialInput,
    MaterialResult,
    PaintResult,
    PlumbingResult,
    TileResult,
    TileSize,
    WaterproofingResult,
)
from services import area_calculator, material_calculator
from validators.calculator_validators import (
    validate_area_input,
    validate_mix_ratio,
    validate_thickness,
)

logger = structlog.get_logger(__name__)

MAX_FLOORS = 100


def _require_positive(value: float, message: str, field: str) -> None:
    if value <= 0:
        raise ValidationError(message=message, field=field)


def _require_percentage(value: float, message: str, field: str) -> None:
    if value <= 0 or value > 100:
        raise ValidationError(message=message, field=field)


class CalculatorService:
    """Validated entry point for construction calculations."""

    # -------------------------------------------------------------------------
    # Area
    # -------------------------------------------------------------------------

    def calculate_plot_area(self, area_input: Union[AreaInput, dict]) -> AreaResult:
        """Calculate plot area after validating dimensions.

        Raises:
            ValidationError: If length or width is out of range.
        """
        if isinstance(area_input, dict):
            area_input = AreaInput.model_validate(area_input)

        validate_area_input(area_input.length, area_input.width, area_input.unit).raise_for_error()

        result = area_calculator.calculate_plot_area(area_input)
        logger.debug(
            "plot_area_calculated",
            unit=area_input.unit.value,
            area_sq_m=result.area,
        )
        return result

    def calculate_built_up_area(
        self,
        plot_area: AreaResult,
        built_up_percentage: float = area_calculator.DEFAULT_BUILT_UP_PERCENTAGE
    ) -> AreaResult:
        _require_percentage(
            built_up_percentage,
            "Built-up percentage must be between 1 and 100",
            "builtUpPercentage",
        )
        return area_calculator.calculate_built_up_area(plot_area, built_up_percentage)

    def calculate_carpet_area(
        self,
        built_up_area: AreaResult,
        carpet_percentage: float = area_calculator.DEFAULT_CARPET_PERCENTAGE
    ) -> AreaResult:
        _require_percentage(
            carpet_percentage,
            "Carpet percentage must be between 1 and 100",
            "carpetPercentage",
        )
        return area_calculator.calculate_carpet_area(built_up_area, carpet_percentage)

    def calculate_multi_floor_area(self, single_floor_area: AreaResult, number_of_floors: int) -> AreaResult:
        if number_of_floors <= 0 or number_of_floors > MAX_FLOORS:
            raise ValidationError(
                message="Number of floors must be between 1 and 100",
                field="numberOfFloors",
            )
        return area_calculator.calculate_multi_floor_area(single_floor_area, number_of_floors)

    # -------------------------------------------------------------------------
    # Concrete, masonry, steel
    # -------------------------------------------------------------------------

    def calculate_material_quantities(self, material_input: Union[MaterialInput, dict]) -> MaterialResult:
        """Calculate concrete materials after validating thickness and mix.

        Raises:
            ValidationError: If thickness or mix ratio is out of range.
        """
        if isinstance(material_input, dict):
            material_input = MaterialInput.model_validate(material_input)

        validate_thickness(material_input.thickness, material_input.unit).raise_for_error("thickness")

        mix = material_input.mix_ratio
        validate_mix_ratio(mix.cement, mix.sand, mix.aggregate).raise_for_error("mixRatio")

        result = material_calculator.calculate_material_quantities(material_input)
        logger.debug(
            "material_quantities_calculated",
            wet_volume=result.volume,
            cement_bags=result.cement.bags,
        )
        return result

    def calculate_bricks(
        self,
        wall_area: float,
        brick_size: Optional[BrickSize] = None,
        mortar_thickness: float = material_calculator.DEFAULT_MORTAR_THICKNESS_M
    ) -> int:
        _require_positive(wall_area, "Wall area must be greater than 0", "wallArea")
        return material_calculator.calculate_bricks(wall_area, brick_size, mortar_thickness)

    def calculate_steel(
        self,
        concrete_volume: float,
        steel_per_cubic_meter: float = material_calculator.DEFAULT_STEEL_KG_PER_M3
    ) -> int:
        _require_positive(concrete_volume, "Concrete volume must be greater than 0", "concreteVolume")
        return material_calculator.calculate_steel(concrete_volume, steel_per_cubic_meter)

    # -------------------------------------------------------------------------
    # Finishes and services
    # -------------------------------------------------------------------------

    def calculate_paint(self, wall_area: float, coats: int = 2, coverage_per_liter: float = 12) -> PaintResult:
        _require_positive(wall_area, "Wall area must be greater than 0", "wallArea")
        _require_positive(coats, "Coats must be greater than 0", "coats")
        _require_positive(coverage_per_liter, "Coverage must be greater than 0", "coveragePerLiter")
        return material_calculator.calculate_paint(wall_area, coats, coverage_per_liter)

    def calculate_tiles(
        self,
        floor_area: float,
        tile_size_mm: Optional[TileSize] = None,
        wastage_percent: float = 10,
        tiles_per_box: int = 4
    ) -> TileResult:
        _require_positive(floor_area, "Floor area must be greater than 0", "floorArea")
        _require_positive(tiles_per_box, "Tiles per box must be greater than 0", "tilesPerBox")
        if wastage_percent < 0 or wastage_percent > 100:
            raise ValidationError(
                message="Wastage percentage must be between 0 and 100",
                field="wastagePercent",
            )
        if tile_size_mm is not None and (tile_size_mm.length <= 0 or tile_size_mm.width <= 0):
            raise ValidationError(message="Tile size must be greater than 0", field="tileSizeMm")
        return material_calculator.calculate_tiles(floor_area, tile_size_mm, wastage_percent, tiles_per_box)

    def calculate_flooring(
        self,
        area_sqm: float,
        flooring_type: Union[FlooringType, str] = FlooringType.VITRIFIED
    ) -> FlooringResult:
        _require_positive(area_sqm, "Area must be greater than 0", "areaSqm")
        try:
            flooring_type = FlooringType(flooring_type)
        except ValueError:
            raise ValidationError(
                message=f"Unknown flooring type: {flooring_type}",
                field="flooringType",
            )
        return material_calculator.calculate_flooring(area_sqm, flooring_type)

    def calculate_electrical_wiring(self, built_up_area_sqft: float, floors: int = 1) -> ElectricalResult:
        _require_positive(built_up_area_sqft, "Built-up area must be greater than 0", "builtUpAreaSqft")
        if floors < 1 or floors > MAX_FLOORS:
            raise ValidationError(message="Number of floors must be between 1 and 100", field="floors")
        return material_calculator.calculate_electrical_wiring(built_up_area_sqft, floors)

    def calculate_plumbing_pipes(self, bathrooms: int, kitchens: int = 1, floors: int = 1) -> PlumbingResult:
        if bathrooms < 0 or kitchens < 0:
            raise ValidationError(message="Bathrooms and kitchens cannot be negative", field="bathrooms")
        if floors < 1 or floors > MAX_FLOORS:
            raise ValidationError(message="Number of floors must be between 1 and 100", field="floors")
        return material_calculator.calculate_plumbing_pipes(bathrooms, kitchens, floors)

    def calculate_waterproofing(
        self,
        roof_area_sqm: float,
        bathroom_area_sqm: float = 0,
        coats: int = 2
    ) -> WaterproofingResult:
        _require_positive(roof_area_sqm, "Roof area must be greater than 0", "roofAreaSqm")
        if bathroom_area_sqm < 0:
            raise ValidationError(message="Bathroom area cannot be negative", field="bathroomAreaSqm")
        _require_positive(coats, "Coats must be greater than 0", "coats")
        return material_calculator.calculate_waterproofing(roof_area_sqm, bathroom_area_sqm, coats)


calculator_service = CalculatorService()
