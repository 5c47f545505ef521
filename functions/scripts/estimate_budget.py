"""
Estimate a construction budget from plot dimensions and print it as JSON.

Useful for checking cost constant overrides before handing them to admins.

Usage:
  python scripts/estimate_budget.py --length 30 --width 40 --unit ft --location mumbai --grade standard
  python scripts/estimate_budget.py --length 12 --width 9 --location pune --constants overrides.json
"""

import argparse
import json
import sys
from typing import List, Optional

from config.errors import BuildMarketError, ValidationError
from models.area import Unit
from models.budget import QualityGrade
from services.budget_service import BudgetService
from services.calculator_service import CalculatorService
from services.cost_constants import load_cost_constants
from utils.log_setup import configure_logging

EXIT_VALIDATION_ERROR = 2
EXIT_CONFIGURATION_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate a construction budget")
    parser.add_argument("--length", type=float, required=True, help="Plot length")
    parser.add_argument("--width", type=float, required=True, help="Plot width")
    parser.add_argument(
        "--unit",
        choices=[u.value for u in Unit],
        default=Unit.METERS.value,
        help="Unit for length and width (default: m)",
    )
    parser.add_argument("--location", required=True, help="City name, e.g. mumbai")
    parser.add_argument(
        "--grade",
        choices=[g.value for g in QualityGrade],
        default=QualityGrade.STANDARD.value,
        help="Quality grade (default: standard)",
    )
    parser.add_argument("--constants", required=False, help="JSON file with cost constant overrides")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        constants = load_cost_constants(args.constants)
    except BuildMarketError as e:
        print(json.dumps({"error": e.to_dict()}, indent=2))
        return EXIT_CONFIGURATION_ERROR

    calculator = CalculatorService()
    budget = BudgetService(constants)

    try:
        area = calculator.calculate_plot_area({
            "length": args.length,
            "width": args.width,
            "unit": args.unit,
        })
        result = budget.estimate_budget(area, args.location, args.grade)
    except ValidationError as e:
        print(json.dumps({"error": e.to_dict()}, indent=2))
        return EXIT_VALIDATION_ERROR

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
