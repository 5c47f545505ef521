"""Utility modules for BuildMarket."""

from utils.background import fire_and_forget
from utils.log_setup import configure_logging
from utils.rounding import round_half_up, round_int

__all__ = [
    "fire_and_forget",
    "configure_logging",
    "round_half_up",
    "round_int",
]
