"""Half-up rounding helpers.

Python's built-in round() uses banker's rounding (round(2.5) == 2). Every
quantity and currency figure in BuildMarket rounds halves upwards instead.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals, with halves rounded towards +infinity."""
    if ndigits == 0:
        return float(math.floor(value + 0.5))
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round to the nearest whole number, halves up."""
    return int(math.floor(value + 0.5))
