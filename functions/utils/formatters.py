"""Display formatters for calculator and budget results.

Numbers use Indian digit grouping (12,34,567), currency is rupees.
"""

from utils.rounding import round_half_up

RUPEE = "₹"
LAKH = 100_000
CRORE = 10_000_000


def _group_indian(whole: str) -> str:
    """Group an integer digit string as 1,23,45,678."""
    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_indian_number(value: float, max_fraction_digits: int = 0, min_fraction_digits: int = 0) -> str:
    """Format a number with Indian grouping.

    Trailing fractional zeros are dropped down to ``min_fraction_digits``.

    Args:
        value: Number to format.
        max_fraction_digits: Decimal places to round to.
        min_fraction_digits: Decimal places always shown.

    Returns:
        Formatted string, e.g. "12,34,567.5".
    """
    rounded = round_half_up(abs(value), max_fraction_digits)
    sign = "-" if value < 0 and rounded != 0 else ""
    text = f"{rounded:.{max_fraction_digits}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0").ljust(min_fraction_digits, "0")
    result = _group_indian(whole)
    if fraction:
        result = f"{result}.{fraction}"
    return sign + result


def format_currency(amount: float) -> str:
    """Format rupees without decimals, e.g. ₹12,34,567."""
    return f"{RUPEE}{format_indian_number(amount)}"


def format_area(area: float, unit: str = "sqft") -> str:
    """Format an area in sq ft or sq m."""
    label = "sq ft" if unit == "sqft" else "sq m"
    return f"{format_indian_number(area, 2)} {label}"


def format_volume(volume: float, unit: str = "cum") -> str:
    """Format a volume in cu m or cu ft."""
    label = "cu ft" if unit == "cft" else "cu m"
    return f"{format_indian_number(volume, 2)} {label}"


def format_weight(weight: float, unit: str = "kg") -> str:
    """Format a weight in kg, switching to tons at 1000 kg when asked."""
    if unit == "ton" and weight >= 1000:
        return f"{format_indian_number(weight / 1000, 2)} tons"
    return f"{format_indian_number(weight, 2)} {unit}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_large_number(num: float) -> str:
    """Abbreviate large rupee amounts as crores (Cr) or lakhs (L)."""
    if num >= CRORE:
        return f"{RUPEE}{num / CRORE:.2f} Cr"
    if num >= LAKH:
        return f"{RUPEE}{num / LAKH:.2f} L"
    return format_currency(num)
