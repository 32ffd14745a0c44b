"""Numeric rounding and formatting helpers shared by the sales report."""

import math
from decimal import ROUND_HALF_UP, Decimal

type Number = int | float

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: Number, places: Decimal = _TWO_PLACES) -> float:
    """Round half away from zero on the value's shortest decimal repr.

    Going through ``repr`` keeps 2.675 at 2.68 instead of the binary
    2.67499999... that ``round`` sees.
    """
    # Past 1e15 a float has no fractional digits left to round
    if not math.isfinite(value) or abs(value) >= 1e15:
        return float(value)
    rounded = float(Decimal(repr(float(value))).quantize(places, rounding=ROUND_HALF_UP))
    # -0.0 prints as "-0"
    return rounded + 0.0


def format_number(value: Number) -> str:
    """Render a number the way a plain number prints: 6, 9.3, NaN."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_percent(value: Number) -> str:
    return f"{format_number(round_half_up(value))}%"
