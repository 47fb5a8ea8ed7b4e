"""Display rounding helpers.

Both helpers round half away from zero (``2.5 -> 3``), matching what shoppers
expect on a price tag; Python's ``round`` would give banker's rounding.
They are only applied at the edge of a public result, never mid-calculation.
"""
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from grocery.utilities.constants import DISPLAY_DECIMALS


def _quantize(value: float, quantum: Decimal) -> Decimal:
    # str() gives the shortest repr, so 349.60000000000002 becomes 349.6 first
    d = Decimal(str(value))
    with localcontext() as ctx:
        # enough digits for every float magnitude, not just the default 28
        ctx.prec = max(ctx.prec, d.adjusted() - quantum.adjusted() + 2)
        return d.quantize(quantum, rounding=ROUND_HALF_UP)


def round_display(value: float, decimals: int = DISPLAY_DECIMALS) -> float:
    """Round a quantity for display, half-up, to ``decimals`` places.

    Infinities and NaN are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return float(_quantize(value, Decimal(1).scaleb(-decimals)))


def round_cents(value: float) -> int:
    """Round a cent amount to a whole number of cents, half-up."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite amount {value!r} to cents")
    return int(_quantize(value, Decimal(1)))
