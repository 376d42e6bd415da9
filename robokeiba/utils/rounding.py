"""Rounding helpers for index values."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_up(value: float, digits: int = 2) -> float:
    """Round a value half away from zero.

    Python's built-in ``round`` uses banker's rounding on the binary
    representation, so ``round(5.805, 2)`` gives ``5.8``. Index values are
    displayed with two decimals and must round ``x.xx5`` upward.

    The value is first reduced to 10 decimals so that float noise such as
    ``5.804999999999999`` is treated as ``5.805``.

    Args:
        value: Value to round.
        digits: Number of decimal places.

    Returns:
        The rounded value as a float. ``inf`` and ``nan`` are returned as is.
    """
    if not math.isfinite(value):
        return value

    normalized = Decimal(repr(round(value, 10)))
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the decimals
        ctx.prec = max(ctx.prec, normalized.adjusted() + digits + 2)
        return float(normalized.quantize(quantum, rounding=ROUND_HALF_UP))
