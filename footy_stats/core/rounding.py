"""Decimal rounding used for per-game averages."""

from decimal import Decimal


def round_to_tenths(total: int, count: int) -> Decimal:
    """Return ``total / count`` rounded to one decimal place, halves away from zero.

    The division is done on a scaled integer so the result never carries
    binary floating-point artifacts, and the returned ``Decimal`` always has
    exactly one fractional digit (``Decimal("3.0")``, not ``Decimal("3")``).
    Negative totals round by magnitude, so ``-1 / 4`` gives ``-0.3`` just as
    ``1 / 4`` gives ``0.3``. A result that rounds to zero is ``0.0``.

    Args:
        total: Sum being averaged; may be negative.
        count: Number of items, must be positive.
    """
    if count <= 0:
        msg = f"count must be positive, got {count}"
        raise ValueError(msg)
    sign = -1 if total < 0 else 1
    # floor((20 * |total| + count) / (2 * count)) == round-half-up(10 * |total| / count)
    tenths = (20 * abs(total) + count) // (2 * count)
    return Decimal(sign * tenths).scaleb(-1)


def format_tenths(total: int, count: int) -> str:
    """Return the rounded average as a string such as ``"7.0"``."""
    return str(round_to_tenths(total, count))
