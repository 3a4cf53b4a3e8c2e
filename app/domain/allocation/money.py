"""
Fixed-point money helpers.

Every monetary value in the ledger is a Decimal rounded to eight
decimal places with ROUND_HALF_UP after each arithmetic step.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MONEY_PLACES = 8
MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_PLACES)  # 0.00000001
ZERO = Decimal("0")


def quantize(value: Decimal) -> Decimal:
    """Round a Decimal to the ledger precision (half away from zero)."""
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def parse_number(value: object) -> Decimal | None:
    """Convert a caller-supplied number into an exact, finite Decimal.

    Returns None when the value is not a finite number. Booleans are
    rejected even though they are ints. Floats go through ``str`` so that
    ``0.1`` becomes ``Decimal("0.1")`` and not its binary expansion.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        candidate = value
    elif isinstance(value, int):
        candidate = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        candidate = Decimal(str(value))
    elif isinstance(value, str):
        try:
            candidate = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None

    return candidate if candidate.is_finite() else None


def to_amount(value: object) -> Decimal | None:
    """Parse a caller-supplied number and round it to ledger precision."""
    candidate = parse_number(value)
    if candidate is None:
        return None
    try:
        return quantize(candidate)
    except InvalidOperation:
        # More significant digits than the Decimal context can carry.
        return None
