"""Amount parsing, rounding and display formatting.

All numeric form input goes through ``parse_amount``. It is the single
place where blank or malformed text is coerced to zero, so a stricter
parser can replace it without touching the calculators.
"""

from __future__ import annotations

import re
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

ZERO = Decimal("0")
HALF = Decimal("0.5")
DISPLAY_PRECISION = Decimal("0.001")  # en-IN locale shows at most 3 fraction digits
PLACEHOLDER = "—"

# Magnitudes a browser number can hold; anything outside counts as unparsable.
MAX_EXPONENT = 308
MIN_EXPONENT = -324

# Longest numeric prefix: sign, digits with optional fraction, optional exponent.
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _usable(amount: Decimal) -> Decimal:
    if not amount.is_finite():
        return ZERO
    if amount and not MIN_EXPONENT <= amount.adjusted() <= MAX_EXPONENT:
        return ZERO
    return amount


def parse_amount(value: Any) -> Decimal:
    """Parse the leading numeric prefix of ``value``.

    Leading whitespace is skipped and trailing garbage ignored, so
    ``"12000.5"`` -> 12000.5, ``"12abc"`` -> 12, ``"1e3"`` -> 1000.
    Returns 0 for None, empty or non-numeric input. Never raises.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return _usable(value)

    match = _NUMERIC_PREFIX.match(str(value).lstrip())
    if not match:
        return ZERO
    try:
        parsed = Decimal(match.group(0))
    except InvalidOperation:
        return ZERO
    return _usable(parsed)


def round_js(amount: Decimal) -> Decimal:
    """Round to the nearest whole unit, halves towards +infinity.

    Matches browser ``Math.round``: 2.5 -> 3, -2.5 -> -2.
    """
    return (amount + HALF).to_integral_value(rounding=ROUND_FLOOR)


def group_indian(digits: str) -> str:
    """Group an unsigned integer string in lakh/crore style (12,34,567)."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: Decimal | None) -> str:
    """Format an amount for display.

    Positive amounts get Indian digit grouping and up to three fraction
    digits (``100000`` -> ``1,00,000``). Zero, negative and missing
    amounts render as an em-dash placeholder.
    """
    if amount is None or amount <= 0:
        return PLACEHOLDER

    with localcontext() as ctx:
        # Room for every integer digit plus the three fraction digits
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        quantized = amount.quantize(DISPLAY_PRECISION, rounding=ROUND_HALF_UP)

    whole, _, fraction = format(quantized, "f").partition(".")
    fraction = fraction.rstrip("0")

    grouped = group_indian(whole)
    return f"{grouped}.{fraction}" if fraction else grouped
