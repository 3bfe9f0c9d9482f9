"""Value formatting for template output.

This module converts JSON scalars into the exact text written into the
HTML: plain text for identifiers and labels, and fixed two-decimal strings
for currency amounts.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

_CENTS = Decimal("0.01")


def format_currency(value: float | int) -> str:
    """Format an amount with exactly two decimal places.

    Rounding is half-up on the shortest decimal form of the value, so
    ``0.125`` becomes ``"0.13"`` and ``1.005`` becomes ``"1.01"``. No
    thousands separators or locale rules are applied.

    Args:
        value: Amount to format

    Returns:
        Fixed-point string such as ``"1234.50"``

    Raises:
        ValueError: If the value is infinite
    """
    try:
        with localcontext() as ctx:
            ctx.prec = 60
            amount = Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Cannot format {value!r} as currency") from e
    return f"{amount:f}"


def as_text(value: Any) -> str:
    """Render a JSON scalar as template text.

    Args:
        value: Value taken from the parsed JSON tree

    Returns:
        Strings unchanged, numbers in their shortest form, booleans as
        ``true``/``false``, null and containers as an empty string
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def as_number(value: Any) -> float:
    """Read a JSON value as a float.

    Numeric strings are accepted, matching how amounts are sometimes quoted
    in exported data.

    Raises:
        ValueError: If the value cannot be read as a number
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Expected a number, got {value!r}")
    return float(value)
