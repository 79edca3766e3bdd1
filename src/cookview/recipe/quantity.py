"""
Quantity normalization.

Turns the raw amount and unit of an ingredient, cookware item or timer into
the canonical (qty, qty_val, unit) triple used for display.
"""

import math
import re
from dataclasses import dataclass

# Displayed in place of a quantity when none was given
NO_QTY_NAME = "some"

# Non-negative decimals without a superfluous leading zero: "5", "1.5", "0.5", ".5"
_NUMBER_RE = re.compile(r"^((0?\.[0-9]+)|([1-9][0-9]*(\.?[0-9]+)?))$")
# Simple fractions with positive integer terms: "1/2", "3 / 4"
_FRACTION_RE = re.compile(r"^([1-9][0-9]*)\s?/\s?([1-9][0-9]*)$")


@dataclass(frozen=True)
class Quantity:
    """A normalized quantity."""

    qty: str
    qty_val: float | None
    unit: str


def try_parse_qty(text: str | None) -> float | None:
    """
    Parse a quantity string into a number.

    Examples:
        "5" -> 5.0
        "1.5" -> 1.5
        ".084" -> 0.084
        "1/2" -> 0.5
        "a pinch" -> None
        "-1" -> None
        "01.0" -> None
    """
    if not text:
        return None

    text = text.strip()

    if _NUMBER_RE.match(text):
        value = float(text)
    else:
        match = _FRACTION_RE.match(text)
        if not match:
            return None
        value = float(match.group(1)) / float(match.group(2))

    # Digit strings too long for a float overflow to inf
    return value if math.isfinite(value) else None


def normalize_quantity(
    amount: str | int | float | None,
    unit: str | None = None,
) -> Quantity:
    """
    Normalize a raw amount and unit.

    A missing or blank amount becomes NO_QTY_NAME with no numeric value.
    Textual amounts are kept verbatim, so "1/2" stays "1/2" while qty_val
    holds 0.5. Amounts that are not numbers ("a pinch", "2-3") keep
    qty_val unset rather than zero.
    """
    unit = unit or ""

    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        if not math.isfinite(amount):
            return Quantity(qty=NO_QTY_NAME, qty_val=None, unit=unit)
        text = str(int(amount)) if float(amount).is_integer() else str(amount)
        return Quantity(qty=text, qty_val=float(amount), unit=unit)

    if amount is None or not str(amount).strip():
        return Quantity(qty=NO_QTY_NAME, qty_val=None, unit=unit)

    amount = str(amount)
    return Quantity(qty=amount, qty_val=try_parse_qty(amount), unit=unit)
