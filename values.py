"""Runtime value domain.

Values are plain Python objects: `float` for numbers, `str` for strings,
`bool` for booleans and `None` for nil. `stringify` renders a value the way
`print` shows it.
"""

from __future__ import annotations
import math
from decimal import Decimal
from typing import Union

Value = Union[float, str, bool, None]


def is_number(value: Value) -> bool:
    # bool is an int subclass, never a float, so this excludes true/false.
    return isinstance(value, float)


def format_number(value: float) -> str:
    """Shortest round-trip decimal text, without exponent or trailing `.0`."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def stringify(value: Value) -> str:
    match value:
        case None:
            return "nil"
        case bool():
            return "true" if value else "false"
        case float():
            return format_number(value)
        case _:
            return str(value)
