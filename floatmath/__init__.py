# -*- coding: utf-8 -*-
"""
Decimal-safe helpers for everyday float arithmetic.

Unlike code that sets the global `Decimal` context at import time, this
package leaves it alone. Every rounding step builds its own context, so
importing floatmath never changes how the caller's own Decimal code
behaves.
"""
from .decimal_math import (
    add,
    all_numbers,
    array_sum,
    is_number,
    round_to_decimals,
    safe_decimal_count,
)
from .errors import (
    FloatMathError,
    InvalidElement,
    InvalidOperand,
    InvalidSequence,
    InvalidValue,
)

__all__ = [
    "add",
    "all_numbers",
    "array_sum",
    "is_number",
    "round_to_decimals",
    "safe_decimal_count",
    "FloatMathError",
    "InvalidElement",
    "InvalidOperand",
    "InvalidSequence",
    "InvalidValue",
]
