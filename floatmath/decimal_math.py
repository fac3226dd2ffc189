# -*- coding: utf-8 -*-
"""
Decimal-safe Float Arithmetic.

Purpose:
- Add, sum and round plain Python floats without exposing binary
  representation error (0.1 + 0.2 -> 0.3, 1.005 -> 1.01).
- Validate every operand at the boundary and raise a distinct error per
  failure (see errors.py). Only the decimal count is forgiving: anything
  unusable silently becomes config.DEFAULT_DECIMALS.

Rounding works on the shortest decimal form of a float (`str(value)`),
quantized with `Decimal` half away from zero. Each call builds its own
decimal Context, so the global decimal context is never touched.
"""
from __future__ import annotations

import logging
import math
import sys
from collections.abc import Collection, Mapping, Sequence
from decimal import Context, Decimal, localcontext
from functools import reduce

from . import config as cfg
from .errors import InvalidElement, InvalidOperand, InvalidSequence, InvalidValue

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)
# Largest int that float() can represent without overflowing.
_FLOAT_MAX_INT = int(sys.float_info.max)


def is_number(value) -> bool:
    """
    True for float values and for ints within float range.

    bool, str, Decimal and Fraction are rejected, and so are ints too large to
    become a float (e.g. 10 ** 400).
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return abs(value) <= _FLOAT_MAX_INT
    return isinstance(value, float)


def all_numbers(values) -> bool:
    """
    Check that `values` is a non-empty collection made only of numbers.

    Never raises. Text, mappings, empty collections and one-shot iterators
    (generators) give False, so the check can't consume its input.
    """
    if isinstance(values, _TEXT_TYPES + (Mapping,)) or not isinstance(values, Collection):
        return False
    if len(values) == 0:
        return False
    return all(is_number(v) for v in values)


def safe_decimal_count(n, min_value: int, default: int) -> int:
    """
    Return `n` rounded to an int if it is a finite number strictly greater
    than `min_value`, otherwise `default`.

    Note the strict comparison: with min_value=1 a count of exactly 1 is
    replaced by the default.
    """
    if is_number(n) and n > min_value:
        if isinstance(n, int):
            return n
        if math.isfinite(n):
            return int(Decimal(str(n)).to_integral_value(rounding=cfg.ROUNDING))
    if n is not None:
        logger.debug("Decimal count %r rejected, using %d", n, default)
    return default


def _as_decimal(value) -> Decimal:
    return Decimal(str(value))


def _quantize(d: Decimal, places: int) -> Decimal:
    """Round a finite Decimal to `places` fractional digits."""
    if d.as_tuple().exponent >= -places:
        # already has no more than `places` fractional digits
        return d
    ctx = Context(prec=max(cfg.DECIMAL_PRECISION, d.adjusted() + places + 2),
                  rounding=cfg.ROUNDING)
    return d.quantize(Decimal(f"1e-{places}"), context=ctx)


def round_to_decimals(value, decimals=None) -> float:
    """
    Round `value` to `decimals` fractional digits, half away from zero.

    Rules:
    - `value` must be a number, else InvalidValue.
    - `decimals` goes through safe_decimal_count(decimals, MIN_DECIMALS,
      DEFAULT_DECIMALS), so None, 0, 1, negative or non-numeric counts all
      mean 2.
    - nan and +/-inf are returned unchanged.
    """
    if not is_number(value):
        logger.debug("round_to_decimals rejected %s value", type(value).__name__)
        raise InvalidValue()

    places = safe_decimal_count(decimals, cfg.MIN_DECIMALS, cfg.DEFAULT_DECIMALS)
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return float(_quantize(_as_decimal(value), places))


def add(a, b, decimals=None) -> float:
    """
    Add two numbers and round the result to `decimals` fractional digits.

    The operands are added as decimals, not floats, so the float error in
    0.003 + 0.022 (0.024999...) can't flip the rounding.

    >>> add(0.1, 0.2)
    0.3
    """
    if not (is_number(a) and is_number(b)):
        logger.debug("add rejected operands of type %s and %s",
                     type(a).__name__, type(b).__name__)
        raise InvalidOperand()

    places = safe_decimal_count(decimals, cfg.MIN_DECIMALS, cfg.DEFAULT_DECIMALS)
    return _exact_sum((a, b), places)


def _exact_sum(values: Sequence, places: int) -> float:
    """Add the decimal forms of `values` without loss, then round once."""
    decs = [_as_decimal(v) for v in values]
    if not all(d.is_finite() for d in decs):
        # nan/inf can't be summed as Decimals; plain float addition gives the IEEE answer
        return round_to_decimals(float(sum(values)), places)

    hi = max(d.adjusted() for d in decs)
    lo = min(d.as_tuple().exponent for d in decs)
    with localcontext(Context(prec=max(cfg.DECIMAL_PRECISION, hi - lo + len(decs) + 2),
                              rounding=cfg.ROUNDING)):
        total = sum(decs, Decimal(0))
    return float(_quantize(total, places))


def array_sum(values, decimals=None, stepwise: bool | None = None) -> float:
    """
    Sum a non-empty sequence of numbers, rounded to `decimals` digits.

    Both checks below run before anything is added, so a bad input never
    yields a partial total:
    - `values` must be a non-empty list/tuple-like Sequence (not text), else
      InvalidSequence.
    - Every item must be a number, else InvalidElement.

    stepwise=True (the default, see config.STEPWISE_SUM) adds left to right
    with add(), rounding after every pair. Rounding error can build up, e.g.
    array_sum([0.001, 0.001, 0.004]) == 0.0. stepwise=False adds the exact
    decimal values first and rounds once (0.01 for the same input).
    """
    if isinstance(values, _TEXT_TYPES) or not isinstance(values, Sequence) or len(values) == 0:
        logger.debug("array_sum rejected %s input", type(values).__name__)
        raise InvalidSequence()
    if not all_numbers(values):
        logger.debug("array_sum rejected a sequence with non-numeric items")
        raise InvalidElement()

    places = safe_decimal_count(decimals, cfg.MIN_DECIMALS, cfg.DEFAULT_DECIMALS)
    if stepwise is None:
        stepwise = cfg.STEPWISE_SUM

    if not stepwise:
        return _exact_sum(values, places)

    total = reduce(lambda acc, item: add(acc, item, places), values)
    # a single item never went through add()
    return round_to_decimals(total, places)
