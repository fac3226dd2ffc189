# -*- coding: utf-8 -*-
"""
Custom Exception Classes for floatmath.

Purpose:
- One exception per validation failure, so callers can tell them apart by
  type or by the stable `code` attribute instead of parsing messages.
- Every error also derives from TypeError: each one reports a value of the
  wrong kind, and existing `except TypeError` handlers keep working.
"""

from __future__ import annotations

from . import config as cfg


class FloatMathError(Exception):
    """
    Base class for all floatmath validation errors.

    `code` is the stable identifier to match on. It never changes between
    releases, while `message` is meant for humans and may be reworded.
    """

    code = "floatmath_error"
    default_message = "floatmath: invalid input."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidOperand(FloatMathError, TypeError):
    """
    Raised by add() when one or both operands are not numbers.
    """
    code = "invalid_operand"
    default_message = cfg.ADD_ERROR


class InvalidValue(FloatMathError, TypeError):
    """
    Raised by round_to_decimals() when the value is not a number.
    """
    code = "invalid_value"
    default_message = cfg.ROUND_ERROR


class InvalidSequence(FloatMathError, TypeError):
    """
    Raised by array_sum() when its input is not a non-empty sequence:
    - Empty lists and tuples.
    - Text and bytes, which are sequences but not of numbers.
    - Anything that is not a sequence at all (sets, generators, dicts, scalars).
    """
    code = "invalid_sequence"
    default_message = cfg.VALID_SEQUENCE


class InvalidElement(FloatMathError, TypeError):
    """
    Raised by array_sum() when at least one item is not a number.
    """
    code = "invalid_element"
    default_message = cfg.VALID_NUMBER
