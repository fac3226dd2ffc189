"""
Central Configuration File (SSOT).
"""
from decimal import ROUND_HALF_UP

# --- Rounding Rules ---
DEFAULT_DECIMALS: int = 2
# Decimal counts must be strictly greater than this, otherwise the default is used.
MIN_DECIMALS: int = 1
# Half away from zero (decimal's ROUND_HALF_UP), e.g. 1.005 -> 1.01, -2.675 -> -2.68
ROUNDING = ROUND_HALF_UP

# Lower bound for the per-call Decimal context; grown as needed for wide results.
DECIMAL_PRECISION: int = 28

# --- Summation ---
# Round after every pairwise add (compatible behaviour) instead of once at the end.
STEPWISE_SUM: bool = True

# --- Error Messages ---
ADD_ERROR = "add: Both operands must be numbers."
ROUND_ERROR = "round_to_decimals: The specified value is not a number."
VALID_SEQUENCE = "array_sum: First parameter must be a non-empty sequence."
VALID_NUMBER = "array_sum: All sequence items must be numbers."
