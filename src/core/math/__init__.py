"""
Core math modules

Линейная алгебра (Vector, Matrix), таксономия ошибок, мемоизация,
комбинаторика и усечение десятичных знаков.
"""

# Linear algebra containers
from src.core.math.linalg import (
    EPS,
    MATRIX_RAGGED_ROWS_MESSAGE,
    Matrix,
    Vector,
)

# Error taxonomy
from src.core.math.exceptions import (
    DIMENSION_MISMATCH_PHRASE,
    SINGULAR_MATRIX_PHRASE,
    DimensionMismatchError,
    ErrorKind,
    SingularMatrixError,
)

# Memoization
from src.core.math.memoize import (
    MEMO_KEY_SEPARATOR,
    Memoized,
    canonical_key,
    memoize,
)

# Combinatorics
from src.core.math.combinatorics import binomial, factorial

# Rounding
from src.core.math.rounding import (
    number_to_text,
    parse_float_prefix,
    parse_int_prefix,
    round_to_places,
)

__all__ = [
    # Linear algebra — Constants
    "EPS",
    "MATRIX_RAGGED_ROWS_MESSAGE",
    # Linear algebra — Types
    "Matrix",
    "Vector",
    # Errors — Constants
    "DIMENSION_MISMATCH_PHRASE",
    "SINGULAR_MATRIX_PHRASE",
    # Errors — Types
    "DimensionMismatchError",
    "ErrorKind",
    "SingularMatrixError",
    # Memoization
    "MEMO_KEY_SEPARATOR",
    "Memoized",
    "canonical_key",
    "memoize",
    # Combinatorics
    "binomial",
    "factorial",
    # Rounding
    "number_to_text",
    "parse_float_prefix",
    "parse_int_prefix",
    "round_to_places",
]
