"""
decmath — элементарные функции над Decimal произвольной точности

exp, ln, power, sqrt, root, sin, cos, tan, arcsin, arccos, arctan
с явным контекстом округления (точность + режим округления).

Два уровня:
- kernels: ряды Тейлора и Newton–Raphson до неподвижной точки
- dispatch (power, roots, exponential, trigonometry): guard digits,
  редукция аргумента, финальное округление
"""

# Context
from decmath.context import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    GUARD_DIGITS,
    GUARD_ROUNDING,
    RoundingContext,
    RoundingMode,
    as_rounding_context,
    round_to,
)

# Constants
from decmath.constants import PI, pi

# Errors
from decmath.errors import DecimalMathError, InvalidArgumentError

# Dispatch
from decmath.power import get_fraction, get_whole, power_int
from decmath.roots import root, sqrt
from decmath.exponential import exp, ln, power
from decmath.trigonometry import arccos, arcsin, arctan, cos, sin, tan

# Tolerance
from decmath.tolerance import compare_with_tolerance, is_close, ulp

__all__ = [
    # Context
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "GUARD_DIGITS",
    "GUARD_ROUNDING",
    "RoundingContext",
    "RoundingMode",
    "as_rounding_context",
    "round_to",
    # Constants
    "PI",
    "pi",
    # Errors
    "DecimalMathError",
    "InvalidArgumentError",
    # Power
    "get_fraction",
    "get_whole",
    "power_int",
    # Roots
    "root",
    "sqrt",
    # Exponential
    "exp",
    "ln",
    "power",
    # Trigonometry
    "arccos",
    "arcsin",
    "arctan",
    "cos",
    "sin",
    "tan",
    # Tolerance
    "compare_with_tolerance",
    "is_close",
    "ulp",
]
