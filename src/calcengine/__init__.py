"""
Small arithmetic engine: a two-register calculator and numeric helpers.

The numeric policy in brief:
- Infinite results of add/subtract/multiply raise OverflowError
- Divisors within epsilon of zero raise DivisionByZeroError
- Undefined inputs (negative factorial, 0 to a negative power) raise DomainError
- Failed calls leave calculator state unchanged
"""

from calcengine.config import Settings, get_settings
from calcengine.core import BasicCalculator, Outcome, Registers
from calcengine.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    ErrorKind,
    InvalidInputError,
    OverflowError,
)
from calcengine.logging_config import configure_logging
from calcengine.math_utils import (
    are_equal,
    degree_to_radian,
    factorial,
    is_finite,
    is_valid_for_log,
    is_valid_for_sqrt,
    is_zero,
    power,
    radian_to_degree,
)
from calcengine.validators import validate_integer, validate_number

__all__ = [
    "BasicCalculator",
    "CalculatorError",
    "DivisionByZeroError",
    "DomainError",
    "ErrorKind",
    "InvalidInputError",
    "Outcome",
    "OverflowError",
    "Registers",
    "Settings",
    "are_equal",
    "configure_logging",
    "degree_to_radian",
    "factorial",
    "get_settings",
    "is_finite",
    "is_valid_for_log",
    "is_valid_for_sqrt",
    "is_zero",
    "power",
    "radian_to_degree",
    "validate_integer",
    "validate_number",
]

__version__ = "0.1.0"
