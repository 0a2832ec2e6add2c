"""Stateless numeric helpers: tolerant comparison, factorial, power, angles."""

import logging
import math

from calcengine.exceptions import DomainError, OverflowError
from calcengine.validators import validate_integer, validate_number

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-9

# 170! is the largest factorial a double can hold
MAX_FACTORIAL_ARGUMENT = 170


def is_zero(value: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True if ``|value| < epsilon``."""
    return abs(value) < epsilon


def are_equal(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True if ``|a - b| < epsilon``."""
    return abs(a - b) < epsilon


def factorial(n: int) -> float:
    """
    Compute n! as a float.

    Args:
        n: Non-negative integer, at most 170

    Returns:
        The product 2 * 3 * ... * n (1.0 for n <= 1)

    Raises:
        InvalidInputError: If n is not an integer
        DomainError: If n is negative
        OverflowError: If n! does not fit in a double
    """
    validate_integer(n)

    if n < 0:
        logger.debug("factorial rejected negative argument %d", n)
        raise DomainError("factorial", n, "Undefined for negative numbers")

    if n > MAX_FACTORIAL_ARGUMENT:
        logger.debug("factorial rejected argument %d above %d", n, MAX_FACTORIAL_ARGUMENT)
        raise OverflowError("factorial", n)

    if n <= 1:
        return 1.0

    result = 1.0
    for i in range(2, n + 1):
        result *= i

    return result


def power(base: float, exponent: int) -> float:
    """
    Raise base to an integer exponent by binary exponentiation.

    Properties:
        - Zero exponent: power(x, 0) == 1 for any x
        - Reciprocal: power(x, -n) == 1 / power(x, n)

    Args:
        base: The base number
        exponent: Integer exponent

    Returns:
        base raised to exponent

    Raises:
        InvalidInputError: If base is not a number or exponent not an integer
        OverflowError: If base is an int too large for a float
        DomainError: If base is zero and exponent is negative
    """
    base = validate_number(base)
    validate_integer(exponent)

    if exponent == 0:
        return 1.0

    if exponent < 0:
        if is_zero(base):
            logger.debug("power rejected zero base with exponent %d", exponent)
            raise DomainError("power", (base, exponent), "Zero raised to a negative power")
        denominator = power(base, -exponent)
        if denominator == 0.0:
            # underflowed to a signed zero; IEEE division would give infinity
            return math.copysign(math.inf, denominator)
        return 1.0 / denominator

    result = 1.0
    current = base
    while exponent > 0:
        if exponent & 1:
            result *= current
        current *= current
        exponent >>= 1

    return result


def degree_to_radian(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radian_to_degree(radians: float) -> float:
    return radians * 180.0 / math.pi


def is_finite(value: float) -> bool:
    """Return True unless value is infinite or NaN."""
    return math.isfinite(value)


def is_valid_for_log(value: float) -> bool:
    """Return True for finite, strictly positive values."""
    return value > 0.0 and math.isfinite(value)


def is_valid_for_sqrt(value: float) -> bool:
    """Return True for finite, non-negative values."""
    return value >= 0.0 and math.isfinite(value)
