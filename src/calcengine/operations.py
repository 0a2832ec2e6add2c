"""Binary arithmetic with the engine's overflow and zero-divisor policy."""

import math

from calcengine.exceptions import DivisionByZeroError, OverflowError
from calcengine.math_utils import DEFAULT_EPSILON, is_zero
from calcengine.validators import validate_number


def add(a: float, b: float) -> float:
    """
    Add two numbers with overflow protection.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are not numbers
        OverflowError: If the result is infinite
    """
    a = validate_number(a)
    b = validate_number(b)

    result = a + b

    if math.isinf(result):
        raise OverflowError("addition", a, b)

    return result


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a with overflow protection.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are not numbers
        OverflowError: If the result is infinite
    """
    a = validate_number(a)
    b = validate_number(b)

    result = a - b

    if math.isinf(result):
        raise OverflowError("subtraction", a, b)

    return result


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers with overflow protection.

    Only an infinite product counts as overflow. A NaN product
    (``0 * inf``) is returned as-is.

    Raises:
        InvalidInputError: If inputs are not numbers
        OverflowError: If the result is infinite
    """
    a = validate_number(a)
    b = validate_number(b)

    result = a * b

    if math.isinf(result):
        raise OverflowError("multiplication", a, b)

    return result


def divide(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> float:
    """
    Divide a by b, rejecting divisors within epsilon of zero.

    No overflow check is made: ``divide(1e308, 1e-5)`` returns infinity.

    Args:
        a: Dividend
        b: Divisor
        epsilon: Zero tolerance for the divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidInputError: If inputs are not numbers
        DivisionByZeroError: If b is zero within epsilon
    """
    a = validate_number(a)
    b = validate_number(b)

    if is_zero(b, epsilon):
        raise DivisionByZeroError(a)

    return a / b
