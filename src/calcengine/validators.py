"""Argument type checks for the engine's public functions."""

import builtins

from calcengine.exceptions import InvalidInputError, OverflowError


def validate_number(value: float) -> float:
    """
    Validate that a value is a real number and return it as a float.

    Non-finite floats pass: the engine classifies infinite and NaN
    results itself rather than rejecting them as inputs.

    Args:
        value: The value to validate

    Returns:
        The value converted to float

    Raises:
        InvalidInputError: If value is not an int or float
        OverflowError: If an int is too large for a float
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    try:
        return float(value)
    except builtins.OverflowError as e:
        raise OverflowError("float conversion") from e


def validate_integer(value: int) -> int:
    """
    Validate that a value is an integer.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int (bool is rejected too)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected integer, got {type(value).__name__}")

    return value
