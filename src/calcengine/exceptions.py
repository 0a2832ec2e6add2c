"""Exceptions raised by the arithmetic engine."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classification shared by exceptions and non-raising outcomes."""

    DOMAIN = "domain"
    OVERFLOW = "overflow"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_INPUT = "invalid_input"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    kind: ErrorKind

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DomainError(CalculatorError):
    """Raised when an input is mathematically undefined for the operation."""

    kind = ErrorKind.DOMAIN

    def __init__(self, operation: str, value: Any, reason: str) -> None:
        super().__init__(f"{reason} in {operation}", value)
        self.operation = operation
        self.reason = reason


class DivisionByZeroError(CalculatorError):
    """Raised when the divisor is within epsilon of zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class OverflowError(CalculatorError):
    """Raised when a calculation results in overflow."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands or None)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when an argument has the wrong type."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
