"""Calculator class holding a result register and a memory register."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from calcengine.config import get_settings
from calcengine.exceptions import CalculatorError, ErrorKind, InvalidInputError
from calcengine.operations import add, divide, multiply, subtract
from calcengine.validators import validate_number

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registers:
    """Immutable snapshot of calculator state."""

    memory: float
    last_result: float

    def __str__(self) -> str:
        return f"M={self.memory} last={self.last_result}"


@dataclass(frozen=True)
class Outcome:
    """Result of a non-raising operation: a value or an error kind, never both."""

    value: float | None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BasicCalculator:
    """
    A calculator with a last-result register and a memory register.

    Every successful arithmetic call overwrites ``last_result``; a failed
    call leaves both registers untouched. The memory register changes only
    through the ``memory_*`` methods. Instances are not thread-safe.

    Example:
        >>> calc = BasicCalculator()
        >>> calc.divide(10, 2)
        5.0
        >>> calc.memory_store(7)
        >>> calc.clear()
        >>> calc.get_last_result(), calc.memory_recall()
        (0.0, 7.0)
    """

    def __init__(self, epsilon: float | None = None) -> None:
        """
        Initialize both registers to zero.

        Args:
            epsilon: Zero tolerance for division (default from settings)

        Raises:
            InvalidInputError: If epsilon is not a positive number, or the
                configured CALCENGINE_EPSILON is invalid
        """
        if epsilon is None:
            try:
                epsilon = get_settings().epsilon
            except ValidationError as e:
                raise InvalidInputError("CALCENGINE_EPSILON", "Invalid configured epsilon") from e
        epsilon = validate_number(epsilon)
        if not epsilon > 0:
            raise InvalidInputError(epsilon, "Epsilon must be positive")
        self._epsilon = epsilon
        self._memory = 0.0
        self._last_result = 0.0

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @property
    def memory(self) -> float:
        """Current memory register."""
        return self._memory

    @property
    def last_result(self) -> float:
        """Result of the last successful arithmetic operation."""
        return self._last_result

    def registers(self) -> Registers:
        return Registers(memory=self._memory, last_result=self._last_result)

    def _apply(
        self, operation: Callable[[float, float], float], a: float, b: float, op_name: str
    ) -> float:
        """Run a binary operation and record its result on success."""
        try:
            result = operation(a, b)
        except CalculatorError as e:
            logger.info(
                "%s failed: %s", op_name, e,
                extra={"operation": op_name, "operands": (a, b), "error_kind": e.kind.value},
            )
            raise
        result = float(result)
        self._last_result = result
        logger.debug(
            "%s succeeded", op_name,
            extra={"operation": op_name, "operands": (a, b), "result": result},
        )
        return result

    def add(self, a: float, b: float) -> float:
        """Return a + b; raises OverflowError on an infinite result."""
        return self._apply(add, a, b, "add")

    def subtract(self, a: float, b: float) -> float:
        """Return a - b; raises OverflowError on an infinite result."""
        return self._apply(subtract, a, b, "subtract")

    def multiply(self, a: float, b: float) -> float:
        """Return a * b; raises OverflowError on an infinite result, keeps NaN."""
        return self._apply(multiply, a, b, "multiply")

    def divide(self, a: float, b: float) -> float:
        """Return a / b; raises DivisionByZeroError if b is zero within epsilon."""
        return self._apply(self._divide, a, b, "divide")

    def _divide(self, a: float, b: float) -> float:
        return divide(a, b, self._epsilon)

    def attempt(self, operation: str, a: float, b: float) -> Outcome:
        """
        Run an arithmetic operation without raising calculation errors.

        Args:
            operation: One of "add", "subtract", "multiply", "divide"
            a: First operand
            b: Second operand

        Returns:
            Outcome with the value on success, or the error kind on failure

        Raises:
            InvalidInputError: If operation is not a known name
        """
        methods: dict[str, Callable[[float, float], float]] = {
            "add": self.add,
            "subtract": self.subtract,
            "multiply": self.multiply,
            "divide": self.divide,
        }
        if operation not in methods:
            raise InvalidInputError(operation, "Unknown operation")

        try:
            return Outcome(value=methods[operation](a, b))
        except CalculatorError as e:
            return Outcome(value=None, error=e.kind)

    def memory_store(self, value: float) -> None:
        self._memory = validate_number(value)

    def memory_recall(self) -> float:
        return self._memory

    def memory_clear(self) -> None:
        self._memory = 0.0

    def clear(self) -> None:
        """Reset the last result to zero. Memory is not affected."""
        self._last_result = 0.0

    def get_last_result(self) -> float:
        return self._last_result

    def __repr__(self) -> str:
        return f"BasicCalculator(memory={self._memory}, last_result={self._last_result})"
