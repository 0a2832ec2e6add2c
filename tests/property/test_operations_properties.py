"""
Property-based tests for arithmetic operations using Hypothesis.

These tests verify mathematical properties that should hold for all inputs,
not just specific examples.
"""

import contextlib
import math

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from calcengine.exceptions import DivisionByZeroError, OverflowError
from calcengine.operations import add, divide, multiply, subtract

# Custom strategies for safe numbers
safe_floats = st.floats(
    min_value=-1e100,
    max_value=1e100,
    allow_nan=False,
    allow_infinity=False,
)

small_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
)

any_finite = st.floats(allow_nan=False, allow_infinity=False)

non_zero_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
).filter(lambda x: abs(x) > 1e-6)


@pytest.mark.property
class TestAddProperties:
    """Property-based tests for addition."""

    @given(a=any_finite, b=any_finite)
    def test_commutativity(self, a: float, b: float):
        """add(a, b) == add(b, a)"""
        with contextlib.suppress(OverflowError):
            assert add(a, b) == add(b, a)

    @given(a=safe_floats)
    def test_identity(self, a: float):
        """add(a, 0) == a"""
        assert add(a, 0) == a

    @given(a=any_finite, b=any_finite)
    @example(a=1.7976931348623157e308, b=1.7976931348623157e308)
    def test_overflow_iff_infinite(self, a: float, b: float):
        """add raises exactly when the IEEE sum is infinite."""
        if math.isinf(a + b):
            with pytest.raises(OverflowError):
                add(a, b)
        else:
            assert add(a, b) == a + b


@pytest.mark.property
class TestSubtractProperties:
    """Property-based tests for subtraction."""

    @given(a=safe_floats, b=safe_floats)
    def test_anti_commutativity(self, a: float, b: float):
        """subtract(a, b) == -subtract(b, a)"""
        assert subtract(a, b) == -subtract(b, a)

    @given(a=safe_floats)
    def test_self_inverse(self, a: float):
        """subtract(a, a) == 0"""
        assert subtract(a, a) == 0

    @given(a=any_finite, b=any_finite)
    def test_relationship_to_add(self, a: float, b: float):
        """subtract(a, b) == add(a, -b), including the overflow case"""
        try:
            expected = add(a, -b)
        except OverflowError:
            with pytest.raises(OverflowError):
                subtract(a, b)
        else:
            assert subtract(a, b) == expected


@pytest.mark.property
class TestMultiplyProperties:
    """Property-based tests for multiplication."""

    @given(a=any_finite, b=any_finite)
    def test_commutativity(self, a: float, b: float):
        """multiply(a, b) == multiply(b, a)"""
        with contextlib.suppress(OverflowError):
            assert multiply(a, b) == multiply(b, a)

    @given(a=safe_floats)
    def test_identity(self, a: float):
        """multiply(a, 1) == a"""
        assert multiply(a, 1) == a

    @given(a=safe_floats)
    def test_zero_absorbing(self, a: float):
        """multiply(a, 0) == 0"""
        assert multiply(a, 0) == 0

    @given(a=any_finite, b=any_finite)
    def test_never_returns_infinity(self, a: float, b: float):
        """An infinite product always surfaces as OverflowError."""
        with contextlib.suppress(OverflowError):
            assert not math.isinf(multiply(a, b))


@pytest.mark.property
class TestDivideProperties:
    """Property-based tests for division."""

    @given(a=safe_floats, b=non_zero_floats)
    def test_inverse_of_multiply(self, a: float, b: float):
        """divide(multiply(a, b), b) ≈ a"""
        result = divide(multiply(a, b), b)
        assert abs(result - a) < 1e-6 * max(abs(a), 1)

    @given(a=safe_floats)
    def test_identity(self, a: float):
        """divide(a, 1) == a"""
        assert divide(a, 1) == a

    @given(a=non_zero_floats)
    def test_self_division(self, a: float):
        """divide(a, a) == 1"""
        assert abs(divide(a, a) - 1) < 1e-10

    @given(a=safe_floats, b=st.floats(min_value=-1e-9, max_value=1e-9, exclude_min=True, exclude_max=True))
    def test_near_zero_divisor_raises(self, a: float, b: float):
        """Any divisor strictly inside (-epsilon, epsilon) raises."""
        with pytest.raises(DivisionByZeroError):
            divide(a, b)
