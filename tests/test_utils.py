"""Tests for utility functions."""

import pytest

import persona
from persona.utils import multiply, sum, variable  # noqa: A004


def test_sum():
    """Test sum with positive operands."""
    # Arrange
    x, y = 2, 3

    # Act
    result = sum(x, y)

    # Assert
    assert result == 5


def test_sum_cancels():
    """Test sum of a number and its negation."""
    assert sum(-1, 1) == 0


def test_sum_floats():
    """Test sum with float operands."""
    assert sum(0.5, 0.25) == 0.75


def test_sum_non_numeric():
    """Test sum follows native operator semantics."""
    assert sum("a", "b") == "ab"
    with pytest.raises(TypeError):
        sum(1, "b")


def test_multiply():
    """Test multiply with positive operands."""
    assert multiply(4, 5) == 20


def test_multiply_zero():
    """Test multiply by zero."""
    assert multiply(0, 100) == 0


def test_multiply_negative():
    """Test multiply with a negative operand."""
    assert multiply(-3, 4) == -12


def test_variable():
    """Test the module constant."""
    assert variable == 7


def test_variable_unchanged_after_calls():
    """Test the constant is not affected by other operations."""
    sum(variable, 1)
    multiply(variable, 2)
    person = persona.Person("Ada", variable)
    person.birthday()
    assert persona.variable == 7
    assert person.age == 8


def test_package_exports():
    """Test the public surface is re-exported from the package."""
    assert persona.sum is sum
    assert persona.multiply is multiply
    assert set(persona.__all__) == {"Person", "sum", "multiply", "variable"}
