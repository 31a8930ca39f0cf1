"""Arithmetic helpers for persona.

``sum`` shadows the builtin within this module; import it by name or
through the package rather than with a star import.
"""

from typing import Any

variable = 7


def sum(x: Any, y: Any) -> Any:  # noqa: A001
    """Add two numbers.

    Args:
        x: Left operand
        y: Right operand

    Returns:
        ``x + y``

    Examples:
        >>> sum(2, 3)
        5
        >>> sum(-1, 1)
        0
    """
    return x + y


def multiply(x: Any, y: Any) -> Any:
    """Multiply two numbers.

    Examples:
        >>> multiply(4, 5)
        20
    """
    return x * y
