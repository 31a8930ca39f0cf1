"""Core functionality for persona.

This module holds the ``Person`` record and its two behaviours.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class Person:
    """A named person with a mutable age.

    Values are stored exactly as given. Neither field is validated or
    coerced, so a negative or fractional age is kept and incremented
    like any other number.

    Attributes:
        name: The person's name
        age: The person's current age
    """

    def __init__(self, name: str, age: Any) -> None:
        """Initialize the Person.

        Args:
            name: The name to assign
            age: Initial age
        """
        self.name = name
        self.age = age

    @classmethod
    def create(cls, name: str, age: Any) -> Person:
        """Build a Person from a name and an age.

        Examples:
            >>> Person.create("Ada", 30).age
            30
        """
        return cls(name, age)

    def greet(self, message: str) -> str:
        """Return ``message`` followed by a self-introduction.

        Args:
            message: Opening words of the greeting

        Returns:
            The greeting, formatted as ``"<message>, I'm <name>"``

        Examples:
            >>> Person("Ada", 30).greet("Hello")
            "Hello, I'm Ada"
        """
        return f"{message}, I'm {self.name}"

    def birthday(self) -> None:
        """Increase age by one.

        Examples:
            >>> ada = Person("Ada", 30)
            >>> ada.birthday()
            >>> ada.age
            31
        """
        self.age += 1
        logger.debug("%s is now %s", self.name, self.age)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"Person(name={self.name!r}, age={self.age!r})"
