"""persona: a person record and two arithmetic helpers.

This is the main package initialization file. The public API is
re-exported here.
"""

import logging

from persona.core import Person
from persona.utils import multiply, sum, variable  # noqa: A004

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Person",
    "sum",
    "multiply",
    "variable",
]
