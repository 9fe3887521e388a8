"""
===============================================================================
HAMILTON - Quaternion Value Type
===============================================================================
Immutable quaternions with tolerance equality and a+bi+cj+dk literals.

Submodules:
    constants    -- Equality tolerance and literal grammar
    errors       -- QuaternionError, FormatError, DivisionError
    text_format  -- Literal formatting and parsing
    quaternion   -- The Quaternion class
    demo         -- Command-line demo driver (python -m hamilton)

The package does not configure logging; attach a handler to the "hamilton"
logger to see its DEBUG records.
===============================================================================
"""

import logging

from hamilton.constants import EQUALITY_TOLERANCE
from hamilton.errors import DivisionError, FormatError, QuaternionError
from hamilton.quaternion import Quaternion
from hamilton.text_format import format_components, is_literal, parse_components

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "EQUALITY_TOLERANCE",
    "DivisionError",
    "FormatError",
    "Quaternion",
    "QuaternionError",
    "format_components",
    "is_literal",
    "parse_components",
]
