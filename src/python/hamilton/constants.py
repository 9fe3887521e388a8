"""
===============================================================================
HAMILTON - Numeric and Text-Format Constants
===============================================================================
Shared constants for the quaternion value type: the comparison tolerance and
the regular expressions that define the textual literal grammar.
===============================================================================
"""

import re


# =============================================================================
# NUMERIC TOLERANCES
# =============================================================================
EQUALITY_TOLERANCE = 1e-4              # absolute, per component, strict '<'
UNIT_NORM_TOLERANCE = 1e-8             # default for Quaternion.is_unit()

# =============================================================================
# TEXT GRAMMAR
# =============================================================================
# One signed number: ASCII digits, optional point, at most one fractional digit.
_NUMBER = r"[0-9]+\.?[0-9]?"

# a+bi+cj+dk -- leading sign optional, the other three mandatory.
LITERAL_PATTERN = re.compile(
    rf"[-+]?{_NUMBER}[-+]{_NUMBER}i[-+]{_NUMBER}j[-+]{_NUMBER}k"
)

# Extracts the four components, left to right, once the literal is valid.
COMPONENT_PATTERN = re.compile(rf"-?{_NUMBER}")

IMAGINARY_UNITS = ("i", "j", "k")
