"""
===============================================================================
HAMILTON - Quaternion Literal Formatting and Parsing
===============================================================================
Conversion between the four quaternion components and the literal form

    a+bi+cj+dk

e.g. ``12.0-34.0i+1.0j+5.0k``. Every number is written in Python's shortest
float form. A sign always precedes the i, j and k coefficients; the real part
carries a sign only when it is negative.

The accepted grammar is deliberately narrow: each of the four numbers may
have at most one fractional digit. Values with finer precision format fine
but do not parse back, so the round-trip only holds for components such as
``12.0`` or ``-4.5``.
===============================================================================
"""

import logging
from typing import Tuple

from hamilton.constants import COMPONENT_PATTERN, IMAGINARY_UNITS, LITERAL_PATTERN
from hamilton.errors import FormatError

logger = logging.getLogger(__name__)


def _number_text(value: float) -> str:
    # float() first so numpy scalars print as plain floats.
    return repr(float(value))


def format_components(a: float, b: float, c: float, d: float) -> str:
    """
    Format four components as a quaternion literal.

    Parameters
    ----------
    a, b, c, d : float
        Real part and the i, j, k coefficients.

    Returns
    -------
    str
        Literal of the form ``a+bi+cj+dk`` with no surrounding brackets.
    """
    parts = [_number_text(a)]
    for value, unit in zip((b, c, d), IMAGINARY_UNITS):
        text = _number_text(value)
        # -0.0 already carries its sign in the text.
        if not text.startswith("-"):
            text = "+" + text
        parts.append(text + unit)
    return "".join(parts)


def is_literal(text) -> bool:
    """True if ``text`` is a string matching the quaternion literal grammar."""
    return isinstance(text, str) and LITERAL_PATTERN.fullmatch(text) is not None


def parse_components(text: str) -> Tuple[float, float, float, float]:
    """
    Parse a quaternion literal into its four components.

    Parameters
    ----------
    text : str
        Literal in the form produced by :func:`format_components`.

    Returns
    -------
    tuple of float
        ``(a, b, c, d)`` in real, i, j, k order.

    Raises
    ------
    FormatError
        If ``text`` is not a string or does not match the grammar.
    """
    if not is_literal(text):
        logger.debug("Rejected quaternion literal %r", text)
        raise FormatError(text)

    values = [float(token) for token in COMPONENT_PATTERN.findall(text)]
    a, b, c, d = values
    return a, b, c, d
