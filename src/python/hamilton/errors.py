"""
Exception types raised by the quaternion value type.

Both concrete errors also derive from the closest built-in exception so that
callers catching ``ValueError`` or ``ZeroDivisionError`` keep working.
"""


class QuaternionError(Exception):
    """Base class for all errors raised by :mod:`hamilton`."""


class FormatError(QuaternionError, ValueError):
    """
    A string could not be parsed as a quaternion literal.

    Attributes
    ----------
    text : object
        The offending input, exactly as received.
    """

    def __init__(self, text, message: str = None) -> None:
        self.text = text
        if message is None:
            message = f"Format must be 'a+bi+cj+dk'. Input is: {text}"
        super().__init__(message)


class DivisionError(QuaternionError, ZeroDivisionError):
    """
    Inversion of (or division by) the zero quaternion, or division by the
    real number 0.

    Attributes
    ----------
    operand : Quaternion or float
        The divisor that turned out to be zero.
    """

    def __init__(self, operand, message: str = None) -> None:
        self.operand = operand
        if message is None:
            message = f"Zero inverse found! Operand is {operand}"
        super().__init__(message)
