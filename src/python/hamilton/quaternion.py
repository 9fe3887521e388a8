"""
===============================================================================
HAMILTON - Quaternion Value Type
===============================================================================

Immutable quaternion q = a + b*i + c*j + d*k over double-precision floats,
with the usual algebra, approximate equality and a compact text form.

Convention
----------
Components are stored scalar-first:

    q = [a, b, c, d] = a + b*i + c*j + d*k

where a is the real part and (b, c, d) are the i, j, k coefficients.
Multiplication follows Hamilton's rules

    i^2 = j^2 = k^2 = ijk = -1

so the product is associative but NOT commutative (ij = k, ji = -k).

Equality
--------
Two quaternions are equal when every pair of components differs by less
than EQUALITY_TOLERANCE (1e-4). This relation is reflexive and symmetric
but not transitive: x, x + 0.00009 and x + 0.00018 are each equal to their
neighbour while the outer two differ. The hash is a BLAKE2 digest of the
formatted literal, so it is the same in every process, but equal
quaternions that print differently may hash differently.

Non-finite components follow IEEE-754 silently: numpy floating-point
warnings (inf - inf, inf / inf, overflow) are suppressed inside the
arithmetic, so NaN and infinities propagate without RuntimeWarning.

Nothing here mutates an instance after construction; every operation
returns a new Quaternion and instances are safe to share between threads.
===============================================================================
"""

import hashlib
import logging
import numbers
from typing import Sequence, Union

import numpy as np

from hamilton.constants import EQUALITY_TOLERANCE, UNIT_NORM_TOLERANCE
from hamilton.errors import DivisionError
from hamilton.text_format import format_components, parse_components

logger = logging.getLogger(__name__)

Scalar = Union[int, float]

# IEEE-754 results (nan, inf) are values here, not errors.
_IEEE_ERRSTATE = dict(all='ignore')


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Quaternion:
    """
    General (not necessarily unit) quaternion.

    Attributes
    ----------
    a : float
        Real part.
    b : float
        Coefficient of i.
    c : float
        Coefficient of j.
    d : float
        Coefficient of k.

    Examples
    --------
    >>> q = Quaternion(12.0, -34.0, 1.0, 5.0)
    >>> str(q)
    '12.0-34.0i+1.0j+5.0k'
    >>> Quaternion(0, 1, 0, 0) * Quaternion(0, 0, 1, 0) == Quaternion(0, 0, 0, 1)
    True
    """

    __slots__ = ("_q",)

    def __init__(self, a: float, b: float, c: float, d: float) -> None:
        """
        Build a quaternion from its four components.

        No validation is done: NaN and infinities are stored as given and
        propagate through the arithmetic like any IEEE-754 value.
        """
        q = np.array([a, b, c, d], dtype=np.float64)
        q.flags.writeable = False
        self._q = q

    # =========================================================================
    # PROPERTIES - Read access to quaternion components
    # =========================================================================

    @property
    def a(self) -> float:
        """Real part."""
        return float(self._q[0])

    @property
    def b(self) -> float:
        """Imaginary part i."""
        return float(self._q[1])

    @property
    def c(self) -> float:
        """Imaginary part j."""
        return float(self._q[2])

    @property
    def d(self) -> float:
        """Imaginary part k."""
        return float(self._q[3])

    real = a
    i_part = b
    j_part = c
    k_part = d

    @property
    def vector(self) -> np.ndarray:
        """Imaginary part [b, c, d] as a new 3-element array."""
        return self._q[1:4].copy()

    @property
    def components(self) -> np.ndarray:
        """All four components [a, b, c, d] as a new (writable) array."""
        return self._q.copy()

    @property
    def norm(self) -> float:
        """
        Euclidean norm sqrt(a^2 + b^2 + c^2 + d^2).

        Returns
        -------
        float
            Always >= 0 for finite components.
        """
        with np.errstate(**_IEEE_ERRSTATE):
            return float(np.sqrt(np.dot(self._q, self._q)))

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @staticmethod
    def zero() -> 'Quaternion':
        """Create the zero quaternion 0+0i+0j+0k."""
        return Quaternion(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_components(values: Sequence[float]) -> 'Quaternion':
        """
        Create a quaternion from a length-4 sequence or array [a, b, c, d].

        Raises
        ------
        ValueError
            If ``values`` is not one-dimensional or does not hold exactly
            four numbers.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (4,):
            if arr.ndim != 1:
                raise ValueError(
                    f"Quaternion components must be one-dimensional, "
                    f"got shape {arr.shape}"
                )
            raise ValueError(
                f"Quaternion needs exactly 4 components, got {arr.size}"
            )
        return Quaternion(arr[0], arr[1], arr[2], arr[3])

    @classmethod
    def value_of(cls, text: str) -> 'Quaternion':
        """
        Parse a literal produced by ``str(q)``.

        Parameters
        ----------
        text : str
            Literal such as ``"-1-2i+3j-4.5k"``. Each number may have at
            most one fractional digit.

        Returns
        -------
        Quaternion
            The quaternion the literal denotes.

        Raises
        ------
        FormatError
            If ``text`` does not match the literal grammar.
        """
        a, b, c, d = parse_components(text)
        return cls(a, b, c, d)

    from_string = value_of

    def clone(self) -> 'Quaternion':
        """Return an independent copy equal to (but not identical with) self."""
        return Quaternion(self.a, self.b, self.c, self.d)

    copy = clone

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def conjugate(self) -> 'Quaternion':
        """
        Conjugate a - b*i - c*j - d*k.

        Applying it twice gives back the original quaternion.
        """
        return Quaternion(self.a, -self.b, -self.c, -self.d)

    def opposite(self) -> 'Quaternion':
        """Additive inverse -a - b*i - c*j - d*k."""
        return Quaternion.from_components(-self._q)

    def plus(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise sum self + other."""
        with np.errstate(**_IEEE_ERRSTATE):
            return Quaternion.from_components(self._q + other._q)

    def minus(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise difference self - other (same as self + (-other))."""
        with np.errstate(**_IEEE_ERRSTATE):
            return Quaternion.from_components(self._q - other._q)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

        The product formula is:

            (a1 + b1*i + c1*j + d1*k) * (a2 + b2*i + c2*j + d2*k) =

            (a1*a2 - b1*b2 - c1*c2 - d1*d2) +
            (a1*b2 + b1*a2 + c1*d2 - d1*c2) i +
            (a1*c2 - b1*d2 + c1*a2 + d1*b2) j +
            (a1*d2 + b1*c2 - c1*b2 + d1*a2) k

        Parameters
        ----------
        other : Quaternion
            The right-hand factor.

        Returns
        -------
        Quaternion
            The product; in general different from ``other * self``.
        """
        a1, b1, c1, d1 = self.a, self.b, self.c, self.d
        a2, b2, c2, d2 = other.a, other.b, other.c, other.d

        a = a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2
        b = a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2
        c = a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2
        d = a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2

        return Quaternion(a, b, c, d)

    def scale(self, r: Scalar) -> 'Quaternion':
        """Multiply every component by the real number r."""
        with np.errstate(**_IEEE_ERRSTATE):
            return Quaternion.from_components(self._q * float(r))

    def times(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        """
        Product with a quaternion (Hamilton product) or a real coefficient.

        Raises
        ------
        TypeError
            If ``other`` is neither a Quaternion nor a real number.
        """
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if _is_scalar(other):
            return self.scale(other)
        raise TypeError(
            f"Cannot multiply Quaternion by {type(other).__name__}"
        )

    def inverse(self) -> 'Quaternion':
        """
        Multiplicative inverse.

            1 / (a + b*i + c*j + d*k) = (a - b*i - c*j - d*k) / n,
            n = a^2 + b^2 + c^2 + d^2

        Raises
        ------
        DivisionError
            If this quaternion is zero (within EQUALITY_TOLERANCE).
        """
        if self.is_zero():
            logger.debug("Inverse requested for zero quaternion %s", self)
            raise DivisionError(self)

        with np.errstate(**_IEEE_ERRSTATE):
            norm_sq = float(np.dot(self._q, self._q))
            return Quaternion.from_components(self.conjugate()._q / norm_sq)

    def divide_by_right(self, other: 'Quaternion') -> 'Quaternion':
        """
        Right quotient self * inverse(other).

        Raises
        ------
        DivisionError
            If ``other`` is zero; the message contains ``str(other)``.
        """
        try:
            return self.multiply(other.inverse())
        except DivisionError as exc:
            raise DivisionError(
                other,
                f"{exc} Can't divide quaternion by a zero quaternion. "
                f"Input is {other}",
            ) from exc

    def divide_by_left(self, other: 'Quaternion') -> 'Quaternion':
        """
        Left quotient inverse(other) * self.

        Raises
        ------
        DivisionError
            If ``other`` is zero; the message contains ``str(other)``.
        """
        try:
            return other.inverse().multiply(self)
        except DivisionError as exc:
            raise DivisionError(
                other,
                f"{exc} Can't divide quaternion by a zero quaternion. "
                f"Input is {other}",
            ) from exc

    def dot_mult(self, other: 'Quaternion') -> 'Quaternion':
        """
        Quaternion-valued dot product (p * conj(q) + q * conj(p)) / 2.

        The result is real (zero imaginary part) and symmetric in p and q.
        """
        return (
            self.multiply(other.conjugate())
            .plus(other.multiply(self.conjugate()))
            .scale(0.5)
        )

    def normalize(self) -> 'Quaternion':
        """
        Return self scaled to unit norm.

        Raises
        ------
        DivisionError
            If this quaternion is zero.
        """
        if self.is_zero():
            raise DivisionError(self, f"Cannot normalize zero quaternion {self}")
        return self.scale(1.0 / self.norm)

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def is_zero(self) -> bool:
        """True if every component is within EQUALITY_TOLERANCE of 0.0."""
        return self == Quaternion.zero()

    def is_unit(self, tolerance: float = UNIT_NORM_TOLERANCE) -> bool:
        """True if |norm - 1| < tolerance."""
        return abs(self.norm - 1.0) < tolerance

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.minus(other)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        return self.opposite()

    def __pos__(self) -> 'Quaternion':
        return self.clone()

    def __mul__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        """
        Multiplication operator.

        - Quaternion * Quaternion -> Hamilton product
        - Quaternion * scalar -> component-wise scaling
        """
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> 'Quaternion':
        """Right-multiplication by a scalar: scalar * Quaternion."""
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        """
        ``p / q`` is the right quotient; ``p / r`` divides by a real.

        Raises
        ------
        DivisionError
            If the divisor is the zero quaternion or the real number 0.
        """
        if isinstance(other, Quaternion):
            return self.divide_by_right(other)
        if _is_scalar(other):
            if float(other) == 0.0:
                raise DivisionError(
                    other, f"Can't divide quaternion by zero. Input is {other}"
                )
            return self.scale(1.0 / float(other))
        return NotImplemented

    def __abs__(self) -> float:
        return self.norm

    def __eq__(self, other: object) -> bool:
        """
        Approximate equality.

        Every component pair must differ by strictly less than
        EQUALITY_TOLERANCE. Comparing against a non-Quaternion is never
        an error; Python then falls back to identity and yields False.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        with np.errstate(**_IEEE_ERRSTATE):
            diff = np.abs(self._q - other._q)
            return bool(np.all(diff < EQUALITY_TOLERANCE))

    def __hash__(self) -> int:
        """
        Stable hash of the formatted literal.

        A BLAKE2 digest is used instead of ``hash(str(self))`` because string
        hashes are salted per process (PYTHONHASHSEED).
        """
        digest = hashlib.blake2b(str(self).encode('ascii'), digest_size=8).digest()
        return int.from_bytes(digest, 'big', signed=True)

    def __str__(self) -> str:
        """Literal form ``a+bi+cj+dk``, readable back with value_of()."""
        return format_components(self.a, self.b, self.c, self.d)

    def __repr__(self) -> str:
        return (f"Quaternion(a={self.a!r}, b={self.b!r}, "
                f"c={self.c!r}, d={self.d!r})")

    def __copy__(self) -> 'Quaternion':
        return self.clone()

    def __deepcopy__(self, memo) -> 'Quaternion':
        return self.clone()

    def __reduce__(self):
        return (Quaternion, (self.a, self.b, self.c, self.d))
