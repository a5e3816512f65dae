"""2D Vector value type.

Every operation returns a new Vec2 and none of them raise: degenerate
inputs (zero vectors, zero divisors, NaN, infinities) produce NaN or
infinite components following IEEE 754 arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .config import get_config


# Smallest positive subnormal double, added to the length in normalize()
NORMALIZE_EPSILON = math.ulp(0.0)


def _fdiv(a: float, b: float) -> float:
    """Float division with IEEE results instead of ZeroDivisionError."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _fmin(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == 0 and b == 0:
        return a if math.copysign(1.0, a) < 0 else b
    return a if a < b else b


def _fmax(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == 0 and b == 0:
        return a if math.copysign(1.0, a) > 0 else b
    return a if a > b else b


def fclamp(val: float, lo: float, hi: float) -> float:
    """Return val clamped to [lo, hi]."""
    if val < lo:
        return lo
    elif val > hi:
        return hi
    return val


@dataclass(frozen=True, slots=True, eq=False)
class Vec2:
    """Immutable 2D vector.

    Equality is IEEE componentwise equality, so a vector holding NaN
    is not equal to anything, itself included.
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # =========================================================================
    # Products
    # =========================================================================

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """2D cross product (returns scalar z-component)."""
        return self.x * other.y - self.y * other.x

    def cross_scalar(self, s: float) -> Vec2:
        """Cross product v x s, i.e. (s*y, -s*x).

        Not the same as scalar_cross(); the two differ in sign.
        """
        return Vec2(s * self.y, -s * self.x)

    def scalar_cross(self, s: float) -> Vec2:
        """Cross product s x v, i.e. (-s*y, s*x)."""
        return Vec2(-s * self.y, s * self.x)

    def perp(self) -> Vec2:
        """Perpendicular vector (90° counterclockwise)."""
        return Vec2(-self.y, self.x)

    def rperp(self) -> Vec2:
        """Perpendicular vector (90° clockwise)."""
        return Vec2(self.y, -self.x)

    def project(self, other: Vec2) -> Vec2:
        """Project this vector onto another.

        Projecting onto the zero vector gives NaN components.
        """
        return other * _fdiv(self.dot(other), other.dot(other))

    # =========================================================================
    # Angles and Rotation
    # =========================================================================

    def to_angle(self) -> float:
        """Angular direction in radians, computed as atan2(x, y).

        The arguments are swapped relative to the usual atan2(y, x), so the
        angle is measured from the +Y axis towards +X. This is not the
        inverse of for_angle(); kept as-is for compatibility with existing
        callers.
        """
        return math.atan2(self.x, self.y)

    def to_complex(self) -> complex:
        """Complex number x + yi."""
        return complex(self.x, self.y)

    def rotate(self, other: Vec2) -> Vec2:
        """Rotate by other, multiplying both as complex numbers.

        Pass a unit vector from for_angle() to rotate by an angle.
        """
        return Vec2(
            self.x * other.x - self.y * other.y,
            self.x * other.y + self.y * other.x,
        )

    def unrotate(self, other: Vec2) -> Vec2:
        """Inverse of rotate(): multiply by the complex conjugate of other."""
        return Vec2(
            self.x * other.x + self.y * other.y,
            self.y * other.x - self.x * other.y,
        )

    # =========================================================================
    # Length and Distance
    # =========================================================================

    def length_squared(self) -> float:
        """Squared magnitude (squared distance to the origin)."""
        return self.distance_squared(ORIGIN)

    def length(self) -> float:
        """Magnitude of vector."""
        return self.distance(ORIGIN)

    def distance_squared(self, other: Vec2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance_squared(other))

    def normalize(self) -> Vec2:
        """Vector scaled to length 1.

        The length is padded by NORMALIZE_EPSILON instead of checking for
        zero. For the zero vector the scale factor overflows to infinity and
        the result is (nan, nan).
        """
        return self * _fdiv(1.0, self.length() + NORMALIZE_EPSILON)

    def clamp(self, max_length: float) -> Vec2:
        """Return vector clamped to maximum length."""
        if self.dot(self) > max_length * max_length:
            return self.normalize() * max_length
        return self

    # =========================================================================
    # Utility
    # =========================================================================

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Interpolate using self + (self - other) * t.

        Note the direction: this moves AWAY from other as t grows, unlike
        the conventional self + (other - self) * t. Kept for compatibility.
        """
        return Vec2(
            self.x + (self.x - other.x) * t,
            self.y + (self.y - other.y) * t,
        )

    def min(self, other: Vec2) -> Vec2:
        """Componentwise minimum."""
        return Vec2(_fmin(self.x, other.x), _fmin(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        """Componentwise maximum."""
        return Vec2(_fmax(self.x, other.x), _fmax(self.y, other.y))

    def is_close(self, other: Vec2, tol: Optional[float] = None) -> bool:
        """Componentwise comparison within an absolute tolerance.

        tol defaults to the configured float_tolerance.
        """
        if tol is None:
            tol = get_config().float_tolerance
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def __repr__(self) -> str:
        return f"Vec2({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0.0, 0.0)

    @classmethod
    def for_angle(cls, radians: float) -> Vec2:
        """Unit vector (cos, sin) for an angle in radians."""
        if math.isinf(radians):
            return cls(math.nan, math.nan)
        return cls(math.cos(radians), math.sin(radians))

    @classmethod
    def from_complex(cls, c: complex) -> Vec2:
        """Vector from the real (x) and imaginary (y) parts of c."""
        return cls(c.real, c.imag)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        from .codec import decode_python, to_list

        return core_schema.no_info_plain_validator_function(
            decode_python,
            serialization=core_schema.plain_serializer_function_ser_schema(
                to_list, info_arg=False
            ),
        )


ORIGIN = Vec2(0.0, 0.0)
