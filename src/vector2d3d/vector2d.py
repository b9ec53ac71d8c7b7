"""
Planar vector value type.
"""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from vector2d3d.config import ACCUMULATOR_DTYPE, DEFAULT_ABS_TOL, DEFAULT_REL_TOL, FLOAT_DTYPE
from vector2d3d.utils import as_float32

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class Vector2D:
    """
    An immutable vector in the XY plane, stored in single precision.

    Represents either a point/displacement or a magnitude and direction pair.
    Every operation returns a new instance. NaN and Infinity components are
    accepted and propagated, never validated.
    """
    x: np.float32
    y: np.float32

    # Make NumPy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", as_float32(self.x))
        object.__setattr__(self, "y", as_float32(self.y))

    # ------------------------------
    # Constructors
    # ------------------------------

    @classmethod
    def from_coord(cls, x: float, y: float) -> Vector2D:
        return cls(x, y)

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> Vector2D:
        """Displacement vector pointing from (x1, y1) to (x2, y2)."""
        return cls(as_float32(x2) - as_float32(x1), as_float32(y2) - as_float32(y1))

    @classmethod
    def from_mag_theta(cls, magnitude: float, theta_in_rad: float) -> Vector2D:
        """
        Build a vector from polar coordinates.

        Args:
            magnitude: Length of the vector.
            theta_in_rad: Angle measured counter-clockwise from the +X axis.
        """
        mag = as_float32(magnitude)
        theta = as_float32(theta_in_rad)
        return cls(mag * np.cos(theta), mag * np.sin(theta))

    @classmethod
    def ihat(cls) -> Vector2D:
        return cls(1.0, 0.0)

    @classmethod
    def jhat(cls) -> Vector2D:
        return cls(0.0, 1.0)

    # ------------------------------
    # Operations
    # ------------------------------

    def perpendicular_ccw(self) -> Vector2D:
        """Rotate by 90 degrees counter-clockwise."""
        return Vector2D(-self.y, self.x)

    def perpendicular_cw(self) -> Vector2D:
        """Rotate by 90 degrees clockwise."""
        return Vector2D(self.y, -self.x)

    def magnitude(self) -> np.float32:
        """
        Euclidean norm.

        The squares are summed in double precision, so finite components never
        underflow to zero or overflow before the square root is taken.
        """
        return as_float32(np.linalg.norm(self.to_array(ACCUMULATOR_DTYPE)))

    def direction_as_unit_vector(self) -> Optional[Vector2D]:
        """
        Unit vector pointing in the same direction.

        Returns:
            The normalized vector, or None if the magnitude is exactly zero.
        """
        components = self.to_array(ACCUMULATOR_DTYPE)
        mag = np.linalg.norm(components)
        if mag == 0.0:
            logger.debug(f"Cannot normalize zero-length {self!r}, returning None.")
            return None
        return Vector2D(*(components / mag))

    def direction(self) -> np.float32:
        """Polar angle in radians, in the range (-pi, pi]."""
        # Adding +0.0 turns -0.0 into +0.0, keeping -pi out of the range
        return np.arctan2(self.y + FLOAT_DTYPE(0.0), self.x)

    def dot_product(self, other: Vector2D) -> np.float32:
        return self.x * other.x + self.y * other.y

    def dot_product_with_angle(self, other: Vector2D, angle: float) -> np.float32:
        """
        Dot product from magnitudes and a known angle, |a|·|b|·cos(angle).

        The angle is taken as given and is not derived from the components,
        so the result only matches `dot_product` when `angle` is the true
        angle between the two vectors.
        """
        return self.magnitude() * other.magnitude() * np.cos(as_float32(angle))

    def cross_product(self, other: Vector2D) -> np.float32:
        """Z-component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def is_close(
        self,
        other: Vector2D,
        rel_tol: float = DEFAULT_REL_TOL,
        abs_tol: float = DEFAULT_ABS_TOL
    ) -> bool:
        """Component-wise approximate equality."""
        if not isinstance(other, Vector2D):
            raise TypeError(f"Cannot compare {self!r} with {type(other).__name__}.")
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rel_tol, atol=abs_tol))

    def to_array(self, dtype: npt.DTypeLike = FLOAT_DTYPE) -> npt.NDArray:
        return np.array([self.x, self.y], dtype=dtype)

    # ------------------------------
    # Arithmetic
    # ------------------------------

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        k = as_float32(scalar)
        return Vector2D(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        k = as_float32(scalar)
        # Also catches scalars that only become zero in single precision
        if k == 0.0:
            raise ZeroDivisionError(f"Cannot divide {self!r} by {scalar!r}.")
        return Vector2D(self.x / k, self.y / k)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x}, y={self.y})"
