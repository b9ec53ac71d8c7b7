"""
Spatial vector value type.
"""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from vector2d3d.config import ACCUMULATOR_DTYPE, DEFAULT_ABS_TOL, DEFAULT_REL_TOL, FLOAT_DTYPE
from vector2d3d.utils import as_float32, clamp_unit

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class Vector3D:
    """
    An immutable vector in 3D space, stored in single precision.

    Represents a point/displacement, or a set of direction angles when
    produced by `direction_from_axes`.
    """
    x: np.float32
    y: np.float32
    z: np.float32

    # Make NumPy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", as_float32(self.x))
        object.__setattr__(self, "y", as_float32(self.y))
        object.__setattr__(self, "z", as_float32(self.z))

    # ------------------------------
    # Constructors
    # ------------------------------

    @classmethod
    def from_coord(cls, x: float, y: float, z: float) -> Vector3D:
        return cls(x, y, z)

    @classmethod
    def from_mag_alpha_beta_gamma(
        cls,
        magnitude: float,
        alpha_in_rad: float,
        beta_in_rad: float,
        gamma_in_rad: float
    ) -> Vector3D:
        """
        Build a vector from its magnitude and direction angles.

        Args:
            magnitude: Length of the vector.
            alpha_in_rad: Angle between the vector and the +X axis.
            beta_in_rad: Angle between the vector and the +Y axis.
            gamma_in_rad: Angle between the vector and the +Z axis.

        Notes:
            The angles are not independent: cos²α + cos²β + cos²γ must equal 1
            for the result to have the requested magnitude. This is not checked,
            supplying a consistent set is up to the caller.
        """
        mag = as_float32(magnitude)
        return cls(
            mag * np.cos(as_float32(alpha_in_rad)),
            mag * np.cos(as_float32(beta_in_rad)),
            mag * np.cos(as_float32(gamma_in_rad))
        )

    @classmethod
    def from_mag_azimuthal_polar(
        cls,
        magnitude: float,
        azimuthal_in_rad: float,
        polar_in_rad: float
    ) -> Vector3D:
        """
        Build a vector from spherical coordinates.

        Args:
            magnitude: Length of the vector.
            azimuthal_in_rad: Angle in the XY plane measured from the +X axis.
            polar_in_rad: Angle measured from the +Z axis.
        """
        mag = as_float32(magnitude)
        azimuthal = as_float32(azimuthal_in_rad)
        polar = as_float32(polar_in_rad)
        return cls(
            mag * np.sin(polar) * np.cos(azimuthal),
            mag * np.sin(polar) * np.sin(azimuthal),
            mag * np.cos(polar)
        )

    @classmethod
    def ihat(cls) -> Vector3D:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def jhat(cls) -> Vector3D:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def khat(cls) -> Vector3D:
        return cls(0.0, 0.0, 1.0)

    # ------------------------------
    # Operations
    # ------------------------------

    def perpendicular(self) -> Vector3D:
        """
        A vector perpendicular to this one.

        Computed as the cross product with the X axis, or with the Y axis when
        this vector lies along Z (crossing with a parallel axis gives zero).
        """
        if self.x == 0.0 and self.y == 0.0:
            reference = Vector3D.jhat()
        else:
            reference = Vector3D.ihat()
        return self.cross_product(reference)

    def magnitude(self) -> np.float32:
        """Euclidean norm, summed in double precision to avoid float32 under/overflow."""
        return as_float32(np.linalg.norm(self.to_array(ACCUMULATOR_DTYPE)))

    def direction_as_unit_vector(self) -> Optional[Vector3D]:
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
        return Vector3D(*(components / mag))

    def direction_from_axes(self) -> Vector3D:
        """
        Direction angles (alpha, beta, gamma) to the X, Y and Z axes.

        Returns:
            A Vector3D whose components are the angles in radians, or the zero
            vector if this vector has no length.
        """
        components = self.to_array(ACCUMULATOR_DTYPE)
        mag = np.linalg.norm(components)
        if mag == 0.0:
            logger.debug(f"Direction angles of zero-length {self!r} are undefined, returning zero vector.")
            return Vector3D(0.0, 0.0, 0.0)
        return Vector3D(*(np.arccos(clamp_unit(ratio)) for ratio in components / mag))

    def direction(self, other: Vector3D) -> np.float32:
        """
        Angle in radians between this vector and `other`, in [0, pi].

        The cosine is formed in double precision, where products of float32
        components cannot overflow, then clamped to [-1, 1] before arccos.
        Returns 0 if either vector has zero length.
        """
        a = self.to_array(ACCUMULATOR_DTYPE)
        b = other.to_array(ACCUMULATOR_DTYPE)
        mags = np.linalg.norm(a) * np.linalg.norm(b)
        if mags == 0.0:
            logger.debug(f"Angle between {self!r} and {other!r} is undefined, returning 0.")
            return FLOAT_DTYPE(0.0)
        return np.arccos(clamp_unit(np.dot(a, b) / mags))

    def dot_product(self, other: Vector3D) -> np.float32:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross_product(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def is_close(
        self,
        other: Vector3D,
        rel_tol: float = DEFAULT_REL_TOL,
        abs_tol: float = DEFAULT_ABS_TOL
    ) -> bool:
        """Component-wise approximate equality."""
        if not isinstance(other, Vector3D):
            raise TypeError(f"Cannot compare {self!r} with {type(other).__name__}.")
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rel_tol, atol=abs_tol))

    def to_array(self, dtype: npt.DTypeLike = FLOAT_DTYPE) -> npt.NDArray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    # ------------------------------
    # Arithmetic
    # ------------------------------

    def __add__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        k = as_float32(scalar)
        return Vector3D(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3D:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        k = as_float32(scalar)
        # Also catches scalars that only become zero in single precision
        if k == 0.0:
            raise ZeroDivisionError(f"Cannot divide {self!r} by {scalar!r}.")
        return Vector3D(self.x / k, self.y / k, self.z / k)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x}, y={self.y}, z={self.z})"
