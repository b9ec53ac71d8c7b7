from __future__ import annotations

from math import pi

import numpy as np

from vector2d3d.config import FLOAT_DTYPE


def as_float32(value: float) -> np.float32:
    """Coerce a Python or NumPy number to the component precision."""
    return FLOAT_DTYPE(value)


def clamp_unit(value: float) -> np.float32:
    """
    Clamp a cosine ratio into the domain of arccos.

    Rounding in single precision can push the ratio of a dot product to the
    product of magnitudes slightly outside [-1, 1], which would make
    `np.arccos` return NaN.

    Args:
        value: The ratio to clamp.

    Returns:
        The value limited to [-1, 1]. NaN is passed through unchanged.
    """
    return as_float32(np.clip(as_float32(value), -1.0, 1.0))


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def rad2deg(radians: float) -> float:
    return radians * 180 / pi
