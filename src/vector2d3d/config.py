"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for the numeric conventions shared
by both vector types.

Why is this file needed?
------------------------
1. Consistency: Vector2D and Vector3D are independent of each other, but they
   must agree on the storage precision and on what "close enough" means.
2. Single point of change: the tolerances used by `is_close` and the log
   record layout live here rather than being hardcoded in each module.

Exports:
    FLOAT_DTYPE (type): NumPy scalar type used for every vector component.
    ACCUMULATOR_DTYPE (type): Precision used for norms and cosine ratios.
    DEFAULT_REL_TOL (float): Default relative tolerance for approximate equality.
    DEFAULT_ABS_TOL (float): Default absolute tolerance for approximate equality.
    LOGGER_NAME (str): Name of the package logger.
    LOG_FORMAT (str): Record format used by `setup_logging`.
    LOG_DATE_FORMAT (str): Timestamp format used by `setup_logging`.
"""
import numpy as np


# Numeric Constants
FLOAT_DTYPE: type[np.float32] = np.float32

# Squares of any finite float32 fit in a float64 without under/overflow
ACCUMULATOR_DTYPE: type[np.float64] = np.float64

# Roughly a few ULPs of a float32 around 1.0
DEFAULT_REL_TOL: float = 1e-6
DEFAULT_ABS_TOL: float = 1e-6

# Logging
LOGGER_NAME: str = "vector2d3d"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
