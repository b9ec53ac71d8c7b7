"""
Immutable single-precision 2D and 3D vector value types.

The two types are independent of each other and share only the numeric
conventions in `vector2d3d.config` and `vector2d3d.utils`.
"""
import logging

from vector2d3d.config import LOGGER_NAME
from vector2d3d.logging_config import setup_logging
from vector2d3d.vector2d import Vector2D
from vector2d3d.vector3d import Vector3D

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = ["Vector2D", "Vector3D", "setup_logging"]
