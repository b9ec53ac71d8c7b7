"""Pytest fixtures for vector2d3d tests."""

import logging

import pytest

from vector2d3d import Vector2D, Vector3D


@pytest.fixture
def v2_pair() -> tuple[Vector2D, Vector2D]:
    """Two planar vectors with small integer components."""
    return Vector2D(1.0, 2.0), Vector2D(3.0, 4.0)


@pytest.fixture
def v3_pair() -> tuple[Vector3D, Vector3D]:
    """Two spatial vectors with small integer components."""
    return Vector3D(1.0, 2.0, 3.0), Vector3D(4.0, 5.0, 6.0)


@pytest.fixture
def package_logger():
    """The package logger, restored to its previous state after the test."""
    logger = logging.getLogger("vector2d3d")
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
