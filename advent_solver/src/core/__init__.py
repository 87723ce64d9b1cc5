"""Core grid data structures."""

from .grid import (
    Grid,
    GridBoundsError,
    GridLine,
    GridPoint,
    GridShapeError,
    MutableGridLine,
    StaleReferenceError,
)

__all__ = [
    "Grid",
    "GridBoundsError",
    "GridLine",
    "GridPoint",
    "GridShapeError",
    "MutableGridLine",
    "StaleReferenceError",
]
