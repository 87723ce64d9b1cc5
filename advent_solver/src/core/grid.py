"""Dense row-major grids with point references for puzzle solvers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    TextIO,
    Tuple,
    TypeVar,
)

import numpy as np

T = TypeVar("T")
U = TypeVar("U")

Coord = Tuple[int, int]

# NW, N, NE, W, E, SW, S, SE
COMPASS_DELTAS: Tuple[Coord, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class GridBoundsError(IndexError):
    """Raised when a coordinate, row or column lies outside the grid."""


class GridShapeError(ValueError):
    """Raised when grid data cannot be arranged into the requested shape."""


class StaleReferenceError(RuntimeError):
    """Raised when a point or view is read after its grid was mutated."""


def _require_shareable(value: Any) -> None:
    # one object ends up in many cells, so it has to behave like a value
    try:
        hash(value)
    except TypeError as exc:
        raise TypeError(
            f"fill value of type {type(value).__name__} is mutable and cannot be shared between cells"
        ) from exc


class Grid(Generic[T]):
    """Fixed-size 2D container stored as one flat row-major list.

    Cells are addressed as ``(x, y)`` where ``x`` is the column and ``y`` the
    row; the backing index is ``y * width + x``. Every mutation bumps an
    internal version counter so that outstanding :class:`GridPoint` objects and
    line views can detect that they have gone stale.
    """

    __slots__ = ("_data", "_width", "_height", "_version")

    def __init__(self, data: List[T], width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise GridShapeError(f"Grid dimensions must be non-negative, got {width}x{height}")
        if len(data) != width * height:
            raise GridShapeError(
                f"Grid data holds {len(data)} cells but {width}x{height} needs {width * height}"
            )
        self._data = data
        self._width = width
        self._height = height
        self._version = 0

    # Construction --------------------------------------------------------

    @classmethod
    def from_flat_data(cls, data: Sequence[T], width: int) -> "Grid[T]":
        """Wrap row-major ``data``; the height is derived from ``width``.

        Raises
        ------
        GridShapeError
            If ``len(data)`` is not divisible by ``width``.
        """
        data = list(data)
        if width < 0:
            raise GridShapeError(f"Grid width must be non-negative, got {width}")
        if width == 0:
            if data:
                raise GridShapeError("Data array is not evenly divisible into a grid")
            return cls(data, 0, 0)
        if len(data) % width != 0:
            raise GridShapeError("Data array is not evenly divisible into a grid")
        return cls(data, width, len(data) // width)

    @classmethod
    def from_generator(cls, width: int, height: int, func: Callable[[int, int], T]) -> "Grid[T]":
        """Build a grid by calling ``func(x, y)`` for every cell in row-major order."""
        data = [func(x, y) for y in range(height) for x in range(width)]
        return cls(data, width, height)

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> "Grid[T]":
        """Return a ``width`` x ``height`` grid with every cell set to ``value``."""
        _require_shareable(value)
        return cls([value] * (width * height), width, height)

    @classmethod
    def filled_like(cls, other: "Grid[Any]", value: T) -> "Grid[T]":
        """Return a grid shaped like ``other`` with every cell set to ``value``."""
        return cls.filled(other.width, other.height, value)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid[Any]":
        """Build a grid from a 2D ``numpy`` array (rows become grid rows)."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise GridShapeError(f"Expected a 2D array, got {arr.ndim} dimensions")
        height, width = arr.shape
        return cls(arr.ravel().tolist(), width, height)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Return the cells as a ``(height, width)`` ``numpy`` array."""
        return np.array(self._data, dtype=dtype).reshape(self._height, self._width)

    def map(self, func: Callable[[T], U]) -> "Grid[U]":
        """Return a new grid of the same shape with ``func`` applied to every cell."""
        return Grid([func(v) for v in self._data], self._width, self._height)

    def padded(self, value: T, n: int) -> "Grid[T]":
        """Return a copy surrounded by ``n`` cells of ``value`` on every side."""
        if n < 0:
            raise ValueError(f"Padding must be non-negative, got {n}")
        _require_shareable(value)
        new_w = self._width + 2 * n
        new_h = self._height + 2 * n
        data = [value] * (new_w * new_h)
        for y in range(self._height):
            start = (y + n) * new_w + n
            data[start:start + self._width] = self._data[y * self._width:(y + 1) * self._width]
        return Grid(data, new_w, new_h)

    # Shape ---------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def version(self) -> int:
        """Number of mutations applied to this grid so far."""
        return self._version

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise GridBoundsError(f"Attempted to access position ({x}, {y}) outside grid")
        return y * self._width + x

    # Cell access ---------------------------------------------------------

    def get(self, x: int, y: int) -> T:
        """Return the value at ``(x, y)``; raises :class:`GridBoundsError` if outside."""
        return self._data[self._index(x, y)]

    def try_get(self, x: int, y: int) -> Optional[T]:
        """Return the value at ``(x, y)`` or ``None`` if the position is outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self._data[y * self._width + x]

    def get_mut(self, x: int, y: int) -> T:
        """Return the stored object at ``(x, y)`` for in-place modification.

        This counts as a mutation: points and views taken earlier become stale.
        """
        idx = self._index(x, y)
        self._version += 1
        return self._data[idx]

    def set(self, x: int, y: int, value: T) -> None:
        """Store ``value`` at ``(x, y)``."""
        idx = self._index(x, y)
        self._data[idx] = value
        self._version += 1

    def fill(self, value: T) -> None:
        """Overwrite every cell with ``value``."""
        _require_shareable(value)
        self._data[:] = [value] * len(self._data)
        self._version += 1

    # Iteration -----------------------------------------------------------

    def _check_version(self, version: int) -> None:
        if version != self._version:
            raise StaleReferenceError("Grid was modified while a reference to it was held")

    def _guarded(self, items: Iterator[Any], version: int) -> Iterator[Any]:
        for item in items:
            self._check_version(version)
            yield item

    def cells(self) -> Iterator[T]:
        """Iterate over all cell values in storage order."""
        return self._guarded(iter(self._data), self._version)

    def into_cells(self) -> Iterator[T]:
        """Iterate over a snapshot of the cell values, independent of later mutation."""
        return iter(list(self._data))

    def points(self) -> Iterator["GridPoint[T]"]:
        """Iterate over a :class:`GridPoint` for every cell in storage order."""
        version = self._version
        width = self._width
        points = (
            GridPoint(self, idx, (idx % width, idx // width), version)
            for idx in range(len(self._data))
        )
        return self._guarded(points, version)

    def point(self, x: int, y: int) -> "GridPoint[T]":
        """Return the point at ``(x, y)``; raises :class:`GridBoundsError` if outside."""
        return GridPoint(self, self._index(x, y), (x, y), self._version)

    def find(self, value: T) -> Iterator["GridPoint[T]"]:
        """Iterate over the points whose value equals ``value``."""
        return (p for p in self.points() if p.value == value)

    def row_iter(self, row: int) -> "GridLine[T]":
        """Return a read-only view of row ``row`` ordered by increasing ``x``."""
        self._check_row(row)
        return GridLine(self, row * self._width, 1, self._width)

    def row_iter_mut(self, row: int) -> "MutableGridLine[T]":
        """Return a writable view of row ``row``."""
        self._check_row(row)
        return MutableGridLine(self, row * self._width, 1, self._width)

    def col_iter(self, col: int) -> "GridLine[T]":
        """Return a read-only view of column ``col`` ordered by increasing ``y``."""
        self._check_col(col)
        return GridLine(self, col, self._width, self._height)

    def col_iter_mut(self, col: int) -> "MutableGridLine[T]":
        """Return a writable view of column ``col``."""
        self._check_col(col)
        return MutableGridLine(self, col, self._width, self._height)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._height:
            raise GridBoundsError(f"Attempted to access row {row} outside the grid")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self._width:
            raise GridBoundsError(f"Attempted to access column {col} outside the grid")

    # Rendering -----------------------------------------------------------

    def render(self, func: Callable[[T], str]) -> str:
        """Render the grid row by row, one character per cell from ``func``."""
        lines = [""]
        for y in range(self._height):
            row = self._data[y * self._width:(y + 1) * self._width]
            lines.append("".join(func(v) for v in row))
        return "\n".join(lines) + "\n"

    def show_with(self, func: Callable[[T], str], stream: Optional[TextIO] = None) -> None:
        """Write :meth:`render` output to ``stream`` (``sys.stderr`` by default)."""
        out = stream if stream is not None else sys.stderr
        out.write(self.render(func))

    def __str__(self) -> str:
        if all(isinstance(v, bool) for v in self._data):
            return self.render(lambda b: "#" if b else " ")
        return repr(self)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]


class GridPoint(Generic[T]):
    """Non-owning reference to one cell of a :class:`Grid`.

    Points are immutable and cheap to copy. They remember the grid version they
    were created from; reading :attr:`value` after the grid has been mutated
    raises :class:`StaleReferenceError`.
    """

    __slots__ = ("_grid", "_version", "index", "coords")

    def __init__(self, grid: Grid[T], index: int, coords: Coord, version: int) -> None:
        self._grid = grid
        self._version = version
        self.index = index
        self.coords = coords

    @property
    def x(self) -> int:
        return self.coords[0]

    @property
    def y(self) -> int:
        return self.coords[1]

    @property
    def grid(self) -> Grid[T]:
        return self._grid

    @property
    def value(self) -> T:
        """The value stored in the referenced cell."""
        self._grid._check_version(self._version)
        return self._grid._data[self.index]

    def offset(self, dx: int, dy: int) -> Optional["GridPoint[T]"]:
        """Return the point at ``(x + dx, y + dy)`` or ``None`` if it leaves the grid."""
        x = self.coords[0] + dx
        y = self.coords[1] + dy
        grid = self._grid
        if not (0 <= x < grid._width and 0 <= y < grid._height):
            return None
        return GridPoint(grid, self.index + dy * grid._width + dx, (x, y), self._version)

    def left(self) -> Optional["GridPoint[T]"]:
        return self.offset(-1, 0)

    def right(self) -> Optional["GridPoint[T]"]:
        return self.offset(1, 0)

    def up(self) -> Optional["GridPoint[T]"]:
        return self.offset(0, -1)

    def down(self) -> Optional["GridPoint[T]"]:
        return self.offset(0, 1)

    def neighbors(self) -> Iterator["GridPoint[T]"]:
        """Iterate over the up to eight surrounding points in compass order."""
        for dx, dy in COMPASS_DELTAS:
            p = self.offset(dx, dy)
            if p is not None:
                yield p

    def walk_left(self) -> "PointWalk[T]":
        """Walk from the left neighbour to the left edge of the grid."""
        return PointWalk(self, -1, 0)

    def walk_right(self) -> "PointWalk[T]":
        """Walk from the right neighbour to the right edge of the grid."""
        return PointWalk(self, 1, 0)

    def walk_up(self) -> "PointWalk[T]":
        """Walk from the cell above to the top edge of the grid."""
        return PointWalk(self, 0, -1)

    def walk_down(self) -> "PointWalk[T]":
        """Walk from the cell below to the bottom edge of the grid."""
        return PointWalk(self, 0, 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return self._grid is other._grid and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self._grid), self.index))

    def __repr__(self) -> str:
        return f"GridPoint(x={self.coords[0]}, y={self.coords[1]})"


class PointWalk(Generic[T]):
    """Single-pass iterator stepping a point in one direction until the edge."""

    __slots__ = ("_point", "_dx", "_dy")

    def __init__(self, origin: GridPoint[T], dx: int, dy: int) -> None:
        self._point: Optional[GridPoint[T]] = origin
        self._dx = dx
        self._dy = dy

    def __iter__(self) -> "PointWalk[T]":
        return self

    def __next__(self) -> GridPoint[T]:
        if self._point is None:
            raise StopIteration
        self._point = self._point.offset(self._dx, self._dy)
        if self._point is None:
            raise StopIteration
        return self._point


class LineCursor(Generic[T]):
    """Iterator over ``count`` cells starting at ``start`` and advancing by ``step``.

    The cursor is valid as long as the line it came from is; writes made through
    a :class:`MutableGridLine` do not invalidate its own cursors.
    """

    __slots__ = ("_line", "_next", "_step", "_remaining")

    def __init__(self, line: "GridLine[T]", start: int, step: int, count: int) -> None:
        self._line = line
        self._next = start
        self._step = step
        self._remaining = count

    def __iter__(self) -> "LineCursor[T]":
        return self

    def __next__(self) -> T:
        if self._remaining == 0:
            raise StopIteration
        line = self._line
        line._grid._check_version(line._version)
        value = line._grid._data[self._next]
        self._next += self._step
        self._remaining -= 1
        return value

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining


class GridLine(Sequence, Generic[T]):
    """Read-only strided view of one row or column of a grid.

    The view covers ``count`` cells of the backing storage beginning at
    ``start`` and separated by ``stride`` (1 for rows, the grid width for
    columns). It can be iterated in both directions and reports its exact
    length.
    """

    __slots__ = ("_grid", "_version", "_start", "_stride", "_count")

    def __init__(self, grid: Grid[T], start: int, stride: int, count: int) -> None:
        self._grid = grid
        self._version = grid.version
        self._start = start
        self._stride = stride
        self._count = count

    def _offset(self, i: int) -> int:
        if not isinstance(i, int):
            raise TypeError(f"Line indices must be integers, not {type(i).__name__}")
        if not 0 <= i < self._count:
            raise GridBoundsError(f"Line index {i} outside 0..{self._count}")
        return self._start + i * self._stride

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, i: int) -> T:  # type: ignore[override]
        idx = self._offset(i)
        self._grid._check_version(self._version)
        return self._grid._data[idx]

    def __iter__(self) -> LineCursor[T]:
        return LineCursor(self, self._start, self._stride, self._count)

    def __reversed__(self) -> LineCursor[T]:
        last = self._start + (self._count - 1) * self._stride
        return LineCursor(self, last, -self._stride, self._count)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self._start}, stride={self._stride}, count={self._count})"


class MutableGridLine(GridLine[T]):
    """Writable row or column view; writes go straight to the grid storage."""

    __slots__ = ()

    def __setitem__(self, i: int, value: T) -> None:
        idx = self._offset(i)
        grid = self._grid
        grid._check_version(self._version)
        grid._data[idx] = value
        grid._version += 1
        self._version = grid._version


__all__ = [
    "COMPASS_DELTAS",
    "Coord",
    "Grid",
    "GridBoundsError",
    "GridLine",
    "GridPoint",
    "GridShapeError",
    "LineCursor",
    "MutableGridLine",
    "PointWalk",
    "StaleReferenceError",
]
