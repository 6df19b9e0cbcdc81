# -*- coding: utf-8 -*-
"""core/crafting/grid.py

Fixed-size 2D container used for both the crafting input and recipe patterns.

Notes
- Storage is one flat list indexed ``y * width + x`` (row-major).
- Every coordinate access is bounds-checked; use `get_or_default()` when
  probing outside the grid is expected.
- Dimensions never change after construction. Cells may be rewritten with
  `set()` / `fill()` until the grid is frozen; `frozen()` returns a read-only
  copy. Only frozen grids are hashable.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from core.crafting.errors import InvalidDimension, OutOfBounds, ReadOnlyGrid

__all__ = ["Grid"]

T = TypeVar("T")
R = TypeVar("R")


class Grid(Generic[T]):
    __slots__ = ("width", "height", "_data", "_frozen")

    def __init__(self, width: int, height: int, fill: Optional[T] = None):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.width = int(width)
        self.height = int(height)
        self._data: List[Optional[T]] = [fill] * (self.width * self.height)
        self._frozen = False

    # -----------------
    # constructors
    # -----------------

    @classmethod
    def from_flat(cls, values: Sequence[T], width: int) -> "Grid[T]":
        """Row-major flat sequence -> grid. ``len(values)`` must be a multiple of width."""
        if width <= 0 or not values or len(values) % width:
            raise InvalidDimension(width, len(values) // width if width > 0 else 0, "values do not fill the grid")
        grid: Grid[T] = cls(width, len(values) // width)
        grid._data = list(values)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        """Build from rows (strings work: each char is a cell)."""
        if not rows:
            raise InvalidDimension(0, 0)
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise InvalidDimension(width, len(rows), "rows must all have the same length")
        grid: Grid[T] = cls(width, len(rows))
        grid._data = [cell for row in rows for cell in row]
        return grid

    @classmethod
    def generate(cls, width: int, height: int, fn: Callable[[int, int], T]) -> "Grid[T]":
        grid: Grid[T] = cls(width, height)
        for x, y in grid.coords():
            grid.set(x, y, fn(x, y))
        return grid

    def copy(self) -> "Grid[T]":
        grid: Grid[T] = Grid(self.width, self.height)
        grid._data = list(self._data)
        return grid

    def frozen(self) -> "Grid[T]":
        """Read-only copy (self if already frozen)."""
        if self._frozen:
            return self
        grid = self.copy()
        grid._frozen = True
        return grid

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_writable(self) -> None:
        if self._frozen:
            raise ReadOnlyGrid(self.width, self.height)

    # -----------------
    # access
    # -----------------

    def _index(self, x: int, y: int) -> int:
        if not self.is_valid_position(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return y * self.width + x

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[T]:
        return self._data[self._index(x, y)]

    def set(self, x: int, y: int, value: Optional[T]) -> None:
        self._check_writable()
        self._data[self._index(x, y)] = value

    def get_or_default(self, x: int, y: int, default: Optional[T] = None) -> Optional[T]:
        return self.get(x, y) if self.is_valid_position(x, y) else default

    def fill(self, value: Optional[T]) -> None:
        self._check_writable()
        self._data = [value] * len(self._data)

    def fill_region(self, start_x: int, start_y: int, end_x: int, end_y: int, value: Optional[T]) -> None:
        """Fill ``[start, end)`` on both axes; the region is clipped to the grid."""
        self._check_writable()
        for y in range(max(0, start_y), min(self.height, end_y)):
            for x in range(max(0, start_x), min(self.width, end_x)):
                self._data[y * self.width + x] = value

    # -----------------
    # iteration
    # -----------------

    def coords(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def items(self) -> Iterator[Tuple[int, int, Optional[T]]]:
        for x, y in self.coords():
            yield x, y, self._data[y * self.width + x]

    def rows(self) -> List[List[Optional[T]]]:
        w = self.width
        return [self._data[y * w : (y + 1) * w] for y in range(self.height)]

    def to_list(self) -> List[Optional[T]]:
        return list(self._data)

    def __iter__(self) -> Iterator[Optional[T]]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # -----------------
    # transforms
    # -----------------

    def map(self, fn: Callable[[int, int, Optional[T]], R]) -> "Grid[R]":
        out: Grid[R] = Grid(self.width, self.height)
        out._data = [fn(x, y, v) for x, y, v in self.items()]
        return out

    def any(self, pred: Callable[[int, int, Optional[T]], bool]) -> bool:
        return any(pred(x, y, v) for x, y, v in self.items())

    def all(self, pred: Callable[[int, int, Optional[T]], bool]) -> bool:
        return all(pred(x, y, v) for x, y, v in self.items())

    def sub_grid(self, start_x: int, start_y: int, width: int, height: int) -> "Grid[T]":
        if start_x < 0 or start_y < 0 or start_x + width > self.width or start_y + height > self.height:
            raise OutOfBounds(start_x + width - 1, start_y + height - 1, self.width, self.height)
        return Grid.generate(width, height, lambda x, y: self.get(start_x + x, start_y + y))

    def transpose(self) -> "Grid[T]":
        return Grid.generate(self.height, self.width, lambda x, y: self.get(y, x))

    def mirrored(self) -> "Grid[T]":
        """Horizontal flip (left <-> right)."""
        return Grid.generate(self.width, self.height, lambda x, y: self.get(self.width - 1 - x, y))

    # -----------------
    # value semantics
    # -----------------

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self._data == other._data

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: mutable Grid (use frozen())")
        return hash((self.width, self.height, tuple(self._data)))

    def render(self, fmt: Callable[[Optional[T]], str] = str) -> str:
        return "\n".join("[" + ", ".join(fmt(v) for v in row) + "]" for row in self.rows())

    def __repr__(self) -> str:
        return f"Grid[{self.width}x{self.height}]:\n{self.render(repr)}"

