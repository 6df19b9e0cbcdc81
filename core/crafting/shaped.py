# -*- coding: utf-8 -*-
"""core/crafting/shaped.py

Shaped recipes: ingredients in fixed relative positions.

A pattern (at most 3x3) may sit anywhere inside the crafting grid. Every
placement is tried in a fixed order:

- offsets by increasing ``offset_y``, then increasing ``offset_x``
- at each offset the plain pattern first, then its horizontal flip
  (only when ``mirrored`` is set)

A placement matches when every pattern cell matches its grid slot and every
grid slot outside the pattern footprint is empty. Amounts are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from core.crafting.base import GRID_SIZE, SHAPED_KEY, Slots, to_grid
from core.crafting.errors import InvalidPattern, UndefinedSymbol
from core.crafting.grid import Grid
from core.crafting.items import ItemStack, is_empty_slot, normalize_material

__all__ = ["BLANK", "Placement", "ShapedRecipe"]

logger = logging.getLogger(__name__)

BLANK = " "


class Placement(NamedTuple):
    offset_x: int
    offset_y: int
    mirrored: bool


def _is_blank(symbol: Optional[str]) -> bool:
    return symbol is None or symbol == BLANK


@dataclass(frozen=True)
class ShapedRecipe:
    """Shaped recipe value object.

    - result: crafted stack.
    - ingredients: pattern symbol -> material id (normalized on construction).
    - pattern: grid of symbols; `BLANK` (or an unset cell) means "must be empty".
    - mirrored: also accept the left-right flipped pattern.
    - name: optional recipe id, only used in error messages and logs.

    The pattern is stored as a frozen copy, so writes to `pattern` raise
    ReadOnlyGrid.
    """

    result: ItemStack
    ingredients: Mapping[str, str]
    pattern: Optional[Grid[str]]
    mirrored: bool = True
    name: Optional[str] = field(default=None, compare=False)

    key: ClassVar[str] = SHAPED_KEY

    def __post_init__(self) -> None:
        mapping = {str(k): normalize_material(v) for k, v in (self.ingredients or {}).items()}
        object.__setattr__(self, "ingredients", MappingProxyType(mapping))
        if self.pattern is not None:
            object.__setattr__(self, "pattern", self.pattern.frozen())

    def __hash__(self) -> int:
        return hash((self.result, tuple(sorted(self.ingredients.items())), self.pattern, self.mirrored))

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        ingredients: Mapping[str, str],
        result: Union[ItemStack, str],
        *,
        mirrored: bool = True,
        name: Optional[str] = None,
    ) -> "ShapedRecipe":
        """Build from pattern rows, e.g. ``["AAA", "A A", "AAA"]``.

        Rows must all have the same length (InvalidDimension otherwise) and
        fit in the 3x3 grid (InvalidPattern otherwise).
        """
        if len(rows) > GRID_SIZE or any(len(r) > GRID_SIZE for r in rows):
            raise InvalidPattern(f"Pattern larger than {GRID_SIZE}x{GRID_SIZE}: {list(rows)!r}")
        if isinstance(result, str):
            result = ItemStack.parse(result)
        return cls(result, ingredients, Grid.from_rows(list(rows)), mirrored, name)

    # -----------------
    # validation
    # -----------------

    def _require_pattern(self) -> Grid[str]:
        if self.pattern is None:
            raise InvalidPattern("Recipe pattern cannot be None")
        return self.pattern

    def _check_symbols(self, pattern: Grid[str]) -> None:
        for symbol in pattern:
            if not _is_blank(symbol) and symbol not in self.ingredients:
                raise UndefinedSymbol(symbol, self.name)

    def validate(self) -> "ShapedRecipe":
        """Raise InvalidPattern / UndefinedSymbol for a broken definition."""
        pattern = self._require_pattern()
        if pattern.width > GRID_SIZE or pattern.height > GRID_SIZE:
            raise InvalidPattern(f"Pattern larger than {GRID_SIZE}x{GRID_SIZE}: {pattern.width}x{pattern.height}")
        self._check_symbols(pattern)
        return self

    # -----------------
    # matching
    # -----------------

    def offsets(self) -> List[Tuple[int, int]]:
        pattern = self._require_pattern()
        return [
            (offset_x, offset_y)
            for offset_y in range(GRID_SIZE - pattern.height + 1)
            for offset_x in range(GRID_SIZE - pattern.width + 1)
        ]

    def _orientations(self) -> Iterator[bool]:
        yield False
        if self.mirrored:
            yield True

    def find_match(self, input: Slots) -> Optional[Placement]:
        """First placement that matches `input` (9 slots, row-major), or None."""
        grid = to_grid(input)
        pattern = self._require_pattern()
        self._check_symbols(pattern)

        for offset_x, offset_y in self.offsets():
            for mirror in self._orientations():
                if self._matches_at(grid, pattern, offset_x, offset_y, mirror):
                    placement = Placement(offset_x, offset_y, mirror)
                    logger.debug("shaped recipe %s matched at %s", self.name or self.result, placement)
                    return placement
        return None

    def matches(self, input: Slots) -> bool:
        return self.find_match(input) is not None

    def _matches_at(self, grid: Grid[ItemStack], pattern: Grid[str], offset_x: int, offset_y: int, mirror: bool) -> bool:
        for y in range(pattern.height):
            for x in range(pattern.width):
                px = pattern.width - 1 - x if mirror else x
                if not self._slot_matches(pattern.get(px, y), grid.get(offset_x + x, offset_y + y)):
                    return False

        for x, y, item in grid.items():
            inside = offset_x <= x < offset_x + pattern.width and offset_y <= y < offset_y + pattern.height
            if not inside and not is_empty_slot(item):
                return False
        return True

    def _slot_matches(self, symbol: Optional[str], item: Optional[ItemStack]) -> bool:
        if _is_blank(symbol):
            return is_empty_slot(item)

        material = self.ingredients.get(symbol)
        if material is None:
            raise UndefinedSymbol(symbol, self.name)
        return not is_empty_slot(item) and item.material == material
