# -*- coding: utf-8 -*-
"""Error types raised by the crafting grid and recipe matchers.

"No match" is never an error: matchers return ``False`` for that. Everything
here signals a caller defect or a broken recipe definition.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "CraftingError",
    "InvalidDimension",
    "InvalidInputSize",
    "InvalidPattern",
    "OutOfBounds",
    "ReadOnlyGrid",
    "UndefinedSymbol",
]


class CraftingError(Exception):
    """Base class for crafting errors."""


class InvalidDimension(CraftingError, ValueError):
    def __init__(self, width: Any, height: Any, reason: str = "dimensions must be positive"):
        self.width = width
        self.height = height
        super().__init__(f"Grid {reason}: width={width}, height={height}")


class OutOfBounds(CraftingError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"Position ({x}, {y}) out of bounds for {width}x{height} grid")


class InvalidInputSize(CraftingError, ValueError):
    def __init__(self, size: int, expected: int = 9):
        self.size = size
        self.expected = expected
        super().__init__(f"Crafting input must contain exactly {expected} slots, got: {size}")


class UndefinedSymbol(CraftingError, LookupError):
    def __init__(self, symbol: str, recipe: Optional[str] = None):
        self.symbol = symbol
        self.recipe = recipe
        where = f" in recipe {recipe}" if recipe else ""
        super().__init__(f"No ingredient mapping found for pattern symbol {symbol!r}{where}")


class InvalidPattern(CraftingError, ValueError):
    pass


class ReadOnlyGrid(CraftingError, TypeError):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"{width}x{height} grid is read-only")
