# -*- coding: utf-8 -*-
"""Crafting grid + recipe matching (shaped / shapeless)."""

from core.crafting.base import GRID_SIZE, GRID_SLOTS, SHAPED_KEY, SHAPELESS_KEY  # noqa: F401
from core.crafting.errors import (  # noqa: F401
    CraftingError,
    InvalidDimension,
    InvalidInputSize,
    InvalidPattern,
    OutOfBounds,
    ReadOnlyGrid,
    UndefinedSymbol,
)
from core.crafting.grid import Grid  # noqa: F401
from core.crafting.items import AIR, AIR_MATERIAL, ItemStack, is_empty_slot, normalize_material  # noqa: F401
from core.crafting.recipes import Recipe, craft, identifier, matches  # noqa: F401
from core.crafting.shaped import BLANK, Placement, ShapedRecipe  # noqa: F401
from core.crafting.shapeless import ShapelessRecipe  # noqa: F401
