# -*- coding: utf-8 -*-
"""Shared crafting-grid constants and input checks."""

from __future__ import annotations

from typing import List, Optional, Sequence

from core.crafting.errors import InvalidInputSize
from core.crafting.grid import Grid
from core.crafting.items import ItemStack

GRID_SIZE = 3
GRID_SLOTS = GRID_SIZE * GRID_SIZE

SHAPED_KEY = "minecraft:crafting_shaped"
SHAPELESS_KEY = "minecraft:crafting_shapeless"

Slots = Sequence[Optional[ItemStack]]


def check_input(input: Slots) -> List[Optional[ItemStack]]:
    """Return the slots as a list, raising InvalidInputSize unless there are exactly 9."""
    slots = list(input)
    if len(slots) != GRID_SLOTS:
        raise InvalidInputSize(len(slots), GRID_SLOTS)
    return slots


def to_grid(input: Slots) -> Grid[ItemStack]:
    """Row-major 9 slots -> 3x3 grid (slot i is at x = i % 3, y = i // 3)."""
    return Grid.from_flat(check_input(input), GRID_SIZE)
