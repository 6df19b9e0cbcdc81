# -*- coding: utf-8 -*-
"""core/crafting/recipes.py

Recipe capability shared by the shaped and shapeless variants.

Both variants are frozen dataclasses exposing the same surface:

- ``matches(input)``: 9 slots, row-major -> bool (InvalidInputSize otherwise)
- ``result``: crafted ItemStack
- ``key``: recipe type id, for host-side dispatch
- ``validate()``: raise for a broken definition

The module-level helpers dispatch over the `Recipe` union.
"""

from __future__ import annotations

from typing import Optional, Union

from core.crafting.base import Slots
from core.crafting.items import ItemStack, is_empty_slot
from core.crafting.shaped import ShapedRecipe
from core.crafting.shapeless import ShapelessRecipe

__all__ = [
    "Recipe",
    "craft",
    "identifier",
    "is_empty_slot",
    "matches",
]

Recipe = Union[ShapedRecipe, ShapelessRecipe]


def matches(recipe: Recipe, input: Slots) -> bool:
    return recipe.matches(input)


def identifier(recipe: Recipe) -> str:
    return recipe.key


def craft(recipe: Recipe, input: Slots) -> Optional[ItemStack]:
    """Result stack if `input` satisfies `recipe`, else None. The grid is not consumed."""
    return recipe.result if recipe.matches(input) else None
