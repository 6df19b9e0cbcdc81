# -*- coding: utf-8 -*-
"""Shapeless recipes: a multiset of materials, position ignored."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple, Union

from core.crafting.base import GRID_SLOTS, SHAPELESS_KEY, Slots, check_input
from core.crafting.errors import InvalidPattern
from core.crafting.items import ItemStack, is_empty_slot, normalize_material

__all__ = ["ShapelessRecipe"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapelessRecipe:
    """Shapeless recipe value object.

    `ingredients` is ordered but only its multiset matters: listing a
    material twice requires two slots of it.
    """

    result: ItemStack
    ingredients: Tuple[str, ...]
    name: Optional[str] = field(default=None, compare=False)

    key: ClassVar[str] = SHAPELESS_KEY

    def __post_init__(self) -> None:
        object.__setattr__(self, "ingredients", tuple(normalize_material(m) for m in (self.ingredients or ())))

    @classmethod
    def of(cls, result: Union[ItemStack, str], *materials: str, name: Optional[str] = None) -> "ShapelessRecipe":
        if isinstance(result, str):
            result = ItemStack.parse(result)
        return cls(result, tuple(materials), name)

    def validate(self) -> "ShapelessRecipe":
        if not self.ingredients or len(self.ingredients) > GRID_SLOTS:
            raise InvalidPattern(f"Shapeless recipe needs 1..{GRID_SLOTS} ingredients, got {len(self.ingredients)}")
        return self

    @staticmethod
    def _materials(input: Slots) -> List[str]:
        return [item.material for item in check_input(input) if not is_empty_slot(item)]

    def matches(self, input: Slots) -> bool:
        materials = self._materials(input)
        if len(materials) != len(self.ingredients):
            logger.debug(
                "shapeless recipe %s: %d items in grid, %d required",
                self.name or self.result,
                len(materials),
                len(self.ingredients),
            )
            return False
        return Counter(materials) == Counter(self.ingredients)

    def missing(self, input: Slots) -> Counter:
        """Required materials the grid lacks (material -> count)."""
        return Counter(self.ingredients) - Counter(self._materials(input))

    def extra(self, input: Slots) -> Counter:
        """Grid materials the recipe does not call for (material -> count)."""
        return Counter(self._materials(input)) - Counter(self.ingredients)
