# -*- coding: utf-8 -*-
"""Item references for crafting grids.

An `ItemStack` is a material id plus an amount. Matching only ever looks at
the material and at emptiness, never at the amount.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "AIR",
    "AIR_MATERIAL",
    "DEFAULT_NAMESPACE",
    "ItemStack",
    "is_empty_slot",
    "normalize_material",
]

DEFAULT_NAMESPACE = "minecraft"
AIR_MATERIAL = "minecraft:air"

# resource location: [namespace:]path, lowercase
_MATERIAL_RE = re.compile(r"^(?:([a-z0-9_.-]+):)?([a-z0-9_./-]+)$")
_STACK_RE = re.compile(r"^(?P<material>.+?)(?:[*x](?P<amount>\d+))?$")


def normalize_material(material: Any, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Return the namespaced id: ``"stick"`` -> ``"minecraft:stick"``.

    Ids are lowercased; anything that is not a valid resource location raises
    ValueError.
    """
    raw = str(material or "").strip().lower()
    m = _MATERIAL_RE.match(raw)
    if not m:
        raise ValueError(f"Invalid material id: {material!r}")
    ns, path = m.group(1), m.group(2)
    return f"{ns or namespace}:{path}"


@dataclass(frozen=True)
class ItemStack:
    material: str
    amount: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "material", normalize_material(self.material))
        object.__setattr__(self, "amount", int(self.amount))

    @classmethod
    def parse(cls, token: str, namespace: str = DEFAULT_NAMESPACE) -> "ItemStack":
        """Parse ``"stick"``, ``"stick*4"`` or ``"minecraft:stick x4"`` style tokens."""
        s = re.sub(r"\s+", "", str(token or ""))
        m = _STACK_RE.match(s)
        if not m:
            raise ValueError(f"Invalid item token: {token!r}")
        amount = int(m.group("amount")) if m.group("amount") else 1
        return cls(normalize_material(m.group("material"), namespace), amount)

    def with_amount(self, amount: int) -> "ItemStack":
        return ItemStack(self.material, amount)

    @property
    def is_empty(self) -> bool:
        return self.material == AIR_MATERIAL or self.amount == 0

    def __str__(self) -> str:
        if self.is_empty:
            return "-"
        return self.material if self.amount == 1 else f"{self.material}x{self.amount}"


AIR = ItemStack(AIR_MATERIAL, 0)


def is_empty_slot(item: Optional[ItemStack]) -> bool:
    """A slot is empty if it holds nothing, air, or a zero-amount stack."""
    return item is None or item.is_empty
