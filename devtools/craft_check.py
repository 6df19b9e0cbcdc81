#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Check a 3x3 crafting grid against one shaped or shapeless recipe.

Examples
  python devtools/craft_check.py "stick,stick,stick,stick,.,stick,stick,stick,stick" \
      --shaped "AAA|A A|AAA" --key A=stick --result chest
  python devtools/craft_check.py "stick iron_ingot . . . . . . ." \
      --shaped "AB" --key A=iron_ingot --key B=stick
  python devtools/craft_check.py "dye,.,.,dye,.,.,water_bucket,.,." \
      --shapeless dye,dye,water_bucket --json

Exit codes: 0 match, 1 no match, 2 bad arguments or broken recipe.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.table import Table  # noqa: E402

from core.config.loader import crafting_config  # noqa: E402
from core.crafting import (  # noqa: E402
    AIR,
    CraftingError,
    ItemStack,
    Placement,
    Recipe,
    ShapedRecipe,
    ShapelessRecipe,
    is_empty_slot,
    normalize_material,
)
from core.version import project_version  # noqa: E402

console = Console()
# logs go to stderr so --json output stays parseable
log_console = Console(stderr=True)
logger = logging.getLogger("craft_check")


def parse_grid(text: str, empty_tokens: Iterable[str], namespace: str = "minecraft") -> List[Optional[ItemStack]]:
    """Grid tokens -> slots. Comma separated if any comma is present, else whitespace."""
    raw = text or ""
    tokens = raw.split(",") if "," in raw else raw.split()
    empty = {t.strip().lower() for t in empty_tokens}
    slots: List[Optional[ItemStack]] = []
    for tok in tokens:
        t = tok.strip()
        if not t or t.lower() in empty:
            slots.append(None)
        else:
            slots.append(ItemStack.parse(t, namespace))
    return slots


def parse_keys(specs: Sequence[str]) -> Dict[str, str]:
    """``["A=stick", "B=iron_ingot"]`` -> ``{"A": "stick", "B": "iron_ingot"}``."""
    out: Dict[str, str] = {}
    for spec in specs or []:
        m = re.match(r"^(.)\s*[=:]\s*(\S+)$", spec or "")
        if not m:
            raise ValueError(f"--key expects SYMBOL=MATERIAL, got {spec!r}")
        out[m.group(1)] = m.group(2)
    return out


def build_recipe(args: argparse.Namespace, namespace: str = "minecraft") -> Recipe:
    result = ItemStack.parse(args.result, namespace) if args.result else AIR
    if args.shaped is not None:
        rows = args.shaped.split("|")
        return ShapedRecipe.from_rows(
            rows,
            {k: normalize_material(v, namespace) for k, v in parse_keys(args.key).items()},
            result,
            mirrored=not args.no_mirror,
            name=args.name,
        )
    materials = [normalize_material(m, namespace) for m in args.shapeless.split(",") if m.strip()]
    return ShapelessRecipe.of(result, *materials, name=args.name)


def check(recipe: Recipe, slots: Sequence[Optional[ItemStack]]) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "recipe": {"key": recipe.key, "name": recipe.name, "result": None if is_empty_slot(recipe.result) else str(recipe.result)},
        "grid": [None if is_empty_slot(s) else str(s) for s in slots],
    }
    if isinstance(recipe, ShapedRecipe):
        placement = recipe.find_match(slots)
        doc["match"] = placement is not None
        doc["placement"] = placement._asdict() if placement else None
    else:
        doc["match"] = recipe.matches(slots)
        doc["missing"] = dict(recipe.missing(slots))
        doc["extra"] = dict(recipe.extra(slots))
    return doc


def _footprint(recipe: Recipe, placement: Optional[Placement]) -> set:
    if not placement or not isinstance(recipe, ShapedRecipe) or recipe.pattern is None:
        return set()
    return {
        (placement.offset_x + x, placement.offset_y + y)
        for x, y in recipe.pattern.coords()
    }


def _print_human(recipe: Recipe, doc: Dict[str, Any]) -> None:
    placement = Placement(**doc["placement"]) if doc.get("placement") else None
    hot = _footprint(recipe, placement)

    table = Table(title=f"{recipe.key} -> {doc['recipe']['result'] or '-'}", show_header=False, border_style="blue")
    for _ in range(3):
        table.add_column(justify="center")
    grid = doc["grid"]
    for y in range(3):
        cells = []
        for x in range(3):
            val = grid[y * 3 + x]
            text = val if val else "[dim]·[/dim]"
            cells.append(f"[bold green]{text}[/bold green]" if (x, y) in hot else text)
        table.add_row(*cells)
    console.print(table)

    if doc["match"]:
        extra = ""
        if placement:
            extra = f" at offset ({placement.offset_x}, {placement.offset_y})"
            if placement.mirrored:
                extra += " (mirrored)"
        console.print(f"[green]MATCH[/green]{extra}")
        return

    console.print("[red]NO MATCH[/red]")
    for label in ("missing", "extra"):
        counts = doc.get(label) or {}
        if counts:
            console.print(f"  {label}: " + ", ".join(f"{k}x{v}" for k, v in sorted(counts.items())))


def _setup_logging(verbose: bool, silent: bool) -> None:
    if silent:
        level = logging.CRITICAL + 1
    elif verbose:
        level = logging.DEBUG
    else:
        level = crafting_config.log_level()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=log_console, show_path=False)],
        force=True,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check a 3x3 crafting grid against a recipe.")
    p.add_argument("grid", nargs="?", help="9 slot tokens (material[xN] or an empty token), comma or space separated")
    kind = p.add_mutually_exclusive_group()
    kind.add_argument("--shaped", help='Pattern rows separated by "|", e.g. "AAA|A A|AAA"')
    kind.add_argument("--shapeless", help="Comma list of required materials (repeat for counts)")
    p.add_argument("--key", action="append", default=[], help="Shaped symbol mapping SYMBOL=MATERIAL (repeatable)")
    p.add_argument("--no-mirror", action="store_true", help="Do not accept the left-right flipped pattern")
    p.add_argument("--result", default="", help="Result stack, e.g. chest or stick*4")
    p.add_argument("--name", default=None, help="Recipe id shown in logs/errors")
    p.add_argument("--json", action="store_true", help="Output JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--silent", action="store_true", help="Suppress logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    args = p.parse_args(argv)

    if args.version:
        console.print(project_version())
        return 0

    _setup_logging(args.verbose, args.silent)

    if args.grid is None:
        console.print("[red]ERR: grid required.[/red]")
        return 2
    if args.shaped is None and args.shapeless is None:
        console.print("[red]ERR: one of --shaped / --shapeless is required.[/red]")
        return 2

    namespace = crafting_config.get("CRAFTING", "DEFAULT_NAMESPACE") or "minecraft"
    empty_tokens = crafting_config.get_list("CRAFTING", "EMPTY_TOKENS")

    try:
        slots = parse_grid(args.grid, empty_tokens, namespace)
        recipe = build_recipe(args, namespace)
        doc = check(recipe, slots)
    except (CraftingError, ValueError) as exc:
        logger.debug("check failed", exc_info=True)
        console.print(f"[red]ERR: {escape(str(exc))}[/red]")
        return 2

    if args.json:
        print(json.dumps(doc, ensure_ascii=False, indent=2))
    else:
        _print_human(recipe, doc)
    return 0 if doc["match"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
