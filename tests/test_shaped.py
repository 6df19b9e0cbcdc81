import pytest

from core.crafting import (
    AIR,
    Grid,
    InvalidInputSize,
    InvalidPattern,
    ItemStack,
    Placement,
    ReadOnlyGrid,
    ShapedRecipe,
    UndefinedSymbol,
)

STICK = ItemStack("stick")
COAL = ItemStack("coal")
IRON = ItemStack("iron_ingot")


def slots(**placed):
    """slots(s0=STICK, s4=COAL) -> 9 row-major slots."""
    out = [None] * 9
    for key, item in placed.items():
        out[int(key[1:])] = item
    return out


def test_ring_pattern_exact_fit():
    chest = ShapedRecipe.from_rows(["AAA", "A A", "AAA"], {"A": "stick"}, "chest")
    grid = [STICK] * 9
    grid[4] = None
    assert chest.matches(grid)
    assert chest.find_match(grid) == Placement(0, 0, False)

    grid[4] = AIR
    assert chest.matches(grid)

    grid[4] = STICK
    assert not chest.matches(grid)


def test_vertical_pattern_is_found_at_every_offset():
    torch = ShapedRecipe.from_rows(["A", "A"], {"A": "coal"}, "torch*4", mirrored=False)
    assert torch.find_match(slots(s0=COAL, s3=COAL)) == Placement(0, 0, False)
    assert torch.find_match(slots(s2=COAL, s5=COAL)) == Placement(2, 0, False)
    assert torch.find_match(slots(s4=COAL, s7=COAL)) == Placement(1, 1, False)
    # not vertically adjacent
    assert not torch.matches(slots(s0=COAL, s4=COAL))
    # stray item outside the footprint
    assert not torch.matches(slots(s0=COAL, s3=COAL, s8=STICK))


def test_mirrored_pattern():
    pattern = ["AB"]
    ingredients = {"A": "iron_ingot", "B": "stick"}
    grid = slots(s0=STICK, s1=IRON)

    flippable = ShapedRecipe.from_rows(pattern, ingredients, "iron_sword", mirrored=True)
    assert flippable.matches(grid)
    assert flippable.find_match(grid) == Placement(0, 0, True)

    fixed = ShapedRecipe.from_rows(pattern, ingredients, "iron_sword", mirrored=False)
    assert not fixed.matches(grid)
    assert fixed.matches(slots(s0=IRON, s1=STICK))


def test_mirrored_match_away_from_origin():
    recipe = ShapedRecipe.from_rows(["AB"], {"A": "iron_ingot", "B": "stick"}, "iron_sword")
    assert recipe.find_match(slots(s4=STICK, s5=IRON)) == Placement(1, 1, True)
    assert recipe.find_match(slots(s7=IRON, s8=STICK)) == Placement(1, 2, False)


def test_mirrored_wide_pattern_with_blank():
    ingredients = {"A": "iron_ingot", "B": "stick"}
    flippable = ShapedRecipe.from_rows(["AB ", "A  "], ingredients, "iron_hoe")
    fixed = ShapedRecipe.from_rows(["AB ", "A  "], ingredients, "iron_hoe", mirrored=False)

    flipped = slots(s1=STICK, s2=IRON, s5=IRON)
    assert flippable.find_match(flipped) == Placement(0, 0, True)
    assert not fixed.matches(flipped)

    plain = slots(s3=IRON, s4=STICK, s6=IRON)
    assert flippable.find_match(plain) == Placement(0, 1, False)

    # the blank cell must stay empty in the flipped orientation too
    assert not flippable.matches(slots(s0=COAL, s1=STICK, s2=IRON, s5=IRON))

    single_row = ShapedRecipe.from_rows(["AB "], ingredients, "iron_hoe")
    assert single_row.find_match(slots(s4=STICK, s5=IRON)) == Placement(0, 1, True)
    assert not single_row.matches(slots(s3=IRON, s4=STICK, s5=IRON))


def test_plain_orientation_wins_for_symmetric_patterns():
    recipe = ShapedRecipe.from_rows(["AA"], {"A": "stick"}, "stick", mirrored=True)
    assert recipe.find_match(slots(s3=STICK, s4=STICK)) == Placement(0, 1, False)


def test_undefined_symbol_is_an_error_not_a_miss():
    broken = ShapedRecipe.from_rows(["AZ"], {"A": "stick"}, "stick", name="broken")
    with pytest.raises(UndefinedSymbol) as exc:
        broken.matches([None] * 9)
    assert exc.value.symbol == "Z"
    assert "broken" in str(exc.value)
    with pytest.raises(UndefinedSymbol):
        broken.validate()


def test_input_must_have_nine_slots():
    recipe = ShapedRecipe.from_rows(["A"], {"A": "stick"}, "stick")
    for size in (0, 8, 10):
        with pytest.raises(InvalidInputSize):
            recipe.matches([None] * size)


def test_missing_or_oversize_pattern():
    with pytest.raises(InvalidPattern):
        ShapedRecipe(ItemStack("stick"), {"A": "stick"}, None).matches([None] * 9)
    with pytest.raises(InvalidPattern):
        ShapedRecipe.from_rows(["AAAA"], {"A": "stick"}, "stick")
    with pytest.raises(InvalidPattern):
        ShapedRecipe.from_rows(["A", "A", "A", "A"], {"A": "stick"}, "stick")


def test_offsets_scan_order():
    full = ShapedRecipe.from_rows(["AAA", "AAA", "AAA"], {"A": "stick"}, "stick")
    assert full.offsets() == [(0, 0)]

    square = ShapedRecipe.from_rows(["AA", "AA"], {"A": "stick"}, "stick")
    assert square.offsets() == [(0, 0), (1, 0), (0, 1), (1, 1)]

    single = ShapedRecipe.from_rows(["A"], {"A": "stick"}, "stick")
    assert len(single.offsets()) == 9


@pytest.mark.parametrize("index", range(9))
def test_single_cell_pattern_matches_anywhere(index):
    recipe = ShapedRecipe.from_rows(["A"], {"A": "coal"}, "black_dye")
    grid = [None] * 9
    grid[index] = COAL
    assert recipe.find_match(grid) == Placement(index % 3, index // 3, False)

    grid[index] = STICK
    assert not recipe.matches(grid)

    grid[index] = COAL
    grid[(index + 1) % 9] = COAL
    assert not recipe.matches(grid)


def test_amount_is_ignored_but_zero_is_empty():
    recipe = ShapedRecipe.from_rows(["A"], {"A": "coal"}, "black_dye")
    assert recipe.matches(slots(s4=ItemStack("coal", 64)))
    assert not recipe.matches(slots(s4=ItemStack("coal", 0)))


def test_blank_cells_must_be_empty():
    recipe = ShapedRecipe.from_rows(["A ", " A"], {"A": "stick"}, "stick", mirrored=False)
    assert recipe.matches(slots(s0=STICK, s4=STICK))
    assert not recipe.matches(slots(s0=STICK, s1=COAL, s4=STICK))
    assert not recipe.matches(slots(s1=STICK, s3=STICK))


def test_positions_matter():
    recipe = ShapedRecipe.from_rows(["AB"], {"A": "iron_ingot", "B": "stick"}, "stick", mirrored=False)
    grid = slots(s0=IRON, s1=STICK)
    assert recipe.matches(grid)
    assert not recipe.matches(list(reversed(grid)))
    assert not recipe.matches(slots(s0=IRON, s3=STICK))


def test_matching_is_pure():
    recipe = ShapedRecipe.from_rows(["AB"], {"A": "iron_ingot", "B": "stick"}, "stick")
    grid = slots(s4=IRON, s5=STICK)
    snapshot = list(grid)
    assert recipe.matches(grid) is recipe.matches(grid) is True
    assert grid == snapshot


def test_recipes_are_immutable_values():
    pattern = Grid.from_rows(["A"])
    a = ShapedRecipe(ItemStack("stick"), {"A": "stick"}, pattern, name="one")
    b = ShapedRecipe(ItemStack("stick"), {"A": "minecraft:stick"}, Grid.from_rows(["A"]), name="two")
    assert a == b
    assert len({a, b}) == 1

    pattern.set(0, 0, "Z")
    assert a.pattern.get(0, 0) == "A"
    with pytest.raises(TypeError):
        a.ingredients["B"] = "coal"
    assert a.key == "minecraft:crafting_shaped"


def test_pattern_cannot_be_changed_through_the_recipe():
    recipe = ShapedRecipe.from_rows(["A"], {"A": "stick"}, "stick")
    grid = slots(s4=STICK)
    before = hash(recipe)

    with pytest.raises(ReadOnlyGrid):
        recipe.pattern.set(0, 0, " ")
    with pytest.raises(ReadOnlyGrid):
        recipe.pattern.fill(" ")

    assert hash(recipe) == before
    assert recipe.matches(grid)
