import pytest

from recipe_tree.data.catalog import RecipeCatalog
from recipe_tree.errors import ValidationError
from recipe_tree.models.recipe import RecipeIO, RecipeRecord
from recipe_tree.models.recipe_type import RecipeType

from conftest import make_recipe


def test_lookup_returns_record(smelting_catalog):
    steel = smelting_catalog.lookup("Steel")
    assert steel is not None
    assert steel.inputs[0] == RecipeIO("Iron Ingot", 3.0)
    assert steel.crafting_time == 10


def test_lookup_absent_returns_none(smelting_catalog):
    assert smelting_catalog.lookup("Unobtainium") is None
    assert "Unobtainium" not in smelting_catalog


def test_duplicate_names_last_write_wins():
    catalog = RecipeCatalog.build(
        [make_recipe("X", tier=1), make_recipe("Y"), make_recipe("X", tier=2)]
    )
    assert len(catalog) == 2
    assert catalog.lookup("X").tier == 2
    assert catalog.names() == ["X", "Y"]


def test_missing_names_reject_whole_batch():
    records = [
        {"name": "Good"},
        {"type": "raw"},
        {"name": ""},
        {"name": "   "},
        make_recipe("Also Good"),
    ]
    with pytest.raises(ValidationError) as exc_info:
        RecipeCatalog.build(records)

    assert exc_info.value.indices == [1, 2, 3]
    assert "1, 2, 3" in str(exc_info.value)


def test_dangling_inputs_are_accepted():
    catalog = RecipeCatalog.build([make_recipe("A", [("Nowhere", 1)])])
    assert catalog.lookup("A").inputs[0].name == "Nowhere"


def test_build_accepts_loader_mappings():
    catalog = RecipeCatalog.build(
        [
            {
                "name": "Plate",
                "type": "intermediate",
                "inputs": [{"name": "Ore", "amount": 2}],
                "output": {"name": "Plate", "amount": 3},
                "craftingTime": 1.5,
                "description": "Flat metal",
                "tier": 2,
                "category": "Component",
            },
            {"name": "Ore", "type": "not-a-kind"},
        ]
    )
    plate = catalog.lookup("Plate")
    assert plate.inputs == (RecipeIO("Ore", 2.0),)
    assert plate.output == RecipeIO("Plate", 3.0)
    assert plate.crafting_time == 1.5
    assert plate.tier == 2
    assert plate.category == "Component"
    assert catalog.lookup("Ore").type is RecipeType.INTERMEDIATE


def test_catalog_is_read_only(smelting_catalog):
    with pytest.raises(TypeError):
        smelting_catalog.as_mapping()["Steel"] = make_recipe("Steel")


def test_iteration_follows_insertion_order(smelting_catalog):
    assert list(smelting_catalog)[:3] == ["Iron Ore", "Coal", "Water"]
    assert all(isinstance(r, RecipeRecord) for r in smelting_catalog.records())


def test_malformed_fields_reject_whole_batch():
    records = [
        {"name": "Fine", "tier": 2},
        {"name": "Bad Tier", "tier": "abc"},
        {"name": "Bad Time", "craftingTime": "slow"},
        {"name": "Bad Input", "inputs": [("Ore", "lots")]},
    ]
    with pytest.raises(ValidationError) as exc_info:
        RecipeCatalog.build(records)

    assert exc_info.value.indices == [1, 2, 3]
