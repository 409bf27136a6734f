"""Shared fixtures for recipe tree tests."""

import pytest

from recipe_tree.data.catalog import RecipeCatalog
from recipe_tree.models.recipe import RecipeRecord


def make_recipe(name, inputs=(), type="intermediate", **kwargs):
    """Build a record from (name, amount) input pairs."""
    return RecipeRecord(name=name, type=type, inputs=tuple(inputs), **kwargs)


@pytest.fixture
def smelting_catalog():
    """Small acyclic production chain with a shared raw material."""
    return RecipeCatalog.build(
        [
            make_recipe("Iron Ore", type="raw"),
            make_recipe("Coal", type="raw"),
            make_recipe("Water", type="fluid"),
            make_recipe("Iron Ingot", [("Iron Ore", 2), ("Coal", 1)], crafting_time=4),
            make_recipe("Steel", [("Iron Ingot", 3), ("Coal", 2), ("Water", 5)], crafting_time=10),
            make_recipe("Furnace", [("Steel", 4), ("Iron Ingot", 2)], type="final", crafting_time=30),
        ]
    )


@pytest.fixture
def cycle_catalog():
    return RecipeCatalog.build(
        [
            make_recipe("A", [("B", 1)]),
            make_recipe("B", [("A", 2)]),
        ]
    )


@pytest.fixture
def diamond_catalog():
    return RecipeCatalog.build(
        [
            make_recipe("A", [("B", 1), ("C", 2)]),
            make_recipe("B", [("D", 3)]),
            make_recipe("C", [("D", 4)]),
            make_recipe("D", type="raw"),
        ]
    )


DEEP_CHAIN_LENGTH = 2500


@pytest.fixture
def deep_chain_catalog():
    """Acyclic chain R0 -> R1 -> ... -> R2499 deeper than the recursion limit, plus Small."""
    records = [
        make_recipe(f"R{i}", [(f"R{i + 1}", 1)]) for i in range(DEEP_CHAIN_LENGTH - 1)
    ]
    records.append(make_recipe(f"R{DEEP_CHAIN_LENGTH - 1}", type="raw"))
    records.append(make_recipe("Small", [("R0", 2)]))
    return RecipeCatalog.build(records)
