import pytest

from recipe_tree.data.catalog import RecipeCatalog
from recipe_tree.engine.aggregator import TreeAggregator
from recipe_tree.engine.resolver import resolve

from conftest import DEEP_CHAIN_LENGTH, make_recipe


@pytest.fixture
def aggregator():
    return TreeAggregator()


def test_leaf_materials_multiply_along_path(smelting_catalog, aggregator):
    totals = aggregator.aggregate(resolve("Furnace", smelting_catalog))

    assert totals.leaf_materials == {"Iron Ore": 28.0, "Coal": 22.0, "Water": 20.0}
    assert totals.node_count == 10
    assert totals.max_depth == 3
    assert totals.recipe_occurrences["Iron Ingot"] == 2
    assert totals.recipe_occurrences["Coal"] == 3
    assert totals.unresolved == {}
    assert totals.cycles == {}


def test_diamond_counted_per_branch(diamond_catalog, aggregator):
    totals = aggregator.aggregate(resolve("A", diamond_catalog))
    assert totals.leaf_materials == {"D": 11.0}
    assert totals.recipe_occurrences["D"] == 2
    assert totals.node_count == 5


def test_cycles_and_unresolved_tracked(cycle_catalog, aggregator):
    totals = aggregator.aggregate(resolve("A", cycle_catalog))
    assert totals.cycles == {"A": 1}
    assert totals.leaf_materials == {}
    assert totals.max_depth == 2

    catalog = RecipeCatalog.build(
        [make_recipe("A", [("Unobtainium", 3), ("Ore", 2)]), make_recipe("Ore", type="raw")]
    )
    totals = aggregator.aggregate(resolve("A", catalog))
    assert totals.unresolved == {"Unobtainium": 3.0}
    assert totals.leaf_materials == {"Ore": 2.0}


def test_single_leaf_root(smelting_catalog, aggregator):
    totals = aggregator.aggregate(resolve("Coal", smelting_catalog))
    assert totals.leaf_materials == {"Coal": 1.0}
    assert totals.node_count == 1
    assert totals.max_depth == 0


def test_combine_sums_roots(smelting_catalog, aggregator):
    trees = [resolve("Steel", smelting_catalog), resolve("Iron Ingot", smelting_catalog)]
    combined = aggregator.combine(trees)

    assert combined.leaf_materials == {"Iron Ore": 8.0, "Coal": 6.0, "Water": 5.0}
    assert combined.node_count == 6 + 3
    assert combined.max_depth == 2


def test_combine_nothing(aggregator):
    combined = aggregator.combine([])
    assert combined.node_count == 0
    assert combined.leaf_materials == {}


def test_deep_chain_totals(deep_chain_catalog, aggregator):
    totals = aggregator.aggregate(resolve("Small", deep_chain_catalog))

    assert totals.node_count == DEEP_CHAIN_LENGTH + 1
    assert totals.max_depth == DEEP_CHAIN_LENGTH
    assert totals.leaf_materials == {f"R{DEEP_CHAIN_LENGTH - 1}": 2.0}
