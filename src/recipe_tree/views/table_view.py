"""Tabular (pandas) views of dependency trees and their totals."""

import pandas as pd

from recipe_tree.engine.aggregator import TreeTotals
from recipe_tree.models.dependency_tree import DependencyNode, ResolvedNode, walk
from recipe_tree.models.recipe_type import UNKNOWN_CLASSIFICATION

TREE_COLUMNS = [
    "Depth",
    "Amount",
    "Name",
    "Kind",
    "Type",
    "Icon",
    "Label",
    "Crafting Time",
    "Output",
]

TOTALS_COLUMNS = ["Material", "Quantity", "Status"]


def tree_to_dataframe(root: DependencyNode) -> pd.DataFrame:
    """Flatten a tree into one row per node, in depth-first pre-order."""
    rows = []
    for depth, amount, node in walk(root):
        row = {
            "Depth": depth,
            "Amount": amount,
            "Name": node.name,
            "Kind": node.kind.value,
            "Type": None,
            "Icon": UNKNOWN_CLASSIFICATION.icon,
            "Label": UNKNOWN_CLASSIFICATION.label,
            "Crafting Time": None,
            "Output": None,
        }
        if isinstance(node, ResolvedNode):
            recipe = node.recipe
            icon, label = node.classification
            row.update(
                {
                    "Type": recipe.type.value,
                    "Icon": icon,
                    "Label": label,
                    "Crafting Time": recipe.crafting_time,
                    "Output": f"{recipe.output.amount:g}x {recipe.output.name}",
                }
            )
        rows.append(row)

    return pd.DataFrame(rows, columns=TREE_COLUMNS)


def totals_to_dataframe(totals: TreeTotals) -> pd.DataFrame:
    """Leaf and unresolved material quantities, sorted by material name."""
    rows = [
        {"Material": name, "Quantity": qty, "Status": "Leaf"}
        for name, qty in sorted(totals.leaf_materials.items())
    ]
    rows.extend(
        {"Material": name, "Quantity": qty, "Status": "Unresolved"}
        for name, qty in sorted(totals.unresolved.items())
    )
    return pd.DataFrame(rows, columns=TOTALS_COLUMNS)
