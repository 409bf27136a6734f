"""Aggregator for computing dependency tree totals."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from recipe_tree.models.dependency_tree import (
    CycleNode,
    DependencyNode,
    NodeVisitor,
    ResolvedNode,
    UnresolvedNode,
)


@dataclass
class TreeTotals:
    """Summary of one or more dependency trees."""

    node_count: int = 0
    max_depth: int = 0

    # Recipe name -> number of resolved nodes (diamonds count once per branch)
    recipe_occurrences: dict[str, int] = field(default_factory=dict)

    # Leaf recipe -> cumulative quantity needed for one craft of the root
    leaf_materials: dict[str, float] = field(default_factory=dict)

    # Missing recipe -> cumulative quantity referenced
    unresolved: dict[str, float] = field(default_factory=dict)

    # Recipe name -> number of cycle markers
    cycles: dict[str, int] = field(default_factory=dict)


class TreeAggregator(NodeVisitor):
    """Calculates aggregate totals for dependency trees."""

    def aggregate(self, root: DependencyNode) -> TreeTotals:
        """Calculate all totals for a single tree."""
        totals = TreeTotals()

        # Explicit work stack; tree depth is not bounded by the recursion limit
        pending: list[tuple[DependencyNode, float, int]] = [(root, 1.0, 0)]
        while pending:
            node, multiplier, depth = pending.pop()
            node.accept(self, totals, multiplier, depth, pending)
        return totals

    def visit_resolved(
        self, node: ResolvedNode, totals: TreeTotals, multiplier: float, depth: int, pending: list
    ) -> None:
        self._count(totals, depth)
        name = node.name
        totals.recipe_occurrences[name] = totals.recipe_occurrences.get(name, 0) + 1

        if node.is_leaf:
            totals.leaf_materials[name] = totals.leaf_materials.get(name, 0.0) + multiplier
            return

        # Queue children, scaling by the amount each edge requires
        for edge in reversed(node.children):
            pending.append((edge.target, multiplier * edge.required_amount, depth + 1))

    def visit_cycle(
        self, node: CycleNode, totals: TreeTotals, multiplier: float, depth: int, pending: list
    ) -> None:
        self._count(totals, depth)
        totals.cycles[node.name] = totals.cycles.get(node.name, 0) + 1

    def visit_unresolved(
        self, node: UnresolvedNode, totals: TreeTotals, multiplier: float, depth: int, pending: list
    ) -> None:
        self._count(totals, depth)
        totals.unresolved[node.name] = totals.unresolved.get(node.name, 0.0) + multiplier

    @staticmethod
    def _count(totals: TreeTotals, depth: int) -> None:
        totals.node_count += 1
        totals.max_depth = max(totals.max_depth, depth)

    def combine(self, roots: Iterable[DependencyNode]) -> TreeTotals:
        """
        Sum totals across several trees (one craft of each root).

        Example: the trees returned by a batch resolution.
        """
        combined = TreeTotals()

        for root in roots:
            totals = self.aggregate(root)

            combined.node_count += totals.node_count
            combined.max_depth = max(combined.max_depth, totals.max_depth)

            for name, count in totals.recipe_occurrences.items():
                combined.recipe_occurrences[name] = combined.recipe_occurrences.get(name, 0) + count

            for name, qty in totals.leaf_materials.items():
                combined.leaf_materials[name] = combined.leaf_materials.get(name, 0.0) + qty

            for name, qty in totals.unresolved.items():
                combined.unresolved[name] = combined.unresolved.get(name, 0.0) + qty

            for name, count in totals.cycles.items():
                combined.cycles[name] = combined.cycles.get(name, 0) + count

        return combined
