"""Dependency tree node variants produced by resolution.

A tree is built fresh for every resolution and never mutated afterwards.
Nodes are not shared: when two branches need the same recipe, each branch
holds its own subtree.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from recipe_tree.models.recipe import RecipeRecord
from recipe_tree.models.recipe_type import Classification, classify


class NodeKind(Enum):
    """Terminal state a node reached during expansion."""

    RESOLVED = "resolved"
    CYCLE = "cycle"
    UNRESOLVED = "unresolved"


class NodeVisitor:
    """Base class for tree consumers; override the visit methods you need."""

    def visit_resolved(self, node: "ResolvedNode", *args: Any) -> Any:
        return None

    def visit_cycle(self, node: "CycleNode", *args: Any) -> Any:
        return None

    def visit_unresolved(self, node: "UnresolvedNode", *args: Any) -> Any:
        return None


@dataclass(frozen=True)
class Edge:
    """Requirement of ``required_amount`` units of ``target`` per parent craft."""

    required_amount: float
    target: "DependencyNode"

    def to_dict(self) -> dict:
        return {"required_amount": self.required_amount, "target": tree_to_dict(self.target)}


@dataclass(frozen=True)
class ResolvedNode:
    """Recipe found in the catalog, with its inputs expanded in declared order."""

    recipe: RecipeRecord
    children: tuple[Edge, ...] = ()

    @property
    def kind(self) -> NodeKind:
        return NodeKind.RESOLVED

    @property
    def name(self) -> str:
        return self.recipe.name

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def classification(self) -> Classification:
        return classify(self.recipe.type)

    def accept(self, visitor: NodeVisitor, *args: Any) -> Any:
        return visitor.visit_resolved(self, *args)

    def to_dict(self) -> dict:
        return tree_to_dict(self)


@dataclass(frozen=True)
class CycleNode:
    """Terminal marker: the name already appears among its own ancestors."""

    recipe_name: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.CYCLE

    @property
    def name(self) -> str:
        return self.recipe_name

    def accept(self, visitor: NodeVisitor, *args: Any) -> Any:
        return visitor.visit_cycle(self, *args)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "recipe_name": self.recipe_name}


@dataclass(frozen=True)
class UnresolvedNode:
    """Terminal marker: an input names a recipe the catalog does not contain."""

    recipe_name: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.UNRESOLVED

    @property
    def name(self) -> str:
        return self.recipe_name

    def accept(self, visitor: NodeVisitor, *args: Any) -> Any:
        return visitor.visit_unresolved(self, *args)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "recipe_name": self.recipe_name}


DependencyNode = Union[ResolvedNode, CycleNode, UnresolvedNode]


def walk(root: DependencyNode) -> Iterator[tuple[int, Optional[float], DependencyNode]]:
    """Yield (depth, required_amount, node) in depth-first pre-order.

    The root is yielded with depth 0 and amount None.
    """
    stack: list[tuple[int, Optional[float], DependencyNode]] = [(0, None, root)]
    while stack:
        depth, amount, node = stack.pop()
        yield depth, amount, node
        if isinstance(node, ResolvedNode):
            for edge in reversed(node.children):
                stack.append((depth + 1, edge.required_amount, edge.target))


def count_nodes(root: DependencyNode) -> int:
    """Total number of nodes in the tree, root included."""
    return sum(1 for _ in walk(root))


def tree_depth(root: DependencyNode) -> int:
    """Depth of the deepest node (a lone root has depth 0)."""
    return max(depth for depth, _, _ in walk(root))


def tree_to_dict(root: DependencyNode) -> dict:
    """Serialize a tree to nested dicts without recursing per level."""

    def shell(node: DependencyNode) -> dict:
        if isinstance(node, ResolvedNode):
            return {"kind": node.kind.value, "recipe": node.recipe.to_dict(), "children": []}
        return node.to_dict()

    result = shell(root)
    stack = [(root, result)]
    while stack:
        node, data = stack.pop()
        if not isinstance(node, ResolvedNode):
            continue
        for edge in node.children:
            child = shell(edge.target)
            data["children"].append({"required_amount": edge.required_amount, "target": child})
            stack.append((edge.target, child))
    return result
