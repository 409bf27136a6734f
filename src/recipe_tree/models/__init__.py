"""Data models for recipes and dependency trees."""

from .recipe import RecipeIO, RecipeRecord
from .recipe_type import Classification, RecipeType, classify
from .dependency_tree import (
    CycleNode,
    DependencyNode,
    Edge,
    NodeKind,
    NodeVisitor,
    ResolvedNode,
    UnresolvedNode,
)

__all__ = [
    "RecipeIO",
    "RecipeRecord",
    "RecipeType",
    "Classification",
    "classify",
    "DependencyNode",
    "ResolvedNode",
    "CycleNode",
    "UnresolvedNode",
    "Edge",
    "NodeKind",
    "NodeVisitor",
]
