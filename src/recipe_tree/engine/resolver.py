"""Dependency tree resolution."""

import logging
from typing import Optional

from recipe_tree.config import DEFAULT_LIMITS, ResolverLimits
from recipe_tree.data.catalog import RecipeCatalog
from recipe_tree.errors import NotFoundError, ResolutionLimitError
from recipe_tree.models.dependency_tree import (
    CycleNode,
    DependencyNode,
    Edge,
    ResolvedNode,
    UnresolvedNode,
)
from recipe_tree.models.recipe import RecipeRecord

logger = logging.getLogger(__name__)


class _Budget:
    """Node/depth bookkeeping private to a single resolve() call."""

    def __init__(self, root_name: str, limits: ResolverLimits):
        self.root_name = root_name
        self.limits = limits
        self.nodes = 0

    def charge(self, depth: int) -> None:
        self.nodes += 1
        if not self.limits.is_bounded:
            return
        max_nodes = self.limits.max_nodes
        if max_nodes is not None and self.nodes > max_nodes:
            raise ResolutionLimitError(self.root_name, f"more than {max_nodes} nodes")
        max_depth = self.limits.max_depth
        if max_depth is not None and depth > max_depth:
            raise ResolutionLimitError(self.root_name, f"deeper than {max_depth} levels")


class _Frame:
    """A recipe being expanded: on the ancestor path until its inputs are done."""

    def __init__(self, recipe: RecipeRecord, amount: Optional[float]):
        self.recipe = recipe
        self.amount = amount  # Required by the parent; None for the root
        self.next_input = 0
        self.edges: list[Edge] = []


class DependencyResolver:
    """Expands a root recipe into its full dependency tree.

    Expansion is depth-first and pre-order, driven by an explicit stack so
    tree depth is bounded by memory rather than the interpreter's recursion
    limit. Every branch is expanded on its own: a recipe required by two
    branches appears twice, as two distinct subtrees. Node count can
    therefore grow combinatorially with catalog depth and fan-out;
    ``limits`` bounds that for untrusted catalogs.
    """

    def __init__(self, catalog: RecipeCatalog, limits: Optional[ResolverLimits] = None):
        self.catalog = catalog
        self.limits = limits or DEFAULT_LIMITS

    def resolve(self, root_name: str) -> DependencyNode:
        """Build the dependency tree rooted at ``root_name``.

        Raises:
            NotFoundError: if the root is not in the catalog.
            ResolutionLimitError: if a configured limit is exceeded.
        """
        root = self.catalog.lookup(root_name)
        if root is None:
            raise NotFoundError(root_name)

        budget = _Budget(root_name, self.limits)
        budget.charge(0)

        # The frames on the stack are exactly the current ancestor path, and
        # a name can only be on it once, so a set mirrors it push-for-pop.
        stack = [_Frame(root, None)]
        on_path = {root_name}

        while True:
            frame = stack[-1]
            inputs = frame.recipe.inputs

            if frame.next_input < len(inputs):
                input_io = inputs[frame.next_input]
                frame.next_input += 1
                budget.charge(len(stack))

                # Cycle detection: a name may appear only once per root-to-leaf path
                if input_io.name in on_path:
                    frame.edges.append(Edge(input_io.amount, CycleNode(input_io.name)))
                    continue

                recipe = self.catalog.lookup(input_io.name)
                if recipe is None:
                    frame.edges.append(Edge(input_io.amount, UnresolvedNode(input_io.name)))
                    continue

                stack.append(_Frame(recipe, input_io.amount))
                on_path.add(recipe.name)
                continue

            # All inputs expanded: close this node and hand it to its parent
            stack.pop()
            on_path.discard(frame.recipe.name)
            node = ResolvedNode(frame.recipe, tuple(frame.edges))
            if not stack:
                logger.debug("Resolved %r into %d nodes", root_name, budget.nodes)
                return node
            stack[-1].edges.append(Edge(frame.amount, node))


def resolve(
    root_name: str,
    catalog: RecipeCatalog,
    limits: Optional[ResolverLimits] = None,
) -> DependencyNode:
    """Resolve one root against a catalog. See DependencyResolver.resolve."""
    return DependencyResolver(catalog, limits).resolve(root_name)
