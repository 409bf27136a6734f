"""Independent resolution of several roots."""

import logging
from collections.abc import Iterable
from typing import NamedTuple, Optional

from recipe_tree.config import ResolverLimits
from recipe_tree.data.catalog import RecipeCatalog
from recipe_tree.engine.resolver import DependencyResolver
from recipe_tree.errors import NotFoundError, ResolutionLimitError
from recipe_tree.models.dependency_tree import DependencyNode

logger = logging.getLogger(__name__)


class ResolvedRoot(NamedTuple):
    name: str
    tree: DependencyNode


class BatchResolver:
    """Resolves an ordered list of roots, skipping the ones that fail."""

    def __init__(self, catalog: RecipeCatalog, limits: Optional[ResolverLimits] = None):
        self.catalog = catalog
        self.resolver = DependencyResolver(catalog, limits)

    def resolve_many(self, names: Iterable[str]) -> list[ResolvedRoot]:
        """Resolve each name in order.

        Names absent from the catalog are skipped without error; callers can
        compare input and output to find them (or use ``missing``). A root
        that exceeds the resolver limits is skipped too, and logged.
        """
        results = []
        for name in names:
            try:
                tree = self.resolver.resolve(name)
            except NotFoundError:
                logger.debug("Skipping unknown root %r", name)
                continue
            except ResolutionLimitError as e:
                logger.warning("Skipping root %r: %s", name, e.reason)
                continue
            results.append(ResolvedRoot(name, tree))
        return results

    def missing(self, names: Iterable[str]) -> list[str]:
        """Input names with no catalog entry, in input order."""
        return [name for name in names if name not in self.catalog]


def resolve_many(
    names: Iterable[str],
    catalog: RecipeCatalog,
    limits: Optional[ResolverLimits] = None,
) -> list[ResolvedRoot]:
    """Resolve several roots against a catalog. See BatchResolver.resolve_many."""
    return BatchResolver(catalog, limits).resolve_many(names)
