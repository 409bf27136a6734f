"""Resolution engine for dependency trees."""

from .resolver import DependencyResolver, resolve
from .batch import BatchResolver, ResolvedRoot, resolve_many
from .aggregator import TreeAggregator, TreeTotals

__all__ = [
    "DependencyResolver",
    "BatchResolver",
    "ResolvedRoot",
    "TreeAggregator",
    "TreeTotals",
    "resolve",
    "resolve_many",
]
