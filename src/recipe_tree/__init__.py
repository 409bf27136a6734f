"""Recipe dependency resolution and tree materialization."""

from .data.catalog import RecipeCatalog
from .engine.batch import BatchResolver, resolve_many
from .engine.resolver import DependencyResolver, resolve
from .errors import NotFoundError, ResolutionLimitError, ValidationError
from .models.recipe_type import classify

__all__ = [
    "RecipeCatalog",
    "DependencyResolver",
    "BatchResolver",
    "resolve",
    "resolve_many",
    "classify",
    "ValidationError",
    "NotFoundError",
    "ResolutionLimitError",
]
