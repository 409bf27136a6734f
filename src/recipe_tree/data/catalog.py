"""Name-indexed recipe catalog."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Union

from recipe_tree.errors import ValidationError
from recipe_tree.models.recipe import RecipeRecord

logger = logging.getLogger(__name__)

RecordLike = Union[RecipeRecord, Mapping]


def _record_name(record: RecordLike) -> object:
    if isinstance(record, RecipeRecord):
        return record.name
    if isinstance(record, Mapping):
        return record.get("name")
    return None


class RecipeCatalog:
    """Immutable index of recipe records by unique name.

    Inputs are not checked against the catalog here; dangling references
    surface as unresolved nodes when a tree is built.
    """

    def __init__(self, recipes: Mapping[str, RecipeRecord]):
        self._recipes: Mapping[str, RecipeRecord] = MappingProxyType(dict(recipes))

    @classmethod
    def build(cls, records: Iterable[RecordLike]) -> "RecipeCatalog":
        """Validate and index records. Later duplicates replace earlier ones.

        Raises:
            ValidationError: if any record lacks a non-empty name, or is a
                mapping whose fields cannot be converted (e.g. a non-numeric
                tier or craftingTime). Nothing is indexed in that case.
        """
        records = list(records)

        invalid = []
        converted: list[RecipeRecord] = []
        for index, record in enumerate(records):
            name = _record_name(record)
            if not isinstance(name, str) or not name.strip():
                invalid.append(index)
                continue
            if not isinstance(record, RecipeRecord):
                try:
                    record = RecipeRecord.from_dict(record)
                except (TypeError, ValueError) as e:
                    logger.debug("Malformed record %r at index %d: %s", name, index, e)
                    invalid.append(index)
                    continue
            converted.append(record)
        if invalid:
            raise ValidationError(invalid)

        recipes: dict[str, RecipeRecord] = {}
        for record in converted:
            if record.name in recipes:
                logger.debug("Duplicate recipe %r, keeping the later record", record.name)
            recipes[record.name] = record

        logger.debug("Indexed %d recipes from %d records", len(recipes), len(records))
        return cls(recipes)

    def lookup(self, name: str) -> RecipeRecord | None:
        """Get a recipe by name, or None when absent."""
        return self._recipes.get(name)

    def names(self) -> list[str]:
        """Recipe names in first-insertion order."""
        return list(self._recipes)

    def records(self) -> list[RecipeRecord]:
        return list(self._recipes.values())

    def as_mapping(self) -> Mapping[str, RecipeRecord]:
        """Read-only view of the underlying index."""
        return self._recipes

    def __contains__(self, name: object) -> bool:
        return name in self._recipes

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._recipes)

    def __repr__(self) -> str:
        return f"RecipeCatalog({len(self._recipes)} recipes)"
