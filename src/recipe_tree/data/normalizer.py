"""Normalize raw explorer recipe data into recipe records."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from recipe_tree.models.recipe import RecipeIO, RecipeRecord
from recipe_tree.models.recipe_type import RecipeType

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Other"
DEFAULT_CRAFTING_TIME = 1.0

# Raw outputType -> production kind
_OUTPUT_TYPES: dict[str, RecipeType] = {
    "BUILDING": RecipeType.FINAL,
    "COMPONENT": RecipeType.INTERMEDIATE,
    "RESOURCE": RecipeType.RAW,
}

_CATEGORY_ICONS: dict[str, str] = {
    "Component": "🔧",
    "Infrastructure": "🏭",
    "Processing": "⚙️",
    "Extraction": "⛏️",
    "Farm": "🌱",
    "Other": "📦",
}


class RecipeCategory(NamedTuple):
    name: str
    icon: str
    recipes: list[RecipeRecord]


def recipe_type_for(output_type: Any) -> RecipeType:
    """Map a raw outputType to a production kind (intermediate when unknown)."""
    if not isinstance(output_type, str):
        return RecipeType.INTERMEDIATE
    return _OUTPUT_TYPES.get(output_type.upper(), RecipeType.INTERMEDIATE)


def category_icon(category: str) -> str:
    return _CATEGORY_ICONS.get(category, "📦")


def normalize_raw_recipe(raw: Mapping) -> RecipeRecord:
    """Convert one raw recipe entry into a RecipeRecord."""
    name = str(raw.get("outputName") or "")
    output_type = raw.get("outputType")
    tier = int(raw.get("outputTier") or 1)

    inputs = []
    for ingredient in raw.get("ingredients") or ():
        inputs.append(
            RecipeIO(str(ingredient.get("name", "")), float(ingredient.get("quantity", 0)))
        )

    description = f"{output_type or 'Unknown'} - Tier {tier}"
    planet_types = raw.get("planetTypes") or []
    if planet_types:
        description += f" ({planet_types[0]})"

    return RecipeRecord(
        name=name,
        type=recipe_type_for(output_type),
        inputs=tuple(inputs),
        output=RecipeIO(name, 1.0),
        crafting_time=float(raw.get("constructionTime") or DEFAULT_CRAFTING_TIME),
        description=description,
        tier=tier,
        category=str(raw.get("resourceType") or DEFAULT_CATEGORY),
    )


def normalize_raw_recipes(raw_data: Mapping | Iterable[Mapping] | None) -> list[RecipeRecord]:
    """Normalize a raw payload (``{"recipes": [...]}`` or a bare list), keeping order."""
    if isinstance(raw_data, Mapping):
        entries = raw_data.get("recipes")
    else:
        entries = raw_data

    if not entries:
        logger.warning("Raw recipe data not found or empty")
        return []

    records = [normalize_raw_recipe(entry) for entry in entries]
    logger.debug("Normalized %d raw recipes", len(records))
    return records


def group_by_category(records: Iterable[RecipeRecord]) -> list[RecipeCategory]:
    """Group records by category, largest category first, recipes sorted by name."""
    grouped: dict[str, list[RecipeRecord]] = defaultdict(list)
    for record in records:
        grouped[record.category or DEFAULT_CATEGORY].append(record)

    ordered = sorted(grouped.items(), key=lambda item: (-len(item[1]), item[0]))
    return [
        RecipeCategory(name, category_icon(name), sorted(recipes, key=lambda r: r.name))
        for name, recipes in ordered
    ]
