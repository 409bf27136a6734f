"""Production kinds and their display classification."""

from enum import Enum
from typing import NamedTuple, Optional, Union


class Classification(NamedTuple):
    icon: str
    label: str


UNKNOWN_CLASSIFICATION = Classification("📦", "Item")


class RecipeType(Enum):
    """Production kind of a recipe."""

    RAW = "raw"
    INTERMEDIATE = "intermediate"
    FINAL = "final"
    FLUID = "fluid"

    @classmethod
    def parse(cls, value: Union["RecipeType", str, None]) -> "RecipeType":
        """Coerce a type tag, defaulting to INTERMEDIATE when absent or unrecognized."""
        if isinstance(value, RecipeType):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.INTERMEDIATE

    @property
    def icon(self) -> str:
        return _CLASSIFICATIONS[self].icon

    @property
    def label(self) -> str:
        return _CLASSIFICATIONS[self].label

    @property
    def css_class(self) -> str:
        if self == RecipeType.RAW:
            return "raw-material"
        elif self == RecipeType.FINAL:
            return "root"
        return self.value


_CLASSIFICATIONS: dict[RecipeType, Classification] = {
    RecipeType.RAW: Classification("⛏️", "Raw Material"),
    RecipeType.INTERMEDIATE: Classification("🔧", "Intermediate"),
    RecipeType.FINAL: Classification("🏭", "Final Product"),
    RecipeType.FLUID: Classification("💧", "Fluid"),
}


def classify(type_tag: Union[RecipeType, str, None]) -> Classification:
    """Map a type tag to its (icon, label) pair.

    Tags are matched exactly, case and whitespace included, so "RAW" or
    " raw" classify as a generic item. Unlike ``RecipeType.parse`` this does
    not default to intermediate: anything outside the four known kinds
    classifies as a generic item.
    """
    if isinstance(type_tag, RecipeType):
        return _CLASSIFICATIONS[type_tag]
    if not isinstance(type_tag, str):
        return UNKNOWN_CLASSIFICATION
    try:
        kind: Optional[RecipeType] = RecipeType(type_tag)
    except ValueError:
        kind = None
    return _CLASSIFICATIONS[kind] if kind else UNKNOWN_CLASSIFICATION
