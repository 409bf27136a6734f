"""Recipe record data models."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from recipe_tree.models.recipe_type import RecipeType


@dataclass(frozen=True)
class RecipeIO:
    """Named quantity of an item consumed or produced by a recipe."""

    name: str
    amount: float

    @classmethod
    def coerce(cls, value: Any) -> "RecipeIO":
        """Build from a RecipeIO, a ``{name, amount}`` mapping or a (name, amount) pair."""
        if isinstance(value, RecipeIO):
            return value
        if isinstance(value, Mapping):
            return cls(str(value.get("name", "")), float(value.get("amount", 0)))
        name, amount = value
        return cls(str(name), float(amount))

    def to_dict(self) -> dict:
        return {"name": self.name, "amount": self.amount}


@dataclass(frozen=True)
class RecipeRecord:
    """Named production rule consuming inputs to produce one output item."""

    name: str
    type: RecipeType = RecipeType.INTERMEDIATE
    inputs: tuple[RecipeIO, ...] = ()  # Ordered; names may not exist in the catalog
    output: Optional[RecipeIO] = None  # Defaults to one unit of the recipe itself
    crafting_time: float = 0.0  # Seconds
    description: str = ""
    tier: int = 1
    category: str = "Other"

    def __post_init__(self):
        object.__setattr__(self, "type", RecipeType.parse(self.type))
        object.__setattr__(self, "inputs", tuple(RecipeIO.coerce(i) for i in self.inputs))
        if self.output is None:
            output = RecipeIO(self.name, 1.0)
        else:
            output = RecipeIO.coerce(self.output)
        object.__setattr__(self, "output", output)

    @property
    def is_raw_material(self) -> bool:
        """True when no inputs are declared (a leaf in any dependency tree)."""
        return not self.inputs

    def to_dict(self) -> dict:
        """Serialize to the loader's record shape."""
        return {
            "name": self.name,
            "type": self.type.value,
            "inputs": [io.to_dict() for io in self.inputs],
            "output": self.output.to_dict(),
            "craftingTime": self.crafting_time,
            "description": self.description,
            "tier": self.tier,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "RecipeRecord":
        """Build from a loader record; missing optional fields take defaults."""
        crafting_time = data.get("craftingTime", data.get("crafting_time", 0.0))
        return cls(
            name=str(data.get("name") or ""),
            type=data.get("type"),
            inputs=tuple(data.get("inputs") or ()),
            output=data.get("output"),
            crafting_time=float(crafting_time or 0.0),
            description=str(data.get("description") or ""),
            tier=int(data.get("tier") or 1),
            category=str(data.get("category") or "Other"),
        )
