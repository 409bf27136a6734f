"""Operational settings for the resolver."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ResolverLimits:
    """Ceilings guarding against combinatorial blow-up on adversarial catalogs.

    ``None`` means unbounded. Depth counts edges from the root (root = 0).
    """

    max_depth: Optional[int] = None
    max_nodes: Optional[int] = None

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError("max_nodes must be >= 1")

    @property
    def is_bounded(self) -> bool:
        return self.max_depth is not None or self.max_nodes is not None


DEFAULT_LIMITS = ResolverLimits()
