"""Error taxonomy for catalog construction and resolution."""


class RecipeTreeError(Exception):
    """Base class for all recipe tree errors."""


class ValidationError(RecipeTreeError):
    """Catalog input is malformed; the whole batch of records is rejected."""

    def __init__(self, indices: list[int]):
        self.indices = list(indices)
        listed = ", ".join(str(i) for i in self.indices)
        super().__init__(f"Records missing a name or malformed at indices: {listed}")


class ResolutionError(RecipeTreeError):
    """A single root failed to resolve. Never aborts sibling roots."""


class NotFoundError(ResolutionError):
    """Root recipe name has no catalog entry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Recipe "{name}" not found')


class ResolutionLimitError(ResolutionError):
    """Resolution exceeded a configured depth or node ceiling."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f'Resolution of "{name}" aborted: {reason}')
