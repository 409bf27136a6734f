"""Indented plain-text rendering of dependency trees."""

from collections.abc import Iterable

from recipe_tree.models.dependency_tree import (
    CycleNode,
    DependencyNode,
    NodeVisitor,
    ResolvedNode,
    UnresolvedNode,
)

INDENT = "  "
DIVIDER = "-" * 40
EMPTY_SELECTION = "No Recipes Selected"


def _format_amount(amount: float) -> str:
    return f"{amount:g}x "


class TextRenderer(NodeVisitor):
    """Renders one line per node, children indented under their parent."""

    def render(self, root: DependencyNode) -> str:
        lines: list[str] = []
        pending: list = [(root, 0, None)]
        while pending:
            node, depth, amount = pending.pop()
            node.accept(self, lines, depth, amount, pending)
        return "\n".join(lines)

    def visit_resolved(
        self, node: ResolvedNode, lines: list[str], depth: int, amount, pending: list
    ) -> None:
        icon, label = node.classification
        line = f"{icon} {node.name} [{label}]"
        if node.recipe.crafting_time > 0:
            line += f" ({node.recipe.crafting_time:g}s)"
        lines.append(self._prefix(depth, amount) + line)

        for edge in reversed(node.children):
            pending.append((edge.target, depth + 1, edge.required_amount))

    def visit_cycle(
        self, node: CycleNode, lines: list[str], depth: int, amount, pending: list
    ) -> None:
        lines.append(self._prefix(depth, amount) + f"🔄 {node.name} (Circular Reference)")

    def visit_unresolved(
        self, node: UnresolvedNode, lines: list[str], depth: int, amount, pending: list
    ) -> None:
        lines.append(self._prefix(depth, amount) + f"❓ {node.name} (Unresolved)")

    @staticmethod
    def _prefix(depth: int, amount) -> str:
        prefix = INDENT * depth
        if amount is not None:
            prefix += _format_amount(amount)
        return prefix


def render_text(root: DependencyNode) -> str:
    """Render a single tree as indented text."""
    return TextRenderer().render(root)


def render_many_text(roots: Iterable[tuple[str, DependencyNode]]) -> str:
    """Render several (name, tree) pairs separated by a divider line."""
    renderer = TextRenderer()
    blocks = [renderer.render(tree) for _, tree in roots]
    if not blocks:
        return EMPTY_SELECTION
    return f"\n{DIVIDER}\n".join(blocks)
