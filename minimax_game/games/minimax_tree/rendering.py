from __future__ import annotations

from typing import TYPE_CHECKING, List

from .tree import GameTree

if TYPE_CHECKING:
    from .game import MTGameState

CELL_WIDTH = 6


def _place(line: List[str], center: int, text: str) -> None:
    start = max(0, center - len(text) // 2)
    for i, ch in enumerate(text):
        line[start + i] = ch


def render_text(tree: GameTree, state: "MTGameState", show_values: bool = False) -> str:
    """
    Draw the tree as ASCII art with the root on top.

    - leaves always show their value
    - internal nodes show ``o`` (or their minimax value if show_values)
    - nodes already passed through are wrapped in ``( )``
    - the current node is wrapped in ``[ ]``
    """
    depth = len(tree)
    width = (1 << (depth - 1)) * CELL_WIDTH
    rows: List[str] = []

    for layer in range(depth):
        count = 1 << layer
        span = width / count
        node_line = [" "] * (width + CELL_WIDTH)
        for branch in range(count):
            center = int((branch + 0.5) * span)
            if layer == depth - 1 or show_values:
                token = str(tree.value(layer, branch))
            else:
                token = "o"
            if layer == state.active_layer and branch == state.active_branch:
                token = f"[{token}]"
            elif layer < state.active_layer and branch == state.active_branch >> (state.active_layer - layer):
                token = f"({token})"
            _place(node_line, center, token)
        rows.append("".join(node_line).rstrip())

        if layer == depth - 1:
            break
        # Connectors towards the two children
        edge_line = [" "] * (width + CELL_WIDTH)
        for branch in range(count):
            center = (branch + 0.5) * span
            quarter = span / 4
            edge_line[int(center - quarter / 2 - 0.5)] = "/"
            edge_line[int(center + quarter / 2 + 0.5)] = "\\"
        rows.append("".join(edge_line).rstrip())

    return "\n".join(rows)
