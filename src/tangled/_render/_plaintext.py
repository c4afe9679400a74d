"""Plaintext tree rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from tangled._graph import DependencyGraph

BRANCH = "├── "
CORNER = "└── "
PIPE = "│   "
SPACE = "    "
ROOT_INDENT = "  "


class PlaintextRenderer:
    """Renders the graph as an indented tree rooted at the main module.

    A module that was already printed is printed again where it reappears,
    but its children are not repeated. This keeps shared dependencies visible
    and bounds the output on cyclic graphs.

    Example output::

        example.com/app
          ├── example.com/a@v1.0.0
          │   └── example.com/c@v1.0.0
          └── example.com/b@v1.0.0

    """

    def render(self, graph: DependencyGraph, writer: TextIO) -> None:
        adjacency = graph.adjacency()
        visited: set[str] = set()
        # Depth-first, pre-order; children are pushed in reverse so they pop in sorted order
        stack: list[tuple[str, str, bool]] = [(str(graph.root), "", True)]

        while stack:
            node_key, prefix, is_last = stack.pop()
            writer.write(f"{prefix}{_connector(prefix, is_last=is_last)}{node_key}\n")

            if node_key in visited:
                continue
            visited.add(node_key)

            if not prefix:
                child_prefix = ROOT_INDENT
            elif is_last:
                child_prefix = prefix + SPACE
            else:
                child_prefix = prefix + PIPE

            children = sorted(adjacency.get(node_key, ()))
            last_index = len(children) - 1
            stack.extend((children[i], child_prefix, i == last_index) for i in reversed(range(len(children))))


def _connector(prefix: str, *, is_last: bool) -> str:
    if not prefix:
        return ""
    return CORNER if is_last else BRANCH
