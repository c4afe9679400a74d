"""GraphViz DOT rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from tangled._graph import DependencyGraph

_ID_TRANSLATION = str.maketrans(dict.fromkeys("/.@-", "_"))


def sanitize_node_id(name: str) -> str:
    """Replace characters that are awkward in DOT identifiers with underscores.

    Example:
        >>> sanitize_node_id("github.com/example/module@v1.2.3")
        'github_com_example_module_v1_2_3'

    """
    return name.translate(_ID_TRANSLATION)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class GraphvizRenderer:
    """Renders the graph as a left-to-right GraphViz digraph with the main module highlighted."""

    def render(self, graph: DependencyGraph, writer: TextIO) -> None:
        writer.write("digraph dependencies {\n")
        writer.write("    rankdir=LR;\n")
        writer.write("    node [shape=box, style=rounded];\n")

        root_key = str(graph.root)
        for module in graph.all_modules():
            name = str(module)
            node_id = _quote(sanitize_node_id(name))
            label = _quote(name)
            if name == root_key:
                writer.write(f'    {node_id} [label={label}, fillcolor=lightblue, style="rounded,filled"];\n')
            else:
                writer.write(f"    {node_id} [label={label}];\n")

        for dep in graph.dependencies:
            from_id = _quote(sanitize_node_id(str(dep.from_module)))
            to_id = _quote(sanitize_node_id(str(dep.to_module)))
            writer.write(f"    {from_id} -> {to_id};\n")

        writer.write("}\n")
