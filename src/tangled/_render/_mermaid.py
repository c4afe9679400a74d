"""MermaidJS flowchart rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from tangled._graph import DependencyGraph


class MermaidRenderer:
    """Renders the graph as a top-down MermaidJS flowchart.

    Node identifiers (``N1``, ``N2``, ...) follow the sorted module order,
    so the same graph always yields the same markup.
    """

    def render(self, graph: DependencyGraph, writer: TextIO) -> None:
        writer.write("graph TD\n")

        node_ids = {str(module): f"N{i}" for i, module in enumerate(graph.all_modules(), start=1)}

        for label, node_id in node_ids.items():
            escaped_label = label.replace('"', '\\"')
            writer.write(f'    {node_id}["{escaped_label}"]\n')

        for dep in graph.dependencies:
            from_id = node_ids[str(dep.from_module)]
            to_id = node_ids[str(dep.to_module)]
            writer.write(f"    {from_id} --> {to_id}\n")
