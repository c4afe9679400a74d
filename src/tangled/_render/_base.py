"""Renderer protocol and format lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ._formats import OutputFormat
from ._graphviz import GraphvizRenderer
from ._html import HtmlRenderer
from ._mermaid import MermaidRenderer
from ._plaintext import PlaintextRenderer

if TYPE_CHECKING:
    from typing import TextIO

    from tangled._graph import DependencyGraph


class Renderer(Protocol):
    """Renders a dependency graph to a text sink in one output format.

    Implementations hold no per-render state, so one instance may render any
    number of graphs. Errors raised by the sink propagate unchanged.
    """

    def render(self, graph: DependencyGraph, writer: TextIO) -> None: ...


def get_renderer(output_format: OutputFormat | str, *, title: str | None = None) -> Renderer:
    """Create a renderer for the given format.

    Args:
        output_format: An OutputFormat member, format name or alias.
        title: Page title for the HTML format. Ignored by the other formats.

    Returns:
        A new renderer instance.

    Raises:
        ValueError: If the format name is unknown.

    """
    fmt = output_format if isinstance(output_format, OutputFormat) else OutputFormat.parse(output_format)
    match fmt:
        case OutputFormat.TEXT:
            return PlaintextRenderer()
        case OutputFormat.HTML:
            return HtmlRenderer(title=title)
        case OutputFormat.MERMAID:
            return MermaidRenderer()
        case OutputFormat.DOT:
            return GraphvizRenderer()
