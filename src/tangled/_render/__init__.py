"""Render strategies for dependency graphs.

This module contains:
- Renderer: protocol shared by every output format
- PlaintextRenderer, HtmlRenderer, MermaidRenderer, GraphvizRenderer: the four formats
- OutputFormat / get_renderer: format lookup by name or alias
"""

from ._base import Renderer, get_renderer
from ._formats import OutputFormat
from ._graphviz import GraphvizRenderer, sanitize_node_id
from ._html import HtmlRenderer
from ._mermaid import MermaidRenderer
from ._plaintext import PlaintextRenderer

__all__ = [
    "GraphvizRenderer",
    "HtmlRenderer",
    "MermaidRenderer",
    "OutputFormat",
    "PlaintextRenderer",
    "Renderer",
    "get_renderer",
    "sanitize_node_id",
]
