"""Go module dependency graph visualization."""

__all__ = [
    "Dependency",
    "DependencyGraph",
    "EmptyInputError",
    "GraphInputError",
    "GraphvizRenderer",
    "HtmlRenderer",
    "MermaidRenderer",
    "Module",
    "OutputFormat",
    "ParseError",
    "PlaintextRenderer",
    "Renderer",
    "__version__",
    "get_renderer",
    "infer_root_module",
    "parse_graph",
    "parse_graph_from_file",
    "parse_graph_from_stream",
    "parse_module",
]

from importlib.metadata import PackageNotFoundError, version

from ._graph import DependencyGraph
from ._models import Dependency, Module
from ._parser import (
    EmptyInputError,
    GraphInputError,
    ParseError,
    infer_root_module,
    parse_graph,
    parse_graph_from_file,
    parse_graph_from_stream,
    parse_module,
)
from ._render import (
    GraphvizRenderer,
    HtmlRenderer,
    MermaidRenderer,
    OutputFormat,
    PlaintextRenderer,
    Renderer,
    get_renderer,
)

try:
    __version__ = version("tangled")
except PackageNotFoundError:
    __version__ = "0.0.0"
