"""Interactive HTML rendering backed by a D3 force-directed layout."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from htpy import Element, body, button, div, h1, head, html, meta, script, span, style, title
from markupsafe import Markup
from pydantic import BaseModel, ConfigDict

from ._assets import CSS, D3_SRC, LINKS_PLACEHOLDER, NODES_PLACEHOLDER, SCRIPT

if TYPE_CHECKING:
    from typing import TextIO

    from tangled._graph import DependencyGraph

DEFAULT_TITLE = "Dependency Graph"

ROOT_GROUP = 2
MODULE_GROUP = 1

# JSON escapes that keep a serialized array from closing the surrounding <script> element
_SCRIPT_SAFE = str.maketrans({"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"})

_PLACEHOLDER_RE = re.compile(f"{re.escape(NODES_PLACEHOLDER)}|{re.escape(LINKS_PLACEHOLDER)}")


class D3Node(BaseModel):
    """A node entry consumed by the page script."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    group: int


class D3Link(BaseModel):
    """A link entry; ``source`` and ``target`` are node ids."""

    model_config = ConfigDict(frozen=True)

    source: int
    target: int


def _json_array(items: list[D3Node] | list[D3Link]) -> str:
    entries = [item.model_dump_json().translate(_SCRIPT_SAFE) for item in items]
    return "[" + ",\n        ".join(entries) + "]"


class HtmlRenderer:
    """Renders the graph as a self-contained interactive HTML page.

    The page lays the graph out with a D3 force simulation and adds zoom
    controls, a minimap and a breadcrumb trail for the selected module. Node
    ids are positions in ``DependencyGraph.all_modules()``, which both the
    node and the link arrays are built from.

    Args:
        title: Optional name shown in the page title, typically the input
            file name.

    """

    def __init__(self, title: str | None = None) -> None:
        self.title = title

    @property
    def page_title(self) -> str:
        if self.title:
            return f"{self.title} - {DEFAULT_TITLE}"
        return DEFAULT_TITLE

    def render(self, graph: DependencyGraph, writer: TextIO) -> None:
        fragments = {
            NODES_PLACEHOLDER: self.generate_nodes(graph),
            LINKS_PLACEHOLDER: self.generate_links(graph),
        }
        # Single pass, so placeholder text inside a module name is never substituted
        graph_script = _PLACEHOLDER_RE.sub(lambda m: fragments[m[0]], SCRIPT)
        writer.write(self._render_page(graph_script))

    def generate_nodes(self, graph: DependencyGraph) -> str:
        """Serialize every module as a JSON array of ``{id, name, group}`` objects.

        The main module is in group 2, every other module in group 1.
        """
        root_key = str(graph.root)
        nodes = [
            D3Node(id=i, name=str(module), group=ROOT_GROUP if str(module) == root_key else MODULE_GROUP)
            for i, module in enumerate(graph.all_modules())
        ]
        return _json_array(nodes)

    def generate_links(self, graph: DependencyGraph) -> str:
        """Serialize every edge, in input order, as a JSON array of ``{source, target}`` objects."""
        index = {str(module): i for i, module in enumerate(graph.all_modules())}
        links = [
            D3Link(source=index[str(dep.from_module)], target=index[str(dep.to_module)])
            for dep in graph.dependencies
        ]
        return _json_array(links)

    def _render_page(self, graph_script: str) -> str:
        page = html(lang="en")[
            head[
                meta(charset="UTF-8"),
                title[self.page_title],
                script(src=D3_SRC),
                style[Markup(CSS)],  # noqa: S704
            ],
            body[
                h1[self.page_title],
                div(id="graph-container")[
                    div(".breadcrumb-container")[
                        div(".breadcrumb", id="breadcrumb")[
                            span(".breadcrumb-empty")["Click a node to see its dependency path"],
                        ],
                    ],
                    _zoom_controls(),
                    div(id="graph"),
                    div(".minimap", id="minimap"),
                ],
                div(id="tooltip"),
                script[Markup(graph_script)],  # noqa: S704
            ],
        ]
        document = str(page)
        # Recent htpy releases emit the doctype for the <html> element themselves
        if not document.lower().startswith("<!doctype"):
            document = f"<!DOCTYPE html>\n{document}"
        return document


def _zoom_controls() -> Element:
    return div(".zoom-controls")[
        button(".zoom-button", id="zoom-in")["+"],
        button(".zoom-button", id="zoom-out")["−"],
        button(".zoom-button", id="reset-zoom", style="font-size: 14px;")["⌂"],
    ]
