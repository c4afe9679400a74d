"""Output format names."""

from enum import StrEnum
from typing import Self


class OutputFormat(StrEnum):
    """Supported output formats.

    Each member carries a short description as its docstring.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    TEXT = "text", "Indented plaintext tree"
    HTML = "html", "Interactive D3 force-directed graph page"
    MERMAID = "mermaid", "MermaidJS flowchart"
    DOT = "dot", "GraphViz DOT digraph"

    @classmethod
    def parse(cls, name: str) -> Self:
        """Look up a format by name or alias, ignoring case.

        Raises:
            ValueError: If ``name`` is not a known format.

        """
        key = name.lower()
        key = _ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        supported = ", ".join(member.value for member in cls)
        msg = f"unsupported output format: {name} (supported: {supported})"
        raise ValueError(msg)


_ALIASES = {
    "plaintext": "text",
    "tree": "text",
    "d3": "html",
    "mmd": "mermaid",
    "graphviz": "dot",
}
