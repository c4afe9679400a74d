"""Parsing of ``go mod graph`` style edge lists."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING

from ._graph import DependencyGraph
from ._models import Dependency, Module

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

logger = logging.getLogger(__name__)


class GraphInputError(Exception):
    """Error in the dependency graph input."""


class ParseError(GraphInputError):
    """Raised when a line of the input cannot be parsed.

    Attributes:
        line: 1-indexed line number of the offending line.
        content: The offending line, with surrounding whitespace removed.
        cause: Why the line was rejected.

    """

    def __init__(self, line: int, content: str, cause: str) -> None:
        self.line = line
        self.content = content
        self.cause = cause
        super().__init__(f"parse error at line {line} ({content!r}): {cause}")


class EmptyInputError(GraphInputError):
    """Raised when the input contains no dependencies at all."""

    def __init__(self) -> None:
        super().__init__("no dependencies found in input")


def parse_module(token: str) -> Module:
    """Parse a module token of the form ``path`` or ``path@version``.

    The version delimiter is the last ``@``, so paths that contain ``@``
    themselves are preserved.

    Args:
        token: The token to parse.

    Returns:
        The parsed Module.

    Raises:
        ValueError: If the token or its path portion is empty.

    Example:
        >>> parse_module("github.com/example@test/module@v1.2.3")
        Module(path='github.com/example@test/module', version='v1.2.3')

    """
    if not token:
        msg = "empty module string"
        raise ValueError(msg)

    path, sep, version = token.rpartition("@")
    if not sep:
        # No version: this is a main module
        return Module(path=token)

    if not path:
        msg = "empty module path"
        raise ValueError(msg)

    return Module(path=path, version=version)


def _parse_line(line_num: int, line: str) -> Dependency:
    fields = line.split()
    if len(fields) != 2:  # noqa: PLR2004
        raise ParseError(line_num, line, f"expected 2 fields, got {len(fields)}")

    from_token, to_token = fields
    try:
        from_module = parse_module(from_token)
    except ValueError as e:
        raise ParseError(line_num, line, f"failed to parse from module: {e}") from e
    try:
        to_module = parse_module(to_token)
    except ValueError as e:
        raise ParseError(line_num, line, f"failed to parse to module: {e}") from e

    return Dependency(from_module, to_module)


def infer_root_module(dependencies: Sequence[Dependency]) -> Module:
    """Infer the main module from a list of dependencies.

    The main module is the only versionless module that appears on the
    requiring side of an edge. When there is no such module, or more than one,
    the module that requires the most other modules wins, and the first one
    seen wins ties.

    Args:
        dependencies: Parsed edges, in input order.

    Returns:
        The inferred main module.

    Raises:
        EmptyInputError: If ``dependencies`` is empty.

    """
    if not dependencies:
        raise EmptyInputError

    versionless: dict[str, Module] = {}
    for dep in dependencies:
        if not dep.from_module.version:
            versionless.setdefault(dep.from_module.path, dep.from_module)

    if len(versionless) == 1:
        (root,) = versionless.values()
        logger.debug(f"Inferred root module '{root}' (only versionless requirer)")
        return root

    from_counts = Counter(str(dep.from_module) for dep in dependencies)
    root = dependencies[0].from_module
    max_count = 0
    for dep in dependencies:
        count = from_counts[str(dep.from_module)]
        if count > max_count:
            max_count = count
            root = dep.from_module

    logger.debug(f"Inferred root module '{root}' (requires {max_count} modules, {len(versionless)} versionless)")
    return root


def parse_graph(text: str) -> DependencyGraph:
    """Parse an edge list into a DependencyGraph.

    Each non-blank line must hold exactly two whitespace-separated module
    tokens, the requiring module first.

    Args:
        text: The full input text.

    Returns:
        The parsed graph, rooted at the inferred main module.

    Raises:
        ParseError: If a line is malformed.
        EmptyInputError: If the input has no dependencies.

    """
    dependencies: list[Dependency] = []
    for line_num, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            continue
        dependencies.append(_parse_line(line_num, line))

    logger.debug(f"Parsed {len(dependencies)} dependencies")

    root = infer_root_module(dependencies)
    return DependencyGraph.from_dependencies(root, dependencies)


def parse_graph_from_stream(stream: TextIO) -> DependencyGraph:
    """Read a text stream to the end and parse it with ``parse_graph``."""
    return parse_graph(stream.read())


def parse_graph_from_file(path: Path) -> DependencyGraph:
    """Parse a UTF-8 graph file.

    Args:
        path: Path to a file holding ``go mod graph`` output.

    Returns:
        The parsed graph.

    """
    with Path(path).open(encoding="utf-8") as f:
        graph = parse_graph_from_stream(f)
    logger.debug(f"Loaded dependency graph from {path}")
    return graph
