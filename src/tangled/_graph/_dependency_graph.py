"""Dependency graph built from parsed module edges."""

from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from tangled._models import Dependency, Module


@dataclass(slots=True)
class DependencyGraph:
    """A directed graph of "requires" relationships between modules.

    The graph keeps its edges in insertion order and never deduplicates them.
    Queries that hand out module sets (``all_modules``) are deduplicated by
    canonical string and sorted, so two passes over the same graph number the
    modules identically.

    The adjacency index is derived from the edge list. It is dropped on every
    mutation and rebuilt on the next ``adjacency()`` call.

    Attributes:
        root: The module under analysis (the main module).

    """

    root: Module
    _dependencies: list[Dependency] = field(default_factory=list, init=False)
    _adjacency: dict[str, tuple[str, ...]] | None = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_dependencies(cls, root: Module, dependencies: Iterable[Dependency]) -> Self:
        """Build a graph from a root module and an ordered list of edges.

        Args:
            root: The main module.
            dependencies: Edges to add, in order.

        Returns:
            A new DependencyGraph instance.

        Example:
            >>> main = Module("example.com/app")
            >>> dep = Module("example.com/lib", "v1.0.0")
            >>> graph = DependencyGraph.from_dependencies(main, [Dependency(main, dep)])
            >>> [str(m) for m in graph.direct_dependencies(main)]
            ['example.com/lib@v1.0.0']

        """
        graph = cls(root)
        for dep in dependencies:
            graph.add_dependency(dep.from_module, dep.to_module)
        return graph

    @property
    def dependencies(self) -> Sequence[Dependency]:
        """All edges in insertion order."""
        return tuple(self._dependencies)

    def add_dependency(self, from_module: Module, to_module: Module) -> None:
        """Append the edge ``from_module -> to_module``.

        Duplicate edges are kept. The cached adjacency index is invalidated.
        """
        self._dependencies.append(Dependency(from_module, to_module))
        self._adjacency = None

    def direct_dependencies(self, module: Module) -> list[Module]:
        """Get the modules that ``module`` directly requires.

        Args:
            module: The module to query.

        Returns:
            The target of every edge leaving ``module``, in insertion order.

        """
        key = str(module)
        return [dep.to_module for dep in self._dependencies if str(dep.from_module) == key]

    def all_modules(self) -> list[Module]:
        """Get every module in the graph, including the root.

        Returns:
            Modules deduplicated by canonical string, sorted by canonical string.

        """
        modules: dict[str, Module] = {str(self.root): self.root}
        for dep in self._dependencies:
            modules.setdefault(str(dep.from_module), dep.from_module)
            modules.setdefault(str(dep.to_module), dep.to_module)
        return [modules[key] for key in sorted(modules)]

    def adjacency(self) -> Mapping[str, tuple[str, ...]]:
        """Get the adjacency index keyed by canonical string.

        Returns:
            Read-only mapping from a module to the modules it requires, in
            insertion order. Modules without outgoing edges have no entry.

        """
        if self._adjacency is None:
            index: defaultdict[str, list[str]] = defaultdict(list)
            for dep in self._dependencies:
                index[str(dep.from_module)].append(str(dep.to_module))
            self._adjacency = {key: tuple(targets) for key, targets in index.items()}
        return MappingProxyType(self._adjacency)

    def __len__(self) -> int:
        """Return the number of edges in the graph."""
        return len(self._dependencies)

    def __contains__(self, module: object) -> bool:
        """Check if a module is the root or an endpoint of some edge."""
        if not isinstance(module, Module):
            return False
        return module == self.root or any(module in (dep.from_module, dep.to_module) for dep in self._dependencies)
