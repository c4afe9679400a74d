"""Module and dependency value types."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class Module:
    """A named, optionally versioned unit of dependency.

    The canonical string form is ``path`` when the version is empty and
    ``path@version`` otherwise. Identity is defined by that string, so two
    modules whose canonical strings match compare equal and hash alike.

    Attributes:
        path: Module path, e.g. ``github.com/spf13/cobra``.
        version: Module version, e.g. ``v1.8.0``. Empty for the main module.

    Example:
        >>> str(Module("github.com/spf13/cobra", "v1.8.0"))
        'github.com/spf13/cobra@v1.8.0'
        >>> str(Module("example.com/app"))
        'example.com/app'

    """

    path: str
    version: str = ""

    def __str__(self) -> str:
        if not self.version:
            return self.path
        return f"{self.path}@{self.version}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Module):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


@dataclass(frozen=True, slots=True)
class Dependency:
    """A directed "requires" relationship: ``from_module`` requires ``to_module``."""

    from_module: Module
    to_module: Module

    def __str__(self) -> str:
        return f"{self.from_module} {self.to_module}"
