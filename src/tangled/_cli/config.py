"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from tangled._render import OutputFormat


class ConfigError(Exception):
    """Error in tangled configuration."""


@dataclass(slots=True, frozen=True)
class TangledConfig:
    """Configuration loaded from the ``[tool.tangled]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    format: OutputFormat | None = None
    output: Path | None = None
    title: str | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _get_string(section: dict[str, object], key: str) -> str | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.tangled].{key}: expected string"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> TangledConfig:
    """Load and validate [tool.tangled] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed TangledConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    tangled_section = tool_section.get("tangled", {}) if isinstance(tool_section, dict) else None
    if not isinstance(tangled_section, dict):
        msg = f"Invalid [tool.tangled] in {pyproject_path}: expected a table"
        raise ConfigError(msg)

    if not tangled_section:
        # No [tool.tangled] section - return empty config
        return TangledConfig(project_root=project_root)

    output_format: OutputFormat | None = None
    format_value = _get_string(tangled_section, "format")
    if format_value is not None:
        try:
            output_format = OutputFormat.parse(format_value)
        except ValueError as e:
            msg = f"Invalid [tool.tangled].format: {e}"
            raise ConfigError(msg) from e

    output_path: Path | None = None
    output_value = _get_string(tangled_section, "output")
    if output_value is not None and output_value != "-":
        output_path = Path(output_value)
        if not output_path.is_absolute():
            output_path = project_root / output_path

    return TangledConfig(
        format=output_format,
        output=output_path,
        title=_get_string(tangled_section, "title"),
        project_root=project_root,
    )


def get_config() -> TangledConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        TangledConfig (may be empty if no pyproject.toml or no [tool.tangled] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return TangledConfig()
    return load_config(pyproject_path)
