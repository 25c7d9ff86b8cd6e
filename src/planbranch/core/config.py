"""Repository configuration loaded from pyproject.toml.

Example:
  [tool.planbranch]
  trunk_branches = ["main", "master", "trunk"]
  branch_prefix = "feature"
  plans_root = ".ai/task-manager"
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def _default_trunk_branches() -> tuple[str, ...]:
    return ("main", "master")


@dataclass(frozen=True)
class PlanBranchConfig:
    """In-memory representation of the `[tool.planbranch]` table.

    All fields have defaults so a repository without configuration behaves
    like one with an empty table.
    """

    trunk_branches: tuple[str, ...] = field(default_factory=_default_trunk_branches)
    branch_prefix: str = "feature"
    plans_root: Path = Path(".ai/task-manager")


def _read_str_list(section: dict, key: str, source: Path) -> tuple[str, ...] | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{key}' in {source} must be a list of strings")
    if not value:
        raise ValueError(f"'{key}' in {source} must not be empty")
    return tuple(value)


def _read_str(section: dict, key: str, source: Path) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"'{key}' in {source} must be a non-empty string")
    return value


def load_config(repo_root: Path | None) -> PlanBranchConfig:
    """Load `[tool.planbranch]` from the repository's pyproject.toml.

    Args:
        repo_root: Repository top-level directory, or None outside a repository

    Returns:
        PlanBranchConfig with configured values, defaults for the rest

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    if repo_root is None:
        return PlanBranchConfig()

    pyproject_path = repo_root / "pyproject.toml"
    if not pyproject_path.exists():
        return PlanBranchConfig()

    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {pyproject_path}: {e}") from e

    tool_section = data.get("tool")
    if tool_section is None:
        return PlanBranchConfig()

    section = tool_section.get("planbranch")
    if section is None:
        return PlanBranchConfig()

    defaults = PlanBranchConfig()
    trunk_branches = _read_str_list(section, "trunk_branches", pyproject_path)
    branch_prefix = _read_str(section, "branch_prefix", pyproject_path)
    plans_root = _read_str(section, "plans_root", pyproject_path)

    return PlanBranchConfig(
        trunk_branches=trunk_branches if trunk_branches is not None else defaults.trunk_branches,
        branch_prefix=(
            branch_prefix.strip("/") if branch_prefix is not None else defaults.branch_prefix
        ),
        plans_root=Path(plans_root) if plans_root is not None else defaults.plans_root,
    )
