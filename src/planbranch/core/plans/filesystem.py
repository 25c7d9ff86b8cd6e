"""Plan resolution against the task manager directory tree.

Layout:
    <repo>/.ai/task-manager/
        plans/
            58--update-docs/
                plan-58--update-docs.md
        archive/
            12--old-work/
                plan-12--old-work.md

Plans are looked up in plans/ first, then archive/. The plan file's YAML front
matter may carry an `id` field, used when the directory name has no id prefix.
"""

import logging
import re
from pathlib import Path

import frontmatter
import yaml

from planbranch.core.plans.abc import PlanResolver, ResolvedPlan

logger = logging.getLogger(__name__)

PLAN_SUBDIRECTORIES = ("plans", "archive")

_ID_PREFIX_PATTERN = re.compile(r"^([0-9]+)--")
_NUMERIC_ID_PATTERN = re.compile(r"[0-9]+")


def find_plans_root(start: Path, plans_root: Path) -> Path | None:
    """Walk up from `start` to find the directory holding plans.

    Args:
        start: Directory to begin the search in
        plans_root: Relative location of the plans tree (e.g. `.ai/task-manager`)

    Returns:
        Absolute path to the plans tree, or None if no ancestor contains it
    """
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        candidate = parent / plans_root
        if candidate.is_dir():
            return candidate
    return None


def find_plan_file(plan_dir: Path) -> Path | None:
    """Return the first `plan-*.md` file in plan_dir, if any."""
    candidates = sorted(plan_dir.glob("plan-*.md"))
    if not candidates:
        return None
    return candidates[0]


def read_plan_id_from_frontmatter(plan_file: Path) -> str | None:
    """Read the `id` field from a plan file's YAML front matter.

    Returns None when there is no front matter, no integer-like id, or the
    front matter cannot be parsed.
    """
    try:
        post = frontmatter.loads(plan_file.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.debug("Could not read front matter from %s: %s", plan_file, e)
        return None

    plan_id = post.metadata.get("id")
    if isinstance(plan_id, bool):
        return None
    if isinstance(plan_id, int):
        return str(plan_id)
    if isinstance(plan_id, str) and _NUMERIC_ID_PATTERN.fullmatch(plan_id.strip()):
        return str(int(plan_id.strip()))
    return None


def _plan_id_for_directory(plan_dir: Path, plan_file: Path | None) -> str | None:
    match = _ID_PREFIX_PATTERN.match(plan_dir.name)
    if match is not None:
        return str(int(match.group(1)))
    if plan_file is None:
        return None
    return read_plan_id_from_frontmatter(plan_file)


class FilesystemPlanResolver(PlanResolver):
    """Resolves plans stored as `<id>--<name>` directories on disk."""

    def __init__(self, plans_root: Path) -> None:
        """
        Args:
            plans_root: Location of the plans tree relative to a repository
                directory (e.g. `.ai/task-manager`)
        """
        self._plans_root = plans_root

    def resolve(self, identifier: str, search_root: Path) -> ResolvedPlan | None:
        identifier = identifier.strip()
        if not identifier:
            return None

        if _NUMERIC_ID_PATTERN.fullmatch(identifier):
            return self._resolve_by_id(str(int(identifier)), search_root)
        return self._resolve_by_path(Path(identifier), search_root)

    def _resolve_by_id(self, plan_id: str, search_root: Path) -> ResolvedPlan | None:
        root = find_plans_root(search_root, self._plans_root)
        if root is None:
            logger.debug("No %s directory above %s", self._plans_root, search_root)
            return None

        for subdir_name in PLAN_SUBDIRECTORIES:
            subdir = root / subdir_name
            if not subdir.is_dir():
                continue
            for entry in sorted(subdir.iterdir()):
                if not entry.is_dir():
                    continue
                match = _ID_PREFIX_PATTERN.match(entry.name)
                if match is None or str(int(match.group(1))) != plan_id:
                    continue
                logger.debug("Plan %s found at %s", plan_id, entry)
                return ResolvedPlan(
                    plan_dir=entry, plan_id=plan_id, plan_file=find_plan_file(entry)
                )

        logger.debug("Plan %s not found under %s", plan_id, root)
        return None

    def _resolve_by_path(self, path: Path, search_root: Path) -> ResolvedPlan | None:
        candidate = path if path.is_absolute() else search_root / path
        if candidate.is_file():
            plan_dir = candidate.parent
            plan_file: Path | None = candidate
        elif candidate.is_dir():
            plan_dir = candidate
            plan_file = find_plan_file(candidate)
        else:
            logger.debug("Plan path %s does not exist", candidate)
            return None

        plan_dir = plan_dir.resolve()
        plan_id = _plan_id_for_directory(plan_dir, plan_file)
        if plan_id is None:
            logger.debug("Could not determine plan id for %s", plan_dir)
            return None

        return ResolvedPlan(plan_dir=plan_dir, plan_id=plan_id, plan_file=plan_file)
