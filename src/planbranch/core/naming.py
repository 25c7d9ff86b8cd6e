"""Naming utilities for feature branch names.

This module provides pure utility functions for turning a plan directory into
a git branch name. All functions are pure (no I/O) and total.
"""

import re
from pathlib import Path

MAX_BRANCH_SEGMENT_LENGTH = 60

_PLAN_DIR_PATTERN = re.compile(r"[0-9]+--(.+)")


def extract_plan_name(plan_dir: Path | str) -> str:
    """Extract the descriptive part of a plan directory name.

    Plan directories are named `<id>--<name>`. Anything else is returned
    unchanged.

    Examples:
        >>> extract_plan_name(Path("/repo/.ai/task-manager/plans/58--update-docs"))
        'update-docs'
        >>> extract_plan_name("drafts")
        'drafts'
    """
    dir_name = Path(plan_dir).name
    match = _PLAN_DIR_PATTERN.fullmatch(dir_name)
    if match is None:
        return dir_name
    return match.group(1)


def sanitize_branch_segment(name: str) -> str:
    """Sanitize free text into a branch-name-safe segment.

    - Lowercases input
    - Replaces characters outside `[a-z0-9-]` with `-`
    - Collapses consecutive `-`
    - Strips leading/trailing `-`
    - Truncates to 60 characters, stripping a hyphen exposed by the cut

    May return an empty string. Applying it twice gives the same result as
    applying it once.

    Examples:
        >>> sanitize_branch_segment("Update Docs & README")
        'update-docs-readme'
        >>> sanitize_branch_segment("___")
        ''
    """
    lowered = name.lower()
    # Replace unsafe characters with hyphens
    replaced = re.sub(r"[^a-z0-9-]", "-", lowered)
    # Collapse consecutive hyphens
    collapsed = re.sub(r"-+", "-", replaced)
    trimmed = collapsed.strip("-")

    if len(trimmed) > MAX_BRANCH_SEGMENT_LENGTH:
        trimmed = trimmed[:MAX_BRANCH_SEGMENT_LENGTH].rstrip("-")

    return trimmed


def feature_branch_name(plan_id: str, plan_dir: Path | str, prefix: str = "feature") -> str:
    """Build the branch name for a plan: `<prefix>/<plan_id>--<segment>`.

    An empty segment is kept as-is, giving e.g. `feature/7--`.

    Examples:
        >>> feature_branch_name("58", Path("plans/58--Update Docs"))
        'feature/58--update-docs'
    """
    segment = sanitize_branch_segment(extract_plan_name(plan_dir))
    return f"{prefix}/{plan_id}--{segment}"
