"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
import subprocess
from pathlib import Path

from planbranch.core.git.abc import Git
from planbranch.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


def _run_query(cmd: list[str], cwd: Path) -> str | None:
    """Run a read-only git query, returning stripped stdout or None on any failure."""
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except OSError as e:
        logger.debug("Could not run %s: %s", " ".join(cmd), e)
        return None

    if result.returncode != 0:
        logger.debug(
            "%s exited with %d: %s", " ".join(cmd), result.returncode, result.stderr.strip()
        )
        return None

    return result.stdout.strip()


def _parse_branch_lines(output: str | None) -> list[str]:
    if output is None:
        return []
    return [line.strip() for line in output.split("\n") if line.strip()]


# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git work tree."""
        return _run_query(["git", "rev-parse", "--is-inside-work-tree"], cwd) == "true"

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the work tree containing cwd."""
        root = _run_query(["git", "rev-parse", "--show-toplevel"], cwd)
        if not root:
            return None
        return Path(root)

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        branch = _run_query(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd)
        if not branch or branch == "HEAD":
            return None

        return branch

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check if a worktree has uncommitted changes."""
        status = _run_query(["git", "status", "--porcelain"], cwd)
        if status is None:
            logger.debug("git status failed; treating working tree as clean")
            return False
        return bool(status)

    def list_local_branches(self, cwd: Path) -> list[str]:
        """List all local branch names in the repository."""
        return _parse_branch_lines(
            _run_query(["git", "branch", "--list", "--format=%(refname:short)"], cwd)
        )

    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List all remote branch names in the repository."""
        return _parse_branch_lines(
            _run_query(["git", "branch", "-r", "--list", "--format=%(refname:short)"], cwd)
        )

    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        """Create a branch from HEAD and switch to it."""
        run_subprocess_with_context(
            ["git", "checkout", "-b", branch],
            operation_context=f"create and switch to branch '{branch}'",
            cwd=cwd,
        )
