"""No-op Git wrapper for dry-run mode.

This module provides a Git wrapper that prevents execution of the mutating
operation while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

import click

from planbranch.cli.output import user_output
from planbranch.core.git.abc import Git

# ============================================================================
# No-op Wrapper
# ============================================================================


class NoopGit(Git):
    """No-op wrapper that prints the branch creation instead of running it.

    Usage:
        real_ops = RealGit()
        noop_ops = NoopGit(real_ops)

        # Prints message instead of creating the branch
        noop_ops.checkout_new_branch(cwd, "feature/58--update-docs")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def is_inside_work_tree(self, cwd: Path) -> bool:
        return self._wrapped.is_inside_work_tree(cwd)

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._wrapped.get_repository_root(cwd)

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_current_branch(cwd)

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return self._wrapped.has_uncommitted_changes(cwd)

    def list_local_branches(self, cwd: Path) -> list[str]:
        return self._wrapped.list_local_branches(cwd)

    def list_remote_branches(self, cwd: Path) -> list[str]:
        return self._wrapped.list_remote_branches(cwd)

    # Mutating operations: print instead of executing

    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        """Print what would be created without running git."""
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would run: git checkout -b {branch}")
