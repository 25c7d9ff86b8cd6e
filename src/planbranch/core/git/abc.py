"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
workflow testable without a real repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- NoopGit: Dry-run wrapper that skips the mutating operation
- branch_exists: Convenience helper composed from the branch listings
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RepositoryState:
    """What the workflow learned about the repository during one invocation.

    has_uncommitted_changes is None when the workflow stopped before asking.
    """

    is_repo: bool
    current_branch: str | None
    has_uncommitted_changes: bool | None


def branch_exists(git: "Git", cwd: Path, branch: str) -> bool:
    """Check whether a branch exists locally or on any remote.

    Local branches must match exactly. Remote branches match when `branch`
    appears anywhere in the remote entry, so `origin/feature/58--docs` and
    `origin/feature/58--docs-v2` both count as existing for
    `feature/58--docs`. The remote check is intentionally permissive; keep it
    that way unless callers are updated to expect exact remote matching.

    Args:
        git: Git implementation to query
        cwd: Working directory inside the repository
        branch: Branch name to look for

    Returns:
        True if the branch exists locally or a remote entry contains it
    """
    if branch in git.list_local_branches(cwd):
        return True

    return any(branch in remote for remote in git.list_remote_branches(cwd))


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.

    Query methods never raise: a failed query is reported through the return
    value (False, None or an empty list). checkout_new_branch is the only
    mutating operation and raises on failure.
    """

    @abstractmethod
    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git work tree.

        Returns False when git reports otherwise or cannot be run at all.
        """
        ...

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the work tree containing cwd."""
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch.

        Returns None on detached HEAD or when the query fails.
        """
        ...

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check if a worktree has uncommitted changes.

        Uses git status --porcelain to detect any uncommitted changes.
        Returns False if git command fails.

        Args:
            cwd: Working directory to check

        Returns:
            True if there are any uncommitted changes (staged, modified, or untracked)
        """
        ...

    @abstractmethod
    def list_local_branches(self, cwd: Path) -> list[str]:
        """List all local branch names in the repository.

        Returns an empty list when the query fails.
        """
        ...

    @abstractmethod
    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List all remote branch names in the repository.

        Returns branch names in format 'origin/branch-name', 'upstream/feature', etc.
        Returns an empty list when the query fails.
        """
        ...

    @abstractmethod
    def checkout_new_branch(self, cwd: Path, branch: str) -> None:
        """Create a branch from HEAD and switch to it (git checkout -b).

        Args:
            cwd: Working directory to run command in
            branch: Name of the branch to create

        Raises:
            RuntimeError: If git refuses to create or switch to the branch
        """
        ...
