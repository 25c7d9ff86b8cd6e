"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from planbranch.core.git.abc import Git, RepositoryState, branch_exists
from planbranch.core.git.noop import NoopGit
from planbranch.core.git.real import RealGit

__all__ = [
    "Git",
    "RepositoryState",
    "RealGit",
    "NoopGit",
    "branch_exists",
]
