"""Tests for branch_exists local/remote matching."""

from pathlib import Path

from planbranch.core.git.abc import branch_exists
from tests.fakes.git import FakeGit

CWD = Path("/repo")
BRANCH = "feature/58--update-docs"


def test_exact_local_match() -> None:
    git = FakeGit(local_branches=["main", BRANCH])

    assert branch_exists(git, CWD, BRANCH) is True


def test_local_match_is_exact_not_substring() -> None:
    git = FakeGit(local_branches=["main", BRANCH + "-v2"])

    assert branch_exists(git, CWD, BRANCH) is False


def test_remote_match_with_prefix() -> None:
    git = FakeGit(local_branches=["main"], remote_branches=["origin/main", f"origin/{BRANCH}"])

    assert branch_exists(git, CWD, BRANCH) is True


def test_remote_match_is_substring() -> None:
    """Remote matching is deliberately looser than local matching.

    A remote branch that merely contains the name counts as existing. This
    pins the current behavior so a switch to exact matching is a visible change.
    """
    git = FakeGit(local_branches=["main"], remote_branches=[f"origin/{BRANCH}-v2"])

    assert branch_exists(git, CWD, BRANCH) is True


def test_missing_everywhere() -> None:
    git = FakeGit(local_branches=["main"], remote_branches=["origin/main"])

    assert branch_exists(git, CWD, BRANCH) is False


def test_local_hit_skips_remote_listing() -> None:
    git = FakeGit(local_branches=[BRANCH])

    branch_exists(git, CWD, BRANCH)

    assert git.queries == ["list_local_branches"]
