"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from planbranch.cli.output import select_styler
from planbranch.core.config import PlanBranchConfig, load_config
from planbranch.core.git.abc import Git
from planbranch.core.git.noop import NoopGit
from planbranch.core.git.real import RealGit
from planbranch.core.plans.abc import PlanResolver
from planbranch.core.plans.filesystem import FilesystemPlanResolver
from planbranch.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class PlanBranchContext:
    """Immutable context holding all dependencies for one invocation.

    Created at CLI entry point and threaded through the workflow.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    plan_resolver: PlanResolver
    feedback: UserFeedback
    config: PlanBranchConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool


def create_context(*, dry_run: bool, color: bool, cwd: Path | None = None) -> PlanBranchContext:
    """Create production context with real implementations.

    Called at CLI entry point. Configuration is read from the enclosing
    repository's pyproject.toml when there is one.

    Args:
        dry_run: Wrap git so the branch is reported rather than created
        color: Use colored status lines
        cwd: Working directory (defaults to the process working directory)

    Raises:
        ValueError: If the repository configuration is invalid
    """
    resolved_cwd = cwd if cwd is not None else Path.cwd()

    git: Git = RealGit()
    config = load_config(git.get_repository_root(resolved_cwd))

    if dry_run:
        git = NoopGit(git)

    return PlanBranchContext(
        git=git,
        plan_resolver=FilesystemPlanResolver(config.plans_root),
        feedback=InteractiveFeedback(select_styler(color=color)),
        config=config,
        cwd=resolved_cwd,
        dry_run=dry_run,
    )
