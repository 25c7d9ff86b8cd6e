"""Feature branch creation workflow.

The workflow is a fixed sequence of checks. Each step is a plain function that
returns either the value the next step needs or a terminal result:

    1. identifier present            -> WorkflowFailure("usage")
    2. inside a git repository       -> WorkflowFailure("environment")
    3. plan resolves                 -> WorkflowFailure("resolution")
    4. current branch determinable   -> WorkflowFailure("environment")
    5. current branch is a trunk     -> BranchOutcome("skipped")
    6. working tree is clean         -> WorkflowFailure("precondition")
    7. derive branch name            (cannot fail)
    8. branch does not exist yet     -> BranchOutcome("reused")
    9. create and switch             -> WorkflowFailure("operation")

The trunk check runs before the clean-tree check so off-trunk invocations never
require a clean tree, and the clean-tree check runs before any branch lookup so
no branch switch is attempted on a dirty tree.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal

from planbranch.core.context import PlanBranchContext
from planbranch.core.git.abc import Git, RepositoryState, branch_exists
from planbranch.core.naming import feature_branch_name
from planbranch.core.plans.abc import PlanResolver, ResolvedPlan

logger = logging.getLogger(__name__)

FailureKind = Literal["usage", "environment", "resolution", "precondition", "operation"]
BranchStatus = Literal["created", "reused", "skipped"]


@dataclass(frozen=True)
class WorkflowFailure:
    """A step that stopped the workflow. Always maps to exit code 1.

    Attributes:
        kind: Which class of problem occurred
        message: One-line description for the user
        hint: Optional follow-up telling the user how to fix it
    """

    kind: FailureKind
    message: str
    hint: str | None = None


@dataclass(frozen=True)
class BranchOutcome:
    """A successful end of the workflow. Always maps to exit code 0.

    Attributes:
        status: created, reused (branch already existed) or skipped (not on trunk)
        branch: The feature branch name; None when skipped
        plan: The plan the invocation was for
        repository: What was learned about the repository along the way
    """

    status: BranchStatus
    branch: str | None
    plan: ResolvedPlan
    repository: RepositoryState


# ============================================================================
# Steps
# ============================================================================


def require_identifier(identifier: str | None) -> str | WorkflowFailure:
    if identifier is None or not identifier.strip():
        return WorkflowFailure(
            kind="usage",
            message="Missing plan ID argument",
            hint="Usage: planbranch <plan-id-or-path>\nExample: planbranch 58",
        )
    return identifier.strip()


def require_repository(git: Git, cwd: Path) -> RepositoryState | WorkflowFailure:
    if not git.is_inside_work_tree(cwd):
        return WorkflowFailure(kind="environment", message="Not a git repository")
    return RepositoryState(is_repo=True, current_branch=None, has_uncommitted_changes=None)


def resolve_plan(
    resolver: PlanResolver, identifier: str, search_root: Path
) -> ResolvedPlan | WorkflowFailure:
    plan = resolver.resolve(identifier, search_root)
    if plan is None:
        return WorkflowFailure(
            kind="resolution", message=f'Plan "{identifier}" not found or invalid'
        )
    return plan


def require_current_branch(
    git: Git, cwd: Path, state: RepositoryState
) -> RepositoryState | WorkflowFailure:
    current = git.get_current_branch(cwd)
    if current is None:
        return WorkflowFailure(
            kind="environment",
            message="Could not determine current git branch",
            hint="Check out a branch (HEAD may be detached)",
        )
    return replace(state, current_branch=current)


def check_on_trunk(
    state: RepositoryState, plan: ResolvedPlan, trunk_branches: tuple[str, ...]
) -> BranchOutcome | None:
    """Return a skipped outcome when the current branch is not a trunk branch."""
    if state.current_branch in trunk_branches:
        return None
    return BranchOutcome(status="skipped", branch=None, plan=plan, repository=state)


def require_clean_working_tree(
    git: Git, cwd: Path, state: RepositoryState
) -> RepositoryState | WorkflowFailure:
    # A failed status query reads as clean; see Git.has_uncommitted_changes.
    if git.has_uncommitted_changes(cwd):
        return WorkflowFailure(
            kind="precondition",
            message="Uncommitted changes detected in working tree",
            hint="Please commit or stash your changes before creating a feature branch",
        )
    return replace(state, has_uncommitted_changes=False)


def check_branch_available(
    git: Git, cwd: Path, branch: str, plan: ResolvedPlan, state: RepositoryState
) -> BranchOutcome | None:
    """Return a reused outcome when the branch already exists."""
    if not branch_exists(git, cwd, branch):
        return None
    return BranchOutcome(status="reused", branch=branch, plan=plan, repository=state)


def create_branch(
    git: Git, cwd: Path, branch: str, plan: ResolvedPlan, state: RepositoryState
) -> BranchOutcome | WorkflowFailure:
    try:
        git.checkout_new_branch(cwd, branch)
    except RuntimeError as e:
        return WorkflowFailure(
            kind="operation", message=f'Failed to create branch "{branch}"', hint=str(e)
        )
    return BranchOutcome(status="created", branch=branch, plan=plan, repository=state)


# ============================================================================
# Orchestration
# ============================================================================


def run_create_branch_workflow(
    ctx: PlanBranchContext,
    identifier: str | None,
    *,
    search_root: Path | None = None,
) -> BranchOutcome | WorkflowFailure:
    """Run the full workflow for one plan identifier.

    Informational and success lines are written through ctx.feedback as the
    steps run. Failures are returned, not printed; the caller reports them.

    Args:
        ctx: Invocation context
        identifier: Plan id or path as typed by the user
        search_root: Where plan lookup starts (defaults to ctx.cwd)

    Returns:
        BranchOutcome on success, WorkflowFailure on the first failing step
    """
    root = search_root if search_root is not None else ctx.cwd

    plan_ref = require_identifier(identifier)
    if isinstance(plan_ref, WorkflowFailure):
        return plan_ref

    state = require_repository(ctx.git, ctx.cwd)
    if isinstance(state, WorkflowFailure):
        return state
    logger.debug("Inside git repository at %s", ctx.cwd)

    plan = resolve_plan(ctx.plan_resolver, plan_ref, root)
    if isinstance(plan, WorkflowFailure):
        return plan
    logger.debug("Resolved %r to plan %s at %s", plan_ref, plan.plan_id, plan.plan_dir)
    ctx.feedback.info(f"Found plan: {plan.plan_dir.name}")

    state = require_current_branch(ctx.git, ctx.cwd, state)
    if isinstance(state, WorkflowFailure):
        return state
    logger.debug("Current branch: %s", state.current_branch)

    skipped = check_on_trunk(state, plan, ctx.config.trunk_branches)
    if skipped is not None:
        trunk_names = "/".join(ctx.config.trunk_branches)
        ctx.feedback.warning(f"Not on {trunk_names} branch (current: {state.current_branch})")
        ctx.feedback.info("Proceeding without creating a new branch")
        return skipped

    state = require_clean_working_tree(ctx.git, ctx.cwd, state)
    if isinstance(state, WorkflowFailure):
        return state

    branch = feature_branch_name(plan.plan_id, plan.plan_dir, prefix=ctx.config.branch_prefix)
    logger.debug("Derived branch name: %s", branch)

    reused = check_branch_available(ctx.git, ctx.cwd, branch, plan, state)
    if reused is not None:
        ctx.feedback.warning(f'Branch "{branch}" already exists')
        ctx.feedback.info("Proceeding with existing branch")
        return reused

    created = create_branch(ctx.git, ctx.cwd, branch, plan, state)
    if isinstance(created, WorkflowFailure):
        return created

    if ctx.dry_run:
        ctx.feedback.info(f"Dry run: branch {branch} was not created")
    else:
        ctx.feedback.success(f"Created and switched to branch: {branch}")
    return created
