import logging
import os
from pathlib import Path

import click

from planbranch.cli.output import select_styler, user_output
from planbranch.core.context import PlanBranchContext, create_context
from planbranch.core.user_feedback import InteractiveFeedback, UserFeedback
from planbranch.core.workflow import (
    WorkflowFailure,
    require_identifier,
    run_create_branch_workflow,
)

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_logging() -> None:
    # Enable debug logging if PLANBRANCH_DEBUG environment variable is set
    if os.getenv("PLANBRANCH_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def _report_failure(feedback: UserFeedback, failure: WorkflowFailure) -> None:
    logger.debug("Workflow failed at %s step: %s", failure.kind, failure.message)
    feedback.error(failure.message)
    if failure.hint is not None:
        feedback.info(failure.hint)


@click.command("planbranch", context_settings=CONTEXT_SETTINGS)
@click.argument("plan_args", metavar="PLAN_ID_OR_PATH", nargs=-1)
@click.option(
    "--search-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to start the plan lookup from. Defaults to the current directory.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Run every check but print the branch creation instead of performing it.",
)
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.version_option(package_name="planbranch")
@click.pass_context
def cli(
    ctx: click.Context,
    plan_args: tuple[str, ...],
    search_root: Path | None,
    dry_run: bool,
    no_color: bool,
) -> None:
    """Create a git feature branch for a plan.

    PLAN_ID_OR_PATH is a numeric plan id (e.g. 58) or a path to a plan
    directory or plan file. The branch is named feature/<id>--<plan-name>.
    Only the first argument is used; any others are ignored.

    Exits 0 when the branch is created, already exists, or the current branch
    is not main/master. Exits 1 on any error.
    """
    _configure_logging()

    plan_ref = plan_args[0] if plan_args else None
    if len(plan_args) > 1:
        logger.debug("Ignoring extra arguments: %s", plan_args[1:])

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        # A missing argument is reported before config is read
        checked = require_identifier(plan_ref)
        if isinstance(checked, WorkflowFailure):
            _report_failure(InteractiveFeedback(select_styler(color=not no_color)), checked)
            raise SystemExit(1)
        try:
            ctx.obj = create_context(dry_run=dry_run, color=not no_color)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

    app_ctx: PlanBranchContext = ctx.obj
    result = run_create_branch_workflow(app_ctx, plan_ref, search_root=search_root)

    if isinstance(result, WorkflowFailure):
        _report_failure(app_ctx.feedback, result)
        raise SystemExit(1)

    logger.debug("Workflow finished: %s", result.status)


def main() -> None:
    """CLI entry point used by the `planbranch` console script."""
    try:
        cli()
    except Exception as e:
        logger.debug("Unhandled exception", exc_info=True)
        user_output(click.style("Error: ", fg="red") + f"Script execution failed: {e}")
        raise SystemExit(1) from e
