"""User-facing status output for the branch workflow."""

from abc import ABC, abstractmethod

from planbranch.cli.output import Styler, user_output


class UserFeedback(ABC):
    """Provides the four kinds of status line the workflow emits.

    Usage:
        ctx.feedback.info("Found plan: 58--update-docs")
        ctx.feedback.warning("Branch already exists")
        ctx.feedback.success("Created and switched to branch: feature/58--update-docs")

        if failed:
            ctx.feedback.error("Not a git repository")
            raise SystemExit(1)
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message. The "Error: " prefix is added here."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr, formatted by the injected Styler."""

    def __init__(self, styler: Styler) -> None:
        self._styler = styler

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(self._styler.style(f"✓ {message}", fg="green"))

    def warning(self, message: str) -> None:
        user_output(self._styler.style(f"⚠ {message}", fg="yellow"))

    def error(self, message: str) -> None:
        user_output(self._styler.style("Error: ", fg="red") + message)
