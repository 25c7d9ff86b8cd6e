"""Fake UserFeedback that records messages instead of printing them."""

from planbranch.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures every status line as (level, message) for assertions."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        return list(self._messages)

    def lines(self, level: str) -> list[str]:
        """Messages emitted at one level, in order."""
        return [message for lvl, message in self._messages if lvl == level]

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))
