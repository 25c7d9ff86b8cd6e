"""Fake plan resolver for testing."""

from pathlib import Path

from planbranch.core.plans.abc import PlanResolver, ResolvedPlan


class FakePlanResolver(PlanResolver):
    """Resolves identifiers from a fixed mapping.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, plans: dict[str, ResolvedPlan] | None = None) -> None:
        self._plans = plans or {}
        self._resolve_calls: list[tuple[str, Path]] = []

    @property
    def resolve_calls(self) -> list[tuple[str, Path]]:
        """Read-only access to (identifier, search_root) pairs passed to resolve()."""
        return list(self._resolve_calls)

    def resolve(self, identifier: str, search_root: Path) -> ResolvedPlan | None:
        self._resolve_calls.append((identifier, search_root))
        return self._plans.get(identifier)
