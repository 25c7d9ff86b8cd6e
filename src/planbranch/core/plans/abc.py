"""Plan resolution interface.

The branch workflow only needs to turn a user-supplied identifier into a plan
directory and a canonical id. How plans are stored is up to the implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResolvedPlan:
    """A plan located on disk.

    Attributes:
        plan_dir: Directory holding the plan, typically named `<id>--<name>`
        plan_id: Canonical numeric id as a string, without leading zeros
        plan_file: The plan markdown file inside plan_dir, if there is one
    """

    plan_dir: Path
    plan_id: str
    plan_file: Path | None = None


class PlanResolver(ABC):
    """Abstract interface for resolving plan identifiers."""

    @abstractmethod
    def resolve(self, identifier: str, search_root: Path) -> ResolvedPlan | None:
        """Resolve a numeric plan id or a path to a plan.

        Args:
            identifier: Numeric id (e.g. "58") or path to a plan directory or file
            search_root: Directory the search starts from

        Returns:
            ResolvedPlan, or None if the plan does not exist or is invalid
        """
        ...
