from planbranch.core.plans.abc import PlanResolver, ResolvedPlan
from planbranch.core.plans.filesystem import FilesystemPlanResolver

__all__ = ["PlanResolver", "ResolvedPlan", "FilesystemPlanResolver"]
