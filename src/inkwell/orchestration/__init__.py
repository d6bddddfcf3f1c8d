"""Build orchestration."""

from inkwell.orchestration.build import BuildPlan, BuildReport, plan_build, render_routes, run_build
from inkwell.orchestration.exceptions import BuildFailedError

__all__ = ["BuildFailedError", "BuildPlan", "BuildReport", "plan_build", "render_routes", "run_build"]
