"""Comparison of project ecosystems against Dependabot coverage."""

from pathlib import Path

from .dependabot import find_dependabot_ecosystems
from .models import DependencyReport, ProjectDependency, ReportSummary
from .scan import find_project_dependencies


def build_report(
    project_dependencies: list[ProjectDependency],
    dependabot_ecosystems: list[str],
) -> DependencyReport:
    """Build the coverage report.

    Counts are taken over distinct ecosystems, so several directories with
    the same ecosystem count once. ``configured_ecosystems`` is derived as
    total minus missing.

    Args:
        project_dependencies: Scanner output
        dependabot_ecosystems: Ecosystems declared in the Dependabot config

    Returns:
        The dependency report
    """
    project_ecosystems = {dep.ecosystem for dep in project_dependencies}
    configured = set(dependabot_ecosystems)

    missing_from_dependabot = list(project_ecosystems - configured)

    total_ecosystems = len(project_ecosystems)
    missing_ecosystems = len(missing_from_dependabot)

    return DependencyReport(
        project_dependencies=list(project_dependencies),
        dependabot_ecosystems=list(dependabot_ecosystems),
        missing_from_dependabot=missing_from_dependabot,
        summary=ReportSummary(
            total_ecosystems=total_ecosystems,
            configured_ecosystems=total_ecosystems - missing_ecosystems,
            missing_ecosystems=missing_ecosystems,
        ),
    )


def analyze_dependencies(root: Path) -> DependencyReport:
    """Scan root and compare it against its Dependabot config."""
    return build_report(
        find_project_dependencies(root),
        find_dependabot_ecosystems(root),
    )
