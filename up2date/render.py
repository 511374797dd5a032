"""Report rendering in the supported output formats."""

import json
from collections.abc import Callable

import tomli_w
import yaml

from .errors import RenderError
from .models import DependencyReport, OutputFormat


def format_markdown_output(report: DependencyReport) -> str:
    """Format the human-readable Markdown report."""
    summary = report.summary
    lines = [
        "# Dependabot Coverage Report",
        "",
        "## Summary",
        "",
        f"- **Total ecosystems found**: {summary.total_ecosystems}",
        f"- **Configured in dependabot**: {summary.configured_ecosystems}",
        f"- **Missing from dependabot**: {summary.missing_ecosystems}",
        "",
        "## Project Dependencies",
        "",
    ]
    for dep in report.project_dependencies:
        lines.append(f"- **{dep.ecosystem}** in `{dep.directory}`")
    lines.append("")

    # Empty sections are left out
    if report.missing_from_dependabot:
        lines.extend(["## Missing from Dependabot", ""])
        lines.extend(f"- {ecosystem}" for ecosystem in report.missing_from_dependabot)
        lines.append("")

    if report.dependabot_ecosystems:
        lines.extend(["## Configured in Dependabot", ""])
        lines.extend(f"- {ecosystem}" for ecosystem in report.dependabot_ecosystems)

    return "\n".join(lines).rstrip("\n")


def format_json_output(report: DependencyReport) -> str:
    """Format JSON output."""
    return json.dumps(report.to_dict(), indent=2)


def format_yaml_output(report: DependencyReport) -> str:
    """Format YAML output."""
    return yaml.safe_dump(report.to_dict(), default_flow_style=False, sort_keys=False)


def format_toml_output(report: DependencyReport) -> str:
    """Format TOML output."""
    return tomli_w.dumps(report.to_dict())


FORMATTERS: dict[OutputFormat, Callable[[DependencyReport], str]] = {
    OutputFormat.MARKDOWN: format_markdown_output,
    OutputFormat.JSON: format_json_output,
    OutputFormat.YAML: format_yaml_output,
    OutputFormat.TOML: format_toml_output,
}


def render(report: DependencyReport, output_format: OutputFormat = OutputFormat.MARKDOWN) -> str:
    """Render the report in the given format.

    Raises:
        RenderError: If the report cannot be encoded
    """
    formatter = FORMATTERS[output_format]
    try:
        return formatter(report)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise RenderError(f"Failed to render {output_format.value} report: {e}") from e


def exit_code(report: DependencyReport) -> int:
    """Process exit status: 1 if any ecosystem is missing, 0 otherwise."""
    return 1 if report.has_missing else 0
