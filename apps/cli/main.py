"""CLI application for up2date."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from up2date.compare import analyze_dependencies
from up2date.errors import Up2DateError
from up2date.models import OutputFormat
from up2date.render import exit_code, render

err_console = Console(stderr=True)

# Exit status for usage and runtime errors; 1 is reserved for missing coverage
ERROR_EXIT_CODE = 2


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr so they never mix with the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def select_format(json_output: bool, yaml_output: bool, toml_output: bool) -> OutputFormat:
    """Pick the output format from the mutually exclusive format flags."""
    selected = [
        output_format
        for output_format, flag in (
            (OutputFormat.JSON, json_output),
            (OutputFormat.YAML, yaml_output),
            (OutputFormat.TOML, toml_output),
        )
        if flag
    ]
    if len(selected) > 1:
        raise typer.BadParameter(
            "only one of --json, --yaml and --toml may be given",
            param_hint="'--json' / '--yaml' / '--toml'",
        )
    return selected[0] if selected else OutputFormat.MARKDOWN


def resolve_root(path: Path | None) -> Path:
    """Project root to scan, defaulting to the current working directory."""
    if path is not None:
        return path
    try:
        return Path.cwd()
    except OSError as e:
        err_console.print(f"Error: cannot determine current directory: {e}", style="red")
        raise typer.Exit(ERROR_EXIT_CODE)


app = typer.Typer(
    name="up2date",
    help=(
        "up2date - Check if all dependencies in the current repository have been "
        "configured for automatic updates via dependabot"
    ),
    add_completion=False,
)


@app.command()
def check(
    path: Path | None = typer.Argument(
        None,
        help="Project directory to scan (defaults to the current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    yaml_output: bool = typer.Option(False, "--yaml", help="Output in YAML format"),
    toml_output: bool = typer.Option(False, "--toml", help="Output in TOML format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scan details to stderr"),
) -> None:
    """Report ecosystems that are missing from the Dependabot configuration."""
    output_format = select_format(json_output, yaml_output, toml_output)
    configure_logging(verbose)

    root = resolve_root(path)
    report = analyze_dependencies(root)

    try:
        output = render(report, output_format)
    except Up2DateError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(ERROR_EXIT_CODE)

    typer.echo(output)
    raise typer.Exit(exit_code(report))


if __name__ == "__main__":
    app()
