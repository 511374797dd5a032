"""Ecosystem detection from marker filenames."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

GITHUB_ACTIONS = "github-actions"
WORKFLOWS_DIR = Path(".github") / "workflows"
WORKFLOW_SUFFIXES = (".yml", ".yaml")

# Marker filename -> Dependabot package-ecosystem identifier
ECOSYSTEM_MARKERS: dict[str, str] = {
    "Cargo.toml": "cargo",
    "package.json": "npm",
    "requirements.txt": "pip",
    "pyproject.toml": "pip",
    "setup.py": "pip",
    "Pipfile": "pip",
    "go.mod": "gomod",
    ".gitmodules": "gitsubmodule",
    "Dockerfile": "docker",
    "Containerfile": "docker",
    "action.yaml": "github-action",
    "action.yml": "github-action",
}


def identify(filename: str) -> str | None:
    """Detect ecosystem from a bare filename.

    Args:
        filename: The file name, without any directory part

    Returns:
        Ecosystem identifier, or None if the name is not a known marker
    """
    return ECOSYSTEM_MARKERS.get(filename)


def has_workflows(root: Path) -> bool:
    """Check whether the project has GitHub Actions workflow files.

    Only direct children of ``.github/workflows`` are considered.
    """
    workflows_dir = root / WORKFLOWS_DIR
    if not workflows_dir.is_dir():
        return False

    try:
        for entry in workflows_dir.iterdir():
            if entry.name.endswith(WORKFLOW_SUFFIXES):
                return True
    except OSError as e:
        logger.debug("Skipping unreadable workflows directory %s: %s", workflows_dir, e)

    return False
