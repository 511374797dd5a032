"""Project tree scanning for ecosystem marker files."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .detect import GITHUB_ACTIONS, has_workflows, identify
from .models import ProjectDependency

logger = logging.getLogger(__name__)


def _skip_unreadable(error: OSError) -> None:
    logger.debug("Skipping unreadable entry %s: %s", error.filename, error.strerror)


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every regular file under root, skipping symlinks and unreadable entries."""
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_skip_unreadable):
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.is_file() and not path.is_symlink():
                yield path


def relative_directory(path: Path, root: Path) -> str:
    """Parent directory of path relative to root, "." for the root itself."""
    relative = path.parent.relative_to(root).as_posix()
    # Non-UTF-8 names arrive as surrogates; swap the bad bytes for U+FFFD
    relative = os.fsencode(relative).decode("utf-8", "replace")
    return relative if relative not in ("", ".") else "."


def find_project_dependencies(root: Path) -> list[ProjectDependency]:
    """Find every (ecosystem, directory) pair present in the project.

    Args:
        root: Project root directory

    Returns:
        Unique project dependencies; a github-actions entry comes first when
        workflow files exist, the rest follow in discovery order
    """
    dependencies: list[ProjectDependency] = []

    if has_workflows(root):
        logger.debug("Found GitHub Actions workflows")
        dependencies.append(ProjectDependency(ecosystem=GITHUB_ACTIONS, directory="."))

    seen: set[ProjectDependency] = set()
    for path in walk_files(root):
        ecosystem = identify(path.name)
        if ecosystem is None:
            continue

        dependency = ProjectDependency(
            ecosystem=ecosystem,
            directory=relative_directory(path, root),
        )
        if dependency in seen:
            continue

        logger.debug("Found %s in %s (%s)", ecosystem, dependency.directory, path.name)
        seen.add(dependency)
        dependencies.append(dependency)

    return dependencies
