"""Dependabot configuration lookup."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import DependabotConfigError
from .models import DependabotConfig

logger = logging.getLogger(__name__)

# Tried in order; the first one that loads wins
DEPENDABOT_PATHS = (
    Path(".github") / "dependabot.yml",
    Path(".github") / "dependabot.yaml",
)


def load_dependabot_config(path: Path) -> DependabotConfig:
    """Read and validate a dependabot.yml file.

    Raises:
        DependabotConfigError: If the file cannot be read, is not valid YAML,
            or does not have the expected shape
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DependabotConfigError(path, str(e)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DependabotConfigError(path, f"YAML error: {e}") from e

    try:
        return DependabotConfig.model_validate(data)
    except ValidationError as e:
        raise DependabotConfigError(
            path, f"{e.error_count()} validation error(s)"
        ) from e


def find_dependabot_config(root: Path) -> tuple[Path, DependabotConfig] | None:
    """Return the first candidate config under root that loads, if any."""
    for candidate in DEPENDABOT_PATHS:
        path = root / candidate
        if not path.exists():
            continue

        try:
            config = load_dependabot_config(path)
        except DependabotConfigError as e:
            logger.warning("Ignoring %s", e)
            continue

        logger.debug("Using Dependabot config %s", path)
        return path, config

    return None


def find_dependabot_ecosystems(root: Path) -> list[str]:
    """Ecosystems declared in the project's Dependabot config, in file order."""
    found = find_dependabot_config(root)
    if found is None:
        return []

    _path, config = found
    return [update.package_ecosystem for update in config.updates]
