"""Exceptions raised by up2date."""

from pathlib import Path


class Up2DateError(Exception):
    """Base class for up2date errors."""


class DependabotConfigError(Up2DateError):
    """A Dependabot configuration file could not be read or validated."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid Dependabot config {path}: {reason}")


class RenderError(Up2DateError):
    """The report could not be encoded in the requested format."""
