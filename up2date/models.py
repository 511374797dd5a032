"""Core data models for up2date."""

from dataclasses import asdict, dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


@dataclass(frozen=True)
class ProjectDependency:
    """An ecosystem found in one directory of the project."""

    ecosystem: str
    directory: str  # relative to the project root, "." for the root itself


@dataclass(frozen=True)
class ReportSummary:
    """Counts over distinct ecosystem identifiers."""

    total_ecosystems: int
    configured_ecosystems: int
    missing_ecosystems: int


@dataclass(frozen=True)
class DependencyReport:
    """Coverage of project ecosystems by the Dependabot configuration."""

    project_dependencies: list[ProjectDependency]
    dependabot_ecosystems: list[str]
    missing_from_dependabot: list[str]
    summary: ReportSummary

    @property
    def has_missing(self) -> bool:
        return bool(self.missing_from_dependabot)

    def to_dict(self) -> dict:
        """Plain nested mapping shared by the structured encoders."""
        return asdict(self)


class OutputFormat(str, Enum):
    """Report output formats."""

    MARKDOWN = "markdown"
    JSON = "json"
    YAML = "yaml"
    TOML = "toml"


class ScheduleConfig(BaseModel):
    interval: StrictStr


class UpdateConfig(BaseModel):
    """One entry of the ``updates`` list in dependabot.yml."""

    model_config = ConfigDict(populate_by_name=True)

    package_ecosystem: StrictStr = Field(alias="package-ecosystem")
    directory: StrictStr
    schedule: ScheduleConfig


class DependabotConfig(BaseModel):
    """A parsed dependabot.yml document."""

    version: StrictInt = Field(ge=0, le=255)
    updates: list[UpdateConfig]
