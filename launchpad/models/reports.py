"""Report models handed to the presentation layer."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from launchpad.models.projects import ArtifactRecord, ProjectDescriptor, ProjectStatus


class SuiteEntry(BaseModel):
    """One row of the suite status report."""

    model_config = ConfigDict(frozen=True)

    descriptor: ProjectDescriptor
    artifact: ArtifactRecord
    status: ProjectStatus
    installed_version: str | None = None

    @property
    def is_installable(self) -> bool:
        """Whether an artifact exists and offers something to install."""
        return self.artifact.exists and self.status in (
            ProjectStatus.NEW,
            ProjectStatus.UPDATE,
        )


class SuiteReport(BaseModel):
    """Result of one reconciliation pass."""

    model_config = ConfigDict(frozen=True)

    entries: list[SuiteEntry] = []
    scanned_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def by_status(self, status: ProjectStatus) -> list[SuiteEntry]:
        return [e for e in self.entries if e.status == status]

    def pending_artifacts(self) -> list[Path]:
        """Artifact paths that can be installed, in scan order."""
        return [e.artifact.path for e in self.entries if e.is_installable]


class BuildOutcomeKind(str, Enum):
    SKIPPED = "skipped"  # already up to date
    BUILT = "built"
    FAILED = "failed"


class BuildOutcome(BaseModel):
    """What happened to one project during a build run."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    kind: BuildOutcomeKind
    message: str = ""


class BuildReport(BaseModel):
    """Partial-success summary of a build-all run."""

    model_config = ConfigDict(frozen=True)

    succeeded_count: int = 0
    failed_project_names: list[str] = []
    outcomes: list[BuildOutcome] = []
    nothing_to_build: bool = False

    @property
    def built_count(self) -> int:
        return sum(1 for o in self.outcomes if o.kind == BuildOutcomeKind.BUILT)

    @property
    def skipped_count(self) -> int:
        return sum(1 for o in self.outcomes if o.kind == BuildOutcomeKind.SKIPPED)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_project_names)


class InstallFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    reason: str


class InstallReport(BaseModel):
    """Partial-success summary of an install-all run."""

    model_config = ConfigDict(frozen=True)

    installed_count: int = 0
    failures: list[InstallFailure] = []
    attempted: list[Path] = []

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)
