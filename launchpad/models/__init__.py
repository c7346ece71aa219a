"""Launchpad data models: all Pydantic v2, all frozen (immutable)."""

from launchpad.models.audit import AuditFinding, ProjectAudit, Severity
from launchpad.models.projects import (
    ArtifactRecord,
    BuildTask,
    FileStat,
    InstalledExtension,
    ProjectDescriptor,
    ProjectStatus,
    SourceState,
)
from launchpad.models.reports import (
    BuildOutcome,
    BuildOutcomeKind,
    BuildReport,
    InstallFailure,
    InstallReport,
    SuiteEntry,
    SuiteReport,
)

__all__ = [
    # projects
    "ProjectDescriptor",
    "FileStat",
    "ArtifactRecord",
    "SourceState",
    "InstalledExtension",
    "ProjectStatus",
    "BuildTask",
    # reports
    "SuiteEntry",
    "SuiteReport",
    "BuildOutcomeKind",
    "BuildOutcome",
    "BuildReport",
    "InstallFailure",
    "InstallReport",
    # audit
    "Severity",
    "AuditFinding",
    "ProjectAudit",
]
