"""Manifest audit findings."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class AuditFinding(BaseModel):
    """A single problem found in a project manifest."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str


class ProjectAudit(BaseModel):
    """All findings for one project."""

    model_config = ConfigDict(frozen=True)

    project: str
    version: str = ""
    findings: list[AuditFinding] = []

    @property
    def passed(self) -> bool:
        return not any(f.severity == Severity.ERROR for f in self.findings)
