"""Project, artifact and runtime value objects.

Every object here is built fresh on each reconciliation pass and never
mutated afterwards.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ProjectDescriptor(BaseModel):
    """One publishable project discovered in the workspace.

    ``root_path`` is the identity key.  ``version`` is the version the next
    artifact built from this project will carry.
    """

    model_config = ConfigDict(frozen=True)

    root_path: Path
    name: str
    display_name: str
    version: str
    publisher: str = ""
    has_build_script: bool = False


class FileStat(BaseModel):
    """Existence and last-write time of a path (epoch seconds)."""

    model_config = ConfigDict(frozen=True)

    exists: bool
    modified_time: float | None = None


class ArtifactRecord(BaseModel):
    """The packaged output for a descriptor's current version."""

    model_config = ConfigDict(frozen=True)

    path: Path
    exists: bool = False
    modified_time: float | None = None  # None when exists is False


class SourceState(BaseModel):
    """Last-modified time of a project's source subtree.

    ``modified_time`` is None when the subtree could not be inspected.
    """

    model_config = ConfigDict(frozen=True)

    modified_time: float | None = None


class InstalledExtension(BaseModel):
    """An entity currently installed in the target runtime."""

    model_config = ConfigDict(frozen=True)

    name: str
    publisher: str = ""
    version: str
    manifest_modified_time: float | None = None


class ProjectStatus(str, Enum):
    """Lifecycle state of a project relative to the runtime."""

    NEW = "new"
    UPDATE = "update"
    INSTALLED = "installed"
    STALE = "stale"


class BuildTask(BaseModel):
    """A single entry of a build plan."""

    model_config = ConfigDict(frozen=True)

    descriptor: ProjectDescriptor
    needs_build: bool
