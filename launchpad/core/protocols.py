"""Collaborator protocols the engine depends on.

Any object with the right methods satisfies these; the concrete
implementations live in ``launchpad.bridge`` and tests use in-memory fakes.

Async methods are awaited one at a time by the orchestrators; the external
toolchains they drive are not safe to run concurrently against a shared
working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from launchpad.models.projects import FileStat, InstalledExtension, ProjectDescriptor


@runtime_checkable
class ProjectInventory(Protocol):
    """Enumerates publishable projects."""

    def discover_projects(self) -> list[ProjectDescriptor]:
        ...


@runtime_checkable
class FileStatter(Protocol):
    """Reports existence and mtime of a path.  Must not raise for missing paths."""

    def __call__(self, path: Path) -> FileStat:
        ...


@runtime_checkable
class BuildRunner(Protocol):
    """Runs the build and package steps for one project.

    Both methods raise on failure; the message of the exception is what
    ends up in the build report.
    """

    async def build(self, project_path: Path) -> str:
        ...

    async def package(self, project_path: Path) -> str:
        ...


@runtime_checkable
class RuntimeQuery(Protocol):
    """Lists entities installed in the target runtime."""

    def list_installed(self) -> list[InstalledExtension]:
        ...


@runtime_checkable
class Installer(Protocol):
    """Installs one artifact into the target runtime; raises on failure."""

    async def install(self, artifact_path: Path) -> str:
        ...


@runtime_checkable
class Publisher(Protocol):
    """Publishes projects to the marketplace."""

    async def publish(self, project_path: Path, bump: str) -> str:
        ...

    async def list_publishers(self) -> list[str]:
        ...
