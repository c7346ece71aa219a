"""Shared test fixtures for Launchpad."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from launchpad.models.projects import FileStat, InstalledExtension, ProjectDescriptor


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------


class FakeStat:
    """Stat collaborator backed by a dict of path -> mtime."""

    def __init__(self, mtimes: dict[Path, float] | None = None) -> None:
        self.mtimes: dict[Path, float] = dict(mtimes or {})

    def set(self, path: Path, mtime: float) -> None:
        self.mtimes[Path(path)] = mtime

    def __call__(self, path: Path) -> FileStat:
        mtime = self.mtimes.get(Path(path))
        if mtime is None:
            return FileStat(exists=False)
        return FileStat(exists=True, modified_time=mtime)


class FakeInventory:
    def __init__(self, descriptors: list[ProjectDescriptor] | None = None) -> None:
        self.descriptors = list(descriptors or [])
        self.calls = 0

    def discover_projects(self) -> list[ProjectDescriptor]:
        self.calls += 1
        return list(self.descriptors)


class FakeRunner:
    """Build runner that records calls and fails for chosen project paths."""

    def __init__(self, fail_build: set[Path] | None = None, fail_package: set[Path] | None = None) -> None:
        self.fail_build = {Path(p) for p in (fail_build or set())}
        self.fail_package = {Path(p) for p in (fail_package or set())}
        self.calls: list[tuple[str, Path]] = []
        self.published: list[tuple[Path, str]] = []

    async def build(self, project_path: Path) -> str:
        self.calls.append(("build", Path(project_path)))
        if Path(project_path) in self.fail_build:
            raise RuntimeError(f"Compile failed: {Path(project_path).name}")
        return "compiled"

    async def package(self, project_path: Path) -> str:
        self.calls.append(("package", Path(project_path)))
        if Path(project_path) in self.fail_package:
            raise RuntimeError(f"Package failed: {Path(project_path).name}")
        return "packaged"

    async def publish(self, project_path: Path, bump: str) -> str:
        self.published.append((Path(project_path), bump))
        return "published"

    async def list_publishers(self) -> list[str]:
        return ["NexGenMeta"]

    @property
    def build_calls(self) -> list[Path]:
        return [p for kind, p in self.calls if kind == "build"]


class FakeInstaller:
    def __init__(self, fail: set[Path] | None = None) -> None:
        self.fail = {Path(p) for p in (fail or set())}
        self.attempts: list[Path] = []

    async def install(self, artifact_path: Path) -> str:
        self.attempts.append(Path(artifact_path))
        if Path(artifact_path) in self.fail:
            raise RuntimeError(f"corrupt archive: {Path(artifact_path).name}")
        return "installed"


class FakeRuntime:
    def __init__(self, installed: list[InstalledExtension] | None = None) -> None:
        self.installed = list(installed or [])

    def list_installed(self) -> list[InstalledExtension]:
        return list(self.installed)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_stat() -> FakeStat:
    return FakeStat()


@pytest.fixture
def make_descriptor() -> Callable[..., ProjectDescriptor]:
    """Factory fixture: build a ProjectDescriptor with sensible defaults."""

    def _factory(name: str = "alpha", version: str = "1.2.0", **overrides: Any) -> ProjectDescriptor:
        defaults: dict[str, Any] = {
            "root_path": Path("/suite") / name,
            "name": name,
            "display_name": name.title(),
            "version": version,
            "publisher": "NexGenMeta",
            "has_build_script": True,
        }
        defaults.update(overrides)
        return ProjectDescriptor(**defaults)

    return _factory


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: write a project with a package.json under tmp_path."""

    def _factory(
        dirname: str,
        manifest: dict[str, Any] | None = None,
        *,
        src_mtime: float | None = None,
        parent: Path | None = None,
    ) -> Path:
        project = (parent or tmp_path) / dirname
        project.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {
            "name": dirname,
            "version": "1.0.0",
            "publisher": "NexGenMeta",
            "scripts": {"compile": "tsc -p ./"},
        }
        if manifest is not None:
            data = manifest
        (project / "package.json").write_text(json.dumps(data), encoding="utf-8")
        if src_mtime is not None:
            src = project / "src"
            src.mkdir(exist_ok=True)
            os.utime(src, (src_mtime, src_mtime))
        return project

    return _factory


def touch(path: Path, mtime: float) -> Path:
    """Create *path* (if needed) and set its mtime."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    os.utime(path, (mtime, mtime))
    return path
