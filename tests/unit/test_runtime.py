"""Tests for ExtensionRuntime: reading the installed extensions directory."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import FakeInventory, FakeStat
from launchpad.bridge.runtime import ExtensionRuntime
from launchpad.core.artifacts import artifact_path
from launchpad.core.reconciler import SuiteReconciler
from launchpad.models.projects import ProjectStatus


def _install(ext_dir: Path, folder: str, manifest: dict | str) -> Path:
    target = ext_dir / folder
    target.mkdir(parents=True)
    body = manifest if isinstance(manifest, str) else json.dumps(manifest)
    (target / "package.json").write_text(body, encoding="utf-8")
    return target


class _RecordingRunner:
    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str]]] = []

    async def run(self, command, args, cwd=None):
        self.calls.append((command, args))
        return ""


class TestListInstalled:
    def test_reads_installed_extensions(self, tmp_path):
        _install(tmp_path, "nexgenmeta.alpha-1.0.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.0.0"})
        _install(tmp_path, "other.beta-2.1.0", {"name": "beta", "publisher": "other", "version": "2.1.0"})

        installed = ExtensionRuntime(tmp_path).list_installed()
        by_name = {e.name: e for e in installed}

        assert set(by_name) == {"alpha", "beta"}
        assert by_name["alpha"].publisher == "NexGenMeta"
        assert by_name["alpha"].version == "1.0.0"
        assert by_name["alpha"].manifest_modified_time is not None

    def test_skips_unreadable_entries(self, tmp_path):
        _install(tmp_path, "good-1.0.0", {"name": "good", "version": "1.0.0"})
        _install(tmp_path, "broken-1.0.0", "{oops")
        _install(tmp_path, "nameless-1.0.0", {"version": "1.0.0"})
        (tmp_path / "extensions.json").write_text("[]", encoding="utf-8")

        names = [e.name for e in ExtensionRuntime(tmp_path).list_installed()]
        assert names == ["good"]

    def test_missing_directory(self, tmp_path):
        assert ExtensionRuntime(tmp_path / "absent").list_installed() == []


class TestInstall:
    @pytest.mark.asyncio
    async def test_install_uses_code_cli(self, tmp_path):
        runner = _RecordingRunner()
        runtime = ExtensionRuntime(tmp_path, code_command="code-insiders", runner=runner)
        vsix = tmp_path / "alpha-1.0.0.vsix"
        await runtime.install(vsix)
        assert runner.calls == [
            ("code-insiders", ["--install-extension", str(vsix), "--force"])
        ]


class TestActiveVersions:
    def test_obsolete_folders_are_skipped(self, tmp_path):
        _install(tmp_path, "nexgenmeta.alpha-1.3.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.3.0"})
        _install(tmp_path, "nexgenmeta.alpha-1.4.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.4.0"})
        (tmp_path / ".obsolete").write_text(json.dumps({"nexgenmeta.alpha-1.4.0": True}), encoding="utf-8")

        [alpha] = ExtensionRuntime(tmp_path).list_installed()
        assert alpha.version == "1.3.0"

    def test_highest_leftover_version_wins(self, tmp_path):
        _install(tmp_path, "nexgenmeta.alpha-1.10.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.10.0"})
        _install(tmp_path, "nexgenmeta.alpha-1.2.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.2.0"})
        _install(tmp_path, "nexgenmeta.alpha-1.3.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.3.0"})

        [alpha] = ExtensionRuntime(tmp_path).list_installed()
        assert alpha.version == "1.10.0"

    def test_unreadable_obsolete_file_is_ignored(self, tmp_path):
        _install(tmp_path, "nexgenmeta.alpha-1.0.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.0.0"})
        (tmp_path / ".obsolete").write_text("{oops", encoding="utf-8")

        assert [e.version for e in ExtensionRuntime(tmp_path).list_installed()] == ["1.0.0"]

    def test_scan_uses_active_version(self, tmp_path, make_descriptor):
        _install(tmp_path, "nexgenmeta.alpha-1.2.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.2.0"})
        _install(tmp_path, "nexgenmeta.alpha-1.3.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.3.0"})
        alpha = make_descriptor("alpha", version="1.3.0")
        stat = FakeStat()
        stat.set(artifact_path(alpha), 10.0)

        reconciler = SuiteReconciler(FakeInventory([alpha]), stat, ExtensionRuntime(tmp_path))
        [entry] = reconciler.scan().entries
        assert entry.installed_version == "1.3.0"
        assert entry.status == ProjectStatus.INSTALLED

    def test_unlistable_directory_means_none(self, tmp_path, monkeypatch):
        _install(tmp_path, "nexgenmeta.alpha-1.0.0", {"name": "alpha", "publisher": "NexGenMeta", "version": "1.0.0"})

        def denied(self):
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "iterdir", denied)
        assert ExtensionRuntime(tmp_path).list_installed() == []
