"""Tests for SuiteReconciler: fresh scans, installed matching, best effort."""

from __future__ import annotations

from conftest import FakeInventory, FakeRuntime, FakeStat
from launchpad.core.artifacts import artifact_path
from launchpad.core.reconciler import SuiteReconciler, find_installed
from launchpad.models.projects import InstalledExtension, ProjectStatus


def _ext(name: str, version: str, publisher: str = "NexGenMeta", mtime: float = 1000.0):
    return InstalledExtension(name=name, publisher=publisher, version=version, manifest_modified_time=mtime)


class TestFindInstalled:
    def test_matches_name_and_publisher(self, make_descriptor):
        descriptor = make_descriptor("alpha")
        installed = [_ext("alpha", "1.0.0", publisher="someone-else"), _ext("alpha", "1.1.0")]
        assert find_installed(descriptor, installed).version == "1.1.0"

    def test_no_match(self, make_descriptor):
        assert find_installed(make_descriptor("alpha"), [_ext("beta", "1.0.0")]) is None

    def test_highest_of_several_versions(self, make_descriptor):
        installed = [_ext("alpha", "1.2.0"), _ext("alpha", "1.10.0"), _ext("alpha", "1.3.0")]
        assert find_installed(make_descriptor("alpha"), installed).version == "1.10.0"


class TestScan:
    def test_classifies_every_project(self, make_descriptor):
        new = make_descriptor("fresh", version="1.0.0")
        update = make_descriptor("bumped", version="1.2.0")
        current = make_descriptor("current", version="1.0.0")
        stale = make_descriptor("unbuilt", version="1.0.0")

        stat = FakeStat()
        stat.set(artifact_path(new), 500.0)
        stat.set(artifact_path(update), 500.0)
        stat.set(artifact_path(current), 500.0)
        stat.set(current.root_path / "src", 400.0)

        runtime = FakeRuntime([
            _ext("bumped", "1.1.0"),
            _ext("current", "1.0.0", mtime=1000.0),
        ])
        reconciler = SuiteReconciler(FakeInventory([new, update, current, stale]), stat, runtime)
        report = reconciler.scan()

        statuses = {e.descriptor.name: e.status for e in report.entries}
        assert statuses == {
            "fresh": ProjectStatus.NEW,
            "bumped": ProjectStatus.UPDATE,
            "current": ProjectStatus.INSTALLED,
            "unbuilt": ProjectStatus.STALE,
        }
        installed_versions = {e.descriptor.name: e.installed_version for e in report.entries}
        assert installed_versions["bumped"] == "1.1.0"
        assert installed_versions["fresh"] is None

    def test_pending_artifacts_in_scan_order(self, make_descriptor):
        a = make_descriptor("a")
        b = make_descriptor("b")
        stat = FakeStat({artifact_path(a): 10.0, artifact_path(b): 10.0})
        report = SuiteReconciler(FakeInventory([b, a]), stat, FakeRuntime()).scan()
        assert report.pending_artifacts() == [artifact_path(b), artifact_path(a)]

    def test_every_scan_is_fresh(self, make_descriptor):
        alpha = make_descriptor("alpha")
        stat = FakeStat()
        inventory = FakeInventory([alpha])
        reconciler = SuiteReconciler(inventory, stat, FakeRuntime())

        assert reconciler.scan().entries[0].status == ProjectStatus.STALE
        stat.set(artifact_path(alpha), 10.0)
        assert reconciler.scan().entries[0].status == ProjectStatus.NEW
        assert inventory.calls == 2

    def test_failing_project_is_omitted(self, make_descriptor):
        good = make_descriptor("good")
        bad = make_descriptor("bad")

        def flaky_stat(path):
            if "bad" in str(path):
                raise PermissionError("denied")
            return FakeStat()(path)

        report = SuiteReconciler(FakeInventory([bad, good]), flaky_stat, FakeRuntime()).scan()
        assert [e.descriptor.name for e in report.entries] == ["good"]

    def test_failing_runtime_query_treated_as_nothing_installed(self, make_descriptor):
        alpha = make_descriptor("alpha")
        stat = FakeStat()
        stat.set(artifact_path(alpha), 10.0)

        class BrokenRuntime:
            def list_installed(self):
                raise PermissionError("denied")

        [entry] = SuiteReconciler(FakeInventory([alpha]), stat, BrokenRuntime()).scan().entries
        assert entry.status == ProjectStatus.NEW
        assert entry.installed_version is None

    def test_empty_inventory(self):
        report = SuiteReconciler(FakeInventory(), FakeStat(), FakeRuntime()).scan()
        assert report.entries == []
