"""Suite reconciliation: recompute every project's status from scratch.

Each call to ``scan()`` queries the inventory, the filesystem and the
runtime afresh and returns a new ``SuiteReport``.  Nothing is cached
between scans.
"""

from __future__ import annotations

import logging

from launchpad.core.artifacts import (
    DEFAULT_ARTIFACT_EXTENSION,
    DEFAULT_SOURCE_DIR,
    load_artifact,
    load_source_state,
)
from launchpad.core.classifier import MANIFEST_GRACE_SECONDS, classify
from launchpad.core.protocols import FileStatter, ProjectInventory, RuntimeQuery
from launchpad.core.versioning import compare_versions
from launchpad.models.projects import InstalledExtension, ProjectDescriptor
from launchpad.models.reports import SuiteEntry, SuiteReport

logger = logging.getLogger(__name__)


def find_installed(
    descriptor: ProjectDescriptor, installed: list[InstalledExtension]
) -> InstalledExtension | None:
    """Return the installed entity with the same name and publisher, if any.

    When the runtime reports several versions of it, the highest is the
    active one.
    """
    best: InstalledExtension | None = None
    for ext in installed:
        if ext.name != descriptor.name or ext.publisher != descriptor.publisher:
            continue
        if best is None or compare_versions(ext.version, best.version) > 0:
            best = ext
    return best


class SuiteReconciler:
    """Produces the per-project status report for the whole suite."""

    def __init__(
        self,
        inventory: ProjectInventory,
        stat: FileStatter,
        runtime: RuntimeQuery,
        *,
        source_dir: str = DEFAULT_SOURCE_DIR,
        artifact_extension: str = DEFAULT_ARTIFACT_EXTENSION,
        grace_seconds: float = MANIFEST_GRACE_SECONDS,
    ) -> None:
        self._inventory = inventory
        self._stat = stat
        self._runtime = runtime
        self._source_dir = source_dir
        self._artifact_extension = artifact_extension
        self._grace_seconds = grace_seconds

    def list_projects(self) -> list[ProjectDescriptor]:
        """Publishable projects, in discovery order."""
        return self._inventory.discover_projects()

    def evaluate(
        self,
        descriptor: ProjectDescriptor,
        installed: list[InstalledExtension],
    ) -> SuiteEntry:
        """Classify one project against the given installed set."""
        artifact = load_artifact(descriptor, self._stat, self._artifact_extension)
        source = load_source_state(descriptor, self._stat, self._source_dir)
        match = find_installed(descriptor, installed)
        status = classify(
            descriptor,
            artifact,
            source,
            match,
            grace_seconds=self._grace_seconds,
        )
        return SuiteEntry(
            descriptor=descriptor,
            artifact=artifact,
            status=status,
            installed_version=match.version if match else None,
        )

    def scan(self) -> SuiteReport:
        """Run one reconciliation pass over every discovered project."""
        descriptors = self._inventory.discover_projects()
        try:
            installed = self._runtime.list_installed()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Could not query installed extensions: %s", exc)
            installed = []
        logger.info(
            "Reconciling %d projects against %d installed extensions",
            len(descriptors),
            len(installed),
        )

        entries: list[SuiteEntry] = []
        for descriptor in descriptors:
            try:
                entries.append(self.evaluate(descriptor, installed))
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Could not evaluate %s (%s): %s",
                    descriptor.name,
                    descriptor.root_path,
                    exc,
                )
        return SuiteReport(entries=entries)
