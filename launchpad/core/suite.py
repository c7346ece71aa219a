"""Suite facade: the central coordinator for Launchpad operations.

``Launchpad`` wires the inventory, filesystem, command runner and runtime
collaborators into the reconciler and the two orchestrators, and exposes
the single-project operations (package, publish, delete) alongside the
suite-wide ones.
"""

from __future__ import annotations

import logging
from pathlib import Path

from launchpad.bridge.commands import BumpKind, CommandRunner
from launchpad.bridge.filesystem import stat_path
from launchpad.bridge.inventory import MANIFEST_NAME, ManifestInventory
from launchpad.bridge.runtime import ExtensionRuntime
from launchpad.config import LaunchpadConfig
from launchpad.core.artifacts import delete_artifact
from launchpad.core.build_orchestrator import BuildOrchestrator
from launchpad.core.install_orchestrator import InstallOrchestrator
from launchpad.core.protocols import (
    BuildRunner,
    FileStatter,
    Installer,
    ProjectInventory,
    Publisher,
    RuntimeQuery,
)
from launchpad.core.reconciler import SuiteReconciler
from launchpad.models.projects import ProjectDescriptor
from launchpad.models.reports import BuildReport, InstallReport, SuiteReport

logger = logging.getLogger(__name__)


class ProjectNotFoundError(RuntimeError):
    """Raised when a target directory has no manifest."""


class Launchpad:
    """Entry point for every suite operation.

    Parameters
    ----------
    config:
        Runtime configuration.  Uses env-driven defaults if not provided.
    inventory, stat, runner, runtime, installer, publisher:
        Collaborator overrides; defaults are built from *config*.
    """

    def __init__(
        self,
        config: LaunchpadConfig | None = None,
        *,
        inventory: ProjectInventory | None = None,
        stat: FileStatter | None = None,
        runner: BuildRunner | None = None,
        runtime: RuntimeQuery | None = None,
        installer: Installer | None = None,
        publisher: Publisher | None = None,
    ) -> None:
        self.config = config or LaunchpadConfig()

        command_runner = CommandRunner(timeout=self.config.command_timeout_seconds)
        default_runtime = ExtensionRuntime(
            self.config.extensions_dir,
            code_command=self.config.code_command,
            runner=command_runner,
        )

        self.inventory = inventory or ManifestInventory(self.config.workspace_root)
        self.stat = stat or stat_path
        self.runner = runner or command_runner
        self.runtime = runtime or default_runtime
        self.installer = installer or default_runtime
        self.publisher = publisher or command_runner

        self.reconciler = SuiteReconciler(
            self.inventory,
            self.stat,
            self.runtime,
            source_dir=self.config.source_dir_name,
            artifact_extension=self.config.artifact_extension,
            grace_seconds=self.config.manifest_grace_seconds,
        )
        self.build_orchestrator = BuildOrchestrator(
            self.runner,
            self.stat,
            source_dir=self.config.source_dir_name,
            artifact_extension=self.config.artifact_extension,
        )
        self.install_orchestrator = InstallOrchestrator(self.installer)

    # ------------------------------------------------------------------
    # Suite-wide operations
    # ------------------------------------------------------------------

    def scan(self) -> SuiteReport:
        """Reconcile every project against the runtime."""
        return self.reconciler.scan()

    def list_projects(self) -> list[ProjectDescriptor]:
        return self.reconciler.list_projects()

    async def build_all(self) -> BuildReport:
        """Rebuild every stale project that defines a build script."""
        return await self.build_orchestrator.plan_and_build(
            self.inventory.discover_projects()
        )

    async def install(self, artifact_paths: list[Path]) -> InstallReport:
        """Install the given artifacts in order."""
        return await self.install_orchestrator.install_all(artifact_paths)

    async def install_pending(self) -> InstallReport:
        """Install every ``new`` or ``update`` artifact from a fresh scan."""
        return await self.install(self.scan().pending_artifacts())

    # ------------------------------------------------------------------
    # Single-project operations
    # ------------------------------------------------------------------

    @staticmethod
    def _require_project(project_path: Path) -> Path:
        project_path = Path(project_path)
        if not (project_path / MANIFEST_NAME).is_file():
            raise ProjectNotFoundError(f"No {MANIFEST_NAME} found at: {project_path}")
        return project_path

    async def package_project(self, project_path: Path) -> str:
        """Create the artifact for one project."""
        project_path = self._require_project(project_path)
        logger.info("Packaging %s", project_path.name)
        return await self.runner.package(project_path)

    async def publish_project(self, project_path: Path, bump: BumpKind) -> str:
        """Bump the version of one project and publish it to the marketplace."""
        project_path = self._require_project(project_path)
        logger.info("Publishing %s %s update", project_path.name, bump)
        return await self.publisher.publish(project_path, bump)

    def delete_artifact(self, artifact_path: Path) -> bool:
        return delete_artifact(artifact_path)

    async def list_publishers(self) -> list[str]:
        return await self.publisher.list_publishers()
