"""Suite build orchestrator: skip/build/package across every project.

Projects whose artifact is already current are counted as succeeded
without touching the build runner.  The rest are built and packaged one
at a time; a failure is recorded and the run moves on to the next
project.  There is no rollback of projects already built.
"""

from __future__ import annotations

import logging
from pathlib import Path

from launchpad.core.artifacts import (
    DEFAULT_ARTIFACT_EXTENSION,
    DEFAULT_SOURCE_DIR,
    load_artifact,
    load_source_state,
)
from launchpad.core.protocols import BuildRunner, FileStatter
from launchpad.core.staleness import is_stale
from launchpad.models.projects import BuildTask, ProjectDescriptor
from launchpad.models.reports import BuildOutcome, BuildOutcomeKind, BuildReport

logger = logging.getLogger(__name__)


def project_label(descriptor: ProjectDescriptor) -> str:
    """Name a project by its directory, as shown in build reports."""
    return Path(descriptor.root_path).name or descriptor.name


class BuildOrchestrator:
    """Plans and drives a sequential build of the whole suite.

    Parameters
    ----------
    runner:
        Build/package command collaborator.
    stat:
        Filesystem stat collaborator.
    source_dir:
        Name of the source subtree inside each project.
    artifact_extension:
        Extension of packaged artifacts.
    """

    def __init__(
        self,
        runner: BuildRunner,
        stat: FileStatter,
        *,
        source_dir: str = DEFAULT_SOURCE_DIR,
        artifact_extension: str = DEFAULT_ARTIFACT_EXTENSION,
    ) -> None:
        self._runner = runner
        self._stat = stat
        self._source_dir = source_dir
        self._artifact_extension = artifact_extension

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def plan(self, descriptors: list[ProjectDescriptor]) -> list[BuildTask]:
        """Decide which projects need a build.

        Projects without a build script are left out of the plan.  A project
        whose state cannot be read is planned for a build, so that its
        failure, if any, is reported by the run.
        """
        tasks: list[BuildTask] = []
        for descriptor in descriptors:
            if not descriptor.has_build_script:
                logger.debug("No build script for %s; not planned", descriptor.name)
                continue
            try:
                artifact = load_artifact(descriptor, self._stat, self._artifact_extension)
                source = load_source_state(descriptor, self._stat, self._source_dir)
                needs_build = is_stale(artifact, source)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Could not check %s (%s): %s; planning a build",
                    descriptor.name,
                    descriptor.root_path,
                    exc,
                )
                needs_build = True
            tasks.append(BuildTask(descriptor=descriptor, needs_build=needs_build))
        return tasks

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def plan_and_build(self, descriptors: list[ProjectDescriptor]) -> BuildReport:
        """Plan, then build every stale project in order."""
        tasks = self.plan(descriptors)
        if not tasks:
            logger.info("Nothing to build: no projects define a build script")
            return BuildReport(nothing_to_build=True)
        return await self.run(tasks)

    async def run(self, tasks: list[BuildTask]) -> BuildReport:
        """Execute a build plan sequentially, isolating failures."""
        succeeded = 0
        failed: list[str] = []
        outcomes: list[BuildOutcome] = []

        for task in tasks:
            label = project_label(task.descriptor)

            if not task.needs_build:
                logger.info("%s is up to date; skipping build", label)
                succeeded += 1
                outcomes.append(BuildOutcome(project_name=label, kind=BuildOutcomeKind.SKIPPED))
                continue

            logger.info("Building %s", label)
            try:
                await self._runner.build(task.descriptor.root_path)
                await self._runner.package(task.descriptor.root_path)
            except Exception as exc:  # noqa: BLE001
                logger.error("Build failed for %s: %s", label, exc)
                failed.append(label)
                outcomes.append(
                    BuildOutcome(
                        project_name=label,
                        kind=BuildOutcomeKind.FAILED,
                        message=str(exc),
                    )
                )
                continue

            succeeded += 1
            outcomes.append(BuildOutcome(project_name=label, kind=BuildOutcomeKind.BUILT))

        if failed:
            logger.warning(
                "Suite build: %d succeeded, %d failed (%s)",
                succeeded,
                len(failed),
                ", ".join(failed),
            )
        else:
            logger.info("Suite build complete: %d projects processed", succeeded)

        return BuildReport(
            succeeded_count=succeeded,
            failed_project_names=failed,
            outcomes=outcomes,
        )
