"""Sequential, failure-isolated installation of packaged artifacts."""

from __future__ import annotations

import logging
from pathlib import Path

from launchpad.core.protocols import Installer
from launchpad.models.reports import InstallFailure, InstallReport

logger = logging.getLogger(__name__)


class InstallOrchestrator:
    """Installs artifacts one by one in the order given.

    No reordering or deduplication is done; callers supply the order they
    want (dependencies first, if any).
    """

    def __init__(self, installer: Installer) -> None:
        self._installer = installer

    async def install_all(self, artifact_paths: list[Path]) -> InstallReport:
        """Install every path, recording failures and carrying on."""
        installed = 0
        failures: list[InstallFailure] = []
        attempted: list[Path] = []

        for raw_path in artifact_paths:
            path = Path(raw_path)
            attempted.append(path)
            logger.info("Installing %s", path.name)
            try:
                await self._installer.install(path)
            except Exception as exc:  # noqa: BLE001
                logger.error("Failed to install %s: %s", path.name, exc)
                failures.append(InstallFailure(path=path, reason=str(exc)))
                continue
            installed += 1

        logger.info(
            "Suite sync complete: %d installed, %d failed",
            installed,
            len(failures),
        )
        return InstallReport(
            installed_count=installed,
            failures=failures,
            attempted=attempted,
        )
