"""VS Code extensions runtime: installed-state query and install command.

Installed extensions are read from the extensions directory: every
``<publisher>.<name>-<version>/package.json`` found there is one installed
entity, and that manifest's mtime is the install time used by the
classifier.  Folders listed in ``.obsolete`` are old versions awaiting
cleanup and are not installed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from launchpad.bridge.commands import CommandRunner
from launchpad.bridge.filesystem import stat_path
from launchpad.bridge.inventory import MANIFEST_NAME, ManifestError, read_manifest
from launchpad.core.versioning import compare_versions
from launchpad.models.projects import InstalledExtension

logger = logging.getLogger(__name__)

# JSON object of folder name -> true, written by VS Code after an update.
OBSOLETE_FILE = ".obsolete"


class ExtensionRuntime:
    """Query and install extensions for one VS Code installation.

    Parameters
    ----------
    extensions_dir:
        Directory holding installed extensions.
    code_command:
        The ``code`` CLI used for installation.
    runner:
        Command runner.  A default one is created if not provided.
    """

    def __init__(
        self,
        extensions_dir: Path,
        *,
        code_command: str = "code",
        runner: CommandRunner | None = None,
    ) -> None:
        self._extensions_dir = Path(extensions_dir)
        self._code_command = code_command
        self._runner = runner or CommandRunner()

    def _obsolete_folders(self) -> set[str]:
        """Folders VS Code has superseded but not yet cleaned up."""
        path = self._extensions_dir / OBSOLETE_FILE
        if not path.is_file():
            return set()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable %s: %s", path, exc)
            return set()
        if not isinstance(data, dict):
            return set()
        return {folder for folder, flagged in data.items() if flagged}

    def list_installed(self) -> list[InstalledExtension]:
        """Active installed extensions, one per publisher and name.

        A missing or unlistable directory means none.  Obsolete folders are
        skipped, and when several versions of one extension remain the
        highest wins.
        """
        if not self._extensions_dir.is_dir():
            logger.info("Extensions directory %s not found", self._extensions_dir)
            return []
        try:
            entries = sorted(self._extensions_dir.iterdir())
        except OSError as exc:
            logger.warning("Cannot list extensions directory %s: %s", self._extensions_dir, exc)
            return []

        obsolete = self._obsolete_folders()
        active: dict[tuple[str, str], InstalledExtension] = {}
        for entry in entries:
            if entry.name in obsolete:
                logger.debug("Skipping obsolete extension folder %s", entry.name)
                continue
            manifest_path = entry / MANIFEST_NAME
            if not entry.is_dir() or not manifest_path.is_file():
                continue
            try:
                manifest = read_manifest(manifest_path)
            except ManifestError as exc:
                logger.warning("Skipping installed extension %s: %s", entry.name, exc)
                continue
            name = manifest.get("name")
            if not name:
                continue
            ext = InstalledExtension(
                name=str(name),
                publisher=str(manifest.get("publisher") or ""),
                version=str(manifest.get("version") or ""),
                manifest_modified_time=stat_path(manifest_path).modified_time,
            )
            key = (ext.publisher, ext.name)
            current = active.get(key)
            if current is None or compare_versions(ext.version, current.version) > 0:
                active[key] = ext
        return list(active.values())

    async def install(self, artifact_path: Path) -> str:
        """Install a packaged artifact, replacing any installed version."""
        return await self._runner.run(
            self._code_command,
            ["--install-extension", str(artifact_path), "--force"],
        )
