"""Project inventory: finds publishable ``package.json`` manifests.

A project is publishable when its manifest names a ``publisher``.  Any
manifest that lives under ``node_modules`` or ``.vscode-test`` is ignored,
and manifests that cannot be read or parsed are skipped with a warning.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from launchpad.models.projects import ProjectDescriptor

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
EXCLUDED_DIRS = frozenset({"node_modules", ".vscode-test", ".git"})


class ManifestError(RuntimeError):
    """Raised when a manifest cannot be read or is not a JSON object."""


def read_manifest(path: Path) -> dict[str, Any]:
    """Load a ``package.json`` file as a dict."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} is not a JSON object")
    return data


def iter_manifests(root: Path) -> list[Path]:
    """All manifest files below *root*, excluded directories pruned, sorted."""
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDED_DIRS)
        if MANIFEST_NAME in filenames:
            found.append(Path(dirpath) / MANIFEST_NAME)
    return found


def descriptor_from_manifest(
    manifest_path: Path, manifest: dict[str, Any]
) -> ProjectDescriptor | None:
    """Build a descriptor, or None if the manifest is not publishable."""
    publisher = manifest.get("publisher")
    if not publisher:
        return None
    name = str(manifest.get("name") or manifest_path.parent.name)
    scripts = manifest.get("scripts")
    has_build = isinstance(scripts, dict) and bool(scripts.get("compile"))
    return ProjectDescriptor(
        root_path=manifest_path.parent,
        name=name,
        display_name=str(manifest.get("displayName") or name),
        version=str(manifest.get("version") or ""),
        publisher=str(publisher),
        has_build_script=has_build,
    )


class ManifestInventory:
    """Discovers publishable projects under a workspace root.

    Parameters
    ----------
    root:
        Workspace root to search recursively.
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def discover_projects(self) -> list[ProjectDescriptor]:
        """Return a fresh list of descriptors on every call."""
        projects: list[ProjectDescriptor] = []
        for manifest_path in iter_manifests(self._root):
            try:
                manifest = read_manifest(manifest_path)
            except ManifestError as exc:
                logger.warning("Skipping %s: %s", manifest_path, exc)
                continue
            descriptor = descriptor_from_manifest(manifest_path, manifest)
            if descriptor is None:
                logger.debug("Skipping %s: no publisher", manifest_path)
                continue
            projects.append(descriptor)
        logger.debug("Discovered %d publishable projects in %s", len(projects), self._root)
        return projects
