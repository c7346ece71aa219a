"""Artifact path derivation and on-disk artifact handling.

Layout: {project_root}/{name}-{version}{ext}, lower-cased.  The path is a
pure function of (name, version) so two descriptors with equal name and
version always resolve to the same file name.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from launchpad.models.projects import (
    ArtifactRecord,
    FileStat,
    ProjectDescriptor,
    SourceState,
)

logger = logging.getLogger(__name__)

DEFAULT_ARTIFACT_EXTENSION = ".vsix"
DEFAULT_SOURCE_DIR = "src"


def artifact_file_name(
    name: str, version: str, extension: str = DEFAULT_ARTIFACT_EXTENSION
) -> str:
    """Return ``name-version.ext`` lower-cased."""
    return f"{name}-{version}{extension}".lower()


def artifact_path(
    descriptor: ProjectDescriptor, extension: str = DEFAULT_ARTIFACT_EXTENSION
) -> Path:
    """Compute where the artifact for *descriptor*'s current version lives."""
    return descriptor.root_path / artifact_file_name(
        descriptor.name, descriptor.version, extension
    )


def load_artifact(
    descriptor: ProjectDescriptor,
    stat: Callable[[Path], FileStat],
    extension: str = DEFAULT_ARTIFACT_EXTENSION,
) -> ArtifactRecord:
    """Build the ArtifactRecord for *descriptor* using the *stat* collaborator."""
    path = artifact_path(descriptor, extension)
    info = stat(path)
    return ArtifactRecord(
        path=path,
        exists=info.exists,
        modified_time=info.modified_time if info.exists else None,
    )


def load_source_state(
    descriptor: ProjectDescriptor,
    stat: Callable[[Path], FileStat],
    source_dir: str = DEFAULT_SOURCE_DIR,
) -> SourceState:
    """Build the SourceState for the project's source subtree."""
    info = stat(descriptor.root_path / source_dir)
    return SourceState(modified_time=info.modified_time if info.exists else None)


def delete_artifact(path: Path) -> bool:
    """Delete a packaged artifact.

    Returns False when there was nothing to delete.
    """
    path = Path(path)
    if not path.is_file():
        logger.info("No artifact to delete at %s", path)
        return False
    path.unlink()
    logger.info("Deleted artifact %s", path)
    return True
