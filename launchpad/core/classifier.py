"""Per-project lifecycle classification.

Combines artifact existence, staleness and the installed version into one
of the four ``ProjectStatus`` values.  Pure and side-effect free: it is safe
to call concurrently for independent projects.

Precedence
----------
1. A source version newer than the installed one is always ``update``.
2. A stale artifact is ``stale`` even when the same version is installed.
3. Otherwise the artifact build time is compared with the installed
   manifest time (see ``MANIFEST_GRACE_SECONDS``).
"""

from __future__ import annotations

from launchpad.core.staleness import is_stale
from launchpad.core.versioning import compare_versions
from launchpad.models.projects import (
    ArtifactRecord,
    InstalledExtension,
    ProjectDescriptor,
    ProjectStatus,
    SourceState,
)

# Grace window (seconds) added to the installed manifest's mtime before an
# artifact with the same version counts as rebuilt-after-install.  This is a
# heuristic for filesystem timestamp granularity and install/build ordering,
# not a correctness guarantee.
MANIFEST_GRACE_SECONDS = 5.0


def classify(
    descriptor: ProjectDescriptor,
    artifact: ArtifactRecord,
    source: SourceState,
    installed: InstalledExtension | None,
    *,
    grace_seconds: float = MANIFEST_GRACE_SECONDS,
) -> ProjectStatus:
    """Classify a single project.  Never raises."""
    if installed is None:
        return ProjectStatus.NEW if artifact.exists else ProjectStatus.STALE

    if compare_versions(descriptor.version, installed.version) > 0:
        return ProjectStatus.UPDATE
    if is_stale(artifact, source):
        return ProjectStatus.STALE
    if artifact.exists and artifact.modified_time is not None:
        # Unreadable installed manifest: assume what is installed is current.
        if installed.manifest_modified_time is None:
            return ProjectStatus.INSTALLED
        if artifact.modified_time > installed.manifest_modified_time + grace_seconds:
            return ProjectStatus.UPDATE
    return ProjectStatus.INSTALLED
