"""Artifact staleness relative to the project's source subtree."""

from __future__ import annotations

from launchpad.models.projects import ArtifactRecord, SourceState


def is_stale(artifact: ArtifactRecord, source: SourceState) -> bool:
    """Return True when the artifact is missing or older than its source.

    A source subtree that cannot be inspected never makes an existing
    artifact stale.  Equal timestamps count as current.
    """
    if not artifact.exists or artifact.modified_time is None:
        return True
    if source.modified_time is None:
        return False
    return source.modified_time > artifact.modified_time
