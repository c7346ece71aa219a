"""Manifest audit: pre-publish checks on ``package.json``.

Checks, in order:

* the manifest exists and parses;
* a ``publisher`` is declared (and is not a known mis-cased id);
* an ``icon`` is declared and the file is present;
* a ``repository`` link is declared.
"""

from __future__ import annotations

import logging
from pathlib import Path

from launchpad.bridge.inventory import (
    MANIFEST_NAME,
    ManifestError,
    iter_manifests,
    read_manifest,
)
from launchpad.models.audit import AuditFinding, ProjectAudit, Severity

logger = logging.getLogger(__name__)

# Marketplace publisher ids are case-sensitive; these are known wrong spellings.
MISCASED_PUBLISHERS: dict[str, str] = {"nexgenmeta": "NexGenMeta"}


def audit_project(root: Path) -> list[AuditFinding]:
    """Audit the manifest of the project at *root*."""
    root = Path(root)
    manifest_path = root / MANIFEST_NAME
    if not manifest_path.is_file():
        return [AuditFinding(severity=Severity.ERROR, message=f"{MANIFEST_NAME} not found in root.")]

    try:
        manifest = read_manifest(manifest_path)
    except ManifestError:
        return [AuditFinding(severity=Severity.ERROR, message=f"Error parsing {MANIFEST_NAME}.")]

    findings: list[AuditFinding] = []

    publisher = manifest.get("publisher")
    if not publisher:
        findings.append(
            AuditFinding(severity=Severity.ERROR, message="Missing 'publisher' field in package.json.")
        )
    elif publisher in MISCASED_PUBLISHERS:
        findings.append(
            AuditFinding(
                severity=Severity.WARNING,
                message=(
                    f"Publisher ID '{publisher}' should likely be "
                    f"'{MISCASED_PUBLISHERS[publisher]}' (Marketplace IDs are case-sensitive)."
                ),
            )
        )

    icon = manifest.get("icon")
    if not icon:
        findings.append(
            AuditFinding(
                severity=Severity.WARNING,
                message="No icon defined. Extensions need a 128x128px png icon (Recommendation).",
            )
        )
    elif not (root / str(icon)).exists():
        findings.append(
            AuditFinding(severity=Severity.ERROR, message=f"Icon file not found at: {icon}")
        )

    if not manifest.get("repository"):
        findings.append(
            AuditFinding(
                severity=Severity.WARNING,
                message="Missing 'repository' field. Users trust extensions more with source links.",
            )
        )

    return findings


def audit_suite(workspace_root: Path) -> list[ProjectAudit]:
    """Audit every publishable project under *workspace_root*."""
    audits: list[ProjectAudit] = []
    for manifest_path in iter_manifests(Path(workspace_root)):
        try:
            manifest = read_manifest(manifest_path)
        except ManifestError as exc:
            logger.warning("Skipping audit of %s: %s", manifest_path, exc)
            continue
        if not manifest.get("publisher"):
            continue
        audits.append(
            ProjectAudit(
                project=manifest_path.parent.name,
                version=str(manifest.get("version") or ""),
                findings=audit_project(manifest_path.parent),
            )
        )
    return audits
