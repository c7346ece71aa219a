"""Marketplace badge generation and README insertion."""

from __future__ import annotations

import logging
from pathlib import Path

from launchpad.bridge.inventory import ManifestError, iter_manifests, read_manifest

logger = logging.getLogger(__name__)

SHIELDS_BASE_URL = "https://img.shields.io/visual-studio-marketplace"
README_NAME = "README.md"
_BADGE_MARKER = "![Version]"


def generate_badges(publisher: str, extension_name: str) -> str:
    """Return the Version, Installs and Rating badges as one markdown line."""
    item = f"{publisher}.{extension_name}"
    return " ".join([
        f"![Version]({SHIELDS_BASE_URL}/v/{item})",
        f"![Installs]({SHIELDS_BASE_URL}/i/{item})",
        f"![Rating]({SHIELDS_BASE_URL}/r/{item})",
    ])


def insert_into_readme(root: Path, badges: str) -> bool:
    """Insert *badges* below the README title.

    Returns False if there is no README or it already carries badges.
    """
    readme = Path(root) / README_NAME
    if not readme.is_file():
        return False

    content = readme.read_text(encoding="utf-8")
    if _BADGE_MARKER in content:
        return False

    lines = content.split("\n")
    if lines and lines[0].startswith("#"):
        lines.insert(1, "\n" + badges + "\n")
    else:
        lines.insert(0, badges + "\n")

    readme.write_text("\n".join(lines), encoding="utf-8")
    return True


def badge_suite(workspace_root: Path) -> int:
    """Insert badges into every publishable project's README.

    Returns how many READMEs were updated.
    """
    updated = 0
    for manifest_path in iter_manifests(Path(workspace_root)):
        project_dir = manifest_path.parent
        try:
            manifest = read_manifest(manifest_path)
            publisher = manifest.get("publisher")
            if not publisher:
                continue
            badges = generate_badges(str(publisher), str(manifest.get("name") or project_dir.name))
            if insert_into_readme(project_dir, badges):
                updated += 1
                logger.info("Inserted badges into %s", project_dir.name)
        except (ManifestError, OSError, ValueError) as exc:
            logger.warning("Failed to generate badges for %s: %s", project_dir.name, exc)
    return updated
