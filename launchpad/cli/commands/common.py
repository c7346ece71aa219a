"""Shared option handling for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from launchpad.config import LaunchpadConfig
from launchpad.core.suite import Launchpad

console = Console()

WorkspaceOption = typer.Option(
    None,
    "--workspace",
    "-w",
    help="Suite workspace root (default: LAUNCHPAD_WORKSPACE_ROOT or '.').",
)
ExtensionsDirOption = typer.Option(
    None,
    "--extensions-dir",
    "-e",
    help="Installed extensions directory (default: ~/.vscode/extensions).",
)


def make_launchpad(
    workspace: Path | None = None,
    extensions_dir: Path | None = None,
) -> Launchpad:
    """Build a Launchpad from env config plus CLI overrides."""
    overrides: dict[str, Path] = {}
    if workspace is not None:
        overrides["workspace_root"] = workspace
    if extensions_dir is not None:
        overrides["extensions_dir"] = extensions_dir
    return Launchpad(LaunchpadConfig(**overrides))
