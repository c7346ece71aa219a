"""``launchpad audit`` and ``launchpad badges``."""

from __future__ import annotations

from pathlib import Path

import typer

from launchpad.cli.commands.common import WorkspaceOption, console, make_launchpad
from launchpad.contrib.audit import audit_suite
from launchpad.contrib.badges import badge_suite
from launchpad.monitor.renderer import SuiteRenderer


def audit_cmd(
    workspace: Path = WorkspaceOption,
) -> None:
    """Check every publishable manifest before publishing."""
    root = make_launchpad(workspace).config.workspace_root
    audits = audit_suite(root)
    SuiteRenderer(console=console).print_audits(audits)
    if not all(a.passed for a in audits):
        raise typer.Exit(code=1)


def badges_cmd(
    workspace: Path = WorkspaceOption,
) -> None:
    """Insert marketplace badges into each project's README."""
    root = make_launchpad(workspace).config.workspace_root
    count = badge_suite(root)
    if count > 0:
        console.print(f"[green]Marketplace badges inserted into {count} projects.[/green]")
    else:
        console.print(
            "[yellow]No new badges were inserted "
            "(READMEs may be missing or badges already present).[/yellow]"
        )
