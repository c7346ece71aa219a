"""``launchpad install``: install artifacts into the VS Code runtime."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from launchpad.cli.commands.common import (
    ExtensionsDirOption,
    WorkspaceOption,
    console,
    make_launchpad,
)
from launchpad.monitor.renderer import SuiteRenderer


def install_cmd(
    artifacts: list[Path] | None = typer.Argument(
        None,
        help="Artifact files to install, in order.",
    ),
    all_pending: bool = typer.Option(
        False,
        "--all-pending",
        help="Install every artifact whose status is new or update.",
    ),
    workspace: Path = WorkspaceOption,
    extensions_dir: Path = ExtensionsDirOption,
) -> None:
    """Install artifacts one at a time, continuing past failures."""
    if not artifacts and not all_pending:
        console.print("[bold red]Give artifact paths or --all-pending.[/bold red]")
        raise typer.Exit(code=2)

    launchpad = make_launchpad(workspace, extensions_dir)
    if all_pending:
        paths = launchpad.scan().pending_artifacts() + list(artifacts or [])
    else:
        paths = list(artifacts or [])

    console.print("[bold cyan]Syncing suite...[/bold cyan]")
    report = asyncio.run(launchpad.install(paths))
    SuiteRenderer(console=console).print_install_report(report)
    if report.has_failures:
        raise typer.Exit(code=1)
