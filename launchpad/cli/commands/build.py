"""``launchpad build-all``: rebuild every stale project in the suite."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from launchpad.cli.commands.common import WorkspaceOption, console, make_launchpad
from launchpad.monitor.renderer import SuiteRenderer


def build_all_cmd(
    workspace: Path = WorkspaceOption,
) -> None:
    """Compile and package every project whose artifact is stale.

    Up-to-date projects are skipped.  A failing project does not stop the
    rest; the command exits 1 if any project failed.
    """
    launchpad = make_launchpad(workspace)
    console.print("[bold cyan]Compiling suite...[/bold cyan]")
    report = asyncio.run(launchpad.build_all())
    SuiteRenderer(console=console).print_build_report(report)
    if report.has_failures:
        raise typer.Exit(code=1)
