"""``launchpad status`` and ``launchpad projects``."""

from __future__ import annotations

from pathlib import Path

from rich.table import Table

from launchpad.cli.commands.common import (
    ExtensionsDirOption,
    WorkspaceOption,
    console,
    make_launchpad,
)
from launchpad.monitor.renderer import SuiteRenderer


def status_cmd(
    workspace: Path = WorkspaceOption,
    extensions_dir: Path = ExtensionsDirOption,
) -> None:
    """Reconcile every project and show what to build or install next."""
    launchpad = make_launchpad(workspace, extensions_dir)
    report = launchpad.scan()
    SuiteRenderer(console=console).print_suite(report)


def projects_cmd(
    workspace: Path = WorkspaceOption,
) -> None:
    """List publishable projects in the workspace."""
    launchpad = make_launchpad(workspace)
    projects = launchpad.list_projects()
    if not projects:
        console.print("[dim]No publishable projects found.[/dim]")
        return

    table = Table(title="Publishable Projects")
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Compile", justify="center")
    table.add_column("Path", style="dim")
    for p in projects:
        compile_flag = "[green]Yes[/green]" if p.has_build_script else "[dim]No[/dim]"
        table.add_row(p.display_name, p.version, compile_flag, str(p.root_path))
    console.print(table)
