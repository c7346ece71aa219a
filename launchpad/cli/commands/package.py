"""``launchpad package``, ``launchpad publish`` and ``launchpad publishers``."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from launchpad.bridge.commands import BUMP_KINDS, CommandError
from launchpad.cli.commands.common import console, make_launchpad
from launchpad.core.suite import ProjectNotFoundError


def package_cmd(
    project: Path = typer.Argument(..., help="Project directory to package."),
) -> None:
    """Create the artifact for one project."""
    launchpad = make_launchpad()
    console.print(f"[bold cyan]Creating VSIX for {project.name}...[/bold cyan]")
    try:
        asyncio.run(launchpad.package_project(project))
    except (ProjectNotFoundError, CommandError) as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]Successfully packaged {project.name}![/bold green]")


def publish_cmd(
    project: Path = typer.Argument(..., help="Project directory to publish."),
    bump: str = typer.Option(
        "patch",
        "--bump",
        "-b",
        help="Version bump: patch, minor or major.",
    ),
) -> None:
    """Bump the version of one project and publish it."""
    if bump not in BUMP_KINDS:
        console.print(f"[bold red]Unknown bump {bump!r}; use patch, minor or major.[/bold red]")
        raise typer.Exit(code=2)

    launchpad = make_launchpad()
    console.print(f"[bold cyan]Publishing {project.name} {bump} update...[/bold cyan]")
    try:
        asyncio.run(launchpad.publish_project(project, bump))  # type: ignore[arg-type]
    except (ProjectNotFoundError, CommandError) as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)
    console.print(
        f"[bold green]Successfully published {project.name} {bump} update![/bold green]"
    )


def publishers_cmd() -> None:
    """List publisher ids known to vsce."""
    launchpad = make_launchpad()
    publishers = asyncio.run(launchpad.list_publishers())
    if not publishers:
        console.print("[dim]No publishers found.[/dim]")
        return
    for name in publishers:
        console.print(name)
