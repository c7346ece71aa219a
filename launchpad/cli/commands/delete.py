"""``launchpad delete ARTIFACT``: remove a packaged artifact."""

from __future__ import annotations

from pathlib import Path

import typer

from launchpad.cli.commands.common import console, make_launchpad


def delete_cmd(
    artifact: Path = typer.Argument(..., help="Artifact file to delete."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Delete one artifact file."""
    if not yes and not typer.confirm(f"Are you sure you want to delete {artifact.name}?"):
        console.print("[dim]Cancelled.[/dim]")
        raise typer.Exit(code=0)

    try:
        deleted = make_launchpad().delete_artifact(artifact)
    except OSError as exc:
        console.print(f"[bold red]Failed to delete artifact:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if deleted:
        console.print(f"[green]Deleted {artifact.name}[/green]")
    else:
        console.print(f"[yellow]No artifact at {artifact}[/yellow]")
