"""Main Typer application: imports and registers all CLI commands.

Entry point: ``launchpad`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from launchpad.cli.commands.audit import audit_cmd, badges_cmd
from launchpad.cli.commands.build import build_all_cmd
from launchpad.cli.commands.delete import delete_cmd
from launchpad.cli.commands.install import install_cmd
from launchpad.cli.commands.package import package_cmd, publish_cmd, publishers_cmd
from launchpad.cli.commands.status import projects_cmd, status_cmd
from launchpad.config import config

app = typer.Typer(
    name="launchpad",
    help="Launchpad: build, package and install a suite of VS Code extensions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _configure(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: LAUNCHPAD_LOG_LEVEL or INFO).",
    ),
) -> None:
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# Register subcommands
app.command(name="status", help="Show build/install status for every project.")(status_cmd)
app.command(name="projects", help="List publishable projects.")(projects_cmd)
app.command(name="build-all", help="Rebuild every stale project.")(build_all_cmd)
app.command(name="install", help="Install artifacts into VS Code.")(install_cmd)
app.command(name="package", help="Package one project.")(package_cmd)
app.command(name="publish", help="Publish one project to the marketplace.")(publish_cmd)
app.command(name="publishers", help="List vsce publishers.")(publishers_cmd)
app.command(name="audit", help="Audit project manifests.")(audit_cmd)
app.command(name="badges", help="Insert marketplace badges into READMEs.")(badges_cmd)
app.command(name="delete", help="Delete a packaged artifact.")(delete_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
