"""Rich terminal renderer for Launchpad reports.

Color scheme
------------
- green   : INSTALLED
- cyan    : NEW
- yellow  : UPDATE
- red     : STALE
"""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from launchpad.models.audit import ProjectAudit, Severity
from launchpad.models.projects import ProjectStatus
from launchpad.models.reports import (
    BuildOutcomeKind,
    BuildReport,
    InstallReport,
    SuiteReport,
)

_STATUS_LABELS: dict[ProjectStatus, str] = {
    ProjectStatus.INSTALLED: "[green]INSTALLED[/green]",
    ProjectStatus.NEW: "[cyan]NEW[/cyan]",
    ProjectStatus.UPDATE: "[yellow]UPDATE[/yellow]",
    ProjectStatus.STALE: "[bold red]STALE[/bold red]",
}

_STATUS_ACTIONS: dict[ProjectStatus, str] = {
    ProjectStatus.INSTALLED: "[dim]-[/dim]",
    ProjectStatus.NEW: "install",
    ProjectStatus.UPDATE: "install",
    ProjectStatus.STALE: "build",
}

_OUTCOME_LABELS: dict[BuildOutcomeKind, str] = {
    BuildOutcomeKind.SKIPPED: "[dim]up to date[/dim]",
    BuildOutcomeKind.BUILT: "[green]built[/green]",
    BuildOutcomeKind.FAILED: "[bold red]FAILED[/bold red]",
}


def format_relative_time(timestamp: float | None, now: datetime | None = None) -> str:
    """Describe an mtime relative to *now*: ``just now``, ``5m ago``, ``3h ago``."""
    if timestamp is None:
        return "N/A"
    moment = datetime.fromtimestamp(timestamp)
    now = now or datetime.now()
    diff_seconds = (now - moment).total_seconds()
    minutes = int(diff_seconds // 60)
    hours = int(diff_seconds // 3600)
    if minutes < 1:
        return "just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    return moment.strftime("%Y-%m-%d %H:%M")


class SuiteRenderer:
    """Renders Launchpad reports as Rich output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Suite status
    # ------------------------------------------------------------------

    def render_suite(self, report: SuiteReport, now: datetime | None = None) -> Panel:
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Extension", min_width=20)
        table.add_column("Version", style="green")
        table.add_column("Installed")
        table.add_column("Status", justify="center")
        table.add_column("Artifact built")
        table.add_column("Next", justify="center")

        for entry in report.entries:
            table.add_row(
                entry.descriptor.display_name,
                entry.descriptor.version,
                entry.installed_version or "[dim]-[/dim]",
                _STATUS_LABELS[entry.status],
                format_relative_time(entry.artifact.modified_time, now),
                _STATUS_ACTIONS[entry.status],
            )

        counts = "  |  ".join(
            f"[bold]{status.value}:[/bold] {len(report.by_status(status))}"
            for status in ProjectStatus
        )
        if not report.entries:
            counts = "[dim]No publishable projects found.[/dim]"

        from rich.console import Group

        return Panel(
            Group(table, Text(""), Text.from_markup(counts)),
            title="[bold]Suite Status[/bold]",
            subtitle=f"Scanned: {report.scanned_at.strftime('%Y-%m-%d %H:%M:%S UTC')}",
            border_style="blue",
            padding=(1, 2),
        )

    def print_suite(self, report: SuiteReport) -> None:
        self.console.print(self.render_suite(report))

    # ------------------------------------------------------------------
    # Build / install reports
    # ------------------------------------------------------------------

    def print_build_report(self, report: BuildReport) -> None:
        if report.nothing_to_build:
            self.console.print("[yellow]No extensions with a compile script found to build.[/yellow]")
            return

        table = Table(title="Suite Build", header_style="bold cyan")
        table.add_column("Project", style="cyan")
        table.add_column("Result", justify="center")
        table.add_column("Details")
        for outcome in report.outcomes:
            table.add_row(
                outcome.project_name,
                _OUTCOME_LABELS[outcome.kind],
                outcome.message or "[dim]-[/dim]",
            )
        self.console.print(table)

        if report.has_failures:
            self.console.print(
                f"[bold yellow]Suite Build: {report.succeeded_count} succeeded, "
                f"{len(report.failed_project_names)} failed "
                f"({', '.join(report.failed_project_names)})[/bold yellow]"
            )
        else:
            self.console.print(
                f"[bold green]Suite Build Complete: {report.succeeded_count} "
                f"extensions processed.[/bold green]"
            )

    def print_install_report(self, report: InstallReport) -> None:
        if not report.attempted:
            self.console.print("[dim]Nothing to install.[/dim]")
            return
        for failure in report.failures:
            self.console.print(
                f"[bold red]Failed to install {failure.path.name}:[/bold red] {failure.reason}"
            )
        style = "bold yellow" if report.has_failures else "bold green"
        self.console.print(
            f"[{style}]Suite Sync Complete: {report.installed_count} extensions "
            f"installed/updated.[/{style}]"
        )

    # ------------------------------------------------------------------
    # Audit
    # ------------------------------------------------------------------

    def print_audits(self, audits: list[ProjectAudit]) -> None:
        if not audits:
            self.console.print("[dim]No publishable projects found.[/dim]")
            return

        table = Table(title="Manifest Audit", header_style="bold cyan", show_lines=True)
        table.add_column("Project", style="cyan")
        table.add_column("Version", style="green")
        table.add_column("Findings")
        for audit in audits:
            if audit.findings:
                lines = [
                    f"[red]error[/red] {f.message}"
                    if f.severity == Severity.ERROR
                    else f"[yellow]warning[/yellow] {f.message}"
                    for f in audit.findings
                ]
                findings = "\n".join(lines)
            else:
                findings = "[green]All checks passed[/green]"
            table.add_row(audit.project, audit.version or "[dim]-[/dim]", findings)
        self.console.print(table)
