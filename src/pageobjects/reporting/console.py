"""Rich-powered console output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pageobjects.models import PageReport

_console = Console()


def print_banner() -> None:
    """Display the startup banner."""
    _console.print(
        Panel.fit(
            "[bold cyan]pageobjects[/bold cyan]  page inspector",
            border_style="cyan",
        )
    )


def print_page_report(report: PageReport) -> None:
    """Display one page's element table."""
    status = "[bold green]ok[/bold green]" if report.ok else "[bold red]problems[/bold red]"
    _console.print(f"\n[bold]{report.page}[/bold]  {escape(report.url)}  {status}")
    if not report.loaded:
        _console.print(f"  [red]{escape(report.error)}[/red]")
        return
    if report.title:
        _console.print(f"  title: {escape(report.title)}")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Element", style="cyan")
    table.add_column("Role")
    table.add_column("Locators", style="dim")
    table.add_column("Found", justify="center")
    table.add_column("Visible", justify="center")

    for el in report.elements:
        found = "[green]yes[/green]" if el.found else "[red]no[/red]"
        visible = "[green]yes[/green]" if el.visible else "[dim]no[/dim]"
        table.add_row(el.name, el.role, escape(el.locators), found, visible)
        if el.error:
            table.add_row("", "", f"[red]{escape(el.error)}[/red]", "", "")

    _console.print(table)


def print_summary(reports: list[PageReport]) -> None:
    """Display a one-table summary across pages."""
    table = Table(title="Summary", show_header=True, header_style="bold magenta")
    table.add_column("Page", style="cyan")
    table.add_column("Loaded", justify="center")
    table.add_column("Elements", justify="right")
    table.add_column("Missing", justify="right")

    for r in reports:
        table.add_row(
            r.page,
            "yes" if r.loaded else "no",
            str(len(r.elements)),
            str(r.missing) if r.loaded else "-",
        )

    _console.print()
    _console.print(table)
    _console.print()
