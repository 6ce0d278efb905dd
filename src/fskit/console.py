"""Console output for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from fskit.config import Settings


class Reporter:
    """Rich-based output for fskit commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {message}")

    def show_text(self, text: str) -> None:
        """Print text verbatim, without markup or highlighting."""
        self.console.print(text, markup=False, highlight=False, end="")

    def show_listing(self, names: list[str]) -> None:
        """Print one name per line."""
        for entry in names:
            self.console.print(entry, markup=False, highlight=False)

    def show_properties(self, title: str, properties: dict[str, str]) -> None:
        """Show a two-column property table.

        Args:
            title: Table title.
            properties: Property name to display value.
        """
        table = Table(title=title, show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value")
        for key, value in properties.items():
            table.add_row(key, value)
        self.console.print(table)

    def show_settings(self, settings: Settings, location: str) -> None:
        """Show current configuration."""
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Config file: {location}")
        self.console.print(f"  File mode: {settings.file_mode:04o}")
        self.console.print(f"  Append mode: {settings.append_mode:04o}")
        self.console.print(f"  Directory mode: {settings.directory_mode:04o}")
