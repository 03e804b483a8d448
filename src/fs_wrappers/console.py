"""Rich console output for the fs-wrappers CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

if TYPE_CHECKING:
    from fs_wrappers.config import Settings


class ConsoleOutput:
    """Text output for fs-wrappers commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. A new one is created if omitted.
        """
        self.console = console or Console()

    def confirm(self, message: str, default: bool = False) -> bool:
        """Show confirmation prompt.

        Args:
            message: Confirmation message.
            default: Default response.

        Returns:
            User's response.
        """
        return Confirm.ask(message, default=default, console=self.console)

    def show_entries(self, directory: str, files: list[str], directories: list[str]) -> None:
        """Display a directory listing table.

        Args:
            directory: Directory that was listed.
            files: File paths found.
            directories: Subdirectory paths found.
        """
        if not files and not directories:
            self.console.print(f"[yellow]{directory} is empty[/yellow]")
            return

        table = Table(title=directory)
        table.add_column("Type", style="cyan")
        table.add_column("Path")

        for path in directories:
            table.add_row("dir", path)
        for path in files:
            table.add_row("file", path)

        self.console.print(table)

    def show_settings(self, config_file: str, settings: Settings) -> None:
        """Display current configuration."""
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Config file: {config_file}")
        self.console.print(f"  Default overwrite: {settings.default_overwrite}")
        self.console.print(f"  Log level: {settings.log_level}")
        self.console.print(f"  Show hidden: {settings.show_hidden}")

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]\u2713[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]\u2717[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {message}")
