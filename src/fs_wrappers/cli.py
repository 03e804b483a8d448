"""CLI commands using Typer."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from fs_wrappers.context import AppContext

import typer
from rich.logging import RichHandler
from rich.markup import escape

from fs_wrappers import __version__
from fs_wrappers.config import ConfigManager, Settings
from fs_wrappers.console import ConsoleOutput
from fs_wrappers.context import create_context

app = typer.Typer(
    name="fs-wrappers",
    help="Copy, move and inspect directory trees",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

output = ConsoleOutput()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"fs-wrappers v{__version__}")
        raise typer.Exit()


def setup_logging(level: str) -> None:
    """Route library logging through Rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=output.console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every file operation")
    ] = False,
    _context=None,
) -> None:
    """Copy, move and inspect directory trees."""
    if verbose:
        setup_logging("DEBUG")
        return
    ctx = _context or create_context()
    setup_logging(_load_settings(ctx.config).log_level)


def _load_settings(config: ConfigManager) -> Settings:
    """Load settings, falling back to defaults when the config file is broken."""
    try:
        return config.load()
    except (json.JSONDecodeError, ValueError) as e:
        output.show_error(
            escape(f"Ignoring invalid configuration {config.config_file}: {e}")
        )
        return Settings()


# ============================================================================
# Tree Commands
# ============================================================================


def _resolve_overwrite(ctx: AppContext, overwrite: bool | None) -> bool:
    """Fall back to the configured default when --overwrite is not given."""
    if overwrite is None:
        return _load_settings(ctx.config).default_overwrite
    return overwrite


@app.command()
def copy(
    source: Annotated[str, typer.Argument(help="Directory to copy")],
    destination: Annotated[str, typer.Argument(help="Directory to copy to")],
    overwrite: Annotated[
        bool | None,
        typer.Option("--overwrite/--no-overwrite", help="Replace existing files"),
    ] = None,
    _context=None,
) -> None:
    """Copy a directory tree."""
    ctx = _context or create_context()
    overwrite = _resolve_overwrite(ctx, overwrite)

    try:
        ctx.filesystem.directory.copy(source, destination, overwrite)
    except (OSError, ValueError) as e:
        output.show_error(f"Failed to copy {source}: {e}")
        raise typer.Exit(1) from e

    output.show_success(f"Copied {source} to {destination}")


@app.command()
def move(
    source: Annotated[str, typer.Argument(help="Directory to move")],
    destination: Annotated[str, typer.Argument(help="Directory to move to")],
    overwrite: Annotated[
        bool | None,
        typer.Option("--overwrite/--no-overwrite", help="Replace an existing destination"),
    ] = None,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask before replacing")
    ] = False,
    _context=None,
) -> None:
    """Move a directory tree, across volumes if needed."""
    ctx = _context or create_context()
    overwrite = _resolve_overwrite(ctx, overwrite)
    directory = ctx.filesystem.directory

    if overwrite and not yes and directory.exists(destination):
        if not output.confirm(f"Replace existing {destination}?"):
            output.show_warning("Move cancelled")
            raise typer.Exit(1)

    try:
        directory.move_tree(source, destination, overwrite)
    except (OSError, ValueError) as e:
        output.show_error(f"Failed to move {source}: {e}")
        raise typer.Exit(1) from e

    output.show_success(f"Moved {source} to {destination}")


@app.command()
def root(
    path: Annotated[str, typer.Argument(help="Path to resolve")],
    _context=None,
) -> None:
    """Show the volume root a path resides on."""
    ctx = _context or create_context()
    output.console.print(ctx.filesystem.directory.get_root(path))


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    pattern: Annotated[str, typer.Option("--pattern", "-p", help="Glob for entry names")] = "*",
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Include subdirectories")
    ] = False,
    _context=None,
) -> None:
    """List the files and subdirectories of a directory."""
    ctx = _context or create_context()
    fs = ctx.filesystem
    show_hidden = _load_settings(ctx.config).show_hidden

    try:
        files = fs.directory.get_files(path, pattern, recursive)
        directories = fs.directory.get_directories(path, pattern, recursive)
    except OSError as e:
        output.show_error(f"Cannot list {path}: {e}")
        raise typer.Exit(1) from e

    if not show_hidden:
        files = [f for f in files if not fs.path.get_file_name(f).startswith(".")]
        directories = [d for d in directories if not fs.path.get_file_name(d).startswith(".")]

    output.show_entries(path, sorted(files), sorted(directories))


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    output.show_settings(str(ctx.config.config_file), _load_settings(ctx.config))


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Configuration key")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
    _context=None,
) -> None:
    """Set a configuration value."""
    ctx = _context or create_context()

    try:
        ctx.config.set_value(key, value)
    except ValueError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e

    output.show_success(f"Set {key} to {value}")


if __name__ == "__main__":
    app()
