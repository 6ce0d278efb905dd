"""CLI commands using Typer."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from fskit import __version__, fileops
from fskit.config import ConfigError, parse_mode
from fskit.console import Reporter
from fskit.context import create_context

app = typer.Typer(
    name="fskit",
    help="Filesystem convenience commands",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

reporter = Reporter()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        reporter.console.print(f"fskit v{__version__}")
        raise typer.Exit()


def verbose_callback(value: bool) -> None:
    """Send debug logs to the console."""
    if value:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=reporter.console, show_path=False)],
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
        bool,
        typer.Option("--verbose", "-v", callback=verbose_callback, help="Log debug output"),
    ] = False,
) -> None:
    """Filesystem convenience commands."""
    pass


@contextmanager
def _reporting_errors() -> Iterator[None]:
    """Report filesystem and config errors and exit with status 1."""
    try:
        yield
    except OSError as e:
        reporter.show_error(str(e))
        raise typer.Exit(1) from e
    except ConfigError as e:
        reporter.show_error(str(e))
        raise typer.Exit(1) from e


# ============================================================================
# File Commands
# ============================================================================


@app.command()
def exists(
    path: Annotated[Path, typer.Argument(help="Path to check")],
) -> None:
    """Exit with status 0 if the path exists, 1 otherwise."""
    with _reporting_errors():
        found = fileops.exists(path)
    if not found:
        reporter.show_info(f"{path} does not exist")
        raise typer.Exit(1)
    reporter.show_success(f"{path} exists")


@app.command()
def cat(
    path: Annotated[Path, typer.Argument(help="File to print")],
) -> None:
    """Print the content of a file."""
    with _reporting_errors():
        reporter.show_text(fileops.get_string(path))


@app.command()
def put(
    path: Annotated[Path, typer.Argument(help="File to write")],
    content: Annotated[str, typer.Argument(help="Text to write")],
    _context=None,
) -> None:
    """Write text to a file, replacing its content."""
    ctx = _context or create_context()
    with _reporting_errors():
        settings = ctx.config.load()
        fileops.put_string(path, content, settings.file_mode)
    reporter.show_success(f"Wrote {path}")


@app.command()
def append(
    path: Annotated[Path, typer.Argument(help="File to append to")],
    content: Annotated[str, typer.Argument(help="Text to append")],
    _context=None,
) -> None:
    """Append text to a file, creating it if needed."""
    ctx = _context or create_context()
    with _reporting_errors():
        settings = ctx.config.load()
        fileops.append(path, content.encode("utf-8"), settings.append_mode)
    reporter.show_success(f"Appended to {path}")


@app.command()
def prepend(
    path: Annotated[Path, typer.Argument(help="Existing file to prepend to")],
    content: Annotated[str, typer.Argument(help="Text to prepend")],
) -> None:
    """Insert text at the start of an existing file."""
    with _reporting_errors():
        fileops.prepend(path, content.encode("utf-8"))
    reporter.show_success(f"Prepended to {path}")


@app.command()
def chmod(
    mode: Annotated[str, typer.Argument(help="Octal mode, e.g. 644")],
    path: Annotated[Path, typer.Argument(help="Path to change")],
) -> None:
    """Change permission bits."""
    try:
        bits = parse_mode(mode)
    except ValueError as e:
        reporter.show_error(f"Invalid mode: {mode}")
        raise typer.Exit(1) from e
    with _reporting_errors():
        fileops.chmod(path, bits)
    reporter.show_success(f"Set mode of {path} to {bits:04o}")


@app.command()
def rm(
    paths: Annotated[list[Path], typer.Argument(help="Files to delete")],
) -> None:
    """Delete files, stopping at the first failure."""
    with _reporting_errors():
        fileops.delete(*paths)
    reporter.show_success(f"Deleted {len(paths)} file(s)")


@app.command()
def mv(
    src: Annotated[Path, typer.Argument(help="File to move")],
    dst: Annotated[Path, typer.Argument(help="New path")],
) -> None:
    """Move a file."""
    with _reporting_errors():
        fileops.move(src, dst)
    reporter.show_success(f"Moved {src} to {dst}")


@app.command()
def cp(
    src: Annotated[Path, typer.Argument(help="File to copy")],
    dst: Annotated[Path, typer.Argument(help="Destination file")],
    _context=None,
) -> None:
    """Copy a file's content."""
    ctx = _context or create_context()
    with _reporting_errors():
        settings = ctx.config.load()
        fileops.copy(src, dst, settings.file_mode)
    reporter.show_success(f"Copied {src} to {dst}")


@app.command()
def ln(
    target: Annotated[str, typer.Argument(help="Link target, stored verbatim")],
    link_name: Annotated[Path, typer.Argument(help="Symlink to create")],
) -> None:
    """Create a symbolic link."""
    with _reporting_errors():
        fileops.link(target, link_name)
    reporter.show_success(f"Linked {link_name} -> {target}")


@app.command()
def info(
    path: Annotated[Path, typer.Argument(help="Path to describe")],
) -> None:
    """Show path components, size and modification time."""
    with _reporting_errors():
        properties = {
            "name": fileops.name(path),
            "basename": fileops.basename(path),
            "dirname": fileops.dirname(path),
            "extension": fileops.extension(path),
            "size": str(fileops.size(path)),
            "modified": fileops.last_modified(path).isoformat(sep=" ", timespec="seconds"),
            "readable": "yes" if fileops.is_readable(path) else "no",
            "writable": "yes" if fileops.is_writable(path) else "no",
        }
    reporter.show_properties(str(path), properties)


# ============================================================================
# Directory Commands
# ============================================================================


@app.command("ls")
def list_directory(
    path: Annotated[Path, typer.Argument(help="Directory to list")] = Path("."),
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="List files in all subdirectories")
    ] = False,
    dirs: Annotated[
        bool, typer.Option("--dirs", "-d", help="List subdirectories instead of files")
    ] = False,
) -> None:
    """List files (or directories) of a directory."""
    with _reporting_errors():
        if dirs:
            names = fileops.directories(path)
        elif recursive:
            names = fileops.all_files(path)
        else:
            names = fileops.files(path)
    reporter.show_listing(names)


@app.command()
def mkdir(
    path: Annotated[Path, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parents")
    ] = False,
    _context=None,
) -> None:
    """Create a directory."""
    ctx = _context or create_context()
    with _reporting_errors():
        mode = ctx.config.load().directory_mode
        if parents:
            fileops.make_directories(path, mode)
        else:
            fileops.make_directory(path, mode)
    reporter.show_success(f"Created {path}")


@app.command()
def rmdir(
    path: Annotated[Path, typer.Argument(help="Directory to delete")],
) -> None:
    """Delete a directory and everything below it."""
    with _reporting_errors():
        fileops.delete_directory(path)
    reporter.show_success(f"Deleted {path}")


@app.command()
def mvdir(
    src: Annotated[Path, typer.Argument(help="Directory to move")],
    dst: Annotated[Path, typer.Argument(help="New path")],
) -> None:
    """Move a directory."""
    with _reporting_errors():
        fileops.move_directory(src, dst)
    reporter.show_success(f"Moved {src} to {dst}")


@app.command()
def copytree(
    src: Annotated[Path, typer.Argument(help="Directory to copy")],
    dst: Annotated[Path, typer.Argument(help="Destination directory")],
    _context=None,
) -> None:
    """Copy a directory tree, preserving ownership and permissions."""
    ctx = _context or create_context()
    with _reporting_errors():
        ctx.copier.copy(src, dst)
    reporter.show_success(f"Copied {src} to {dst}")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    with _reporting_errors():
        settings = ctx.config.load()
    reporter.show_settings(settings, str(ctx.config.config_file))


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="file-mode, append-mode or directory-mode")],
    value: Annotated[str, typer.Argument(help="Octal mode, e.g. 644")],
    _context=None,
) -> None:
    """Set a configuration value."""
    ctx = _context or create_context()
    with _reporting_errors():
        ctx.config.set_value(key, value)
    reporter.show_success(f"Set {key} to {value}")


if __name__ == "__main__":
    app()
