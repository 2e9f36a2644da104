"""Shared console output and file-writing helpers.

All user-facing output goes through the module-level Rich ``console`` so the
CLI and the generators report progress the same way.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from .discovery import kt_file

console = Console(highlight=False, soft_wrap=True)

_verbose = False


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def set_verbose(enabled: bool) -> None:
    """Toggle output of :func:`print_info` messages."""
    global _verbose
    _verbose = enabled


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print an error message as plain text on standard output."""
    console.print(message, markup=False, style="bold red")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(message, markup=False, style="bold yellow")


def print_info(message: str) -> None:
    """Print a dim detail line, only in verbose mode."""
    if _verbose:
        console.print(message, markup=False, style="dim")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def create_file(
    root: str | Path, name: str, content: str, *, overwrite: bool = True
) -> Path:
    """Write *content* to ``<root>/<name>.kt``, creating parent directories.

    Args:
        root: Directory that receives the file.
        name: Class name; the ``.kt`` extension is appended.
        content: Rendered source text.
        overwrite: When ``False`` an existing file is left untouched and
            ``FileExistsError`` is raised.

    Returns:
        Path of the written file.
    """
    path = Path(root) / kt_file(name)
    if not overwrite and path.exists():
        raise FileExistsError(f"file already exists {path}")
    console.print(f"creating file {path}", markup=False)
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    return path
