"""
Console helpers for mimesorter.

All operator-facing output goes through the shared rich console so that
warnings, errors and plan lines share one style.
"""

from pathlib import Path
from rich.console import Console
from rich.markup import escape

# Global console instance
console = Console(highlight=False, soft_wrap=True)


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")

def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")

def print_info(msg: str):
    console.print(f"[yellow]{escape(msg)}[/yellow]")


def display_path(path: Path, root: Path) -> str:
    """
    Render a path relative to the scanned root when possible.

    Args:
        path: Path to render.
        root: Directory the plan was built from.

    Returns:
        A forward-slash path string, relative to root if path lives under it.
    """
    try:
        rel = path.relative_to(root)
    except ValueError:
        rel = path
    return rel.as_posix()
