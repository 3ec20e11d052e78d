"""
Plan execution for mimesorter.

Applies (or previews) a label -> files plan against the scanned directory.
"""

from pathlib import Path

from rich.markup import escape

from .scanner import Plan
from .utils import console, display_path, print_error


def destination_for(root: Path, label: str, path: Path) -> Path:
    """Return where a planned file ends up: root/label/<file name>."""
    return root / label / path.name


def _new_report(root: Path, dry_run: bool) -> dict:
    return {
        "root": str(root),
        "dry_run": dry_run,
        "created_folders": [],
        "moved": [],
        "failed": [],
    }


def preview_plan(root: Path, plan: Plan) -> dict:
    """
    Print what execute mode would do, without touching the filesystem.

    Every group gets a "would create" line whether or not the directory
    already exists.
    """
    report = _new_report(root, dry_run=True)

    for label, paths in plan.items():
        console.print(f"[yellow]\\[WOULD CREATE][/yellow] {escape(label)}")
        report["created_folders"].append(label)

        for path in paths:
            src = display_path(path, root)
            dst = display_path(destination_for(root, label, path), root)
            console.print(f"[cyan]\\[WOULD MOVE][/cyan] [dim]{escape(src)} -> {escape(dst)}[/dim]")
            report["moved"].append((src, dst))

    return report


def _move_file(src: Path, dst: Path) -> str | None:
    """Rename src to dst. Returns an error message, or None on success."""
    if dst.exists():
        return "Destination exists"

    try:
        src.rename(dst)
    except OSError as e:
        return str(e)
    return None


def execute_plan(root: Path, plan: Plan) -> dict:
    """
    Create one directory per label and move each file into it.

    Failures are reported and skipped; nothing is rolled back. A directory that
    could not be created still has its moves attempted, and those fail one by
    one.
    """
    report = _new_report(root, dry_run=False)

    for label, paths in plan.items():
        type_dir = root / label

        if not type_dir.exists():
            try:
                type_dir.mkdir()
                console.print(f"[green]\\[CREATED][/green] {escape(label)}")
                report["created_folders"].append(label)
            except OSError as e:
                print_error(f"Error creating directory '{label}': {e}")

        for path in paths:
            dst = destination_for(root, label, path)
            src_display = display_path(path, root)
            dst_display = display_path(dst, root)

            error = _move_file(path, dst)
            if error is None:
                console.print(f"[blue]\\[MOVED][/blue] [dim]{escape(src_display)} -> {escape(dst_display)}[/dim]")
                report["moved"].append((src_display, dst_display))
            else:
                print_error(f"Error moving '{src_display}' -> '{dst_display}': {error}")
                report["failed"].append((src_display, error))

    return report


def apply_plan(root: Path, plan: Plan, dry_run: bool = True) -> dict:
    """
    Apply (or simulate) the plan.

    Args:
        root: Directory the plan was built from.
        plan: Mapping of label -> file paths from build_plan.
        dry_run: If True, only print the moves.

    Returns:
        Report dict with created_folders, moved and failed entries.
    """
    if dry_run:
        return preview_plan(root, plan)
    return execute_plan(root, plan)
