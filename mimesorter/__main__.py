#!/usr/bin/env python3
"""
mimesorter - CLI Entry Point
============================

Usage:
    python -m mimesorter --dry-run     # preview the moves
    python -m mimesorter --do-work     # sort the current directory
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .classifier import FileCommandClassifier
from .config import get_default_jobs
from .executor import apply_plan
from .scanner import build_plan
from .utils import print_error, print_info


def positive_int(value: str) -> int:
    jobs = int(value)
    if jobs < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return jobs


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mimesorter",
        description="sort your files by MIME type",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--dry-run", action="store_true",
                        help="Show what would be moved without touching any files")
    parser.add_argument("--do-work", action="store_true",
                        help="Create the type folders and move the files")
    parser.add_argument("-j", "--jobs", type=positive_int, default=None, metavar="N",
                        help="Classify N files at once (default: $MIMESORTER_JOBS or 1)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    # By default, print help
    if not args.dry_run and not args.do_work:
        parser.print_help()
        return 0

    if args.dry_run and args.do_work:
        print_error("--dry-run and --do-work are mutually exclusive")
        parser.print_help()
        return 2

    if args.dry_run:
        print_info("[!] dry-run in progress, pass --do-work to organize files based on this preview")

    root = Path(".")
    jobs = args.jobs if args.jobs is not None else get_default_jobs()

    try:
        plan = build_plan(root, FileCommandClassifier(), jobs=jobs, progress=sys.stderr.isatty())
        apply_plan(root, plan, dry_run=args.dry_run)
    except RuntimeError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
