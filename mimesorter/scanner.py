"""
Directory scanning and plan building.

Functions for listing the immediate children of a directory, filtering out
excluded names and directories, and grouping the rest by detected media type.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator

from tqdm import tqdm

from .classifier import Classifier, ClassifierError, sanitize_label
from .config import DIRECTORY_SENTINEL, EXCLUDED_PATTERNS
from .utils import print_warning

Plan = dict[str, list[Path]]


def is_excluded(name: str, patterns: Iterable[str] = EXCLUDED_PATTERNS) -> bool:
    """
    Check a bare file name against the exclusion patterns.

    Matching is case-insensitive and wildcards match a leading dot, so "._*"
    catches "._foo" and "*~" catches ".bashrc~". Patterns without wildcards
    only match that exact name.
    """
    name_lower = name.lower()
    return any(fnmatchcase(name_lower, pattern.lower()) for pattern in patterns)


def _read_entries(root: Path, it: Iterable[os.DirEntry]) -> Iterator[os.DirEntry]:
    """Pull entries one at a time so a failed read only loses that entry."""
    iterator = iter(it)
    while True:
        try:
            entry = next(iterator)
        except StopIteration:
            return
        except OSError as e:
            print_warning(f"Error reading an entry of '{root}': {e}")
            continue
        yield entry


def iter_candidates(root: Path) -> Iterator[Path]:
    """
    Yield the non-directory, non-excluded children of root.

    Args:
        root: Directory to list. Not descended into.

    Yields:
        Paths of the form root / name, sorted by name.

    Raises:
        RuntimeError: If root itself cannot be opened for listing.
    """
    try:
        listing = os.scandir(root)
    except OSError as e:
        raise RuntimeError(f"Error reading directory '{root}': {e}") from e

    with listing as it:
        entries = sorted(_read_entries(root, it), key=lambda e: e.name)

    for entry in entries:
        if entry.name in (".", ".."):
            continue

        if is_excluded(entry.name):
            continue

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            print_warning(f"Error processing entry '{entry.name}': {e}")
            continue

        if is_dir:
            continue

        yield root / entry.name


def _classify(classifier: Classifier, path: Path) -> tuple[Path, str | None]:
    """Classify one file, turning classifier failures into a warning."""
    try:
        label = sanitize_label(classifier.classify(path))
    except ClassifierError as e:
        print_warning(f"Skipping '{path.name}': {e}")
        return path, None

    if not label:
        print_warning(f"Skipping '{path.name}': classifier returned an empty type")
        return path, None
    return path, label


def build_plan(
    root: Path,
    classifier: Classifier,
    jobs: int = 1,
    progress: bool = False
) -> Plan:
    """
    Group the files directly under root by their sanitized media type.

    Args:
        root: Directory to scan.
        classifier: Source of media types for individual files.
        jobs: Number of classifier calls to run at once. Results are consumed
            in listing order either way, so the plan does not depend on it.
        progress: Show a progress bar while classifying.

    Returns:
        Mapping of label -> paths, in first-seen order.

    Raises:
        RuntimeError: If root cannot be read. Nothing is classified in that case.
    """
    candidates = list(iter_candidates(root))
    plan: Plan = {}

    with tqdm(total=len(candidates), unit="file", desc="Classifying",
              disable=not progress, leave=False) as pbar:
        if jobs > 1:
            with ThreadPoolExecutor(max_workers=jobs) as executor:
                results = executor.map(lambda p: _classify(classifier, p), candidates)
                _collect(results, plan, pbar)
        else:
            results = (_classify(classifier, p) for p in candidates)
            _collect(results, plan, pbar)

    return plan


def _collect(results: Iterable[tuple[Path, str | None]], plan: Plan, pbar: tqdm) -> None:
    for path, label in results:
        pbar.update(1)
        if label is None or label == DIRECTORY_SENTINEL:
            continue
        plan.setdefault(label, []).append(path)
