"""
mimesorter
==========

A command-line tool that sorts the files in a directory into subfolders named
after their detected MIME type.
"""

__version__ = "0.1.0"

from .classifier import (
    Classifier,
    ClassifierError,
    FileCommandClassifier,
    StaticClassifier,
    sanitize_label,
)
from .scanner import Plan, build_plan, is_excluded, iter_candidates
from .executor import apply_plan, destination_for, execute_plan, preview_plan

__all__ = [
    "Classifier",
    "ClassifierError",
    "FileCommandClassifier",
    "StaticClassifier",
    "sanitize_label",
    "Plan",
    "build_plan",
    "is_excluded",
    "iter_candidates",
    "apply_plan",
    "destination_for",
    "execute_plan",
    "preview_plan",
]
