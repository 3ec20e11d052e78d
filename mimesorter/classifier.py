"""
Content-type classification for mimesorter.

The scanner only needs something with a `classify(path)` method that returns a
media-type string such as ``text/plain`` or raises ClassifierError. The default
implementation shells out to the host `file` utility.
"""

import subprocess
from pathlib import Path
from typing import Protocol

from .config import get_file_command


class ClassifierError(Exception):
    """Raised when a single file cannot be classified."""


class Classifier(Protocol):
    def classify(self, path: Path) -> str:
        ...


def sanitize_label(raw: str) -> str:
    """
    Turn a raw media type into a label usable as one path segment.

    Args:
        raw: Classifier output, e.g. "text/plain\\n".

    Returns:
        The trimmed type with every "/" replaced by "_", e.g. "text_plain".
    """
    return raw.strip().replace("/", "_")


class FileCommandClassifier:
    """Classify files by running `file -b --mime-type <path>`."""

    def __init__(self, command: str | None = None):
        self.command = command or get_file_command()

    def classify(self, path: Path) -> str:
        # `file` reads a bare "-" as stdin, even after "--"
        arg = str(path)
        if arg.startswith("-"):
            arg = f"./{arg}"

        try:
            result = subprocess.run(
                [self.command, "-b", "--mime-type", "--", arg],
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise ClassifierError(f"Failed to run `{self.command}` command: {e}") from e

        if result.returncode != 0:
            raise ClassifierError(
                f"`{self.command}` command exited with error code: {result.returncode}"
            )

        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ClassifierError(f"Failed to parse `{self.command}` output as UTF-8: {e}") from e

        lines = output.strip().splitlines()
        if not lines or not lines[0].strip():
            raise ClassifierError(f"`{self.command}` returned no type for {path}")
        return lines[0].strip()


class StaticClassifier:
    """
    Classifier backed by a fixed name -> type table.

    Useful for tests and for dry runs against known inventories. Files not in
    the table get `default`; without a default they fail to classify.
    """

    def __init__(self, types: dict[str, str], default: str | None = None):
        self.types = dict(types)
        self.default = default

    def classify(self, path: Path) -> str:
        mime_type = self.types.get(path.name, self.default)
        if mime_type is None:
            raise ClassifierError(f"No type known for {path.name}")
        return mime_type
