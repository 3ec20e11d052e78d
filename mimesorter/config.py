"""
Settings for mimesorter.

Constants live here; the few tunables are read from the environment, with a
`.env` file in the working directory loaded first.
"""

import os

from dotenv import load_dotenv

from .utils import print_warning

load_dotenv()

# Names never classified or moved. Matched case-insensitively against the
# bare file name, with glob wildcards allowed to match a leading dot.
EXCLUDED_PATTERNS = (
    ".DS_Store", "._*",                          # macOS
    "Thumbs.db", "desktop.ini", "$RECYCLE.BIN",  # Windows
    ".directory", ".hidden", ".Trash-*",         # Linux
    "*.swp", "*~",                               # Vim/Emacs swap files
    ".lock",                                     # Lock files
    ".git", ".svn", ".hg", ".bzr",               # Version control
    ".idea",                                     # IntelliJ IDEA
    ".vscode",                                   # Visual Studio Code
)

# Label `file` reports for directory-like inodes, after sanitizing
DIRECTORY_SENTINEL = "inode_directory"

DEFAULT_FILE_COMMAND = "file"
DEFAULT_JOBS = 1

FILE_COMMAND_ENV = "MIMESORTER_FILE_COMMAND"
JOBS_ENV = "MIMESORTER_JOBS"


def get_file_command() -> str:
    """Return the classifier executable, honouring MIMESORTER_FILE_COMMAND."""
    return os.environ.get(FILE_COMMAND_ENV) or DEFAULT_FILE_COMMAND


def get_default_jobs() -> int:
    """
    Return the default classifier parallelism from MIMESORTER_JOBS.

    Returns:
        The configured worker count, or DEFAULT_JOBS when unset or invalid.
    """
    raw = os.environ.get(JOBS_ENV)
    if not raw:
        return DEFAULT_JOBS

    try:
        jobs = int(raw)
    except ValueError:
        print_warning(f"Ignoring {JOBS_ENV}={raw!r}: not an integer")
        return DEFAULT_JOBS

    if jobs < 1:
        print_warning(f"Ignoring {JOBS_ENV}={raw!r}: must be at least 1")
        return DEFAULT_JOBS
    return jobs
