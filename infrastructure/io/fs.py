"""Filesystem utility functions."""

from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")
