"""History-related exceptions: untracked files, failed git commands, bad ranges.

None of these escape the visualize pipeline. Each is raised at the point of
failure and caught one layer up, where it degrades into an empty or
whole-file result.
"""

from pathlib import Path
from typing import Optional, Sequence

from .base import ChurnMapError


class HistoryError(ChurnMapError):
    """Base class for history-related errors."""
    pass


class UntrackedFileError(HistoryError):
    """Raised when a file is not under version control or has no path."""

    def __init__(self, path: Optional[Path], reason: str):
        super().__init__(
            f"File is not tracked: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class HistoryCommandError(HistoryError):
    """Raised when a git subprocess exits non-zero or cannot be started."""

    def __init__(self, command: Sequence[str], returncode: Optional[int], stderr: str = ""):
        details = {"command": " ".join(command)}
        if returncode is not None:
            details["returncode"] = str(returncode)
        if stderr:
            details["stderr"] = stderr.strip()
        super().__init__("git command failed", details=details)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class InvalidRangeError(HistoryError):
    """Raised when a line-range specifier matches no known form or names line 0."""

    def __init__(self, raw: str):
        super().__init__(
            f"Invalid line range: {raw!r}",
            details={"expected": "N or N-M, 1-based"},
        )
        self.raw = raw
