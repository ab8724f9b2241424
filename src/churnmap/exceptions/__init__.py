"""Exception hierarchy for churnmap."""

from .base import ChurnMapError
from .config import ConfigurationError, InvalidConfigError
from .history import (
    HistoryCommandError,
    HistoryError,
    InvalidRangeError,
    UntrackedFileError,
)

__all__ = [
    "ChurnMapError",
    "HistoryError",
    "HistoryCommandError",
    "UntrackedFileError",
    "InvalidRangeError",
    "ConfigurationError",
    "InvalidConfigError",
]
