"""Line history: git queries and per-line churn collection."""

from .collector import collect_line_churn, count_lines
from .models import LineRange, LineRecord
from .query import LineHistoryQuery, find_repo_root, is_tracked, require_tracked, run_git

__all__ = [
    "LineRange",
    "LineRecord",
    "LineHistoryQuery",
    "collect_line_churn",
    "count_lines",
    "find_repo_root",
    "is_tracked",
    "require_tracked",
    "run_git",
]
