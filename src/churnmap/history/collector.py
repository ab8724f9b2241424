"""Collect per-line commit counts over a line range."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_CONFIG, ChurnMapConfig
from ..exceptions import UntrackedFileError
from ..logging_config import get_logger
from .models import LineRecord
from .query import LineHistoryQuery, require_tracked

logger = get_logger(__name__)


def count_lines(path: Union[str, Path]) -> int:
    """Number of lines in a text file (a missing trailing newline still counts)."""
    with open(path, "rb") as f:
        return sum(1 for _ in f)


def collect_line_churn(
    file_path: Optional[Union[str, Path]],
    start: Optional[int] = None,
    end: Optional[int] = None,
    total_lines: Optional[int] = None,
    config: Optional[ChurnMapConfig] = None,
    query: Optional[LineHistoryQuery] = None,
) -> list[LineRecord]:
    """Build a LineRecord for every line in ``[start or 1, end or total_lines]``.

    An untracked file (or no file at all) yields an empty list rather than an
    error. Records come back in ascending line order even when queries run on
    a thread pool.

    Args:
        file_path: File to analyze
        start: First line (1-based), defaults to 1
        end: Last line (inclusive), defaults to total_lines
        total_lines: Fallback end; counted from disk when omitted
        config: Runtime configuration (git binary, workers, ...)
        query: Pre-built history query, mainly for tests
    """
    config = config or DEFAULT_CONFIG

    if file_path is None:
        logger.info("Nothing to visualize: no backing file")
        return []

    if query is None:
        try:
            repo_root = require_tracked(file_path, git_executable=config.git_executable)
        except UntrackedFileError as e:
            logger.info("Nothing to visualize: %s", e)
            return []
        query = LineHistoryQuery.from_config(repo_root, config)

    if end is None:
        end = total_lines if total_lines is not None else count_lines(file_path)
    # line numbers are 1-based; an explicit 0 is clamped, not treated as unset
    first = 1 if start is None else max(1, start)
    line_numbers = list(range(first, end + 1))
    if not line_numbers:
        return []

    if config.workers > 1 and len(line_numbers) > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as executor:
            # map() yields in submission order, so results stay sorted by line
            histories = list(
                executor.map(lambda n: query.commits_for_line(file_path, n), line_numbers)
            )
    else:
        histories = [query.commits_for_line(file_path, n) for n in line_numbers]

    records = []
    for line_number, commit_ids in zip(line_numbers, histories):
        logger.info("line %d: %d commits", line_number, len(commit_ids))
        if commit_ids:
            logger.debug("line %d commits: %s", line_number, ", ".join(commit_ids))
        records.append(
            LineRecord(
                line_number=line_number,
                commit_count=len(commit_ids),
                commit_ids=tuple(commit_ids),
            )
        )
    return records
