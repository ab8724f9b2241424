"""Data models for per-line history."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineRecord:
    line_number: int  # 1-based
    commit_count: int
    commit_ids: tuple[str, ...] = ()  # oldest first


@dataclass(frozen=True)
class LineRange:
    """Inclusive 1-based line range.

    ``start <= end`` is not enforced here; an inverted range simply selects
    no lines when collected.
    """

    start: int
    end: int

    @classmethod
    def whole_file(cls, total_lines: int) -> "LineRange":
        return cls(start=1, end=total_lines)

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"
