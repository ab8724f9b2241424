"""Normalize per-line commit counts into set-relative scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..history.models import LineRecord


@dataclass(frozen=True)
class ScoredLine:
    line_number: int
    commit_count: int
    score: float  # [0.0, 1.0], relative to the busiest line in the set


def normalize_scores(records: Sequence[LineRecord]) -> list[ScoredLine]:
    """Score each record as ``commit_count / max(1.0, max_count)``.

    The busiest line scores 1.0 and untouched lines score 0.0. Scores are
    relative to the analyzed set, so the same line can score differently
    when a narrower range is collected. An empty input returns ``[]``.
    """
    if not records:
        return []

    counts = np.array([r.commit_count for r in records], dtype=float)
    max_count = max(1.0, float(counts.max()))
    scores = np.clip(counts / max_count, 0.0, 1.0)

    return [
        ScoredLine(line_number=r.line_number, commit_count=r.commit_count, score=float(s))
        for r, s in zip(records, scores)
    ]
