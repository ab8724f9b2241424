"""Tests for set-relative score normalization."""

import pytest

from churnmap.history.models import LineRecord
from churnmap.scoring.normalize import ScoredLine, normalize_scores


def make_records(counts):
    return [LineRecord(line_number=i, commit_count=c) for i, c in enumerate(counts, start=1)]


class TestNormalizeScores:
    def test_empty_input(self):
        assert normalize_scores([]) == []

    def test_busiest_line_scores_one(self):
        scored = normalize_scores(make_records([3, 7, 1, 7]))
        assert max(s.score for s in scored) == pytest.approx(1.0)
        assert scored[1].score == pytest.approx(1.0)
        assert scored[3].score == pytest.approx(1.0)

    def test_zero_commits_scores_zero(self):
        scored = normalize_scores(make_records([0, 4, 0]))
        assert scored[0].score == 0.0
        assert scored[2].score == 0.0

    def test_all_zero_does_not_divide_by_zero(self):
        scored = normalize_scores(make_records([0, 0, 0]))
        assert [s.score for s in scored] == [0.0, 0.0, 0.0]

    def test_scores_are_relative(self):
        scored = normalize_scores(make_records([1, 5, 0]))
        assert [s.score for s in scored] == pytest.approx([0.2, 1.0, 0.0])

    def test_single_commit_line(self):
        scored = normalize_scores(make_records([1]))
        assert scored == [ScoredLine(line_number=1, commit_count=1, score=1.0)]

    def test_preserves_line_numbers_and_counts(self):
        records = [LineRecord(40, 2), LineRecord(41, 8)]
        scored = normalize_scores(records)
        assert [(s.line_number, s.commit_count) for s in scored] == [(40, 2), (41, 8)]

    def test_scores_are_plain_floats(self):
        scored = normalize_scores(make_records([2, 4]))
        assert all(type(s.score) is float for s in scored)
        assert all(0.0 <= s.score <= 1.0 for s in scored)
