"""Public API for churnmap.

Example:
    >>> from churnmap import visualize
    >>>
    >>> result = visualize("src/app.py", "10-20")
    >>> [(s.line_number, s.commit_count, round(s.score, 2)) for s in result.scored_lines]
    [(10, 3, 0.6), (11, 5, 1.0), ...]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_CONFIG, ChurnMapConfig
from .history.collector import collect_line_churn
from .history.models import LineRange, LineRecord
from .logging_config import get_logger
from .ranges import parse_line_range
from .render.overlay import OverlayRenderer
from .render.surface import DecorationStore, RenderingSurface, TerminalSurface
from .scoring.colors import score_to_hex
from .scoring.normalize import ScoredLine, normalize_scores

logger = get_logger(__name__)


@dataclass
class VisualizeResult:
    file_path: Optional[Path]
    line_range: Optional[LineRange]  # None = whole file
    surface: RenderingSurface
    records: list[LineRecord] = field(default_factory=list)
    scored_lines: list[ScoredLine] = field(default_factory=list)
    decoration_count: int = 0

    def to_dict(self) -> dict:
        commits = {r.line_number: list(r.commit_ids) for r in self.records}
        return {
            "file": str(self.file_path) if self.file_path else None,
            "range": str(self.line_range) if self.line_range else None,
            "lines": [
                {
                    "line_number": s.line_number,
                    "commit_count": s.commit_count,
                    "score": round(s.score, 4),
                    "color": score_to_hex(s.score),
                    "commit_ids": commits.get(s.line_number, []),
                }
                for s in self.scored_lines
            ],
        }


def _default_surface(file_path: Optional[Path]) -> RenderingSurface:
    if file_path is not None and file_path.is_file():
        return TerminalSurface.from_file(file_path)
    return DecorationStore()


def visualize(
    file_path: Optional[Union[str, Path]],
    raw_range: Optional[str] = "",
    surface: Optional[RenderingSurface] = None,
    config: Optional[ChurnMapConfig] = None,
) -> VisualizeResult:
    """Collect, score and render churn for a line range of one file.

    Every failure degrades: an invalid range falls back to the whole file, an
    untracked file renders nothing, and a failing git call counts as zero
    commits for that line. Stale churn decorations on ``surface`` are always
    cleared first.

    Args:
        file_path: File to analyze; None stands for an unsaved buffer
        raw_range: ``"N"``, ``"N-M"`` or empty for the whole file
        surface: Target surface; a TerminalSurface over the file by default
        config: Runtime configuration
    """
    config = config or DEFAULT_CONFIG
    path = Path(file_path) if file_path is not None else None
    if surface is None:
        surface = _default_surface(path)

    line_range = parse_line_range(raw_range)
    logger.info("Visualizing %s (lines %s)", path, line_range or "all")

    records = collect_line_churn(
        path,
        start=line_range.start if line_range else None,
        end=line_range.end if line_range else None,
        config=config,
    )
    scored = normalize_scores(records)

    renderer = OverlayRenderer.from_config(surface, config)
    count = renderer.render(scored)

    return VisualizeResult(
        file_path=path,
        line_range=line_range,
        surface=surface,
        records=records,
        scored_lines=scored,
        decoration_count=count,
    )


def clear(surface: RenderingSurface, config: Optional[ChurnMapConfig] = None) -> int:
    """Remove every churnmap decoration from ``surface``; return how many."""
    config = config or DEFAULT_CONFIG
    return OverlayRenderer.from_config(surface, config).clear()
