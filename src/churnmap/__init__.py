"""
churnmap - line-level churn heatmaps from git history

Counts the commits that touched each line of a file, scores every line
relative to the busiest one, and paints the result as a green-to-red
background with a trailing commit-count marker.
"""

__version__ = "0.1.0"

from .api import VisualizeResult, clear, visualize
from .history import LineRange, LineRecord, collect_line_churn
from .ranges import parse_line_range
from .render import DecorationStore, OverlayRenderer, RenderingSurface, TerminalSurface
from .scoring import ScoredLine, normalize_scores, score_to_hex, score_to_rgb

__all__ = [
    "visualize",  # Main entry point
    "clear",
    "VisualizeResult",
    "LineRange",
    "LineRecord",
    "ScoredLine",
    "collect_line_churn",
    "normalize_scores",
    "parse_line_range",
    "score_to_rgb",
    "score_to_hex",
    "OverlayRenderer",
    "RenderingSurface",
    "DecorationStore",
    "TerminalSurface",
]
