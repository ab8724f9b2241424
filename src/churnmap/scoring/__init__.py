"""Churn scoring: set-relative normalization and heat colors."""

from .colors import RGB, score_to_hex, score_to_rgb
from .normalize import ScoredLine, normalize_scores

__all__ = ["RGB", "ScoredLine", "normalize_scores", "score_to_hex", "score_to_rgb"]
