"""Apply churn heat overlays to a rendering surface."""

from __future__ import annotations

from typing import Sequence

from ..config import DEFAULT_CONFIG, ChurnMapConfig
from ..logging_config import get_logger
from ..scoring.colors import score_to_hex
from ..scoring.normalize import ScoredLine
from .surface import RenderingSurface

logger = get_logger(__name__)


def format_annotation(commit_count: int, arrow: str = "⟶") -> str:
    """Trailing marker such as ``"  ⟶ 5x"``."""
    return f"  {arrow} {commit_count}x"


class OverlayRenderer:
    """Owns every decoration churnmap puts on one surface.

    ``render`` and ``clear`` are the only methods that mutate the surface, and
    both touch decorations carrying ``owner_tag`` alone.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        owner_tag: str = "churn-owned",
        arrow: str = "⟶",
        annotation_style: str = "dim italic",
    ):
        self.surface = surface
        self.owner_tag = owner_tag
        self.arrow = arrow
        self.annotation_style = annotation_style

    @classmethod
    def from_config(cls, surface: RenderingSurface, config: ChurnMapConfig = DEFAULT_CONFIG):
        return cls(
            surface,
            owner_tag=config.owner_tag,
            arrow=config.annotation_arrow,
            annotation_style=config.annotation_style,
        )

    def render(self, scored_lines: Sequence[ScoredLine]) -> int:
        """Replace any previous overlay with one for ``scored_lines``.

        Returns the number of decorations created (two per line).
        """
        self.clear()
        created = 0
        for line in scored_lines:
            self.surface.create_line_decoration(
                line.line_number, score_to_hex(line.score), self.owner_tag
            )
            self.surface.create_trailing_annotation(
                line.line_number,
                format_annotation(line.commit_count, self.arrow),
                self.annotation_style,
                self.owner_tag,
            )
            created += 2
        logger.debug("Applied %d decorations", created)
        return created

    def clear(self) -> int:
        removed = self.surface.remove_decorations(self.owner_tag)
        if removed:
            logger.debug("Removed %d stale decorations", removed)
        return removed
