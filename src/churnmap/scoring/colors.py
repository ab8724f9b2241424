"""Map churn scores onto a green → red gradient."""

from __future__ import annotations

import math
from typing import NamedTuple


class RGB(NamedTuple):
    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


def score_to_rgb(score: float) -> RGB:
    """Linear interpolation: 0.0 is pure green, 1.0 is pure red.

    Channels are floored, so 0.5 maps to (127, 127, 0). Out-of-range scores
    are clamped first.
    """
    score = min(1.0, max(0.0, score))
    return RGB(
        red=math.floor(score * 255),
        green=math.floor((1.0 - score) * 255),
        blue=0,
    )


def score_to_hex(score: float) -> str:
    return score_to_rgb(score).hex
