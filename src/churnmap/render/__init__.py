"""Rendering: decoration surfaces and the churn overlay."""

from .overlay import OverlayRenderer, format_annotation
from .surface import Decoration, DecorationStore, RenderingSurface, TerminalSurface

__all__ = [
    "Decoration",
    "DecorationStore",
    "OverlayRenderer",
    "RenderingSurface",
    "TerminalSurface",
    "format_annotation",
]
