"""Rendering surfaces that hold line decorations.

A surface only knows how to attach a background color or trailing text to a
line and how to drop everything carrying a given owner tag. It knows nothing
about churn.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Literal, Optional, Union

from rich.console import Console
from rich.text import Text

DecorationKind = Literal["background", "annotation"]


@dataclass(frozen=True)
class Decoration:
    kind: DecorationKind
    line_number: int
    owner_tag: str
    color: Optional[str] = None  # background only, "#RRGGBB"
    text: Optional[str] = None  # annotation only
    style: Optional[str] = None  # annotation only, a rich style string


class RenderingSurface(ABC):
    """Abstract target for line decorations."""

    @abstractmethod
    def create_line_decoration(self, line_number: int, background_color: str, owner_tag: str) -> None:
        """Color the background of a whole line."""

    @abstractmethod
    def create_trailing_annotation(
        self, line_number: int, text: str, style: str, owner_tag: str
    ) -> None:
        """Append styled text after the end of a line."""

    @abstractmethod
    def remove_decorations(self, owner_tag: str) -> int:
        """Remove every decoration tagged ``owner_tag``; return how many were removed."""


class DecorationStore(RenderingSurface):
    """In-memory surface. Decorations are kept in creation order."""

    def __init__(self) -> None:
        self._decorations: list[Decoration] = []

    def create_line_decoration(self, line_number: int, background_color: str, owner_tag: str) -> None:
        self._decorations.append(
            Decoration(
                kind="background",
                line_number=line_number,
                owner_tag=owner_tag,
                color=background_color,
            )
        )

    def create_trailing_annotation(
        self, line_number: int, text: str, style: str, owner_tag: str
    ) -> None:
        self._decorations.append(
            Decoration(
                kind="annotation",
                line_number=line_number,
                owner_tag=owner_tag,
                text=text,
                style=style,
            )
        )

    def remove_decorations(self, owner_tag: str) -> int:
        before = len(self._decorations)
        self._decorations = [d for d in self._decorations if d.owner_tag != owner_tag]
        return before - len(self._decorations)

    def decorations(self, owner_tag: Optional[str] = None) -> list[Decoration]:
        """Snapshot of current decorations, optionally filtered by owner."""
        if owner_tag is None:
            return list(self._decorations)
        return [d for d in self._decorations if d.owner_tag == owner_tag]

    def for_line(self, line_number: int) -> list[Decoration]:
        return [d for d in self._decorations if d.line_number == line_number]

    def __len__(self) -> int:
        return len(self._decorations)


class TerminalSurface(DecorationStore):
    """A DecorationStore bound to a file's text, printable on a rich Console."""

    def __init__(self, lines: Iterable[str]) -> None:
        super().__init__()
        self.lines = [line.rstrip("\r\n") for line in lines]

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TerminalSurface":
        with open(path, encoding="utf-8", errors="replace") as f:
            return cls(f)

    def render_line(self, line_number: int) -> Text:
        """Build the styled text for one 1-based line."""
        content = self.lines[line_number - 1] if 0 < line_number <= len(self.lines) else ""
        text = Text()
        text.append(f"{line_number:>5} ", style="dim")
        # a blank line still needs one cell to carry the background
        body = Text(content or " ")
        annotations = []
        for decoration in self.for_line(line_number):
            if decoration.kind == "background":
                body.stylize(f"on {decoration.color}")
            else:
                annotations.append(decoration)
        text.append_text(body)
        for decoration in annotations:
            text.append(decoration.text or "", style=decoration.style or "")
        return text

    def show(
        self, console: Console, start: int = 1, end: Optional[int] = None
    ) -> None:
        """Print lines ``start..end`` (inclusive) with their decorations."""
        last = len(self.lines) if end is None else min(end, len(self.lines))
        for line_number in range(max(1, start), last + 1):
            console.print(self.render_line(line_number), soft_wrap=True, highlight=False)
