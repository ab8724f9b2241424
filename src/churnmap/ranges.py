"""Parse user-supplied line range specifiers such as ``10-20`` or ``15``."""

from __future__ import annotations

import re
from typing import Optional

from .exceptions import InvalidRangeError
from .history.models import LineRange
from .logging_config import get_logger

logger = get_logger(__name__)

_SPAN_RE = re.compile(r"^([0-9]+)-([0-9]+)$")
_SINGLE_RE = re.compile(r"^([0-9]+)$")


def parse_line_range_strict(raw: str) -> Optional[LineRange]:
    """Parse ``raw`` into a LineRange; ``None`` means the whole file.

    ``start <= end`` is not checked. An inverted span is returned as-is and
    collects no lines. Line numbers are 1-based, so 0 is rejected.

    Raises:
        InvalidRangeError: ``raw`` is neither ``N`` nor ``N-M``, or names line 0.
    """
    text = raw.strip()
    if not text:
        return None

    match = _SPAN_RE.match(text)
    if match:
        start, end = int(match.group(1)), int(match.group(2))
        if start < 1 or end < 1:
            raise InvalidRangeError(text)
        return LineRange(start=start, end=end)

    match = _SINGLE_RE.match(text)
    if match:
        line = int(match.group(1))
        if line < 1:
            raise InvalidRangeError(text)
        return LineRange(start=line, end=line)

    raise InvalidRangeError(text)


def parse_line_range(raw: Optional[str]) -> Optional[LineRange]:
    """Lenient variant: an invalid specifier logs a warning and selects the whole file."""
    if raw is None:
        return None
    try:
        return parse_line_range_strict(raw)
    except InvalidRangeError as e:
        logger.warning("%s, analyzing the whole file", e)
        return None
