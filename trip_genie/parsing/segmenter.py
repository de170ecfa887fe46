# trip_genie/parsing/segmenter.py

"""
Split generated travel-plan text into titled sections.

Generated plans come back with whatever structure the model felt like
producing, so segmentation runs in three tiers and stops at the first one
that yields anything:

1. Structured: lines that start with a numbered marker ("7. ") or a
   heading marker ("## ") open a new section; the text up to the next such
   line is its content.
2. Heuristic: short lines that do not end with a period are treated as
   titles; content runs until the next bullet or numbered line.
3. Fallback: the whole text under DEFAULT_TITLE.

None of the tiers raise. Sections with blank content are never emitted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from trip_genie.models.section import Section

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Travel Recommendations"
MAX_TITLE_CHARS = 100
BULLET_GLYPH = "•"

# Ordered: the first pattern that matches a line wins. Digits are ASCII only;
# separators are any whitespace short of a line break. Numbered headers may
# be wrapped in emphasis ("**1. Transport**").
HEADER_PATTERNS: Tuple[Tuple[str, re.Pattern[str]], ...] = (
    ("numbered", re.compile(r"^[^\S\n]*\*{0,2}[0-9]+\.[^\S\n]+(?P<title>\S.*)$")),
    ("heading", re.compile(r"^[^\S\n]*#{1,6}[^\S\n]+(?P<title>\S.*)$")),
)

_NUMBERED_PREFIX = re.compile(r"^[0-9]+\.")
_EMPHASIS_CHARS = "*"


class SegmentationStrategy(str, Enum):
    """
    Which tier produced a segmentation.
    """
    STRUCTURED = "structured"
    HEURISTIC = "heuristic"
    FALLBACK = "fallback"
    EMPTY = "empty"


@dataclass
class Segmentation:
    sections: List[Section] = field(default_factory=list)
    strategy: SegmentationStrategy = SegmentationStrategy.EMPTY


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _iter_lines(text: str) -> Iterator[Tuple[int, int, str]]:
    """
    Yield (start, end, line) for every "\\n"-separated line.

    `end` points just past the line break (or at end-of-text for the last
    line), so text[end:] is everything after the line.
    """
    start = 0
    for line in text.split("\n"):
        end = min(start + len(line) + 1, len(text))
        yield start, end, line.rstrip("\r")
        start = end


def _append_section(sections: List[Section], title: str, content: str) -> None:
    content = content.strip()
    if content:
        sections.append(Section(title=title, content=content))


def match_header(line: str) -> Optional[str]:
    """
    Return the trimmed title if `line` is a structural header, else None.
    """
    for _kind, pattern in HEADER_PATTERNS:
        m = pattern.match(line)
        if m:
            title = m.group("title").strip().strip(_EMPHASIS_CHARS).strip()
            return title or None
    return None


def _looks_like_title(line: str) -> bool:
    return 0 < len(line) < MAX_TITLE_CHARS and not line.endswith(".")


def _starts_next_section(line: str) -> bool:
    # Stricter than _looks_like_title: a plain short line never closes the
    # section being accumulated.
    if not _looks_like_title(line):
        return False
    return line.startswith(BULLET_GLYPH) or _NUMBERED_PREFIX.match(line) is not None


# ---------------------------------------------------------------------------
# Tiers
# ---------------------------------------------------------------------------


def _segment_structured(text: str) -> List[Section]:
    sections: List[Section] = []
    title: Optional[str] = None
    cursor = 0

    for start, end, line in _iter_lines(text):
        header = match_header(line)
        if header is None:
            continue
        if title is not None:
            _append_section(sections, title, text[cursor:start])
        title = header
        cursor = end

    if title is not None:
        _append_section(sections, title, text[cursor:])

    return sections


def _segment_by_lines(text: str) -> List[Section]:
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    sections: List[Section] = []

    i = 0
    while i < len(lines):
        title = lines[i]
        if not _looks_like_title(title):
            i += 1
            continue

        j = i + 1
        buffer: List[str] = []
        while j < len(lines) and not _starts_next_section(lines[j]):
            buffer.append(lines[j] + "\n")
            j += 1

        _append_section(sections, title, "".join(buffer))

        # Resume at the boundary line so it gets a chance to be a title.
        i = j

    return sections


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def segment_with_strategy(text: Optional[str]) -> Segmentation:
    """
    Segment `text` and report which tier produced the result.
    """
    if not text or not text.strip():
        return Segmentation()

    sections = _segment_structured(text)
    strategy = SegmentationStrategy.STRUCTURED

    if not sections:
        sections = _segment_by_lines(text)
        strategy = SegmentationStrategy.HEURISTIC

    if not sections:
        sections = [Section(title=DEFAULT_TITLE, content=text)]
        strategy = SegmentationStrategy.FALLBACK

    logger.debug(
        "Segmented %d chars into %d section(s) using %s strategy",
        len(text),
        len(sections),
        strategy.value,
    )
    return Segmentation(sections=sections, strategy=strategy)


def segment(text: Optional[str]) -> List[Section]:
    """
    Split generated text into an ordered list of titled sections.

    Returns an empty list only for empty or whitespace-only input; any other
    input yields at least one section.
    """
    return segment_with_strategy(text).sections
