"""Block parser for normalized transcript text.

Turns normalized text (see :func:`~transcript_engine.compressor.normalize_transcript`)
into an ordered list of :mod:`~transcript_engine.models.blocks`.  Each line is
offered to an ordered tuple of classifiers, :data:`CLASSIFIERS`; the first one
that returns a result wins, and a line nobody claims becomes a
:class:`~transcript_engine.models.blocks.Paragraph`.

Adjacent bullet lines are buffered and emitted as a single
:class:`~transcript_engine.models.blocks.BulletList` once a blank line, any
other kind of line, or the end of the input is reached.

Parsing never raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Union

from rapidfuzz.fuzz import ratio

from transcript_engine.markdown import strip_markdown
from transcript_engine.markers import (
    DEFAULT_MARKERS,
    HEADING,
    SPEAKER,
    SPEAKER_NUMBER_PATTERN,
    SPEAKER_WORD,
    SPEAKER_WORD_PATTERN,
    MarkerTable,
    disclaimer_pattern,
    icon_alternation,
)
from transcript_engine.models.blocks import (
    Block,
    BulletList,
    Heading,
    Paragraph,
    SpeakerTurn,
)
from transcript_engine.speakers import canonical_speaker_label, speaker_label

logger = logging.getLogger(__name__)

# Minimum rapidfuzz ratio for an unknown word to count as a misspelt
# speaker word in the fallback speaker classifier.
FUZZY_SPEAKER_THRESHOLD = 80.0

# Descriptors that just say "title" and are dropped from Heading.detail.
_PLAIN_TITLE_DESCRIPTORS = frozenset({"BAŞLIK", "TITLE"})

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"^[-_*]{3,}$")
_BOLD_SPEAKER_RE = re.compile(
    rf"^\*{{0,2}}{SPEAKER_WORD_PATTERN}\s*{SPEAKER_NUMBER_PATTERN}\*{{0,2}}"
    r"\s*(?:\[([^\]]*)\])?\s*:\s*(.*)$",
    re.IGNORECASE,
)
_BOLD_HEADING_RE = re.compile(r"^\*{2,}([^*]+)\*{2,}\s*:?$")
_ATX_HEADING_RE = re.compile(r"^#{1,3}(?!#)\s*(.*)$")
_FUZZY_SPEAKER_RE = re.compile(
    rf"^\*{{0,2}}([^\W\d_]+)\s*{SPEAKER_NUMBER_PATTERN}\*{{0,2}}"
    r"\s*\[([^\]]*)\]\s*:\s*(.*)$"
)


# ---------------------------------------------------------------------------
# Classification results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ignored:
    """A line that produces no block (separator, boilerplate).

    Attributes:
        reason: Name of the classifier that discarded the line.
    """

    reason: str


@dataclass(frozen=True)
class BulletItem:
    """A bullet line waiting to be merged into a :class:`BulletList`."""

    text: str


Classification = Union[Block, Ignored, BulletItem]
Classifier = Callable[[str, MarkerTable], Union[Classification, None]]


@dataclass(frozen=True)
class _LinePatterns:
    icon_speaker: re.Pattern[str]
    icon_heading: re.Pattern[str]
    bullet: re.Pattern[str]


@lru_cache(maxsize=32)
def _patterns(markers: MarkerTable) -> _LinePatterns:
    return _LinePatterns(
        icon_speaker=re.compile(
            rf"^{icon_alternation(markers, SPEAKER)}\s*(.*?)\s*(?:\[([^\]]*)\])?\s*:\s*(.*)$"
        ),
        icon_heading=re.compile(rf"^{icon_alternation(markers, HEADING)}\s*(.*)$"),
        bullet=re.compile(rf"^(?:-|{re.escape(markers.bullet_glyph)})\s+(.*)$"),
    )


def _time_or_none(raw: str | None) -> str | None:
    time = strip_markdown(raw or "")
    return time or None


# ---------------------------------------------------------------------------
# Classifiers, in priority order
# ---------------------------------------------------------------------------


def classify_separator(line: str, markers: MarkerTable) -> Classification | None:
    """Decorative rules such as ``---``, ``***`` or ``_ _ _``."""
    if _SEPARATOR_RE.match(_WHITESPACE_RE.sub("", line)):
        return Ignored("separator")
    return None


def classify_disclaimer(line: str, markers: MarkerTable) -> Classification | None:
    """Boilerplate the AI service prepends to its answers."""
    pattern = disclaimer_pattern(markers)
    if pattern is not None and pattern.match(line):
        return Ignored("disclaimer")
    return None


def classify_bold_speaker(line: str, markers: MarkerTable) -> Classification | None:
    """``**Konuşmacı 2** [00:14]: ...`` and unbolded or misspelt variants."""
    match = _BOLD_SPEAKER_RE.match(line)
    if not match:
        return None
    return SpeakerTurn(
        speaker=speaker_label(int(match.group(1))),
        content=strip_markdown(match.group(3)),
        time=_time_or_none(match.group(2)),
    )


def classify_icon_speaker(line: str, markers: MarkerTable) -> Classification | None:
    """``👤 Label [time]: content`` with any label, including legacy ones."""
    match = _patterns(markers).icon_speaker.match(line)
    if not match:
        return None
    return SpeakerTurn(
        speaker=canonical_speaker_label(strip_markdown(match.group(1))),
        content=strip_markdown(match.group(3)),
        time=_time_or_none(match.group(2)),
    )


def classify_bullet(line: str, markers: MarkerTable) -> Classification | None:
    """``- item`` or ``• item``."""
    match = _patterns(markers).bullet.match(line)
    if not match:
        return None
    return BulletItem(strip_markdown(match.group(1)))


def classify_bold_heading(line: str, markers: MarkerTable) -> Classification | None:
    """A line that is nothing but ``**Title**``."""
    match = _BOLD_HEADING_RE.match(line)
    if not match:
        return None
    title = strip_markdown(match.group(1))
    return Heading(title=title) if title else None


def classify_atx_heading(line: str, markers: MarkerTable) -> Classification | None:
    """``# Title`` through ``### Title``."""
    match = _ATX_HEADING_RE.match(line)
    if not match:
        return None
    title = strip_markdown(match.group(1))
    return Heading(title=title) if title else None


def classify_icon_heading(line: str, markers: MarkerTable) -> Classification | None:
    """``📋 Descriptor: Title`` or ``📋 Title``.

    The descriptor becomes :attr:`Heading.detail` unless it merely reads
    "title" (``BAŞLIK``).
    """
    match = _patterns(markers).icon_heading.match(line)
    if not match:
        return None

    descriptor, colon, rest = match.group(1).partition(":")
    if colon:
        title = strip_markdown(rest)
        detail = strip_markdown(descriptor)
        if detail.upper() in _PLAIN_TITLE_DESCRIPTORS:
            detail = ""
    else:
        title = strip_markdown(descriptor)
        detail = ""

    if not title:
        return None
    return Heading(title=title, detail=detail or None)


def classify_fuzzy_speaker(line: str, markers: MarkerTable) -> Classification | None:
    """``Konşmacı 3 [01:02]: ...``: an unknown misspelling plus a timestamp.

    Only accepted when the word is close enough to the speaker word and a
    bracketed time precedes the colon.
    """
    match = _FUZZY_SPEAKER_RE.match(line)
    if not match:
        return None

    word = match.group(1)
    score = ratio(word.casefold(), SPEAKER_WORD.casefold())
    if score < FUZZY_SPEAKER_THRESHOLD:
        return None

    logger.debug("Treating %r as speaker word (score %.1f)", word, score)
    return SpeakerTurn(
        speaker=speaker_label(int(match.group(2))),
        content=strip_markdown(match.group(4)),
        time=_time_or_none(match.group(3)),
    )


CLASSIFIERS: tuple[tuple[str, Classifier], ...] = (
    ("separator", classify_separator),
    ("disclaimer", classify_disclaimer),
    ("bold_speaker", classify_bold_speaker),
    ("icon_speaker", classify_icon_speaker),
    ("bullet", classify_bullet),
    ("bold_heading", classify_bold_heading),
    ("atx_heading", classify_atx_heading),
    ("icon_heading", classify_icon_heading),
    ("fuzzy_speaker", classify_fuzzy_speaker),
)


def classify_line(line: str, markers: MarkerTable = DEFAULT_MARKERS) -> Classification:
    """Classify a single non-blank, trimmed line.

    Args:
        line: The line to classify, already stripped of surrounding
            whitespace.
        markers: Sentinel table for icons, bullets and disclaimers.

    Returns:
        The result of the first classifier that claims the line, or a
        :class:`Paragraph` with the markdown-stripped line.
    """
    for _name, classifier in CLASSIFIERS:
        result = classifier(line, markers)
        if result is not None:
            return result
    return Paragraph(content=strip_markdown(line))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_blocks(text: str, markers: MarkerTable = DEFAULT_MARKERS) -> list[Block]:
    """Parse normalized transcript text into an ordered list of blocks.

    Args:
        text: Normalized transcript text.  Lines end at LF, CRLF or CR,
            as in :func:`~transcript_engine.compressor.normalize_transcript`;
            other Unicode line separators stay inside the line.
        markers: Sentinel table for icons, bullets and disclaimers.
            Defaults to :data:`~transcript_engine.markers.DEFAULT_MARKERS`.

    Returns:
        Blocks in input order.  Consecutive bullet lines become one
        :class:`BulletList`; separators and disclaimers produce nothing.
    """
    if not text or not text.strip():
        return []

    blocks: list[Block] = []
    pending: list[str] = []
    ignored = 0

    def _flush_bullets() -> None:
        """Emit the buffered bullet items as one list, if any."""
        if pending:
            blocks.append(BulletList(items=tuple(pending)))
            pending.clear()

    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            _flush_bullets()
            continue

        result = classify_line(line, markers)

        if isinstance(result, BulletItem):
            # Empty items (e.g. "- **") are absorbed without breaking the list.
            if result.text:
                pending.append(result.text)
            continue

        _flush_bullets()

        if isinstance(result, Ignored):
            ignored += 1
            continue

        blocks.append(result)

    _flush_bullets()

    logger.debug("Parsed %d block(s), ignored %d line(s)", len(blocks), ignored)
    return blocks
