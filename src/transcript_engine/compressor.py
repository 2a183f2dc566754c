"""Speaker run compression.

Collapses consecutive lines from the same numbered speaker so the header is
written once and the following lines become indented continuation bullets::

    👤 Konuşmacı 1 [00:00]: Merhaba
    👤 Konuşmacı 1 [00:05]: Nasılsın

becomes::

    👤 Konuşmacı 1 [00:00]: Merhaba
      • [00:05] Nasılsın

The scan carries a single piece of state, the number of the speaker whose
header was written last.  :func:`compress_line` is the transition function;
:func:`compress_speaker_runs` threads the state through it line by line.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from transcript_engine.markers import (
    DEFAULT_MARKERS,
    HEADING,
    SPEAKER,
    SPEAKER_NUMBER_PATTERN,
    SPEAKER_WORD_PATTERN,
    MarkerTable,
    icon_alternation,
)
from transcript_engine.speakers import speaker_label
from transcript_engine.timestamps import normalize_timestamps

logger = logging.getLogger(__name__)

_ATX_HEADING_RE = re.compile(r"^#{1,3}\s")
_CONTINUATION_RE = re.compile(r"^\[(\d{1,2}:\d{2})\]\s*(.*)$")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class _ScanPatterns:
    header: re.Pattern[str]
    heading: re.Pattern[str]
    empty_bullet: re.Pattern[str]


@lru_cache(maxsize=32)
def _patterns(markers: MarkerTable) -> _ScanPatterns:
    speaker_icons = icon_alternation(markers, SPEAKER)
    heading_icons = icon_alternation(markers, HEADING)
    return _ScanPatterns(
        header=re.compile(
            rf"^(?:{speaker_icons}\s*)?{SPEAKER_WORD_PATTERN}\s*{SPEAKER_NUMBER_PATTERN}"
            r"(?:\s*\[([^\]]*)\])?\s*:\s*(.*)$",
            re.IGNORECASE,
        ),
        heading=re.compile(rf"^{heading_icons}"),
        empty_bullet=re.compile(
            rf"^[ \t]*{re.escape(markers.bullet_glyph)}[ \t]*(?:\n|$)",
            re.MULTILINE,
        ),
    )


def _continuation(markers: MarkerTable, time: str, content: str) -> str | None:
    parts = []
    if time:
        parts.append(f"[{time}]")
    if content:
        parts.append(content)
    if not parts:
        return None
    return f"  {markers.bullet_glyph} {' '.join(parts)}"


def compress_line(
    line: str,
    last_speaker: int | None,
    markers: MarkerTable = DEFAULT_MARKERS,
) -> tuple[str | None, int | None]:
    """Apply one step of the compression scan.

    Args:
        line: A single line of timestamp-normalized text.
        last_speaker: Number of the speaker whose header was emitted
            last, or ``None`` after a blank line or a heading.
        markers: Sentinel table for icons and the bullet glyph.

    Returns:
        ``(emitted, last_speaker)`` where *emitted* is the line to write
        (``None`` to write nothing) and *last_speaker* is the new state.
    """
    trimmed = line.strip()
    if not trimmed:
        return "", None

    patterns = _patterns(markers)

    header = patterns.header.match(trimmed)
    if header:
        number = int(header.group(1))
        time = (header.group(2) or "").strip()
        content = header.group(3).strip()

        if number == last_speaker:
            return _continuation(markers, time, content), last_speaker

        time_segment = f" [{time}]" if time else ""
        prefix = f"{markers.primary_icon(SPEAKER)} {speaker_label(number)}{time_segment}:"
        return (f"{prefix} {content}" if content else prefix), number

    if patterns.heading.match(trimmed) or _ATX_HEADING_RE.match(trimmed):
        return line, None

    if last_speaker is not None:
        continuation = _CONTINUATION_RE.match(trimmed)
        if continuation:
            time = continuation.group(1)
            content = continuation.group(2).strip()
            return _continuation(markers, time, content), last_speaker

    return line, last_speaker


def compress_speaker_runs(text: str, markers: MarkerTable = DEFAULT_MARKERS) -> str:
    """Merge consecutive same-speaker lines into continuation bullets.

    After the scan, lines holding nothing but a bullet glyph are dropped,
    runs of three or more newlines collapse to a single blank line and
    trailing whitespace is trimmed.

    Args:
        text: Timestamp-normalized transcript text.
        markers: Sentinel table for icons and the bullet glyph.

    Returns:
        The compressed text.
    """
    if not text:
        return ""

    emitted_lines: list[str] = []
    last_speaker: int | None = None
    merged = 0

    for line in text.split("\n"):
        previous = last_speaker
        emitted, last_speaker = compress_line(line, last_speaker, markers)
        if previous is not None and previous == last_speaker and emitted != line:
            merged += 1
        if emitted is not None:
            emitted_lines.append(emitted)

    result = "\n".join(emitted_lines)
    result = _patterns(markers).empty_bullet.sub("", result)
    result = _BLANK_RUN_RE.sub("\n\n", result)
    result = result.rstrip()

    logger.debug("Compressed %d continuation line(s)", merged)
    return result


def normalize_transcript(text: str, markers: MarkerTable = DEFAULT_MARKERS) -> str:
    """Run the full normalization pipeline on raw transcript text.

    Line endings are unified, dot-notation timestamps are canonicalized
    and same-speaker runs are compressed.  The function is idempotent.
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return compress_speaker_runs(normalize_timestamps(text), markers)
