"""Speech pace metadata derived from transcript text.

Counts the spoken words in a transcript (speaker headers, heading sentinels
and bullet glyphs do not count) and, when the recording duration is known,
derives words per minute and a coarse pace class.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Literal

from transcript_engine.markers import (
    DEFAULT_MARKERS,
    HEADING,
    SPEAKER,
    SPEAKER_NUMBER_PATTERN,
    SPEAKER_WORD_PATTERN,
    MarkerTable,
    icon_alternation,
)

Pace = Literal["slow", "natural", "fast"]

# Words per minute boundaries: below SLOW is slow, up to NATURAL is natural.
SLOW_WPM = 100
NATURAL_WPM = 150

_TIMESTAMP_RE = re.compile(r"\[\d{1,2}[:.]\d{2}\]")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SpeechInsights:
    """Word count and pace of a transcript.

    Attributes:
        word_count: Number of spoken words.
        words_per_minute: Rounded pace, or ``None`` without a duration.
        pace: Pace class, or ``None`` without a duration.
        duration_label: Human readable duration such as ``"2 dk 5 sn"``,
            or ``"Bilgi yok"`` when the duration is unknown.
    """

    word_count: int
    words_per_minute: int | None = None
    pace: Pace | None = None
    duration_label: str = "Bilgi yok"


def format_duration(seconds: float | None) -> str:
    """Render *seconds* as ``"<m> dk <s> sn"``, dropping a zero minute part."""
    if not seconds or not math.isfinite(seconds) or seconds <= 0:
        return "Bilgi yok"

    minutes, secs = divmod(int(seconds), 60)
    if minutes:
        return f"{minutes} dk {secs} sn"
    return f"{secs} sn"


def classify_pace(words_per_minute: int) -> Pace:
    """Map a words-per-minute figure to a pace class."""
    if words_per_minute < SLOW_WPM:
        return "slow"
    if words_per_minute <= NATURAL_WPM:
        return "natural"
    return "fast"


def count_words(text: str, markers: MarkerTable = DEFAULT_MARKERS) -> int:
    """Count spoken words in *text*, ignoring transcript decoration."""
    if not text:
        return 0

    speaker_header = re.compile(
        rf"(?:{icon_alternation(markers, SPEAKER)}\s*)?"
        rf"{SPEAKER_WORD_PATTERN}\s*{SPEAKER_NUMBER_PATTERN}\s*(?:\[[^\]]*\])?\s*:",
        re.IGNORECASE,
    )
    heading_sentinel = re.compile(
        rf"{icon_alternation(markers, HEADING)}\s*(?:BAŞLIK\s*:?)?",
        re.IGNORECASE,
    )

    sanitized = speaker_header.sub(" ", text)
    sanitized = heading_sentinel.sub(" ", sanitized)
    sanitized = _TIMESTAMP_RE.sub(" ", sanitized)
    sanitized = sanitized.replace(markers.bullet_glyph, " ").replace("-", " ")
    sanitized = _WHITESPACE_RE.sub(" ", sanitized).strip()

    return len(sanitized.split(" ")) if sanitized else 0


def compute_insights(
    text: str,
    duration_seconds: float | None = None,
    markers: MarkerTable = DEFAULT_MARKERS,
) -> SpeechInsights:
    """Derive word count and pace for a transcript.

    Args:
        text: Raw or normalized transcript text.
        duration_seconds: Length of the recording, when known.
        markers: Sentinel table used to recognise decoration.

    Returns:
        A :class:`SpeechInsights`.  Pace fields stay ``None`` unless
        *duration_seconds* is positive.
    """
    word_count = count_words(text, markers)

    if not duration_seconds or not math.isfinite(duration_seconds) or duration_seconds <= 0:
        return SpeechInsights(word_count=word_count)

    words_per_minute = round(word_count / (duration_seconds / 60))
    return SpeechInsights(
        word_count=word_count,
        words_per_minute=words_per_minute,
        pace=classify_pace(words_per_minute),
        duration_label=format_duration(duration_seconds),
    )
