"""Sentinel marker table for the two transcript producer dialects.

The live recognizer and the AI service both decorate their output with a
handful of literal tokens: a person icon in front of speaker headers, a
clipboard icon in front of structural headings, a bullet glyph for
continuation lines, and a boilerplate disclaimer the AI sometimes prepends.
They are collected here as data so the compressor and the block parser agree
on the same set.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache

SPEAKER = "speaker"
HEADING = "heading"

SPEAKER_WORD = "Konuşmacı"

# Known spellings of the speaker word produced by keyboards and models
# without Turkish characters.  All of them unify to SPEAKER_WORD.
SPEAKER_WORD_VARIANTS: tuple[str, ...] = (
    "Konuşmacı",
    "Konusmaci",
    "Konusmacı",
    "Konuşmaci",
)

# Regex fragment matching SPEAKER_WORD and every known variant.
SPEAKER_WORD_PATTERN = r"Konu[şs]mac[ıi]"

# Regex fragment capturing a positive speaker number without leading zeros.
# At most nine significant digits; longer runs and zero do not match.
SPEAKER_NUMBER_PATTERN = r"0*([1-9]\d{0,8})(?!\d)"


@dataclass(frozen=True)
class MarkerTable:
    """Immutable mapping of sentinel tokens to the block kinds they mark.

    Attributes:
        sentinels: ``(token, kind)`` pairs.  The first token registered
            for a kind is the one written back by the compressor.
        bullet_glyph: Glyph used for continuation bullets.
        disclaimer_prefixes: Lower-case line prefixes that mark
            boilerplate to be dropped from the block sequence.
    """

    sentinels: tuple[tuple[str, str], ...] = (
        ("👤", SPEAKER),
        ("📋", HEADING),
    )
    bullet_glyph: str = "•"
    disclaimer_prefixes: tuple[str, ...] = ("bu transkripsiyon metni",)

    def icons_for(self, kind: str) -> tuple[str, ...]:
        """Return every sentinel token registered for *kind*."""
        return tuple(token for token, token_kind in self.sentinels if token_kind == kind)

    def primary_icon(self, kind: str) -> str:
        """Return the first sentinel token registered for *kind*.

        Raises:
            KeyError: If no token is registered for *kind*.
        """
        icons = self.icons_for(kind)
        if not icons:
            raise KeyError(f"No sentinel registered for {kind!r}")
        return icons[0]

    def with_disclaimers(self, extra: tuple[str, ...]) -> MarkerTable:
        """Return a copy with *extra* disclaimer prefixes appended."""
        cleaned = tuple(p.strip().lower() for p in extra if p.strip())
        return replace(self, disclaimer_prefixes=self.disclaimer_prefixes + cleaned)


DEFAULT_MARKERS = MarkerTable()


@lru_cache(maxsize=32)
def icon_alternation(markers: MarkerTable, kind: str) -> str:
    """Return a non-capturing regex alternation of the icons for *kind*."""
    icons = markers.icons_for(kind)
    if not icons:
        # Matches nothing, so classifiers keyed on this kind never fire.
        return r"(?!)"
    return "(?:" + "|".join(re.escape(icon) for icon in icons) + ")"


@lru_cache(maxsize=32)
def disclaimer_pattern(markers: MarkerTable) -> re.Pattern[str] | None:
    """Compile the disclaimer prefixes into one case-insensitive pattern.

    Words inside a prefix may be separated by any run of whitespace.
    """
    alternatives = [
        r"\s+".join(re.escape(word) for word in prefix.split())
        for prefix in markers.disclaimer_prefixes
        if prefix.split()
    ]
    if not alternatives:
        return None
    return re.compile(r"^(?:" + "|".join(alternatives) + r")", re.IGNORECASE)
