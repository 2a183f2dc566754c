"""Speaker label canonicalization and counting.

Two label dialects reach the engine:

- the modern numbered form, ``Konuşmacı 1``, ``Konuşmacı 2``, ...
- the legacy letter form, ``A Kişisi``, ``B Kişisi``, ...

Legacy letters map to numbers by their position in the alphabet
(A -> 1, B -> 2, ...).  Every call site that needs a canonical label goes
through :func:`canonical_speaker_label`.
"""

from __future__ import annotations

import logging
import re

from transcript_engine.markers import (
    DEFAULT_MARKERS,
    SPEAKER,
    SPEAKER_NUMBER_PATTERN,
    SPEAKER_WORD,
    SPEAKER_WORD_PATTERN,
    MarkerTable,
    icon_alternation,
)

logger = logging.getLogger(__name__)

_VARIANT_RE = re.compile(SPEAKER_WORD_PATTERN, re.IGNORECASE)
_NUMBERED_LABEL_RE = re.compile(
    rf"^{SPEAKER_WORD_PATTERN}\s*{SPEAKER_NUMBER_PATTERN}$", re.IGNORECASE
)
_LEGACY_LABEL_RE = re.compile(r"^([A-Za-z])\s*(?i:Kişisi)$")

# Counting patterns scan the whole text, not single labels.
_NUMBERED_SCAN_RE = re.compile(
    rf"{SPEAKER_WORD_PATTERN}\s*{SPEAKER_NUMBER_PATTERN}", re.IGNORECASE
)
_LEGACY_SCAN_RE = re.compile(r"\b([A-Za-z])\s*(?i:Kişisi)\b")


def legacy_letter_to_number(letter: str) -> int:
    """Map a legacy speaker letter to its speaker number.

    Args:
        letter: A single ASCII letter, either case.

    Returns:
        The 1-based alphabet position (``"A"`` -> 1, ``"b"`` -> 2).

    Raises:
        ValueError: If *letter* is not a single ASCII letter.
    """
    if len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
        raise ValueError(f"Not a legacy speaker letter: {letter!r}")
    return ord(letter.upper()) - ord("A") + 1


def speaker_label(number: int) -> str:
    """Return the canonical label for speaker *number*."""
    return f"{SPEAKER_WORD} {number}"


def unify_speaker_spelling(text: str) -> str:
    """Replace every known spelling of the speaker word with the canonical one."""
    return _VARIANT_RE.sub(SPEAKER_WORD, text)


def canonical_speaker_label(label: str) -> str:
    """Canonicalize a speaker label taken from a transcript line.

    Spelling variants are unified, numbered labels lose leading zeros and
    legacy letter labels become numbered.  Labels in neither dialect
    (e.g. a real name) are returned with only the spelling unified.  An
    empty label falls back to the bare speaker word.
    """
    label = unify_speaker_spelling(label.strip())
    if not label:
        return SPEAKER_WORD

    numbered = _NUMBERED_LABEL_RE.match(label)
    if numbered:
        return speaker_label(int(numbered.group(1)))

    legacy = _LEGACY_LABEL_RE.match(label)
    if legacy:
        return speaker_label(legacy_letter_to_number(legacy.group(1)))

    return label


def count_speakers(text: str) -> int:
    """Count the distinct speakers mentioned in *text*.

    Numbered labels win when present; otherwise legacy letter labels are
    counted.  The result is never below 1, so an empty or unlabelled text
    still counts as a single speaker.

    Args:
        text: Normalized (or raw) transcript text.

    Returns:
        Number of distinct speakers, at least 1.
    """
    if not text:
        return 1

    numbered = {int(n) for n in _NUMBERED_SCAN_RE.findall(text)}
    if numbered:
        return max(len(numbered), 1)

    letters = {letter.upper() for letter in _LEGACY_SCAN_RE.findall(text)}
    if letters:
        return max(len(letters), 1)

    return 1


def convert_legacy_labels(text: str, markers: MarkerTable = DEFAULT_MARKERS) -> str:
    """Rewrite legacy ``A Kişisi [t]:`` headers as numbered speaker headers.

    Only headers at the start of a line are rewritten, optionally behind
    a speaker icon.  The result uses the primary speaker icon, e.g.
    ``B Kişisi [00:12]: Evet`` becomes ``👤 Konuşmacı 2 [00:12]: Evet``.

    Args:
        text: Transcript text that may use the legacy dialect.
        markers: Sentinel table providing the speaker icon.

    Returns:
        The text with every legacy header converted.
    """
    if not text:
        return text

    icon = markers.primary_icon(SPEAKER)
    pattern = re.compile(
        rf"^[ \t]*(?:{icon_alternation(markers, SPEAKER)}[ \t]*)?"
        r"([A-Za-z])[ \t]*(?i:Kişisi)[ \t]*(?:\[([^\]]*)\])?[ \t]*:[ \t]*",
        re.MULTILINE,
    )

    converted = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal converted
        converted += 1
        number = legacy_letter_to_number(match.group(1))
        time = (match.group(2) or "").strip()
        time_segment = f" [{time}]" if time else ""
        return f"{icon} {speaker_label(number)}{time_segment}: "

    result = pattern.sub(_replace, text)
    logger.debug("Converted %d legacy speaker header(s)", converted)
    return result
