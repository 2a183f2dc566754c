"""Timestamp canonicalization.

The AI service sometimes writes ``[4.05]`` where the live recognizer writes
``[04:05]``.  Both are rewritten to the canonical zero-padded ``[mm:ss]``.
"""

from __future__ import annotations

import math
import re

# One or two minute digits, a literal dot, exactly two second digits.
_DOT_TIMESTAMP_RE = re.compile(r"\[(\d{1,2})\.(\d{2})\]")


def normalize_timestamps(text: str) -> str:
    """Rewrite every bracketed ``m.ss`` timestamp in *text* to ``[mm:ss]``.

    Any other bracket content, including timestamps that already use a
    colon, is left untouched.

    Args:
        text: Arbitrary transcript text.

    Returns:
        The text with dot-notation timestamps canonicalized.
    """
    if not text:
        return text

    return _DOT_TIMESTAMP_RE.sub(
        lambda m: f"[{m.group(1).zfill(2)}:{m.group(2)}]",
        text,
    )


def format_timestamp(seconds: float) -> str:
    """Format elapsed *seconds* as a canonical ``mm:ss`` timestamp.

    Minutes are not wrapped at the hour, so 3725 seconds gives ``62:05``.
    Negative or non-finite values render as ``00:00``.
    """
    if not math.isfinite(seconds) or seconds < 0:
        return "00:00"

    total = int(seconds)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"
