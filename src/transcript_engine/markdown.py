"""Inline emphasis removal for text extracted into blocks."""

from __future__ import annotations

import re

_TRIPLE_RE = re.compile(r"\*\*\*(.*?)\*\*\*")
_DOUBLE_RE = re.compile(r"\*\*(.*?)\*\*")
_SINGLE_RE = re.compile(r"\*(.*?)\*")
_STRAY_RE = re.compile(r"\*")
_SPACES_RE = re.compile(r"\s{2,}")


def strip_markdown(value: str) -> str:
    """Unwrap asterisk emphasis in *value* and tidy the whitespace.

    Triple, double and single asterisk wrappers are unwrapped in that
    order, any asterisk left over is deleted, runs of two or more
    whitespace characters collapse to one space, and the result is
    trimmed.

    Args:
        value: Any fragment of transcript text.

    Returns:
        The fragment without emphasis markup.  An empty input gives ``""``.
    """
    if not value:
        return ""

    value = _TRIPLE_RE.sub(r"\1", value)
    value = _DOUBLE_RE.sub(r"\1", value)
    value = _SINGLE_RE.sub(r"\1", value)
    value = _STRAY_RE.sub("", value)
    value = _SPACES_RE.sub(" ", value)
    return value.strip()
