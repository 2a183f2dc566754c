"""Console preview of a structured transcript.

Renders a :class:`~transcript_engine.pipeline.TranscriptResult` as plain
console output: a metadata section followed by the parsed blocks.

The primary entry point is :func:`format_result`, which returns the formatted
string.  :func:`print_result` is a convenience wrapper that writes directly to
stdout, and :func:`format_blocks` renders a bare block sequence.
"""

from __future__ import annotations

import sys

from transcript_engine.models.blocks import (
    Block,
    BulletList,
    Heading,
    Paragraph,
    SpeakerTurn,
)
from transcript_engine.pipeline import TranscriptResult
from transcript_engine.timestamps import format_timestamp

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH
_BULLET = "•"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_result(result: TranscriptResult) -> str:
    """Render a :class:`TranscriptResult` as a console preview.

    The output has a banner, a metadata section (source, speakers, words,
    pace) and the transcript blocks.

    Args:
        result: The pipeline result to format.

    Returns:
        A multi-line string ready for console display.
    """
    lines: list[str] = []

    lines.append(_SEPARATOR)
    lines.append("  TRANSCRIPT PREVIEW")
    lines.append(_SEPARATOR)
    _append_metadata(lines, result)
    lines.append("")
    lines.append("--- TRANSCRIPT ---")
    if result.blocks:
        lines.append(format_blocks(result.blocks))
    else:
        lines.append("  Transcript is empty.")
    lines.append(_SEPARATOR)

    return "\n".join(lines)


def print_result(result: TranscriptResult) -> None:
    """Format and print a :class:`TranscriptResult` to stdout."""
    sys.stdout.write(format_result(result) + "\n")


def format_blocks(blocks: list[Block]) -> str:
    """Render blocks one after another, separated by blank lines."""
    return "\n\n".join(_format_block(block) for block in blocks)


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _append_metadata(lines: list[str], result: TranscriptResult) -> None:
    """Append the metadata section."""
    insights = result.insights
    lines.append("")
    lines.append("--- METADATA ---")
    lines.append(f"  Source: {result.source}")
    lines.append(f"  Speakers: {result.speaker_count}")
    lines.append(f"  Words: {insights.word_count}")

    if result.recording_seconds is not None:
        lines.append(
            f"  Recording: {format_timestamp(result.recording_seconds)} "
            f"({insights.duration_label})"
        )
    if insights.words_per_minute is not None:
        lines.append(f"  Pace: {insights.words_per_minute} wpm ({insights.pace})")

    lines.append(f"  Blocks: {len(result.blocks)}")


def _format_block(block: Block) -> str:
    if isinstance(block, Heading):
        if block.detail:
            return f"## {block.detail.upper()}: {block.title}"
        return f"## {block.title}"

    if isinstance(block, SpeakerTurn):
        time = f" [{block.time}]" if block.time else ""
        if block.content:
            return f"{block.speaker}{time}: {block.content}"
        return f"{block.speaker}{time}:"

    if isinstance(block, BulletList):
        return "\n".join(f"  {_BULLET} {item}" for item in block.items)

    if isinstance(block, Paragraph):
        return block.content

    return str(block)
