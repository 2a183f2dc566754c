"""Pipeline orchestrator for transcript structuring.

Wires the engine components together: legacy label conversion (optional),
timestamp normalization and run compression, block parsing, speaker counting
and pace insights.  The top-level entry point is :func:`process_transcript`,
which returns a :class:`TranscriptResult` suitable for rendering by the
console preview or the JSON export.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from transcript_engine.compressor import normalize_transcript
from transcript_engine.exceptions import TranscriptLoadError
from transcript_engine.insights import SpeechInsights, compute_insights
from transcript_engine.markers import DEFAULT_MARKERS, MarkerTable
from transcript_engine.models.blocks import Block
from transcript_engine.parser import parse_blocks
from transcript_engine.speakers import convert_legacy_labels, count_speakers

logger = logging.getLogger(__name__)


@dataclass
class TranscriptResult:
    """Everything derived from one transcript.

    Only :attr:`raw_text` and :attr:`normalized_text` are meant to be
    stored; the blocks are recomputed from the normalized text on demand.

    Attributes:
        source: Origin label (a file path or ``"<string>"``).
        raw_text: The transcript as received.
        normalized_text: Text after normalization and compression.
        blocks: Parsed blocks in document order.
        speaker_count: Distinct speakers, at least 1.
        insights: Word count and pace information.
        recording_seconds: Length of the recording, when known.
        duration_seconds: Wall-clock time spent in the pipeline.
    """

    source: str = "<string>"
    raw_text: str = ""
    normalized_text: str = ""
    blocks: list[Block] = field(default_factory=list)
    speaker_count: int = 1
    insights: SpeechInsights = field(default_factory=lambda: SpeechInsights(word_count=0))
    recording_seconds: float | None = None
    duration_seconds: float = 0.0


def process_transcript(
    text: str,
    source: str = "<string>",
    recording_seconds: float | None = None,
    convert_legacy: bool = False,
    markers: MarkerTable = DEFAULT_MARKERS,
) -> TranscriptResult:
    """Run the full structuring pipeline on transcript text.

    Args:
        text: Raw transcript text from either producer.
        source: Label for the transcript origin.
        recording_seconds: Recording length used for pace insights.
        convert_legacy: Rewrite ``A Kişisi`` headers to numbered speaker
            headers before normalizing.
        markers: Sentinel table shared by every stage.

    Returns:
        A :class:`TranscriptResult`.  Never raises for any string input.
    """
    start_time = time.monotonic()
    result = TranscriptResult(source=source, raw_text=text, recording_seconds=recording_seconds)

    # ------------------------------------------------------------------
    # Stage 1: Normalize
    # ------------------------------------------------------------------
    logger.info("Stage 1: Normalizing transcript from %s", source)

    working = convert_legacy_labels(text, markers) if convert_legacy else text
    result.normalized_text = normalize_transcript(working, markers)

    logger.debug(
        "Stage 1 complete: %d line(s) in, %d line(s) out",
        len(text.splitlines()),
        len(result.normalized_text.splitlines()),
    )

    # ------------------------------------------------------------------
    # Stage 2: Parse blocks
    # ------------------------------------------------------------------
    result.blocks = parse_blocks(result.normalized_text, markers)
    logger.info("Stage 2 complete: %d block(s) parsed", len(result.blocks))

    # ------------------------------------------------------------------
    # Stage 3: Metadata
    # ------------------------------------------------------------------
    result.speaker_count = count_speakers(result.normalized_text)
    result.insights = compute_insights(result.normalized_text, recording_seconds, markers)
    logger.info(
        "Stage 3 complete: %d speaker(s), %d word(s)",
        result.speaker_count,
        result.insights.word_count,
    )

    result.duration_seconds = time.monotonic() - start_time
    logger.info("Pipeline complete in %.3fs", result.duration_seconds)
    return result


def load_transcript(file_path: str | Path, encoding: str = "utf-8") -> str:
    """Read a transcript file.

    Args:
        file_path: Path to the transcript file.
        encoding: Text encoding of the file.

    Returns:
        The file contents.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
        TranscriptLoadError: If the file cannot be decoded with *encoding*.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Transcript file not found: {path}")

    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise TranscriptLoadError(
            f"Cannot decode {path} as {encoding}: {exc.reason}",
            path=str(path),
            encoding=encoding,
        ) from exc


def process_transcript_file(
    file_path: str | Path,
    encoding: str = "utf-8",
    recording_seconds: float | None = None,
    convert_legacy: bool = False,
    markers: MarkerTable = DEFAULT_MARKERS,
) -> TranscriptResult:
    """Load a transcript file and run :func:`process_transcript` on it.

    The result's ``source`` is the string form of *file_path*.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
        TranscriptLoadError: If the file cannot be decoded with *encoding*.
    """
    text = load_transcript(file_path, encoding)
    return process_transcript(
        text,
        source=str(Path(file_path)),
        recording_seconds=recording_seconds,
        convert_legacy=convert_legacy,
        markers=markers,
    )
