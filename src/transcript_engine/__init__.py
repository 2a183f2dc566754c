"""transcript-engine: speech transcript structuring and normalization.

Reconciles the two transcript dialects produced by a live speech recognizer
and an AI transcription service into one speaker-segmented block model for
previews and document export.
"""

from __future__ import annotations

from transcript_engine.compressor import (
    compress_line,
    compress_speaker_runs,
    normalize_transcript,
)
from transcript_engine.exceptions import TranscriptLoadError
from transcript_engine.insights import SpeechInsights, compute_insights
from transcript_engine.markdown import strip_markdown
from transcript_engine.markers import DEFAULT_MARKERS, MarkerTable
from transcript_engine.models.blocks import (
    Block,
    BulletList,
    Heading,
    Paragraph,
    SpeakerTurn,
)
from transcript_engine.models.document import TranscriptDocument
from transcript_engine.parser import classify_line, parse_blocks
from transcript_engine.pipeline import (
    TranscriptResult,
    process_transcript,
    process_transcript_file,
)
from transcript_engine.speakers import (
    canonical_speaker_label,
    convert_legacy_labels,
    count_speakers,
    legacy_letter_to_number,
)
from transcript_engine.timestamps import format_timestamp, normalize_timestamps

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MARKERS",
    "Block",
    "BulletList",
    "Heading",
    "MarkerTable",
    "Paragraph",
    "SpeakerTurn",
    "SpeechInsights",
    "TranscriptDocument",
    "TranscriptLoadError",
    "TranscriptResult",
    "canonical_speaker_label",
    "classify_line",
    "compress_line",
    "compress_speaker_runs",
    "compute_insights",
    "convert_legacy_labels",
    "count_speakers",
    "format_timestamp",
    "legacy_letter_to_number",
    "normalize_timestamps",
    "normalize_transcript",
    "parse_blocks",
    "process_transcript",
    "process_transcript_file",
    "strip_markdown",
]
