"""Data models for transcript-engine."""

from __future__ import annotations

from transcript_engine.models.blocks import (
    Block,
    BulletList,
    Heading,
    Paragraph,
    SpeakerTurn,
)
from transcript_engine.models.document import (
    BlockModel,
    BulletListModel,
    HeadingModel,
    ParagraphModel,
    SpeakerTurnModel,
    TranscriptDocument,
    block_to_model,
    model_to_block,
)

__all__ = [
    "Block",
    "BlockModel",
    "BulletList",
    "BulletListModel",
    "Heading",
    "HeadingModel",
    "Paragraph",
    "ParagraphModel",
    "SpeakerTurn",
    "SpeakerTurnModel",
    "TranscriptDocument",
    "block_to_model",
    "model_to_block",
]
