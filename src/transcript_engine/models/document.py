"""Pydantic models for the JSON export of a structured transcript.

The engine itself works with the frozen dataclasses in
:mod:`transcript_engine.models.blocks`.  These models mirror them with an
explicit ``kind`` discriminator so the block sequence can be serialized for
downstream renderers and validated when read back:

- :class:`HeadingModel`, :class:`SpeakerTurnModel`,
  :class:`BulletListModel`, :class:`ParagraphModel` -- one per block kind.
- :class:`TranscriptDocument` -- the export envelope with metadata.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from transcript_engine.models.blocks import (
    Block,
    BulletList,
    Heading,
    Paragraph,
    SpeakerTurn,
)

if TYPE_CHECKING:
    from transcript_engine.pipeline import TranscriptResult


# ---------------------------------------------------------------------------
# Block models
# ---------------------------------------------------------------------------


class HeadingModel(BaseModel):
    """Serialized :class:`~transcript_engine.models.blocks.Heading`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    title: str
    detail: str | None = None


class SpeakerTurnModel(BaseModel):
    """Serialized :class:`~transcript_engine.models.blocks.SpeakerTurn`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["speaker"] = "speaker"
    speaker: str
    content: str
    time: str | None = None


class BulletListModel(BaseModel):
    """Serialized :class:`~transcript_engine.models.blocks.BulletList`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bullet_list"] = "bullet_list"
    items: list[str] = Field(default_factory=list)


class ParagraphModel(BaseModel):
    """Serialized :class:`~transcript_engine.models.blocks.Paragraph`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    content: str


BlockModel = Annotated[
    Union[HeadingModel, SpeakerTurnModel, BulletListModel, ParagraphModel],
    Field(discriminator="kind"),
]


def block_to_model(block: Block) -> BlockModel:
    """Convert an engine block into its serializable model.

    Raises:
        TypeError: If *block* is not one of the four block types.
    """
    if isinstance(block, Heading):
        return HeadingModel(title=block.title, detail=block.detail)
    if isinstance(block, SpeakerTurn):
        return SpeakerTurnModel(speaker=block.speaker, content=block.content, time=block.time)
    if isinstance(block, BulletList):
        return BulletListModel(items=list(block.items))
    if isinstance(block, Paragraph):
        return ParagraphModel(content=block.content)
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def model_to_block(model: BlockModel) -> Block:
    """Convert a block model back into the engine dataclass."""
    if isinstance(model, HeadingModel):
        return Heading(title=model.title, detail=model.detail)
    if isinstance(model, SpeakerTurnModel):
        return SpeakerTurn(speaker=model.speaker, content=model.content, time=model.time)
    if isinstance(model, BulletListModel):
        return BulletList(items=tuple(model.items))
    return Paragraph(content=model.content)


# ---------------------------------------------------------------------------
# TranscriptDocument -- export envelope
# ---------------------------------------------------------------------------


class TranscriptDocument(BaseModel):
    """JSON export of a processed transcript.

    Attributes:
        source: Origin label of the transcript.
        speaker_count: Distinct speakers, at least 1.
        word_count: Spoken words.
        words_per_minute: Pace, when the recording length was known.
        pace: ``"slow"``, ``"natural"`` or ``"fast"``, when known.
        normalized_text: The normalized transcript the blocks came from.
        blocks: Parsed blocks in document order.
    """

    source: str = "<string>"
    speaker_count: int = Field(default=1, ge=1)
    word_count: int = Field(default=0, ge=0)
    words_per_minute: int | None = None
    pace: Literal["slow", "natural", "fast"] | None = None
    normalized_text: str = ""
    blocks: list[BlockModel] = Field(default_factory=list)

    @field_validator("speaker_count", mode="before")
    @classmethod
    def _clamp_speaker_count(cls, value: int) -> int:
        """A transcript always has at least one speaker."""
        if isinstance(value, int) and value < 1:
            return 1
        return value

    @classmethod
    def from_result(cls, result: TranscriptResult) -> TranscriptDocument:
        """Build the export document for a pipeline result."""
        return cls(
            source=result.source,
            speaker_count=result.speaker_count,
            word_count=result.insights.word_count,
            words_per_minute=result.insights.words_per_minute,
            pace=result.insights.pace,
            normalized_text=result.normalized_text,
            blocks=[block_to_model(block) for block in result.blocks],
        )

    def to_blocks(self) -> list[Block]:
        """Return the engine blocks held by this document."""
        return [model_to_block(model) for model in self.blocks]
