"""Typed blocks produced by the block parser.

A parsed transcript is an ordered ``list[Block]``.  Blocks carry no line
numbers or identifiers; their position in the list is the only ordering
information.  Like the other engine models these are stdlib dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Heading:
    """A structural heading.

    Attributes:
        title: Heading text.
        detail: Optional descriptor written before the title, e.g.
            ``"Karar"`` in ``📋 Karar: Bütçe onaylandı``.
    """

    kind: ClassVar[str] = "heading"

    title: str
    detail: str | None = None


@dataclass(frozen=True)
class SpeakerTurn:
    """A line of speech attributed to one speaker.

    Attributes:
        speaker: Canonical speaker label, e.g. ``"Konuşmacı 2"``.
        content: What was said.  May be empty for a bare header.
        time: Canonical ``mm:ss`` timestamp when the line had one.
    """

    kind: ClassVar[str] = "speaker"

    speaker: str
    content: str
    time: str | None = None


@dataclass(frozen=True)
class BulletList:
    """Adjacent bullet lines collapsed into one list.

    Attributes:
        items: Bullet texts in input order.
    """

    kind: ClassVar[str] = "bullet_list"

    items: tuple[str, ...]


@dataclass(frozen=True)
class Paragraph:
    """Any line no other classifier claimed."""

    kind: ClassVar[str] = "paragraph"

    content: str


Block = Union[Heading, SpeakerTurn, BulletList, Paragraph]
