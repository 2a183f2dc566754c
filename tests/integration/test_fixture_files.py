"""Integration tests for file-based transcript processing.

These tests run :func:`~transcript_engine.pipeline.process_transcript_file`
against the fixture files in ``tests/fixtures/``, covering both producer
dialects and the legacy letter labels.
"""

from __future__ import annotations

from pathlib import Path

from transcript_engine.models.blocks import BulletList, Heading, Paragraph, SpeakerTurn
from transcript_engine.pipeline import process_transcript_file


class TestLiveTranscript:
    """Output of the live recognizer."""

    def test_blocks(self, fixtures_dir: Path) -> None:
        result = process_transcript_file(fixtures_dir / "live_transcript.txt")

        assert result.blocks == [
            Heading(title="Toplantı"),
            SpeakerTurn(speaker="Konuşmacı 1", content="Merhaba", time="00:01"),
            BulletList(items=("[00:03] Nasılsın",)),
            SpeakerTurn(speaker="Konuşmacı 2", content="İyiyim", time="00:05"),
        ]
        assert result.speaker_count == 2
        assert result.insights.word_count == 4


class TestAiTranscript:
    """Output of the AI transcription service, with its formatting quirks."""

    def test_blocks(self, fixtures_dir: Path) -> None:
        result = process_transcript_file(fixtures_dir / "ai_transcript.txt")

        assert result.blocks == [
            Heading(title="Proje Toplantısı"),
            Heading(title="Bütçe planlaması", detail="Gündem"),
            SpeakerTurn(
                speaker="Konuşmacı 1",
                content="Bugün bütçeyi konuşacağız.",
                time="00:05",
            ),
            BulletList(
                items=(
                    "[00:12] Önce geçen çeyreğe bakalım.",
                    "[00:20] Rakamlar hazır mı?",
                )
            ),
            SpeakerTurn(
                speaker="Konuşmacı 2",
                content="Tamam, rakamları hazırladım.",
                time="01:30",
            ),
            SpeakerTurn(speaker="Konuşmacı 2", content="Sunumu da güncelledim.", time="01:45"),
            Heading(title="Kararlar"),
            BulletList(
                items=(
                    "Bütçe onaylandı",
                    "Sunum cuma günü yapılacak",
                    "Raporu Konuşmacı 2 hazırlayacak",
                )
            ),
            Paragraph(content="Toplantı planlanan sürede tamamlandı."),
        ]
        assert result.speaker_count == 2

    def test_disclaimer_kept_in_text_but_not_in_blocks(self, fixtures_dir: Path) -> None:
        result = process_transcript_file(fixtures_dir / "ai_transcript.txt")

        assert result.normalized_text.startswith("Bu transkripsiyon metni")
        assert not any(
            isinstance(block, Paragraph) and "transkripsiyon" in block.content
            for block in result.blocks
        )

    def test_timestamps_canonical(self, fixtures_dir: Path) -> None:
        result = process_transcript_file(fixtures_dir / "ai_transcript.txt")

        assert "[0." not in result.normalized_text
        assert "[1." not in result.normalized_text
        assert "[01:30]" in result.normalized_text


class TestLegacyTranscript:
    """Letter labels such as ``A Kişisi``."""

    def test_without_conversion(self, fixtures_dir: Path) -> None:
        """Unconverted legacy headers stay paragraphs but still count."""
        result = process_transcript_file(fixtures_dir / "legacy_transcript.txt")

        assert all(isinstance(block, Paragraph) for block in result.blocks)
        assert len(result.blocks) == 4
        assert result.speaker_count == 3

    def test_with_conversion(self, fixtures_dir: Path) -> None:
        result = process_transcript_file(
            fixtures_dir / "legacy_transcript.txt",
            convert_legacy=True,
        )

        assert result.blocks == [
            SpeakerTurn(speaker="Konuşmacı 1", content="Günaydın", time="00:02"),
            SpeakerTurn(speaker="Konuşmacı 2", content="Günaydın, hoş geldiniz", time="00:04"),
            SpeakerTurn(speaker="Konuşmacı 1", content="Teşekkürler", time="00:09"),
            SpeakerTurn(speaker="Konuşmacı 3", content="Ben de buradayım", time="00:15"),
        ]
        assert result.speaker_count == 3
