"""Integration tests for the end-to-end flow.

These tests wire the real engine against the sample fixtures through the
public entry points: the pipeline, the JSON export and the CLI.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from transcript_engine.__main__ import main
from transcript_engine.compressor import normalize_transcript
from transcript_engine.models.document import TranscriptDocument
from transcript_engine.parser import parse_blocks
from transcript_engine.pipeline import process_transcript, process_transcript_file
from transcript_engine.preview import format_result

_FIXTURE_NAMES = ["live_transcript.txt", "ai_transcript.txt", "legacy_transcript.txt"]


class TestStoredText:
    """Only normalized text is stored; blocks are recomputed from it."""

    @pytest.mark.parametrize("name", _FIXTURE_NAMES)
    def test_normalization_is_stable(self, fixtures_dir: Path, name: str) -> None:
        result = process_transcript_file(fixtures_dir / name)

        assert normalize_transcript(result.normalized_text) == result.normalized_text

    @pytest.mark.parametrize("name", _FIXTURE_NAMES)
    def test_reprocessing_stored_text_gives_same_blocks(
        self, fixtures_dir: Path, name: str
    ) -> None:
        first = process_transcript_file(fixtures_dir / name)

        second = process_transcript(first.normalized_text)

        assert second.blocks == first.blocks
        assert second.speaker_count == first.speaker_count
        assert parse_blocks(first.normalized_text) == first.blocks

    @pytest.mark.parametrize("name", _FIXTURE_NAMES)
    def test_json_export_round_trip(self, fixtures_dir: Path, name: str) -> None:
        result = process_transcript_file(fixtures_dir / name)

        payload = TranscriptDocument.from_result(result).model_dump_json()
        restored = TranscriptDocument.model_validate_json(payload)

        assert restored.to_blocks() == result.blocks
        assert restored.normalized_text == result.normalized_text


class TestPreview:
    """The console preview of a real transcript."""

    def test_ai_transcript_preview(self, fixtures_dir: Path) -> None:
        result = process_transcript_file(
            fixtures_dir / "ai_transcript.txt",
            recording_seconds=120,
        )

        output = format_result(result)

        assert "## Proje Toplantısı" in output
        assert "## GÜNDEM: Bütçe planlaması" in output
        assert "Konuşmacı 2 [01:45]: Sunumu da güncelledim." in output
        assert "  • Bütçe onaylandı" in output
        assert "  Recording: 02:00 (2 dk 0 sn)" in output
        assert "  Speakers: 2" in output
        assert "transkripsiyon" not in output.split("--- TRANSCRIPT ---")[1]


class TestCli:
    """The CLI against fixture files."""

    def test_render_json(
        self,
        fixtures_dir: Path,
        clean_env: None,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = main(["render", "--format", "json", str(fixtures_dir / "ai_transcript.txt")])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["speaker_count"] == 2
        assert payload["blocks"][0] == {
            "kind": "heading",
            "title": "Proje Toplantısı",
            "detail": None,
        }

    def test_speakers_in_legacy_transcript(
        self,
        fixtures_dir: Path,
        clean_env: None,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = main(["speakers", str(fixtures_dir / "legacy_transcript.txt")])

        assert exit_code == 0
        assert capsys.readouterr().out == "3\n"
