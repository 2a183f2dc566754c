"""Tests for transcript-engine structured logging."""

from __future__ import annotations

import logging
import re

import pytest

from transcript_engine.log import get_logger, setup_logging


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def test_setup_logging_sets_level(self) -> None:
        """setup_logging('DEBUG') must set root logger to DEBUG."""
        setup_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_default_level_is_info(self) -> None:
        """setup_logging() with no args defaults to INFO."""
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_accepts_lower_case(self) -> None:
        """Level names are case-insensitive."""
        setup_logging("warning")

        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_invalid_level_raises(self) -> None:
        """An unrecognised level string must raise ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logging("LOUD")

    def test_setup_logging_idempotent(self) -> None:
        """Calling setup_logging() twice must not add duplicate handlers."""
        setup_logging()
        count_after_first = len(logging.getLogger().handlers)

        setup_logging("DEBUG")
        count_after_second = len(logging.getLogger().handlers)

        assert count_after_second == count_after_first

    def test_second_call_updates_installed_handler_level(self) -> None:
        """The handler installed first follows later level changes."""
        setup_logging("INFO")
        setup_logging("ERROR")

        ours = [
            h
            for h in logging.getLogger().handlers
            if getattr(h, "_transcript_engine_log_handler", False)
        ]
        assert len(ours) == 1
        assert ours[0].level == logging.ERROR

    def test_foreign_handlers_left_alone(self) -> None:
        """Handlers added by the host application are not replaced."""
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)

        setup_logging()

        assert foreign in logging.getLogger().handlers


class TestGetLogger:
    """Tests for the get_logger function."""

    def test_get_logger_name(self) -> None:
        """get_logger() must return a logger with the requested name."""
        logger = get_logger("transcript_engine.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "transcript_engine.test"


class TestLogOutput:
    """Tests for the actual log output format."""

    def test_log_line_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A log line carries timestamp, level, logger name and message."""
        setup_logging("INFO")
        get_logger("test.fields").info("hello world")

        captured = capsys.readouterr()
        assert re.search(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2} \| INFO ", captured.err)
        assert " | test.fields | hello world" in captured.err

    def test_debug_not_shown_at_info_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """DEBUG messages must not appear when level is INFO."""
        setup_logging("INFO")
        get_logger("test.filter").debug("should not appear")

        captured = capsys.readouterr()
        assert "should not appear" not in captured.err

    def test_debug_shown_at_debug_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """DEBUG messages must appear when level is DEBUG."""
        setup_logging("DEBUG")
        get_logger("test.debug_show").debug("should appear")

        captured = capsys.readouterr()
        assert "should appear" in captured.err

    def test_pipeline_stages_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The pipeline reports its stages at INFO."""
        from transcript_engine.pipeline import process_transcript

        setup_logging("INFO")
        process_transcript("👤 Konuşmacı 1: Merhaba", source="inline")

        captured = capsys.readouterr()
        assert "Stage 1: Normalizing transcript from inline" in captured.err
        assert "Stage 2 complete: 1 block(s) parsed" in captured.err
        assert "Stage 3 complete: 1 speaker(s), 1 word(s)" in captured.err

    def test_engine_details_only_at_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Compressor and parser details appear under DEBUG, not INFO."""
        from transcript_engine.pipeline import process_transcript

        text = "👤 Konuşmacı 1: Merhaba\n👤 Konuşmacı 1: Nasılsın"

        setup_logging("INFO")
        process_transcript(text)
        info_output = capsys.readouterr().err

        setup_logging("DEBUG")
        process_transcript(text)
        debug_output = capsys.readouterr().err

        assert "transcript_engine.compressor" not in info_output
        assert "transcript_engine.parser" not in info_output
        assert "transcript_engine.compressor | Compressed 1 continuation line(s)" in debug_output
        assert "transcript_engine.parser | Parsed 2 block(s), ignored 0 line(s)" in debug_output
