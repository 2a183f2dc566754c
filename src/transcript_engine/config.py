"""Configuration loading for transcript-engine.

Reads optional settings from environment variables (with .env support via
python-dotenv).  Nothing is required; invalid values are reported together
in a single :class:`ConfigError`.
"""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from transcript_engine.markers import DEFAULT_MARKERS, MarkerTable

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        encoding: Encoding used to read transcript files
            (default ``"utf-8"``).
        output_format: Default CLI output, ``"text"`` or ``"json"``.
        extra_disclaimers: Additional boilerplate line prefixes the block
            parser should drop.
    """

    log_level: str = "INFO"
    encoding: str = "utf-8"
    output_format: str = "text"
    extra_disclaimers: tuple[str, ...] = ()

    def markers(self) -> MarkerTable:
        """Return the default marker table extended with the extra disclaimers."""
        if not self.extra_disclaimers:
            return DEFAULT_MARKERS
        return DEFAULT_MARKERS.with_disclaimers(self.extra_disclaimers)


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If any variable holds an invalid value.  The message
            names **all** offending variables.
    """
    load_dotenv()

    values: dict[str, object] = {}
    problems: list[str] = []

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if not isinstance(logging.getLevelName(log_level.upper()), int):
            problems.append(f"LOG_LEVEL={log_level!r} is not a logging level")
        else:
            values["log_level"] = log_level.upper()

    encoding = os.environ.get("TRANSCRIPT_ENCODING", "").strip()
    if encoding:
        try:
            codecs.lookup(encoding)
        except LookupError:
            problems.append(f"TRANSCRIPT_ENCODING={encoding!r} is not a known encoding")
        else:
            values["encoding"] = encoding

    output_format = os.environ.get("OUTPUT_FORMAT", "").strip().lower()
    if output_format:
        if output_format not in OUTPUT_FORMATS:
            allowed = ", ".join(OUTPUT_FORMATS)
            problems.append(f"OUTPUT_FORMAT={output_format!r} must be one of: {allowed}")
        else:
            values["output_format"] = output_format

    disclaimers = os.environ.get("TRANSCRIPT_DISCLAIMERS", "")
    extra = tuple(p.strip() for p in disclaimers.split(",") if p.strip())
    if extra:
        values["extra_disclaimers"] = extra

    if problems:
        raise ConfigError("Invalid configuration: " + "; ".join(problems))

    return Settings(**values)  # type: ignore[arg-type]
