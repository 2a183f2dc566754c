"""Structured logging setup for transcript-engine.

Every module logs through ``logging.getLogger(__name__)``:

- :mod:`transcript_engine.pipeline` reports one INFO line per stage
  ("Stage 1: Normalizing transcript from notes.txt", block and speaker
  totals) and the wall time of the run.
- The engine modules (compressor, parser, speakers) log only at DEBUG:
  merged continuation lines, parsed and ignored line counts, fuzzy speaker
  matches and legacy header conversions.

The CLI calls :func:`setup_logging` once, with ``DEBUG`` under ``-v`` and
``LOG_LEVEL`` otherwise.  Lines go to stderr; stdout carries only the
rendered transcript or JSON document:

    2026-01-05T10:00:00 | INFO     | transcript_engine.pipeline | Stage 2 complete: 9 block(s) parsed
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Marks the handler installed by setup_logging so repeated calls reuse it
# without touching handlers added by the host application.
_HANDLER_ATTR = "_transcript_engine_log_handler"


def setup_logging(level: str = "INFO") -> None:
    """Route transcript-engine log records to stderr at *level*.

    Sets the root logger level and attaches a :class:`logging.StreamHandler`
    writing to *stderr* with the pipe-separated format above.  Calling this more than once only updates the
    level of the handler installed the first time.

    Args:
        level: A standard logging level name (e.g. ``"DEBUG"``,
            ``"INFO"``, ``"WARNING"``).

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger called *name* (usually the caller's ``__name__``)."""
    return logging.getLogger(name)
