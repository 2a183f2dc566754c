"""Custom exceptions for transcript-engine.

The text engine itself never raises; these cover the file and
configuration edges around it.
"""

from __future__ import annotations


class TranscriptLoadError(Exception):
    """Raised when a transcript file exists but cannot be decoded.

    Attributes:
        path: The file that failed to load.
        encoding: The encoding that was attempted.
    """

    def __init__(self, message: str, path: str = "", encoding: str = "") -> None:
        super().__init__(message)
        self.path = path
        self.encoding = encoding
