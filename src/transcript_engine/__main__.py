"""Entry point for ``python -m transcript_engine``.

Provides a CLI that accepts a transcript file and runs the structuring
pipeline on it.  Uses stdlib :mod:`argparse` for argument parsing.

Subcommands:
    render    -- Default. Print the structured preview (or JSON document).
    normalize -- Print the normalized transcript text.
    speakers  -- Print the number of distinct speakers.

Exit codes:
    0 -- Completed successfully.
    1 -- An error occurred (file not found, undecodable, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from transcript_engine.config import OUTPUT_FORMATS, ConfigError, Settings, load_settings
from transcript_engine.exceptions import TranscriptLoadError
from transcript_engine.log import get_logger, setup_logging
from transcript_engine.models.document import TranscriptDocument
from transcript_engine.pipeline import process_transcript_file
from transcript_engine.preview import print_result

logger = get_logger(__name__)

_SUBCOMMANDS = {"render", "normalize", "speakers"}


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser with subcommands.

    Returns:
        Configured :class:`argparse.ArgumentParser` with ``render``,
        ``normalize`` and ``speakers`` subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="transcript-engine",
        description="Normalize a speech transcript and split it into typed blocks.",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- "render" subcommand (default) --------------------------------
    render_parser = subparsers.add_parser(
        "render",
        help="Print the structured transcript preview.",
    )
    _add_common_arguments(render_parser)
    render_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to OUTPUT_FORMAT from config, else text).",
    )
    render_parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Recording length in seconds, used for pace metadata.",
    )
    render_parser.add_argument(
        "--convert-legacy",
        action="store_true",
        default=False,
        help="Rewrite 'A Kişisi' style headers to numbered speakers first.",
    )

    # --- "normalize" subcommand ---------------------------------------
    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the normalized transcript text.",
    )
    _add_common_arguments(normalize_parser)

    # --- "speakers" subcommand ----------------------------------------
    speakers_parser = subparsers.add_parser(
        "speakers",
        help="Print the number of distinct speakers.",
    )
    _add_common_arguments(speakers_parser)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "transcript_file",
        type=str,
        help="Path to the transcript text file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )


def _resolve_command(
    parser: argparse.ArgumentParser,
    argv: list[str],
) -> argparse.Namespace:
    """Parse *argv*, routing anything that is not a subcommand to ``render``.

    ``python -m transcript_engine notes.txt`` is therefore the same as
    ``python -m transcript_engine render notes.txt``.
    """
    if not argv:
        argv = ["render"]
    elif argv[0] in {"-h", "--help"}:
        pass
    elif argv[0] not in _SUBCOMMANDS:
        argv = ["render", *argv]

    return parser.parse_args(argv)


def _validate_file(transcript_path: Path) -> str | None:
    """Return an error message when *transcript_path* cannot be used."""
    if not transcript_path.exists():
        return f"File not found: {transcript_path}"
    if not transcript_path.is_file():
        return f"Not a file: {transcript_path}"
    return None


def _handle(args: argparse.Namespace, settings: Settings) -> int:
    """Run the pipeline for the selected subcommand and print its output.

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    transcript_path = Path(args.transcript_file)

    error = _validate_file(transcript_path)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    try:
        result = process_transcript_file(
            transcript_path,
            encoding=settings.encoding,
            recording_seconds=getattr(args, "duration", None),
            convert_legacy=getattr(args, "convert_legacy", False),
            markers=settings.markers(),
        )
    except (FileNotFoundError, PermissionError, TranscriptLoadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "normalize":
        sys.stdout.write(result.normalized_text + "\n")
        return 0

    if args.command == "speakers":
        sys.stdout.write(f"{result.speaker_count}\n")
        return 0

    output_format = args.format or settings.output_format
    if output_format == "json":
        document = TranscriptDocument.from_result(result)
        sys.stdout.write(document.model_dump_json(indent=2) + "\n")
    else:
        print_result(result)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the transcript-engine CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = _resolve_command(parser, argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # --- Configure logging --------------------------------------------
    log_level = "DEBUG" if args.verbose else settings.log_level
    setup_logging(log_level)
    logger.debug("Running %s on %s", args.command, args.transcript_file)

    return _handle(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
