"""Main entry point for the po-ai-translate command-line interface."""

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path

from . import __version__
from .batch import translate_directory
from .config import DEFAULT_CONCURRENCY, DEFAULT_INCLUDE, AppConfig, TranslatorConfig, build_translator_config, load_config, require_api_key
from .errors import PoTranslateError, UsageError
from .logging_utils import setup_logging
from .providers import PROVIDER_MAPPING
from .reporting import LoggingProgressSink, log_summary
from .selector import KeyMismatchPolicy
from .translate import FileResult, translate_file

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="po-ai-translate",
        description="Translate gettext .po files using OpenAI, Anthropic or Gemini models.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"po-ai-translate {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument("-f", "--file", help="Path to a .po file to translate.")
    parser.add_argument("-l", "--language", help="Target language code, e.g. fr, de.")
    parser.add_argument("-d", "--directory", help="Directory containing .po files to batch translate.")
    parser.add_argument(
        "--provider",
        choices=sorted(PROVIDER_MAPPING),
        help="Provider: openai (default), anthropic, gemini or mock.",
    )
    parser.add_argument(
        "--model",
        help="Model to use (e.g. gpt-4o-mini, claude-3-5-haiku-20241022, gemini-2.0-flash).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Translate without writing any file.",
    )
    parser.add_argument(
        "--include",
        help=f'Glob pattern relative to the directory, e.g. "**/messages.po" (default: "{DEFAULT_INCLUDE}").',
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        help=f"Number of files processed in parallel (default: {DEFAULT_CONCURRENCY}).",
    )
    parser.add_argument(
        "--rules",
        help='Additional translation rules (e.g., "only use first person, do not translate this word").',
    )
    parser.add_argument(
        "--on-key-mismatch",
        choices=[p.value for p in KeyMismatchPolicy],
        help="How to treat catalog entries stored under the wrong msgid (default: skip).",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug level logging.",
    )
    return parser


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = _build_parser()
    argv = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, print help
    if not argv:
        parser.print_help(sys.stderr)
        sys.exit(1)

    return parser.parse_args(argv)


def _validate_selection(args: argparse.Namespace) -> None:
    """
    Ensure exactly one of --file and --directory is given.

    Raises:
        UsageError: If both or neither are set.

    """
    if args.file and args.directory:
        msg = "Please specify either --file or --directory, not both."
        raise UsageError(msg)
    if not args.file and not args.directory:
        msg = "Please specify --file <path> or --directory <path>."
        raise UsageError(msg)


async def _run(args: argparse.Namespace, app_config: AppConfig, config: TranslatorConfig) -> list[FileResult]:
    """Run file or directory mode and return the per-file results."""
    sink = LoggingProgressSink()
    policy = KeyMismatchPolicy(args.on_key_mismatch or app_config.on_key_mismatch or KeyMismatchPolicy.SKIP)
    language = args.language or app_config.language
    concurrency = args.concurrency if args.concurrency is not None else app_config.concurrency or DEFAULT_CONCURRENCY

    if args.file:
        result = await translate_file(
            args.file,
            config=config,
            language=language,
            dry_run=args.dry_run,
            on_progress=sink,
            mismatch_policy=policy,
        )
        return [result]

    return await translate_directory(
        args.directory,
        config=config,
        include=args.include or app_config.include or DEFAULT_INCLUDE,
        default_language=language,
        dry_run=args.dry_run,
        concurrency=concurrency,
        on_progress=sink,
        mismatch_policy=policy,
    )


def main(argv: list[str] | None = None) -> None:
    """
    Run the po-ai-translate command-line interface.

    1. Parses command-line arguments and the optional configuration file.
    2. Checks the file/directory selection and the provider credential.
    3. Translates and logs a summary.
    """
    args = _parse_args(argv)
    setup_logging(version=__version__, debug=args.debug)

    try:
        _validate_selection(args)
        app_config = load_config(args.config) if args.config else AppConfig()
        config = build_translator_config(app_config, provider=args.provider, model=args.model, rules=args.rules)
        require_api_key(config)

        start = time.perf_counter()
        results = asyncio.run(_run(args, app_config, config))
        log_summary(results, time.perf_counter() - start, dry_run=args.dry_run)
    except UsageError as e:
        logger.error("%s", e)  # noqa: TRY400
        _build_parser().print_help(sys.stderr)
        sys.exit(1)
    except PoTranslateError as e:
        logger.error("%s", e)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        logger.exception("An unexpected error occurred")
        sys.exit(1)


if __name__ == "__main__":
    main()
