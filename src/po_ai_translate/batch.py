"""Translates every matching catalog below a directory."""

import asyncio
import logging
from pathlib import Path

from .catalog import extract_declared_language, read_catalog
from .config import DEFAULT_CONCURRENCY, DEFAULT_INCLUDE, TranslatorConfig
from .errors import UsageError
from .events import ProgressSink
from .gateway import TranslationGateway
from .pool import run_bounded
from .selector import KeyMismatchPolicy
from .translate import FileResult, translate_file

logger = logging.getLogger(__name__)


def discover_catalogs(root: Path, pattern: str = DEFAULT_INCLUDE) -> list[Path]:
    """
    Find the files below `root` that match a glob pattern.

    Args:
        root: The directory to search.
        pattern: A glob relative to `root`; `**` matches any number of directories.

    Returns:
        The absolute paths of the matching files, sorted.

    Raises:
        UsageError: If `pattern` is empty or absolute.

    """
    try:
        return sorted(path.resolve() for path in root.glob(pattern) if path.is_file())
    except (NotImplementedError, ValueError) as e:
        msg = f"--include must be a non-empty glob relative to the directory, got '{pattern}'"
        raise UsageError(msg) from e


async def translate_directory(  # noqa: PLR0913
    directory_path: Path | str,
    *,
    config: TranslatorConfig,
    include: str = DEFAULT_INCLUDE,
    default_language: str | None = None,
    dry_run: bool = False,
    concurrency: int = DEFAULT_CONCURRENCY,
    on_progress: ProgressSink | None = None,
    gateway: TranslationGateway | None = None,
    mismatch_policy: KeyMismatchPolicy = KeyMismatchPolicy.SKIP,
) -> list[FileResult]:
    """
    Translate all catalogs matching `include` below `directory_path`.

    Up to `concurrency` files are processed at a time. A file without a
    `Language` header is skipped when no `default_language` is given. The first
    failing file fails the whole call; files already written stay written.

    Args:
        directory_path: The directory to search.
        config: The provider selection, model and extra rules.
        include: The glob pattern selecting catalog files.
        default_language: The target language for files without a `Language` header.
        dry_run: If True, translate but do not write any file.
        concurrency: The maximum number of files processed at once.
        on_progress: A callback receiving the progress events of every file.
        gateway: The gateway shared by all files. Built from `config` when omitted.
        mismatch_policy: How to treat malformed index entries.

    Returns:
        One FileResult per matched file, in discovery order.

    Raises:
        UsageError: If `concurrency` is less than 1.
        ParseError: If a file is not a valid catalog.
        ProviderError: If a translation request fails.

    """
    if concurrency < 1:
        msg = f"--concurrency must be at least 1, got {concurrency}"
        raise UsageError(msg)

    root = Path(directory_path).resolve()
    files = discover_catalogs(root, include)
    if not files:
        logger.info("No .po files found in %s matching %s", root, include)
        return []

    logger.info("Found %d .po files in %s matching %s", len(files), root, include)
    shared_gateway = gateway

    async def _translate_one(file_path: Path) -> FileResult:
        nonlocal shared_gateway
        catalog = await asyncio.to_thread(read_catalog, file_path)
        language = extract_declared_language(catalog) or default_language
        if not language:
            logger.warning("Skipping %s: could not determine language (no header and no --language)", file_path)
            return FileResult(file_path=file_path, processed=0, dry_run=dry_run, skipped=True)

        if shared_gateway is None:
            shared_gateway = TranslationGateway(config)
        return await translate_file(
            file_path,
            config=config,
            language=language,
            dry_run=dry_run,
            on_progress=on_progress,
            gateway=shared_gateway,
            mismatch_policy=mismatch_policy,
        )

    return await run_bounded(concurrency, files, _translate_one)
