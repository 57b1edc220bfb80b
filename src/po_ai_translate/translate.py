"""Translates the untranslated entries of a single catalog file."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from .catalog import extract_declared_language, read_catalog, serialize_catalog, set_first_translation
from .config import TranslatorConfig
from .errors import ConfigurationError
from .events import DoneEvent, ProgressEvent, ProgressSink, StartEvent, TranslationEvent
from .gateway import TranslationGateway
from .selector import KeyMismatchPolicy, list_untranslated

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """The outcome of translating one catalog file."""

    file_path: Path
    processed: int
    dry_run: bool = False
    skipped: bool = False


def _emit(on_progress: ProgressSink | None, event: TranslationEvent) -> None:
    if on_progress is not None:
        on_progress(event)


async def translate_file(  # noqa: PLR0913
    file_path: Path | str,
    *,
    config: TranslatorConfig,
    language: str | None = None,
    dry_run: bool = False,
    on_progress: ProgressSink | None = None,
    gateway: TranslationGateway | None = None,
    mismatch_policy: KeyMismatchPolicy = KeyMismatchPolicy.SKIP,
) -> FileResult:
    """
    Fill every untranslated entry of a catalog and write it back in place.

    Entries are translated one after another, in catalog order. Progress is
    reported as one StartEvent, one ProgressEvent per entry and one DoneEvent.

    Args:
        file_path: The .po file to translate.
        config: The provider selection, model and extra rules.
        language: The target language. Defaults to the catalog's `Language` header.
        dry_run: If True, translate but do not write the file.
        on_progress: A callback receiving progress events.
        gateway: The gateway to translate with. Built from `config` when omitted.
        mismatch_policy: How to treat malformed index entries.

    Returns:
        A FileResult with the absolute path and the number of entries translated.

    Raises:
        ParseError: If the file is not a valid catalog.
        ConfigurationError: If no target language can be determined.
        ProviderError: If a translation request fails.

    """
    abs_path = Path(file_path).resolve()
    catalog = await asyncio.to_thread(read_catalog, abs_path)

    target_language = language or extract_declared_language(catalog)
    if not target_language:
        msg = f"Could not determine language for {file_path}. Provide --language or set Language header in .po"
        raise ConfigurationError(msg)

    jobs = list_untranslated(catalog, mismatch_policy)
    total = len(jobs)
    logger.debug("Found %d untranslated entries in %s (target '%s').", total, abs_path, target_language)
    _emit(on_progress, StartEvent(file_path=abs_path, total=total))

    if jobs and gateway is None:
        gateway = TranslationGateway(config)

    processed = 0
    for job in jobs:
        translated = await gateway.translate(job.msgid, target_language)
        if not translated:
            logger.warning("Empty translation for msgid '%s' in %s. The entry stays untranslated.", job.msgid, abs_path)
        set_first_translation(job.entry, translated)
        processed += 1
        _emit(on_progress, ProgressEvent(file_path=abs_path, processed=processed, total=total))

    if dry_run:
        _emit(on_progress, DoneEvent(file_path=abs_path, processed=processed, total=total, dry_run=True))
        logger.info("[dry-run] %s: would write %d translations", file_path, processed)
        return FileResult(file_path=abs_path, processed=processed, dry_run=True)

    await asyncio.to_thread(abs_path.write_bytes, serialize_catalog(catalog))
    _emit(on_progress, DoneEvent(file_path=abs_path, processed=processed, total=total, dry_run=False))
    return FileResult(file_path=abs_path, processed=processed, dry_run=False)
