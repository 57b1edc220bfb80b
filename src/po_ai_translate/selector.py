"""Finds the catalog entries that still need a translation."""

import logging
from enum import Enum
from typing import NamedTuple

import polib

from .catalog import Catalog, first_translation
from .errors import ParseError

logger = logging.getLogger(__name__)


class KeyMismatchPolicy(str, Enum):
    """What to do with an index entry whose msgid differs from its index key."""

    SKIP = "skip"
    WARN = "warn"
    ERROR = "error"


class TranslationJob(NamedTuple):
    """An entry selected for translation, together with its lookup keys."""

    context: str
    msgid: str
    entry: polib.POEntry


def list_untranslated(
    catalog: Catalog,
    policy: KeyMismatchPolicy = KeyMismatchPolicy.SKIP,
) -> list[TranslationJob]:
    """
    List the untranslated entries of a catalog in index order.

    The header record (empty msgid) and entries whose first translation string
    is already filled are never selected.

    Args:
        catalog: The parsed catalog.
        policy: How to treat entries stored under a key that is not their msgid.

    Returns:
        The translation jobs, ordered by context and then by msgid insertion order.

    Raises:
        ParseError: If `policy` is ERROR and an index key does not match its entry.

    """
    jobs: list[TranslationJob] = []
    for context, by_msgid in catalog.translations.items():
        for msgid, entry in by_msgid.items():
            if not msgid:
                continue
            if entry is None or entry.msgid != msgid:
                _handle_mismatch(catalog, context, msgid, policy)
                continue
            if not first_translation(entry):
                jobs.append(TranslationJob(context, msgid, entry))
    return jobs


def _handle_mismatch(catalog: Catalog, context: str, msgid: str, policy: KeyMismatchPolicy) -> None:
    if policy is KeyMismatchPolicy.ERROR:
        raise ParseError(catalog.file_path, f"entry stored under msgid '{msgid}' (context '{context}') has a different msgid")
    if policy is KeyMismatchPolicy.WARN:
        logger.warning(
            "Skipping malformed entry under msgid '%s' (context '%s') in %s.",
            msgid,
            context,
            catalog.file_path or "<memory>",
        )
