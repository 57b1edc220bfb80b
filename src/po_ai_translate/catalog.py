"""Reads and writes gettext catalogs through polib."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import polib

from .errors import ParseError

logger = logging.getLogger(__name__)

# Key used for entries without a msgctxt.
NO_CONTEXT = ""


@dataclass
class Catalog:
    """
    A parsed translation catalog.

    `translations` indexes the live (non-obsolete) entries of the underlying
    `polib.POFile` by context, then by msgid, in file order. Mutating an entry
    reached through the index mutates the file that `serialize_catalog` renders.
    """

    po: polib.POFile
    file_path: Path | None = None
    translations: dict[str, dict[str, polib.POEntry]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the context/msgid index over the parsed entries."""
        self.translations = _index_entries(self.po, self.file_path)

    @property
    def metadata(self) -> dict[str, str]:
        """Return the header fields of the catalog."""
        return self.po.metadata


def _index_entries(po: polib.POFile, file_path: Path | None) -> dict[str, dict[str, polib.POEntry]]:
    index: dict[str, dict[str, polib.POEntry]] = {}
    for entry in po:
        if entry.obsolete:
            continue
        by_msgid = index.setdefault(entry.msgctxt or NO_CONTEXT, {})
        if entry.msgid in by_msgid:
            logger.warning(
                "Duplicate entry for msgid '%s' (context '%s') in %s. Only the first one is used.",
                entry.msgid,
                entry.msgctxt or NO_CONTEXT,
                file_path or "<memory>",
            )
            continue
        by_msgid[entry.msgid] = entry
    return index


def parse_catalog(raw: bytes, file_path: Path | str | None = None) -> Catalog:
    """
    Parse raw catalog bytes.

    Args:
        raw: The contents of a .po file.
        file_path: The file the bytes came from, used in error messages.

    Returns:
        The parsed Catalog.

    Raises:
        ParseError: If the bytes cannot be decoded or are not valid PO syntax.

    """
    # The charset declaration is plain ASCII, so sniff it before decoding.
    encoding = polib.detect_encoding(raw.decode("ascii", errors="ignore"))
    try:
        text = raw.decode(encoding)
        po = polib.pofile(text, encoding=encoding)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ParseError(file_path, e) from e
    return Catalog(po=po, file_path=Path(file_path) if file_path is not None else None)


def read_catalog(file_path: Path) -> Catalog:
    """Read and parse the catalog stored at `file_path`."""
    return parse_catalog(file_path.read_bytes(), file_path)


def serialize_catalog(catalog: Catalog) -> bytes:
    """Render the catalog back to .po bytes in its declared encoding."""
    return str(catalog.po).encode(catalog.po.encoding or polib.default_encoding)


def extract_declared_language(catalog: Catalog) -> str | None:
    """
    Return the value of the catalog's `Language` header.

    The header name is matched case-insensitively. Blank values count as absent.
    """
    for key, value in catalog.metadata.items():
        if key.lower() == "language" and isinstance(value, str) and value.strip():
            return value.strip()
    return None


def first_translation(entry: polib.POEntry) -> str:
    """Return the first string of the entry's translation slot."""
    if entry.msgid_plural:
        return entry.msgstr_plural.get(0, "") if entry.msgstr_plural else ""
    return entry.msgstr or ""


def set_first_translation(entry: polib.POEntry, text: str) -> None:
    """
    Overwrite the first string of the entry's translation slot.

    The text is stored unescaped: polib escapes quotes and backslashes when the
    catalog is serialized.
    """
    if entry.msgid_plural:
        entry.msgstr_plural[0] = text
    else:
        entry.msgstr = text
