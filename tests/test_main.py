"""Tests for the main CLI entry point."""

import unittest
from argparse import Namespace
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from po_ai_translate.__main__ import _parse_args, _validate_selection, main
from po_ai_translate.catalog import NO_CONTEXT, read_catalog
from po_ai_translate.errors import UsageError

WritePo = Callable[[str, str], Path]

FR_PO = """msgid ""
msgstr ""
"Language: fr\\n"

msgid "Hello"
msgstr ""
"""

NO_LANGUAGE_PO = """msgid ""
msgstr ""

msgid "Goodbye"
msgstr ""
"""


class TestParseArgs(unittest.TestCase):
    """Test suite for CLI argument parsing."""

    def test_parse_args_file_mode(self) -> None:
        """1. File Mode: Parses --file and --language, flags default to off."""
        args = _parse_args(["--file", "fr.po", "--language", "fr"])
        assert isinstance(args, Namespace)
        assert args.file == "fr.po"
        assert args.language == "fr"
        assert args.directory is None
        assert args.dry_run is False
        assert args.debug is False

    def test_parse_args_directory_mode(self) -> None:
        """2. Directory Mode: Parses batch options."""
        args = _parse_args(["-d", "locales", "--include", "**/messages.po", "--concurrency", "4", "--dry-run"])
        assert args.directory == "locales"
        assert args.include == "**/messages.po"
        assert args.concurrency == 4
        assert args.dry_run is True

    def test_parse_args_provider_choices(self) -> None:
        """3. Provider: Known providers parse, unknown ones exit with code 2."""
        assert _parse_args(["-f", "x.po", "--provider", "anthropic"]).provider == "anthropic"
        with pytest.raises(SystemExit) as exc_info:
            _parse_args(["-f", "x.po", "--provider", "unknown"])
        assert exc_info.value.code == 2

    def test_parse_args_no_arguments_prints_help(self) -> None:
        """4. Empty: No arguments prints help and exits with code 1."""
        with patch("sys.argv", ["po-ai-translate"]), pytest.raises(SystemExit) as exc_info:
            _parse_args()
        assert exc_info.value.code == 1

    def test_parse_args_version_flag(self) -> None:
        """5. Version Flag: --version triggers SystemExit with code 0."""
        with pytest.raises(SystemExit) as exc_info:
            _parse_args(["--version"])
        assert exc_info.value.code == 0


class TestValidateSelection(unittest.TestCase):
    """Test suite for the --file/--directory check."""

    def test_both_is_rejected(self) -> None:
        """1. Both: --file and --directory together are a usage error."""
        with pytest.raises(UsageError, match="not both"):
            _validate_selection(Namespace(file="a.po", directory="locales"))

    def test_neither_is_rejected(self) -> None:
        """2. Neither: One of --file or --directory is required."""
        with pytest.raises(UsageError, match="--file <path> or --directory <path>"):
            _validate_selection(Namespace(file=None, directory=None))


class TestMain:
    """Test suite for the main entry point."""

    @pytest.fixture(autouse=True)
    def no_logging_setup(self) -> Iterator[MagicMock]:
        """Keep the test runner's logging handlers in place."""
        with patch("po_ai_translate.__main__.setup_logging") as mock_setup:
            yield mock_setup

    def test_translates_a_file_with_mock_provider(self, write_po: WritePo) -> None:
        """1. File Mode: The file is filled in place using its header language."""
        path = write_po("fr.po", FR_PO)
        main(["--file", str(path), "--provider", "mock"])
        assert read_catalog(path).translations[NO_CONTEXT]["Hello"].msgstr == "[MOCK] Hello"

    def test_dry_run_leaves_file_untouched(self, write_po: WritePo, caplog: pytest.LogCaptureFixture) -> None:
        """2. Dry Run: Nothing is written and the summary reports the count."""
        path = write_po("fr.po", FR_PO)
        before = path.read_bytes()
        with caplog.at_level("INFO"):
            main(["--file", str(path), "--provider", "mock", "--dry-run"])
        assert path.read_bytes() == before
        assert "Entries That Would Be Translated: 1" in caplog.text

    def test_directory_mode_with_config_file(self, tmp_path: Path, write_po: WritePo) -> None:
        """3. Directory Mode: Settings come from the YAML file; --language is the fallback."""
        fr = write_po("locales/fr.po", FR_PO)
        other = write_po("locales/other.po", NO_LANGUAGE_PO)
        config_path = tmp_path / "po-ai-translate.yaml"
        config_path.write_text("provider: mock\nconcurrency: 1\n", encoding="utf-8")

        main(["--directory", str(tmp_path / "locales"), "--config", str(config_path), "--language", "es"])

        assert read_catalog(fr).translations[NO_CONTEXT]["Hello"].msgstr == "[MOCK] Hello"
        assert read_catalog(other).translations[NO_CONTEXT]["Goodbye"].msgstr == "[MOCK] Goodbye"

    @pytest.mark.parametrize(
        "argv",
        [
            pytest.param(["--file", "a.po", "--directory", "locales", "--provider", "mock"], id="both"),
            pytest.param(["--provider", "mock"], id="neither"),
            pytest.param(["--directory", "locales", "--provider", "mock", "--concurrency", "0"], id="bad-concurrency"),
            pytest.param(["--directory", "locales", "--provider", "mock", "--include", "/abs/*.po"], id="absolute-include"),
        ],
    )
    def test_usage_errors_exit_with_code_1(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        """4. Usage: Invalid selections exit 1 and print the help text."""
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_missing_api_key_exits(self, write_po: WritePo, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
        """5. Credentials: A missing provider key exits 1 before any request."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        path = write_po("fr.po", FR_PO)
        before = path.read_bytes()

        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(path)])

        assert exc_info.value.code == 1
        assert "Missing OPENAI_API_KEY in environment" in caplog.text
        assert path.read_bytes() == before

    def test_missing_language_exits(self, write_po: WritePo, caplog: pytest.LogCaptureFixture) -> None:
        """6. Language: A file without header or --language exits 1."""
        path = write_po("unknown.po", NO_LANGUAGE_PO)
        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(path), "--provider", "mock"])
        assert exc_info.value.code == 1
        assert "Could not determine language" in caplog.text

    def test_unexpected_error_is_logged(self, write_po: WritePo, caplog: pytest.LogCaptureFixture) -> None:
        """7. Unexpected: Unknown exceptions are logged with a traceback and exit 1."""
        path = write_po("fr.po", FR_PO)
        with patch("po_ai_translate.__main__.translate_file", side_effect=RuntimeError("boom")), pytest.raises(SystemExit) as exc_info:
            main(["--file", str(path), "--provider", "mock"])
        assert exc_info.value.code == 1
        assert "An unexpected error occurred" in caplog.text
