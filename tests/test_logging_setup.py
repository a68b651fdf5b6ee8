"""Tests for logging configuration (utils/logging_setup.py)."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from animal_records.cli.app import main
from animal_records.utils.logging_setup import PACKAGE_LOGGER, setup_logging


class TestSetupLogging:
    def test_sets_level(self) -> None:
        logger = setup_logging("DEBUG")
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self) -> None:
        assert setup_logging("chatty").level == logging.WARNING

    def test_repeated_calls_keep_one_handler(self) -> None:
        setup_logging("INFO")
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1

    def test_replaced_handler_is_closed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        (old_handler,) = setup_logging("INFO").handlers
        close = MagicMock()
        monkeypatch.setattr(old_handler, "close", close)

        logger = setup_logging("INFO")

        close.assert_called_once_with()
        assert old_handler not in logger.handlers


class TestVerboseFlag:
    def test_debug_logs_go_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["--root", str(tmp_path), "-v", "dog", "new", "-n", "Rex", "-o", "Alice", "-a", "3"])
        captured = capsys.readouterr()
        assert "DEBUG" in captured.err
        assert "Rex.json" in captured.err
        assert captured.out == ""

    def test_quiet_by_default(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["--root", str(tmp_path), "dog", "list"])
        assert "DEBUG" not in capsys.readouterr().err
