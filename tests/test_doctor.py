"""Tests for the ``animals doctor`` command (cli/doctor.py).

Coverage:
* Individual check functions return correct tuples.
* Doctor never creates collection directories.
* Doctor returns GENERAL_ERROR when a check fails.
* CLI routing dispatches to ``run_doctor`` with the loaded settings.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from animal_records.cli import exit_codes
from animal_records.config import Settings
from animal_records.core.models import Cat, Dog
from animal_records.infra.file_store import FileRecordStore


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from animal_records.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestRichCheck:
    def test_installed(self) -> None:
        from animal_records.cli.doctor import _rich_check

        label, _value, status = _rich_check()
        assert label == "rich"
        assert "OK" in status

    @patch.dict("sys.modules", {"rich": None})
    def test_not_installed(self) -> None:
        from animal_records.cli.doctor import _rich_check

        label, value, status = _rich_check()
        assert label == "rich"
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestRootCheck:
    def test_missing_root_is_warning(self, root: Path) -> None:
        from animal_records.cli.doctor import _root_check

        _label, value, status = _root_check(FileRecordStore(root))
        assert value == str(root)
        assert "WARN" in status

    def test_root_is_file_fails(self, tmp_path: Path) -> None:
        from animal_records.cli.doctor import _root_check

        blocker = tmp_path / "animals"
        blocker.write_text("", encoding="utf-8")
        _label, _value, status = _root_check(FileRecordStore(blocker))
        assert "FAIL" in status

    def test_existing_root(self, store: FileRecordStore) -> None:
        from animal_records.cli.doctor import _root_check

        assert "OK" in _root_check(store)[2]


class TestCollectionCheck:
    def test_counts_records(self, store: FileRecordStore) -> None:
        from animal_records.cli.doctor import _collection_check

        store.save(Dog(name="Rex", owner="Alice", age=3))
        store.save(Dog(name="Fido", owner="Carol", age=5))
        label, value, status = _collection_check(store, Dog)
        assert label == "dogs"
        assert "(2 records)" in value
        assert "OK" in status

    def test_missing_collection_is_warning(self, root: Path) -> None:
        from animal_records.cli.doctor import _collection_check

        label, value, status = _collection_check(FileRecordStore(root), Cat)
        assert label == "cats"
        assert "missing" in value
        assert "WARN" in status


class TestVersionCheck:
    def test_returns_current_version(self) -> None:
        from animal_records.cli.doctor import _version_check
        from animal_records.version import __version__

        label, value, status = _version_check()
        assert label == "animal-records"
        assert value == __version__
        assert "OK" in status


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_fresh_root_succeeds_without_creating_it(self, root: Path) -> None:
        from animal_records.cli.doctor import run_doctor

        code = run_doctor(Settings(root=root))
        assert code == exit_codes.SUCCESS
        assert not root.exists()

    def test_root_is_file_fails(self, tmp_path: Path) -> None:
        from animal_records.cli.doctor import run_doctor

        blocker = tmp_path / "animals"
        blocker.write_text("", encoding="utf-8")
        assert run_doctor(Settings(root=blocker)) == exit_codes.GENERAL_ERROR

    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output(
        self, store: FileRecordStore, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from animal_records.cli.doctor import run_doctor

        store.save(Cat(name="Tom", owner="Bob", age=2))
        code = run_doctor(Settings(root=store.root))
        assert code == exit_codes.SUCCESS

        err = capsys.readouterr().err
        assert "animals doctor" in err
        assert "(1 records)" in err
        assert "All checks passed." in err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("animal_records.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches_with_settings(self, mock_run: MagicMock, root: Path) -> None:
        from animal_records.cli.app import main

        code = main(["--root", str(root), "doctor"])
        assert code == exit_codes.SUCCESS
        mock_run.assert_called_once()
        (settings,) = mock_run.call_args.args
        assert settings.root == root

    @patch("animal_records.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from animal_records.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.GENERAL_ERROR
