"""Shared pytest fixtures and configuration for the animal-records test suite.

Guidelines
----------
* Every store is rooted in ``tmp_path`` — no test touches the working
  directory's ``animals/`` folder.
* Core tests use in-memory fakes instead of the filesystem.
* Tests must not depend on environment variables set outside the test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from animal_records.core.models import KINDS
from animal_records.infra.file_store import FileRecordStore
from animal_records.utils.logging_setup import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear settings env vars and drop log handlers installed by a test."""
    monkeypatch.delenv("ANIMAL_RECORDS_ROOT", raising=False)
    monkeypatch.delenv("ANIMAL_RECORDS_LOG_LEVEL", raising=False)
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture()
def root(tmp_path: Path) -> Path:
    """Collection root inside the test's temporary directory."""
    return tmp_path / "animals"


@pytest.fixture()
def store(root: Path) -> FileRecordStore:
    """File store with both collection directories created."""
    file_store = FileRecordStore(root)
    file_store.ensure_collections(KINDS.values())
    return file_store
