"""Core record service — orchestrates the create/show/list commands.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~animal_records.core.protocols.RecordStore`
injected at construction time (dependency inversion), keeping the core
free of any filesystem access.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Input is validated before the store is touched.
* Only :class:`~animal_records.exceptions.AnimalRecordsError` subclasses
  escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from animal_records.core.codec import build_record
from animal_records.core.protocols import RecordKind, RecordStore
from animal_records.exceptions import AnimalRecordsError, RecordIOError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class RecordService:
    """Stateless service driving the record commands.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`RecordStore` protocol.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store: RecordStore = store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(
        self,
        kind: type[RecordKind],
        name: str,
        owner: str,
        raw_age: str,
    ) -> RecordKind:
        """Build a record from raw CLI strings and persist it.

        An existing record with the same kind and name is overwritten.

        Raises
        ------
        InvalidArgumentError
            If the input is invalid.  Nothing is written in that case.
        RecordIOError
            If the record cannot be written.
        """
        record = build_record(kind, name, owner, raw_age)
        logger.debug("Creating %s %r", kind.kind_name(), record.name)
        self._call(lambda: self._store.save(record))
        return record

    def show(self, kind: type[RecordKind], name: str) -> RecordKind:
        """Load the record of *kind* called *name*.

        Raises
        ------
        NotFoundError
            If no such record exists.
        DeserializationError
            If the stored file is malformed.
        """
        return self._call(lambda: self._store.load(kind, name))

    def list_names(self, kind: type[RecordKind]) -> list[str]:
        """Return the names of all stored records of *kind*."""
        return self._call(lambda: self._store.list_names(kind))

    # ------------------------------------------------------------------
    # Store delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(operation: Callable[[], _T]) -> _T:
        """Run a store operation and ensure only our exceptions escape."""
        try:
            return operation()
        except AnimalRecordsError:
            raise
        except Exception as exc:
            raise RecordIOError(
                f"Unexpected storage error: {exc}",
            ) from exc
