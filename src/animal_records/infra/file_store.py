"""File-per-record implementation of :class:`~animal_records.core.protocols.RecordStore`.

Layout relative to the collection root::

    <root>/dogs/<name>.json
    <root>/cats/<name>.json

This module is the **only** place in the codebase that reads or writes
record files.  Every ``OSError`` is caught here and re-raised as a
typed :class:`~animal_records.exceptions.AnimalRecordsError` subclass.

Rules
-----
* No ``print()`` — callers handle user-facing output.
* No sanitisation of record names: a name containing path separators
  resolves outside its collection directory.
* One whole-file write per ``save``; last writer wins.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from animal_records.core.codec import decode_record, encode_record
from animal_records.core.protocols import RecordKind
from animal_records.exceptions import DeserializationError, NotFoundError, RecordIOError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Collection status
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CollectionStatus:
    """Status of one collection directory.

    Attributes
    ----------
    kind : str
        Singular kind word (``dog``, ``cat``).
    path : Path
        Collection directory.
    exists : bool
        Whether *path* is an existing directory.
    writable : bool
        Whether the current user may create files in *path*.
    count : int | None
        Number of entries, or ``None`` when the directory is unreadable.
    """

    kind: str
    path: Path
    exists: bool
    writable: bool
    count: int | None


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class FileRecordStore:
    """Concrete :class:`RecordStore` keeping one JSON file per record.

    Usage::

        store = FileRecordStore(Path("animals"))
        store.ensure_collections([Dog, Cat])
        store.save(Dog(name="Rex", owner="Alice", age=3))
        store.load(Dog, "Rex")

    Parameters
    ----------
    root:
        Collection root under which each kind's directory lives.
    """

    def __init__(self, root: Path) -> None:
        self._root: Path = Path(root)

    @property
    def root(self) -> Path:
        """Collection root this store reads and writes under."""
        return self._root

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def collection_dir(self, kind: type[RecordKind]) -> Path:
        """Return the directory holding every record of *kind*."""
        return self._root / kind.collection_name()

    def derive_path(self, kind: type[RecordKind], name: str) -> Path:
        """Return ``<root>/<collection>/<name>.<ext>`` for *name*."""
        return self.collection_dir(kind) / f"{name}.{kind.file_extension()}"

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def ensure_collections(self, kinds: Iterable[type[RecordKind]]) -> None:
        """Create each kind's collection directory if absent.

        Raises
        ------
        RecordIOError
            When a directory cannot be created.
        """
        for kind in kinds:
            directory = self.collection_dir(kind)
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise RecordIOError(
                    f"Cannot create collection directory {directory}: {exc}",
                    hint="Check that the collection root is writable.",
                ) from exc
            logger.debug("Collection ready: %s", directory)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def save(self, record: RecordKind) -> None:
        """Write *record* to its derived path, truncating any existing file.

        Raises
        ------
        SerializationError
            If the record cannot be encoded.
        RecordIOError
            If the file cannot be written.
        """
        kind = type(record)
        path = self.derive_path(kind, record.name)
        # Encode before opening: a failed encode leaves the old file untouched.
        data = encode_record(record)
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise RecordIOError(
                f"Cannot write {kind.kind_name()} {record.name!r} to {path}: {exc}",
                hint="Check that the collection directory exists and is writable.",
            ) from exc
        logger.debug("Wrote %s", path)

    def load(self, kind: type[RecordKind], name: str) -> RecordKind:
        """Read and decode the record of *kind* called *name*.

        Raises
        ------
        NotFoundError
            If no file exists at the derived path.
        DeserializationError
            If the file is not UTF-8 or does not match the schema.
        RecordIOError
            For any other read failure.
        """
        path = self.derive_path(kind, name)
        logger.debug("Reading %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise NotFoundError(
                f"No {kind.kind_name()} named {name!r} found.",
                hint=f"Run '{kind.kind_name()} list' to see stored names.",
            ) from exc
        except UnicodeDecodeError as exc:
            raise DeserializationError(
                f"Stored {kind.kind_name()} {name!r} is not valid UTF-8.",
            ) from exc
        except OSError as exc:
            raise RecordIOError(
                f"Cannot read {kind.kind_name()} {name!r} from {path}: {exc}",
            ) from exc
        return decode_record(kind, text)

    def list_names(self, kind: type[RecordKind]) -> list[str]:
        """Return the stem of every entry in *kind*'s directory, sorted.

        Raises
        ------
        RecordIOError
            If the directory is missing or unreadable.
        """
        directory = self.collection_dir(kind)
        try:
            with os.scandir(directory) as it:
                entries = [Path(entry.name).stem for entry in it]
        except OSError as exc:
            raise RecordIOError(
                f"Cannot list {kind.collection_name()} in {directory}: {exc}",
            ) from exc
        logger.debug("Listed %d entries in %s", len(entries), directory)
        return sorted(entries)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def collection_status(self, kind: type[RecordKind]) -> CollectionStatus:
        """Inspect *kind*'s directory without creating or modifying anything."""
        directory = self.collection_dir(kind)
        exists = directory.is_dir()
        count: int | None = None
        if exists:
            try:
                with os.scandir(directory) as entries:
                    count = sum(1 for _ in entries)
            except OSError:
                count = None
        return CollectionStatus(
            kind=kind.kind_name(),
            path=directory,
            exists=exists,
            writable=exists and os.access(directory, os.W_OK | os.X_OK),
            count=count,
        )
