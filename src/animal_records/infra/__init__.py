"""Infrastructure layer — filesystem integration.

This layer owns every read and write of record files.  Each raw
``OSError`` is caught here and re-raised as an
:class:`~animal_records.exceptions.AnimalRecordsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from animal_records.infra.file_store import CollectionStatus, FileRecordStore

__all__: list[str] = [
    "CollectionStatus",
    "FileRecordStore",
]
