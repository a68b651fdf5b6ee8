"""Protocols (interfaces) consumed by the core layer.

These define the contracts that record kinds and storage adapters must
satisfy.  Core code depends ONLY on these protocols — never on the
concrete file store — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol


class RecordKind(Protocol):
    """Capability shared by every record kind.

    Any class with the three record fields, a ``(name, owner, age)``
    constructor and the classmethods below satisfies this protocol
    structurally.  :class:`~animal_records.core.models.Dog` and
    :class:`~animal_records.core.models.Cat` are the two implementers.
    """

    @property
    def name(self) -> str: ...  # pragma: no cover

    @property
    def owner(self) -> str: ...  # pragma: no cover

    @property
    def age(self) -> int: ...  # pragma: no cover

    def __init__(self, name: str, owner: str, age: int) -> None: ...  # pragma: no cover

    @classmethod
    def kind_name(cls) -> str: ...  # pragma: no cover

    @classmethod
    def collection_name(cls) -> str: ...  # pragma: no cover

    @classmethod
    def file_extension(cls) -> str: ...  # pragma: no cover


class RecordStore(Protocol):
    """Contract for record persistence backends.

    Implementations must map all backend-specific exceptions to
    :class:`~animal_records.exceptions.AnimalRecordsError` subclasses.
    """

    def save(self, record: RecordKind) -> None:
        """Persist *record*, replacing any record of the same kind and name.

        Raises
        ------
        RecordIOError
            When the collection cannot be written.
        SerializationError
            When the record cannot be encoded.
        """
        ...  # pragma: no cover

    def load(self, kind: type[RecordKind], name: str) -> RecordKind:
        """Return the stored record of *kind* called *name*.

        Raises
        ------
        NotFoundError
            When no such record exists.
        DeserializationError
            When the stored content does not match the schema.
        RecordIOError
            When the record cannot be read.
        """
        ...  # pragma: no cover

    def list_names(self, kind: type[RecordKind]) -> list[str]:
        """Return the names of every stored record of *kind*.

        Raises
        ------
        RecordIOError
            When the collection cannot be enumerated.
        """
        ...  # pragma: no cover
