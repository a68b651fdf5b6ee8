"""Domain models for animal-records.

Both record kinds are **frozen** dataclasses — immutable value objects
built for a single operation and discarded afterwards.  They carry zero
I/O and no dependencies on external packages.

The kind-level capability (collection directory, file extension, CLI
word) is exposed through classmethods so that the store and the service
can be written once, generic over :class:`~animal_records.core.protocols.RecordKind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from animal_records.exceptions import InvalidArgumentError

AGE_MIN: int = 0
AGE_MAX: int = 255


# ---------------------------------------------------------------------------
# Shared field layout
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class _AnimalRecord:
    """Field layout shared by every record kind."""

    name: str
    """Unique key within the kind's collection; also the file stem."""

    owner: str
    """Name of the owner."""

    age: int
    """Age in years, ``0``–``255``."""

    _KIND: ClassVar[str] = ""
    _COLLECTION: ClassVar[str] = ""
    _EXTENSION: ClassVar[str] = "json"

    @classmethod
    def kind_name(cls) -> str:
        """Singular CLI word for this kind (``dog``, ``cat``)."""
        return cls._KIND

    @classmethod
    def collection_name(cls) -> str:
        """Plural directory name holding this kind's records."""
        return cls._COLLECTION

    @classmethod
    def file_extension(cls) -> str:
        """Extension of record files, without the leading dot."""
        return cls._EXTENSION


# ---------------------------------------------------------------------------
# Concrete kinds
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dog(_AnimalRecord):
    """A dog record, stored under ``<root>/dogs/``."""

    _KIND: ClassVar[str] = "dog"
    _COLLECTION: ClassVar[str] = "dogs"


@dataclass(frozen=True, slots=True)
class Cat(_AnimalRecord):
    """A cat record, stored under ``<root>/cats/``."""

    _KIND: ClassVar[str] = "cat"
    _COLLECTION: ClassVar[str] = "cats"


# ---------------------------------------------------------------------------
# Kind registry
# ---------------------------------------------------------------------------

KINDS: dict[str, type[Dog] | type[Cat]] = {
    Dog.kind_name(): Dog,
    Cat.kind_name(): Cat,
}
"""CLI word → record kind, in the order commands are registered."""


def get_kind(word: str) -> type[Dog] | type[Cat]:
    """Return the record kind registered under *word*.

    Raises
    ------
    InvalidArgumentError
        If *word* names no known kind.
    """
    try:
        return KINDS[word.lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown record kind: {word}",
            hint=f"Choose one of: {', '.join(KINDS)}",
        ) from None
