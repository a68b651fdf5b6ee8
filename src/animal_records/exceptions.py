"""Custom exception hierarchy for animal-records.

All exceptions that cross layer boundaries must inherit from
:class:`AnimalRecordsError`.  Raw ``OSError`` and ``json`` exceptions
must NEVER propagate beyond the infrastructure layer — they are caught
there and re-raised as a typed subclass defined here.

Hierarchy
---------
AnimalRecordsError
├── RecordIOError
├── NotFoundError
├── SerializationError
├── DeserializationError
├── InvalidArgumentError
└── EnvironmentError
"""

from __future__ import annotations


class AnimalRecordsError(Exception):
    """Base exception for all animal-records errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Storage ---------------------------------------------------------------

class RecordIOError(AnimalRecordsError):
    """Raised when a collection directory or record file cannot be accessed."""


class NotFoundError(AnimalRecordsError):
    """Raised when no record file exists for the requested name."""


# --- Encoding --------------------------------------------------------------

class SerializationError(AnimalRecordsError):
    """Raised when a record value cannot be encoded."""


class DeserializationError(AnimalRecordsError):
    """Raised when stored file content does not match the record schema."""


# --- Input -----------------------------------------------------------------

class InvalidArgumentError(AnimalRecordsError):
    """Raised when user-supplied input is empty or cannot be parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AnimalRecordsError):
    """Raised when an optional runtime dependency is not available."""
