"""Record codec — pure conversions between records, JSON and CLI input.

All functions are deterministic and stateless.  They never touch the
filesystem; the infrastructure layer feeds them file content and
writes the UTF-8 bytes they return.

The on-disk form is a compact JSON object with fields in a fixed
order::

    {"name":"Rex","owner":"Alice","age":3}
"""

from __future__ import annotations

import json
import re
from typing import Any

from animal_records.core.models import AGE_MAX, AGE_MIN
from animal_records.core.protocols import RecordKind
from animal_records.exceptions import (
    DeserializationError,
    InvalidArgumentError,
    SerializationError,
)

_AGE_PATTERN: re.Pattern[str] = re.compile(r"\+?[0-9]+")

_AGE_HINT: str = f"Age must be a whole number between {AGE_MIN} and {AGE_MAX}."


# ---------------------------------------------------------------------------
# Record → bytes
# ---------------------------------------------------------------------------

def encode_record(record: RecordKind) -> bytes:
    """Serialize *record* to compact UTF-8 JSON (field order: name, owner, age).

    Encoding to bytes happens here, before any file is opened, so a value
    that cannot be written never truncates an existing record.

    Raises
    ------
    SerializationError
        If any field value cannot be represented as UTF-8 JSON, such as a
        string holding a lone surrogate.
    """
    payload: dict[str, Any] = {
        "name": record.name,
        "owner": record.owner,
        "age": record.age,
    }
    try:
        return json.dumps(
            payload, ensure_ascii=False, separators=(",", ":"),
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:  # UnicodeEncodeError is a ValueError
        raise SerializationError(
            f"Cannot encode {record.kind_name()} {record.name!r}: {exc}",
        ) from exc


# ---------------------------------------------------------------------------
# Text → record
# ---------------------------------------------------------------------------

def decode_record(kind: type[RecordKind], text: str) -> RecordKind:
    """Deserialize *text* into a record of *kind*.

    Unknown extra keys are ignored.

    Raises
    ------
    DeserializationError
        If *text* is not a JSON object, a field is missing, a field has
        the wrong type, or ``age`` is outside ``0``–``255``.
    """
    try:
        raw: object = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise DeserializationError(
            f"Stored {kind.kind_name()} is not valid JSON: {exc}",
        ) from exc

    if not isinstance(raw, dict):
        raise DeserializationError(
            f"Stored {kind.kind_name()} must be a JSON object, "
            f"got {type(raw).__name__}.",
        )

    name = _require_str(kind, raw, "name")
    owner = _require_str(kind, raw, "owner")

    if "age" not in raw:
        raise DeserializationError(
            f"Stored {kind.kind_name()} is missing field 'age'.",
        )
    age: object = raw["age"]
    # bool is an int subclass; JSON true/false is not an age.
    if isinstance(age, bool) or not isinstance(age, int):
        raise DeserializationError(
            f"Stored {kind.kind_name()} field 'age' must be an integer.",
        )
    if not AGE_MIN <= age <= AGE_MAX:
        raise DeserializationError(
            f"Stored {kind.kind_name()} field 'age' is out of range: {age}",
        )

    return kind(name=name, owner=owner, age=age)


def _require_str(kind: type[RecordKind], raw: dict[str, Any], field: str) -> str:
    """Return ``raw[field]`` or raise :class:`DeserializationError`."""
    if field not in raw:
        raise DeserializationError(
            f"Stored {kind.kind_name()} is missing field {field!r}.",
        )
    value: object = raw[field]
    if not isinstance(value, str):
        raise DeserializationError(
            f"Stored {kind.kind_name()} field {field!r} must be a string.",
        )
    return value


# ---------------------------------------------------------------------------
# CLI input → record
# ---------------------------------------------------------------------------

def parse_age(raw: str) -> int:
    """Parse a user-supplied age string.

    Accepts ASCII digits with an optional leading ``+``; surrounding
    whitespace, signs other than ``+``, underscores and decimals are
    rejected.

    Raises
    ------
    InvalidArgumentError
        If *raw* is not an integer in ``0``–``255``.
    """
    if not _AGE_PATTERN.fullmatch(raw):
        raise InvalidArgumentError(f"Invalid age: {raw!r}", hint=_AGE_HINT)
    digits = raw.lstrip("+").lstrip("0")
    # More significant digits than AGE_MAX has is always out of range.
    if len(digits) > len(str(AGE_MAX)):
        raise InvalidArgumentError(f"Age out of range: {raw[:16]}…", hint=_AGE_HINT)
    age = int(raw)
    if not AGE_MIN <= age <= AGE_MAX:
        raise InvalidArgumentError(f"Age out of range: {raw}", hint=_AGE_HINT)
    return age


def build_record(
    kind: type[RecordKind],
    name: str,
    owner: str,
    raw_age: str,
) -> RecordKind:
    """Construct a record of *kind* from raw CLI strings.

    *name* is used verbatim; callers are responsible for supplying a
    filesystem-safe value.

    Raises
    ------
    InvalidArgumentError
        If *name* or *owner* is empty, or *raw_age* is not a valid age.
    """
    if not name:
        raise InvalidArgumentError(f"A {kind.kind_name()} needs a non-empty name.")
    if not owner:
        raise InvalidArgumentError(f"A {kind.kind_name()} needs a non-empty owner.")
    return kind(name=name, owner=owner, age=parse_age(raw_age))
