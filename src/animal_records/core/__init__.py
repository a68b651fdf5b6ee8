"""Core / service layer — record kinds, codec and command orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from animal_records.core.codec import build_record, decode_record, encode_record, parse_age
from animal_records.core.models import KINDS, Cat, Dog, get_kind
from animal_records.core.protocols import RecordKind, RecordStore
from animal_records.core.record_service import RecordService

__all__: list[str] = [
    "KINDS",
    "Cat",
    "Dog",
    "RecordKind",
    "RecordService",
    "RecordStore",
    "build_record",
    "decode_record",
    "encode_record",
    "get_kind",
    "parse_age",
]
