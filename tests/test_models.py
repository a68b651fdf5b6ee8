"""Tests for domain models (core/models.py).

Both kinds are frozen dataclasses — these tests verify immutability,
equality semantics, the kind capability, and the kind registry.
"""

from __future__ import annotations

import pytest

from animal_records.core.models import KINDS, Cat, Dog, get_kind
from animal_records.exceptions import InvalidArgumentError


# ---------------------------------------------------------------------------
# Field access and value semantics
# ---------------------------------------------------------------------------

class TestRecordValues:
    def test_fields_accessible(self) -> None:
        d = Dog(name="Rex", owner="Alice", age=3)
        assert d.name == "Rex"
        assert d.owner == "Alice"
        assert d.age == 3

    def test_frozen(self) -> None:
        d = Dog(name="Rex", owner="Alice", age=3)
        with pytest.raises(AttributeError):
            d.age = 4  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Cat(name="Tom", owner="Bob", age=2) == Cat(name="Tom", owner="Bob", age=2)

    def test_inequality(self) -> None:
        assert Cat(name="Tom", owner="Bob", age=2) != Cat(name="Tom", owner="Bob", age=5)

    def test_dog_never_equals_cat(self) -> None:
        assert Dog(name="Rex", owner="Alice", age=3) != Cat(name="Rex", owner="Alice", age=3)

    def test_repr_lists_fields_in_order(self) -> None:
        assert repr(Dog(name="Rex", owner="Alice", age=3)) == (
            "Dog(name='Rex', owner='Alice', age=3)"
        )


# ---------------------------------------------------------------------------
# Kind capability
# ---------------------------------------------------------------------------

class TestKindCapability:
    @pytest.mark.parametrize(
        ("kind", "word", "collection"),
        [(Dog, "dog", "dogs"), (Cat, "cat", "cats")],
    )
    def test_names(self, kind: type[Dog] | type[Cat], word: str, collection: str) -> None:
        assert kind.kind_name() == word
        assert kind.collection_name() == collection
        assert kind.file_extension() == "json"

    def test_available_on_instances(self) -> None:
        assert Dog(name="Rex", owner="Alice", age=3).collection_name() == "dogs"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestKindRegistry:
    def test_registry_order(self) -> None:
        assert list(KINDS) == ["dog", "cat"]

    def test_get_kind(self) -> None:
        assert get_kind("dog") is Dog
        assert get_kind("CAT") is Cat

    def test_get_unknown_kind(self) -> None:
        with pytest.raises(InvalidArgumentError, match="horse") as exc_info:
            get_kind("horse")
        assert exc_info.value.hint is not None
        assert "dog" in exc_info.value.hint
