from collections.abc import Iterator, MutableMapping
from typing import override

import pytest

from easy_entry.entry import Entry
from easy_entry.mappings import EntryDict, EntryMapping
from easy_entry.option import Present


class _CountingMapping(EntryMapping[str, int]):
    """Mapping that records how often each dunder is called."""

    def __init__(self, **data: int) -> None:
        super().__init__()
        self._data = dict(data)
        self.lookups = 0

    @override
    def __getitem__(self, key: str) -> int:
        self.lookups += 1
        return self._data[key]

    @override
    def __setitem__(self, key: str, value: int) -> None:
        self._data[key] = value

    @override
    def __delitem__(self, key: str) -> None:
        del self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)


def test_entry_dict_is_a_dict_and_a_mutable_mapping() -> None:
    mapping = EntryDict({10: ["Hello"]})
    assert isinstance(mapping, dict)
    assert isinstance(mapping, MutableMapping)
    assert mapping == {10: ["Hello"]}


def test_entry_dict_entry_method_binds_to_itself() -> None:
    mapping: EntryDict[int, list[str]] = EntryDict({10: ["Hello"]})

    hello_world = (
        mapping.entry(10)
        .and_modify(lambda value: value.append("World"))
        .retain_if(lambda value: len(value) == 2)
        .or_insert(["Default"])
    )

    assert isinstance(mapping.entry(10), Entry)
    assert hello_world == ["Hello", "World"]
    assert mapping == {10: ["Hello", "World"]}


def test_entry_dict_repr() -> None:
    assert repr(EntryDict(a=1)) == "EntryDict({'a': 1})"


def test_entry_mapping_requires_abstract_methods() -> None:
    with pytest.raises(TypeError):
        _ = EntryMapping()  # type: ignore[abstract]


def test_entry_mapping_subclass_gains_entry_method() -> None:
    mapping = _CountingMapping(a=1)

    assert mapping.entry("a").or_insert(5) == 1
    assert mapping.entry("b").or_insert_with_key(len) == 1
    assert mapping.entry("a").remove() == Present(1)
    assert dict(mapping) == {"b": 1}


def test_entry_on_custom_mapping_looks_up_once_per_operation() -> None:
    mapping = _CountingMapping(a=1)

    _ = mapping.entry("a").and_modify(lambda _value: None)

    assert mapping.lookups == 1
