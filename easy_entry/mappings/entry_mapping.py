"""MutableMapping mixin and dict subclass exposing ``entry(key)``."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TypeVar, override

from easy_entry.entry import Entry, entry


_K = TypeVar("_K")
_V = TypeVar("_V")


class EntryMapping(MutableMapping[_K, _V]):
    """Abstract mutable mapping whose instances hand out :class:`Entry` views.

    Subclasses implement the usual ``__getitem__``, ``__setitem__``,
    ``__delitem__``, ``__iter__`` and ``__len__``.
    """

    __slots__ = ()

    def entry(self, key: _K) -> Entry[_K, _V]:
        """Return an entry bound to this mapping and ``key``."""
        return entry(self, key)


class EntryDict(dict[_K, _V], EntryMapping[_K, _V]):
    """A ``dict`` with an ``entry(key)`` method.

    Lookups, ``pop`` and ``setdefault`` stay dict's own implementations.
    """

    __slots__ = ()

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"
