"""Chainable handle over a single key of a mutable mapping."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Final, Generic, Self, TypeVar, override

from easy_entry.option import ABSENT, Present


if TYPE_CHECKING:
    from collections.abc import Callable

    from easy_entry.option import Option


logger = logging.getLogger(__name__)

_K = TypeVar("_K")
_V = TypeVar("_V")

_MISSING: Final = object()


class Entry(Generic[_K, _V]):
    """A view of one key's slot in a mapping.

    The entry holds the mapping by reference and never caches the slot's
    value: every call looks the key up again, so one entry can be kept and
    reused while the mapping changes underneath it. Presence means the key is
    in the mapping, so a stored ``None`` counts as present.

    Operations that only act on the slot return the entry itself and can be
    chained; operations that yield a value end the chain::

        >>> groups = {10: ["Hello"]}
        >>> entry(groups, 10).and_modify(lambda v: v.append("World")).or_insert([])
        ['Hello', 'World']

    Build entries with :func:`entry` or ``EntryMapping.entry``.
    """

    __slots__ = ("_key", "_map")

    def __init__(self, *, key: _K, mapping: MutableMapping[_K, _V]) -> None:
        super().__init__()
        self._key = key
        self._map = mapping

    @property
    def key(self) -> _K:
        """The key this entry addresses."""
        return self._key

    def _lookup(self) -> object:
        return self._map.get(self._key, _MISSING)

    def and_modify(self, f: Callable[[_V], object]) -> Self:
        """Call ``f`` on the stored value if the key is present.

        ``f`` is expected to mutate the value in place; its return value is
        discarded. Immutable values are left as they were, use
        :meth:`replace_with` for those.
        """
        value = self._lookup()
        if value is not _MISSING:
            _ = f(value)  # type: ignore[arg-type]
        return self

    def retain_if(self, predicate: Callable[[_V], bool]) -> Self:
        """Remove the key if its value fails ``predicate``.

        Nothing happens when the key is absent. ``predicate`` should not
        mutate the value.
        """
        value = self._lookup()
        if value is _MISSING or predicate(value):  # type: ignore[arg-type]
            return self
        del self._map[self._key]
        logger.debug("entry %r removed by retain_if", self._key)
        return self

    def remove(self) -> Option[_V]:
        """Remove the key, returning ``Present(previous)`` or ``ABSENT``."""
        value = self._map.pop(self._key, _MISSING)
        if value is _MISSING:
            return ABSENT
        logger.debug("entry %r removed", self._key)
        return Present(value)  # type: ignore[arg-type]

    @property
    def exists(self) -> bool:
        """Whether the key is currently in the mapping."""
        return self._key in self._map

    def peek(self) -> Option[_V]:
        """Return ``Present(value)`` for the current value, or ``ABSENT``."""
        value = self._lookup()
        if value is _MISSING:
            return ABSENT
        return Present(value)  # type: ignore[arg-type]

    @property
    def or_none(self) -> _V | None:
        """The current value, or ``None`` when absent.

        Ambiguous for mappings that store ``None``; prefer :meth:`peek` there.
        """
        return self._map.get(self._key)

    def or_insert(self, value: _V) -> _V:
        """Insert ``value`` if the key is absent and return the stored value.

        >>> counts = {"a": 10}
        >>> entry(counts, "a").or_insert(0), entry(counts, "b").or_insert(0)
        (10, 0)
        """
        current = self._lookup()
        if current is not _MISSING:
            return current  # type: ignore[return-value]
        self._map[self._key] = value
        logger.debug("entry %r inserted", self._key)
        return value

    def or_insert_with(self, f: Callable[[], _V]) -> _V:
        """Like :meth:`or_insert`, but ``f()`` is only called when the key is absent."""
        current = self._lookup()
        if current is not _MISSING:
            return current  # type: ignore[return-value]
        value = f()
        self._map[self._key] = value
        logger.debug("entry %r inserted", self._key)
        return value

    def or_insert_with_key(self, f: Callable[[_K], _V]) -> _V:
        """Like :meth:`or_insert_with`, passing the key to ``f``.

        >>> names = {}
        >>> entry(names, "other").or_insert_with_key(len)
        5
        """
        current = self._lookup()
        if current is not _MISSING:
            return current  # type: ignore[return-value]
        value = f(self._key)
        self._map[self._key] = value
        logger.debug("entry %r inserted", self._key)
        return value

    def replace(self, value: _V) -> Self:
        """Overwrite the value if the key is present. Never inserts."""
        if self._key in self._map:
            self._map[self._key] = value
            logger.debug("entry %r replaced", self._key)
        return self

    def replace_with(self, f: Callable[[], _V]) -> Self:
        """Like :meth:`replace`, but ``f()`` is only called when the key is present."""
        if self._key in self._map:
            self._map[self._key] = f()
            logger.debug("entry %r replaced", self._key)
        return self

    def replace_with_key(self, f: Callable[[_K], _V]) -> Self:
        """Like :meth:`replace_with`, passing the key to ``f``."""
        if self._key in self._map:
            self._map[self._key] = f(self._key)
            logger.debug("entry %r replaced", self._key)
        return self

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r}: {self.peek()!r})"


def entry(mapping: MutableMapping[_K, _V], key: _K) -> Entry[_K, _V]:
    """Return an :class:`Entry` for ``key`` in ``mapping``.

    The mapping is not touched until an operation is called on the entry.
    """
    if not isinstance(mapping, MutableMapping):
        msg = f"entry() requires a mutable mapping, got {type(mapping).__name__}"
        raise TypeError(msg)
    return Entry(key=key, mapping=mapping)
