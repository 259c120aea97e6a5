"""Mapping types with a built-in ``entry()`` accessor."""

from .entry_mapping import EntryDict, EntryMapping


__all__ = ["EntryDict", "EntryMapping"]
