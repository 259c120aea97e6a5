"""easy-entry - chainable entry API for a single slot of a mutable mapping"""

from ._version import version as __version__
from .entry import Entry, entry
from .mappings import EntryDict, EntryMapping
from .option import ABSENT, Absent, AbsentValueError, Option, Present


__all__ = [
    "ABSENT",
    "Absent",
    "AbsentValueError",
    "Entry",
    "EntryDict",
    "EntryMapping",
    "Option",
    "Present",
    "__version__",
    "entry",
]
