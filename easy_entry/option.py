"""Explicit present/absent results for mapping slot lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Generic, Literal, TypeAlias, TypeVar, final, override


_T = TypeVar("_T")
_D = TypeVar("_D")


class AbsentValueError(LookupError):
    """Raised when unwrapping a result that holds no value."""


@final
@dataclass(frozen=True, slots=True)
class Present(Generic[_T]):
    """A slot that holds ``value``, which may itself be ``None``."""

    value: _T

    @property
    def is_present(self) -> Literal[True]:
        return True

    @property
    def is_absent(self) -> Literal[False]:
        return False

    def unwrap(self) -> _T:
        """Return the held value."""
        return self.value

    def unwrap_or(self, default: Any) -> _T:  # noqa: ARG002
        """Return the held value, ignoring ``default``."""
        return self.value

    def __bool__(self) -> bool:
        return True


@final
class Absent:
    """A slot with no value. There is exactly one instance, ``ABSENT``."""

    __slots__ = ()

    _instance: Absent | None = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_present(self) -> Literal[False]:
        return False

    @property
    def is_absent(self) -> Literal[True]:
        return True

    def unwrap(self) -> Any:
        """Raise ``AbsentValueError``; there is nothing to return."""
        msg = "called unwrap() on an absent value"
        raise AbsentValueError(msg)

    def unwrap_or(self, default: _D) -> _D:
        """Return ``default``."""
        return default

    def __bool__(self) -> bool:
        return False

    @override
    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent()

Option: TypeAlias = Present[_T] | Absent
