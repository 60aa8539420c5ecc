"""A value, or nothing.

`Present` and `Absent` share the same set of operations, so a chain of `map` / `flat_map` calls
never needs to branch on which one it holds. Absence is not an error: it flows silently through
the chain until a terminal operation supplies a default.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from fallible.core import NotSet, Variant, is_absent_sentinel

T = TypeVar("T")
U = TypeVar("U")


@dataclass(slots=True, frozen=True)
class Present(Generic[T]):
    """Holds exactly one value."""

    value: T

    @classmethod
    def of(cls, value: T) -> Present[T]:
        return cls(value)

    @property
    def variant(self) -> Variant:
        return Variant.PRESENT

    def is_present(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Optional[U]:
        return Present(fn(self.value))

    def flat_map(self, fn: Callable[[T], Optional[U]]) -> Optional[U]:
        return fn(self.value)

    def or_else(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        return self

    def get_or_else(self, fallback: T) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class Absent(Generic[T]):
    """Holds no value. All instances are equal."""

    @classmethod
    def of(cls) -> Absent[T]:
        return ABSENT

    @property
    def variant(self) -> Variant:
        return Variant.ABSENT

    def is_present(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Optional[U]:
        return ABSENT

    def flat_map(self, fn: Callable[[T], Optional[U]]) -> Optional[U]:
        return ABSENT

    def or_else(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        return supplier()

    def get_or_else(self, fallback: T) -> T:
        return fallback


ABSENT: Absent = Absent()

Optional = Present[T] | Absent[T]


def from_optional_value(value: T | NotSet | None) -> Optional[T]:
    """Wrap a possibly-missing value.

    `None` and `NOT_SET` become `Absent`, anything else (including falsy values like `0` or `""`)
    becomes `Present`.
    """
    if is_absent_sentinel(value):
        return ABSENT
    return Present(value)  # type: ignore[arg-type]
