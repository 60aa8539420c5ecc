"""Success with a value, or failure with an error value.

Failures are ordinary values of any shape chosen by the caller. They are not exceptions and are
never raised: `map` and `flat_map` skip over them, `or_else` is the explicit recovery point.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from fallible.core import Variant

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(slots=True, frozen=True)
class Success(Generic[T, E]):
    value: T

    @classmethod
    def of(cls, value: T) -> Success[T, E]:
        return cls(value)

    @property
    def variant(self) -> Variant:
        return Variant.SUCCESS

    def is_success(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_else(self, fn: Callable[[E], Result[T, E]]) -> Result[T, E]:
        return self

    def get_or_else(self, fallback: T) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class Failure(Generic[T, E]):
    error: E

    @classmethod
    def of(cls, error: E) -> Failure[T, E]:
        return cls(error)

    @property
    def variant(self) -> Variant:
        return Variant.FAILURE

    def is_success(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        # Same error, different success type
        return Failure(self.error)

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def or_else(self, fn: Callable[[E], Result[T, E]]) -> Result[T, E]:
        return fn(self.error)

    def get_or_else(self, fallback: T) -> T:
        return fallback


Result = Success[T, E] | Failure[T, E]
