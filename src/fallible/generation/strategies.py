"""Hypothesis strategies for code built on top of the containers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from hypothesis import strategies as st

from fallible.config import ConfigError, GenerationConfig
from fallible.core import Variant
from fallible.core.optional import ABSENT, Optional, Present
from fallible.core.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")
C = TypeVar("C")

_UNHASHABLE = object()


def optionals(values: st.SearchStrategy[T], *, config: GenerationConfig | None = None) -> st.SearchStrategy[Optional[T]]:
    """`Present` containers built from `values`, and `Absent`."""
    config = config or GenerationConfig()
    choices: list[st.SearchStrategy[Any]] = []
    if config.allows(Variant.PRESENT):
        choices.append(values.map(Present))
    if config.allows(Variant.ABSENT):
        choices.append(st.just(ABSENT))
    if not choices:
        raise ConfigError(_no_variants_message("present", "absent"))
    return st.one_of(choices)


def results(
    values: st.SearchStrategy[T], errors: st.SearchStrategy[E], *, config: GenerationConfig | None = None
) -> st.SearchStrategy[Result[T, E]]:
    """`Success` containers built from `values`, and `Failure` containers built from `errors`."""
    config = config or GenerationConfig()
    choices: list[st.SearchStrategy[Any]] = []
    if config.allows(Variant.SUCCESS):
        choices.append(values.map(Success))
    if config.allows(Variant.FAILURE):
        choices.append(errors.map(Failure))
    if not choices:
        raise ConfigError(_no_variants_message("success", "failure"))
    return st.one_of(choices)


def optional_functions(
    values: st.SearchStrategy[T], *, config: GenerationConfig | None = None
) -> st.SearchStrategy[Callable[[Any], Optional[T]]]:
    """Pure single-argument functions returning `Optional` containers.

    Equal arguments always produce equal containers, hashable or not.
    """
    return st.functions(like=lambda key: None, returns=optionals(values, config=config), pure=True).map(_keyed)


def result_functions(
    values: st.SearchStrategy[T], errors: st.SearchStrategy[E], *, config: GenerationConfig | None = None
) -> st.SearchStrategy[Callable[[Any], Result[T, E]]]:
    """Pure single-argument functions returning `Result` containers.

    Equal arguments always produce equal containers, hashable or not.
    """
    return st.functions(like=lambda key: None, returns=results(values, errors, config=config), pure=True).map(_keyed)


def _no_variants_message(*names: str) -> str:
    expected = " or ".join(f"'{name}'" for name in names)
    return f"Error in [generation] section: 'variants' must include {expected} to generate anything."


def _keyed(fn: Callable[[Any], C]) -> Callable[[Any], C]:
    def wrapper(value: Any) -> C:
        return fn(_cache_key(value))

    return wrapper


def _cache_key(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        # Unhashable arguments are keyed by type and repr, so equal lists or dicts share a result
        return (_UNHASHABLE, type(value).__qualname__, repr(value))
    return value
