from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from fallible.core.result import Result

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def match_result(*, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> Callable[[Result[T, E]], R]:
    """Build a function that reduces a `Result` to a plain value.

    Exactly one handler runs per call: `on_success` with the success value, or `on_failure` with
    the error value. Both handlers should return the same type.
    """

    def dispatch(result: Result[T, E]) -> R:
        logger.debug("Dispatching %s result", result.variant.value)
        if result.is_success():
            return on_success(result.value)  # type: ignore[union-attr]
        return on_failure(result.error)  # type: ignore[union-attr]

    return dispatch
