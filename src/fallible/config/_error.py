"""Readable messages for configuration that does not match `schema.json`.

Every message names the TOML table the problem is in and the offending key:

    Error in [generation] section: 'max-examples' must be at least 1, but got 0.
"""

from __future__ import annotations

import difflib
from collections.abc import Callable
from typing import TYPE_CHECKING

from fallible.core.errors import FallibleError

if TYPE_CHECKING:
    from jsonschema import ValidationError


class ConfigError(FallibleError):
    """Invalid configuration."""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> ConfigError:
        explain = _EXPLANATIONS.get(str(error.validator))
        if explain is None:
            return cls(error.message)
        return cls(f"Error in {section_name(error)} section: {explain(error)}")


def section_name(error: ValidationError) -> str:
    """TOML table containing the invalid value, e.g. `[generation]`."""
    # Unknown keys are reported against the table that holds them
    tables = [part for part in error.path if isinstance(part, str)]
    if error.validator != "additionalProperties" and tables:
        tables = tables[:-1]
    if not tables:
        return "root"
    return f"[{'.'.join(tables)}]"


def _subject(error: ValidationError) -> str:
    path = list(error.path)
    if len(path) >= 2 and isinstance(path[-1], int):
        return f"item #{path[-1]} of '{path[-2]}'"
    return f"'{path[-1]}'" if path else "value"


def _explain_enum(error: ValidationError) -> str:
    choices = sorted(error.validator_value)
    hint = _suggestion(error.instance, choices) if isinstance(error.instance, str) else ""
    return f"{_subject(error)} is {error.instance!r}, expected one of {', '.join(map(repr, choices))}{hint}."


def _explain_minimum(error: ValidationError) -> str:
    return f"{_subject(error)} must be at least {error.validator_value}, but got {error.instance!r}."


_ARTICLES = {"array": "an array", "integer": "an integer", "object": "an object"}


def _explain_type(error: ValidationError) -> str:
    expected = error.validator_value
    if isinstance(expected, list):
        expected_str = " or ".join(_ARTICLES.get(name, f"a {name}") for name in expected)
    else:
        expected_str = _ARTICLES.get(expected, f"a {expected}")
    return f"{_subject(error)} must be {expected_str}, but got {type(error.instance).__name__} {error.instance!r}."


def _explain_unique_items(error: ValidationError) -> str:
    return f"{_subject(error)} contains duplicate items."


def _explain_additional_properties(error: ValidationError) -> str:
    known = list(error.schema.get("properties", {}))
    unknown = sorted(set(error.instance) - set(known))
    noun = "property" if len(unknown) == 1 else "properties"
    described = ", ".join(f"'{name}'{_suggestion(name, known)}" for name in unknown)
    return f"unknown {noun} {described}. Known properties: {', '.join(map(repr, known))}."


def _suggestion(value: str, choices: list[str]) -> str:
    matches = difflib.get_close_matches(value, choices, n=1, cutoff=0.6)
    return f" (did you mean '{matches[0]}'?)" if matches else ""


_EXPLANATIONS: dict[str, Callable[[ValidationError], str]] = {
    "enum": _explain_enum,
    "minimum": _explain_minimum,
    "type": _explain_type,
    "uniqueItems": _explain_unique_items,
    "additionalProperties": _explain_additional_properties,
}
