from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

import jsonschema.validators


@lru_cache
def load_schema() -> dict[str, Any]:
    return json.loads(resources.files("fallible.config").joinpath("schema.json").read_text(encoding="utf-8"))


@lru_cache
def get_validator() -> jsonschema.validators.Draft202012Validator:
    schema = load_schema()
    jsonschema.validators.Draft202012Validator.check_schema(schema)
    return jsonschema.validators.Draft202012Validator(schema)
