from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from string import Template
from typing import Any

from fallible.config._diff_base import DiffBase
from fallible.config._error import ConfigError
from fallible.config._generation import GenerationConfig

if sys.version_info < (3, 11):
    import tomli
else:
    import tomllib as tomli

__all__ = [
    "FallibleConfig",
    "ConfigError",
    "GenerationConfig",
    "find_config_file",
]

CONFIG_FILE_NAME = "fallible.toml"

logger = logging.getLogger(__name__)


@dataclass(repr=False)
class FallibleConfig(DiffBase):
    generation: GenerationConfig
    _config_path: str | None

    __slots__ = ("generation", "_config_path")

    def __init__(self, *, generation: GenerationConfig | None = None) -> None:
        self.generation = generation or GenerationConfig()
        self._config_path = None

    @property
    def config_path(self) -> str | None:
        """Filesystem path to the loaded configuration file, if any."""
        return self._config_path

    @classmethod
    def discover(cls, start: PathLike | str | None = None) -> FallibleConfig:
        """Load the nearest `fallible.toml`, or return the defaults if there is none."""
        path = find_config_file(start)
        if path is None:
            return cls()
        return cls.from_path(path)

    @classmethod
    def from_path(cls, path: PathLike | str) -> FallibleConfig:
        """Load configuration from a file path."""
        path = Path(path).resolve()
        config = cls.from_str(path.read_text(encoding="utf-8"))
        config._config_path = str(path)
        logger.debug("Loaded configuration from %s", path)
        return config

    @classmethod
    def from_str(cls, data: str) -> FallibleConfig:
        """Parse configuration from a TOML string."""
        return cls.from_dict(tomli.loads(data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FallibleConfig:
        """Create a config instance from a dictionary."""
        from jsonschema.exceptions import ValidationError

        from fallible.config._validator import get_validator

        # Enum checks apply to the substituted values
        data = substitute_environment(data)
        try:
            get_validator().validate(data)
        except ValidationError as exc:
            raise ConfigError.from_validation_error(exc) from None
        return cls(generation=GenerationConfig.from_dict(data.get("generation", {})))


def find_config_file(start: PathLike | str | None = None) -> Path | None:
    """Search `start` (the working directory by default) and its parents for `fallible.toml`.

    The search ends at the first directory holding a `.git` directory, which is still searched itself.
    """
    directory = Path(start) if start is not None else Path.cwd()
    directory = directory.resolve()
    for candidate in (directory, *directory.parents):
        path = candidate / CONFIG_FILE_NAME
        if path.is_file():
            return path
        if (candidate / ".git").is_dir():
            return None
    return None


def substitute_environment(value: Any) -> Any:
    """Replace `${VAR}` placeholders in every string nested inside `value`."""
    if isinstance(value, dict):
        return {key: substitute_environment(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_environment(item) for item in value]
    if not isinstance(value, str):
        return value
    try:
        return Template(value).substitute(os.environ)
    except ValueError:
        raise ConfigError(f"Invalid placeholder in string: `{value}`") from None
    except KeyError as exc:
        raise ConfigError(f"Missing environment variable `{exc.args[0]}` in `{value}`") from None
