from __future__ import annotations

from fallible.config import FallibleConfig as Config
from fallible.core import NOT_SET, Variant
from fallible.core.errors import FallibleError
from fallible.core.matching import match_result
from fallible.core.optional import ABSENT, Absent, Optional, Present, from_optional_value
from fallible.core.result import Failure, Result, Success
from fallible.core.version import FALLIBLE_VERSION

__version__ = FALLIBLE_VERSION

__all__ = [
    "__version__",
    # Optional
    "Present",
    "Absent",
    "ABSENT",
    "Optional",
    "from_optional_value",
    # Result
    "Success",
    "Failure",
    "Result",
    "match_result",
    # Shared
    "Variant",
    "NOT_SET",
    "FallibleError",
    "Config",
]
