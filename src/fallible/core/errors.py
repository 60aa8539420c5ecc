"""Base error handling shared by every part of the library."""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception class for all errors raised by the library itself.

    Container operations never raise on their own. Absence and business failures
    are values, and exceptions from caller-supplied functions propagate untouched.
    """
