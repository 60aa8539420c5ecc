from __future__ import annotations

import enum


class NotSet: ...


NOT_SET = NotSet()


class Variant(str, enum.Enum):
    """Names of the mutually exclusive cases a container can take."""

    PRESENT = "present"
    ABSENT = "absent"
    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def from_str(cls, value: str) -> Variant:
        return {
            "present": cls.PRESENT,
            "absent": cls.ABSENT,
            "success": cls.SUCCESS,
            "failure": cls.FAILURE,
        }[value.lower()]


def is_absent_sentinel(value: object) -> bool:
    return value is None or value is NOT_SET
