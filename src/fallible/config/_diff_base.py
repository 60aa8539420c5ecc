from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass


@dataclass
class DiffBase:
    def __repr__(self) -> str:
        """Show only the fields that differ from the default."""
        assert is_dataclass(self)
        default = self.__class__()
        diffs = []
        for field in fields(self):
            name = field.name
            if name.startswith("_"):
                continue
            current_value = getattr(self, name)
            default_value = getattr(default, name)
            if self._has_diff(current_value, default_value):
                diffs.append(f"{name}={self._diff_repr(current_value)}")
        return f"{self.__class__.__name__}({', '.join(diffs)})"

    def _has_diff(self, value: object, default: object) -> bool:
        if is_dataclass(value):
            return repr(value) != repr(default)
        if isinstance(value, list) and isinstance(default, list):
            if len(value) != len(default):
                return True
            return any(self._has_diff(v, d) for v, d in zip(value, default, strict=False))
        return value != default

    def _diff_repr(self, value: object) -> str:
        if isinstance(value, list):
            return f"[{', '.join(repr(item) for item in value)}]"
        return repr(value)
