from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fallible.config._diff_base import DiffBase
from fallible.core import Variant

if TYPE_CHECKING:
    import hypothesis


@dataclass(repr=False)
class GenerationConfig(DiffBase):
    """Controls which containers the Hypothesis strategies produce."""

    variants: list[Variant]
    max_examples: int | None
    deterministic: bool

    __slots__ = ("variants", "max_examples", "deterministic")

    def __init__(
        self,
        *,
        variants: list[Variant] | None = None,
        max_examples: int | None = None,
        deterministic: bool = False,
    ) -> None:
        self.variants = variants if variants is not None else list(Variant)
        self.max_examples = max_examples
        self.deterministic = deterministic

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenerationConfig:
        variants = data.get("variants")
        return cls(
            variants=[Variant.from_str(name) for name in variants] if variants is not None else None,
            max_examples=data.get("max-examples"),
            deterministic=data.get("deterministic", False),
        )

    def allows(self, variant: Variant) -> bool:
        return variant in self.variants

    def as_settings(self) -> hypothesis.settings:
        import hypothesis

        kwargs: dict[str, Any] = {"derandomize": self.deterministic}
        if self.max_examples is not None:
            kwargs["max_examples"] = self.max_examples
        return hypothesis.settings(**kwargs)
