from __future__ import annotations

from dataclasses import dataclass, field

from simplelang.type import Type
from simplelang.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, compare=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            # Frozen, so bypass the generated __setattr__
            object.__setattr__(self, "type", Type.to_type(self.type))

    def match(self, other_type: Type, text: str | None = None) -> bool:
        return self.type == other_type and (text is None or self.text == text)

    def __str__(self) -> str:
        return self.text
