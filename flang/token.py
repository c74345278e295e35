from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from flang.type import Type
from flang.util import Span


@dataclass(frozen=True)
class Token:
    type: Type
    literal: Optional[int | float | bool | str] = None
    span: Span = field(repr=False, compare=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            object.__setattr__(self, "type", Type.to_type(self.type))

    @property
    def text(self) -> str:
        match self.literal:
            case None:
                return "'" if self.type == Type.QUOTE else self.type.value
            case bool():
                return "true" if self.literal else "false"
            case float():
                return real_to_str(self.literal)
        return str(self.literal)

    def __str__(self) -> str:
        return self.text


def real_to_str(value: float) -> str:
    # Positional notation only, the scanner has no exponent syntax
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text
