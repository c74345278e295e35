from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, Optional, Tuple

from flang.util import Span


@dataclass(frozen=True)
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    def __str__(self) -> str:
        from flang.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        if self == element:
            return True
        for _, child in self.iter_fields():
            children = child if isinstance(child, tuple) else (child,)
            if any(isinstance(item, Node) and element in item for item in children):
                return True
        return False

    def iter_fields(self) -> Iterator[Tuple[str, object]]:
        # Yield the dataclass fields, positions excluded
        for _field in fields(self):
            if _field.name != "span":
                yield _field.name, getattr(self, _field.name)


@dataclass(frozen=True)
class ProgramNode(Node):
    expressions: Tuple[Node, ...]


@dataclass(frozen=True)
class IntegerNode(Node):
    value: int


@dataclass(frozen=True)
class RealNode(Node):
    value: float


@dataclass(frozen=True)
class BooleanNode(Node):
    value: bool


@dataclass(frozen=True)
class IdentifierNode(Node):
    name: str


@dataclass(frozen=True)
class StringNode(Node):
    value: str


@dataclass(frozen=True)
class ListNode(Node):
    elements: Tuple[Node, ...]


@dataclass(frozen=True)
class FunCallNode(Node):
    name: str
    args: Tuple[Node, ...]


@dataclass(frozen=True)
class QuoteNode(Node):
    exp: Node


@dataclass(frozen=True)
class SetqNode(Node):
    name: str
    value: Node


@dataclass(frozen=True)
class ConditionNode(Node):
    test: Node
    result_true: Node
    result_false: Optional[Node] = None


@dataclass(frozen=True)
class FuncNode(Node):
    name: str
    params: Tuple[str, ...]
    body: Tuple[Node, ...]


@dataclass(frozen=True)
class LambdaNode(Node):
    params: Tuple[str, ...]
    body: Node


@dataclass(frozen=True)
class LambdaCallNode(Node):
    lambda_: LambdaNode
    args: Tuple[Node, ...]


@dataclass(frozen=True)
class ProgNode(Node):
    params: Tuple[str, ...]
    body: Tuple[Node, ...]


@dataclass(frozen=True)
class WhileNode(Node):
    cond: Node
    body: Tuple[Node, ...]

