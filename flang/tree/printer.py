from enum import Enum, auto
from typing import Iterable, Iterator

from flang.token import Token
from flang.tree.visitor import YieldVisitor
from flang.type import KEYWORDS, Type

from flang.tree.tree import (  # isort:skip
    BooleanNode,
    ConditionNode,
    FuncNode,
    FunCallNode,
    IdentifierNode,
    IntegerNode,
    LambdaCallNode,
    LambdaNode,
    ListNode,
    Node,
    ProgNode,
    ProgramNode,
    QuoteNode,
    RealNode,
    SetqNode,
    StringNode,
    WhileNode,
)

# No space is printed after these tokens
LEFT_ATTACHED_TOKENS = frozenset((Type.LRB, Type.QUOTE))

# No space is printed before these tokens
RIGHT_ATTACHED_TOKENS = frozenset((Type.RRB,))


class PrintingInfo(Enum):
    NEWLINE = auto()


def name_token(name: str) -> Token:
    if name in KEYWORDS:
        return Token(KEYWORDS[name], name)
    return Token(Type.ID, name)


class Printer(YieldVisitor):
    def print(self, tree: Node) -> str:
        # Traverse the tree, collecting Tokens and printing information
        program = ""
        last_token = None
        for token in self.visit(tree):
            if token == PrintingInfo.NEWLINE:
                program += "\n"
                last_token = None
                continue

            if (
                last_token is not None
                # The keyword `quote` is not attached, only the `'` operator
                and (last_token.type not in LEFT_ATTACHED_TOKENS or last_token.literal)
                and token.type not in RIGHT_ATTACHED_TOKENS
            ):
                program += " "

            program += token.text
            last_token = token

        return program.strip()

    def parenthesized(self, *parts: Iterable[Token]) -> Iterator[Token]:
        yield Token(Type.LRB)
        for part in parts:
            yield from part
        yield Token(Type.RRB)

    def visit_all(self, nodes: Iterable[Node]) -> Iterator[Token]:
        for node in nodes:
            yield from self.visit(node)

    def visit_names(self, names: Iterable[str]) -> Iterator[Token]:
        yield from self.parenthesized(name_token(name) for name in names)

    def visit_ProgramNode(self, node: ProgramNode) -> Iterator[Token]:
        for expression in node.expressions:
            yield from self.visit(expression)
            yield PrintingInfo.NEWLINE

    def visit_IntegerNode(self, node: IntegerNode) -> Iterator[Token]:
        yield Token(Type.INTEGER, node.value)

    def visit_RealNode(self, node: RealNode) -> Iterator[Token]:
        yield Token(Type.REAL, float(node.value))

    def visit_BooleanNode(self, node: BooleanNode) -> Iterator[Token]:
        yield Token(Type.BOOLEAN, node.value)

    def visit_IdentifierNode(self, node: IdentifierNode) -> Iterator[Token]:
        yield name_token(node.name)

    def visit_StringNode(self, node: StringNode) -> Iterator[Token]:
        escaped = node.value.replace("\\", "\\\\").replace('"', '\\"')
        yield Token(Type.ID, f'"{escaped}"')

    def visit_ListNode(self, node: ListNode) -> Iterator[Token]:
        yield from self.parenthesized(self.visit_all(node.elements))

    def visit_FunCallNode(self, node: FunCallNode) -> Iterator[Token]:
        yield from self.parenthesized([name_token(node.name)], self.visit_all(node.args))

    def visit_QuoteNode(self, node: QuoteNode) -> Iterator[Token]:
        yield Token(Type.QUOTE)
        yield from self.visit(node.exp)

    def visit_SetqNode(self, node: SetqNode) -> Iterator[Token]:
        yield from self.parenthesized(
            [Token(Type.SETQ), name_token(node.name)], self.visit(node.value)
        )

    def visit_ConditionNode(self, node: ConditionNode) -> Iterator[Token]:
        branches = [node.test, node.result_true]
        if node.result_false is not None:
            branches.append(node.result_false)
        yield from self.parenthesized([Token(Type.COND)], self.visit_all(branches))

    def visit_FuncNode(self, node: FuncNode) -> Iterator[Token]:
        yield from self.parenthesized(
            [Token(Type.FUNC), name_token(node.name)],
            self.visit_names(node.params),
            self.visit_all(node.body),
        )

    def visit_LambdaNode(self, node: LambdaNode) -> Iterator[Token]:
        yield from self.parenthesized(
            [Token(Type.LAMBDA)], self.visit_names(node.params), self.visit(node.body)
        )

    def visit_LambdaCallNode(self, node: LambdaCallNode) -> Iterator[Token]:
        yield from self.parenthesized(self.visit(node.lambda_), self.visit_all(node.args))

    def visit_ProgNode(self, node: ProgNode) -> Iterator[Token]:
        yield from self.parenthesized(
            [Token(Type.PROG)], self.visit_names(node.params), self.visit_all(node.body)
        )

    def visit_WhileNode(self, node: WhileNode) -> Iterator[Token]:
        yield from self.parenthesized(
            [Token(Type.WHILE)], self.visit(node.cond), self.visit_all(node.body)
        )
