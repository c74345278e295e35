from typing import List, Tuple

from flang.scanner.scanner import Scanner
from flang.token import Token
from flang.type import KEYWORDS, SPECIAL_FORMS, Type
from flang.util import Span

from flang.error.parser_error import (  # isort:skip
    ExpectedNameError,
    IllegalExpressionError,
    UnexpectedTokenError,
)
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
    WhileNode,
)

# Token kinds that may be used as a name, e.g. `(setq plus 12)` or as an atom
NAME_TOKENS = frozenset((Type.ID, *KEYWORDS.values()))


class Parser:
    def __init__(self, scanner: Scanner) -> None:
        self.scanner = scanner
        self.og_program = scanner.og_program
        # The lookahead token, pulled from the scanner once parsing starts
        self.current = None

    def parse(self) -> ProgramNode:
        """Pull tokens from the scanner and apply the F grammar to produce an
        Abstract Syntax Tree.

        Parsing stops at the first structural mistake, in which case no tree is produced.

        Raises:
            ScannerException: If the scanner encounters a malformed number.
            ParserException: If the tokens do not form a valid program.

        Returns:
            ProgramNode: The root of the AST.
        """
        self.current = self.scanner.next_token()
        self.skip_newlines()

        expressions = []
        while self.current.type != Type.EOF:
            expressions.append(self.parse_expression())

        return ProgramNode(tuple(expressions), span=self.span_of(expressions))

    def skip_newlines(self) -> None:
        while self.current.type == Type.EOL:
            self.current = self.scanner.next_token()

    def consume(self, expected: Type) -> Token:
        """Verify that the current token is of the `expected` kind, and move to the next token.

        Returns:
            Token: The consumed token.
        """
        token = self.current
        if token.type != expected and token.type != Type.EOL:
            UnexpectedTokenError(self.og_program, token.span, token, expected)

        if token.type != Type.EOF:
            self.current = self.scanner.next_token()
            self.skip_newlines()
        return token

    def expect_name(self) -> str:
        token = self.current
        # The `'` operator has no literal, unlike the keyword `quote`
        if token.type not in NAME_TOKENS or token.literal is None:
            ExpectedNameError(self.og_program, token.span, token)

        self.consume(token.type)
        return self.name_of(token)

    @staticmethod
    def name_of(token: Token) -> str:
        # Keywords are known by their canonical lowercase name
        if token.type == Type.ID:
            return token.literal
        return token.type.value

    def span_of(self, nodes: List[Node]) -> Span:
        if not nodes:
            return Span.point(1, 0)
        return nodes[0].span & nodes[-1].span

    def at_list_end(self) -> bool:
        return self.current.type in (Type.RRB, Type.EOF)

    def parse_expression(self) -> Node:
        match self.current.type:
            case Type.LRB:
                return self.parse_list()
            case Type.QUOTE:
                return self.parse_quote()
        return self.parse_atom()

    def parse_atom(self) -> Node:
        token = self.current
        match token.type:
            case Type.INTEGER:
                self.consume(Type.INTEGER)
                return IntegerNode(token.literal, span=token.span)
            case Type.REAL:
                self.consume(Type.REAL)
                return RealNode(token.literal, span=token.span)
            case Type.BOOLEAN:
                self.consume(Type.BOOLEAN)
                return BooleanNode(token.literal, span=token.span)
            case token_type if token_type in NAME_TOKENS:
                self.consume(token_type)
                return IdentifierNode(self.name_of(token), span=token.span)

        IllegalExpressionError(self.og_program, token.span, token)

    def parse_quote(self) -> QuoteNode:
        quote = self.consume(Type.QUOTE)
        exp = self.parse_expression()
        return QuoteNode(exp, span=quote.span & exp.span)

    def parse_sequence(self) -> Tuple[Node, ...]:
        """Parse expressions up until the closing bracket of the current list."""
        expressions = []
        while not self.at_list_end():
            expressions.append(self.parse_expression())
        return tuple(expressions)

    def close(self, opening: Token) -> Span:
        """Consume the closing bracket matching `opening`, and give the span of the list."""
        closing = self.consume(Type.RRB)
        return opening.span & closing.span

    def parse_list(self) -> Node:
        opening = self.consume(Type.LRB)

        if self.current.type == Type.RRB:
            return ListNode((), span=self.close(opening))

        # `(quote x)`, as opposed to `('x)` which is a list containing a quote
        if self.current.type == Type.QUOTE and self.current.literal is not None:
            self.consume(Type.QUOTE)
            return self.parse_quote_form(opening)

        head = self.parse_expression()
        match head:
            case IdentifierNode(name=name) if name in SPECIAL_FORMS:
                return self.parse_special_form(name, opening)
            case IdentifierNode(name=name) if name in KEYWORDS:
                return self.parse_function_call(name, opening)
            case LambdaNode():
                return self.parse_lambda_call(head, opening)

        elements = (head, *self.parse_sequence())
        return ListNode(elements, span=self.close(opening))

    def parse_special_form(self, name: str, opening: Token) -> Node:
        parse_form = {
            "setq": self.parse_setq,
            "cond": self.parse_cond,
            "func": self.parse_func,
            "lambda": self.parse_lambda,
            "prog": self.parse_prog,
            "while": self.parse_while,
        }[name]
        return parse_form(opening)

    def parse_quote_form(self, opening: Token) -> QuoteNode:
        exp = self.parse_expression()
        return QuoteNode(exp, span=self.close(opening))

    def parse_setq(self, opening: Token) -> SetqNode:
        name = self.expect_name()
        value = self.parse_expression()
        return SetqNode(name, value, span=self.close(opening))

    def parse_cond(self, opening: Token) -> ConditionNode:
        test = self.parse_expression()
        result_true = self.parse_expression()
        if self.current.type == Type.RRB:
            return ConditionNode(test, result_true, span=self.close(opening))

        result_false = self.parse_expression()
        return ConditionNode(test, result_true, result_false, span=self.close(opening))

    def parse_func(self, opening: Token) -> FuncNode:
        name = self.expect_name()
        params = self.parse_params()
        body = self.parse_sequence()
        return FuncNode(name, params, body, span=self.close(opening))

    def parse_lambda(self, opening: Token) -> LambdaNode:
        params = self.parse_params()
        body = self.parse_expression()
        return LambdaNode(params, body, span=self.close(opening))

    def parse_prog(self, opening: Token) -> ProgNode:
        params = self.parse_params()
        body = self.parse_sequence()
        return ProgNode(params, body, span=self.close(opening))

    def parse_while(self, opening: Token) -> WhileNode:
        cond = self.parse_expression()
        body = self.parse_sequence()
        return WhileNode(cond, body, span=self.close(opening))

    def parse_function_call(self, name: str, opening: Token) -> FunCallNode:
        args = self.parse_sequence()
        return FunCallNode(name, args, span=self.close(opening))

    def parse_lambda_call(self, lambda_: LambdaNode, opening: Token) -> LambdaCallNode:
        args = self.parse_sequence()
        return LambdaCallNode(lambda_, args, span=self.close(opening))

    def parse_params(self) -> Tuple[str, ...]:
        self.consume(Type.LRB)
        params = []
        while not self.at_list_end():
            params.append(self.expect_name())
        self.consume(Type.RRB)
        return tuple(params)


def parse_program(program: str) -> ProgramNode:
    """Scan and parse `program` with a fresh Scanner and Parser."""
    return Parser(Scanner(program)).parse()
