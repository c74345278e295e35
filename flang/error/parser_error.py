from dataclasses import dataclass

from flang.error.error import CompilerException, UnrecoverableError
from flang.token import Token
from flang.type import Type


class ParserException(CompilerException):
    pass


@dataclass
class ParseError(UnrecoverableError):
    got: Token

    stage = ParserException
    class_name = "SyntaxError"

    @property
    def got_str(self) -> str:
        if self.got.type in (Type.EOL, Type.EOF):
            return self.got.type.value
        return repr(self.got.text)

    @property
    def position_str(self) -> str:
        return f"{self.span.lines_str} column {self.span.start_col}"


@dataclass
class UnexpectedTokenError(ParseError):
    expected: Type

    def __str__(self) -> str:
        return self.create_error(
            f"Expected {self.expected.article_str()}, but got {self.got_str} instead on {self.position_str}.",
            f"Expected token kind {self.expected.name}, got {self.got.type.name}.",
        )


class IllegalExpressionError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected {self.got_str} on {self.position_str}, an expression cannot start with {self.got.type.article_str()}.",
            f"Got token kind {self.got.type.name}.",
        )


class ExpectedNameError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expected a name, but got {self.got_str} instead on {self.position_str}.",
            f"Got token kind {self.got.type.name}.",
        )
