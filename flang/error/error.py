from dataclasses import dataclass, field
from typing import List, Optional

from flang.error.communicator import Communicator
from flang.util import Span, split_lines


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    def __init__(self, message: str = "", errors: Optional[List] = None) -> None:
        super().__init__(message)
        # The error objects that caused this exception
        self.errors = errors or []


@dataclass
class CompilerError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1, repr=False)
    n_after: int = field(init=False, default=1, repr=False)

    stage = CompilerException
    class_name = "CompilerError"

    def create_error(self, before: str = "", after: str = "", class_name=None):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name or self.class_name,
            before,
            after,
            self.n_before,
            self.n_after,
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        lines = split_lines(self.program)
        if not 0 < self.span.start_ln <= len(lines):
            return ""
        error_line = lines[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]


class UnrecoverableError(CompilerError):
    # Immediately raise the exception of this stage on creation
    def __post_init__(self) -> None:
        Communicator.communicate(self.stage, [self])
