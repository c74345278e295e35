from dataclasses import dataclass

from flang.error.communicator import Communicator
from flang.util import Colors, Span, split_lines


@dataclass
class Warning:
    program: str

    def create_message(
        self, span: Span, before: str, after: str = "", n_after=1
    ) -> str:
        return Communicator.create_message(
            self.program, span, "Warning", before, after, 1, n_after, Colors.YELLOW
        )


@dataclass
class UnexpectedCharacterWarning(Warning):
    span: Span

    def __str__(self) -> str:
        lines = split_lines(self.program)
        char = lines[self.span.start_ln - 1][self.span.start_col : self.span.end_col]
        before = f"Unexpected character {char!r} on {self.span.lines_str}, scanning stopped here."
        return self.create_message(
            self.span, before, "Everything from this character onwards is ignored."
        )
