import math
from typing import List

from flang.error.scanner_error import NumberFormatError, RealOverflowError
from flang.error.warning import UnexpectedCharacterWarning
from flang.token import Token
from flang.type import BOOLEANS, KEYWORDS, Type
from flang.util import Span

SINGLE_CHARACTER_TOKENS = {
    "(": Type.LRB,
    ")": Type.RRB,
    "'": Type.QUOTE,
}


def is_letter(char: str) -> bool:
    return char != "" and char.isalpha()


def is_digit(char: str) -> bool:
    return char != "" and char.isdecimal()


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program
        self.warnings: List[UnexpectedCharacterWarning] = []

        # Two character window over the program, "" marks the end of the input
        self.pos = -1
        self.current = ""
        self.next = program[0] if program else ""

        self.line_no = 1
        self.line_start = 0
        # Once the end of the input is reached, every call returns this token again
        self.eof = None

        self.advance()

    def advance(self) -> None:
        # Track the line of the new current character
        if self.current == "\n" or (self.current == "\r" and self.next != "\n"):
            self.line_no += 1
            self.line_start = self.pos + 1

        self.pos += 1
        self.current = self.next
        if self.pos + 1 < len(self.og_program):
            self.next = self.og_program[self.pos + 1]
        else:
            self.next = ""

    def span_from(self, start: int) -> Span:
        """The span from `start` up to and including the current character."""
        return Span(
            self.line_no, (start - self.line_start, self.pos + 1 - self.line_start)
        )

    def skip_whitespace(self) -> None:
        while self.current.isspace() and self.current not in "\r\n":
            self.advance()

    def next_token(self) -> Token:
        """Scan and return the next token of the program.

        Line breaks are not skipped, they produce `EOL` tokens. At the end of the input,
        or at a character that cannot start any token, an `EOF` token is returned, and
        keeps being returned by all subsequent calls.

        Raises:
            ScannerException: If a number contains more than one decimal point.

        Returns:
            Token: The next token.
        """
        if self.eof is not None:
            return self.eof

        self.skip_whitespace()
        char = self.current
        start = self.pos

        if char == "":
            return self.end(Span.point(self.line_no, self.pos - self.line_start))

        if char in "\r\n":
            span = self.span_from(start)
            # \r\n is a single line break
            if char == "\r" and self.next == "\n":
                self.advance()
            self.advance()
            return Token(Type.EOL, span=span)

        if char in SINGLE_CHARACTER_TOKENS:
            span = self.span_from(start)
            self.advance()
            return Token(SINGLE_CHARACTER_TOKENS[char], span=span)

        if is_letter(char):
            return self.scan_word()

        if is_digit(char) or (char in "-." and is_digit(self.next)):
            return self.scan_number()

        # Anything else cannot be scanned, so we consider the input to end here
        span = self.span_from(start)
        self.warnings.append(UnexpectedCharacterWarning(self.og_program, span))
        return self.end(span)

    def end(self, span: Span) -> Token:
        self.eof = Token(Type.EOF, span=span)
        return self.eof

    def scan_word(self) -> Token:
        start = self.pos
        while is_letter(self.next) or is_digit(self.next):
            self.advance()

        text = self.og_program[start : self.pos + 1]
        span = self.span_from(start)
        self.advance()

        word = text.lower()
        if word in BOOLEANS:
            return Token(Type.BOOLEAN, BOOLEANS[word], span)
        if word in KEYWORDS:
            return Token(KEYWORDS[word], text, span)
        return Token(Type.ID, text, span)

    def scan_number(self) -> Token:
        start = self.pos
        while is_digit(self.next) or self.next == ".":
            self.advance()

        text = self.og_program[start : self.pos + 1]
        span = self.span_from(start)
        self.advance()

        match text.count("."):
            case 0:
                return Token(Type.INTEGER, int(text), span)
            case 1:
                value = float(text)
                if math.isinf(value):
                    RealOverflowError(self.og_program, span)
                return Token(Type.REAL, value, span)
        NumberFormatError(self.og_program, span)

    def scan(self) -> List[Token]:
        """Extract all tokens from the program passed to `Scanner(program)`.

        Returns:
            List[Token]: A list of Token instances, ending with the `EOF` token.
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == Type.EOF:
                return tokens
