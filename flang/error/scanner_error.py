import sys

from flang.error.error import CompilerError, CompilerException, UnrecoverableError


class ScannerException(CompilerException):
    pass


class ScannerError(CompilerError):
    stage = ScannerException
    class_name = "ScannerError"


class NumberFormatError(ScannerError, UnrecoverableError):
    def __str__(self) -> str:
        return self.create_error(
            f"Invalid number format {self.error_chars!r} on {self.span.lines_str}.",
            "A number may contain at most one decimal point.",
        )


class RealOverflowError(NumberFormatError):
    def __str__(self) -> str:
        return self.create_error(
            f"Real number {self.error_chars!r} on {self.span.lines_str} is too large.",
            f"A real number may be at most {sys.float_info.max:g}.",
        )
