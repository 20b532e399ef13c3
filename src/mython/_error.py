"""Error classes and helpers"""

__all__ = ["EvalError", "LexerError"]


class EvalError(RuntimeError):
    """Error raised while running Mython objects.

    Covers missing methods, arity mismatches, operands that cannot be
    compared and dereferencing an empty holder.
    """


class LexerError(Exception):
    """Exception raised while turning source text into tokens.

    Args:
        message: (str) Error description
        line: (int | None) Optional 1-based line number of the error
        column: (int | None) Optional 1-based column of the error

    Attributes:
        message: (str) Error description
        line: (int | None) Line number where error occurred
        column: (int | None) Column where error occurred
    """

    def __init__(self, message, line=None, column=None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({where})"
        super().__init__(message)
