"""Errors raised while tokenizing, rendering or evaluating expressions."""


class ExpressionError(ValueError):
    """Base class of every expression failure. ``code`` is stable across releases."""

    code = "EXPRESSION_ERROR"


class InvalidTokenError(ExpressionError):
    """A text fragment is neither an operator, a bracket nor a 32-bit integer."""

    code = "INVALID_TOKEN"

    def __init__(self, fragment: str):
        super().__init__(f"Invalid token: {fragment!r}")
        self.fragment = fragment


class InvalidProgramError(ExpressionError):
    """A symbol sequence cannot be evaluated (missing or extra operands)."""

    code = "INVALID_PROGRAM"

    def __init__(self, message: str = "Invalid program: expected a number or an operator"):
        super().__init__(message)


class InvalidStringError(ExpressionError):
    """A value has no textual rendering."""

    code = "INVALID_STRING"

    def __init__(self, value: object):
        super().__init__(f"Cannot render {value!r} as a token")
        self.value = value


class DivisionByZeroError(ExpressionError):
    code = "DIVISION_BY_ZERO"

    def __init__(self, dividend: int):
        super().__init__(f"Division by zero: {dividend} / 0")
        self.dividend = dividend


class ArithmeticOverflowError(ExpressionError):
    """A value falls outside the signed 32-bit range."""

    code = "ARITHMETIC_OVERFLOW"

    def __init__(self, value: int):
        super().__init__(f"Arithmetic overflow: {value} does not fit in 32 bits")
        self.value = value


class ExpressionTooDeepError(ExpressionError):
    code = "EXPRESSION_TOO_DEEP"

    def __init__(self, max_depth: int):
        super().__init__(f"Expression nesting exceeds the maximum depth of {max_depth}")
        self.max_depth = max_depth
