"""Recursive evaluation of prefix symbol sequences."""
import operator
from typing import Callable, Dict, Optional, Sequence, Tuple

from expression_evaluator.common.config import settings
from expression_evaluator.common.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    ExpressionTooDeepError,
    InvalidProgramError,
)
from expression_evaluator.common.tokens import INT32_MAX, INT32_MIN, Operator, Symbol


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (``//`` rounds toward negative infinity)."""
    if b == 0:
        raise DivisionByZeroError(a)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


# Type alias for operator functions (taking two ints, returning an int)
OperatorFn = Callable[[int, int], int]

OPERATIONS: Dict[Operator, OperatorFn] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: _truncating_div,
}


def _checked(value: int) -> int:
    if not INT32_MIN <= value <= INT32_MAX:
        raise ArithmeticOverflowError(value)
    return value


def _evaluate_at(symbols: Sequence[Symbol], start: int, depth: int, max_depth: int) -> Tuple[int, int]:
    if start >= len(symbols):
        raise InvalidProgramError()

    symbol = symbols[start]
    if not isinstance(symbol, Operator):
        return _checked(symbol), 1

    if depth >= max_depth:
        raise ExpressionTooDeepError(max_depth)

    a, a_consumed = _evaluate_at(symbols, start + 1, depth + 1, max_depth)
    b, b_consumed = _evaluate_at(symbols, start + 1 + a_consumed, depth + 1, max_depth)
    return _checked(OPERATIONS[symbol](a, b)), 1 + a_consumed + b_consumed


def evaluate(symbols: Sequence[Symbol], max_depth: Optional[int] = None) -> Tuple[int, int]:
    """
    Evaluate the prefix expression at the start of ``symbols``.

    A number evaluates to itself. An operator evaluates its left operand from the
    following symbols, then its right operand from the symbols after those.
    Symbols after the first complete expression are ignored; compare the consumed
    count with ``len(symbols)`` to detect them.

    Examples:
        - [+, 2, 3]        -> (5, 3)
        - [*, +, 1, 2, 3]  -> (9, 5)

    :param Sequence[Symbol] symbols: Symbols in prefix order
    :param Optional[int] max_depth: Maximum operator nesting, defaults to ``settings.max_depth``

    :return: Tuple of (value, number of symbols consumed)
    :rtype: Tuple[int, int]
    :raises InvalidProgramError: If the sequence, or an operand of an operator, is missing
    :raises DivisionByZeroError: If a divisor evaluates to zero
    :raises ArithmeticOverflowError: If a value leaves the signed 32-bit range
    :raises ExpressionTooDeepError: If operators nest deeper than ``max_depth``
    """
    if max_depth is None:
        max_depth = settings.max_depth
    return _evaluate_at(symbols, 0, 0, max_depth)
