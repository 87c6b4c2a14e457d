"""Reorder infix tokens into postfix and prefix sequences."""
from typing import Iterable, List, Tuple, Union

from expression_evaluator.common.errors import InvalidProgramError
from expression_evaluator.common.tokens import (
    OPEN_BRACKET,
    BracketKind,
    BracketToken,
    NumberToken,
    Operator,
    OperatorToken,
    Symbol,
    Token,
)


def convert_to_postfix(tokens: Iterable[Token]) -> List[Token]:
    """
    Convert infix tokens into Reverse Polish Notation using the Shunting-yard algorithm.

    Operators wait on a stack until an operator of lower precedence (or a closing
    bracket, or the end of input) forces them out. Equal precedence pops first,
    which makes every operator left-associative.

    Malformed bracket nesting is not reported: a closing bracket without a match
    empties the stack, and an unmatched opening bracket is drained with the
    remaining operators.

    Examples:
        - Infix: 3 + 4 * 2       -> Postfix: 3 4 2 * +
        - Infix: ( 2 + 3 ) * 4   -> Postfix: 2 3 + 4 *

    :param Iterable[Token] tokens: Tokens in infix order

    :return: Tokens in postfix order
    :rtype: List[Token]
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            # Numbers are added directly to the output
            output.append(token)
        elif isinstance(token, OperatorToken):
            # Pop operators with higher or equal precedence, an open bracket stops the scan
            while (
                stack
                and isinstance(stack[-1], OperatorToken)
                and stack[-1].precedence >= token.precedence
            ):
                output.append(stack.pop())
            stack.append(token)
        elif isinstance(token, BracketToken) and token.kind is BracketKind.OPEN:
            stack.append(token)
        elif isinstance(token, BracketToken):
            while stack and stack[-1] != OPEN_BRACKET:
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            raise TypeError(f"Expected a token, got {token!r}")

    # Append remaining entries in reverse order (stack top first)
    output.extend(reversed(stack))
    return output


def to_symbols(tokens: Iterable[Token]) -> List[Symbol]:
    """Project tokens onto evaluator symbols, dropping brackets."""
    symbols: List[Symbol] = []
    for token in tokens:
        if isinstance(token, NumberToken):
            symbols.append(token.value)
        elif isinstance(token, OperatorToken):
            symbols.append(token.operator)
    return symbols


_Node = Union[int, Tuple[Operator, "_Node", "_Node"]]


def _flatten(root: _Node) -> List[Symbol]:
    """Write a node tree in prefix order. Iterative: left-nested chains outgrow the recursion limit."""
    prefix: List[Symbol] = []
    pending: List[_Node] = [root]
    while pending:
        node = pending.pop()
        if isinstance(node, tuple):
            symbol, left, right = node
            prefix.append(symbol)
            # Right is pushed first so the left operand is written first
            pending.append(right)
            pending.append(left)
        else:
            prefix.append(node)
    return prefix


def postfix_to_prefix(symbols: Iterable[Symbol]) -> List[Symbol]:
    """
    Reorder a postfix symbol sequence into prefix order.

    Unlike reversing the sequence, operands keep their left/right positions, so
    "10 2 -" becomes "- 10 2" and not "- 2 10".

    :param Iterable[Symbol] symbols: Symbols in postfix order

    :return: Symbols in prefix order
    :rtype: List[Symbol]
    :raises InvalidProgramError: If the sequence does not describe exactly one expression
    """
    # Each entry is a complete sub-expression: a number or an (operator, left, right) node
    operands: List[_Node] = []
    for symbol in symbols:
        if isinstance(symbol, Operator):
            if len(operands) < 2:
                raise InvalidProgramError(f"Not enough operands for operator {symbol.value!r}")
            right = operands.pop()
            left = operands.pop()
            operands.append((symbol, left, right))
        else:
            operands.append(symbol)

    if not operands:
        raise InvalidProgramError("Empty expression")
    if len(operands) > 1:
        raise InvalidProgramError(f"Invalid expression: {len(operands) - 1} operand(s) left without operator")
    return _flatten(operands[0])
