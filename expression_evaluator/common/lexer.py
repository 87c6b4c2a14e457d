"""Turn text fragments into tokens and symbols, and tokens back into text."""
import re
from typing import Iterable, List, Optional

from expression_evaluator.common.errors import InvalidStringError, InvalidTokenError
from expression_evaluator.common.tokens import (
    INT32_MAX,
    INT32_MIN,
    BracketKind,
    BracketToken,
    NumberToken,
    Operator,
    OperatorToken,
    Symbol,
    Token,
)

# ASCII digits only: int() alone would also accept "1_000", " 7" or "٣"
_INTEGER_RE = re.compile(r"([+-]?)([0-9]+)")

# Significant digits of INT32_MIN, the widest 32-bit value
_MAX_DIGITS = len(str(INT32_MIN)) - 1

_OPERATORS = {operator.value: operator for operator in Operator}
_BRACKETS = {kind.value: kind for kind in BracketKind}


def _split(text: str) -> List[str]:
    """Split on single spaces and drop the empty fragments left by runs of spaces."""
    return [fragment for fragment in text.split(" ") if fragment]


def _parse_int(fragment: str) -> Optional[int]:
    """
    Parse a signed 32-bit decimal integer.

    :param str fragment: Text fragment

    :return: Parsed value, or None if the fragment is not a valid 32-bit integer
    :rtype: Optional[int]
    """
    match = _INTEGER_RE.fullmatch(fragment)
    if not match:
        return None
    sign, digits = match.groups()
    # int() refuses very long digit strings, zero padding included
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return None
    value = -int(digits) if sign == "-" else int(digits)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def lex(text: str) -> List[Symbol]:
    """
    Split a bracket-free expression into evaluator symbols.

    :param str text: Space-separated operators and integers (e.g. "+ 2 3")

    :return: Symbols in input order
    :rtype: List[Symbol]
    :raises InvalidTokenError: On the first fragment that is neither an operator nor an integer
    """
    symbols: List[Symbol] = []
    for fragment in _split(text):
        if fragment in _OPERATORS:
            symbols.append(_OPERATORS[fragment])
            continue
        value = _parse_int(fragment)
        if value is None:
            raise InvalidTokenError(fragment)
        symbols.append(value)
    return symbols


def tokenize_one(fragment: str) -> Token:
    """
    Classify a single fragment as an operator, a bracket or a number.

    :param str fragment: One fragment without surrounding spaces

    :return: Matching token
    :rtype: Token
    :raises InvalidTokenError: If the fragment matches none of them
    """
    if fragment in _OPERATORS:
        return OperatorToken(operator=_OPERATORS[fragment])
    if fragment in _BRACKETS:
        return BracketToken(kind=_BRACKETS[fragment])
    value = _parse_int(fragment)
    if value is None:
        raise InvalidTokenError(fragment)
    return NumberToken(value=value)


def tokenize_line(text: str) -> List[Token]:
    """Tokenize every fragment of an infix line (e.g. "( 1 + 2 ) * 3")."""
    return [tokenize_one(fragment) for fragment in _split(text)]


def stringify(token: Token) -> str:
    """
    Render a token as the literal ``tokenize_one`` would read back.

    :param Token token: Token to render

    :return: Decimal text for numbers, the single-character literal otherwise
    :rtype: str
    :raises InvalidStringError: If the value is not a token
    """
    if isinstance(token, NumberToken):
        return str(token.value)
    if isinstance(token, OperatorToken):
        return token.operator.value
    if isinstance(token, BracketToken):
        return token.kind.value
    raise InvalidStringError(token)


def render(tokens: Iterable[Token]) -> str:
    return " ".join(stringify(token) for token in tokens)
