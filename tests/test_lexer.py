"""Test lexing, tokenizing and stringifying."""
import pytest

from expression_evaluator.common.errors import InvalidStringError, InvalidTokenError
from expression_evaluator.common.lexer import lex, render, stringify, tokenize_line, tokenize_one
from expression_evaluator.common.tokens import (
    CLOSE_BRACKET,
    OPEN_BRACKET,
    NumberToken,
    Operator,
    OperatorToken,
)


def test_lex_basic() -> None:
    """lex splits a prefix expression into operators and integers."""
    assert lex("+ 2 3") == [Operator.ADD, 2, 3]


def test_lex_ignores_repeated_spaces() -> None:
    """Runs of spaces produce no empty symbols."""
    assert lex("  *   -4  7 ") == [Operator.MUL, -4, 7]


def test_lex_empty_text() -> None:
    assert lex("") == []
    assert lex("   ") == []


@pytest.mark.parametrize("text,fragment", [
    ("2 $ 3", "$"),
    ("2 + ( 3", "("),
    ("1.5", "1.5"),
    ("2\t3", "2\t3"),
    ("4 abc 5 ?", "abc"),  # first failure wins
])
def test_lex_invalid_token(text, fragment) -> None:
    """lex reports the first fragment it cannot classify."""
    with pytest.raises(InvalidTokenError) as exc_info:
        lex(text)
    assert exc_info.value.fragment == fragment
    assert exc_info.value.code == "INVALID_TOKEN"


@pytest.mark.parametrize("fragment,expected", [
    ("+", OperatorToken(operator=Operator.ADD)),
    ("-", OperatorToken(operator=Operator.SUB)),
    ("*", OperatorToken(operator=Operator.MUL)),
    ("/", OperatorToken(operator=Operator.DIV)),
    ("(", OPEN_BRACKET),
    (")", CLOSE_BRACKET),
    ("42", NumberToken(value=42)),
    ("-17", NumberToken(value=-17)),
    ("+8", NumberToken(value=8)),
    ("007", NumberToken(value=7)),
    ("2147483647", NumberToken(value=2147483647)),
    ("-2147483648", NumberToken(value=-2147483648)),
])
def test_tokenize_one_valid(fragment, expected) -> None:
    """tokenize_one recognizes operators, brackets and 32-bit integers."""
    assert tokenize_one(fragment) == expected


@pytest.mark.parametrize("fragment", [
    "2147483648",   # overflow is a parse failure
    "-2147483649",
    "1_000",
    " 7",
    "7 ",
    "٣",            # non-ASCII digit
    "--1",
    "- ",
    "x",
    "",
])
def test_tokenize_one_invalid(fragment) -> None:
    """tokenize_one rejects everything that is not an operator, a bracket or a 32-bit integer."""
    with pytest.raises(InvalidTokenError):
        tokenize_one(fragment)


def test_tokenize_line() -> None:
    """tokenize_line tokenizes every fragment of an infix line."""
    assert tokenize_line("3 + 4 * 2") == [
        NumberToken(value=3),
        OperatorToken(operator=Operator.ADD),
        NumberToken(value=4),
        OperatorToken(operator=Operator.MUL),
        NumberToken(value=2),
    ]


@pytest.mark.parametrize("fragment", ["+", "-", "*", "/", "(", ")", "0", "-5", "2147483647", "-2147483648"])
def test_stringify_round_trip(fragment) -> None:
    """tokenize_one(stringify(t)) == t, and stringify reproduces canonical literals."""
    token = tokenize_one(fragment)
    assert stringify(token) == fragment
    assert tokenize_one(stringify(token)) == token


@pytest.mark.parametrize("value", ["(", 3, None, Operator.ADD])
def test_stringify_rejects_non_tokens(value) -> None:
    """Values that are not tokens have no rendering."""
    with pytest.raises(InvalidStringError):
        stringify(value)


def test_render_then_lex_reproduces_symbols() -> None:
    """Rendering bracket-free tokens and lexing the text gives back the same symbols."""
    tokens = tokenize_line("3 4 2 * + -6 /")
    assert render(tokens) == "3 4 2 * + -6 /"
    assert lex(render(tokens)) == [3, 4, 2, Operator.MUL, Operator.ADD, -6, Operator.DIV]


@pytest.mark.parametrize("fragment,expected", [
    ("0" * 5000 + "1", 1),
    ("-" + "0" * 5000 + "2147483648", -2147483648),
    ("+" + "0" * 5000, 0),
])
def test_tokenize_one_zero_padded_literals(fragment, expected) -> None:
    """Leading zeros do not count toward the 32-bit limit, however many there are."""
    assert tokenize_one(fragment) == NumberToken(value=expected)
    assert lex(fragment) == [expected]


@pytest.mark.parametrize("fragment", [
    "9" * 5000,
    "-" + "1" * 11,
    "99999999999",
])
def test_tokenize_one_rejects_oversized_literals(fragment) -> None:
    """Literals with more significant digits than any 32-bit value are invalid tokens."""
    with pytest.raises(InvalidTokenError) as exc_info:
        tokenize_one(fragment)
    assert exc_info.value.fragment == fragment
    with pytest.raises(InvalidTokenError):
        lex(fragment)
