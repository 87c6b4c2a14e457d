"""Evaluate whole lines of infix text."""
from typing import List

from expression_evaluator.common.converter import convert_to_postfix, postfix_to_prefix, to_symbols
from expression_evaluator.common.errors import ExpressionError, InvalidProgramError
from expression_evaluator.common.evaluator import evaluate
from expression_evaluator.common.lexer import render, tokenize_line
from expression_evaluator.common.logger import logger
from expression_evaluator.common.models import EvaluationRequest, EvaluationResult
from expression_evaluator.common.tokens import Symbol, Token


class Calculator:
    """
    Evaluate integer arithmetic expressions written in infix notation.

    Algorithm:
        1. Tokenize the space-separated fragments
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Reorder the RPN symbols into prefix order, brackets dropped
        4. Evaluate the prefix symbols by recursive descent

    Examples:
        - Infix expression: ( 7 - 3 ) * 2
        - RPN: 7 3 - 2 *
        - Prefix: * - 7 3 2
        - Result: 8
    """

    @staticmethod
    def to_prefix(postfix: List[Token]) -> List[Symbol]:
        """
        Reorder postfix tokens into the prefix symbols consumed by the evaluator.

        :param List[Token] postfix: Tokens in postfix order

        :return: Symbols in prefix order
        :rtype: List[Symbol]
        :raises InvalidProgramError: If the tokens do not form exactly one expression
        """
        return postfix_to_prefix(to_symbols(postfix))

    @staticmethod
    def _evaluate_postfix(postfix: List[Token]) -> int:
        prefix: List[Symbol] = Calculator.to_prefix(postfix)
        value, consumed = evaluate(prefix)
        if consumed != len(prefix):
            raise InvalidProgramError(f"Invalid expression: {len(prefix) - consumed} trailing symbol(s)")
        return value

    @staticmethod
    def evaluate(expr: str) -> int:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed integer result
        :rtype: int
        :raises ExpressionError: If the expression is invalid or cannot be computed
        """
        tokens: List[Token] = tokenize_line(expr)
        if not tokens:
            raise InvalidProgramError("Empty expression")
        return Calculator._evaluate_postfix(convert_to_postfix(tokens))

    @staticmethod
    def evaluate_line(expr: str) -> EvaluationResult:
        """
        Evaluate an expression and capture expression errors in the returned result.

        :param str expr: Arithmetic expression string

        :return: Result carrying either the value or the error
        :rtype: EvaluationResult
        :raises pydantic.ValidationError: If the expression is blank
        """
        request = EvaluationRequest(expression=expr)
        postfix_text = None
        try:
            postfix: List[Token] = convert_to_postfix(tokenize_line(request.expression))
            postfix_text = render(postfix)
            logger.debug("🔁 Postfix of %r: %s", request.expression, postfix_text)
            value = Calculator._evaluate_postfix(postfix)
        except ExpressionError as exc:
            logger.debug("❌ %s for %r: %s", exc.code, request.expression, exc)
            return EvaluationResult(
                expression=request.expression,
                postfix=postfix_text,
                error=str(exc),
                error_code=exc.code,
            )
        return EvaluationResult(expression=request.expression, postfix=postfix_text, result=value)
