"""
Expression Parser and Evaluator

Converts infix token sequences to postfix order with the shunting-yard
algorithm and reduces postfix sequences to a single-precision float.

Author: ballin developers
Version: 0.4.2.0
"""

import ctypes
import math
from typing import Callable, List

from ballin.exceptions import InvalidNumberError, MismatchedParenthesesError
from .lexer import Associativity, Token, TokenType, tokenize


def to_single(value: float) -> float:
    """Round ``value`` to the nearest IEEE-754 single-precision float."""
    return ctypes.c_float(value).value


def _divide(base: float, operand: float) -> float:
    if operand == 0.0:
        if base == 0.0 or math.isnan(base):
            return math.nan
        return math.copysign(math.inf, base) * math.copysign(1.0, operand)
    return base / operand


OPERATIONS: dict[str, Callable[[float, float], float]] = {
    '+': lambda base, operand: base + operand,
    '-': lambda base, operand: base - operand,
    '*': lambda base, operand: base * operand,
    '/': _divide,
}


def apply_operator(symbol: str, base: float, operand: float) -> float:
    """Compute ``base <symbol> operand`` in single precision."""
    return to_single(OPERATIONS[symbol](base, operand))


def format_number(value: float) -> str:
    """Format a result the way C's ``%g`` does (6 significant digits)."""
    return format(value, 'g')


def to_postfix(tokens: List[Token]) -> List[Token]:
    """
    Convert an infix token sequence into postfix order.

    Args:
        tokens: Tokens produced by the lexer

    Returns:
        The same tokens in postfix order, parentheses removed

    Raises:
        MismatchedParenthesesError: On a ``)`` without a matching ``(``
            or a ``(`` that is never closed
    """
    output: List[Token] = []
    operators: List[Token] = []  # top of stack is operators[-1]

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            while operators:
                top = operators[-1]
                if top.type == TokenType.LPAREN:
                    break

                binds_tighter = top.precedence > token.precedence
                binds_equal = (
                    top.precedence == token.precedence
                    and token.associativity == Associativity.LEFT
                )
                if not (binds_tighter or binds_equal):
                    break

                output.append(operators.pop())

            operators.append(token)

        elif token.type == TokenType.LPAREN:
            operators.append(token)

        elif token.type == TokenType.RPAREN:
            while operators and operators[-1].type != TokenType.LPAREN:
                output.append(operators.pop())

            if not operators:
                raise MismatchedParenthesesError()

            operators.pop()

    while operators:
        token = operators.pop()
        if token.type == TokenType.LPAREN:
            raise MismatchedParenthesesError("Unclosed parenthesis")
        output.append(token)

    return output


def _parse_number(value: str) -> float:
    try:
        return to_single(float(value))
    except ValueError:
        raise InvalidNumberError(value) from None


def evaluate_postfix(postfix: List[Token]) -> float:
    """
    Reduce a postfix token sequence to a single value.

    Each operator pops ``lhs`` (the most recent value) and then ``rhs``
    and pushes ``rhs <op> lhs``. The sequence is assumed well formed;
    an operator short of operands fails with ``IndexError``.
    """
    stack: List[float] = []

    for token in postfix:
        if token.type == TokenType.NUMBER:
            stack.append(_parse_number(token.value))

        elif token.type == TokenType.OPERATOR:
            lhs = stack.pop()
            rhs = stack.pop()
            stack.append(apply_operator(token.value[0], rhs, lhs))

    return stack[-1]


def evaluate(expression: str) -> float:
    """
    Evaluate an infix expression string.

    Example:
        >>> evaluate("( 1 + 2 ) * 3")
        9.0
    """
    return evaluate_postfix(to_postfix(tokenize(expression)))
