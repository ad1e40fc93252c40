"""
ballin Expression Engine

Arithmetic expressions over + - * / and parentheses:
- Lexer (whitespace-delimited tokens)
- Shunting-yard infix to postfix conversion
- Postfix evaluation in single precision
"""

from .lexer import Lexer, Token, TokenType, Precedence, Associativity, tokenize
from .eval import (
    to_postfix,
    evaluate_postfix,
    evaluate,
    apply_operator,
    format_number,
    to_single,
)

__all__ = [
    'Lexer',
    'Token',
    'TokenType',
    'Precedence',
    'Associativity',
    'tokenize',
    'to_postfix',
    'evaluate_postfix',
    'evaluate',
    'apply_operator',
    'format_number',
    'to_single',
]
