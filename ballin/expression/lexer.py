"""
Expression Lexer

Splits an arithmetic expression into tokens. Tokens are
whitespace-delimited words: ``( 1 + 2 ) * 3`` tokenizes, ``(1+2)*3``
does not.

Author: ballin developers
Version: 0.4.2.0
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List

from ballin.exceptions import UnrecognizedSymbolError


class TokenType(Enum):
    """Token types for expression parsing."""
    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"


class Precedence(IntEnum):
    """Binding strength; a larger value binds tighter."""
    NONE = 0
    ADDITIVE = 1        # + -
    MULTIPLICATIVE = 2  # * /
    GROUPING = 3        # ( )


class Associativity(Enum):
    """Operator associativity."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    """A lexical unit of an expression."""
    type: TokenType
    value: str
    precedence: Precedence = Precedence.NONE
    associativity: Associativity = Associativity.LEFT

    def __str__(self) -> str:
        return self.value


_SYMBOLS: dict[str, tuple[TokenType, Precedence]] = {
    '+': (TokenType.OPERATOR, Precedence.ADDITIVE),
    '-': (TokenType.OPERATOR, Precedence.ADDITIVE),
    '*': (TokenType.OPERATOR, Precedence.MULTIPLICATIVE),
    '/': (TokenType.OPERATOR, Precedence.MULTIPLICATIVE),
    '(': (TokenType.LPAREN, Precedence.GROUPING),
    ')': (TokenType.RPAREN, Precedence.GROUPING),
}


_NUMBER_CHARS = frozenset('0123456789.')


def _is_number(word: str) -> bool:
    return all(char in _NUMBER_CHARS for char in word)


class Lexer:
    """
    Expression tokenizer.

    A word made only of decimal digits and dots is a number. Any other
    word is classified by its first character.

    Example:
        >>> [str(t) for t in Lexer("3 + 4 * 2").tokenize()]
        ['3', '+', '4', '*', '2']
    """

    def __init__(self, expression: str):
        self._expression = expression

    def tokenize(self) -> List[Token]:
        """
        Convert the expression into tokens.

        Raises:
            UnrecognizedSymbolError: If a word starts with an unknown symbol
        """
        tokens = []

        # TODO: split glued groups such as "(1*2)" into separate words
        for position, word in enumerate(self._expression.split()):
            if _is_number(word):
                tokens.append(Token(TokenType.NUMBER, word))
                continue

            entry = _SYMBOLS.get(word[0])
            if entry is None:
                raise UnrecognizedSymbolError(word, position=position)

            token_type, precedence = entry
            tokens.append(Token(token_type, word, precedence))

        return tokens


def tokenize(expression: str) -> List[Token]:
    """Tokenize ``expression``; see :class:`Lexer`."""
    return Lexer(expression).tokenize()
