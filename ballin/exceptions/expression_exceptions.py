"""
Expression Exceptions

Structural failures raised by the expression lexer, parser and
evaluator. They abort the evaluation that raised them, never the
interpreter loop.

Author: ballin developers
Version: 0.4.2.0
"""

from typing import Optional, Any


class ExpressionException(Exception):
    """
    Base exception for all expression-related errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 3000
        self.context = context or {}

    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"


class UnrecognizedSymbolError(ExpressionException):
    """
    The lexer met a word it cannot classify.

    Example:
        >>> raise UnrecognizedSymbolError("x", position=2)
    """

    def __init__(
        self,
        symbol: str,
        position: Optional[int] = None
    ) -> None:
        ctx = {'symbol': symbol}
        if position is not None:
            ctx['position'] = position
        super().__init__(
            message=f"Unrecognized symbol '{symbol}'",
            error_code=3001,
            context=ctx
        )
        self.symbol = symbol
        self.position = position


class MismatchedParenthesesError(ExpressionException):
    """
    A closing parenthesis has no opening partner, or a group was
    never closed.
    """

    def __init__(self, message: str = "Mismatched parentheses") -> None:
        super().__init__(
            message=message,
            error_code=3002
        )


class InvalidNumberError(ExpressionException):
    """A number word (digits and dots only) is not a valid float."""

    def __init__(self, value: str) -> None:
        super().__init__(
            message=f"Invalid number '{value}'",
            error_code=3003,
            context={'value': value}
        )
        self.value = value
