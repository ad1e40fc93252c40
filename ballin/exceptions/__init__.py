"""
ballin Exception Hierarchy

Architecture:
    InterpreterException
    ├── DuplicateCommandError
    ├── CommandArgumentError
    ├── ConfigError
    └── ConfigValidationError
    ExpressionException
    ├── UnrecognizedSymbolError
    ├── MismatchedParenthesesError
    └── InvalidNumberError
"""

from .interpreter_exceptions import (
    InterpreterException,
    DuplicateCommandError,
    CommandArgumentError,
    ConfigError,
    ConfigValidationError,
)

from .expression_exceptions import (
    ExpressionException,
    UnrecognizedSymbolError,
    MismatchedParenthesesError,
    InvalidNumberError,
)

__all__ = [
    # Interpreter exceptions
    "InterpreterException",
    "DuplicateCommandError",
    "CommandArgumentError",
    "ConfigError",
    "ConfigValidationError",
    # Expression exceptions
    "ExpressionException",
    "UnrecognizedSymbolError",
    "MismatchedParenthesesError",
    "InvalidNumberError",
]
