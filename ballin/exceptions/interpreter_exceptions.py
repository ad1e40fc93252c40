"""
Interpreter Exceptions

Exceptions related to command registration, argument handling and
configuration. Lookup failures are not represented here: an unknown
command name is reported to the user with suggestions instead.

Author: ballin developers
Version: 0.4.2.0
"""

from typing import Optional, Any


class InterpreterException(Exception):
    """
    Base exception for all interpreter errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        recoverable: Whether the interpreter loop can keep going
        context: Additional context about the error

    Example:
        >>> raise InterpreterException("Interpreter failure", error_code=2000)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        recoverable: bool = False,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 2000
        self.recoverable = recoverable
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code}, "
            f"recoverable={self.recoverable})"
        )


class DuplicateCommandError(InterpreterException):
    """
    A command name was registered twice.

    The registry is populated once at startup, so this is a programming
    error and never user-triggerable.

    Example:
        >>> raise DuplicateCommandError("echo")
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Command '{name}' already registered",
            error_code=2001,
            recoverable=False
        )
        self.name = name


class CommandArgumentError(InterpreterException):
    """
    A command was invoked with missing or invalid arguments.

    Aborts only the pipeline running the command.
    """

    def __init__(
        self,
        command: str,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=2002,
            recoverable=True,
            context=context
        )
        self.command = command


class ConfigError(InterpreterException):
    """Configuration file could not be read or parsed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=1001,
            recoverable=False,
            context={'path': path} if path else None
        )
        self.path = path


class ConfigValidationError(InterpreterException):
    """Raised when configuration validation fails."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code=1002,
            recoverable=False,
            context={'key': key} if key else None
        )
        self.key = key
