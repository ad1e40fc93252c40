"""
ballin - an interactive command interpreter

Commands are resolved from a registry, chained with pipes and executed
in order. The arithmetic commands are backed by an expression lexer,
shunting-yard parser and postfix evaluator.
"""

__version__ = "0.4.2.0"
__author__ = "ballin developers"

from .core.interpreter import Interpreter
from .core.registry import CommandRegistry
from .core.command import Command, UNBOUNDED
from .shell.shell import Shell, create_shell

__all__ = [
    'Interpreter',
    'CommandRegistry',
    'Command',
    'UNBOUNDED',
    'Shell',
    'create_shell',
]
