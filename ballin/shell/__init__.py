"""
ballin Shell Module

Provides the interactive command-line shell:
- Built-in commands
- Pipeline execution
- Command history
"""

from .builtins import BuiltinCommands
from .shell import Shell, create_shell

__all__ = [
    'BuiltinCommands',
    'Shell',
    'create_shell',
]
