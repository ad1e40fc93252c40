"""
ballin Core Module

Core interpreter components including:
- Command model
- Command Registry
- Suggestions for unknown commands
- Line parser
- Interpreter (pipeline queue)
- Configuration Loader
"""

from .config_loader import ConfigLoader, Config, get_config
from .command import Command, UNBOUNDED
from .registry import CommandRegistry
from .suggestions import edit_distance, similarity, find_similar, report_missing_command
from .parser import CommandParser, ParsedCommand
from .interpreter import Interpreter

__all__ = [
    # Config
    'ConfigLoader',
    'Config',
    'get_config',
    # Commands
    'Command',
    'UNBOUNDED',
    'CommandRegistry',
    # Suggestions
    'edit_distance',
    'similarity',
    'find_similar',
    'report_missing_command',
    # Interpreter
    'CommandParser',
    'ParsedCommand',
    'Interpreter',
]
