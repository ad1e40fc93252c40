"""
ballin Command Registry

Maps command names to Command prototypes. Populated once at startup
and read-only afterwards. Lookups that miss print suggestions.

Author: ballin developers
Version: 0.4.2.0
"""

from typing import Iterator, List, Optional

from ballin.exceptions import DuplicateCommandError
from ballin.logger import get_logger
from .command import Command
from .config_loader import get_config
from .suggestions import report_missing_command


class CommandRegistry:
    """
    Registry of command prototypes.

    Example:
        >>> registry = CommandRegistry()
        >>> registry.register(Command('echo', 1, lambda args: []))
        >>> registry.resolve('echo').name
        'echo'
    """

    def __init__(
        self,
        threshold: Optional[float] = None,
        suggest: Optional[bool] = None
    ):
        """
        Args:
            threshold: Similarity percentage a suggestion must exceed;
                defaults to the configured value
            suggest: Whether misses list similar names; defaults to
                the configured value
        """
        config = get_config().suggestion
        self._threshold = config.threshold if threshold is None else threshold
        self._suggest = config.enabled if suggest is None else suggest
        self._commands: dict[str, Command] = {}
        self._logger = get_logger('registry')

    @property
    def threshold(self) -> float:
        return self._threshold

    def register(self, command: Command) -> None:
        """
        Register a command prototype.

        Raises:
            DuplicateCommandError: If the name is already taken
        """
        if command.name in self._commands:
            raise DuplicateCommandError(command.name)

        self._commands[command.name] = command
        self._logger.debug(
            f"Registered command '{command.name}'",
            context={'arity': 'unbounded' if command.variadic else command.arity}
        )

    def get(self, name: str) -> Optional[Command]:
        """Look up a prototype without reporting a miss."""
        return self._commands.get(name)

    def resolve(self, name: str) -> Optional[Command]:
        """
        Look up a prototype by name.

        On a miss the unknown-command message and any similar names
        are printed, and None is returned.
        """
        command = self._commands.get(name)
        if command is not None:
            return command

        self._logger.info(f"Unknown command '{name}'")
        if self._suggest:
            report_missing_command(name, self._commands, self._threshold)
        else:
            report_missing_command(name, (), self._threshold)
        return None

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._commands)

    def commands(self) -> List[Command]:
        return list(self._commands.values())

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
