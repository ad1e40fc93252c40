"""
ballin Shell Module

The interactive read-execute loop.

Author: ballin developers
Version: 0.4.2.0
"""

from collections import deque
from typing import Deque, List, Optional

from ballin.core.config_loader import Config, get_config
from ballin.core.interpreter import Interpreter
from ballin.core.registry import CommandRegistry
from ballin.logger import get_logger
from .builtins import BuiltinCommands


class Shell:
    """
    ballin interactive shell.

    Provides:
    - Built-in commands
    - Pipeline execution
    - In-session command history

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(
        self,
        registry: Optional[CommandRegistry] = None,
        config: Optional[Config] = None
    ):
        self._config = config or get_config()
        self._logger = get_logger('shell')
        self._registry = registry if registry is not None else CommandRegistry(
            threshold=self._config.suggestion.threshold,
            suggest=self._config.suggestion.enabled
        )
        self._builtins = BuiltinCommands(self._registry, shell=self)
        self._builtins.register()
        self._interpreter = Interpreter(self._registry, config=self._config)
        self._history: Deque[str] = deque(maxlen=self._config.shell.history_size)
        self._exiting = False

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    @property
    def history(self) -> List[str]:
        return list(self._history)

    @property
    def prompt(self) -> str:
        return self._config.shell.prompt

    @property
    def exiting(self) -> bool:
        return self._exiting

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop.
        """
        self._exiting = False

        print(self._config.interpreter.banner)

        while not self._exiting:
            try:
                try:
                    line = input(self.prompt)
                except EOFError:
                    print()
                    break
                except KeyboardInterrupt:
                    print("^C")
                    continue

                self.execute_line(line)

            except Exception as e:
                self._logger.error(f"Shell error: {e}")
                print(f"shell: error: {e}")

    def execute_line(self, line: str) -> int:
        """
        Execute one input line.

        Args:
            line: Command line string

        Returns:
            Number of pipelines executed
        """
        if line.strip():
            self._history.append(line)

        return self._interpreter.run_line(line)

    def run_script(self, script: str) -> int:
        """
        Run several lines, stopping early if one of them quits.

        Returns:
            Number of pipelines executed
        """
        executed = 0

        for line in script.split('\n'):
            if self._exiting:
                break
            executed += self.execute_line(line)

        return executed

    def request_exit(self) -> None:
        """Request the shell to exit after the current line."""
        self._exiting = True


def create_shell(config: Optional[Config] = None) -> Shell:
    """Factory function to create a shell."""
    return Shell(config=config)
