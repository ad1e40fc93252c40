"""
ballin Interpreter

Turns input lines into pipelines of bound commands and runs them.

A pipeline is a head command plus a linear chain of subcommands. Each
stage receives the previous stage's full result list after its own
bound arguments:

    iota 1 3 | echo numbers   ->   echo(["numbers", "1", "2", "3"])

Pipelines are queued and executed strictly in FIFO order.

Author: ballin developers
Version: 0.4.2.0
"""

from collections import deque
from typing import Deque, List, Optional

from ballin.logger import get_logger
from .command import Command
from .config_loader import Config, get_config
from .parser import CommandParser
from .registry import CommandRegistry


class Interpreter:
    """
    Pipeline interpreter.

    Example:
        >>> interpreter = Interpreter(registry)
        >>> interpreter.enqueue("iota 1 3 | echo")
        True
        >>> interpreter.execute()
        1 2 3
        1
    """

    def __init__(
        self,
        registry: CommandRegistry,
        config: Optional[Config] = None
    ):
        self._registry = registry
        self._config = config or get_config()
        self._parser = CommandParser()
        self._queue: Deque[Command] = deque()
        self._logger = get_logger('interpreter')

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def pending(self) -> int:
        """Number of queued pipelines."""
        return len(self._queue)

    def enqueue(self, line: str) -> bool:
        """
        Parse a line and queue the resulting pipeline.

        Nothing is queued if the line is blank or any segment names an
        unknown command (the miss is reported with suggestions).

        Returns:
            True if a pipeline was queued
        """
        segments = self._parser.parse(line)
        if not segments:
            return False

        bound: List[Command] = []
        for segment in segments:
            prototype = self._registry.resolve(segment.command)
            if prototype is None:
                self._logger.debug(
                    "Pipeline discarded",
                    context={'line': line, 'missing': segment.command}
                )
                return False
            bound.append(prototype.bind(segment.args))

        head = bound[0]
        for subcommand in bound[1:]:
            head.push_subcommand(subcommand)

        self._queue.append(head)
        self._logger.debug(
            f"Queued pipeline '{head.name}'",
            context={'stages': len(bound)}
        )
        return True

    def execute(self) -> int:
        """
        Run every queued pipeline in FIFO order.

        A command that raises aborts its own pipeline only: the error is
        printed as ``<command>: <error>`` and the next pipeline runs.

        Returns:
            Number of pipelines taken off the queue
        """
        executed = 0

        while self._queue:
            pipeline = self._queue.popleft()
            executed += 1
            self._run_pipeline(pipeline)

        return executed

    def _run_pipeline(self, head: Command) -> None:
        stage = head
        try:
            result = head()
            for stage in head.subcommands:
                result = stage(result)
        except Exception as e:
            self._logger.info(
                f"Command '{stage.name}' failed: {e}",
                context={'pipeline': head.name, 'error': type(e).__name__}
            )
            print(f"{stage.name}: {e}")
            return

        self._logger.debug(
            f"Pipeline '{head.name}' finished",
            context={'results': len(result)}
        )

        if self._config.interpreter.print_results:
            for value in result:
                print(value)

    def run_line(self, line: str) -> int:
        """Queue ``line`` and execute everything pending."""
        self.enqueue(line)
        return self.execute()

    def clear(self) -> None:
        """Drop all queued pipelines without running them."""
        self._queue.clear()
