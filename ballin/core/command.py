"""
Command Model

A command is a named action over a list of string arguments that
returns a list of string results. Registry entries are prototypes;
the interpreter works on bound clones.

Author: ballin developers
Version: 0.4.2.0
"""

import sys
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, List, Optional


# Arity hint for variadic commands. Slicing with it behaves like
# "everything that is left".
UNBOUNDED = sys.maxsize

Action = Callable[[List[str]], Optional[List[str]]]


@dataclass
class Command:
    """
    A named, arity-tagged unit of behavior.

    Attributes:
        name: Unique registry key
        arity: Declared argument count, or UNBOUNDED
        action: Function from argument list to result list
        arguments: Arguments already bound to this instance
        subcommands: Commands fed with this command's results in a pipe
        usage: One-line usage string shown by ``help``
        description: Short description shown by ``help``

    Example:
        >>> echo = Command('echo', 1, lambda args: print(*args) or [])
        >>> bound = echo.bind(['hi'])
        >>> bound()
        hi
        []
    """
    name: str
    arity: int
    action: Action
    arguments: List[str] = field(default_factory=list)
    subcommands: List['Command'] = field(default_factory=list)
    usage: str = ""
    description: str = ""

    @property
    def variadic(self) -> bool:
        return self.arity == UNBOUNDED

    def bind(self, arguments: Iterable[str]) -> 'Command':
        """
        Return a clone with ``arguments`` appended to its bound arguments.

        The clone gets its own argument and subcommand lists, so binding
        never touches the prototype.
        """
        return replace(
            self,
            arguments=[*self.arguments, *arguments],
            subcommands=[],
        )

    def push_subcommand(self, subcommand: 'Command') -> None:
        """Append a command to run after this one in a pipe chain."""
        self.subcommands.append(subcommand)

    def __call__(self, arguments: Optional[Iterable[str]] = None) -> List[str]:
        """Run the action on the bound arguments followed by ``arguments``."""
        local_arguments = list(self.arguments)
        if arguments is not None:
            local_arguments.extend(arguments)

        result = self.action(local_arguments)
        return list(result) if result else []

    def __repr__(self) -> str:
        arity = 'unbounded' if self.variadic else self.arity
        return (
            f"Command(name={self.name!r}, arity={arity}, "
            f"arguments={self.arguments!r}, "
            f"subcommands={[c.name for c in self.subcommands]!r})"
        )
