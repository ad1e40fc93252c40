"""
Shell Built-in Commands

Implements the built-in interpreter commands and registers them as
Command prototypes.

Author: ballin developers
Version: 0.4.2.0
"""

from typing import Callable, List

from ballin.core.command import Command, UNBOUNDED
from ballin.core.registry import CommandRegistry
from ballin.exceptions import CommandArgumentError
from ballin.expression import apply_operator, evaluate, format_number, to_single


_MAX_UNSIGNED = (1 << 64) - 1


class BuiltinCommands:
    """
    Built-in interpreter commands.

    Every command takes a list of string arguments and returns a list
    of string results, so any of them can appear in a pipe.
    """

    def __init__(self, registry: CommandRegistry, shell=None):
        """
        Initialize built-in commands.

        Args:
            registry: Registry used by ``apply`` and ``help`` lookups
            shell: The shell instance, if any; ``quit`` and ``history``
                act on it
        """
        self._registry = registry
        self._shell = shell
        self._commands: List[Command] = [
            self._command('quit', 0, self.cmd_quit, 'quit', 'Exit the interpreter'),
            self._command('echo', 1, self.cmd_echo, 'echo <text...>', 'Print arguments separated by spaces'),
            self._command('add', 2, self.cmd_add, 'add <a> <b>', 'Return a + b'),
            self._command('sub', 2, self.cmd_sub, 'sub <a> <b>', 'Return a - b'),
            self._command('mul', 2, self.cmd_mul, 'mul <a> <b>', 'Return a * b'),
            self._command('div', 2, self.cmd_div, 'div <a> <b>', 'Return a / b'),
            self._command('hex', 1, self.cmd_hex, 'hex <n>', 'Return n in hexadecimal'),
            self._command('bin', 1, self.cmd_bin, 'bin <n>', 'Return n in binary (8/16/32/64 bits)'),
            self._command('iota', 2, self.cmd_iota, 'iota <min> <max>', 'Return the integers min..max inclusive'),
            self._command('apply', UNBOUNDED, self.cmd_apply, 'apply <command> <fixed...> <values...>',
                          'Run a command once per value, collecting first results'),
            self._command('calc', UNBOUNDED, self.cmd_calc, 'calc <expression>',
                          'Evaluate an expression, e.g. calc ( 1 + 2 ) * 3'),
            self._command('help', UNBOUNDED, self.cmd_help, 'help [command...]', 'Display help information'),
            self._command('history', 0, self.cmd_history, 'history', 'Display the lines entered this session'),
        ]

    @staticmethod
    def _command(
        name: str,
        arity: int,
        action: Callable[[List[str]], List[str]],
        usage: str,
        description: str
    ) -> Command:
        return Command(name, arity, action, usage=usage, description=description)

    def register(self) -> None:
        """Register every built-in with the registry."""
        for command in self._commands:
            self._registry.register(command)

    # Argument helpers

    @staticmethod
    def _require(name: str, args: List[str], count: int, usage: str) -> None:
        if len(args) < count:
            raise CommandArgumentError(
                name,
                f"expected {count} argument(s), got {len(args)}",
                context={'usage': usage}
            )

    @staticmethod
    def _parse_float(name: str, text: str) -> float:
        try:
            return to_single(float(text))
        except ValueError:
            raise CommandArgumentError(name, f"invalid number '{text}'") from None

    @staticmethod
    def _parse_unsigned(name: str, text: str) -> int:
        # plain decimal digits only: no sign, underscores or whitespace
        if not (text.isascii() and text.isdigit()):
            raise CommandArgumentError(name, f"invalid integer '{text}'")

        value = int(text)
        if value > _MAX_UNSIGNED:
            raise CommandArgumentError(name, f"integer out of range '{text}'")
        return value

    def _arithmetic(self, name: str, symbol: str, args: List[str]) -> List[str]:
        self._require(name, args, 2, f"{name} <a> <b>")
        lhs = self._parse_float(name, args[0])
        rhs = self._parse_float(name, args[1])
        return [format_number(apply_operator(symbol, lhs, rhs))]

    # Command implementations

    def cmd_quit(self, args: List[str]) -> List[str]:
        """Exit the interpreter."""
        if self._shell is None:
            raise SystemExit(0)
        self._shell.request_exit()
        return []

    def cmd_echo(self, args: List[str]) -> List[str]:
        """Echo arguments."""
        print(' '.join(args))
        return []

    def cmd_add(self, args: List[str]) -> List[str]:
        return self._arithmetic('add', '+', args)

    def cmd_sub(self, args: List[str]) -> List[str]:
        return self._arithmetic('sub', '-', args)

    def cmd_mul(self, args: List[str]) -> List[str]:
        return self._arithmetic('mul', '*', args)

    def cmd_div(self, args: List[str]) -> List[str]:
        return self._arithmetic('div', '/', args)

    def cmd_hex(self, args: List[str]) -> List[str]:
        """Hexadecimal representation with a 0x prefix."""
        self._require('hex', args, 1, 'hex <n>')
        value = self._parse_unsigned('hex', args[0])
        return [f"0x{value:x}"]

    def cmd_bin(self, args: List[str]) -> List[str]:
        """Binary representation padded to the smallest fitting width."""
        self._require('bin', args, 1, 'bin <n>')
        value = self._parse_unsigned('bin', args[0])

        for width in (8, 16, 32, 64):
            if value < 1 << width:
                return [f"0b{value:0{width}b}"]

        raise CommandArgumentError('bin', f"integer out of range '{args[0]}'")

    def cmd_iota(self, args: List[str]) -> List[str]:
        """Inclusive integer range."""
        self._require('iota', args, 2, 'iota <min> <max>')
        minimum = self._parse_unsigned('iota', args[0])
        maximum = self._parse_unsigned('iota', args[1])
        return [str(index) for index in range(minimum, maximum + 1)]

    def cmd_apply(self, args: List[str]) -> List[str]:
        """
        Map a command over trailing arguments.

        ``apply add 10 1 2 3`` binds ``10`` as the fixed argument of
        ``add`` (arity 2) and runs ``add 1 10``, ``add 2 10``,
        ``add 3 10``, collecting the first result of each.
        """
        self._require('apply', args, 1, 'apply <command> <fixed...> <values...>')

        target = self._registry.resolve(args[0])
        if target is None:
            return []

        # Arity 0 and 1 targets take no fixed arguments; the target's
        # own name is never mapped.
        start = max(target.arity, 1)
        fixed = args[1:start]

        result = []
        for value in args[start:]:
            output = target([value, *fixed])
            if output:
                result.append(output[0])

        return result

    def cmd_calc(self, args: List[str]) -> List[str]:
        """Evaluate an arithmetic expression."""
        self._require('calc', args, 1, 'calc <expression>')
        return [format_number(evaluate(' '.join(args)))]

    def cmd_help(self, args: List[str]) -> List[str]:
        """Display help information."""
        if args:
            commands = []
            for name in args:
                command = self._registry.resolve(name)
                if command is not None:
                    commands.append(command)
        else:
            commands = self._registry.commands()

        if not commands:
            return []

        width = max(len(command.usage or command.name) for command in commands)
        for command in commands:
            usage = command.usage or command.name
            print(f"  {usage.ljust(width)}  {command.description}".rstrip())

        return []

    def cmd_history(self, args: List[str]) -> List[str]:
        """Display command history."""
        if self._shell is None:
            return []

        for number, line in enumerate(self._shell.history, start=1):
            print(f"{number:5d}  {line}")

        return []
