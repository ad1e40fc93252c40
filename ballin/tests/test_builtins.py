"""
Built-in Command Tests

Arithmetic, numeric formatting, ranges, apply and the helper commands.
"""

import io
import unittest
from contextlib import redirect_stdout

from ballin.core.command import Command, UNBOUNDED
from ballin.core.config_loader import Config
from ballin.core.interpreter import Interpreter
from ballin.core.registry import CommandRegistry
from ballin.exceptions import CommandArgumentError, MismatchedParenthesesError
from ballin.shell.builtins import BuiltinCommands


class BuiltinTestCase(unittest.TestCase):
    """Registry with every built-in registered and no shell attached."""

    def setUp(self):
        self.registry = CommandRegistry(threshold=70.0, suggest=True)
        self.builtins = BuiltinCommands(self.registry)
        self.builtins.register()

    def call(self, name, *args):
        return self.registry.get(name)(list(args))

    def call_quietly(self, name, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            result = self.call(name, *args)
        return result, out.getvalue()


class TestRegistration(BuiltinTestCase):

    def test_all_builtins_registered(self):
        for name in ('quit', 'echo', 'add', 'sub', 'mul', 'div', 'hex',
                     'bin', 'iota', 'apply', 'calc', 'help', 'history'):
            with self.subTest(name=name):
                self.assertIn(name, self.registry)

    def test_arities(self):
        self.assertEqual(self.registry.get('quit').arity, 0)
        self.assertEqual(self.registry.get('echo').arity, 1)
        self.assertEqual(self.registry.get('add').arity, 2)
        self.assertEqual(self.registry.get('iota').arity, 2)
        self.assertEqual(self.registry.get('apply').arity, UNBOUNDED)

    def test_register_twice_fails(self):
        from ballin.exceptions import DuplicateCommandError

        with self.assertRaises(DuplicateCommandError):
            self.builtins.register()


class TestArithmetic(BuiltinTestCase):

    def test_operations(self):
        self.assertEqual(self.call('add', '1', '2'), ['3'])
        self.assertEqual(self.call('sub', '1', '10'), ['-9'])
        self.assertEqual(self.call('mul', '2.5', '4'), ['10'])
        self.assertEqual(self.call('div', '1', '4'), ['0.25'])

    def test_single_precision_formatting(self):
        self.assertEqual(self.call('add', '0.1', '0.2'), ['0.3'])
        self.assertEqual(self.call('div', '1', '3'), ['0.333333'])

    def test_division_by_zero(self):
        self.assertEqual(self.call('div', '1', '0'), ['inf'])
        self.assertEqual(self.call('div', '-1', '0'), ['-inf'])
        self.assertEqual(self.call('div', '0', '0'), ['nan'])

    def test_extra_arguments_ignored(self):
        self.assertEqual(self.call('add', '1', '2', '3'), ['3'])

    def test_missing_argument(self):
        with self.assertRaises(CommandArgumentError) as ctx:
            self.call('add', '1')

        self.assertIn("expected 2 argument(s), got 1", str(ctx.exception))

    def test_invalid_number(self):
        with self.assertRaises(CommandArgumentError) as ctx:
            self.call('mul', 'two', '3')

        self.assertIn("invalid number 'two'", str(ctx.exception))


class TestNumberFormatting(BuiltinTestCase):

    def test_hex(self):
        self.assertEqual(self.call('hex', '255'), ['0xff'])
        self.assertEqual(self.call('hex', '0'), ['0x0'])

    def test_bin_widths(self):
        self.assertEqual(self.call('bin', '5'), ['0b00000101'])
        self.assertEqual(self.call('bin', '255'), ['0b11111111'])
        self.assertEqual(self.call('bin', '256'), ['0b' + format(256, '016b')])
        self.assertEqual(self.call('bin', '65536'), ['0b' + format(65536, '032b')])
        self.assertEqual(len(self.call('bin', str(1 << 40))[0]), 66)

    def test_out_of_range(self):
        with self.assertRaises(CommandArgumentError):
            self.call('hex', '-1')

        with self.assertRaises(CommandArgumentError):
            self.call('bin', str(1 << 64))

    def test_not_an_integer(self):
        with self.assertRaises(CommandArgumentError):
            self.call('hex', '1.5')

    def test_digits_only(self):
        """Signs, underscores, spaces and non-ASCII digits are rejected."""
        for text in ('1_000', '+5', ' 7', '7 ', '', '٣'):
            with self.subTest(text=text):
                with self.assertRaises(CommandArgumentError) as ctx:
                    self.call('hex', text)
                self.assertIn("invalid integer", str(ctx.exception))

        with self.assertRaises(CommandArgumentError):
            self.call('iota', '+1', '3')

        self.assertEqual(self.call('hex', '0001000'), ['0x3e8'])


class TestIota(BuiltinTestCase):

    def test_inclusive_range(self):
        self.assertEqual(self.call('iota', '1', '4'), ['1', '2', '3', '4'])
        self.assertEqual(self.call('iota', '3', '3'), ['3'])

    def test_empty_range(self):
        self.assertEqual(self.call('iota', '5', '1'), [])


class TestApply(BuiltinTestCase):

    def test_binary_target(self):
        """The first trailing argument is fixed, the rest are mapped."""
        self.assertEqual(self.call('apply', 'add', '10', '1', '2', '3'), ['11', '12', '13'])

    def test_mapped_value_comes_first(self):
        self.assertEqual(self.call('apply', 'sub', '10', '1', '2'), ['-9', '-8'])

    def test_unary_target(self):
        self.assertEqual(self.call('apply', 'hex', '10', '255'), ['0xa', '0xff'])

    def test_no_values(self):
        self.assertEqual(self.call('apply', 'add', '10'), [])

    def test_nullary_target(self):
        seen = []
        self.registry.register(Command('probe', 0, lambda args: seen.append(args) or ['x']))

        self.assertEqual(self.call('apply', 'probe', 'a', 'b'), ['x', 'x'])
        self.assertEqual(seen, [['a'], ['b']])

    def test_unbounded_target_maps_nothing(self):
        self.assertEqual(self.call('apply', 'calc', '1', '+', '2'), [])

    def test_empty_results_are_skipped(self):
        result, output = self.call_quietly('apply', 'echo', 'a', 'b')

        self.assertEqual(result, [])
        self.assertEqual(output, "a\nb\n")

    def test_unknown_target(self):
        result, output = self.call_quietly('apply', 'hexx', '1', '2')

        self.assertEqual(result, [])
        self.assertIn("the command `hexx` doesn't exist. did you mean:", output)
        self.assertIn("    - hex", output)

    def test_missing_target(self):
        with self.assertRaises(CommandArgumentError):
            self.call('apply')

    def test_errors_propagate(self):
        with self.assertRaises(CommandArgumentError):
            self.call('apply', 'add', '10', 'x')


class TestCalc(BuiltinTestCase):

    def test_expression(self):
        self.assertEqual(self.call('calc', '(', '1', '+', '2', ')', '*', '3'), ['9'])
        self.assertEqual(self.call('calc', '3', '+', '4', '*', '2'), ['11'])

    def test_expression_in_one_word(self):
        self.assertEqual(self.call('calc', '3 - 1'), ['2'])

    def test_mismatched_parentheses(self):
        with self.assertRaises(MismatchedParenthesesError):
            self.call('calc', '1', ')')

    def test_missing_expression(self):
        with self.assertRaises(CommandArgumentError):
            self.call('calc')


class TestHelpers(BuiltinTestCase):

    def test_echo(self):
        result, output = self.call_quietly('echo', 'hello', 'world')

        self.assertEqual(result, [])
        self.assertEqual(output, "hello world\n")

    def test_echo_without_arguments(self):
        _, output = self.call_quietly('echo')

        self.assertEqual(output, "\n")

    def test_quit_without_shell(self):
        with self.assertRaises(SystemExit) as ctx:
            self.call('quit')

        self.assertEqual(ctx.exception.code, 0)

    def test_help_lists_everything(self):
        _, output = self.call_quietly('help')

        self.assertIn("iota <min> <max>", output)
        self.assertIn("Exit the interpreter", output)
        self.assertEqual(len(output.splitlines()), len(self.registry))

    def test_help_for_one_command(self):
        _, output = self.call_quietly('help', 'hex')

        self.assertEqual(output.strip(), "hex <n>  Return n in hexadecimal")

    def test_help_unknown_command(self):
        _, output = self.call_quietly('help', 'zzzzzz')

        self.assertEqual(output, "the command `zzzzzz` doesn't exist.\n")

    def test_history_without_shell(self):
        result, output = self.call_quietly('history')

        self.assertEqual(result, [])
        self.assertEqual(output, "")


class TestPipelines(BuiltinTestCase):
    """Built-ins chained through the interpreter."""

    def run_line(self, line):
        interpreter = Interpreter(self.registry, config=Config())
        out = io.StringIO()
        with redirect_stdout(out):
            interpreter.run_line(line)
        return out.getvalue()

    def test_iota_into_echo(self):
        self.assertEqual(self.run_line("iota 1 4 | echo numbers"), "numbers 1 2 3 4\n")

    def test_apply_into_echo(self):
        self.assertEqual(self.run_line("apply add 10 1 2 3 | echo"), "11 12 13\n")

    def test_iota_into_apply(self):
        self.assertEqual(self.run_line("iota 1 3 | apply mul 2 | echo"), "2 4 6\n")

    def test_calc_into_echo(self):
        self.assertEqual(self.run_line("calc ( 1 + 2 ) * 3 | echo"), "9\n")

    def test_argument_error_is_contained(self):
        output = self.run_line("add 1 | echo")

        self.assertTrue(output.startswith("add: [Error 2002] expected 2 argument(s), got 1"))


if __name__ == '__main__':
    unittest.main()
