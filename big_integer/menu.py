"""
Interactive Menu Module

Line-based terminal harness around the arithmetic engine. Reads a command
letter, then operand strings, and prints results:

    (p)arse, (a)dd, (m)ultiply, or (q)uit? => a
        Enter first integer => 999
        Enter second integer => 1
            Sum: 1000

Badly formatted operands print "Incorrect Format" and return to the menu.
"""

import sys
from typing import Callable, Optional, TextIO

from .adder import add
from .config import BigIntegerConfig, get_config, input_too_long
from .integer import BigInteger
from .logging_config import get_logger, log_action, setup_logging
from .multiplier import multiply
from .parser import FormatError, parse


class CalculatorMenu:
    """Interactive (p)arse / (a)dd / (m)ultiply / (q)uit loop"""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output: Optional[TextIO] = None,
                 settings: Optional[BigIntegerConfig] = None):
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout
        self.settings = settings if settings is not None else get_config()
        self.logger = get_logger("bigint.menu")
        self._commands = {
            'p': self.parse_command,
            'a': self.add_command,
            'm': self.multiply_command,
        }

    def run(self) -> int:
        """
        Run the menu until 'q' or end of input

        Returns:
            Number of commands executed
        """
        executed = 0
        while True:
            try:
                choice = self.get_choice()
            except EOFError:
                break
            if choice == 'q':
                break

            command = self._commands.get(choice)
            if command is None:
                self._write("Incorrect choice")
                continue

            try:
                command()
            except EOFError:
                break
            executed += 1

        return executed

    def get_choice(self) -> str:
        """Read a command letter; an empty reply is not a valid choice"""
        reply = self.input_func(self.settings.menu_prompt)
        if not reply:
            return ' '
        return reply.lower()[0]

    def parse_command(self):
        """Parse one integer and show its value, sign and digit count"""
        try:
            value = self._read_operand("\tEnter integer => ", "parse")
        except FormatError:
            self._write("\t\tIncorrect Format")
            return

        self._write(f"\t\tValue = {value}")
        self._write(f"\t\tNegative = {str(value.negative).lower()}")
        self._write(f"\t\tNumDigits = {value.length}")

    def add_command(self):
        """Read two integers and show their sum"""
        self._binary_command("add", add, "Sum")

    def multiply_command(self):
        """Read two integers and show their product"""
        self._binary_command("multiply", multiply, "Product")

    def _binary_command(self, operation: str,
                        func: Callable[[BigInteger, BigInteger], BigInteger],
                        label: str):
        try:
            first = self._read_operand("\tEnter first integer => ", operation)
            second = self._read_operand("\tEnter second integer => ", operation)
        except FormatError:
            self._write("\t\tIncorrect Format")
            return

        result = func(first, second)
        log_action(
            self.logger, "info", f"Computed {operation}",
            action="menu", operation=operation, operands=[str(first), str(second)],
            extra={"result_digits": result.length}
        )
        self._write(f"\t\t{label}: {result}")

    def _read_operand(self, prompt: str, operation: str) -> BigInteger:
        text = self.input_func(prompt)
        try:
            if input_too_long(text, self.settings):
                raise FormatError(
                    text[:20] + "...",
                    f"longer than {self.settings.max_input_length} characters"
                )
            return parse(text)
        except FormatError as e:
            log_action(
                self.logger, "warning", f"Rejected operand: {e.reason}",
                action="menu", operation=operation
            )
            raise

    def _write(self, line: str):
        self.output.write(line + "\n")


def main() -> int:
    """Configure logging from settings and run the interactive menu"""
    settings = get_config()
    setup_logging(settings.log_level, log_format=settings.log_format)
    CalculatorMenu(settings=settings).run()
    return 0
