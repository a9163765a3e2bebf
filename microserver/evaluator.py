"""Evaluator for the small command language carried in UDP payloads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from microserver.utils import split_payload, start_matches

logger = logging.getLogger(__name__)

DEFAULT_ENV_SIZE = 50
MAX_COMMANDS = 50
_DIGITS = "0123456789"


class EvaluatorError(Exception):
    """A command could not be evaluated."""


class UnknownCommandError(EvaluatorError):
    """The command word is not recognised."""


class EnvironmentFullError(EvaluatorError):
    """No room is left for another variable."""


@dataclass
class Variable:
    """A named value held in the evaluator's environment."""

    name: str
    value: str
    type: Optional[str] = None


def convert_char_to_int(chr: str) -> Optional[int]:
    """Return the value of a decimal digit, or None for any other character."""
    if len(chr) == 1 and chr in _DIGITS:
        return ord(chr) - ord("0")
    return None


def _noop_led(on: bool) -> None:
    logger.debug("LED %s", "on" if on else "off")


class Evaluator:
    """Runs ';'-separated commands against a fresh variable environment."""

    def __init__(
        self,
        set_led: Optional[Callable[[bool], None]] = None,
        env_size: int = DEFAULT_ENV_SIZE,
    ) -> None:
        self.set_led = set_led if set_led is not None else _noop_led
        self.env_size = env_size
        self.env: list[Variable] = []

    def handle_payload(self, payload: str) -> None:
        """Run a received payload in a new, empty environment."""
        self.env = []
        self.execute_commands(payload)

    def execute_commands(self, commands: str) -> None:
        """Run each ';'-separated command, logging those that fail."""
        for command in split_payload(commands, ";", MAX_COMMANDS):
            logger.info("Executing command: %s", command)
            try:
                self.execute_command(command)
            except EvaluatorError as exc:
                logger.warning("%s", exc)

    def execute_command(self, command: str) -> None:
        """Identify a single command and run it."""
        if command == "LED_ON":
            self.set_led(True)
        elif command == "LED_OFF":
            self.set_led(False)
        elif start_matches(command, "LET"):
            self.set_variable(command)
        elif start_matches(command, "BROADCAST"):
            pass
        elif start_matches(command, "REPEAT"):
            self.repeat_command(command)
        else:
            raise UnknownCommandError(f"Unknown command: {command}")

    def set_variable(self, command: str) -> Variable:
        """Handle ``LET <name> = <value>`` and return the stored variable."""
        rest = command[3:].lstrip(" ")
        end = len(rest)
        for index, char in enumerate(rest):
            if char in " =":
                end = index
                break
        name = rest[:end]
        if not name:
            raise EvaluatorError(f"Missing variable name: {command}")
        rest = rest[end:].lstrip(" ")
        if not rest.startswith("="):
            raise EvaluatorError(f"Missing '=' in: {command}")
        value = rest[1:].lstrip(" ")

        existing = self.read_from_env(name)
        if existing is not None:
            existing.value = value
            return existing
        if len(self.env) >= self.env_size:
            raise EnvironmentFullError(f"No room for variable {name!r}")
        variable = Variable(name=name, value=value)
        self.env.append(variable)
        return variable

    def repeat_command(self, command: str) -> None:
        """Handle ``REPEAT <count> (<commands>)``."""
        rest = command[6:].lstrip(" ")
        end = len(rest)
        for index, char in enumerate(rest):
            if char in " (":
                end = index
                break
        count = self._resolve_number(rest[:end], set())

        open_at = command.find("(")
        if open_at < 0:
            raise EvaluatorError(f"Missing '(' in: {command}")
        close_at = command.find(")", open_at + 1)
        if close_at < 0:
            raise EvaluatorError(f"Missing ')' in: {command}")
        body = command[open_at + 1 : close_at]

        for _ in range(count):
            self.execute_commands(body)

    def read_parameter(self, command: str, start: int) -> str:
        """Return the word starting at *start*, ending at a space or the end."""
        end = command.find(" ", start)
        return command[start:] if end < 0 else command[start:end]

    def read_number(self, command: str, start: int) -> int:
        """Read a number, or the number held by a variable, at *start*."""
        return self._resolve_number(self.read_parameter(command, start), set())

    def read_from_env(self, name: str) -> Optional[Variable]:
        """Return the variable called *name*, or None if there is none."""
        return next((var for var in self.env if var.name == name), None)

    def _resolve_number(self, token: str, seen: set[str]) -> int:
        if not token:
            raise EvaluatorError("Expected a number")
        if all(convert_char_to_int(char) is not None for char in token):
            return int(token)
        if token in seen:
            raise EvaluatorError(f"Variable {token!r} refers to itself")
        variable = self.read_from_env(token)
        if variable is None:
            raise EvaluatorError(f"Unknown variable: {token}")
        seen.add(token)
        return self._resolve_number(self.read_parameter(variable.value, 0), seen)