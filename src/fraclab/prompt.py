"""Reading numbers from a line-oriented console."""

from __future__ import annotations
import logging
import math
from typing import Callable, Optional, Protocol

from fraclab.errors import ParseError

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Error: please enter a number."


class Console(Protocol):
    def read(self, prompt: str) -> str: ...

    def write(self, text: str) -> None: ...


class StdConsole:
    """Console backed by the builtin `input` and `print`."""

    def read(self, prompt: str) -> str:
        return input(prompt)

    def write(self, text: str) -> None:
        print(text)


def parse_number(text: str) -> float:
    """Parse a finite real number.

    Surrounding whitespace is ignored and a single decimal comma is read as
    a decimal point ("2,5" == 2.5).
    """
    stripped = text.strip()
    if stripped.count(",") == 1 and "." not in stripped:
        stripped = stripped.replace(",", ".")
    try:
        value = float(stripped)
    except ValueError:
        raise ParseError(text) from None
    if not math.isfinite(value):
        raise ParseError(text)
    return value


def read_validated_number(
    prompt: str,
    predicate: Optional[Callable[[float], bool]] = None,
    error_message: str = "invalid value.",
    *,
    console: Optional[Console] = None,
) -> float:
    """Prompt until the console yields a number accepted by `predicate`.

    There is no retry limit. EOFError from the console propagates.
    """
    console = console or StdConsole()
    while True:
        text = console.read(prompt)
        try:
            value = parse_number(text)
        except ParseError:
            logger.debug("rejected non-numeric input %r", text)
            console.write(PARSE_ERROR_MESSAGE)
            continue
        if predicate is not None and not predicate(value):
            logger.debug("rejected %r for prompt %r", value, prompt)
            console.write(f"Error: {error_message}")
            continue
        return value
