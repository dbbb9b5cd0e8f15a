"""Interactive menu loop.

The loop is a small state machine::

    MENU -> COLLECT_COEFFICIENTS -> EVALUATE -> REPORT -> MENU
    MENU -> MENU      (invalid choice)
    MENU -> EXIT      (choice "0" or end of input)

Each pass through COLLECT_COEFFICIENTS builds a fresh fraction which is
dropped again in REPORT. Domain errors move the machine straight to REPORT.
"""

from __future__ import annotations
from enum import Enum
import logging
from typing import Optional

from fraclab.errors import FractionError
from fraclab.fraction import FractionExpr, FractionKind
from fraclab.prompt import Console, StdConsole, read_validated_number
from fraclab.util import EPSILON, fmt_value

logger = logging.getLogger(__name__)

EXIT_KEY = "0"

MENU_TEXT = "\n".join(
    [
        "",
        "--- Fraction lab: abstract classes and interfaces ---",
        *[f"{kind.key}. {kind.title}" for kind in FractionKind],
        f"{EXIT_KEY}. Exit",
    ]
)


class MenuState(Enum):
    MENU = 1
    COLLECT_COEFFICIENTS = 2
    EVALUATE = 3
    REPORT = 4
    EXIT = 5


class FractionMenu:
    def __init__(
        self,
        console: Optional[Console] = None,
        precision: int = 4,
        tolerance: float = EPSILON,
    ) -> None:
        self.console = console or StdConsole()
        self.precision = precision
        self.tolerance = tolerance
        self.state = MenuState.MENU
        self.evaluations = 0
        self._kind: Optional[FractionKind] = None
        self._fraction: Optional[FractionExpr] = None
        self._outcome = ""

    def run(self) -> int:
        """Drive the loop until EXIT; return the number of successful evaluations."""
        while self.state is not MenuState.EXIT:
            try:
                self.step()
            except EOFError:
                logger.debug("end of input, leaving menu")
                self.state = MenuState.EXIT
            except FractionError as e:
                logger.info("%s: %s", type(e).__name__, e)
                self._finish(f"Error: {e}")
            except Exception as e:
                logger.exception("unexpected error in menu loop")
                self._finish(f"Unexpected error: {e}")
        logger.info("menu exited after %d evaluation(s)", self.evaluations)
        return self.evaluations

    def step(self) -> None:
        match self.state:
            case MenuState.MENU:
                self._show_menu()
            case MenuState.COLLECT_COEFFICIENTS:
                self._collect_coefficients()
            case MenuState.EVALUATE:
                self._evaluate()
            case MenuState.REPORT:
                self._report()
            case MenuState.EXIT:
                pass

    def _show_menu(self) -> None:
        self.console.write(MENU_TEXT)
        choice = self.console.read("Choice: ").strip()
        if choice == EXIT_KEY:
            self.state = MenuState.EXIT
            return
        kind = FractionKind.from_key(choice)
        if kind is None:
            logger.debug("invalid menu choice %r", choice)
            self.console.write("Invalid choice.")
            return
        self._kind = kind
        self.state = MenuState.COLLECT_COEFFICIENTS

    def _collect_coefficients(self) -> None:
        assert self._kind is not None
        kind = self._kind
        self.console.write(f"\n--- {kind.title} setup ---")
        coefficients = [
            read_validated_number(
                f"Enter coefficient '{name}' ({kind.rule}): ",
                lambda v: kind.accepts(v, self.tolerance),
                f"coefficient '{name}' {kind.rule}.",
                console=self.console,
            )
            for name in kind.coefficient_names
        ]
        self._fraction = kind.create(*coefficients, tolerance=self.tolerance)
        self.state = MenuState.EVALUATE

    def _evaluate(self) -> None:
        assert self._fraction is not None
        self.console.write("\n" + self._fraction.describe())
        x = read_validated_number("Enter x: ", console=self.console)
        result = self._fraction.evaluate(x)
        self.evaluations += 1
        self._finish(f"Result: {fmt_value(result, self.precision)}")

    def _finish(self, outcome: str) -> None:
        self._outcome = outcome
        self.state = MenuState.REPORT

    def _report(self) -> None:
        outcome = self._outcome
        self._kind = None
        self._fraction = None
        self._outcome = ""
        self.state = MenuState.MENU
        self.console.write(outcome)
