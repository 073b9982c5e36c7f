"""Interactive text menu for the simulator.

The session reads one command at a time and runs it to completion before
reading the next. Input and output are injectable so the loop can be driven
from scripted input in tests.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from models.instrument import HoldingSnapshot, InstrumentSnapshot
from models.portfolio import PortfolioSnapshot
from simulation.simulator import InvestmentSimulator

logger = logging.getLogger(__name__)

MENU = (
    "\n~ This is investment simulator ~\n"
    "1. Show market\n"
    "2. Buy stock\n"
    "3. Sell stock\n"
    "4. Show portfolio\n"
    "5. Simulate next day\n"
    "0. Exit\n"
)

class _EndOfInput:
    """Returned by _prompt_int once input is exhausted."""


_EOF = _EndOfInput()


# ------------------------------------------------------------------
# Formatting
# ------------------------------------------------------------------

def format_instrument(snapshot: InstrumentSnapshot) -> str:
    return (
        f"{snapshot.id:>2}. {snapshot.name:>12} | ${snapshot.price:>8.2f} "
        f"| Risk: {snapshot.risk.value} | Day {snapshot.day}"
    )


def format_holding(snapshot: HoldingSnapshot) -> str:
    return (
        f"{format_instrument(snapshot)} | Quantity: {snapshot.quantity} "
        f"| Value: ${snapshot.value:.2f}"
    )


def format_market(snapshots: list[InstrumentSnapshot]) -> str:
    return "\n".join(format_instrument(s) for s in snapshots)


def format_portfolio(snapshot: PortfolioSnapshot) -> str:
    lines = ["\n~ This is Your Portfolio ~", f"Balance: ${snapshot.balance:.2f}"]
    if not snapshot.holdings:
        lines.append("No stocks owned yet")
    else:
        lines.extend(format_holding(h) for h in snapshot.holdings)
    return "\n".join(lines)


# ------------------------------------------------------------------
# Session
# ------------------------------------------------------------------

class MenuSession:
    """Blocking read-eval loop over an ``InvestmentSimulator``."""

    def __init__(
        self,
        simulator: InvestmentSimulator,
        input_fn: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._simulator = simulator
        self._input = input_fn
        self._output = output if output is not None else sys.stdout
        self._actions: dict[int, Callable[[], None]] = {
            1: self.show_market,
            2: self.buy,
            3: self.sell,
            4: self.show_portfolio,
            5: self.simulate_day,
        }

    def run(self) -> None:
        """Loop until the user picks 0 or input is exhausted."""
        while True:
            self._write(MENU, end="")
            choice = self._prompt_int("Please, choose an action(number): ")
            if choice is _EOF or choice == 0:
                self._write("Goodbye! Please return later!")
                return
            action = self._actions.get(choice) if choice is not None else None
            if action is None:
                self._write("Invalid option.")
                continue
            action()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def show_market(self) -> None:
        self._write("\n~ Market Stocks ~")
        self._write(format_market(self._simulator.list_market()))

    def buy(self) -> None:
        self._write("Enter stock ID to buy: ")
        self._write(format_market(self._simulator.list_market()))
        instrument_id = self._prompt_int("")
        if instrument_id is None or instrument_id is _EOF:
            self._write("Invalid ID.")
            return
        quantity = self._prompt_int("Enter quantity: ")
        if quantity is None or quantity is _EOF:
            self._write("Invalid quantity.")
            return
        result = self._simulator.buy(instrument_id, quantity)
        self._write(result.message)

    def sell(self) -> None:
        name = self._prompt("Enter stock name to sell: ")
        if name is None:
            return
        name = name.strip()
        quantity = self._prompt_int("Enter quantity: ")
        if quantity is None or quantity is _EOF:
            self._write("Invalid quantity.")
            return
        result = self._simulator.sell(name, quantity)
        self._write(result.message)

    def show_portfolio(self) -> None:
        self._write(format_portfolio(self._simulator.show_portfolio()))

    def simulate_day(self) -> None:
        self._write("Simulating next day...")
        self._simulator.advance_day()
        self._write("Changes simulated! Here's your updated portfolio:")
        self.show_portfolio()

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------

    def _write(self, text: str, end: str = "\n") -> None:
        self._output.write(text + end)
        self._output.flush()

    def _prompt(self, prompt: str) -> str | None:
        """Show *prompt* and read one line; ``None`` once input is exhausted."""
        if prompt:
            self._write(prompt, end="")
        try:
            return self._input()
        except EOFError:
            logger.debug("Input exhausted.")
            return None

    def _prompt_int(self, prompt: str) -> int | _EndOfInput | None:
        """Read an integer; ``None`` for non-numeric text, ``_EOF`` at end of input."""
        text = self._prompt(prompt)
        if text is None:
            return _EOF
        try:
            return int(text.strip())
        except ValueError:
            logger.debug("Not an integer: %r", text)
            return None

