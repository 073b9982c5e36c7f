"""In-process portfolio: cash balance, holdings and trade execution.

Trades use all-or-nothing semantics: every check runs before any state is
touched, so a rejected buy or sell leaves the balance and holdings exactly as
they were.
"""

from __future__ import annotations

import logging
import random

from models.instrument import Holding, Instrument
from models.portfolio import PortfolioSnapshot
from models.trade import TradeResult
from simulation.price_model import advance

logger = logging.getLogger(__name__)


class Portfolio:
    """Stateful portfolio that validates and executes buys and sells.

    Holdings are keyed by instrument name and kept in purchase order. Each
    holding tracks its own price independently of the market after it is
    bought.
    """

    def __init__(self, initial_balance: float) -> None:
        self._balance: float = initial_balance
        self._holdings: dict[str, Holding] = {}

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    @property
    def balance(self) -> float:
        return self._balance

    def holdings(self) -> list[Holding]:
        """Return the current holdings in purchase order."""
        return list(self._holdings.values())

    def get(self, name: str) -> Holding | None:
        return self._holdings.get(name)

    def snapshot(self) -> PortfolioSnapshot:
        """Return a snapshot of the current portfolio state."""
        return PortfolioSnapshot(
            balance=self._balance,
            holdings=[h.snapshot() for h in self._holdings.values()],
        )

    def buy(self, instrument: Instrument, quantity: int) -> TradeResult:
        """Buy *quantity* shares of *instrument* at its current market price."""
        if quantity <= 0:
            return self._reject(
                "buy",
                "invalid_quantity",
                f"Quantity must be positive, got {quantity}.",
                instrument.name,
                quantity,
            )

        cost = instrument.price * quantity
        if cost > self._balance:
            return self._reject(
                "buy",
                "insufficient_balance",
                "Insufficient balance.",
                instrument.name,
                quantity,
                price=instrument.price,
            )

        self._balance -= cost
        holding = self._holdings.get(instrument.name)
        if holding is not None:
            holding.quantity += quantity
        else:
            self._holdings[instrument.name] = Holding.from_instrument(instrument, quantity)

        logger.info(
            "Bought %d x %s at $%.2f (cost $%.2f, balance $%.2f).",
            quantity,
            instrument.name,
            instrument.price,
            cost,
            self._balance,
        )
        return TradeResult(
            status="accepted",
            side="buy",
            name=instrument.name,
            quantity=quantity,
            price=instrument.price,
            amount=cost,
            balance=self._balance,
            message=f"Bought {quantity} share(s) of {instrument.name} for ${cost:.2f}.",
        )

    def sell(self, name: str, quantity: int) -> TradeResult:
        """Sell *quantity* shares of the holding *name* at its tracked price."""
        holding = self._holdings.get(name)
        if holding is None:
            return self._reject(
                "sell", "not_found", "Stock not found in portfolio.", name, quantity
            )

        if quantity <= 0:
            return self._reject(
                "sell",
                "invalid_quantity",
                f"Quantity must be positive, got {quantity}.",
                name,
                quantity,
                price=holding.price,
            )

        if quantity > holding.quantity:
            return self._reject(
                "sell",
                "insufficient_quantity",
                "Not enough quantity.",
                name,
                quantity,
                price=holding.price,
            )

        income = quantity * holding.price
        self._balance += income
        holding.quantity -= quantity
        if holding.quantity == 0:
            del self._holdings[name]

        logger.info(
            "Sold %d x %s at $%.2f (income $%.2f, balance $%.2f).",
            quantity,
            name,
            holding.price,
            income,
            self._balance,
        )
        return TradeResult(
            status="accepted",
            side="sell",
            name=name,
            quantity=quantity,
            price=holding.price,
            amount=income,
            balance=self._balance,
            message=f"Sold {quantity} share(s) of {name} for ${income:.2f}.",
        )

    def advance_day(self, rng: random.Random) -> None:
        """Apply one price tick to every holding's own price."""
        for holding in self._holdings.values():
            advance(holding, rng)
        logger.debug("Advanced %d holding(s).", len(self._holdings))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _reject(
        self,
        side: str,
        reason: str,
        message: str,
        name: str,
        quantity: int,
        price: float | None = None,
    ) -> TradeResult:
        logger.info("Rejected %s of %d x %s: %s", side, quantity, name, reason)
        return TradeResult(
            status="rejected",
            side=side,
            reason=reason,
            name=name,
            quantity=quantity,
            price=price,
            balance=self._balance,
            message=message,
        )
