"""Simulator facade: one market, one portfolio and one random source.

Lifecycle:
    1. Build the market catalog and portfolio from a ``SimulatorConfig``.
    2. Serve list / buy / sell / show requests from the menu.
    3. On each ``advance_day``, tick the market and then the portfolio.
       The two walks are independent; a holding never re-reads the market
       price after purchase.
"""

from __future__ import annotations

import logging
import random

from models.config import SimulatorConfig
from models.instrument import InstrumentSnapshot
from models.portfolio import PortfolioSnapshot
from models.trade import TradeResult
from simulation.market import Market
from simulation.portfolio import Portfolio

logger = logging.getLogger(__name__)


class InvestmentSimulator:
    """Entry point for every operation the menu can perform."""

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config if config is not None else SimulatorConfig()
        self._rng = rng if rng is not None else random.Random(self._config.seed)
        self._market = Market.from_config(self._config.instruments)
        self._portfolio = Portfolio(self._config.portfolio.initial_balance)
        self._days = 0
        logger.info(
            "Simulator ready: %d instrument(s), balance $%.2f, seed=%s.",
            len(self._market),
            self._portfolio.balance,
            self._config.seed,
        )

    @property
    def market(self) -> Market:
        return self._market

    @property
    def portfolio(self) -> Portfolio:
        return self._portfolio

    @property
    def days(self) -> int:
        """Number of simulated days so far."""
        return self._days

    def list_market(self) -> list[InstrumentSnapshot]:
        return self._market.snapshot()

    def show_portfolio(self) -> PortfolioSnapshot:
        return self._portfolio.snapshot()

    def buy(self, instrument_id: int, quantity: int) -> TradeResult:
        """Buy *quantity* shares of the instrument with 1-based *instrument_id*.

        An unknown id is rejected here; the portfolio is never consulted.
        """
        instrument = self._market.get(instrument_id)
        if instrument is None:
            logger.info("Rejected buy: invalid instrument id %d.", instrument_id)
            return TradeResult(
                status="rejected",
                side="buy",
                reason="invalid_instrument",
                quantity=quantity,
                balance=self._portfolio.balance,
                message="Invalid ID.",
            )
        return self._portfolio.buy(instrument, quantity)

    def sell(self, name: str, quantity: int) -> TradeResult:
        return self._portfolio.sell(name, quantity)

    def advance_day(self) -> int:
        """Simulate one day for both the market and the portfolio."""
        self._market.advance_day(self._rng)
        self._portfolio.advance_day(self._rng)
        self._days += 1
        logger.info(
            "Day %d simulated. Portfolio value: $%.2f",
            self._days,
            self._portfolio.snapshot().total_value,
        )
        return self._days
