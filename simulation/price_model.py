"""Daily random-walk price model.

Each tick draws an integer offset uniformly from [-100, 100], scales it to
[-1.0, 1.0] and moves the price by that fraction of its risk tier's
volatility. Prices never fall below ``PRICE_FLOOR``.
"""

from __future__ import annotations

import logging
import random

from models.instrument import Instrument, RiskTier

logger = logging.getLogger(__name__)

PRICE_FLOOR = 1.0
OFFSET_RANGE = 100

VOLATILITY: dict[RiskTier, float] = {
    RiskTier.HIGH: 0.20,
    RiskTier.MEDIUM: 0.10,
    RiskTier.LOW: 0.05,
}


def volatility_for(risk: RiskTier | str) -> float:
    """Return the volatility coefficient for *risk*.

    Values outside the known tiers fall back to the Low coefficient without
    raising.
    """
    try:
        tier = RiskTier(risk)
    except ValueError:
        tier = RiskTier.LOW
    return VOLATILITY[tier]


def next_price(price: float, risk: RiskTier | str, rng: random.Random) -> float:
    """Compute the next day's price from *price* and *risk*."""
    offset = rng.randint(-OFFSET_RANGE, OFFSET_RANGE) / float(OFFSET_RANGE)
    new_price = price + offset * volatility_for(risk) * price
    if new_price < PRICE_FLOOR:
        new_price = PRICE_FLOOR
    return new_price


def advance(instrument: Instrument, rng: random.Random) -> float:
    """Move *instrument* one day forward and record the new price."""
    old_price = instrument.price
    instrument.price = next_price(old_price, instrument.risk, rng)
    instrument.price_history.append(instrument.price)
    logger.debug(
        "%s: %.2f -> %.2f (day %d)",
        instrument.name,
        old_price,
        instrument.price,
        instrument.day,
    )
    return instrument.price
