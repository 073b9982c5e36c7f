"""Market catalog: the fixed, ordered set of tradable instruments."""

from __future__ import annotations

import logging
import random

from models.config import InstrumentConfig
from models.instrument import Instrument, InstrumentSnapshot
from simulation.price_model import advance

logger = logging.getLogger(__name__)


class Market:
    """Owns the market instruments for one simulator session.

    The catalog is fixed at construction; only prices (and their histories)
    change afterwards.
    """

    def __init__(self, instruments: list[Instrument]) -> None:
        self._instruments = list(instruments)

    @classmethod
    def from_config(cls, instruments: list[InstrumentConfig]) -> Market:
        return cls(
            [
                Instrument(id=cfg.id, name=cfg.name, price=cfg.price, risk=cfg.risk)
                for cfg in instruments
            ]
        )

    def __len__(self) -> int:
        return len(self._instruments)

    def instruments(self) -> list[Instrument]:
        """Return all instruments in id order."""
        return list(self._instruments)

    def get(self, instrument_id: int) -> Instrument | None:
        """Look up an instrument by its 1-based id; ``None`` if out of range."""
        if 1 <= instrument_id <= len(self._instruments):
            return self._instruments[instrument_id - 1]
        return None

    def advance_day(self, rng: random.Random) -> None:
        """Apply one price tick to every instrument, in catalog order."""
        for instrument in self._instruments:
            advance(instrument, rng)
        logger.debug("Advanced %d market instrument(s).", len(self._instruments))

    def snapshot(self) -> list[InstrumentSnapshot]:
        return [instrument.snapshot() for instrument in self._instruments]
