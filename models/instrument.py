"""Instrument and holding models: RiskTier, Instrument, Holding and their snapshots."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class RiskTier(str, Enum):
    """Risk tier of an instrument; drives daily price volatility."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class InstrumentSnapshot(BaseModel):
    """Read-only view of an instrument at one point in the simulation."""

    id: int
    name: str
    price: float
    risk: RiskTier
    day: int  # Length of the price history


class HoldingSnapshot(InstrumentSnapshot):
    """Read-only view of a portfolio holding."""

    quantity: int
    value: float  # quantity * holding price


class Instrument(BaseModel):
    """A tradable stock in the market catalog.

    ``price_history`` is append-only and always starts with the initial
    price, so its length is the number of simulated days plus one.
    """

    id: int = Field(ge=1)
    name: str
    price: float = Field(gt=0)
    risk: RiskTier
    price_history: list[float] = Field(default_factory=list)

    @model_validator(mode="after")
    def _seed_history(self) -> Instrument:
        if not self.price_history:
            self.price_history.append(self.price)
        return self

    @property
    def day(self) -> int:
        return len(self.price_history)

    def snapshot(self) -> InstrumentSnapshot:
        return InstrumentSnapshot(
            id=self.id,
            name=self.name,
            price=self.price,
            risk=self.risk,
            day=self.day,
        )

    def __str__(self) -> str:
        return f"{self.name} (${self.price:.2f}, {self.risk.value})"


class Holding(Instrument):
    """An owned copy of an instrument plus the quantity held.

    After purchase the holding follows its own random walk; it never reads
    the market instrument's price again.
    """

    quantity: int = Field(ge=0)

    @classmethod
    def from_instrument(cls, instrument: Instrument, quantity: int) -> Holding:
        """Copy *instrument*'s identity, price and history into a new holding."""
        return cls(
            id=instrument.id,
            name=instrument.name,
            price=instrument.price,
            risk=instrument.risk,
            price_history=list(instrument.price_history),
            quantity=quantity,
        )

    @property
    def value(self) -> float:
        return self.quantity * self.price

    def snapshot(self) -> HoldingSnapshot:
        return HoldingSnapshot(
            id=self.id,
            name=self.name,
            price=self.price,
            risk=self.risk,
            day=self.day,
            quantity=self.quantity,
            value=self.value,
        )
