"""Simulator configuration models, loaded from YAML.

Every field has a default, so ``SimulatorConfig()`` reproduces the standard
nine-stock market with a 3000.0 starting balance. A YAML file only needs to
override what it changes.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from models.instrument import RiskTier

DEFAULT_INITIAL_BALANCE = 3000.0

DEFAULT_INSTRUMENTS: list[dict] = [
    {"id": 1, "name": "Apple",        "price": 211.0, "risk": "Medium"},
    {"id": 2, "name": "Google",       "price": 165.0, "risk": "Medium"},
    {"id": 3, "name": "Amazon",       "price": 205.0, "risk": "High"},
    {"id": 4, "name": "McDonald's",   "price": 314.0, "risk": "Low"},
    {"id": 5, "name": "UnitedHealth", "price": 60.0,  "risk": "Low"},
    {"id": 6, "name": "Tesla",        "price": 342.0, "risk": "High"},
    {"id": 7, "name": "NVDA",         "price": 134.0, "risk": "High"},
    {"id": 8, "name": "Microsoft",    "price": 453.0, "risk": "Medium"},
    {"id": 9, "name": "META",         "price": 643.0, "risk": "High"},
]


class InstrumentConfig(BaseModel):
    """Starting definition of one market instrument."""

    id: int = Field(ge=1, description="1-based catalog position.")
    name: str = Field(min_length=1, description="Display name; unique within the market.")
    price: float = Field(gt=0, description="Initial price.")
    risk: RiskTier = Field(description="Risk tier: 'Low', 'Medium' or 'High'.")


class PortfolioConfig(BaseModel):
    """Configuration for the user's portfolio."""

    initial_balance: float = Field(
        default=DEFAULT_INITIAL_BALANCE,
        ge=0,
        description="Starting cash balance.",
    )


def _default_instruments() -> list[InstrumentConfig]:
    return [InstrumentConfig(**row) for row in DEFAULT_INSTRUMENTS]


class SimulatorConfig(BaseModel):
    """Top-level configuration for a simulator session."""

    instruments: list[InstrumentConfig] = Field(
        default_factory=_default_instruments,
        min_length=1,
        description="Market catalog, in id order.",
    )
    portfolio: PortfolioConfig = Field(
        default_factory=PortfolioConfig,
        description="Portfolio configuration.",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the price random walk. None seeds from system entropy.",
    )

    @model_validator(mode="after")
    def _check_catalog(self) -> SimulatorConfig:
        ids = [inst.id for inst in self.instruments]
        expected = list(range(1, len(self.instruments) + 1))
        if ids != expected:
            raise ValueError(
                f"Instrument ids must be 1..{len(expected)} in order, got {ids}."
            )
        names = [inst.name for inst in self.instruments]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate instrument name(s): {', '.join(duplicates)}.")
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulatorConfig:
        """Load and validate a ``SimulatorConfig`` from a YAML file.

        Raises ``FileNotFoundError`` if the file does not exist and
        ``ValueError`` if the content is not valid YAML or not a YAML mapping.
        An empty file yields the defaults.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open(encoding="utf-8") as fh:
            try:
                raw = yaml.safe_load(fh)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Expected a YAML mapping in {path}, got {type(raw).__name__}."
            )

        return cls(**raw)
