"""Data models for the investment simulator.

The market, portfolio and menu layers all import from models.
"""

from models.config import InstrumentConfig, PortfolioConfig, SimulatorConfig
from models.instrument import Holding, HoldingSnapshot, Instrument, InstrumentSnapshot, RiskTier
from models.portfolio import PortfolioSnapshot
from models.trade import TradeResult

__all__ = [
    # config
    "InstrumentConfig",
    "PortfolioConfig",
    "SimulatorConfig",
    # instrument
    "Holding",
    "HoldingSnapshot",
    "Instrument",
    "InstrumentSnapshot",
    "RiskTier",
    # portfolio
    "PortfolioSnapshot",
    # trade
    "TradeResult",
]
