"""
Tests for the simulator data models.

Tests verify:
  1. Instrument history seeding and snapshots
  2. Holding copies are independent of the market instrument
  3. PortfolioSnapshot derived totals
  4. SimulatorConfig defaults, catalog validation and YAML loading
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from models.config import DEFAULT_INSTRUMENTS, SimulatorConfig
from models.instrument import Holding, Instrument, RiskTier
from models.portfolio import PortfolioSnapshot
from models.trade import TradeResult


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def apple() -> Instrument:
    return Instrument(id=1, name="Apple", price=211.0, risk=RiskTier.MEDIUM)


def _write_yaml(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "sim.yaml"
    path.write_text(text, encoding="utf-8")
    return path


# =============================================================================
# 1. INSTRUMENT
# =============================================================================


class TestInstrument:
    def test_history_starts_with_initial_price(self, apple: Instrument):
        assert apple.price_history == [211.0]
        assert apple.day == 1

    def test_risk_parsed_from_string(self):
        inst = Instrument(id=3, name="Amazon", price=205.0, risk="High")
        assert inst.risk is RiskTier.HIGH

    def test_unknown_risk_rejected_at_construction(self):
        with pytest.raises(ValidationError):
            Instrument(id=1, name="X", price=10.0, risk="Extreme")

    def test_non_positive_price_rejected(self):
        with pytest.raises(ValidationError):
            Instrument(id=1, name="X", price=0.0, risk="Low")

    def test_snapshot(self, apple: Instrument):
        apple.price_history.append(215.0)
        apple.price = 215.0
        snap = apple.snapshot()
        assert snap.id == 1
        assert snap.name == "Apple"
        assert snap.price == 215.0
        assert snap.risk is RiskTier.MEDIUM
        assert snap.day == 2

    def test_str(self, apple: Instrument):
        assert str(apple) == "Apple ($211.00, Medium)"


# =============================================================================
# 2. HOLDING
# =============================================================================


class TestHolding:
    def test_from_instrument_copies_fields(self, apple: Instrument):
        apple.price_history.extend([220.0, 211.0])
        holding = Holding.from_instrument(apple, 5)
        assert holding.name == "Apple"
        assert holding.id == 1
        assert holding.price == 211.0
        assert holding.risk is RiskTier.MEDIUM
        assert holding.quantity == 5
        assert holding.price_history == [211.0, 220.0, 211.0]

    def test_history_is_not_shared(self, apple: Instrument):
        holding = Holding.from_instrument(apple, 1)
        holding.price_history.append(300.0)
        assert apple.price_history == [211.0]

    def test_value_and_snapshot(self, apple: Instrument):
        holding = Holding.from_instrument(apple, 5)
        assert holding.value == 1055.0
        snap = holding.snapshot()
        assert snap.quantity == 5
        assert snap.value == 1055.0
        assert snap.day == 1


# =============================================================================
# 3. PORTFOLIO SNAPSHOT / TRADE RESULT
# =============================================================================


class TestPortfolioSnapshot:
    def test_empty(self):
        snap = PortfolioSnapshot(balance=3000.0)
        assert snap.holdings == []
        assert snap.holdings_value == 0
        assert snap.total_value == 3000.0
        assert snap.get("Apple") is None

    def test_totals(self, apple: Instrument):
        tesla = Instrument(id=6, name="Tesla", price=342.0, risk="High")
        snap = PortfolioSnapshot(
            balance=1000.0,
            holdings=[
                Holding.from_instrument(apple, 2).snapshot(),
                Holding.from_instrument(tesla, 1).snapshot(),
            ],
        )
        assert snap.holdings_value == pytest.approx(764.0)
        assert snap.total_value == pytest.approx(1764.0)
        assert snap.get("Tesla").quantity == 1


class TestTradeResult:
    def test_accepted_flag(self):
        ok = TradeResult(status="accepted", side="buy", balance=1.0)
        bad = TradeResult(status="rejected", side="sell", reason="not_found", balance=1.0)
        assert ok.accepted
        assert not bad.accepted
        assert (ok.side, bad.side) == ("buy", "sell")

    def test_unknown_side_rejected(self):
        with pytest.raises(ValidationError):
            TradeResult(status="accepted", side="hold", balance=0.0)

    def test_unknown_reason_rejected(self):
        with pytest.raises(ValidationError):
            TradeResult(status="rejected", side="buy", reason="nope", balance=0.0)


# =============================================================================
# 4. CONFIG
# =============================================================================


class TestSimulatorConfig:
    def test_defaults(self):
        config = SimulatorConfig()
        assert config.portfolio.initial_balance == 3000.0
        assert config.seed is None
        assert [i.id for i in config.instruments] == list(range(1, 10))
        assert [i.name for i in config.instruments] == [row["name"] for row in DEFAULT_INSTRUMENTS]
        assert config.instruments[0].price == 211.0
        assert config.instruments[8].risk is RiskTier.HIGH

    def test_ids_must_be_sequential(self):
        with pytest.raises(ValidationError, match="1..2"):
            SimulatorConfig(
                instruments=[
                    {"id": 2, "name": "A", "price": 1.0, "risk": "Low"},
                    {"id": 1, "name": "B", "price": 1.0, "risk": "Low"},
                ]
            )

    def test_names_must_be_unique(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            SimulatorConfig(
                instruments=[
                    {"id": 1, "name": "A", "price": 1.0, "risk": "Low"},
                    {"id": 2, "name": "A", "price": 2.0, "risk": "High"},
                ]
            )

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValidationError):
            SimulatorConfig(instruments=[])

    def test_negative_balance_rejected(self):
        with pytest.raises(ValidationError):
            SimulatorConfig(portfolio={"initial_balance": -1.0})

    def test_from_yaml(self, tmp_path: Path):
        path = _write_yaml(
            tmp_path,
            "seed: 7\n"
            "portfolio:\n"
            "  initial_balance: 500.0\n"
            "instruments:\n"
            "  - {id: 1, name: Alpha, price: 10.0, risk: Low}\n"
            "  - {id: 2, name: Beta, price: 20.0, risk: High}\n",
        )
        config = SimulatorConfig.from_yaml(path)
        assert config.seed == 7
        assert config.portfolio.initial_balance == 500.0
        assert [i.name for i in config.instruments] == ["Alpha", "Beta"]

    def test_from_yaml_empty_file_uses_defaults(self, tmp_path: Path):
        config = SimulatorConfig.from_yaml(_write_yaml(tmp_path, ""))
        assert config == SimulatorConfig()

    def test_from_yaml_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            SimulatorConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_not_a_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError, match="mapping"):
            SimulatorConfig.from_yaml(_write_yaml(tmp_path, "- a\n- b\n"))

    def test_from_yaml_malformed(self, tmp_path: Path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            SimulatorConfig.from_yaml(_write_yaml(tmp_path, "instruments: [\n"))

    def test_shipped_default_config_matches_builtin(self):
        path = Path(__file__).resolve().parents[2] / "config" / "default.yaml"
        assert SimulatorConfig.from_yaml(path) == SimulatorConfig()
