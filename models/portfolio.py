"""Portfolio state models."""

from pydantic import BaseModel

from models.instrument import HoldingSnapshot


class PortfolioSnapshot(BaseModel):
    """Cash balance and holdings (in purchase order) at one point in time."""

    balance: float
    holdings: list[HoldingSnapshot] = []

    @property
    def holdings_value(self) -> float:
        """Market value of all holdings at their own tracked prices."""
        return sum(h.value for h in self.holdings)

    @property
    def total_value(self) -> float:
        return self.balance + self.holdings_value

    def get(self, name: str) -> HoldingSnapshot | None:
        for holding in self.holdings:
            if holding.name == name:
                return holding
        return None
