"""Trade execution models: TradeResult."""

from typing import Literal

from pydantic import BaseModel

RejectionReason = Literal[
    "insufficient_balance",
    "not_found",
    "insufficient_quantity",
    "invalid_quantity",
    "invalid_instrument",
]


class TradeResult(BaseModel):
    """Outcome of a single buy or sell.

    Execution is all-or-nothing: a rejected trade leaves the balance and
    every holding untouched. When rejected, ``reason`` names the failed check
    and ``message`` is the text shown to the user.
    """

    status: Literal["accepted", "rejected"]
    side: Literal["buy", "sell"]
    reason: RejectionReason | None = None  # None only when accepted
    name: str | None = None
    quantity: int = 0
    price: float | None = None
    amount: float = 0.0  # Cash moved by the trade; 0.0 when rejected
    balance: float  # Balance after the trade
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"
