"""Order Ledger

Derived financial view of a service order: total from line items, paid
from abonos, and the remaining balance (saldo). Never persisted; always
recomputed from the current items and payments.
"""

from typing import Iterable, Protocol
from pydantic import BaseModel, ConfigDict
from repair_shop.domain.money import UNDEFINED_PRICE_LABEL, format_currency


class PricedLine(Protocol):
    unit_price: int
    quantity: int


class PaidAmount(Protocol):
    amount: int


class OrderLedger(BaseModel):
    """
    Order Ledger - totals for one order

    Domain Rules:
    - total = sum(unit_price * quantity)
    - paid = sum(payment amounts)
    - balance = total - paid (signed, may be negative when overpaid)
    - complete iff total > 0 and paid >= total
    - has_undefined_pricing is informational and never changes arithmetic
    """

    model_config = ConfigDict(frozen=True)

    total: int
    paid: int
    balance: int
    is_complete: bool
    has_undefined_pricing: bool

    @property
    def outstanding(self) -> int:
        """Balance clamped at zero, for screens that cannot show negatives"""
        return max(self.balance, 0)

    def display_total(self) -> str:
        if self.has_undefined_pricing:
            if self.total > 0:
                return f"{format_currency(self.total)}+"
            return UNDEFINED_PRICE_LABEL
        return format_currency(self.total)


def calculate_ledger(
    items: Iterable[PricedLine],
    payments: Iterable[PaidAmount],
) -> OrderLedger:
    total = 0
    has_undefined_pricing = False
    for item in items:
        if item.unit_price == 0:
            has_undefined_pricing = True
        total += item.unit_price * item.quantity

    paid = sum(payment.amount for payment in payments)

    return OrderLedger(
        total=total,
        paid=paid,
        balance=total - paid,
        is_complete=total > 0 and paid >= total,
        has_undefined_pricing=has_undefined_pricing,
    )
