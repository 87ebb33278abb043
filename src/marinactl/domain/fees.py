"""Monthly fee and payment arithmetic.

Rates are per foot of boat length per month. No rounding is applied
beyond natural floating-point precision; the data file stores balances
to two decimals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marinactl.domain.errors import NotFound, PaymentExceedsBalance
from marinactl.domain.types import Category

if TYPE_CHECKING:
    from marinactl.domain.records import Record
    from marinactl.domain.registry import Registry

MONTHLY_RATES: dict[Category, float] = {
    Category.SLIP: 12.50,
    Category.LAND: 14.00,
    Category.TRAILER: 25.00,
    Category.STORAGE: 11.20,
}


def monthly_rate(category: Category) -> float:
    """Per-foot monthly rate for *category*."""
    return MONTHLY_RATES[category]


def monthly_charge(record: Record) -> float:
    """One month's charge for *record*."""
    return monthly_rate(record.category) * record.length


def apply_monthly_fees(registry: Registry) -> float:
    """Charge every record one month of fees and return the total charged.

    Not idempotent: each call is one billing cycle.
    """
    total = 0.0
    for record in registry:
        charge = monthly_charge(record)
        record.balance += charge
        total += charge
    return total


def accept_payment(registry: Registry, name: str, amount: float) -> Record:
    """Apply a payment of *amount* to the record named *name*.

    A payment equal to the balance is accepted and leaves it at zero.

    Raises:
        NotFound: No record matches *name*.
        PaymentExceedsBalance: *amount* is greater than the balance owed.
    """
    record = registry.find(name)
    if record is None:
        raise NotFound(name)
    if amount > record.balance:
        raise PaymentExceedsBalance(record.name, amount, record.balance)
    record.balance -= amount
    return record
