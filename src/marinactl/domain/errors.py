"""Domain error taxonomy.

Each error carries a stable ``code`` that the service layer copies into
``ServiceError.code``. All of them are recoverable at the command
boundary.
"""

from __future__ import annotations


class MarinaError(Exception):
    """Base class for registry errors."""

    code = "MARINA_ERROR"


class CapacityExceeded(MarinaError):
    """The registry already holds its maximum number of records."""

    code = "CAPACITY_EXCEEDED"

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Registry is full ({capacity} records)")
        self.capacity = capacity


class NotFound(MarinaError):
    """No record matches the requested name."""

    code = "NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"No boat with that name: {name}")
        self.name = name


class PaymentExceedsBalance(MarinaError):
    """A payment is larger than the amount owed."""

    code = "PAYMENT_EXCEEDS_BALANCE"

    def __init__(self, name: str, amount: float, balance: float) -> None:
        super().__init__(
            f"Payment exceeds amount owed, amount owed for {name}: ${balance:.2f}"
        )
        self.name = name
        self.amount = amount
        self.balance = balance


class LoadError(MarinaError):
    """The data file could not be opened for reading."""

    code = "LOAD_FAILED"


class SaveError(MarinaError):
    """The data file could not be opened for writing."""

    code = "SAVE_FAILED"
