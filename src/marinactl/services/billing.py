"""BillingService — monthly charges and payments."""

from __future__ import annotations

import logging

from marinactl.domain.errors import NotFound, PaymentExceedsBalance
from marinactl.domain.fees import accept_payment, apply_monthly_fees
from marinactl.services.base import BaseService
from marinactl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class BillingService(BaseService):
    """Applies the fee engine to the registry."""

    def apply_monthly_fees(self) -> ServiceResult:
        """Charge every record one month of fees."""
        total = apply_monthly_fees(self._registry)
        logger.debug("Applied monthly fees: %.2f across %d records", total, len(self._registry))
        return self._ok(
            "apply_fees",
            {"charged": len(self._registry), "total_charged": total},
        )

    def accept_payment(self, name: str, amount: float) -> ServiceResult:
        """Apply a payment to the record named *name*.

        On ``PAYMENT_EXCEEDS_BALANCE`` the current balance is reported in
        ``error.detail`` and nothing changes.
        """
        op = "pay"
        try:
            record = accept_payment(self._registry, name, amount)
        except NotFound as exc:
            return self._fail(op, exc, {"name": name})
        except PaymentExceedsBalance as exc:
            return self._fail(
                op,
                exc,
                {"name": exc.name, "amount": exc.amount, "balance": exc.balance},
            )

        logger.debug("Accepted payment of %.2f from %r", amount, record.name)
        return self._ok(
            op,
            {"name": record.name, "amount": amount, "balance": record.balance},
        )
