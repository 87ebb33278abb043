"""BaseService — shared foundation for marinactl services.

Every service receives a :class:`RecordStore` at construction time. The
store owns the registry; services translate domain errors into failed
ServiceResults.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from marinactl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from marinactl.domain.errors import MarinaError
    from marinactl.domain.registry import Registry
    from marinactl.infrastructure.store import RecordStore

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class BillingService(BaseService):
            def apply_monthly_fees(self) -> ServiceResult:
                total = apply_monthly_fees(self._registry)
                return self._ok("apply_fees", {"total_charged": total})
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    @property
    def _registry(self) -> Registry:
        return self._store.registry

    def _warnings(self) -> list[str]:
        """Pending store warnings (a failed load is reported once)."""
        warning = self._store.take_load_warning()
        return [warning] if warning else []

    def _ok(self, op: str, data: dict[str, Any] | None = None) -> ServiceResult:
        registry = self._registry
        return ServiceResult(
            ok=True,
            op=op,
            data=data or {},
            warnings=self._warnings(),
            meta={"path": str(self._store.path), "records": len(registry)},
        )

    def _fail(
        self,
        op: str,
        exc: MarinaError,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            warnings=self._warnings(),
            error=ServiceError(code=exc.code, message=str(exc), detail=detail or {}),
        )
