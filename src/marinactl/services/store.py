"""StoreService — persisting the registry back to its data file."""

from __future__ import annotations

from marinactl.domain.errors import SaveError
from marinactl.services.base import BaseService
from marinactl.services.result import ServiceResult


class StoreService(BaseService):
    """Saves the registry."""

    def save(self) -> ServiceResult:
        """Overwrite the data file with the current registry."""
        op = "save"
        try:
            self._store.save()
        except SaveError as exc:
            return self._fail(op, exc, {"path": str(self._store.path)})
        return self._ok(op, {"path": str(self._store.path), "count": len(self._registry)})
