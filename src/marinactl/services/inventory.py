"""InventoryService — read-only views of the registry."""

from __future__ import annotations

from marinactl.domain.errors import NotFound
from marinactl.services.base import BaseService
from marinactl.services.result import ServiceResult


class InventoryService(BaseService):
    """Lists and looks up records."""

    def list_records(self) -> ServiceResult:
        """All records in name order, with the total amount owed."""
        records = self._registry.list()
        items = [record.to_dict() for record in records]
        return self._ok(
            "inventory",
            {
                "items": items,
                "count": len(items),
                "total_owed": sum(record.balance for record in records),
            },
        )

    def find(self, name: str) -> ServiceResult:
        """Look up one record by case-insensitive name."""
        record = self._registry.find(name)
        if record is None:
            return self._fail("find", NotFound(name))
        return self._ok("find", record.to_dict())
