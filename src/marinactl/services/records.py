"""RecordService — adding and removing boats.

New records arrive as CSV-shaped lines, the same layout as the data
file, and are decoded with the same permissive rules.
"""

from __future__ import annotations

import logging

from marinactl.domain.codec import decode_record
from marinactl.domain.errors import CapacityExceeded, NotFound
from marinactl.services.base import BaseService
from marinactl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class RecordService(BaseService):
    """Inserts and removes records."""

    def add(self, line: str) -> ServiceResult:
        """Decode *line* and insert the resulting record."""
        op = "add"
        try:
            record = decode_record(line)
        except ValueError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                warnings=self._warnings(),
                error=ServiceError(code="INVALID_RECORD", message=str(exc)),
            )

        try:
            self._registry.insert(record)
        except CapacityExceeded as exc:
            return self._fail(op, exc, {"capacity": exc.capacity})

        logger.debug("Added record %r", record.name)
        return self._ok(op, record.to_dict())

    def remove(self, name: str) -> ServiceResult:
        """Remove the first record matching *name*."""
        op = "remove"
        try:
            record = self._registry.remove(name)
        except NotFound as exc:
            return self._fail(op, exc, {"name": name})

        logger.debug("Removed record %r", record.name)
        return self._ok(op, record.to_dict())
