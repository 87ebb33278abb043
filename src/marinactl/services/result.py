"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and the interactive shell both consume this type.

Text carried in a result is display-safe: undecodable bytes from the data
file are replaced before they reach renderers or JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from marinactl.domain.codec import display_text


def _printable(value: Any) -> Any:
    if isinstance(value, str):
        return display_text(value)
    if isinstance(value, dict):
        return {k: _printable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_printable(v) for v in value]
    return value


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @field_validator("message", "detail", mode="before")
    @classmethod
    def _display_safe(cls, value: Any) -> Any:
        return _printable(value)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"pay"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, paths, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @field_validator("data", "warnings", "meta", mode="before")
    @classmethod
    def _display_safe(cls, value: Any) -> Any:
        return _printable(value)
