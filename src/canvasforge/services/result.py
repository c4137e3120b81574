"""ServiceResult and ServiceError — the contract between the engines and callers.

INVARIANT: All service-layer methods return ServiceResult. Engine errors
(:class:`~canvasforge.domain.errors.CanvasforgeError`) become
``ok=False`` results; anything else propagates.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from canvasforge.domain.errors import CanvasforgeError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: CanvasforgeError) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=exc.detail())


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"assemble_document"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
