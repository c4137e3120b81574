"""BaseService — shared foundation for the layout and variation services.

Every service receives :class:`CanvasforgeSettings` at construction time
and reads its policies from there. Services hold no mutable state, so one
instance can serve any number of concurrent callers.
"""

from __future__ import annotations

import structlog

from canvasforge.config.settings import CanvasforgeSettings
from canvasforge.domain.errors import CanvasforgeError
from canvasforge.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Subclasses call domain functions and convert engine errors with
    :meth:`_failure`::

        class LayoutService(BaseService):
            def assemble(self, raw: dict) -> ServiceResult:
                try:
                    ...
                except CanvasforgeError as exc:
                    return self._failure("assemble_document", exc)
    """

    def __init__(self, settings: CanvasforgeSettings | None = None) -> None:
        self._settings = settings or CanvasforgeSettings.load()

    @property
    def settings(self) -> CanvasforgeSettings:
        return self._settings

    def _failure(
        self,
        op: str,
        exc: CanvasforgeError,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Log *exc* and wrap it in an ``ok=False`` result."""
        logger.warning("service.failed", op=op, code=exc.code, error=str(exc))
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError.from_exception(exc),
        )
