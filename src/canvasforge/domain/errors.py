"""Exception hierarchy for the layout and variation engines.

Every error carries a stable ``code`` so the service layer can turn it into
a :class:`~canvasforge.services.result.ServiceError` without string matching.
"""

from __future__ import annotations

from typing import Any


class CanvasforgeError(Exception):
    """Base class for all engine errors."""

    code = "CANVASFORGE_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured context for the error payload."""
        return {}


class TemplateValidationError(CanvasforgeError):
    """A template failed schema validation.

    Attributes:
        issues: One ``{"path": ..., "message": ...}`` entry per failure,
            where ``path`` is dotted (``frames.0.layers.2.width``).
    """

    code = "INVALID_TEMPLATE"

    def __init__(self, issues: list[dict[str, str]]) -> None:
        self.issues = issues
        first = issues[0] if issues else {"path": "", "message": "invalid template"}
        summary = f"{first['path']}: {first['message']}" if first["path"] else first["message"]
        if len(issues) > 1:
            summary += f" (and {len(issues) - 1} more)"
        super().__init__(summary)

    def detail(self) -> dict[str, Any]:
        return {"issues": self.issues}


class LayoutConfigError(CanvasforgeError):
    """A frame names a layout mode the resolver cannot dispatch."""

    code = "UNKNOWN_LAYOUT"

    def __init__(self, mode: str, *, frame: str | None = None) -> None:
        self.mode = mode
        self.frame = frame
        where = f" on frame {frame!r}" if frame else ""
        super().__init__(f"Unknown layout mode {mode!r}{where}")

    def detail(self) -> dict[str, Any]:
        return {"mode": self.mode, "frame": self.frame}


class NoCandidatesError(CanvasforgeError):
    """A subject domain has an empty option list for a required draw."""

    code = "NO_CANDIDATES"

    def __init__(self, field: str, *, domain: str | None = None) -> None:
        self.field = field
        self.domain = domain
        where = f" in domain {domain!r}" if domain else ""
        super().__init__(f"No candidates for {field}{where}")

    def detail(self) -> dict[str, Any]:
        return {"field": self.field, "domain": self.domain}


class UnknownDomainError(CanvasforgeError):
    """A subject domain id is not in the registry."""

    code = "UNKNOWN_DOMAIN"

    def __init__(self, domain_id: str) -> None:
        self.domain_id = domain_id
        super().__init__(f"Unknown subject domain: {domain_id!r}")

    def detail(self) -> dict[str, Any]:
        return {"domain": self.domain_id}
