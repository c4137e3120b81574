"""LayoutService — template validation, layout resolution and assembly.

Pipeline: VALIDATE → RESOLVE → ASSEMBLE → RESPOND
"""

from __future__ import annotations

from typing import Any

from canvasforge.domain.assembler import extract_template_assets, template_to_document
from canvasforge.domain.errors import CanvasforgeError
from canvasforge.domain.layout import resolve_frame_layout
from canvasforge.domain.template import Frame, Template, parse_frame, parse_template
from canvasforge.domain.types import UnknownLayerPolicy
from canvasforge.services.base import BaseService
from canvasforge.services.result import ServiceResult
from canvasforge.services.telemetry import trace_span, traced


def _unknown_layer_warnings(template: Template) -> list[str]:
    warnings: list[str] = []
    for frame in template.frames:
        for layer in frame.layers:
            if layer.layer_type is None:
                warnings.append(
                    f"Layer {layer.id} in frame {frame.name!r} has unknown type "
                    f"{layer.type!r}; rendered without payload"
                )
    return warnings


def _rect_payload(frame: Frame, rects: dict[str, Any]) -> dict[str, dict[str, float]]:
    return {layer.id: rects[layer.id].model_dump() for layer in frame.layers}


class LayoutService(BaseService):
    """Turns raw template payloads into render Documents."""

    @traced
    def assemble(self, raw: dict[str, Any] | Template) -> ServiceResult:
        """Validate *raw* and assemble it into a Document.

        ``data["document"]`` is the camelCase wire form; ``data["assets"]``
        lists image sources for preloading.
        """
        op = "assemble_document"
        policy = self._settings.layout
        try:
            with trace_span("validate"):
                template = raw if isinstance(raw, Template) else parse_template(raw)
            with trace_span("assemble") as span:
                document = template_to_document(
                    template,
                    unknown_mode=policy.unknown_mode,
                    on_unknown_layer=policy.unknown_layer,
                )
                if span:
                    span.annotate("pages", len(document.pages))
        except CanvasforgeError as exc:
            return self._failure(op, exc)

        warnings: list[str] = []
        if policy.unknown_layer == UnknownLayerPolicy.WARN:
            warnings = _unknown_layer_warnings(template)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "document": document.to_wire(),
                "assets": extract_template_assets(template),
            },
            warnings=warnings,
            meta={
                "pages": len(document.pages),
                "layers": sum(len(page.layers) for page in document.pages),
            },
        )

    @traced
    def resolve(self, raw: dict[str, Any] | Frame) -> ServiceResult:
        """Resolve one frame's layout without assembling a document."""
        op = "resolve_layout"
        try:
            frame = raw if isinstance(raw, Frame) else parse_frame(raw)
            rects = resolve_frame_layout(frame, unknown_mode=self._settings.layout.unknown_mode)
        except CanvasforgeError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"frame": frame.name, "rects": _rect_payload(frame, rects)},
        )
