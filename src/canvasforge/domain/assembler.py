"""Document assembler — validated Template to render-ready Document.

Pipeline per frame: RESOLVE LAYOUT → BUILD DOCLAYERS → BUILD PAGE.
No network or storage access; identity and timestamps are the only values
not derived from the input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any

import structlog

from canvasforge.domain.document import DocLayer, Document, Fill, Page, Rect, Transform
from canvasforge.domain.errors import TemplateValidationError
from canvasforge.domain.ids import generate_id
from canvasforge.domain.layout import resolve_frame_layout
from canvasforge.domain.template import Frame, Layer, Template
from canvasforge.domain.types import LayerKind, LayerType, UnknownLayerPolicy, UnknownLayoutMode

logger = structlog.get_logger(__name__)

PayloadBuilder = Callable[[Layer, Rect], dict[str, Any]]


def _text_payload(layer: Layer, rect: Rect) -> dict[str, Any]:
    return {
        "text": layer.content,
        "fontFamily": layer.font_family,
        "fontSize": layer.font_size,
        "fontWeight": layer.font_weight,
        "fontStyle": layer.font_style,
        "textAlign": layer.text_align,
        "color": layer.color,
        "lineHeight": layer.line_height,
        "letterSpacing": layer.letter_spacing,
        "width": rect.width,
        "height": rect.height,
    }


def _image_payload(layer: Layer, rect: Rect) -> dict[str, Any]:
    return {
        "src": layer.src,
        "fit": layer.fit,
        "filters": layer.filters,
        "borderRadius": layer.border_radius,
        "width": rect.width,
        "height": rect.height,
    }


def _shape_payload(layer: Layer, rect: Rect) -> dict[str, Any]:
    return {
        "shape": layer.shape,
        "fill": layer.fill,
        "stroke": layer.stroke,
        "strokeWidth": layer.stroke_width,
        "borderRadius": layer.border_radius,
        "width": rect.width,
        "height": rect.height,
    }


def _group_payload(layer: Layer, rect: Rect) -> dict[str, Any]:
    return {}


_PAYLOAD_BUILDERS: dict[LayerType, tuple[LayerKind, PayloadBuilder]] = {
    LayerType.TEXT: (LayerKind.TEXT, _text_payload),
    LayerType.IMAGE: (LayerKind.IMAGE, _image_payload),
    LayerType.SHAPE: (LayerKind.SHAPE, _shape_payload),
    LayerType.GROUP: (LayerKind.GROUP, _group_payload),
}


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def build_doc_layer(
    layer: Layer,
    rect: Rect,
    sort_order: int,
    *,
    path: str = "",
    on_unknown_layer: UnknownLayerPolicy = UnknownLayerPolicy.WARN,
) -> DocLayer:
    """Convert one layer and its resolved rect into a DocLayer.

    Raises:
        TemplateValidationError: unknown layer type under the ``error`` policy.
    """
    transform = Transform(x=rect.x, y=rect.y, scale=1, rotate=layer.rotation)
    base: dict[str, Any] = {
        "id": layer.id,
        "transform": transform,
        "opacity": layer.opacity,
        "visible": layer.visible,
        "locked": layer.locked,
        "sort_order": sort_order,
    }

    known = layer.layer_type
    if known is None:
        if on_unknown_layer == UnknownLayerPolicy.ERROR:
            issue_path = f"{path}.type" if path else "type"
            raise TemplateValidationError(
                [{"path": issue_path, "message": f"unknown layer type {layer.type!r}"}]
            )
        if on_unknown_layer == UnknownLayerPolicy.WARN:
            logger.warning(
                "layout.unknown_layer", layer_id=layer.id, layer_type=layer.type, path=path
            )
        return DocLayer(kind=LayerKind.UNKNOWN, **base)

    kind, builder = _PAYLOAD_BUILDERS[known]
    return DocLayer(kind=kind, payload=builder(layer, rect), **base)


def frame_to_page(
    frame: Frame,
    document_id: str,
    sort_order: int = 0,
    *,
    path: str = "",
    unknown_mode: UnknownLayoutMode = UnknownLayoutMode.ERROR,
    on_unknown_layer: UnknownLayerPolicy = UnknownLayerPolicy.WARN,
) -> Page:
    """Resolve *frame* and build its Page; layers keep declaration order."""
    rects = resolve_frame_layout(frame, unknown_mode=unknown_mode)
    layers = [
        build_doc_layer(
            layer,
            rects[layer.id],
            index,
            path=f"{path}.layers.{index}" if path else f"layers.{index}",
            on_unknown_layer=on_unknown_layer,
        )
        for index, layer in enumerate(frame.layers)
    ]
    return Page(
        id=frame.id or generate_id(),
        document_id=document_id,
        name=frame.name,
        width=frame.width,
        height=frame.height,
        background=Fill(color=frame.background),
        layers=layers,
        sort_order=sort_order,
    )


def template_to_document(
    template: Template,
    *,
    unknown_mode: UnknownLayoutMode = UnknownLayoutMode.ERROR,
    on_unknown_layer: UnknownLayerPolicy = UnknownLayerPolicy.WARN,
) -> Document:
    """Assemble a render Document from a validated Template.

    One Page per Frame, in frame order. The document id is the template id
    when present, otherwise freshly generated, and every page points at it.
    """
    document_id = template.id or generate_id()
    pages = [
        frame_to_page(
            frame,
            document_id,
            index,
            path=f"frames.{index}",
            unknown_mode=unknown_mode,
            on_unknown_layer=on_unknown_layer,
        )
        for index, frame in enumerate(template.frames)
    ]
    timestamp = _now_iso()
    logger.debug(
        "layout.document_assembled",
        document_id=document_id,
        pages=len(pages),
        layers=sum(len(p.layers) for p in pages),
    )
    return Document(
        id=document_id,
        title=template.name,
        pages=pages,
        created_at=timestamp,
        updated_at=timestamp,
    )


def _iter_image_sources(layers: Iterable[Layer]) -> Iterable[str]:
    for layer in layers:
        if layer.layer_type == LayerType.IMAGE and layer.src:
            yield layer.src
        elif layer.layer_type == LayerType.GROUP:
            yield from _iter_image_sources(layer.layers)


def extract_template_assets(template: Template) -> list[str]:
    """Every image source in the template, in paint order, for preloading."""
    assets: list[str] = []
    for frame in template.frames:
        assets.extend(_iter_image_sources(frame.layers))
    return assets
