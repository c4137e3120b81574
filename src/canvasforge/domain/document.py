"""Render-ready Document / Page / DocLayer models.

These are the normalized output of the document assembler. Serialize with
``model_dump(by_alias=True)`` to get the camelCase wire format consumed by
the canvas renderer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from canvasforge.domain.types import BlendMode, DocumentType, FillType, LayerKind

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Rect(BaseModel):
    """A resolved, frame-relative rectangle."""

    model_config = _MODEL_CONFIG

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class Transform(BaseModel):
    model_config = _MODEL_CONFIG

    x: float
    y: float
    scale: float = 1
    rotate: float = 0


class Fill(BaseModel):
    model_config = _MODEL_CONFIG

    type: FillType = FillType.SOLID
    color: str


class DocLayer(BaseModel):
    """One positioned layer on a page.

    ``payload`` is kind-specific (text content and typography, image source
    and fit, shape geometry and paint) and always carries the resolved
    ``width``/``height``. Layers of an unknown type have an empty payload.
    """

    model_config = _MODEL_CONFIG

    id: str
    kind: LayerKind
    transform: Transform
    opacity: float = 1
    blend: BlendMode = BlendMode.NORMAL
    visible: bool = True
    locked: bool = False
    sort_order: int
    payload: dict[str, Any] = Field(default_factory=dict)


class Page(BaseModel):
    model_config = _MODEL_CONFIG

    id: str
    document_id: str
    name: str
    width: float
    height: float
    background: Fill
    layers: list[DocLayer] = Field(default_factory=list)
    sort_order: int = 0


class Document(BaseModel):
    model_config = _MODEL_CONFIG

    id: str
    title: str
    type: DocumentType = DocumentType.DESIGN
    pages: list[Page] = Field(default_factory=list)
    created_at: str
    updated_at: str

    def to_wire(self) -> dict[str, Any]:
        """camelCase JSON-compatible dict for the renderer."""
        return self.model_dump(mode="json", by_alias=True)
