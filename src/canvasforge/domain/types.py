"""Layout, layer and document enums.

These enums define the four layout modes, the known layer types, and the
policies applied when a template carries something the engine does not know.
"""

from __future__ import annotations

from enum import StrEnum


class LayoutMode(StrEnum):
    """How a frame positions its layers."""

    FREE = "free"
    COLUMN_STACK = "column-stack"
    ROW_STACK = "row-stack"
    GRID = "grid"


# Older template payloads name the stacks after their flexbox direction.
LAYOUT_ALIASES: dict[str, LayoutMode] = {
    "flex-column": LayoutMode.COLUMN_STACK,
    "flex-row": LayoutMode.ROW_STACK,
}


class LayerType(StrEnum):
    """Layer types the document assembler knows how to convert."""

    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"
    GROUP = "group"


class LayerKind(StrEnum):
    """``kind`` of a rendered DocLayer."""

    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"
    GROUP = "group"
    UNKNOWN = "unknown"


class BlendMode(StrEnum):
    NORMAL = "normal"


class FillType(StrEnum):
    SOLID = "solid"


class DocumentType(StrEnum):
    DESIGN = "design"


class UnknownLayoutMode(StrEnum):
    """Policy for a frame whose layout mode is not recognised."""

    ERROR = "error"
    FREE = "free"


class UnknownLayerPolicy(StrEnum):
    """Policy for a layer whose type is not recognised."""

    PASSTHROUGH = "passthrough"
    WARN = "warn"
    ERROR = "error"
