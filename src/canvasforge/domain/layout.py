"""Layout resolver — one Frame in, one rectangle per layer out.

Four modes, dispatched through a closed table of functions that share the
signature ``Frame -> dict[layer_id, Rect]``:

- ``free``: each layer keeps its own position, clamped into the frame.
- ``column-stack``: layers stacked top to bottom, centered horizontally.
- ``row-stack``: layers stacked left to right, centered vertically.
- ``grid``: two columns, filled row by row.

INVARIANT: every returned rect lies inside the frame and is at least one
unit wide and tall (or the whole frame, when the frame itself is smaller).
Stacked content that overflows is pinned to the far edge.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from canvasforge.domain.document import Rect
from canvasforge.domain.errors import LayoutConfigError
from canvasforge.domain.template import Frame
from canvasforge.domain.types import LayoutMode, UnknownLayoutMode

logger = structlog.get_logger(__name__)

GRID_COLUMNS = 2

LayoutFn = Callable[[Frame], dict[str, Rect]]


def _clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into [low, high]; *low* wins when the range is empty."""
    return max(low, min(value, high))


def _fit(x: float, y: float, width: float, height: float, frame: Frame) -> Rect:
    """Pull a placed rectangle back inside *frame*."""
    w = _clamp(width, min(1.0, frame.width), frame.width)
    h = _clamp(height, min(1.0, frame.height), frame.height)
    return Rect(
        x=_clamp(x, 0, frame.width - w),
        y=_clamp(y, 0, frame.height - h),
        width=w,
        height=h,
    )


# ---------------------------------------------------------------------------
# Mode resolvers
# ---------------------------------------------------------------------------


def _resolve_free(frame: Frame) -> dict[str, Rect]:
    return {
        layer.id: _fit(layer.x, layer.y, layer.width, layer.height, frame)
        for layer in frame.layers
    }


def _resolve_column_stack(frame: Frame) -> dict[str, Rect]:
    inner_width = frame.width - 2 * frame.padding
    cursor = frame.padding
    rects: dict[str, Rect] = {}
    for layer in frame.layers:
        width = _clamp(layer.width, 1, inner_width)
        height = max(1.0, layer.height)
        x = frame.padding + (inner_width - width) / 2
        rects[layer.id] = _fit(x, cursor, width, height, frame)
        cursor += height + frame.gap
    return rects


def _resolve_row_stack(frame: Frame) -> dict[str, Rect]:
    inner_height = frame.height - 2 * frame.padding
    cursor = frame.padding
    rects: dict[str, Rect] = {}
    for layer in frame.layers:
        width = max(1.0, layer.width)
        height = _clamp(layer.height, 1, inner_height)
        y = frame.padding + (inner_height - height) / 2
        rects[layer.id] = _fit(cursor, y, width, height, frame)
        cursor += width + frame.gap
    return rects


def _resolve_grid(frame: Frame) -> dict[str, Rect]:
    cell_width = (frame.width - 2 * frame.padding - frame.gap * (GRID_COLUMNS - 1)) / GRID_COLUMNS

    # Each row is as tall as its tallest layer.
    row_heights: list[float] = []
    for index, layer in enumerate(frame.layers):
        row = index // GRID_COLUMNS
        height = max(1.0, layer.height)
        if row == len(row_heights):
            row_heights.append(height)
        else:
            row_heights[row] = max(row_heights[row], height)

    row_tops: list[float] = []
    top = frame.padding
    for height in row_heights:
        row_tops.append(top)
        top += height + frame.gap

    rects: dict[str, Rect] = {}
    for index, layer in enumerate(frame.layers):
        col = index % GRID_COLUMNS
        row = index // GRID_COLUMNS
        x = frame.padding + col * (cell_width + frame.gap)
        width = _clamp(layer.width, 1, cell_width)
        height = max(1.0, layer.height)
        rects[layer.id] = _fit(x, row_tops[row], width, height, frame)
    return rects


LAYOUT_RESOLVERS: dict[LayoutMode, LayoutFn] = {
    LayoutMode.FREE: _resolve_free,
    LayoutMode.COLUMN_STACK: _resolve_column_stack,
    LayoutMode.ROW_STACK: _resolve_row_stack,
    LayoutMode.GRID: _resolve_grid,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_frame_layout(
    frame: Frame,
    *,
    unknown_mode: UnknownLayoutMode = UnknownLayoutMode.ERROR,
) -> dict[str, Rect]:
    """Compute the rectangle of every layer in *frame*, keyed by layer id.

    Args:
        frame: A validated frame.
        unknown_mode: What to do when ``frame.layout`` is not one of the four
            supported modes. ``error`` raises; ``free`` logs a warning and
            lays the frame out in free mode.

    Raises:
        LayoutConfigError: unknown layout mode under the ``error`` policy.
    """
    resolver = LAYOUT_RESOLVERS.get(frame.layout)  # type: ignore[call-overload]
    if resolver is None:
        if unknown_mode != UnknownLayoutMode.FREE:
            raise LayoutConfigError(str(frame.layout), frame=frame.name)
        logger.warning(
            "layout.unknown_mode",
            mode=str(frame.layout),
            frame=frame.name,
            fallback=LayoutMode.FREE.value,
        )
        resolver = _resolve_free
    return resolver(frame)
