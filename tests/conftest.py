"""Shared pytest fixtures and test helpers for canvasforge tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from canvasforge.config.settings import CanvasforgeSettings
from canvasforge.domain.template import Frame
from canvasforge.services.layout import LayoutService
from canvasforge.services.variation import VariationService


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CanvasforgeSettings:
    """Default settings, isolated from any canvasforge.toml or env overrides."""
    monkeypatch.delenv("CANVASFORGE_CONFIG", raising=False)
    return CanvasforgeSettings.load(search_from=tmp_path)


@pytest.fixture
def layout_service(settings: CanvasforgeSettings) -> LayoutService:
    return LayoutService(settings)


@pytest.fixture
def variation_service(settings: CanvasforgeSettings) -> VariationService:
    return VariationService(settings)


@pytest.fixture
def one_text_template() -> dict[str, Any]:
    """One frame holding one text layer, in wire (camelCase) form."""
    return {
        "id": "tpl-1",
        "name": "Launch poster",
        "frames": [
            {
                "id": "frame-1",
                "name": "Cover",
                "width": 800,
                "height": 600,
                "padding": 20,
                "gap": 10,
                "layout": "free",
                "background": "#101010",
                "layers": [
                    {
                        "id": "headline",
                        "type": "text",
                        "x": 40,
                        "y": 50,
                        "width": 400,
                        "height": 80,
                        "content": "Grand opening",
                        "fontFamily": "Playfair Display",
                        "fontSize": 48,
                        "fontWeight": 700,
                        "color": "#ffffff",
                    }
                ],
            }
        ],
    }


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_frame(
    layout: str,
    sizes: list[tuple[float, float]],
    *,
    width: float = 800,
    height: float = 600,
    padding: float = 0,
    gap: float = 0,
    positions: list[tuple[float, float]] | None = None,
) -> Frame:
    """Build a validated frame of shape layers with the given sizes."""
    layers = []
    for index, (w, h) in enumerate(sizes):
        x, y = positions[index] if positions else (0, 0)
        layers.append(
            {"id": f"l{index}", "type": "shape", "x": x, "y": y, "width": w, "height": h}
        )
    return Frame.model_validate(
        {
            "name": f"{layout}-frame",
            "width": width,
            "height": height,
            "padding": padding,
            "gap": gap,
            "layout": layout,
            "layers": layers,
        }
    )
