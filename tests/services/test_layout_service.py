"""Tests for LayoutService."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from canvasforge.config.settings import CanvasforgeSettings
from canvasforge.domain.template import parse_template
from canvasforge.services.layout import LayoutService
from canvasforge.services.telemetry import disable_telemetry, enable_telemetry


def _with_layers(template: dict[str, Any], *layers: dict[str, Any]) -> dict[str, Any]:
    template["frames"][0]["layers"].extend(layers)
    return template


class TestAssemble:
    def test_success(
        self, layout_service: LayoutService, one_text_template: dict[str, Any]
    ) -> None:
        result = layout_service.assemble(one_text_template)
        assert result.ok
        assert result.op == "assemble_document"
        document = result.data["document"]
        assert document["id"] == "tpl-1"
        assert document["pages"][0]["layers"][0]["payload"]["text"] == "Grand opening"
        assert result.data["assets"] == []
        assert result.meta == {"pages": 1, "layers": 1}
        assert result.warnings == []

    def test_accepts_validated_template(
        self, layout_service: LayoutService, one_text_template: dict[str, Any]
    ) -> None:
        result = layout_service.assemble(parse_template(one_text_template))
        assert result.ok

    def test_assets_listed(
        self, layout_service: LayoutService, one_text_template: dict[str, Any]
    ) -> None:
        image = {"id": "photo", "type": "image", "width": 10, "height": 10, "src": "hero.jpg"}
        result = layout_service.assemble(_with_layers(one_text_template, image))
        assert result.data["assets"] == ["hero.jpg"]

    def test_invalid_template(self, layout_service: LayoutService) -> None:
        result = layout_service.assemble({"name": "t", "frames": []})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_TEMPLATE"
        assert result.error.detail["issues"][0]["path"] == "frames"

    def test_unknown_layout(
        self, layout_service: LayoutService, one_text_template: dict[str, Any]
    ) -> None:
        one_text_template["frames"][0]["layout"] = "masonry"
        result = layout_service.assemble(one_text_template)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_LAYOUT"
        assert result.error.detail == {"mode": "masonry", "frame": "Cover"}

    def test_unknown_layout_free_when_configured(
        self, tmp_path: Path, one_text_template: dict[str, Any]
    ) -> None:
        settings = CanvasforgeSettings.load(
            search_from=tmp_path, layout={"unknown_mode": "free"}
        )
        one_text_template["frames"][0]["layout"] = "masonry"
        assert LayoutService(settings).assemble(one_text_template).ok

    def test_unknown_layer_warns(
        self, layout_service: LayoutService, one_text_template: dict[str, Any]
    ) -> None:
        video = {"id": "clip", "type": "video", "width": 10, "height": 10}
        result = layout_service.assemble(_with_layers(one_text_template, video))
        assert result.ok
        assert len(result.warnings) == 1
        assert "clip" in result.warnings[0]
        assert result.data["document"]["pages"][0]["layers"][1]["kind"] == "unknown"

    def test_unknown_layer_error_policy(
        self, tmp_path: Path, one_text_template: dict[str, Any]
    ) -> None:
        settings = CanvasforgeSettings.load(
            search_from=tmp_path, layout={"unknown_layer": "error"}
        )
        video = {"id": "clip", "type": "video", "width": 10, "height": 10}
        result = LayoutService(settings).assemble(_with_layers(one_text_template, video))
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["issues"][0]["path"] == "frames.0.layers.1.type"

    def test_telemetry_spans(
        self, layout_service: LayoutService, one_text_template: dict[str, Any]
    ) -> None:
        enable_telemetry()
        try:
            result = layout_service.assemble(one_text_template)
        finally:
            disable_telemetry()
        assert result.meta is not None
        children = result.meta["telemetry"]["children"]
        assert [child["name"] for child in children] == ["validate", "assemble"]
        assert children[1]["annotations"] == {"pages": 1}
        assert result.meta["pages"] == 1


class TestResolve:
    def test_rects_keyed_by_layer(self, layout_service: LayoutService) -> None:
        frame = {
            "name": "Stack",
            "width": 200,
            "height": 200,
            "layout": "column-stack",
            "gap": 10,
            "layers": [
                {"id": "a", "type": "shape", "width": 100, "height": 40},
                {"id": "b", "type": "shape", "width": 100, "height": 40},
            ],
        }
        result = layout_service.resolve(frame)
        assert result.ok
        assert result.op == "resolve_layout"
        assert result.data["frame"] == "Stack"
        assert result.data["rects"]["a"] == {"x": 50, "y": 0, "width": 100, "height": 40}
        assert result.data["rects"]["b"]["y"] == 50

    def test_invalid_frame(self, layout_service: LayoutService) -> None:
        result = layout_service.resolve({"name": "f", "width": 0, "height": 10})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_TEMPLATE"
