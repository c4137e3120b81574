"""Tests for template validation."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from canvasforge.domain.errors import TemplateValidationError
from canvasforge.domain.template import parse_frame, parse_template
from canvasforge.domain.types import LayerType, LayoutMode


class TestParseTemplate:
    def test_valid_template(self, one_text_template: dict[str, Any]) -> None:
        template = parse_template(one_text_template)
        assert template.name == "Launch poster"
        frame = template.frames[0]
        assert frame.layout == LayoutMode.FREE
        layer = frame.layers[0]
        assert layer.layer_type == LayerType.TEXT
        assert layer.font_family == "Playfair Display"
        assert layer.font_size == 48

    def test_snake_case_keys_accepted(self) -> None:
        template = parse_template(
            {
                "name": "t",
                "frames": [
                    {
                        "name": "f",
                        "width": 100,
                        "height": 100,
                        "layers": [
                            {
                                "type": "shape",
                                "width": 10,
                                "height": 10,
                                "stroke_width": 2,
                            }
                        ],
                    }
                ],
            }
        )
        assert template.frames[0].layers[0].stroke_width == 2

    def test_missing_layer_id_assigned_once(self) -> None:
        template = parse_template(
            {
                "name": "t",
                "frames": [
                    {
                        "name": "f",
                        "width": 100,
                        "height": 100,
                        "layers": [{"id": None, "type": "shape", "width": 5, "height": 5}],
                    }
                ],
            }
        )
        layer = template.frames[0].layers[0]
        assert layer.id
        assert template.frames[0].layers[0].id == layer.id

    def test_defaults(self) -> None:
        frame = parse_frame({"name": "f", "width": 10, "height": 10})
        assert frame.padding == 0
        assert frame.gap == 0
        assert frame.layout == LayoutMode.FREE
        assert frame.background == "#ffffff"
        assert frame.layers == []

    def test_unknown_layer_type_is_valid(self) -> None:
        frame = parse_frame(
            {
                "name": "f",
                "width": 10,
                "height": 10,
                "layers": [{"type": "video", "width": 5, "height": 5}],
            }
        )
        assert frame.layers[0].layer_type is None

    def test_unknown_layout_survives_validation(self) -> None:
        frame = parse_frame({"name": "f", "width": 10, "height": 10, "layout": "masonry"})
        assert frame.layout == "masonry"
        assert not isinstance(frame.layout, LayoutMode)

    def test_frozen(self, one_text_template: dict[str, Any]) -> None:
        template = parse_template(one_text_template)
        with pytest.raises(ValidationError):
            template.name = "changed"  # type: ignore[misc]


class TestValidationErrors:
    def _issue_paths(self, data: dict[str, Any]) -> list[str]:
        with pytest.raises(TemplateValidationError) as exc_info:
            parse_template(data)
        assert exc_info.value.code == "INVALID_TEMPLATE"
        return [issue["path"] for issue in exc_info.value.issues]

    def test_missing_name(self) -> None:
        paths = self._issue_paths({"frames": [{"name": "f", "width": 1, "height": 1}]})
        assert paths == ["name"]

    def test_empty_frames(self) -> None:
        assert self._issue_paths({"name": "t", "frames": []}) == ["frames"]

    @pytest.mark.parametrize("field", ["width", "height"])
    @pytest.mark.parametrize("value", [0, -10])
    def test_non_positive_frame_dimension(self, field: str, value: int) -> None:
        frame = {"name": "f", "width": 100, "height": 100, field: value}
        paths = self._issue_paths({"name": "t", "frames": [frame]})
        assert paths == [f"frames.0.{field}"]

    def test_negative_layer_width_names_path(self) -> None:
        data = {
            "name": "t",
            "frames": [
                {
                    "name": "f",
                    "width": 100,
                    "height": 100,
                    "layers": [
                        {"type": "shape", "width": 5, "height": 5},
                        {"type": "shape", "width": -1, "height": 5},
                    ],
                }
            ],
        }
        assert self._issue_paths(data) == ["frames.0.layers.1.width"]

    def test_text_layer_requires_content(self) -> None:
        data = {
            "name": "t",
            "frames": [
                {
                    "name": "f",
                    "width": 100,
                    "height": 100,
                    "layers": [{"type": "text", "width": 5, "height": 5}],
                }
            ],
        }
        with pytest.raises(TemplateValidationError) as exc_info:
            parse_template(data)
        issue = exc_info.value.issues[0]
        assert issue["path"] == "frames.0.layers.0"
        assert "content" in issue["message"]

    def test_opacity_out_of_range(self) -> None:
        data = {
            "name": "t",
            "frames": [
                {
                    "name": "f",
                    "width": 100,
                    "height": 100,
                    "layers": [{"type": "shape", "width": 5, "height": 5, "opacity": 1.5}],
                }
            ],
        }
        assert self._issue_paths(data) == ["frames.0.layers.0.opacity"]

    def test_string_frame_dimension_not_coerced(self) -> None:
        frame = {"name": "f", "width": "800", "height": 600}
        assert self._issue_paths({"name": "t", "frames": [frame]}) == ["frames.0.width"]

    def test_wrong_typed_layer_fields_not_coerced(self) -> None:
        layer = {"type": "shape", "width": "100", "height": 5, "visible": "no"}
        data = {
            "name": "t",
            "frames": [{"name": "f", "width": 100, "height": 100, "layers": [layer]}],
        }
        assert sorted(self._issue_paths(data)) == [
            "frames.0.layers.0.visible",
            "frames.0.layers.0.width",
        ]

    def test_bool_is_not_a_number(self) -> None:
        frame = {"name": "f", "width": 100, "height": 100, "gap": True}
        assert self._issue_paths({"name": "t", "frames": [frame]}) == ["frames.0.gap"]

    def test_int_and_float_both_accepted(self) -> None:
        frame = parse_frame({"name": "f", "width": 100, "height": 62.5, "padding": 4})
        assert frame.width == 100.0
        assert frame.height == 62.5

    def test_duplicate_layer_ids(self) -> None:
        layer = {"id": "dup", "type": "shape", "width": 5, "height": 5}
        data = {
            "name": "t",
            "frames": [{"name": "f", "width": 100, "height": 100, "layers": [layer, layer]}],
        }
        with pytest.raises(TemplateValidationError, match="duplicate layer id"):
            parse_template(data)

    def test_multiple_issues_reported(self) -> None:
        paths = self._issue_paths(
            {"name": "t", "frames": [{"name": "f", "width": 0, "height": -1}]}
        )
        assert sorted(paths) == ["frames.0.height", "frames.0.width"]
