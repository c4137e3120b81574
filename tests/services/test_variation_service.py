"""Tests for VariationService."""

from __future__ import annotations

from pathlib import Path

from canvasforge.config.settings import CanvasforgeSettings
from canvasforge.domain.subjects import get_domain
from canvasforge.domain.variation import select_variation
from canvasforge.services.telemetry import disable_telemetry, enable_telemetry
from canvasforge.services.variation import VariationService, variation_summary

DENTAL_PROMPT = "Need a new dental clinic site"


class TestClassify:
    def test_matched(self, variation_service: VariationService) -> None:
        result = variation_service.classify(DENTAL_PROMPT)
        assert result.ok
        assert result.op == "classify_subject"
        assert result.data == {
            "domain": {"id": "healthcare", "name": "Healthcare & Medical"},
            "matched": True,
            "fallback": "consulting",
        }

    def test_fallback(self, variation_service: VariationService) -> None:
        result = variation_service.classify("qwertyzxcv")
        assert result.data["domain"]["id"] == "consulting"
        assert result.data["matched"] is False

    def test_misconfigured_fallback(self, tmp_path: Path) -> None:
        settings = CanvasforgeSettings.load(
            search_from=tmp_path, variation={"fallback_domain": "aerospace"}
        )
        result = VariationService(settings).classify(DENTAL_PROMPT)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_DOMAIN"


class TestGenerate:
    def test_seeded_generation_is_reproducible(self, variation_service: VariationService) -> None:
        first = variation_service.generate(DENTAL_PROMPT, seed="abc123")
        second = variation_service.generate(DENTAL_PROMPT, seed="abc123")
        assert first.ok
        assert first.op == "generate_variation"
        assert first.data == second.data
        assert first.meta == {"seed": "abc123"}

    def test_payload(self, variation_service: VariationService) -> None:
        result = variation_service.generate(DENTAL_PROMPT, seed="abc123")
        variation = result.data["variation"]
        directive = result.data["directive"]

        assert variation["domain"] == {"id": "healthcare", "name": "Healthcare & Medical"}
        assert variation["seed"] == "abc123"
        assert directive["palette"]["primary"] == variation["color_scheme"]["primary"]
        assert directive["section_order"] == variation["section_order"]

        prompt = result.data["prompt_context"]
        assert "DESIGN DIRECTION: Healthcare & Medical (variation abc123)" in prompt
        assert directive["palette"]["primary"] in prompt
        assert directive["fonts"]["heading"] in prompt
        assert result.data["css_variables"].startswith(":root {")

    def test_matches_domain_functions(self, variation_service: VariationService) -> None:
        expected = select_variation(get_domain("healthcare"), "abc123")
        result = variation_service.generate(DENTAL_PROMPT, seed="abc123")
        assert result.data["variation"] == variation_summary(expected)

    def test_fresh_seed_reported(self, variation_service: VariationService) -> None:
        result = variation_service.generate(DENTAL_PROMPT)
        assert result.ok
        assert result.meta is not None
        seed = result.meta["seed"]
        assert result.data["variation"]["seed"] == seed
        again = variation_service.generate(DENTAL_PROMPT, seed=seed)
        assert again.data == result.data

    def test_icon_limit_from_settings(self, tmp_path: Path) -> None:
        settings = CanvasforgeSettings.load(search_from=tmp_path, directive={"icon_limit": 2})
        result = VariationService(settings).generate(DENTAL_PROMPT, seed="abc123")
        assert len(result.data["directive"]["icons"]) == 2

    def test_template_override(self, tmp_path: Path) -> None:
        overrides = tmp_path / "templates"
        (overrides / "directive").mkdir(parents=True)
        (overrides / "directive" / "prompt_context.md.j2").write_text(
            "Use {{ d.palette.primary }} for {{ d.domain_id }}"
        )
        settings = CanvasforgeSettings.load(
            search_from=tmp_path, directive={"template_dir": str(overrides)}
        )
        result = VariationService(settings).generate(DENTAL_PROMPT, seed="abc123")
        primary = result.data["directive"]["palette"]["primary"]
        assert result.data["prompt_context"] == f"Use {primary} for healthcare"
        assert result.data["css_variables"].startswith(":root {")

    def test_telemetry_spans(self, variation_service: VariationService) -> None:
        enable_telemetry()
        try:
            result = variation_service.generate(DENTAL_PROMPT, seed="abc123")
        finally:
            disable_telemetry()
        assert result.meta is not None
        assert result.meta["seed"] == "abc123"
        names = [child["name"] for child in result.meta["telemetry"]["children"]]
        assert names == ["select", "format", "render"]


class TestGenerateMany:
    def test_default_batch_size(self, variation_service: VariationService) -> None:
        result = variation_service.generate_many("artisan bakery")
        assert result.ok
        assert result.op == "generate_variations"
        assert result.meta is not None
        assert result.meta["count"] == 3
        assert len(result.data["variations"]) == 3
        assert len(set(result.meta["seeds"])) == 3

    def test_explicit_count(self, variation_service: VariationService) -> None:
        result = variation_service.generate_many("artisan bakery", count=1)
        assert len(result.data["variations"]) == 1
        assert result.warnings == []

    def test_repeated_schemes_warned(self, variation_service: VariationService) -> None:
        # Each domain offers three color schemes, so five slots must repeat one.
        result = variation_service.generate_many("artisan bakery", count=5)
        assert result.ok
        assert len(result.warnings) == 1
        assert "distinct color schemes" in result.warnings[0]
