"""Tests for variation-to-directive formatting."""

from __future__ import annotations

import pytest

from canvasforge.domain.directive import hex_to_hsl, variation_to_directive
from canvasforge.domain.subjects import get_domain
from canvasforge.domain.variation import TemplateVariation, select_variation


@pytest.fixture
def restaurant_variation() -> TemplateVariation:
    return select_variation(get_domain("restaurant"), "abc123")


class TestVariationToDirective:
    def test_literal_values(self, restaurant_variation: TemplateVariation) -> None:
        directive = variation_to_directive(restaurant_variation)
        scheme = restaurant_variation.color_scheme

        assert directive.domain_id == "restaurant"
        assert directive.seed == "abc123"
        assert directive.scheme_name == scheme.name
        assert directive.palette == {
            "primary": scheme.primary,
            "secondary": scheme.secondary,
            "accent": scheme.accent,
            "background": scheme.background,
            "foreground": scheme.foreground,
            "muted": scheme.muted,
            "card": scheme.card_bg,
        }
        assert directive.gradient == scheme.gradients[0]
        assert directive.fonts.heading == restaurant_variation.font_pairing.heading
        assert directive.fonts.body == restaurant_variation.font_pairing.body
        assert directive.hero.layout == restaurant_variation.hero_variant.layout
        assert directive.section_order == restaurant_variation.section_order
        assert directive.effects.animation == restaurant_variation.visual_effect.animation_type

    def test_image_urls(self, restaurant_variation: TemplateVariation) -> None:
        directive = variation_to_directive(restaurant_variation)
        image_ids = get_domain("restaurant").image_ids
        assert len(directive.images) == len(image_ids)
        assert directive.images[0] == (
            f"https://images.unsplash.com/{image_ids[0]}?w=800&q=80"
        )

    def test_custom_image_template(self, restaurant_variation: TemplateVariation) -> None:
        directive = variation_to_directive(
            restaurant_variation, image_url_template="https://cdn.test/{id}.jpg"
        )
        assert all(url.startswith("https://cdn.test/photo-") for url in directive.images)

    @pytest.mark.parametrize("limit,expected", [(8, 8), (3, 3), (0, 0), (-1, 0), (100, 11)])
    def test_icon_limit(
        self, restaurant_variation: TemplateVariation, limit: int, expected: int
    ) -> None:
        directive = variation_to_directive(restaurant_variation, icon_limit=limit)
        assert len(directive.icons) == expected
        assert directive.icons == get_domain("restaurant").icon_sets[:expected]

    def test_deterministic(self, restaurant_variation: TemplateVariation) -> None:
        assert variation_to_directive(restaurant_variation) == variation_to_directive(
            restaurant_variation
        )


class TestHexToHsl:
    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#ffffff", "0 0% 100%"),
            ("#000000", "0 0% 0%"),
            ("#ff0000", "0 100% 50%"),
            ("#00ff00", "120 100% 50%"),
            ("#0000ff", "240 100% 50%"),
            ("FF0000", "0 100% 50%"),
            ("#808080", "0 0% 50%"),
        ],
    )
    def test_conversion(self, color: str, expected: str) -> None:
        assert hex_to_hsl(color) == expected

    @pytest.mark.parametrize("color", ["#fff", "red", "", "#gggggg"])
    def test_rejects_non_hex(self, color: str) -> None:
        with pytest.raises(ValueError):
            hex_to_hsl(color)
