"""Variation-to-directive formatting.

A :class:`Directive` is the literal, render-ready form of a
:class:`~canvasforge.domain.variation.TemplateVariation`: hex colors, font
family names, the hero layout identifier, the section sequence, effect
tokens and reference image URLs. No randomness, no I/O.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from canvasforge.domain.variation import TemplateVariation

DEFAULT_ICON_LIMIT = 8
DEFAULT_IMAGE_URL_TEMPLATE = "https://images.unsplash.com/{id}?w=800&q=80"

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6})$")


class FontSpec(BaseModel):
    model_config = {"frozen": True}

    heading: str
    body: str
    accent: str | None = None


class HeroSpec(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    layout: str
    cta_style: str
    has_video: bool
    decorative_elements: tuple[str, ...] = ()


class EffectSpec(BaseModel):
    model_config = {"frozen": True}

    card_style: str
    hover_effect: str
    animation: str
    glassmorphism: bool
    gradient_overlay: bool


class Directive(BaseModel):
    """Literal style instructions for downstream generators.

    Attributes:
        palette: Role name (``primary``, ``secondary``, ``accent``,
            ``background``, ``foreground``, ``muted``, ``card``) to hex color.
        gradient: The scheme's first gradient, as utility-class tokens.
        section_order: Section types in build order.
        images: Fully expanded reference image URLs.
        icons: Icon names, truncated to the configured limit.
    """

    model_config = {"frozen": True}

    domain_id: str
    domain_name: str
    seed: str
    scheme_name: str
    palette: dict[str, str]
    gradient: str | None = None
    fonts: FontSpec
    font_style: str
    hero: HeroSpec
    section_order: tuple[str, ...]
    effects: EffectSpec
    images: tuple[str, ...] = ()
    icons: tuple[str, ...] = Field(default_factory=tuple)


def variation_to_directive(
    variation: TemplateVariation,
    *,
    icon_limit: int = DEFAULT_ICON_LIMIT,
    image_url_template: str = DEFAULT_IMAGE_URL_TEMPLATE,
) -> Directive:
    """Format *variation* as a :class:`Directive`."""
    scheme = variation.color_scheme
    fonts = variation.font_pairing
    hero = variation.hero_variant
    effect = variation.visual_effect
    domain = variation.domain

    return Directive(
        domain_id=domain.id,
        domain_name=domain.name,
        seed=variation.seed,
        scheme_name=scheme.name,
        palette={
            "primary": scheme.primary,
            "secondary": scheme.secondary,
            "accent": scheme.accent,
            "background": scheme.background,
            "foreground": scheme.foreground,
            "muted": scheme.muted,
            "card": scheme.card_bg,
        },
        gradient=scheme.gradients[0] if scheme.gradients else None,
        fonts=FontSpec(heading=fonts.heading, body=fonts.body, accent=fonts.accent),
        font_style=fonts.style,
        hero=HeroSpec(
            id=hero.id,
            name=hero.name,
            layout=hero.layout,
            cta_style=hero.cta_style,
            has_video=hero.has_video,
            decorative_elements=hero.decorative_elements,
        ),
        section_order=variation.section_order,
        effects=EffectSpec(
            card_style=effect.card_style,
            hover_effect=effect.hover_effect,
            animation=effect.animation_type,
            glassmorphism=effect.glassmorphism,
            gradient_overlay=effect.gradient_overlay,
        ),
        images=tuple(image_url_template.format(id=image_id) for image_id in domain.image_ids),
        icons=domain.icon_sets[: max(icon_limit, 0)],
    )


def hex_to_hsl(color: str) -> str:
    """Convert ``#rrggbb`` to the ``"H S% L%"`` form used by CSS variables.

    Raises:
        ValueError: if *color* is not a six-digit hex color.
    """
    match = _HEX_COLOR.match(color.strip())
    if match is None:
        raise ValueError(f"Not a six-digit hex color: {color!r}")
    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    if high == low:
        return f"0 0% {_round_half_up(lightness * 100)}%"

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    if high == r:
        hue = ((g - b) / delta + (6 if g < b else 0)) / 6
    elif high == g:
        hue = ((b - r) / delta + 2) / 6
    else:
        hue = ((r - g) / delta + 4) / 6

    hue_deg = _round_half_up(hue * 360)
    sat_pct = _round_half_up(saturation * 100)
    light_pct = _round_half_up(lightness * 100)
    return f"{hue_deg} {sat_pct}% {light_pct}%"


def _round_half_up(value: float) -> int:
    # Halves round up; round() would round them to even.
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
