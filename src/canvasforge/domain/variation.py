"""Seeded variation selection.

A variation is five independent draws from one subject domain's option
lists. Each draw is a pure function of ``(seed, draw_index)``:

1. FNV-1a (32-bit) over the UTF-16 code units of ``seed + str(index)``.
2. One Mulberry32 step turning the hash into a float in [0, 1).
3. ``options[floor(r * len(options))]``.

INVARIANT: for a fixed (domain, seed) every draw is bit-for-bit
reproducible across processes, platforms and time. All arithmetic is
masked to 32 bits, so seeds issued by earlier deployments keep producing
the same variations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import structlog
from pydantic import BaseModel

from canvasforge.domain.errors import NoCandidatesError
from canvasforge.domain.ids import generate_seed
from canvasforge.domain.subjects import (
    ColorScheme,
    FontPairing,
    HeroVariant,
    SubjectDomain,
    VisualEffect,
    classify,
)

logger = structlog.get_logger(__name__)

_MASK32 = 0xFFFFFFFF
FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
MULBERRY_INCREMENT = 0x6D2B79F5

# Draw indices, one per option list, so list lengths never interact.
DRAW_COLOR_SCHEME = 1
DRAW_FONT_PAIRING = 2
DRAW_HERO_VARIANT = 3
DRAW_SECTION_ORDER = 4
DRAW_VISUAL_EFFECT = 5

_T = TypeVar("_T")


class TemplateVariation(BaseModel):
    """The style bundle for one generation request."""

    model_config = {"frozen": True}

    domain: SubjectDomain
    color_scheme: ColorScheme
    font_pairing: FontPairing
    hero_variant: HeroVariant
    section_order: tuple[str, ...]
    visual_effect: VisualEffect
    seed: str

    def fingerprint(self) -> tuple[str, str, str, tuple[str, ...], str]:
        """The five drawn choices, for equality and diversity checks."""
        return (
            self.color_scheme.id,
            self.font_pairing.id,
            self.hero_variant.id,
            self.section_order,
            self.visual_effect.id,
        )


# ---------------------------------------------------------------------------
# Hash + PRNG
# ---------------------------------------------------------------------------


def _utf16_units(text: str) -> list[int]:
    """UTF-16 code units of *text* (astral characters become surrogate pairs)."""
    data = text.encode("utf-16-le")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def fnv1a_32(text: str) -> int:
    h = FNV_OFFSET_BASIS
    for unit in _utf16_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & _MASK32
    return h


def mulberry32(state: int) -> float:
    """One Mulberry32 step from a 32-bit *state*; returns a float in [0, 1)."""
    t = (state + MULBERRY_INCREMENT) & _MASK32
    t = ((t ^ (t >> 15)) * (t | 1)) & _MASK32
    t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32
    return ((t ^ (t >> 14)) & _MASK32) / 4294967296


def seeded_random(seed: str, index: int = 0) -> float:
    """Deterministic float in [0, 1) for the *index*-th draw of *seed*."""
    return mulberry32(fnv1a_32(f"{seed}{index}"))


def pick(options: Sequence[_T], seed: str, index: int = 0, *, field: str = "options") -> _T:
    """Pick one of *options* for draw *index* of *seed*.

    Raises:
        NoCandidatesError: if *options* is empty.
    """
    if not options:
        raise NoCandidatesError(field)
    return options[int(seeded_random(seed, index) * len(options))]


# ---------------------------------------------------------------------------
# Variation API
# ---------------------------------------------------------------------------


def select_variation(domain: SubjectDomain, seed: str) -> TemplateVariation:
    """Draw one option from each of *domain*'s lists.

    Raises:
        NoCandidatesError: if the domain has an empty list for any draw.
    """
    draws = (
        ("color_schemes", DRAW_COLOR_SCHEME),
        ("font_pairings", DRAW_FONT_PAIRING),
        ("hero_variants", DRAW_HERO_VARIANT),
        ("section_arrangements", DRAW_SECTION_ORDER),
        ("visual_effects", DRAW_VISUAL_EFFECT),
    )
    chosen = {}
    for field, index in draws:
        options = getattr(domain, field)
        if not options:
            raise NoCandidatesError(field, domain=domain.id)
        chosen[field] = pick(options, seed, index, field=field)

    variation = TemplateVariation(
        domain=domain,
        color_scheme=chosen["color_schemes"],
        font_pairing=chosen["font_pairings"],
        hero_variant=chosen["hero_variants"],
        section_order=chosen["section_arrangements"],
        visual_effect=chosen["visual_effects"],
        seed=seed,
    )
    logger.debug(
        "variation.selected",
        domain=domain.id,
        seed=seed,
        color_scheme=variation.color_scheme.id,
        hero=variation.hero_variant.id,
    )
    return variation


def generate_variation(
    prompt: str,
    seed: str | None = None,
    *,
    fallback: str | None = None,
) -> TemplateVariation:
    """Classify *prompt* and draw a variation for it.

    A missing or empty *seed* is replaced with a freshly generated one, which
    is recorded on the result so the variation can be regenerated.
    """
    domain = classify(prompt) if fallback is None else classify(prompt, fallback=fallback)
    return select_variation(domain, seed or generate_seed())


def generate_variations(
    prompt: str,
    count: int = 3,
    *,
    max_attempts: int = 5,
    fallback: str | None = None,
) -> list[TemplateVariation]:
    """Generate *count* variations for one prompt, preferring distinct looks.

    Each slot retries with a fresh seed up to *max_attempts* times while its
    color scheme or hero variant repeats an earlier slot; after that the
    last draw is kept, so small domains still yield *count* results.
    """
    variations: list[TemplateVariation] = []
    used_schemes: set[str] = set()
    used_heroes: set[str] = set()

    for _ in range(count):
        variation = generate_variation(prompt, fallback=fallback)
        attempts = 0
        while attempts < max_attempts and (
            variation.color_scheme.id in used_schemes or variation.hero_variant.id in used_heroes
        ):
            variation = select_variation(variation.domain, generate_seed())
            attempts += 1
        used_schemes.add(variation.color_scheme.id)
        used_heroes.add(variation.hero_variant.id)
        variations.append(variation)

    return variations
