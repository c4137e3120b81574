"""Subject domains and the keyword classifier.

The registry is built once at import from :mod:`canvasforge.domain.industries`
into frozen models and exposed read-only; nothing writes to it afterwards,
so concurrent callers share it without locking.

Classification is plain case-insensitive substring containment against each
domain's keywords, in registry order. The first domain with any hit wins;
there is no scoring and no tokenization.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field

from canvasforge.domain.errors import UnknownDomainError
from canvasforge.domain.industries import FALLBACK_DOMAIN_ID, INDUSTRY_TABLE


class ColorScheme(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    primary: str
    secondary: str
    accent: str
    background: str
    foreground: str
    muted: str
    card_bg: str
    gradients: tuple[str, ...] = ()


class FontPairing(BaseModel):
    model_config = {"frozen": True}

    id: str
    heading: str
    body: str
    accent: str | None = None
    style: str


class HeroVariant(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    layout: str
    has_video: bool = False
    cta_style: str
    decorative_elements: tuple[str, ...] = ()


class VisualEffect(BaseModel):
    model_config = {"frozen": True}

    id: str
    card_style: str
    hover_effect: str
    animation_type: str
    glassmorphism: bool = False
    gradient_overlay: bool = False


class SubjectDomain(BaseModel):
    """A content/business category and every style option it offers.

    Attributes:
        keywords: Lowercase substrings that select this domain.
        section_arrangements: Candidate page section orders, each an ordered
            tuple of section types.
        image_ids: Reference photo ids for the directive's image list.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    keywords: tuple[str, ...]
    color_schemes: tuple[ColorScheme, ...] = Field(default_factory=tuple)
    font_pairings: tuple[FontPairing, ...] = Field(default_factory=tuple)
    hero_variants: tuple[HeroVariant, ...] = Field(default_factory=tuple)
    section_arrangements: tuple[tuple[str, ...], ...] = Field(default_factory=tuple)
    visual_effects: tuple[VisualEffect, ...] = Field(default_factory=tuple)
    icon_sets: tuple[str, ...] = ()
    image_ids: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        """True when any keyword occurs in *text* (case-insensitive)."""
        lowered = text.lower()
        return any(keyword in lowered for keyword in self.keywords)


def _build_registry() -> Mapping[str, SubjectDomain]:
    domains = {entry["id"]: SubjectDomain.model_validate(entry) for entry in INDUSTRY_TABLE}
    if FALLBACK_DOMAIN_ID not in domains:
        raise RuntimeError(f"Fallback domain {FALLBACK_DOMAIN_ID!r} missing from registry")
    return MappingProxyType(domains)


SUBJECT_REGISTRY: Mapping[str, SubjectDomain] = _build_registry()


def list_domains() -> list[SubjectDomain]:
    """All domains, in classification order."""
    return list(SUBJECT_REGISTRY.values())


def get_domain(domain_id: str) -> SubjectDomain:
    """Look up a domain by id.

    Raises:
        UnknownDomainError: if *domain_id* is not registered.
    """
    try:
        return SUBJECT_REGISTRY[domain_id]
    except KeyError:
        raise UnknownDomainError(domain_id) from None


def fallback_domain() -> SubjectDomain:
    return SUBJECT_REGISTRY[FALLBACK_DOMAIN_ID]


def classify(
    text: str,
    *,
    registry: Mapping[str, SubjectDomain] | None = None,
    fallback: str = FALLBACK_DOMAIN_ID,
) -> SubjectDomain:
    """Pick the subject domain for a free-text description.

    Args:
        text: Prompt or business description.
        registry: Domains to test, in order (default: the built-in registry).
        fallback: Domain id returned when nothing matches.
    """
    domains = SUBJECT_REGISTRY if registry is None else registry
    for domain in domains.values():
        if domain.matches(text):
            return domain
    if fallback in domains:
        return domains[fallback]
    return get_domain(fallback)
