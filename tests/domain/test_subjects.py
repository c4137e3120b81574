"""Tests for the subject domain registry and classifier."""

from __future__ import annotations

import pytest

from canvasforge.domain.errors import UnknownDomainError
from canvasforge.domain.subjects import (
    SUBJECT_REGISTRY,
    SubjectDomain,
    classify,
    fallback_domain,
    get_domain,
    list_domains,
)

EXPECTED_ORDER = [
    "restaurant",
    "salon",
    "realestate",
    "consulting",
    "ecommerce",
    "fitness",
    "healthcare",
    "technology",
    "localservice",
    "creator",
    "nonprofit",
]


class TestRegistry:
    def test_order(self) -> None:
        assert [domain.id for domain in list_domains()] == EXPECTED_ORDER

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            SUBJECT_REGISTRY["new"] = fallback_domain()  # type: ignore[index]

    @pytest.mark.parametrize("domain_id", EXPECTED_ORDER)
    def test_every_domain_is_complete(self, domain_id: str) -> None:
        domain = get_domain(domain_id)
        assert domain.keywords
        assert domain.color_schemes
        assert domain.font_pairings
        assert domain.hero_variants
        assert domain.section_arrangements
        assert domain.visual_effects
        assert all(keyword == keyword.lower() for keyword in domain.keywords)

    def test_get_unknown_domain(self) -> None:
        with pytest.raises(UnknownDomainError) as exc_info:
            get_domain("aerospace")
        assert exc_info.value.code == "UNKNOWN_DOMAIN"
        assert exc_info.value.detail() == {"domain": "aerospace"}

    def test_fallback_is_consulting(self) -> None:
        assert fallback_domain().id == "consulting"


class TestClassify:
    @pytest.mark.parametrize(
        "prompt,expected",
        [
            ("I need a restaurant website", "restaurant"),
            ("Italian restaurant in Brooklyn", "restaurant"),
            ("Need a new dental clinic site", "healthcare"),
            ("A landing page for our SaaS product", "technology"),
            ("Portfolio for a wedding photographer", "creator"),
            ("Emergency PLUMBER, 24/7", "localservice"),
        ],
    )
    def test_keyword_match(self, prompt: str, expected: str) -> None:
        assert classify(prompt).id == expected

    def test_no_match_falls_back(self) -> None:
        assert classify("qwertyzxcv").id == "consulting"

    def test_empty_text_falls_back(self) -> None:
        assert classify("").id == "consulting"

    def test_configurable_fallback(self) -> None:
        assert classify("qwertyzxcv", fallback="nonprofit").id == "nonprofit"

    def test_unknown_fallback_raises(self) -> None:
        with pytest.raises(UnknownDomainError):
            classify("qwertyzxcv", fallback="aerospace")

    def test_first_match_in_registry_order_wins(self) -> None:
        # "wellness" is a keyword of both salon and healthcare.
        assert classify("wellness clinic").id == "salon"
        # "health" is shared by fitness and healthcare.
        assert classify("community health center").id == "fitness"

    def test_substring_containment(self) -> None:
        # "barber" contains "bar", so restaurant is tested first and wins.
        assert classify("barber shop").id == "restaurant"

    def test_custom_registry(self) -> None:
        only = SubjectDomain(id="solo", name="Solo", keywords=("solo",))
        registry = {"solo": only, "consulting": fallback_domain()}
        assert classify("a solo act", registry=registry).id == "solo"
        assert classify("a duet", registry=registry).id == "consulting"
