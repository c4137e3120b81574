"""VariationService — subject classification, seeded variations, directives.

Pipeline: CLASSIFY → SELECT → FORMAT → RENDER → RESPOND
"""

from __future__ import annotations

from typing import Any

from canvasforge.domain.directive import Directive, variation_to_directive
from canvasforge.domain.errors import CanvasforgeError
from canvasforge.domain.subjects import classify, get_domain
from canvasforge.domain.variation import TemplateVariation, generate_variation, generate_variations
from canvasforge.output.directives import directive_to_css_variables, render_prompt_context
from canvasforge.services.base import BaseService
from canvasforge.services.result import ServiceResult
from canvasforge.services.telemetry import trace_span, traced


def variation_summary(variation: TemplateVariation) -> dict[str, Any]:
    """JSON-ready variation with the domain reduced to its id and name."""
    data = variation.model_dump(mode="json", exclude={"domain"})
    data["domain"] = {"id": variation.domain.id, "name": variation.domain.name}
    return data


class VariationService(BaseService):
    """Produces reproducible style variations for free-text prompts."""

    def directive(self, variation: TemplateVariation) -> Directive:
        """Format *variation* using the configured icon limit and image URLs."""
        cfg = self._settings.directive
        return variation_to_directive(
            variation,
            icon_limit=cfg.icon_limit,
            image_url_template=cfg.image_url_template,
        )

    def _rendered(self, variation: TemplateVariation) -> dict[str, Any]:
        template_dir = self._settings.directive.template_dir
        with trace_span("format"):
            directive = self.directive(variation)
        with trace_span("render"):
            prompt_context = render_prompt_context(directive, template_dir=template_dir)
            css_variables = directive_to_css_variables(directive, template_dir=template_dir)
        return {
            "variation": variation_summary(variation),
            "directive": directive.model_dump(mode="json"),
            "prompt_context": prompt_context,
            "css_variables": css_variables,
        }

    @traced
    def classify(self, prompt: str) -> ServiceResult:
        """Report which subject domain *prompt* maps to."""
        op = "classify_subject"
        fallback_id = self._settings.variation.fallback_domain
        try:
            fallback = get_domain(fallback_id)
            domain = classify(prompt, fallback=fallback_id)
        except CanvasforgeError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "domain": {"id": domain.id, "name": domain.name},
                "matched": domain.matches(prompt),
                "fallback": fallback.id,
            },
        )

    @traced
    def generate(self, prompt: str, seed: str | None = None) -> ServiceResult:
        """Generate (or regenerate, given *seed*) the variation for *prompt*."""
        op = "generate_variation"
        try:
            with trace_span("select"):
                variation = generate_variation(
                    prompt,
                    seed,
                    fallback=self._settings.variation.fallback_domain,
                )
            data = self._rendered(variation)
        except CanvasforgeError as exc:
            return self._failure(op, exc)

        return ServiceResult(ok=True, op=op, data=data, meta={"seed": variation.seed})

    @traced
    def generate_many(self, prompt: str, count: int | None = None) -> ServiceResult:
        """Generate several distinct variations for *prompt* (fresh seeds each)."""
        op = "generate_variations"
        cfg = self._settings.variation
        total = cfg.batch_size if count is None else count
        try:
            with trace_span("select"):
                variations = generate_variations(
                    prompt,
                    total,
                    max_attempts=cfg.max_attempts,
                    fallback=cfg.fallback_domain,
                )
            items = [self._rendered(variation) for variation in variations]
        except CanvasforgeError as exc:
            return self._failure(op, exc)

        warnings: list[str] = []
        schemes = {variation.color_scheme.id for variation in variations}
        if len(schemes) < len(variations):
            warnings.append(
                f"Only {len(schemes)} distinct color schemes across {len(variations)} variations"
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"variations": items},
            warnings=warnings,
            meta={"count": len(items), "seeds": [v.seed for v in variations]},
        )
