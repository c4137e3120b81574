"""canvasforge — layout resolution and seeded style variations.

Two independent engines, composed by the caller:

- layout engine: :func:`parse_template` → :func:`template_to_document`
  (:func:`resolve_frame_layout` per frame);
- variation engine: :func:`classify` → :func:`generate_variation` →
  :func:`variation_to_directive`.

:class:`LayoutService` and :class:`VariationService` wrap both behind the
:class:`ServiceResult` contract; :class:`ServiceContext` bootstraps logging
and telemetry for an embedding service.
"""

from canvasforge.domain.assembler import extract_template_assets, template_to_document
from canvasforge.domain.directive import Directive, variation_to_directive
from canvasforge.domain.errors import (
    CanvasforgeError,
    LayoutConfigError,
    NoCandidatesError,
    TemplateValidationError,
    UnknownDomainError,
)
from canvasforge.domain.layout import resolve_frame_layout
from canvasforge.domain.subjects import classify, get_domain, list_domains
from canvasforge.domain.template import parse_frame, parse_template
from canvasforge.domain.variation import TemplateVariation, generate_variation, generate_variations
from canvasforge.services.context import ServiceContext
from canvasforge.services.layout import LayoutService
from canvasforge.services.result import ServiceError, ServiceResult
from canvasforge.services.variation import VariationService

__version__ = "0.1.0"

__all__ = [
    "CanvasforgeError",
    "Directive",
    "LayoutConfigError",
    "LayoutService",
    "NoCandidatesError",
    "ServiceContext",
    "ServiceError",
    "ServiceResult",
    "TemplateValidationError",
    "TemplateVariation",
    "UnknownDomainError",
    "VariationService",
    "classify",
    "extract_template_assets",
    "generate_variation",
    "generate_variations",
    "get_domain",
    "list_domains",
    "parse_frame",
    "parse_template",
    "resolve_frame_layout",
    "template_to_document",
    "variation_to_directive",
]
