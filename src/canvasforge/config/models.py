"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, canvasforge.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from canvasforge.domain.directive import DEFAULT_ICON_LIMIT, DEFAULT_IMAGE_URL_TEMPLATE
from canvasforge.domain.industries import FALLBACK_DOMAIN_ID
from canvasforge.domain.types import UnknownLayerPolicy, UnknownLayoutMode


class LayoutConfig(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    unknown_mode: UnknownLayoutMode = UnknownLayoutMode.ERROR
    unknown_layer: UnknownLayerPolicy = UnknownLayerPolicy.WARN


class VariationConfig(BaseModel):
    """[variation] section."""

    model_config = {"frozen": True}

    fallback_domain: str = FALLBACK_DOMAIN_ID
    batch_size: int = Field(default=3, ge=1)
    max_attempts: int = Field(default=5, ge=0)


class DirectiveConfig(BaseModel):
    """[directive] section."""

    model_config = {"frozen": True}

    icon_limit: int = Field(default=DEFAULT_ICON_LIMIT, ge=0)
    image_url_template: str = DEFAULT_IMAGE_URL_TEMPLATE
    template_dir: Path | None = None
