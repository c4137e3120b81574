"""Shared Jinja2 template loading with an optional override directory."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
)

from canvasforge.domain.directive import hex_to_hsl


def font_family_param(family: str) -> str:
    """Encode a font family for a Google Fonts ``family=`` query parameter."""
    return quote(family, safe="").replace("%20", "+")


def build_template_environment(group: str, *, template_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are looked up in ``template_dir/<group>/`` and then in
    ``template_dir/`` itself, so a flat override directory keeps working.
    """

    loaders: list[BaseLoader] = []
    if template_dir is not None:
        loaders.append(FileSystemLoader([str(template_dir / group), str(template_dir)]))

    loaders.append(PackageLoader("canvasforge", f"templates/{group}"))
    env = Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters["hsl"] = hex_to_hsl
    env.filters["font_family_param"] = font_family_param
    return env
