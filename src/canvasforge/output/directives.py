"""Text renderings of a Directive.

Three outputs, each from a packaged Jinja2 template that can be overridden
through ``[directive] template_dir``:

- prompt context: readable instructions for a design proposal generator;
- CSS variables: a ``:root`` block of HSL custom properties;
- HTML overrides: font import plus accent overrides injected into markup.
"""

from __future__ import annotations

from pathlib import Path

from canvasforge.domain.directive import Directive
from canvasforge.infrastructure.templates import build_template_environment

TEMPLATE_GROUP = "directive"
DEFAULT_RADIUS = "0.75rem"

_STYLE_CLOSE = "</style>"
_HEAD_CLOSE = "</head>"


def render_prompt_context(directive: Directive, *, template_dir: Path | None = None) -> str:
    """Render *directive* as instructions for a downstream generator."""
    env = build_template_environment(TEMPLATE_GROUP, template_dir=template_dir)
    return env.get_template("prompt_context.md.j2").render(d=directive)


def directive_to_css_variables(
    directive: Directive,
    *,
    radius: str = DEFAULT_RADIUS,
    template_dir: Path | None = None,
) -> str:
    """Render the palette as CSS custom properties in ``H S% L%`` form."""
    env = build_template_environment(TEMPLATE_GROUP, template_dir=template_dir)
    return env.get_template("css_variables.css.j2").render(d=directive, radius=radius)


def variation_comment(directive: Directive) -> str:
    """One-line HTML comment identifying the variation applied to a page."""
    return (
        f"<!-- VARIATION: {directive.seed} | {directive.domain_name} | {directive.scheme_name}"
        f" | {directive.fonts.heading}/{directive.fonts.body} | {directive.hero.name} -->"
    )


def apply_variation_to_html(
    html: str,
    directive: Directive,
    *,
    template_dir: Path | None = None,
) -> str:
    """Inject the variation's fonts and accent colors into *html*.

    The override CSS goes before the last ``</style>`` so it wins the
    cascade; without a style block it is added to ``<head>``, and without a
    head it is prepended. Text and background colors are left untouched.
    """
    env = build_template_environment(TEMPLATE_GROUP, template_dir=template_dir)
    css = env.get_template("html_overrides.css.j2").render(d=directive)

    last_style = html.rfind(_STYLE_CLOSE)
    if last_style != -1:
        modified = html[:last_style] + css + "\n" + html[last_style:]
    elif _HEAD_CLOSE in html:
        modified = html.replace(_HEAD_CLOSE, f"<style>{css}</style>\n{_HEAD_CLOSE}", 1)
    else:
        modified = f"<style>{css}</style>\n{html}"

    return f"{variation_comment(directive)}\n{modified}"
