"""Tests for Jinja2 template environment construction."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from canvasforge.infrastructure.templates import build_template_environment, font_family_param


class TestFontFamilyParam:
    @pytest.mark.parametrize(
        "family,expected",
        [("Inter", "Inter"), ("Playfair Display", "Playfair+Display"), ("A&B", "A%26B")],
    )
    def test_encoding(self, family: str, expected: str) -> None:
        assert font_family_param(family) == expected


class TestBuildEnvironment:
    def test_packaged_templates(self) -> None:
        env = build_template_environment("directive")
        names = set(env.list_templates())
        assert {"prompt_context.md.j2", "css_variables.css.j2", "html_overrides.css.j2"} <= names

    def test_filters_registered(self) -> None:
        env = build_template_environment("directive")
        assert env.from_string("{{ '#ff0000' | hsl }}").render() == "0 100% 50%"

    def test_strict_undefined(self) -> None:
        env = build_template_environment("directive")
        with pytest.raises(UndefinedError):
            env.from_string("{{ missing.value }}").render()

    def test_group_override_wins(self, tmp_path: Path) -> None:
        (tmp_path / "directive").mkdir()
        (tmp_path / "directive" / "css_variables.css.j2").write_text("grouped")
        (tmp_path / "css_variables.css.j2").write_text("flat")
        env = build_template_environment("directive", template_dir=tmp_path)
        assert env.get_template("css_variables.css.j2").render() == "grouped"

    def test_flat_override(self, tmp_path: Path) -> None:
        (tmp_path / "css_variables.css.j2").write_text("flat")
        env = build_template_environment("directive", template_dir=tmp_path)
        assert env.get_template("css_variables.css.j2").render() == "flat"
        source, _, _ = env.loader.get_source(env, "prompt_context.md.j2")  # type: ignore[union-attr]
        assert source.startswith("**DESIGN DIRECTION")
