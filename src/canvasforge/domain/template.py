"""Template input models — Frames containing positioned Layers.

Wire payloads use camelCase keys (``fontFamily``, ``strokeWidth``); the
models expose snake_case attributes and accept either spelling.

Validation lives on the models; :func:`parse_template` and
:func:`parse_frame` convert pydantic failures into a
:class:`~canvasforge.domain.errors.TemplateValidationError` whose issues
name the offending dotted path.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from canvasforge.domain.errors import TemplateValidationError
from canvasforge.domain.ids import generate_id
from canvasforge.domain.types import LAYOUT_ALIASES, LayerType, LayoutMode

# Ints and floats only; numeric strings and bools are rejected, not coerced.
Number = Annotated[float, Strict()]

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Layer(BaseModel):
    """One visual element inside a Frame.

    ``type`` is kept as a plain string so that templates produced by newer
    generators still validate; the assembler decides what to do with types
    it does not know.
    """

    model_config = _MODEL_CONFIG

    id: str = Field(default_factory=generate_id)
    type: str
    x: Number = 0
    y: Number = 0
    width: Number = Field(ge=0)
    height: Number = Field(ge=0)
    rotation: Number = 0
    opacity: Number = Field(default=1, ge=0, le=1)
    visible: StrictBool = True
    locked: StrictBool = False

    # --- text ---
    content: str | None = None
    font_family: str | None = None
    font_size: Number | None = Field(default=None, gt=0)
    font_weight: int | str | None = None
    font_style: str | None = None
    text_align: str | None = None
    color: str | None = None
    line_height: Number | None = None
    letter_spacing: Number | None = None

    # --- image ---
    src: str | None = None
    fit: str | None = None
    filters: dict[str, Any] | list[Any] | None = None

    # --- shape ---
    shape: str | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: Number | None = Field(default=None, ge=0)

    # --- image + shape ---
    border_radius: Number | None = Field(default=None, ge=0)

    # --- group ---
    layers: list[Layer] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _assign_missing_id(cls, value: Any) -> Any:
        return value or generate_id()

    @field_validator("type")
    @classmethod
    def _require_type(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("layer type must not be empty")
        return value

    @model_validator(mode="after")
    def _check_type_fields(self) -> Layer:
        if self.type == LayerType.TEXT and self.content is None:
            raise ValueError("text layer requires 'content'")
        if self.type == LayerType.IMAGE and not self.src:
            raise ValueError("image layer requires 'src'")
        return self

    @property
    def layer_type(self) -> LayerType | None:
        """The known layer type, or None when ``type`` is unrecognised."""
        try:
            return LayerType(self.type)
        except ValueError:
            return None


class Frame(BaseModel):
    """A rectangular container with a layout mode and ordered layers."""

    model_config = _MODEL_CONFIG

    id: str | None = None
    name: str
    width: Number = Field(gt=0)
    height: Number = Field(gt=0)
    padding: Number = Field(default=0, ge=0)
    gap: Number = Field(default=0, ge=0)
    layout: LayoutMode | str = LayoutMode.FREE
    background: str = "#ffffff"
    layers: list[Layer] = Field(default_factory=list)

    @field_validator("layout", mode="before")
    @classmethod
    def _normalize_layout(cls, value: Any) -> Any:
        # Unknown modes survive validation; the resolver owns that decision.
        if isinstance(value, str):
            key = value.strip().lower()
            if key in LAYOUT_ALIASES:
                return LAYOUT_ALIASES[key]
            try:
                return LayoutMode(key)
            except ValueError:
                return value
        return value

    @model_validator(mode="after")
    def _check_unique_layer_ids(self) -> Frame:
        seen: set[str] = set()
        for layer in self.layers:
            if layer.id in seen:
                raise ValueError(f"duplicate layer id {layer.id!r}")
            seen.add(layer.id)
        return self


class Template(BaseModel):
    """An ordered list of frames, one page each once assembled."""

    model_config = _MODEL_CONFIG

    id: str | None = None
    name: str
    frames: list[Frame] = Field(min_length=1)


def _issues_from(exc: ValidationError, prefix: str = "") -> list[dict[str, str]]:
    issues: list[dict[str, str]] = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"])
        if prefix:
            path = f"{prefix}.{path}" if path else prefix
        message = err["msg"].removeprefix("Value error, ")
        issues.append({"path": path, "message": message})
    return issues


def parse_template(data: dict[str, Any]) -> Template:
    """Validate a raw template payload.

    Raises:
        TemplateValidationError: listing every failing path.
    """
    try:
        return Template.model_validate(data)
    except ValidationError as exc:
        raise TemplateValidationError(_issues_from(exc)) from exc


def parse_frame(data: dict[str, Any]) -> Frame:
    """Validate a single raw frame payload."""
    try:
        return Frame.model_validate(data)
    except ValidationError as exc:
        raise TemplateValidationError(_issues_from(exc)) from exc
