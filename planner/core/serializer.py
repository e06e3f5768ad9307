"""Plan document import/export and SVG rendering."""

from __future__ import annotations
import json
import logging
import math
from typing import Any, Mapping, Union
from xml.sax.saxutils import escape

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from planner.errors import MalformedDocument
from planner.models import (
    Point2D, Wall, Opening, EditorSettings, SvgStyle, ViewState,
)
from planner.core.store import EntityStore
from planner.core.transform import ViewTransform

logger = logging.getLogger(__name__)

PlanSource = Union[str, bytes, bytearray, Mapping[str, Any]]


class PlanDocument(BaseModel):
    """
    Persisted plan: walls, openings, grid size and scale.

    Every field is optional on input so partial documents can be imported;
    a missing (or null) field leaves the current value in place.
    """
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    walls: list[Wall] | None = None
    openings: list[Opening] | None = None
    grid_size: float | None = Field(default=None, alias="gridSize", gt=0, strict=True)
    scale: float | None = Field(default=None, gt=0, strict=True)

    @model_validator(mode="after")
    def _unique_ids(self) -> PlanDocument:
        for label, items in (("wall", self.walls), ("opening", self.openings)):
            if items is None:
                continue
            seen: set[str] = set()
            for item in items:
                if item.id in seen:
                    raise ValueError(f"duplicate {label} id {item.id!r}")
                seen.add(item.id)
        return self

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def export_plan(store: EntityStore, settings: EditorSettings) -> PlanDocument:
    return PlanDocument(
        walls=store.list_walls(),
        openings=store.list_openings(),
        grid_size=settings.grid_size,
        scale=settings.scale,
    )


def dumps_plan(document: PlanDocument) -> str:
    return document.model_dump_json(by_alias=True, indent=2)


def parse_plan(source: PlanSource) -> PlanDocument:
    """Parse JSON text, raw bytes, or an already-decoded mapping."""
    if isinstance(source, (bytes, bytearray)):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedDocument(f"plan is not UTF-8 text: {exc}") from exc
    if isinstance(source, str):
        try:
            source = json.loads(source)
        except json.JSONDecodeError as exc:
            raise MalformedDocument(f"plan is not valid JSON: {exc}") from exc
    if not isinstance(source, Mapping):
        raise MalformedDocument(
            f"plan must be a JSON object, got {type(source).__name__}"
        )
    try:
        return PlanDocument.model_validate(dict(source))
    except ValidationError as exc:
        raise MalformedDocument(str(exc)) from exc


def import_plan(
    source: PlanSource | PlanDocument,
    store: EntityStore,
    settings: EditorSettings,
) -> EditorSettings:
    """
    Load a plan into `store` and return the updated settings.

    The document is fully validated before anything changes, so a
    MalformedDocument leaves both the store and the settings untouched.
    """
    document = source if isinstance(source, PlanDocument) else parse_plan(source)

    update: dict[str, float] = {}
    if document.grid_size is not None:
        update["grid_size"] = document.grid_size
    if document.scale is not None:
        update["scale"] = document.scale

    store.replace(walls=document.walls, openings=document.openings)
    logger.info(
        "Imported plan: walls=%s openings=%s settings=%s",
        "kept" if document.walls is None else len(document.walls),
        "kept" if document.openings is None else len(document.openings),
        update or "kept",
    )
    return settings.model_copy(update=update)


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _line(a: Point2D, b: Point2D, **attrs: Any) -> str:
    extra = "".join(
        f' {name.replace("_", "-")}="{_fmt(v) if isinstance(v, float) else v}"'
        for name, v in attrs.items()
    )
    return (
        f'<line x1="{_fmt(a.x)}" y1="{_fmt(a.y)}" '
        f'x2="{_fmt(b.x)}" y2="{_fmt(b.y)}"{extra}/>'
    )


def _grid_lines(
    transform: ViewTransform, settings: EditorSettings, style: SvgStyle,
) -> list[str]:
    width, height = settings.viewport_width, settings.viewport_height
    g = settings.grid_size
    if g * settings.scale < style.min_grid_spacing:
        logger.debug("Grid spacing %.4f px too fine, grid omitted", g * settings.scale)
        return []
    top_left = transform.screen_to_world(Point2D(x=0.0, y=0.0))
    bottom_right = transform.screen_to_world(Point2D(x=width, y=height))
    columns = range(math.floor(top_left.x / g), math.ceil(bottom_right.x / g) + 1)
    rows = range(math.floor(top_left.y / g), math.ceil(bottom_right.y / g) + 1)
    if max(len(columns), len(rows)) > style.max_grid_lines:
        logger.debug("Grid needs %d lines, grid omitted", max(len(columns), len(rows)))
        return []

    lines: list[str] = []
    for i in columns:
        sx = transform.world_to_screen(Point2D(x=i * g, y=0.0)).x
        lines.append(_line(
            Point2D(x=sx, y=0.0), Point2D(x=sx, y=height),
            stroke=style.grid_stroke, stroke_width=style.grid_width,
        ))
    for j in rows:
        sy = transform.world_to_screen(Point2D(x=0.0, y=j * g)).y
        lines.append(_line(
            Point2D(x=0.0, y=sy), Point2D(x=width, y=sy),
            stroke=style.grid_stroke, stroke_width=style.grid_width,
        ))
    return lines


def export_svg(
    store: EntityStore,
    settings: EditorSettings,
    view: ViewState | None = None,
    style: SvgStyle | None = None,
) -> str:
    """
    Render the plan as it currently appears in the viewport.

    Produces a flat drawing, not a re-importable document.
    """
    view = view or ViewState()
    style = style or SvgStyle()
    transform = ViewTransform(settings.scale, view.pan)
    width, height = _fmt(settings.viewport_width), _fmt(settings.viewport_height)

    out = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" '
        f'height="{height}" viewBox="0 0 {width} {height}">',
        f'<rect x="0" y="0" width="{width}" height="{height}" fill="{style.background}"/>',
    ]

    if settings.show_grid:
        out.append("<g>")
        out.extend(_grid_lines(transform, settings, style))
        out.append("</g>")

    out.append("<g>")
    for wall in store.list_walls():
        stroke = style.selected_stroke if wall.id == view.selected_id else style.wall_stroke
        out.append(_line(
            transform.world_to_screen(wall.start),
            transform.world_to_screen(wall.end),
            stroke=stroke, stroke_width=style.wall_width, stroke_linecap="round",
        ))
    if view.draft is not None:
        out.append(_line(
            transform.world_to_screen(view.draft.start),
            transform.world_to_screen(view.draft.end),
            stroke=style.draft_stroke, stroke_width=style.draft_width,
            stroke_dasharray=style.draft_dash,
        ))
    out.append("</g>")

    out.append("<g>")
    for opening in store.list_openings():
        p = transform.world_to_screen(opening.anchor)
        length_px = opening.length * settings.scale
        tip = Point2D(
            x=p.x + math.cos(opening.angle) * length_px,
            y=p.y + math.sin(opening.angle) * length_px,
        )
        stroke = (
            style.selected_stroke if opening.id == view.selected_id
            else style.opening_stroke
        )
        out.append("<g>")
        out.append(_line(p, tip, stroke=stroke, stroke_width=style.opening_width))
        out.append(
            f'<text x="{_fmt(p.x)}" y="{_fmt(p.y - style.label_offset)}" '
            f'font-size="{style.label_size}" text-anchor="middle">'
            f"{escape(opening.type.value)}</text>"
        )
        out.append("</g>")
    out.append("</g>")

    out.append("</svg>")
    return "\n".join(out)
