"""SVG drawing surface backed by svgwrite."""

from __future__ import annotations

import io
from pathlib import Path

import svgwrite

from .colors import Color
from .models import RectOp, Scene, TextOp


def _num(value: float) -> float | int:
    rounded = round(value, 2)
    return int(rounded) if rounded == int(rounded) else rounded


def _paint(prefix: str, color: Color) -> dict[str, object]:
    attrs: dict[str, object] = {prefix: color.hex}
    if not color.opaque:
        attrs[f"{prefix}_opacity"] = _num(color.alpha)
    return attrs


class SvgDocument:
    def __init__(self, drawing: svgwrite.Drawing) -> None:
        self.drawing = drawing

    def to_string(self) -> str:
        buf = io.StringIO()
        self.drawing.write(buf)
        return buf.getvalue()

    def to_bytes(self) -> bytes:
        return self.to_string().encode("utf-8")

    def save(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_string(), encoding="utf-8")
        return path


class SvgSurface:
    """Accumulates rect/text instructions into one SVG document."""

    def __init__(self) -> None:
        self._drawing: svgwrite.Drawing | None = None
        self._font_family = ""

    def new_document(self, width: float, height: float, font_family: str = "") -> None:
        # Validation is skipped: font stacks and rounded floats are emitted as-is.
        drawing = svgwrite.Drawing(size=(_num(width), _num(height)), profile="full", debug=False)
        drawing.viewbox(0, 0, _num(width), _num(height))
        self._drawing = drawing
        self._font_family = font_family

    def draw_rect(self, op: RectOp) -> None:
        dwg = self._require()
        attrs = _paint("fill", op.fill)
        if op.radius > 0:
            attrs["rx"] = attrs["ry"] = _num(op.radius)
        dwg.add(dwg.rect(insert=(_num(op.x), _num(op.y)), size=(_num(op.width), _num(op.height)), **attrs))

    def draw_text(self, op: TextOp) -> None:
        dwg = self._require()
        attrs = _paint("fill", op.fill)
        if self._font_family:
            attrs["font_family"] = self._font_family
        dwg.add(
            dwg.text(
                op.content,
                insert=(_num(op.x), _num(op.y)),
                font_size=_num(op.font_size),
                font_weight=op.font_weight,
                text_anchor=op.anchor,
                dominant_baseline=op.baseline,
                **attrs,
            )
        )

    def finish(self) -> SvgDocument:
        document = SvgDocument(self._require())
        self._drawing = None
        return document

    def play(self, scene: Scene) -> SvgDocument:
        self.new_document(scene.width, scene.height, scene.font_family)
        for op in scene.ops:
            if isinstance(op, RectOp):
                self.draw_rect(op)
            else:
                self.draw_text(op)
        return self.finish()

    def _require(self) -> svgwrite.Drawing:
        if self._drawing is None:
            raise RuntimeError("new_document() must be called before drawing")
        return self._drawing
