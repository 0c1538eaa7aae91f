"""Pillow raster surface for PNG previews of a year scene."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .models import RectOp, Scene, TextOp


_ANCHORS = {
    ("start", "middle"): "lm",
    ("middle", "middle"): "mm",
    ("end", "middle"): "rm",
    ("start", "alphabetic"): "ls",
    ("middle", "alphabetic"): "ms",
    ("end", "alphabetic"): "rs",
}


class RasterDocument:
    def __init__(self, image: Image.Image) -> None:
        self.image = image

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def to_png_bytes(self) -> bytes:
        buf = BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()

    def save(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path, format="PNG")
        return path


class RasterSurface:
    """Draws scenes onto an RGB canvas, blending translucent fills."""

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = scale
        self._image: Image.Image | None = None
        self._draw: ImageDraw.ImageDraw | None = None

    def new_document(self, width: float, height: float, font_family: str = "") -> None:
        size = (max(1, round(width * self.scale)), max(1, round(height * self.scale)))
        self._image = Image.new("RGB", size, (0, 0, 0))
        self._draw = ImageDraw.Draw(self._image, "RGBA")

    def draw_rect(self, op: RectOp) -> None:
        draw = self._require()
        s = self.scale
        x0, y0 = round(op.x * s), round(op.y * s)
        x1 = max(x0, round((op.x + op.width) * s) - 1)
        y1 = max(y0, round((op.y + op.height) * s) - 1)
        radius = int(round(op.radius * s))
        if radius > 0:
            draw.rounded_rectangle((x0, y0, x1, y1), radius=radius, fill=op.fill.rgba)
        else:
            draw.rectangle((x0, y0, x1, y1), fill=op.fill.rgba)

    def draw_text(self, op: TextOp) -> None:
        draw = self._require()
        font = self._font(max(1, int(round(op.font_size * self.scale))), bold=op.font_weight in ("700", "bold"))
        anchor = _ANCHORS.get((op.anchor, op.baseline), "mm")
        draw.text((op.x * self.scale, op.y * self.scale), op.content, font=font, fill=op.fill.rgba, anchor=anchor)

    def finish(self) -> RasterDocument:
        if self._image is None:
            raise RuntimeError("new_document() must be called before finish()")
        document = RasterDocument(self._image)
        self._image = None
        self._draw = None
        return document

    def play(self, scene: Scene) -> RasterDocument:
        self.new_document(scene.width, scene.height, scene.font_family)
        for op in scene.ops:
            if isinstance(op, RectOp):
                self.draw_rect(op)
            else:
                self.draw_text(op)
        return self.finish()

    def _require(self) -> ImageDraw.ImageDraw:
        if self._draw is None:
            raise RuntimeError("new_document() must be called before drawing")
        return self._draw

    def _font(self, size: int, bold: bool = False):
        preferred = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf") if bold else ("DejaVuSans.ttf", "Arial.ttf")
        for name in preferred:
            try:
                return ImageFont.truetype(name, size)
            except OSError:
                continue
        return ImageFont.load_default(size=size)
