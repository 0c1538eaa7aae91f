"""Color parsing and alpha helpers."""

from __future__ import annotations

from dataclasses import dataclass, replace

from PIL import ImageColor


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    alpha: float = 1.0

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, int(round(self.alpha * 255)))

    @property
    def opaque(self) -> bool:
        return self.alpha >= 1.0

    def with_alpha(self, alpha: float) -> Color:
        return replace(self, alpha=_check_alpha(alpha))


def _check_alpha(alpha: float) -> float:
    alpha = float(alpha)
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Alpha must be within [0, 1], got {alpha}")
    return alpha


def parse_color(spec: str | Color) -> Color:
    if isinstance(spec, Color):
        return spec
    rgb = ImageColor.getrgb(spec)
    if len(rgb) == 4:
        r, g, b, a = rgb
        return Color(r, g, b, a / 255)
    r, g, b = rgb
    return Color(r, g, b)


def with_alpha(color: str | Color, alpha: float) -> Color:
    """Return the color at the given opacity, replacing any alpha it carried."""
    return parse_color(color).with_alpha(alpha)
