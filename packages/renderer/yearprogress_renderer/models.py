"""Typed layout models and draw instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .colors import Color


GRID_COLUMNS = 7


@dataclass(frozen=True)
class OverlayStyle:
    neutral: str = "#ffffff"
    subtitle_alpha: float = 0.5
    completed_alpha: float = 0.6
    future_alpha: float = 0.08
    summary_alpha: float = 0.4
    week_alpha: float = 0.3
    corner_ratio: float = 0.15
    week_label_total: int = 52
    subtitle: str = "Year Progress"
    font_family: str = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"


DEFAULT_STYLE = OverlayStyle()


@dataclass(frozen=True)
class RenderConfig:
    width: float
    height: float
    background_color: str
    accent_color: str
    timezone: str = "UTC"
    style: OverlayStyle = field(default_factory=OverlayStyle)


@dataclass(frozen=True)
class DateFacts:
    year: int
    day_of_year: int
    week_of_year: int
    total_days: int


@dataclass(frozen=True)
class GridGeometry:
    cols: int
    rows: int
    cell_size: float
    gap: float
    start_x: float
    start_y: float
    padding: float
    top_padding: float
    bottom_padding: float
    available_width: float
    available_height: float

    @property
    def grid_width(self) -> float:
        return self.cols * self.cell_size + (self.cols - 1) * self.gap

    @property
    def grid_height(self) -> float:
        return self.rows * self.cell_size + (self.rows - 1) * self.gap


class CellState(str, Enum):
    FUTURE = "future"
    COMPLETED = "completed"
    TODAY = "today"


@dataclass(frozen=True)
class Summary:
    progress_percent: int
    days_remaining: int
    week_of_year: int
    summary_line: str
    week_line: str


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    fill: Color
    radius: float = 0.0


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    content: str
    fill: Color
    font_size: float
    font_weight: str = "400"
    anchor: str = "middle"
    baseline: str = "middle"


@dataclass(frozen=True)
class Scene:
    width: float
    height: float
    ops: tuple[RectOp | TextOp, ...]
    font_family: str = DEFAULT_STYLE.font_family

    def rects(self) -> list[RectOp]:
        return [op for op in self.ops if isinstance(op, RectOp)]

    def texts(self) -> list[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]
