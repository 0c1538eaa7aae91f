"""Year progress layout engine.

Turns a canvas size, a color scheme and resolved date facts into an ordered
scene of draw instructions. Everything here is pure: no I/O, no clock, no
shared state. Surfaces in ``svg`` and ``raster`` turn a scene into a document.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from .colors import parse_color, with_alpha
from .models import (
    GRID_COLUMNS,
    CellState,
    DateFacts,
    GridGeometry,
    OverlayStyle,
    RectOp,
    RenderConfig,
    Scene,
    Summary,
    TextOp,
)
from .svg import SvgSurface

TOP_PADDING_RATIO = 0.2
BOTTOM_PADDING_RATIO = 0.12
SIDE_PADDING_RATIO = 0.08
MIN_GAP = 3.0
GAP_RATIO = 0.005


class LayoutInputError(ValueError):
    """Raised when render inputs break a layout invariant."""


def validate_inputs(config: RenderConfig, facts: DateFacts) -> None:
    if not config.width > 0:
        raise LayoutInputError(f"width must be positive, got {config.width}")
    if not config.height > 0:
        raise LayoutInputError(f"height must be positive, got {config.height}")
    if facts.total_days <= 0:
        raise LayoutInputError(f"total_days must be positive, got {facts.total_days}")
    if not 1 <= facts.day_of_year <= facts.total_days:
        raise LayoutInputError(
            f"day_of_year must be within [1, {facts.total_days}], got {facts.day_of_year}"
        )


def compute_geometry(config: RenderConfig, total_days: int) -> GridGeometry:
    width, height = config.width, config.height
    cols = GRID_COLUMNS
    rows = math.ceil(total_days / cols)

    padding = width * SIDE_PADDING_RATIO
    top_padding = height * TOP_PADDING_RATIO
    bottom_padding = height * BOTTOM_PADDING_RATIO
    available_width = width - padding * 2
    available_height = height - top_padding - bottom_padding

    gap = max(MIN_GAP, width * GAP_RATIO)
    cell_width = (available_width - gap * (cols - 1)) / cols
    cell_height = (available_height - gap * (rows - 1)) / rows
    cell_size = min(cell_width, cell_height)

    grid_width = cell_size * cols + gap * (cols - 1)
    grid_height = cell_size * rows + gap * (rows - 1)

    return GridGeometry(
        cols=cols,
        rows=rows,
        cell_size=cell_size,
        gap=gap,
        start_x=(width - grid_width) / 2,
        # Centered inside the band between title and summary, not the canvas.
        start_y=top_padding + (available_height - grid_height) / 2,
        padding=padding,
        top_padding=top_padding,
        bottom_padding=bottom_padding,
        available_width=available_width,
        available_height=available_height,
    )


def cell_state(index: int, day_of_year: int) -> CellState:
    today = day_of_year - 1
    if index == today:
        return CellState.TODAY
    if index < today:
        return CellState.COMPLETED
    return CellState.FUTURE


def cell_position(geometry: GridGeometry, index: int) -> tuple[float, float]:
    row, col = divmod(index, geometry.cols)
    step = geometry.cell_size + geometry.gap
    return geometry.start_x + col * step, geometry.start_y + row * step


def progress_percent(day_of_year: int, total_days: int) -> int:
    # Half up: the builtin round() would send 50.5 to 50.
    ratio = Decimal(day_of_year) / Decimal(total_days) * 100
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def summarize(facts: DateFacts, style: OverlayStyle | None = None) -> Summary:
    style = style or OverlayStyle()
    percent = progress_percent(facts.day_of_year, facts.total_days)
    remaining = facts.total_days - facts.day_of_year
    return Summary(
        progress_percent=percent,
        days_remaining=remaining,
        week_of_year=facts.week_of_year,
        summary_line=f"{percent}% complete · {remaining} days remaining",
        week_line=f"Week {facts.week_of_year} of {style.week_label_total}",
    )


def build_scene(config: RenderConfig, facts: DateFacts) -> Scene:
    validate_inputs(config, facts)
    style = config.style
    geometry = compute_geometry(config, facts.total_days)
    if geometry.cell_size <= 0:
        raise LayoutInputError(
            f"canvas {config.width}x{config.height} is too small to fit {geometry.rows} rows of cells"
        )
    summary = summarize(facts, style)

    background = parse_color(config.background_color)
    accent = parse_color(config.accent_color)
    fills = {
        CellState.TODAY: accent,
        CellState.COMPLETED: accent.with_alpha(style.completed_alpha),
        CellState.FUTURE: with_alpha(style.neutral, style.future_alpha),
    }

    width, height = config.width, config.height
    center_x = width / 2
    ops: list[RectOp | TextOp] = [RectOp(0, 0, width, height, background)]

    ops.append(
        TextOp(center_x, geometry.top_padding * 0.5, str(facts.year), accent, width * 0.08, "700")
    )
    ops.append(
        TextOp(
            center_x,
            geometry.top_padding * 0.75,
            style.subtitle,
            with_alpha(style.neutral, style.subtitle_alpha),
            width * 0.035,
        )
    )

    radius = geometry.cell_size * style.corner_ratio
    for index in range(facts.total_days):
        x, y = cell_position(geometry, index)
        state = cell_state(index, facts.day_of_year)
        ops.append(RectOp(x, y, geometry.cell_size, geometry.cell_size, fills[state], radius))

    ops.append(
        TextOp(
            center_x,
            height - geometry.bottom_padding * 0.6,
            summary.summary_line,
            with_alpha(style.neutral, style.summary_alpha),
            width * 0.03,
        )
    )
    ops.append(
        TextOp(
            center_x,
            height - geometry.bottom_padding * 0.3,
            summary.week_line,
            with_alpha(style.neutral, style.week_alpha),
            width * 0.025,
        )
    )
    return Scene(width=width, height=height, ops=tuple(ops), font_family=style.font_family)


def render(config: RenderConfig, facts: DateFacts, surface=None):
    """Lay out the year and play it onto ``surface`` (an ``SvgSurface`` by default)."""
    scene = build_scene(config, facts)
    if surface is None:
        surface = SvgSurface()
    return surface.play(scene)
