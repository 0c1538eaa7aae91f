"""Renderer package for year progress wallpapers."""

from .colors import Color, parse_color, with_alpha
from .layout import (
    LayoutInputError,
    build_scene,
    cell_position,
    cell_state,
    compute_geometry,
    progress_percent,
    render,
    summarize,
    validate_inputs,
)
from .models import (
    DEFAULT_STYLE,
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
from .raster import RasterDocument, RasterSurface
from .svg import SvgDocument, SvgSurface
from .themes import DEFAULT_THEME_NAME, ColorScheme, get_theme, list_themes

__all__ = [
    "CellState",
    "Color",
    "ColorScheme",
    "DEFAULT_STYLE",
    "DEFAULT_THEME_NAME",
    "DateFacts",
    "GridGeometry",
    "LayoutInputError",
    "OverlayStyle",
    "RasterDocument",
    "RasterSurface",
    "RectOp",
    "RenderConfig",
    "Scene",
    "Summary",
    "SvgDocument",
    "SvgSurface",
    "TextOp",
    "build_scene",
    "cell_position",
    "cell_state",
    "compute_geometry",
    "get_theme",
    "list_themes",
    "parse_color",
    "progress_percent",
    "render",
    "summarize",
    "validate_inputs",
    "with_alpha",
]
