"""CLI entrypoints for rendering year progress wallpapers and inspecting their inputs."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfoNotFoundError

from yearprogress_core import (
    AppConfig,
    config_path,
    configure_logging,
    facts_for_date,
    get_logger,
    load_config,
    resolve_date_facts,
    weeks_in_year,
)
from yearprogress_core.config import OUTPUT_FORMATS
from yearprogress_renderer import (
    DateFacts,
    RasterSurface,
    RenderConfig,
    SvgSurface,
    build_scene,
    compute_geometry,
    get_theme,
    list_themes,
    summarize,
    validate_inputs,
)
from yearprogress_renderer.themes import THEMES


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _load(args: argparse.Namespace) -> AppConfig:
    return load_config(Path(args.config).expanduser() if args.config else None)


def _pick(args: argparse.Namespace, name: str, fallback):
    value = getattr(args, name, None)
    return fallback if value is None else value


def _scheme_colors(args: argparse.Namespace, cfg: AppConfig) -> tuple[str, str]:
    # An explicit --theme beats color overrides from the settings file.
    theme = getattr(args, "theme", None)
    if theme:
        scheme = get_theme(theme)
        return scheme.background, scheme.accent
    scheme = get_theme(cfg.render.theme)
    return cfg.render.background_color or scheme.background, cfg.render.accent_color or scheme.accent


def _render_config(args: argparse.Namespace, cfg: AppConfig) -> RenderConfig:
    background, accent = _scheme_colors(args, cfg)
    return RenderConfig(
        width=_pick(args, "width", cfg.render.width),
        height=_pick(args, "height", cfg.render.height),
        background_color=getattr(args, "background", None) or background,
        accent_color=getattr(args, "accent", None) or accent,
        timezone=args.timezone or cfg.render.timezone,
    )


def _date_facts(args: argparse.Namespace, render_cfg: RenderConfig) -> DateFacts:
    if args.date is not None:
        return facts_for_date(args.date)
    return resolve_date_facts(render_cfg.timezone)


def _output_path(args: argparse.Namespace, cfg: AppConfig, fmt: str, facts: DateFacts) -> Path | None:
    if args.out:
        return Path(args.out).expanduser()
    if cfg.output.directory:
        return Path(cfg.output.directory).expanduser() / f"year-progress-{facts.year}.{fmt}"
    return None


def cmd_render(args: argparse.Namespace) -> int:
    logger = get_logger()
    cfg = _load(args)
    render_cfg = _render_config(args, cfg)
    facts = _date_facts(args, render_cfg)
    fmt = args.format or cfg.output.format
    out = _output_path(args, cfg, fmt, facts)
    if fmt == "png" and out is None:
        raise ValueError("PNG output needs --out or output.directory in the config file")

    scene = build_scene(render_cfg, facts)
    surface = RasterSurface() if fmt == "png" else SvgSurface()
    document = surface.play(scene)
    logger.info(
        f"rendered year={facts.year} day={facts.day_of_year}/{facts.total_days} format={fmt}",
        extra={"event": "render_complete"},
    )

    if out is None:
        sys.stdout.write(document.to_string())
        return 0

    document.save(out)
    logger.info(f"wrote {out}", extra={"event": "render_saved"})
    _print_json({"success": True, "path": str(out), "format": fmt, "year": facts.year})
    return 0


def cmd_facts(args: argparse.Namespace) -> int:
    cfg = _load(args)
    render_cfg = _render_config(args, cfg)
    facts = _date_facts(args, render_cfg)
    validate_inputs(render_cfg, facts)
    geometry = compute_geometry(render_cfg, facts.total_days)
    summary = summarize(facts, render_cfg.style)

    geometry_payload = asdict(geometry)
    geometry_payload["grid_width"] = geometry.grid_width
    geometry_payload["grid_height"] = geometry.grid_height
    _print_json(
        {
            "timezone": render_cfg.timezone,
            "facts": asdict(facts),
            "weeks_in_year": weeks_in_year(facts.year),
            "canvas": {"width": render_cfg.width, "height": render_cfg.height},
            "geometry": geometry_payload,
            "summary": asdict(summary),
        }
    )
    return 0


def cmd_themes(_args: argparse.Namespace) -> int:
    _print_json([asdict(THEMES[name]) for name in list_themes()])
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    if args.config_cmd == "path":
        print(Path(args.config).expanduser() if args.config else config_path())
        return 0
    _print_json(asdict(_load(args)))
    return 0


def _add_date_options(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--timezone", default=None, help="IANA timezone used to resolve today")
    cmd.add_argument("--date", type=date.fromisoformat, default=None, help="Render for YYYY-MM-DD instead of today")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yearprogress", description="Year progress wallpaper generator")
    parser.add_argument("--config", default=None, help="Optional settings file path")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render the wallpaper")
    render_cmd.add_argument("--width", type=float, default=None)
    render_cmd.add_argument("--height", type=float, default=None)
    render_cmd.add_argument(
        "--theme",
        choices=list_themes(),
        default=None,
        help="Color scheme; overrides colors from the settings file, --background/--accent override it",
    )
    render_cmd.add_argument("--background", default=None, help="Background color, e.g. #000000")
    render_cmd.add_argument("--accent", default=None, help="Accent color, e.g. #FF6B35")
    render_cmd.add_argument("--format", choices=list(OUTPUT_FORMATS), default=None)
    render_cmd.add_argument("--out", default=None, help="Output file; SVG goes to stdout when omitted")
    _add_date_options(render_cmd)
    render_cmd.set_defaults(func=cmd_render)

    facts_cmd = sub.add_parser("facts", help="Print date facts, grid geometry, and summary as JSON")
    facts_cmd.add_argument("--width", type=float, default=None)
    facts_cmd.add_argument("--height", type=float, default=None)
    _add_date_options(facts_cmd)
    facts_cmd.set_defaults(func=cmd_facts)

    themes_cmd = sub.add_parser("themes", help="List built-in color schemes")
    themes_cmd.set_defaults(func=cmd_themes)

    config_cmd = sub.add_parser("config", help="Inspect settings")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    config_sub.add_parser("show", help="Print effective settings").set_defaults(func=cmd_config)
    config_sub.add_parser("path", help="Print settings file path").set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        diagnostics = _load(args).diagnostics
        configure_logging(keep_files=diagnostics.keep_log_files, console=diagnostics.console_logging)
        return int(args.func(args))
    except (ValueError, ZoneInfoNotFoundError) as exc:
        get_logger().error(f"{args.command} failed: {exc}", exc_info=True, extra={"event": "command_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
