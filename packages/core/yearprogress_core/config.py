"""Persistent wallpaper settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from yearprogress_renderer.themes import DEFAULT_THEME_NAME, THEMES


CONFIG_VERSION = 1
OUTPUT_FORMATS = ("svg", "png")


@dataclass
class RenderSettings:
    width: float = 1170
    height: float = 2532
    theme: str = DEFAULT_THEME_NAME
    background_color: str | None = None
    accent_color: str | None = None
    timezone: str = "UTC"


@dataclass
class OutputSettings:
    format: str = "svg"
    directory: str | None = None


@dataclass
class DiagnosticsSettings:
    keep_log_files: int = 7
    console_logging: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderSettings = field(default_factory=RenderSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    diagnostics: DiagnosticsSettings = field(default_factory=DiagnosticsSettings)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "YearProgress"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "YearProgress"
    return Path.home() / ".config" / "yearprogress"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _positive(value: Any, fallback: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    return number if number > 0 else fallback


def _int_at_least(value: Any, floor: int, fallback: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    return max(floor, number)


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _normalize_render(cfg: AppConfig) -> None:
    defaults = RenderSettings()
    cfg.render.width = _positive(cfg.render.width, defaults.width)
    cfg.render.height = _positive(cfg.render.height, defaults.height)
    if not isinstance(cfg.render.theme, str) or cfg.render.theme not in THEMES:
        cfg.render.theme = DEFAULT_THEME_NAME
    if not isinstance(cfg.render.timezone, str) or not cfg.render.timezone:
        cfg.render.timezone = defaults.timezone
    cfg.render.background_color = _optional_str(cfg.render.background_color)
    cfg.render.accent_color = _optional_str(cfg.render.accent_color)


def _normalize_output(cfg: AppConfig) -> None:
    if not isinstance(cfg.output.format, str) or cfg.output.format not in OUTPUT_FORMATS:
        cfg.output.format = "svg"
    cfg.output.directory = _optional_str(cfg.output.directory)


def _normalize_diagnostics(cfg: AppConfig) -> None:
    defaults = DiagnosticsSettings()
    cfg.diagnostics.keep_log_files = _int_at_least(cfg.diagnostics.keep_log_files, 2, defaults.keep_log_files)
    cfg.diagnostics.console_logging = bool(cfg.diagnostics.console_logging)


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_int_at_least(data.get("config_version", CONFIG_VERSION), 1, CONFIG_VERSION),
        render=_merge(RenderSettings, data.get("render", {})),
        output=_merge(OutputSettings, data.get("output", {})),
        diagnostics=_merge(DiagnosticsSettings, data.get("diagnostics", {})),
    )

    _normalize_render(cfg)
    _normalize_output(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
