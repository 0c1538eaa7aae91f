"""Built-in wallpaper color schemes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorScheme:
    name: str
    background: str
    accent: str


DEFAULT_THEME_NAME = "Midnight Ember"

THEMES: dict[str, ColorScheme] = {
    "Midnight Ember": ColorScheme(name="Midnight Ember", background="#0A0A0F", accent="#FF6B35"),
    "Neon Slate": ColorScheme(name="Neon Slate", background="#0A0F1D", accent="#35D9FF"),
    "Solar Drift": ColorScheme(name="Solar Drift", background="#1A140E", accent="#FFB347"),
    "Arctic Pulse": ColorScheme(name="Arctic Pulse", background="#07171F", accent="#59F3FF"),
    "Forest Night": ColorScheme(name="Forest Night", background="#0B1510", accent="#8CFFB5"),
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> ColorScheme:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])
