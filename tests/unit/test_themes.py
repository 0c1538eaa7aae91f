import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from yearprogress_renderer.colors import parse_color
from yearprogress_renderer.themes import DEFAULT_THEME_NAME, THEMES, get_theme, list_themes


class ThemeTests(unittest.TestCase):
    def test_default_and_fallback(self):
        self.assertEqual(get_theme(None).name, DEFAULT_THEME_NAME)
        self.assertEqual(get_theme("Unknown Theme").name, DEFAULT_THEME_NAME)
        self.assertEqual(get_theme("Neon Slate").accent, "#35D9FF")

    def test_listing_is_sorted(self):
        names = list_themes()
        self.assertEqual(names, sorted(THEMES))
        self.assertIn(DEFAULT_THEME_NAME, names)

    def test_theme_colors_parse(self):
        for scheme in THEMES.values():
            parse_color(scheme.background)
            parse_color(scheme.accent)


if __name__ == "__main__":
    unittest.main()
