import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from yearprogress_renderer.layout import (
    LayoutInputError,
    build_scene,
    cell_position,
    cell_state,
    compute_geometry,
    progress_percent,
    render,
    summarize,
)
from yearprogress_renderer.models import CellState, DateFacts, OverlayStyle, RenderConfig


def _config(width=1000, height=2000, **kwargs):
    return RenderConfig(width=width, height=height, background_color="#000000", accent_color="#FF6B35", **kwargs)


def _states(facts):
    return [cell_state(i, facts.day_of_year) for i in range(facts.total_days)]


class GeometryTests(unittest.TestCase):
    def test_rows_for_common_and_leap_years(self):
        self.assertEqual(compute_geometry(_config(), 365).rows, 53)
        self.assertEqual(compute_geometry(_config(), 366).rows, 53)
        self.assertEqual(compute_geometry(_config(), 366).cols, 7)

    def test_cell_size_is_binding_minimum(self):
        geo = compute_geometry(_config(), 365)
        cell_width = (geo.available_width - geo.gap * 6) / 7
        cell_height = (geo.available_height - geo.gap * 52) / 53
        self.assertAlmostEqual(geo.cell_size, min(cell_width, cell_height))
        self.assertAlmostEqual(geo.cell_size, cell_height)

    def test_wide_canvas_binds_on_width(self):
        geo = compute_geometry(_config(width=1000, height=100000), 365)
        self.assertAlmostEqual(geo.cell_size, (geo.available_width - geo.gap * 6) / 7)

    def test_grid_fits_available_area(self):
        for width, height in ((1000, 2000), (1170, 2532), (2000, 1200), (640, 640)):
            geo = compute_geometry(_config(width=width, height=height), 366)
            self.assertLessEqual(geo.grid_width, geo.available_width + 1e-9)
            self.assertLessEqual(geo.grid_height, geo.available_height + 1e-9)

    def test_grid_is_centered(self):
        cfg = _config(width=1170, height=2532)
        geo = compute_geometry(cfg, 365)
        self.assertAlmostEqual(geo.start_x + geo.grid_width / 2, cfg.width / 2)
        band_center = geo.top_padding + geo.available_height / 2
        self.assertAlmostEqual(geo.start_y + geo.grid_height / 2, band_center)

    def test_gap_floor(self):
        self.assertEqual(compute_geometry(_config(width=300, height=900), 365).gap, 3)
        self.assertAlmostEqual(compute_geometry(_config(width=2000, height=4000), 365).gap, 10)

    def test_cell_position_row_major(self):
        geo = compute_geometry(_config(), 365)
        step = geo.cell_size + geo.gap
        x, y = cell_position(geo, 15)
        self.assertAlmostEqual(x, geo.start_x + 1 * step)
        self.assertAlmostEqual(y, geo.start_y + 2 * step)


class CellStateTests(unittest.TestCase):
    def test_partition_counts(self):
        for total in (365, 366):
            for day in (1, 2, 100, total - 1, total):
                states = _states(DateFacts(year=2024, day_of_year=day, week_of_year=1, total_days=total))
                self.assertEqual(states.count(CellState.TODAY), 1)
                self.assertEqual(states.count(CellState.COMPLETED), day - 1)
                self.assertEqual(states.count(CellState.FUTURE), total - day)

    def test_scenario_day_100(self):
        states = _states(DateFacts(year=2025, day_of_year=100, week_of_year=15, total_days=365))
        self.assertEqual(states[99], CellState.TODAY)
        self.assertTrue(all(s == CellState.COMPLETED for s in states[:99]))
        self.assertTrue(all(s == CellState.FUTURE for s in states[100:]))


class SummaryTests(unittest.TestCase):
    def test_scenario_text(self):
        summary = summarize(DateFacts(year=2025, day_of_year=100, week_of_year=15, total_days=365))
        self.assertEqual(summary.summary_line, "27% complete · 265 days remaining")
        self.assertEqual(summary.week_line, "Week 15 of 52")

    def test_last_day(self):
        summary = summarize(DateFacts(year=2024, day_of_year=366, week_of_year=1, total_days=366))
        self.assertEqual(summary.progress_percent, 100)
        self.assertEqual(summary.days_remaining, 0)

    def test_first_day_rounds_down(self):
        self.assertEqual(progress_percent(1, 365), 0)

    def test_half_rounds_up(self):
        self.assertEqual(progress_percent(1, 200), 1)
        self.assertEqual(progress_percent(101, 200), 51)

    def test_week_label_total_is_configurable(self):
        facts = DateFacts(year=2026, day_of_year=364, week_of_year=53, total_days=365)
        self.assertEqual(summarize(facts).week_line, "Week 53 of 52")
        self.assertEqual(summarize(facts, OverlayStyle(week_label_total=53)).week_line, "Week 53 of 53")


class SceneTests(unittest.TestCase):
    def test_scenario_scene(self):
        facts = DateFacts(year=2025, day_of_year=100, week_of_year=15, total_days=365)
        scene = build_scene(_config(), facts)
        rects = scene.rects()
        texts = scene.texts()

        self.assertEqual(len(rects), 1 + 365)
        self.assertEqual((rects[0].width, rects[0].height), (1000, 2000))
        self.assertEqual([t.content for t in texts], [
            "2025",
            "Year Progress",
            "27% complete · 265 days remaining",
            "Week 15 of 52",
        ])

        cells = rects[1:]
        self.assertEqual(cells[99].fill.hex, "#ff6b35")
        self.assertEqual(cells[99].fill.alpha, 1.0)
        self.assertEqual(cells[0].fill.alpha, 0.6)
        self.assertEqual(cells[100].fill.hex, "#ffffff")
        self.assertEqual(cells[100].fill.alpha, 0.08)
        self.assertEqual(len({c.width for c in cells}), 1)
        self.assertAlmostEqual(cells[0].radius, cells[0].width * 0.15)

    def test_text_positions(self):
        scene = build_scene(_config(), DateFacts(year=2025, day_of_year=1, week_of_year=1, total_days=365))
        year, subtitle, summary, week = scene.texts()
        self.assertAlmostEqual(year.y, 200)
        self.assertAlmostEqual(subtitle.y, 300)
        self.assertAlmostEqual(summary.y, 2000 - 240 * 0.6)
        self.assertAlmostEqual(week.y, 2000 - 240 * 0.3)
        self.assertTrue(all(t.x == 500 and t.anchor == "middle" for t in scene.texts()))
        self.assertEqual(year.font_weight, "700")
        self.assertAlmostEqual(year.font_size, 80)

    def test_leap_year_last_row_partial(self):
        scene = build_scene(_config(), DateFacts(year=2024, day_of_year=60, week_of_year=9, total_days=366))
        cells = scene.rects()[1:]
        geo = compute_geometry(_config(), 366)
        self.assertEqual(len(cells), 366)
        last_row_y = geo.start_y + (geo.rows - 1) * (geo.cell_size + geo.gap)
        self.assertEqual(sum(1 for c in cells if math.isclose(c.y, last_row_y)), 2)

    def test_invalid_inputs_rejected(self):
        cfg = _config()
        bad = [
            (cfg, DateFacts(year=2025, day_of_year=0, week_of_year=1, total_days=365)),
            (cfg, DateFacts(year=2025, day_of_year=366, week_of_year=1, total_days=365)),
            (cfg, DateFacts(year=2025, day_of_year=1, week_of_year=1, total_days=0)),
            (_config(width=0), DateFacts(year=2025, day_of_year=1, week_of_year=1, total_days=365)),
            (_config(height=-5), DateFacts(year=2025, day_of_year=1, week_of_year=1, total_days=365)),
        ]
        for config, facts in bad:
            with self.assertRaises(LayoutInputError):
                build_scene(config, facts)

    def test_error_names_invariant(self):
        with self.assertRaisesRegex(LayoutInputError, "day_of_year"):
            build_scene(_config(), DateFacts(year=2025, day_of_year=400, week_of_year=1, total_days=365))

    def test_tiny_canvas_rejected(self):
        with self.assertRaises(LayoutInputError):
            build_scene(_config(width=10, height=10), DateFacts(year=2025, day_of_year=1, week_of_year=1, total_days=365))

    def test_bad_color_propagates(self):
        cfg = RenderConfig(width=1000, height=2000, background_color="#000000", accent_color="not-a-color")
        with self.assertRaises(ValueError):
            build_scene(cfg, DateFacts(year=2025, day_of_year=1, week_of_year=1, total_days=365))

    def test_render_is_deterministic(self):
        facts = DateFacts(year=2025, day_of_year=100, week_of_year=15, total_days=365)
        first = render(_config(), facts).to_string()
        second = render(_config(), facts).to_string()
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
