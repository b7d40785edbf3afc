from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from termplot import Color, ConsolePlot, FixedRange, PlotConfig, load_config
from termplot.config import parse_config


class PlotConfigTests(unittest.TestCase):
    def _write(self, text: str) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        path = Path(tmp.name) / "plot.toml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_plot_table(self) -> None:
        path = self._write(
            "[plot]\n"
            "width = 40\n"
            "height = 12\n"
            'background = "dark_gray"\n'
            "invert_y = true\n"
            'x_format = "%6.2f"\n'
            "draw_range = [0, -1, 10, 1.5]\n"
        )
        config = load_config(path)
        self.assertEqual(config.width, 40)
        self.assertEqual(config.height, 12)
        self.assertEqual(config.background, Color.DARK_GRAY)
        self.assertTrue(config.invert_y)
        self.assertEqual(config.x_format, "%6.2f")
        self.assertEqual(config.y_format, "")
        self.assertEqual(config.draw_range, (0.0, -1.0, 10.0, 1.5))

    def test_top_level_keys_are_accepted(self) -> None:
        config = load_config(self._write("height = 5\nbackground = 4\n"))
        self.assertEqual(config.height, 5)
        self.assertEqual(config.background, Color.BLUE)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config(Path(tempfile.gettempdir()) / "termplot-does-not-exist.toml")

    def test_invalid_fields_raise_value_error(self) -> None:
        bad = [
            {"width": 0},
            {"height": "10"},
            {"background": "mauve"},
            {"invert_y": 1},
            {"y_format": "no placeholder"},
            {"draw_range": [0, 0, 1]},
            {"colour": "red"},
        ]
        for raw in bad:
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    parse_config(raw)

    def test_apply_configures_plot(self) -> None:
        plot = ConsolePlot(4, 2)
        PlotConfig(width=6, background=Color.GREEN, invert_y=True, draw_range=(0, 0, 1, 1)).apply(plot)
        self.assertEqual((plot.width, plot.height), (6, 2))
        self.assertEqual(plot.background, Color.GREEN)
        self.assertTrue(plot.inverted_y)
        self.assertIsInstance(plot.range_state, FixedRange)
        self.assertEqual(plot.grid.cell(0, 0).attr, 0x22)

    def test_presenter_carries_formats(self) -> None:
        presenter = PlotConfig(x_format="%4.1f", y_format="%3.0f").presenter()
        self.assertEqual((presenter.x_format, presenter.y_format), ("%4.1f", "%3.0f"))


if __name__ == "__main__":
    unittest.main()
