from __future__ import annotations

import unittest

import numpy as np

from termplot.palette import Color
from termplot.raster.grid import Cell, CellGrid, GlyphKind, pack_attr


class CellGridTests(unittest.TestCase):
    def test_new_grid_is_filled_with_background(self) -> None:
        grid = CellGrid(3, 2, background=Color.BLUE)
        self.assertEqual(grid.subrows, 4)
        self.assertTrue(np.all(grid.kinds() == GlyphKind.EMPTY))
        self.assertTrue(np.all(grid.attributes() == 0x44))
        self.assertEqual(grid.cell(2, 1), Cell(kind=GlyphKind.EMPTY, char=" ", attr=0x44))

    def test_block_writes_only_the_nibble_for_its_subrow(self) -> None:
        grid = CellGrid(3, 2, background=Color.BLUE)
        grid.set_cell(1, 0, Color.RED)
        cell = grid.cell(1, 0)
        self.assertEqual(cell.kind, GlyphKind.BLOCK)
        self.assertEqual((cell.lower, cell.upper), (Color.RED, Color.BLUE))

        grid.set_cell(1, 1, Color.GREEN)
        cell = grid.cell(1, 0)
        self.assertEqual((cell.lower, cell.upper), (Color.RED, Color.GREEN))
        self.assertEqual(cell.glyph, "▀")

    def test_inverted_y_flips_subrow_parity(self) -> None:
        grid = CellGrid(2, 2, inverted_y=True)
        grid.set_cell(0, 0, Color.RED)
        grid.set_cell(0, 3, Color.CYAN)
        self.assertEqual(grid.cell(0, 0).upper, Color.RED)
        self.assertEqual(grid.cell(0, 0).lower, Color.BLACK)
        self.assertEqual(grid.cell(0, 1).lower, Color.CYAN)

    def test_literal_on_empty_sets_lower_nibble(self) -> None:
        grid = CellGrid(2, 2)
        grid.set_cell(0, 1, Color.RED, "x")
        self.assertEqual(grid.cell(0, 0), Cell(kind=GlyphKind.LITERAL, char="x", attr=0x01))

    def test_literal_over_drawn_block_shifts_previous_color_up(self) -> None:
        grid = CellGrid(2, 2)
        grid.set_cell(0, 0, Color.GREEN)
        grid.set_cell(0, 1, Color.CYAN)
        self.assertEqual(grid.cell(0, 0).attr, 0x62)

        grid.set_cell(0, 0, Color.RED, "*")
        cell = grid.cell(0, 0)
        self.assertEqual(cell.kind, GlyphKind.LITERAL)
        self.assertEqual(cell.char, "*")
        self.assertEqual(cell.attr, 0x21)

    def test_literal_over_block_with_background_lower_keeps_upper(self) -> None:
        grid = CellGrid(2, 2)
        grid.set_cell(0, 1, Color.CYAN)
        self.assertEqual(grid.cell(0, 0).attr, 0x60)

        grid.set_cell(0, 0, Color.RED, "*")
        self.assertEqual(grid.cell(0, 0).attr, 0x61)

    def test_colliding_literals_keep_both_colors(self) -> None:
        grid = CellGrid(2, 2)
        grid.set_cell(1, 2, Color.RED, "a")
        grid.set_cell(1, 3, Color.GREEN, "b")
        cell = grid.cell(1, 1)
        self.assertEqual(cell.char, "b")
        self.assertEqual((cell.lower, cell.upper), (Color.GREEN, Color.RED))

    def test_same_literal_again_leaves_attribute_untouched(self) -> None:
        grid = CellGrid(2, 2)
        grid.set_cell(0, 0, Color.RED, "a")
        grid.set_cell(0, 0, Color.GREEN, "a")
        self.assertEqual(grid.cell(0, 0), Cell(kind=GlyphKind.LITERAL, char="a", attr=0x01))

    def test_block_over_literal_keeps_the_character(self) -> None:
        grid = CellGrid(2, 2)
        grid.set_cell(0, 0, Color.RED, "a")
        grid.set_cell(0, 1, Color.GREEN)
        cell = grid.cell(0, 0)
        self.assertEqual(cell.kind, GlyphKind.LITERAL)
        self.assertEqual(cell.attr, 0x21)

    def test_space_glyph_leaves_cell_open_for_blocks(self) -> None:
        grid = CellGrid(2, 2)
        grid.set_cell(0, 0, Color.RED, " ")
        self.assertEqual(grid.cell(0, 0), Cell(kind=GlyphKind.EMPTY, char=" ", attr=0x01))

        grid.set_cell(0, 1, Color.GREEN)
        cell = grid.cell(0, 0)
        self.assertEqual(cell, Cell(kind=GlyphKind.BLOCK, char=" ", attr=0x21))
        self.assertEqual(cell.glyph, "▀")

    def test_out_of_range_writes_are_ignored(self) -> None:
        grid = CellGrid(3, 2)
        before = grid.snapshot()
        for col, subrow in [(-1, 0), (3, 0), (0, -1), (0, 4), (100, 100)]:
            grid.set_cell(col, subrow, Color.WHITE)
            grid.set_cell(col, subrow, Color.WHITE, "#")
        self.assertEqual(grid.snapshot(), before)

    def test_resize_reallocates_and_rejects_non_positive(self) -> None:
        grid = CellGrid(3, 2)
        grid.set_cell(0, 0, Color.WHITE)
        grid.resize(5, 4)
        self.assertEqual((grid.width, grid.height), (5, 4))
        self.assertTrue(np.all(grid.kinds() == GlyphKind.EMPTY))
        with self.assertRaises(ValueError):
            grid.resize(0, 4)
        with self.assertRaises(ValueError):
            CellGrid(3, -1)

    def test_reset_uses_current_background(self) -> None:
        grid = CellGrid(2, 1)
        grid.set_cell(1, 0, Color.WHITE, "z")
        grid.background = Color.YELLOW
        grid.reset()
        self.assertTrue(np.all(grid.attributes() == pack_attr(Color.YELLOW, Color.YELLOW)))
        self.assertEqual(grid.cell(1, 0).char, " ")

    def test_rows_follow_requested_direction(self) -> None:
        grid = CellGrid(1, 3)
        self.assertEqual([row for row, _ in grid.rows()], [0, 1, 2])
        self.assertEqual([row for row, _ in grid.rows(inverted=True)], [2, 1, 0])
        grid.inverted_y = True
        self.assertEqual([row for row, _ in grid.rows()], [2, 1, 0])

    def test_cell_outside_grid_raises(self) -> None:
        grid = CellGrid(2, 2)
        with self.assertRaises(IndexError):
            grid.cell(2, 0)


if __name__ == "__main__":
    unittest.main()
