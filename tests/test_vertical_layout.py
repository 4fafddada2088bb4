import unittest

from app.flakepile.flakes import Tile
from app.flakepile.layout.geometry import GAP_X, PAD_X, PAD_Y, Rect, Size
from app.flakepile.layout.options import VerticalFlow
from app.flakepile.layout.vertical import resolve_vertical


def tiles(*ids):
    return [Tile(i) for i in ids]


class TestVerticalLayout(unittest.TestCase):
    def test_shortest_column_scenario(self):
        heights = {"a": 100, "b": 200, "c": 150, "d": 50}
        # 1000 usable once the side padding is taken
        result = resolve_vertical(tiles("a", "b", "c", "d"), heights, VerticalFlow(container_width=1032))

        # 3 fixed columns of 320 (984 wide), centered in [16, 1016]: lefts 24, 356, 688
        self.assertEqual(result.rects["a"], Rect(24, 8, 320, 100))
        self.assertEqual(result.rects["b"], Rect(356, 8, 320, 200))
        self.assertEqual(result.rects["c"], Rect(688, 8, 320, 150))
        # d goes under a, the shortest column (100 < 150 < 200)
        self.assertEqual(result.rects["d"], Rect(24, 120, 320, 50))

        # Tallest column 200+12 minus trailing gap, plus padding top and bottom
        self.assertEqual(result.canvas, Size(1032, 216))
        self.assertEqual(result.placed, {"a", "b", "c", "d"})

    def test_padding_reduces_column_count(self):
        # 968 usable: 3*320 + 2*12 = 984 no longer fits
        result = resolve_vertical(tiles("a", "b", "c"), {"a": 10, "b": 10, "c": 10}, VerticalFlow(container_width=1000))
        self.assertEqual(sorted({r.x for r in result.rects.values()}), [174, 506])
        for rect in result.rects.values():
            self.assertTrue(result.canvas.contains(rect, pad_x=PAD_X, pad_y=PAD_Y))

    def test_ties_resolve_to_lowest_column(self):
        heights = {"a": 100, "b": 100, "c": 100}
        result = resolve_vertical(tiles("a", "b", "c"), heights, VerticalFlow(container_width=696))

        self.assertEqual((result.rects["a"].x, result.rects["a"].y), (22, 8))
        self.assertEqual((result.rects["b"].x, result.rects["b"].y), (354, 8))
        self.assertEqual((result.rects["c"].x, result.rects["c"].y), (22, 120))

    def test_elastic_width_stretches_columns(self):
        heights = {"a": 100, "b": 100}
        result = resolve_vertical(
            tiles("a", "b"), heights, VerticalFlow(container_width=708, elastic_width=True)
        )
        self.assertEqual(result.rects["a"], Rect(16, 8, 332, 100))
        self.assertEqual(result.rects["b"], Rect(360, 8, 332, 100))
        self.assertEqual(result.rects["b"].right, 708 - PAD_X)

    def test_wide_tile_uses_single_full_width_column(self):
        heights = {"a": 100, "b": 40}
        result = resolve_vertical(
            tiles("a", "b"), heights, VerticalFlow(container_width=1000, tile_width_units=4)
        )
        self.assertEqual(result.rects["a"], Rect(16, 8, 968, 100))
        self.assertEqual(result.rects["b"], Rect(16, 120, 968, 40))

    def test_max_height_caps_tile_and_column(self):
        heights = {"a": 500, "b": 40}
        options = VerticalFlow(
            container_width=400, enable_max_height=True, max_height_units=0.5
        )
        result = resolve_vertical(tiles("a", "b"), heights, options)
        self.assertEqual(result.rects["a"].height, 160)
        self.assertEqual(result.rects["b"].y, 8 + 160 + 12)

    def test_unmeasured_tiles_are_skipped(self):
        heights = {"a": 100, "b": 0, "d": 80}
        result = resolve_vertical(tiles("a", "ghost", "b", "d"), heights, VerticalFlow(container_width=696))

        self.assertEqual(result.placed, {"a", "d"})
        self.assertEqual(set(result.rects), {"a", "d"})
        # ghost and b do not push d down: it lands at the top of column 1
        self.assertEqual((result.rects["d"].x, result.rects["d"].y), (354, 8))

    def test_empty_pile(self):
        result = resolve_vertical([], {}, VerticalFlow(container_width=500))
        self.assertEqual(result.placed, frozenset())
        self.assertEqual(result.canvas, Size(500, 2 * PAD_Y))

    def test_degenerate_container_does_not_raise(self):
        result = resolve_vertical(tiles("a"), {"a": 50}, VerticalFlow(container_width=0))
        self.assertEqual(result.rects["a"], Rect(16, 8, 0, 50))
        self.assertTrue(result.canvas.contains(result.rects["a"], pad_x=PAD_X, pad_y=PAD_Y))

    def test_deterministic(self):
        heights = {f"t{i}": 40 + (i * 37) % 200 for i in range(20)}
        order = tiles(*heights)
        options = VerticalFlow(container_width=1400, elastic_width=True)
        self.assertEqual(
            resolve_vertical(order, heights, options),
            resolve_vertical(order, heights, options),
        )

    def test_no_overlap_and_canvas_contains_all(self):
        heights = {f"t{i}": 40 + (i * 53) % 300 for i in range(30)}
        for elastic in (False, True):
            options = VerticalFlow(container_width=1400, elastic_width=elastic)
            result = resolve_vertical(tiles(*heights), heights, options)

            rects = list(result.rects.values())
            for i, first in enumerate(rects):
                self.assertGreaterEqual(first.x, PAD_X - 1e-9)
                self.assertLessEqual(first.right, result.canvas.width - PAD_X + 1e-9)
                self.assertTrue(result.canvas.contains(first, pad_y=PAD_Y))
                for second in rects[i + 1:]:
                    self.assertFalse(first.overlaps(second))
                    if first.x != second.x:
                        gap = max(second.x - first.right, first.x - second.right)
                        self.assertGreaterEqual(gap, GAP_X - 1e-9)


if __name__ == "__main__":
    unittest.main()
