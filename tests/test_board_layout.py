"""Tests for the board's pixel <-> cell mapping."""
from __future__ import annotations

from moverange.scenes.board import BoardLayout


class TestBoardLayout:
    def test_row_zero_is_drawn_at_the_bottom(self) -> None:
        layout = BoardLayout(size=12, tile_size=50, margin=50)
        assert layout.to_px(0, 0) == (50, 50 + 11 * 50)
        assert layout.to_px(0, 11) == (50, 50)

    def test_pixel_inside_tile_maps_back(self) -> None:
        layout = BoardLayout(size=12, tile_size=50, margin=50)
        x, y = layout.to_px(3, 7)
        assert layout.from_px(x + 10, y + 40) == (3, 7)

    def test_margin_is_out_of_bounds(self) -> None:
        layout = BoardLayout(size=4, tile_size=50, margin=50)
        col, row = layout.from_px(10, 10)
        assert col < 0 or row >= 4
