"""Tests for the bar chart renderer."""

import pygame
import pytest

from audio_visualization.visualizers.bars import BarChartConfig, BarChartRenderer


@pytest.fixture
def renderer() -> BarChartRenderer:
    config = BarChartConfig(width=200, height=120, margin=10, header_height=20)
    return BarChartRenderer(config)


class TestBarGeometry:
    """Tests for bar rectangle computation."""

    def test_plot_area_respects_margins(self, renderer):
        area = renderer.plot_area()
        assert area.left == 10
        assert area.top == 30
        assert area.width == 180
        assert area.bottom == 110

    def test_one_rect_per_bar(self, renderer):
        bars = [(i, float(i)) for i in range(8)]
        assert len(renderer.bar_rects(bars)) == 8

    def test_empty_snapshot(self, renderer):
        assert renderer.bar_rects([]) == []

    def test_tallest_bar_fills_plot_height(self, renderer):
        area = renderer.plot_area()
        rects = renderer.bar_rects([(0, 1.0), (1, 4.0), (2, 2.0)])

        assert rects[1].height == area.height
        assert rects[0].height == pytest.approx(area.height / 4, abs=1)
        assert all(r.bottom == area.bottom for r in rects)

    def test_bars_ordered_left_to_right(self, renderer):
        rects = renderer.bar_rects([(i, 1.0) for i in range(16)])
        lefts = [r.left for r in rects]
        assert lefts == sorted(lefts)
        assert rects[-1].right <= renderer.plot_area().right

    def test_silence_gives_flat_bars(self, renderer):
        rects = renderer.bar_rects([(i, 0.0) for i in range(4)])
        assert all(r.height == 0 for r in rects)

    def test_no_title_uses_full_height(self):
        renderer = BarChartRenderer(BarChartConfig(height=100, margin=10, show_title=False))
        assert renderer.plot_area().top == 10


class TestBarDrawing:
    """Drawing onto off-screen surfaces with the dummy SDL driver."""

    @pytest.fixture
    def surface(self, renderer) -> pygame.Surface:
        return pygame.Surface((renderer.config.width, renderer.config.height))

    def test_bar_pixels_use_bar_color(self, renderer, surface):
        bars = [(0, 1.0), (1, 1.0)]
        renderer.draw(surface, bars)

        rect = renderer.bar_rects(bars)[0]
        assert surface.get_at(rect.center)[:3] == renderer.config.bar_color

    def test_empty_chart_is_background(self, renderer, surface):
        renderer.draw(surface, [])
        area = renderer.plot_area()
        assert surface.get_at(area.center)[:3] == renderer.config.background_color

    def test_draw_replaces_previous_frame(self, renderer, surface):
        """A flat frame after a tall one leaves no stale bar pixels."""
        bars = [(0, 1.0), (1, 1.0)]
        renderer.draw(surface, bars)
        rect = renderer.bar_rects(bars)[0]

        renderer.draw(surface, [(0, 0.0), (1, 0.0)])
        assert surface.get_at(rect.center)[:3] == renderer.config.background_color

    def test_draw_with_font(self, renderer, surface):
        """Title rendering works once pygame.font is initialised."""
        pygame.font.init()
        try:
            renderer.draw(surface, [(i, float(i)) for i in range(4)])
        finally:
            pygame.font.quit()
            renderer._font = None

        cfg = renderer.config
        header = [
            surface.get_at((x, y))[:3]
            for x in range(cfg.margin, cfg.width - cfg.margin)
            for y in range(cfg.margin, cfg.margin + cfg.header_height)
        ]
        assert any(pixel != cfg.background_color for pixel in header)
