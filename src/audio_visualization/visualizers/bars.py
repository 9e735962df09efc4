"""
Magnitude bar chart renderer.

Draws the visual buffer snapshot as one vertical bar per entry:
- Index → horizontal position
- Magnitude → bar height, scaled to the tallest bar in the snapshot
"""

from dataclasses import dataclass
from typing import Sequence

import pygame


@dataclass
class BarChartConfig:
    """Configuration for the bar chart renderer."""

    width: int = 960
    height: int = 540
    title: str = "Audio Visualization"
    bar_color: tuple[int, int, int] = (173, 216, 230)  # Light blue
    axis_color: tuple[int, int, int] = (90, 90, 100)
    text_color: tuple[int, int, int] = (220, 220, 220)
    background_color: tuple[int, int, int] = (27, 27, 27)
    margin: int = 24  # Padding around the plot area
    header_height: int = 40  # Space reserved for the heading
    bar_gap: float = 0.1  # Fraction of each slot left empty
    show_title: bool = True


class BarChartRenderer:
    """
    Renders (index, magnitude) pairs as a bar chart on a pygame surface.

    Geometry is computed separately from drawing so it can be checked
    without a display.
    """

    def __init__(self, config: BarChartConfig | None = None):
        """
        Initialize the renderer.

        Args:
            config: Rendering configuration. Uses defaults if None.
        """
        self.config = config or BarChartConfig()
        self._font: pygame.font.Font | None = None

    def plot_area(self) -> pygame.Rect:
        """Rectangle the bars are drawn into."""
        cfg = self.config
        top = cfg.margin + (cfg.header_height if cfg.show_title else 0)
        return pygame.Rect(
            cfg.margin,
            top,
            max(1, cfg.width - 2 * cfg.margin),
            max(1, cfg.height - top - cfg.margin),
        )

    def bar_rects(self, bars: Sequence[tuple[int, float]]) -> list[pygame.Rect]:
        """
        Compute one rectangle per bar.

        Args:
            bars: (index, magnitude) pairs from the visual buffer.

        Returns:
            Rects anchored to the bottom of the plot area. An all-zero
            snapshot yields zero-height bars.
        """
        if not bars:
            return []

        area = self.plot_area()
        slot = area.width / len(bars)
        bar_width = max(1, int(slot * (1.0 - self.config.bar_gap)))

        peak = max(magnitude for _, magnitude in bars)
        scale = area.height / peak if peak > 0 else 0.0

        rects = []
        for index, magnitude in bars:
            height = int(round(max(0.0, magnitude) * scale))
            left = area.left + int(index * slot)
            rects.append(pygame.Rect(left, area.bottom - height, bar_width, height))
        return rects

    def _get_font(self) -> pygame.font.Font | None:
        if self._font is None and pygame.font.get_init():
            self._font = pygame.font.Font(None, 28)
        return self._font

    def _draw_title(self, surface: pygame.Surface):
        font = self._get_font()
        if font is None:
            return
        cfg = self.config
        text = font.render(cfg.title, True, cfg.text_color)
        surface.blit(text, (cfg.margin, cfg.margin))

    def draw(self, surface: pygame.Surface, bars: Sequence[tuple[int, float]]):
        """
        Draw one frame onto `surface`.

        Args:
            surface: Target surface, usually the display.
            bars: (index, magnitude) pairs from the visual buffer.
        """
        cfg = self.config
        surface.fill(cfg.background_color)

        if cfg.show_title:
            self._draw_title(surface)

        area = self.plot_area()
        pygame.draw.line(surface, cfg.axis_color, area.bottomleft, area.bottomright)
        pygame.draw.line(surface, cfg.axis_color, area.bottomleft, area.topleft)

        for rect in self.bar_rects(bars):
            if rect.height > 0:
                pygame.draw.rect(surface, cfg.bar_color, rect)

