"""Visualization modules for the live magnitude chart."""

from audio_visualization.visualizers.bars import BarChartConfig, BarChartRenderer

__all__ = ["BarChartConfig", "BarChartRenderer"]
