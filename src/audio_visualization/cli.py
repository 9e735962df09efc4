"""
Command-line interface for the live spectrum visualizer.
"""

import argparse
import logging
import sys
from pathlib import Path

from audio_visualization.core.analyzer import FFT_SIZE


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="audio-visualize",
        description="Play an audio file with a live FFT magnitude chart",
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Input audio file (wav, mp3, flac, ogg)",
    )

    parser.add_argument(
        "-n", "--fft-size",
        type=int,
        default=FFT_SIZE,
        help=f"FFT width in samples, power of two (default: {FFT_SIZE})",
    )

    parser.add_argument(
        "-w", "--window",
        default="boxcar",
        help="Taper applied before the FFT, e.g. hann (default: boxcar, no taper)",
    )

    parser.add_argument(
        "--threaded",
        action="store_true",
        help="Run analysis on a worker thread instead of once per frame",
    )

    parser.add_argument(
        "--interval",
        type=float,
        default=1 / 120,
        help="Worker tick interval in seconds with --threaded (default: 0.0083)",
    )

    parser.add_argument(
        "--width",
        type=int,
        default=960,
        help="Window width (default: 960)",
    )

    parser.add_argument(
        "--height",
        type=int,
        default=540,
        help="Window height (default: 540)",
    )

    parser.add_argument(
        "-f", "--fps",
        type=int,
        default=0,
        help="Frame rate cap, 0 for continuous redraw (default: 0)",
    )

    parser.add_argument(
        "--exit-on-end",
        action="store_true",
        help="Close the window when the track finishes",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log decode and playback details",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output",
    )

    return parser


def config_from_args(args: argparse.Namespace):
    """Build a SessionConfig from parsed arguments."""
    from audio_visualization.session import SessionConfig
    from audio_visualization.visualizers.bars import BarChartConfig

    return SessionConfig(
        fft_size=args.fft_size,
        window=args.window,
        threaded=args.threaded,
        worker_interval=args.interval,
        max_fps=args.fps,
        exit_on_end=args.exit_on_end,
        chart=BarChartConfig(width=args.width, height=args.height),
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # Validate input
    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    import pygame

    from audio_visualization.core.decoder import DecodeError
    from audio_visualization.io.playback import PlaybackError
    from audio_visualization.session import VisualizationSession

    try:
        session = VisualizationSession(args.input, config_from_args(args))

        if not args.quiet:
            print(f"Decoding: {args.input}", flush=True)
        decoded = session.prepare()

        if not args.quiet:
            print(f"Sample rate: {decoded.sample_rate} Hz", flush=True)
            print(f"Duration: {decoded.duration:.2f}s", flush=True)
            print(f"FFT size: {args.fft_size}", flush=True)

        session.run()
    except (DecodeError, PlaybackError, ValueError, pygame.error) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
