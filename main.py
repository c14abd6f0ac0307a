#!/usr/bin/env python3
"""
Audio Landmarks - Einstiegspunkt

Extrahiert Zeit-Frequenz-Landmarken aus einer Audiodatei.

Verwendung:
    python main.py [-v] [--threshold T] audio_file

Beispiel:
    python main.py recording.wav
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "audio_landmarks"


class ConsoleFormatter(logging.Formatter):
    """Timestamped, level-aligned console output."""

    def format(self, record):
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        return f"[{timestamp}] {record.levelname:<8} │ {record.getMessage()}"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ConsoleFormatter())
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio-landmarks",
        description="Extract spectrogram landmarks from an audio file.",
    )
    parser.add_argument("audio_file", type=Path, help="WAV, MP3, FLAC, OGG or M4A file")
    parser.add_argument("--window-size", type=int, default=1024)
    parser.add_argument("--hop-size", type=int, default=512)
    parser.add_argument("--min-bin", type=int, default=30)
    parser.add_argument("--max-bin", type=int, default=300)
    parser.add_argument("--neighborhood", type=int, nargs=2, default=(3, 3),
                        metavar=("TIME", "FREQ"))
    parser.add_argument("--threshold", type=float, default=0.5)
    parser.add_argument("--limit", type=int, default=20,
                        help="Number of landmarks to print (0 = all)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run landmark extraction and print a summary table."""
    args = build_parser().parse_args(argv)
    log = setup_logging(args.verbose)

    from audio_landmarks.core import (
        LandmarkError,
        PeakConfig,
        SpectrogramConfig,
        extract_landmarks,
        load_samples,
    )
    from audio_landmarks.core.signal_processing import compute_peak
    from audio_landmarks.utils import format_landmark_row, format_sample_rate, format_time

    try:
        spectrogram_config = SpectrogramConfig(window_size=args.window_size, hop_size=args.hop_size)
        peak_config = PeakConfig(
            min_freq_bin=args.min_bin,
            max_freq_bin=args.max_bin,
            neighborhood=tuple(args.neighborhood),
            threshold=args.threshold,
        )
        buffer = load_samples(args.audio_file)
        log.info(
            "Loaded %s: %s, %s, peak %.1f dBFS",
            args.audio_file.name,
            format_time(buffer.duration_seconds),
            format_sample_rate(buffer.sample_rate),
            compute_peak(buffer.samples, as_db=True),
        )
        result = extract_landmarks(
            buffer,
            spectrogram_config=spectrogram_config,
            peak_config=peak_config,
        )
    except (FileNotFoundError, ValueError, RuntimeError, LandmarkError) as e:
        log.error("%s", e)
        return 1

    landmarks = result.ordered()
    shown = landmarks if args.limit <= 0 else landmarks[:args.limit]

    print(f"{'frame':>6}  {'time':>9}  {'bin':>4}  {'freq':>9}  {'amplitude':>9}")
    for lm in shown:
        print(format_landmark_row(
            lm.frame_index,
            lm.bin_index,
            lm.amplitude,
            lm.time_seconds(spectrogram_config.hop_size, buffer.sample_rate),
            lm.frequency_hz(spectrogram_config.window_size, buffer.sample_rate),
        ))
    print(f"{len(landmarks)} landmarks in {result.spectrogram.num_frames} frames")

    return 0


if __name__ == "__main__":
    sys.exit(main())
