"""
Utility module for Audio Landmarks.

Contains display helpers used by the command line entry point.
"""

from .formatting import (
    format_time,
    format_frequency,
    format_sample_rate,
    format_amplitude,
    format_landmark_row,
)

__all__ = [
    "format_time",
    "format_frequency",
    "format_sample_rate",
    "format_amplitude",
    "format_landmark_row",
]
