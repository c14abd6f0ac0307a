"""
Core module - landmark extraction, fully testable without audio files.

This module contains:
- Hamming window
- Injectable spectral transform
- Spectrogram builder
- Peak (landmark) detection
- Audio I/O glue (WAV, compressed containers)
"""

from .errors import LandmarkError, ConfigurationError, TransformError
from .window import hamming_window
from .transform import SpectralTransform, ScipyRealTransform
from .spectral import compute_spectrogram, count_frames, Spectrogram, SpectrogramConfig
from .peaks import find_peaks, sorted_landmarks, Landmark, PeakConfig
from .pipeline import extract_landmarks, LandmarkResult
from .audio_io import SampleBuffer, load_samples, convert_to_wav

__all__ = [
    "LandmarkError",
    "ConfigurationError",
    "TransformError",
    "hamming_window",
    "SpectralTransform",
    "ScipyRealTransform",
    "compute_spectrogram",
    "count_frames",
    "Spectrogram",
    "SpectrogramConfig",
    "find_peaks",
    "sorted_landmarks",
    "Landmark",
    "PeakConfig",
    "extract_landmarks",
    "LandmarkResult",
    "SampleBuffer",
    "load_samples",
    "convert_to_wav",
]
