"""
Spectrogram Module

Builds the magnitude spectrogram that the peak detector scans.

Technical assumptions:
- Frames of `window_size` samples, starting every `hop_size` samples
- Hamming window applied to each frame
- Only the first window_size/2 bins are kept (non-mirrored half)
- Raw magnitudes: no power, no dB, no energy normalization
- The trailing remainder that cannot fill a frame is dropped, never padded
- The frame starting exactly at len(samples) - window_size is not produced
  (loop bound is strict)
"""

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence
import numpy as np

from .errors import ConfigurationError
from .transform import ScipyRealTransform, SpectralTransform, run_transform
from .window import hamming_window

logger = logging.getLogger(__name__)


@dataclass
class SpectrogramConfig:
    """
    Configuration for spectrogram computation.

    Attributes:
        window_size: Frame length in samples (must be even)
        hop_size: Step between frame starts in samples
    """
    window_size: int = 1024
    hop_size: int = 512

    def __post_init__(self):
        """Validate before any frame is processed."""
        for name in ("window_size", "hop_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ConfigurationError(f"{name} must be an integer, got: {value!r}")

        if self.window_size <= 0:
            raise ConfigurationError(f"Window size must be positive, got: {self.window_size}")
        if self.hop_size <= 0:
            raise ConfigurationError(f"Hop size must be positive, got: {self.hop_size}")
        if self.window_size % 2 != 0:
            raise ConfigurationError(f"Window size must be even, got: {self.window_size}")

    @property
    def num_bins(self) -> int:
        """Bins per magnitude row."""
        return self.window_size // 2

    @property
    def effective_overlap(self) -> float:
        """Overlap between consecutive frames in percent (0 if hop >= window)."""
        return max(0.0, (1 - self.hop_size / self.window_size) * 100)

    def frequency_resolution(self, sample_rate: int) -> float:
        """Bin spacing in Hz."""
        return sample_rate / self.window_size

    def time_resolution(self, sample_rate: int) -> float:
        """Frame spacing in seconds."""
        return self.hop_size / sample_rate


@dataclass
class Spectrogram:
    """
    Time-ordered magnitude rows.

    Attributes:
        rows: One magnitude spectrum per frame, index = frame number
        sample_rate: Sample rate of input data
        config: Configuration used to build the rows
    """
    rows: list[np.ndarray]
    sample_rate: int
    config: SpectrogramConfig = field(default_factory=SpectrogramConfig)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.rows[index]

    def __iter__(self):
        return iter(self.rows)

    @property
    def num_frames(self) -> int:
        return len(self.rows)

    @property
    def num_bins(self) -> int:
        return self.config.num_bins

    def frame_times(self) -> np.ndarray:
        """Start time of each frame in seconds."""
        return np.arange(self.num_frames) * self.config.time_resolution(self.sample_rate)

    def bin_frequencies(self) -> np.ndarray:
        """Center frequency of each bin in Hz."""
        return np.arange(self.num_bins) * self.config.frequency_resolution(self.sample_rate)

    def to_array(self) -> np.ndarray:
        """
        Stack rows into a 2D array.

        Returns:
            Magnitudes, Shape: (frames, bins)
        """
        if not self.rows:
            return np.zeros((0, self.num_bins))
        return np.vstack(self.rows)

    def magnitude_db(self, ref: float = 1.0, min_db: float = -120.0) -> np.ndarray:
        """
        Magnitude in dB, for display only.

        Args:
            ref: Reference value (1.0 for dBFS)
            min_db: Minimum dB value (to avoid log(0))

        Returns:
            Magnitude in dB, Shape: (frames, bins)
        """
        mag = np.maximum(self.to_array(), 10 ** (min_db / 20) * ref)
        return 20 * np.log10(mag / ref)


def count_frames(num_samples: int, window_size: int, hop_size: int) -> int:
    """
    Number of frames the builder produces.

    Counts starts 0, hop, 2*hop, ... strictly below num_samples - window_size.
    """
    return len(range(0, max(num_samples - window_size, 0), hop_size))


def compute_spectrogram(
    samples: Sequence[float],
    sample_rate: int,
    config: Optional[SpectrogramConfig] = None,
    transform: Optional[SpectralTransform] = None,
) -> Spectrogram:
    """
    Compute the magnitude spectrogram of a mono sample buffer.

    For every frame: slice, apply Hamming window, transform, take
    sqrt(re^2 + im^2) of the first window_size/2 bins.

    Args:
        samples: Audio samples in [-1.0, 1.0] (1D)
        sample_rate: Sample rate in Hz
        config: Window and hop sizes (default 1024 / 512)
        transform: Spectral kernel (default: ScipyRealTransform)

    Returns:
        Spectrogram with one row per frame, empty if the buffer is
        shorter than one window

    Raises:
        ConfigurationError: Invalid sample rate or non-1D samples
        TransformError: Kernel failure or malformed kernel output
    """
    if config is None:
        config = SpectrogramConfig()
    if transform is None:
        transform = ScipyRealTransform()

    if isinstance(sample_rate, bool) or not isinstance(sample_rate, (int, np.integer)) or sample_rate <= 0:
        raise ConfigurationError(f"Sample rate must be a positive integer, got: {sample_rate!r}")

    data = np.asarray(samples, dtype=np.float64)
    if data.ndim != 1:
        raise ConfigurationError("Spectrogram requires 1D signal (mono)")

    window_size = config.window_size
    hop_size = config.hop_size
    num_bins = config.num_bins
    window = hamming_window(window_size)

    rows = []
    for start in range(0, len(data) - window_size, hop_size):
        frame = data[start:start + window_size] * window

        spectrum = run_transform(transform, frame)
        real = spectrum[0:2 * num_bins:2]
        imag = spectrum[1:2 * num_bins:2]

        rows.append(np.sqrt(real * real + imag * imag))

    logger.debug(
        "Spectrogram: %d frames x %d bins from %d samples (window=%d, hop=%d)",
        len(rows), num_bins, len(data), window_size, hop_size,
    )

    return Spectrogram(rows=rows, sample_rate=int(sample_rate), config=config)
