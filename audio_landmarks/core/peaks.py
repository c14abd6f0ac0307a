"""
Peak Detection Module

Finds landmarks: spectrogram cells that exceed a threshold and strictly
dominate every other cell in a rectangular (time, frequency) neighborhood.

Technical assumptions:
- Rows may have different lengths; each row length is read separately
- Only the interior is scanned, so every candidate has its full time
  neighborhood
- Ties disqualify: two equal adjacent maxima eliminate each other
- A neighbor cell that does not exist (outside a shorter row, or below
  bin 0) cannot disqualify a candidate
- A neighborhood larger than the matrix simply yields no landmarks
- Bin bounds must satisfy 0 <= min_freq_bin < max_freq_bin; a negative
  min_freq_bin is rejected rather than clamped
"""

from dataclasses import dataclass
import logging
from typing import Iterable, Optional, Sequence, Union
import numpy as np

from .errors import ConfigurationError
from .spectral import Spectrogram

logger = logging.getLogger(__name__)


@dataclass
class PeakConfig:
    """
    Configuration for peak detection.

    Attributes:
        min_freq_bin: First frequency bin to scan (inclusive)
        max_freq_bin: Upper frequency bin bound (exclusive)
        neighborhood: Half-extent (time, frequency) of the dominance region
        threshold: Minimum amplitude, compared with >
    """
    min_freq_bin: int = 30
    max_freq_bin: int = 300
    neighborhood: tuple[int, int] = (3, 3)
    threshold: float = 0.5

    def __post_init__(self):
        """Validate bounds."""
        if not isinstance(self.neighborhood, (tuple, list)) or len(self.neighborhood) != 2:
            raise ConfigurationError(
                f"Neighborhood must be a (time, frequency) pair, got: {self.neighborhood!r}"
            )
        self.neighborhood = tuple(self.neighborhood)

        for value in (self.min_freq_bin, self.max_freq_bin, *self.neighborhood):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ConfigurationError(f"Bin and neighborhood values must be integers, got: {value!r}")

        time_n, freq_n = self.neighborhood
        if time_n < 0 or freq_n < 0:
            raise ConfigurationError(f"Neighborhood must not be negative, got: {self.neighborhood}")
        if self.min_freq_bin < 0:
            raise ConfigurationError(f"Minimum frequency bin must not be negative, got: {self.min_freq_bin}")
        if self.min_freq_bin >= self.max_freq_bin:
            raise ConfigurationError(
                f"min_freq_bin ({self.min_freq_bin}) must be below max_freq_bin ({self.max_freq_bin})"
            )

    @property
    def time_neighborhood(self) -> int:
        return self.neighborhood[0]

    @property
    def freq_neighborhood(self) -> int:
        return self.neighborhood[1]


@dataclass(frozen=True)
class Landmark:
    """
    A strict local maximum of the spectrogram.

    Attributes:
        frame_index: Time coordinate (row number)
        bin_index: Frequency coordinate (column number)
        amplitude: Magnitude at that cell
    """
    frame_index: int
    bin_index: int
    amplitude: float

    def time_seconds(self, hop_size: int, sample_rate: int) -> float:
        """Frame start time in seconds."""
        return self.frame_index * hop_size / sample_rate

    def frequency_hz(self, window_size: int, sample_rate: int) -> float:
        """Bin center frequency in Hz."""
        return self.bin_index * sample_rate / window_size


SpectrogramLike = Union[Spectrogram, Sequence[Sequence[float]]]


def find_peaks(
    spectrogram: SpectrogramLike,
    config: Optional[PeakConfig] = None,
) -> set[Landmark]:
    """
    Find all landmarks in a spectrogram.

    Scan region:
        t in [time_n, rows - time_n)
        f in [min_freq_bin, min(max_freq_bin, len(row_t) - freq_n))

    A cell qualifies if its value is > threshold and no neighbor within
    [-time_n, time_n] x [-freq_n, freq_n] (excluding itself) is >= it.

    Args:
        spectrogram: Spectrogram or any sequence of 1D magnitude rows
        config: Peak detection parameters

    Returns:
        Set of landmarks (unordered, see sorted_landmarks)
    """
    if config is None:
        config = PeakConfig()

    rows = [np.asarray(row, dtype=np.float64) for row in spectrogram]
    time_n = config.time_neighborhood
    freq_n = config.freq_neighborhood

    peaks = set()
    for t in range(time_n, len(rows) - time_n):
        row = rows[t]
        f_stop = min(config.max_freq_bin, len(row) - freq_n)
        if f_stop <= config.min_freq_bin:
            continue

        # Threshold stage, vectorized over the row
        band = row[config.min_freq_bin:f_stop]
        candidates = np.flatnonzero(band > config.threshold) + config.min_freq_bin

        for f in candidates:
            value = row[f]
            if _dominates_neighborhood(rows, t, int(f), value, time_n, freq_n):
                peaks.add(Landmark(frame_index=t, bin_index=int(f), amplitude=float(value)))

    logger.debug("Found %d landmarks in %d frames", len(peaks), len(rows))
    return peaks


def _dominates_neighborhood(
    rows: list[np.ndarray],
    t: int,
    f: int,
    value: float,
    time_n: int,
    freq_n: int,
) -> bool:
    """True if no existing neighbor of (t, f) is >= value."""
    lo = max(f - freq_n, 0)
    hi = f + freq_n + 1

    for dt in range(-time_n, time_n + 1):
        segment = rows[t + dt][lo:hi]
        hits = np.count_nonzero(segment >= value)
        if dt == 0:
            # The candidate itself always matches
            hits -= 1
        if hits > 0:
            return False
    return True


def sorted_landmarks(landmarks: Iterable[Landmark]) -> list[Landmark]:
    """Landmarks in increasing (time, frequency) order."""
    return sorted(landmarks, key=lambda lm: (lm.frame_index, lm.bin_index))
