"""
Landmark extraction: spectrogram builder followed by peak detector.
"""

from dataclasses import dataclass
import logging
from typing import Optional, Sequence, Union

from .audio_io import SampleBuffer
from .errors import ConfigurationError
from .peaks import Landmark, PeakConfig, find_peaks, sorted_landmarks
from .spectral import Spectrogram, SpectrogramConfig, compute_spectrogram
from .transform import SpectralTransform

logger = logging.getLogger(__name__)


@dataclass
class LandmarkResult:
    """Spectrogram and the landmarks found in it."""
    spectrogram: Spectrogram
    landmarks: set[Landmark]

    def ordered(self) -> list[Landmark]:
        return sorted_landmarks(self.landmarks)


def extract_landmarks(
    samples: Union[SampleBuffer, Sequence[float]],
    sample_rate: Optional[int] = None,
    spectrogram_config: Optional[SpectrogramConfig] = None,
    peak_config: Optional[PeakConfig] = None,
    transform: Optional[SpectralTransform] = None,
) -> LandmarkResult:
    """
    Run the full core on one sample buffer.

    Args:
        samples: SampleBuffer or raw mono samples
        sample_rate: Sample rate in Hz; taken from the buffer if omitted
        spectrogram_config: Window and hop sizes
        peak_config: Peak detection parameters
        transform: Spectral kernel

    Returns:
        LandmarkResult

    Raises:
        ConfigurationError: Missing or invalid parameters
        TransformError: Kernel failure
    """
    if isinstance(samples, SampleBuffer):
        if sample_rate is None:
            sample_rate = samples.sample_rate
        samples = samples.samples

    if sample_rate is None:
        raise ConfigurationError("Sample rate is required for raw sample sequences")

    if peak_config is None:
        peak_config = PeakConfig()

    spectrogram = compute_spectrogram(samples, sample_rate, spectrogram_config, transform)
    landmarks = find_peaks(spectrogram, peak_config)

    logger.info(
        "Extracted %d landmarks from %d frames", len(landmarks), spectrogram.num_frames
    )
    return LandmarkResult(spectrogram=spectrogram, landmarks=landmarks)
