"""
Audio I/O Module

Preparation glue in front of the landmark core: turns an audio file into a
mono sample buffer in [-1.0, 1.0] plus its sample rate.

Technical assumptions:
- WAV, FLAC and OGG files are loaded with soundfile (libsndfile)
- 16-bit PCM is read as int16 and divided by 32768
- MP3 and M4A are decoded with pydub (ffmpeg)
- Multi-channel audio is downmixed to mono by averaging
- No resampling on load; convert_to_wav resamples explicitly
"""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Literal, Optional
import warnings
import numpy as np
import soundfile as sf

from .signal_processing import downmix_to_mono, pcm16_to_float

logger = logging.getLogger(__name__)

SOUNDFILE_FORMATS = (".wav", ".flac", ".ogg")
DECODED_FORMATS = (".mp3", ".m4a")
DEFAULT_WAV_SAMPLE_RATE = 44100


@dataclass
class SampleBuffer:
    """
    Mono sample buffer handed to the landmark core.

    Attributes:
        samples: float64 samples, Shape: (samples,)
        sample_rate: Sample rate in Hz
        source_path: File the buffer was read from (if any)
    """
    samples: np.ndarray
    sample_rate: int
    source_path: Optional[Path] = None

    def __post_init__(self):
        """Validate data integrity."""
        self.samples = np.asarray(self.samples, dtype=np.float64)
        if self.samples.ndim != 1:
            raise ValueError("Sample buffer must be 1D (mono)")
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got: {self.sample_rate}")

    @property
    def num_samples(self) -> int:
        return len(self.samples)

    @property
    def duration_seconds(self) -> float:
        return self.num_samples / self.sample_rate


def load_samples(
    file_path: str | Path,
    channel_mode: Literal["average", "left", "right"] = "average",
) -> SampleBuffer:
    """
    Load an audio file as a mono sample buffer.

    Args:
        file_path: Path to audio file
        channel_mode: Downmix method for multi-channel files

    Returns:
        SampleBuffer with samples in [-1.0, 1.0]

    Raises:
        FileNotFoundError: File does not exist
        ValueError: Unsupported format
        RuntimeError: Decoder failed
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Audio file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in SOUNDFILE_FORMATS:
        data, sample_rate = _read_soundfile(path)
    elif suffix in DECODED_FORMATS:
        data, sample_rate = _read_decoded(path)
    else:
        raise ValueError(f"Nicht unterstütztes Format: {suffix}")

    samples = downmix_to_mono(data, method=channel_mode)

    if samples.size and np.max(np.abs(samples)) > 1.0:
        warnings.warn(
            "Samples exceed [-1.0, 1.0]. Clipping will be applied.",
            UserWarning
        )
        samples = np.clip(samples, -1.0, 1.0)

    logger.debug("Loaded %s: %d samples at %d Hz", path.name, len(samples), sample_rate)

    return SampleBuffer(samples=samples, sample_rate=int(sample_rate), source_path=path)


def _read_soundfile(path: Path) -> tuple[np.ndarray, int]:
    """
    Read WAV, FLAC or OGG with soundfile.

    PCM_16 is read as raw integers and normalized here so the scaling is
    exactly 1/32768.
    """
    info = sf.info(path)

    if info.subtype == "PCM_16":
        raw, sample_rate = sf.read(path, dtype="int16", always_2d=False)
        return pcm16_to_float(raw), sample_rate

    data, sample_rate = sf.read(path, dtype="float64", always_2d=False)
    return data, sample_rate


def _read_decoded(path: Path) -> tuple[np.ndarray, int]:
    """
    Decode a compressed container with pydub.

    Requires ffmpeg in system PATH for decoding.
    """
    audio = _decode_with_pydub(path).set_sample_width(2)

    samples = pcm16_to_float(np.array(audio.get_array_of_samples()))
    if audio.channels > 1:
        samples = samples.reshape(-1, audio.channels)

    return samples, audio.frame_rate


def convert_to_wav(
    input_path: str | Path,
    output_path: str | Path,
    sample_rate: int = DEFAULT_WAV_SAMPLE_RATE,
) -> Path:
    """
    Convert any ffmpeg-readable file to mono 16-bit WAV.

    Args:
        input_path: Source audio file
        output_path: Target WAV path
        sample_rate: Target sample rate (default 44.1 kHz)

    Returns:
        Path of the written WAV file

    Raises:
        FileNotFoundError: Source does not exist
        RuntimeError: Decoding or encoding failed
    """
    source = Path(input_path)
    target = Path(output_path)

    if not source.exists():
        raise FileNotFoundError(f"Audio file not found: {source}")

    audio = _decode_with_pydub(source)
    audio = audio.set_channels(1).set_frame_rate(sample_rate).set_sample_width(2)

    try:
        audio.export(str(target), format="wav")
    except Exception as e:
        raise RuntimeError(f"WAV export failed for {target}: {e}") from e

    logger.info("Converted %s -> %s (%d Hz, mono)", source.name, target.name, sample_rate)
    return target


def _decode_with_pydub(path: Path):
    from pydub import AudioSegment

    try:
        return AudioSegment.from_file(str(path))
    except Exception as e:
        raise RuntimeError(
            f"Audio could not be decoded: {e}\n"
            "Please ensure ffmpeg is installed:\n"
            "  macOS: brew install ffmpeg\n"
            "  Windows: https://ffmpeg.org/download.html"
        ) from e
