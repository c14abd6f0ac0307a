"""
General Signal Processing

Small helpers used while preparing a sample buffer.
All functions are EXPLICIT - no automatic conversions.

Technical assumptions:
- Downmix is performed as arithmetic mean (no energy compensation)
- 16-bit PCM is normalized by dividing by 32768
- All operations work on copies, original data remains unchanged
"""

import numpy as np
from typing import Literal

PCM16_SCALE = 32768.0


def downmix_to_mono(
    data: np.ndarray,
    method: Literal["average", "left", "right"] = "average"
) -> np.ndarray:
    """
    Convert multi-channel audio to mono.

    Methods:
    - average: Mean over all channels - Standard, no energy compensation
    - left: First channel only
    - right: Second channel only

    Args:
        data: Audio data, Shape: (samples,) or (samples, channels)
        method: Downmix method

    Returns:
        Mono audio data, Shape: (samples,)
    """
    if data.ndim == 1:
        return data.copy()  # Already mono

    if data.ndim != 2:
        raise ValueError(f"Audio array must be 1D or 2D, got: {data.ndim}D")

    if method == "average":
        return data.mean(axis=1)
    elif method == "left":
        return data[:, 0].copy()
    elif method == "right":
        if data.shape[1] < 2:
            raise ValueError("Right channel requested from mono data")
        return data[:, 1].copy()
    else:
        raise ValueError(f"Unknown method: {method}")


def pcm16_to_float(data: np.ndarray) -> np.ndarray:
    """
    Normalize signed 16-bit PCM samples to [-1.0, 1.0).

    Args:
        data: Integer samples in [-32768, 32767]

    Returns:
        float64 samples
    """
    return np.asarray(data).astype(np.float64) / PCM16_SCALE


def compute_peak(data: np.ndarray, as_db: bool = False) -> float:
    """
    Compute peak value (absolute maximum) of the signal.

    Args:
        data: Audio data
        as_db: If True, return in dB (reference: 1.0)

    Returns:
        Peak value (linear or dB), 0.0 for empty data
    """
    if data.size == 0:
        return -np.inf if as_db else 0.0

    peak = float(np.max(np.abs(data)))

    if as_db:
        if peak == 0:
            return -np.inf
        return 20 * np.log10(peak)

    return peak
