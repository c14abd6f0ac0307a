"""
Spectral Transform

The Fourier kernel is an injected capability. Any callable object with a
`transform(frame)` method satisfying the contract below can be passed to
the spectrogram builder, e.g. a deterministic mock in tests.

Contract:
- Input: real-valued frame of length W
- Output: 2W floats, W interleaved (real, imaginary) pairs of the DFT
- Deterministic: identical input gives identical output
"""

from typing import Protocol, runtime_checkable
import numpy as np
from scipy import fft

from .errors import TransformError


@runtime_checkable
class SpectralTransform(Protocol):
    """Real-input DFT returning interleaved (re, im) pairs."""

    def transform(self, frame: np.ndarray) -> np.ndarray:
        ...


class ScipyRealTransform:
    """
    Default kernel backed by scipy.fft.

    Runs single-threaded (workers=1) so repeated calls with the same
    frame are bit-identical.
    """

    def transform(self, frame: np.ndarray) -> np.ndarray:
        spectrum = fft.fft(np.asarray(frame, dtype=np.float64), workers=1)

        interleaved = np.empty(2 * len(spectrum), dtype=np.float64)
        interleaved[0::2] = spectrum.real
        interleaved[1::2] = spectrum.imag
        return interleaved

    def __repr__(self) -> str:
        return "ScipyRealTransform()"


def run_transform(transform: SpectralTransform, frame: np.ndarray) -> np.ndarray:
    """
    Invoke the kernel and validate its output.

    Any exception raised by the kernel is re-raised as TransformError.

    Returns:
        float64 array of length 2 * len(frame)

    Raises:
        TransformError: Kernel failed, or output has wrong length or
            contains non-finite values
    """
    try:
        output = transform.transform(frame)
    except TransformError:
        raise
    except Exception as e:
        raise TransformError(
            f"Spectral transform failed for frame of size {len(frame)}: {e}"
        ) from e

    try:
        output = np.asarray(output, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise TransformError(f"Transform output is not numeric: {e}") from e

    expected = 2 * len(frame)
    if output.ndim != 1 or output.shape[0] != expected:
        raise TransformError(
            f"Transform output has shape {output.shape}, expected ({expected},)"
        )
    if not np.all(np.isfinite(output)):
        raise TransformError("Transform output contains non-finite values")

    return output
