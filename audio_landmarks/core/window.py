"""
Window Function

Hamming taper applied to each frame before the transform.

    w[i] = 0.54 - 0.46 * cos(2*pi*i / (size - 1)),  i in [0, size)

Coefficients are a pure function of the size, so they are computed once
per size and shared. The returned array is read-only.
"""

from functools import lru_cache
import numpy as np
from scipy import signal

from .errors import ConfigurationError


def hamming_window(size: int) -> np.ndarray:
    """
    Symmetric Hamming window of the given size.

    A size of 1 yields a single coefficient of 1.0 (the formula would
    divide by zero).

    Args:
        size: Number of coefficients (>= 1)

    Returns:
        Read-only float64 array of length `size`, values in [0.08, 1.0]

    Raises:
        ConfigurationError: size is not a positive integer
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ConfigurationError(f"Window size must be an integer, got: {size!r}")
    if size < 1:
        raise ConfigurationError(f"Window size must be at least 1, got: {size}")

    return _cached_hamming(int(size))


@lru_cache(maxsize=32)
def _cached_hamming(size: int) -> np.ndarray:
    window = signal.windows.hamming(size, sym=True).astype(np.float64)
    window.setflags(write=False)
    return window
