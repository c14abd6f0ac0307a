"""
Error types of the landmark core.

Only two failure categories exist:
- ConfigurationError: invalid parameters, raised before any frame is processed
- TransformError: the spectral transform failed or returned malformed output

Both abort the call. No partial spectrogram or landmark set is returned.
"""


class LandmarkError(Exception):
    """Base class for all errors raised by the landmark core."""


class ConfigurationError(LandmarkError, ValueError):
    """Invalid window, hop, sample rate, band or neighborhood parameters."""


class TransformError(LandmarkError, RuntimeError):
    """The spectral transform failed or produced output of the wrong shape."""
