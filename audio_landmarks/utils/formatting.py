"""
Formatierungsfunktionen für Anzeige.

Konvertiert numerische Werte in lesbare Strings.
"""


def format_time(seconds: float, show_ms: bool = True) -> str:
    """
    Format time as minutes:seconds.

    Args:
        seconds: Time in seconds
        show_ms: Show milliseconds

    Returns:
        Formatted string (e.g. "1:23.456" or "1:23")
    """
    if seconds < 0:
        sign = "-"
        seconds = abs(seconds)
    else:
        sign = ""

    minutes = int(seconds // 60)
    secs = seconds % 60

    if show_ms:
        return f"{sign}{minutes}:{secs:06.3f}"
    else:
        return f"{sign}{minutes}:{int(secs):02d}"


def format_frequency(hz: float) -> str:
    """
    Format frequency.

    Returns:
        Formatted string (e.g. "1.5 kHz" or "250 Hz")
    """
    if hz >= 1000:
        return f"{hz/1000:.1f} kHz"
    else:
        return f"{hz:.0f} Hz"


def format_sample_rate(sr: int) -> str:
    """Format sample rate (e.g. "44.1 kHz" or "48 kHz")."""
    if sr % 1000 == 0:
        return f"{sr // 1000} kHz"
    else:
        return f"{sr / 1000:.1f} kHz"


def format_amplitude(amplitude: float, precision: int = 3) -> str:
    """Format a raw magnitude value."""
    return f"{amplitude:.{precision}f}"


def format_landmark_row(
    frame_index: int,
    bin_index: int,
    amplitude: float,
    time_seconds: float,
    frequency_hz: float,
) -> str:
    """
    One table line for a landmark.

    Returns:
        Formatted string (e.g. "   12  0:00.139    57   2.5 kHz     3.142")
    """
    return (
        f"{frame_index:>6d}  {format_time(time_seconds):>9}  "
        f"{bin_index:>4d}  {format_frequency(frequency_hz):>9}  "
        f"{format_amplitude(amplitude):>9}"
    )
