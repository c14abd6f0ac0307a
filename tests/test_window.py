"""
Tests für Fensterfunktion.
"""

import pytest
import numpy as np

from audio_landmarks.core.errors import ConfigurationError
from audio_landmarks.core.window import hamming_window


class TestHammingWindow:
    """Tests für Hamming-Fenster."""

    @pytest.mark.parametrize("size", [2, 3, 16, 1023, 1024])
    def test_length(self, size):
        """Länge entspricht der angeforderten Größe."""
        assert len(hamming_window(size)) == size

    @pytest.mark.parametrize("size", [2, 7, 512, 1024])
    def test_symmetry(self, size):
        """Fenster ist symmetrisch um die Mitte."""
        window = hamming_window(size)

        np.testing.assert_allclose(window, window[::-1], atol=1e-12)

    @pytest.mark.parametrize("size", [2, 5, 256, 1024])
    def test_value_range(self, size):
        """Werte liegen im Hamming-Bereich [0.08, 1.0]."""
        window = hamming_window(size)

        assert np.all(window >= 0.08 - 1e-12)
        assert np.all(window <= 1.0 + 1e-12)
        assert window[0] == pytest.approx(0.08)
        assert window[-1] == pytest.approx(0.08)

    def test_matches_formula(self):
        """Werte entsprechen 0.54 - 0.46 cos(2πi/(N-1))."""
        size = 1024
        i = np.arange(size)
        expected = 0.54 - 0.46 * np.cos(2 * np.pi * i / (size - 1))

        np.testing.assert_allclose(hamming_window(size), expected, atol=1e-12)

    def test_odd_size_peak_is_one(self):
        """Ungerade Größe hat 1.0 in der Mitte."""
        window = hamming_window(9)

        assert window[4] == pytest.approx(1.0)

    def test_size_one(self):
        """Größe 1 ergibt einen Koeffizienten 1.0 statt Division durch Null."""
        np.testing.assert_array_equal(hamming_window(1), [1.0])

    @pytest.mark.parametrize("size", [0, -4])
    def test_invalid_size(self, size):
        """Nicht-positive Größe wird abgelehnt."""
        with pytest.raises(ConfigurationError):
            hamming_window(size)

    def test_non_integer_size(self):
        """Gleitkomma-Größe wird abgelehnt."""
        with pytest.raises(ConfigurationError):
            hamming_window(16.0)

    def test_cached_and_read_only(self):
        """Koeffizienten werden pro Größe geteilt und sind schreibgeschützt."""
        first = hamming_window(64)
        second = hamming_window(64)

        assert first is second
        with pytest.raises(ValueError):
            first[0] = 1.0
