"""
Tests für Signalverarbeitungs-Modul.
"""

import pytest
import numpy as np

from audio_landmarks.core.signal_processing import (
    downmix_to_mono,
    pcm16_to_float,
    compute_peak,
)


class TestDownmix:
    """Tests für Downmix-Funktionen."""

    def test_downmix_average(self):
        """Test Average-Downmix."""
        left = np.ones(100)
        right = np.ones(100) * 3
        stereo = np.column_stack([left, right])

        mono = downmix_to_mono(stereo, method="average")

        np.testing.assert_array_almost_equal(mono, np.ones(100) * 2)

    def test_downmix_left(self):
        """Test Left-only Downmix."""
        left = np.ones(100)
        right = np.ones(100) * 3
        stereo = np.column_stack([left, right])

        mono = downmix_to_mono(stereo, method="left")

        np.testing.assert_array_equal(mono, left)

    def test_downmix_right(self):
        """Test Right-only Downmix."""
        left = np.ones(100)
        right = np.ones(100) * 3
        stereo = np.column_stack([left, right])

        mono = downmix_to_mono(stereo, method="right")

        np.testing.assert_array_equal(mono, right)

    def test_downmix_mono_passthrough(self):
        """Mono-Eingabe bleibt unverändert."""
        mono = np.random.randn(100)
        result = downmix_to_mono(mono)

        np.testing.assert_array_equal(result, mono)

        # Kopie, nicht dieselbe Instanz
        result[0] = 42.0
        assert mono[0] != 42.0

    def test_downmix_unknown_method(self):
        """Unbekannte Methode wird abgelehnt."""
        with pytest.raises(ValueError, match="Unknown method"):
            downmix_to_mono(np.zeros((10, 2)), method="side")


class TestPcmNormalization:
    """Tests für 16-Bit-Normalisierung."""

    def test_pcm16_scaling(self):
        """Division durch 32768."""
        raw = np.array([0, 16384, -32768, 32767], dtype=np.int16)

        result = pcm16_to_float(raw)

        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [0.0, 0.5, -1.0, 32767 / 32768])


class TestLevelMeasurement:
    """Tests für Pegelmessung."""

    def test_peak(self):
        """Peak-Wert."""
        data = np.array([0.3, -0.8, 0.5])
        peak = compute_peak(data)

        assert peak == 0.8

    def test_peak_db(self):
        """Peak in dB."""
        data = np.array([0.1, -0.05])

        assert compute_peak(data, as_db=True) == pytest.approx(-20.0)

    def test_peak_silence(self):
        """Stille ergibt -inf dB."""
        assert compute_peak(np.zeros(10), as_db=True) == -np.inf
        assert compute_peak(np.array([])) == 0.0
