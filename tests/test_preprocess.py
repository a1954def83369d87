"""
Tests for spectral_acr.data.preprocess — loading, windowing, spectrum.

WAV files are generated on the fly with soundfile; windowing and
spectrum tests are pure numpy.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from spectral_acr.config import DEFAULT_EXTENSION, INPUT_DIR, MAX_SPECTRUM_BINS
from spectral_acr.data.preprocess import (
    apply_window,
    hamming_window,
    load_waveform,
    magnitude_spectrum,
    resolve_input_path,
)
from spectral_acr.exceptions import (
    AudioFileNotFoundError,
    ChordDetectionError,
    MalformedAudioError,
)

# ---------------------------------------------------------------------------
# Input path resolution
# ---------------------------------------------------------------------------


class TestResolveInputPath:
    def test_appends_default_extension(self):
        assert resolve_input_path("c_major") == Path(INPUT_DIR) / f"c_major{DEFAULT_EXTENSION}"

    def test_keeps_given_extension(self):
        assert resolve_input_path("c_major.wav") == Path(INPUT_DIR) / "c_major.wav"
        assert resolve_input_path("take2.flac") == Path(INPUT_DIR) / "take2.flac"

    def test_strips_whitespace_from_typed_input(self):
        assert resolve_input_path("  g_minor\n") == Path(INPUT_DIR) / "g_minor.wav"

    def test_trailing_dot_gets_default_extension(self):
        assert resolve_input_path("c_major.") == Path(INPUT_DIR) / "c_major.wav"

    def test_custom_input_dir(self, tmp_path):
        assert resolve_input_path("x", tmp_path) == tmp_path / "x.wav"


# ---------------------------------------------------------------------------
# Waveform loading
# ---------------------------------------------------------------------------


class TestLoadWaveform:
    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(AudioFileNotFoundError, match="File not found"):
            load_waveform(tmp_path / "nope.wav")

    def test_missing_file_is_a_file_not_found_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_waveform(tmp_path / "nope.wav")

    def test_directory_is_not_a_recording(self, tmp_path):
        with pytest.raises(AudioFileNotFoundError):
            load_waveform(tmp_path)

    def test_garbage_bytes_raise_malformed(self, tmp_path):
        bogus = tmp_path / "bogus.wav"
        bogus.write_bytes(b"RIFF not really a wave file")
        with pytest.raises(MalformedAudioError, match="bogus.wav") as excinfo:
            load_waveform(bogus)
        assert excinfo.value.__cause__ is not None

    def test_empty_recording_raises_malformed(self, write_wav):
        path = write_wav("empty.wav", samples=np.zeros(0))
        with pytest.raises(MalformedAudioError):
            load_waveform(path)

    def test_errors_share_a_base_class(self, tmp_path):
        with pytest.raises(ChordDetectionError):
            load_waveform(tmp_path / "nope.wav")

    def test_keeps_native_sample_rate(self, write_wav):
        path = write_wav("tone.wav", [440], sample_rate=8000)
        y, sr = load_waveform(path)
        assert sr == 8000
        assert y.shape == (8000,)
        assert y.dtype == np.float64

    def test_int16_is_normalised(self, write_wav):
        full_scale = np.full(100, 32767, dtype=np.int16)
        path = write_wav("loud.wav", samples=full_scale)
        y, _ = load_waveform(path)
        assert np.all(np.abs(y) <= 1.0)
        assert y[0] == pytest.approx(32767 / 32768)

    def test_float_samples_pass_through(self, write_wav):
        samples = np.linspace(-0.5, 0.5, 64)
        path = write_wav("float.wav", samples=samples, subtype="FLOAT")
        y, _ = load_waveform(path)
        np.testing.assert_allclose(y, samples, atol=1e-7)

    def test_stereo_is_mixed_to_mono(self, write_wav):
        path = write_wav("stereo.wav", [440], channels=2)
        y, sr = load_waveform(path)
        assert y.ndim == 1
        assert y.shape[0] == sr


# ---------------------------------------------------------------------------
# Hamming window
# ---------------------------------------------------------------------------


class TestHammingWindow:
    def test_empty(self):
        assert hamming_window(0).shape == (0,)

    def test_negative_length_raises(self):
        with pytest.raises(ValueError):
            hamming_window(-1)

    def test_single_point_follows_formula(self):
        assert hamming_window(1)[0] == pytest.approx(0.08)

    @pytest.mark.parametrize("n", [1, 2, 7, 64, 1001])
    def test_matches_formula(self, n):
        i = np.arange(n)
        expected = 0.54 - 0.46 * np.cos(2 * np.pi * i / n)
        np.testing.assert_allclose(hamming_window(n), expected, atol=1e-12)

    @pytest.mark.parametrize("n", [1, 2, 5, 64, 1001])
    def test_coefficients_in_range(self, n):
        w = hamming_window(n)
        assert np.all(w >= 0.08 - 1e-12)
        assert np.all(w <= 1.0 + 1e-12)

    @pytest.mark.parametrize("n", [8, 9, 512])
    def test_periodic_symmetry(self, n):
        w = hamming_window(n)
        np.testing.assert_allclose(w[1:], w[1:][::-1], atol=1e-12)

    def test_apply_window_scales_samples(self):
        samples = np.ones(16)
        np.testing.assert_allclose(apply_window(samples), hamming_window(16))

    def test_apply_window_leaves_input_untouched(self):
        samples = np.ones(16)
        apply_window(samples)
        assert np.all(samples == 1.0)

    def test_apply_window_on_empty(self):
        assert apply_window(np.zeros(0)).shape == (0,)


# ---------------------------------------------------------------------------
# Magnitude spectrum
# ---------------------------------------------------------------------------


class TestMagnitudeSpectrum:
    def test_half_length(self):
        assert magnitude_spectrum(np.random.default_rng(0).normal(size=1000)).shape == (500,)

    def test_odd_length_rounds_down(self):
        assert magnitude_spectrum(np.ones(101)).shape == (50,)

    def test_truncated_to_cutoff(self):
        n = 2 * MAX_SPECTRUM_BINS + 1000
        assert magnitude_spectrum(np.zeros(n)).shape == (MAX_SPECTRUM_BINS,)

    def test_custom_cutoff(self):
        assert magnitude_spectrum(np.zeros(1000), max_bins=10).shape == (10,)

    def test_empty_input(self):
        assert magnitude_spectrum(np.zeros(0)).shape == (0,)

    def test_non_negative(self):
        spectrum = magnitude_spectrum(np.random.default_rng(1).normal(size=256))
        assert np.all(spectrum >= 0)

    def test_matches_full_dft(self):
        x = np.random.default_rng(2).normal(size=128)
        expected = np.abs(np.fft.fft(x))[:64]
        np.testing.assert_allclose(magnitude_spectrum(x), expected, atol=1e-9)

    def test_tone_lands_on_its_bin(self, synth):
        sr = 8000
        spectrum = magnitude_spectrum(synth([1000], sample_rate=sr))
        assert int(np.argmax(spectrum)) == 1000  # 1 Hz per bin over one second

    def test_negative_cutoff_raises(self):
        with pytest.raises(ValueError):
            magnitude_spectrum(np.zeros(8), max_bins=-1)
