"""
spectral_acr.core
~~~~~~~~~~~~~~~~~

High-level inference pipeline — the "glue" that connects windowing,
the magnitude spectrum, peak picking and the chord classifier into
one-liner calls.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from spectral_acr.config import MAX_SPECTRUM_BINS, N_PEAKS, SMOOTHING_TAPS
from spectral_acr.data.peaks import extract_peak_frequencies
from spectral_acr.data.preprocess import apply_window, load_waveform, magnitude_spectrum
from spectral_acr.models.classifier import ChordResult, analyze_chord

logger = logging.getLogger(__name__)


def identify_chord(
    samples: np.ndarray,
    sample_rate: int,
    max_peaks: int = N_PEAKS,
    max_bins: int = MAX_SPECTRUM_BINS,
    taps: int = SMOOTHING_TAPS,
) -> ChordResult:
    """Identify the chord in an already-decoded recording.

    Parameters
    ----------
    samples : np.ndarray
        Mono samples, normalised to roughly ``[-1, 1]``.
    sample_rate : int
        Sample rate in Hz.
    max_peaks : int
        Number of strongest spectral peaks considered.
    max_bins : int
        High-frequency cutoff of the spectrum, in bins.
    taps : int
        Moving-average width used before peak picking.

    Returns
    -------
    ChordResult

    Raises
    ------
    NoChordDetectedError
        If the spectrum yields no peak (silence, too few samples).
    ValueError
        If *sample_rate* is not positive.
    """
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")

    samples = np.asarray(samples, dtype=np.float64)
    windowed = apply_window(samples)
    magnitudes = magnitude_spectrum(windowed, max_bins=max_bins)
    freqs = extract_peak_frequencies(
        magnitudes,
        n_samples=samples.shape[0],
        sample_rate=sample_rate,
        max_peaks=max_peaks,
        taps=taps,
    )
    logger.debug("Peak frequencies: %s", [round(f, 2) for f in freqs])

    return analyze_chord(freqs)


def predict(
    audio_path: str | Path,
    max_peaks: int = N_PEAKS,
    max_bins: int = MAX_SPECTRUM_BINS,
) -> ChordResult:
    """Run end-to-end chord identification on an audio file.

    Parameters
    ----------
    audio_path : str | Path
        Path to the input recording.
    max_peaks : int
        Number of strongest spectral peaks considered.
    max_bins : int
        High-frequency cutoff of the spectrum, in bins.

    Returns
    -------
    ChordResult
        e.g. ``ChordResult(note='C3', quality='major', ...)``; its
        :attr:`~ChordResult.label` reads ``'C3 major'``.

    Raises
    ------
    AudioFileNotFoundError
        If the file does not exist.
    MalformedAudioError
        If the file cannot be decoded.
    NoChordDetectedError
        If no spectral peak was found.
    """
    samples, sr = load_waveform(audio_path)
    result = identify_chord(samples, sr, max_peaks=max_peaks, max_bins=max_bins)
    logger.info("%s: %s", Path(audio_path).name, result.label)
    return result
