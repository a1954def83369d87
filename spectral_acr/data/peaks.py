"""
spectral_acr.data.peaks
~~~~~~~~~~~~~~~~~~~~~~~

Spectral peak picking.

The magnitude spectrum is smoothed with a short moving average, every
strict local maximum of the smoothed curve becomes a candidate, and the
strongest :data:`~spectral_acr.config.N_PEAKS` candidates are mapped to
frequencies in Hz.

Smoothing with ``taps`` points in ``'valid'`` mode shortens the curve by
``taps - 1`` bins: smoothed index ``j`` is centred on spectrum bin
``j + taps // 2``.  :func:`extract_peaks` always reports that original
spectrum bin, never the smoothed index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from spectral_acr.config import N_PEAKS, SMOOTHING_TAPS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Peak:
    """A strict local maximum of the smoothed magnitude spectrum.

    Attributes
    ----------
    bin : int
        Index into the unsmoothed DFT output.
    magnitude : float
        Smoothed magnitude at that bin.
    frequency : float
        ``bin * sample_rate / n_samples`` in Hz.
    """

    bin: int
    magnitude: float
    frequency: float


def smooth_spectrum(magnitudes: np.ndarray, taps: int = SMOOTHING_TAPS) -> np.ndarray:
    """Apply a *taps*-point moving average.

    Parameters
    ----------
    magnitudes : np.ndarray
        Magnitude spectrum.
    taps : int
        Odd, positive averaging width.

    Returns
    -------
    np.ndarray, shape ``(max(len(magnitudes) - taps + 1, 0),)``
    """
    if taps < 1 or taps % 2 == 0:
        raise ValueError(f"taps must be a positive odd integer, got {taps}")

    magnitudes = np.asarray(magnitudes, dtype=np.float64)
    if magnitudes.shape[0] < taps:
        return np.zeros(0, dtype=np.float64)
    kernel = np.full(taps, 1.0 / taps)
    return np.convolve(magnitudes, kernel, mode="valid")


def find_local_maxima(values: np.ndarray) -> np.ndarray:
    """Return indices ``i`` with ``values[i-1] < values[i] > values[i+1]``.

    The first and last positions never qualify; flat tops do not count.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.shape[0] < 3:
        return np.zeros(0, dtype=np.intp)
    centre = values[1:-1]
    is_peak = (centre > values[:-2]) & (centre > values[2:])
    return np.flatnonzero(is_peak) + 1


def rank_peaks(
    indices: np.ndarray,
    values: np.ndarray,
    max_peaks: int = N_PEAKS,
) -> np.ndarray:
    """Order *indices* by ``values[indices]`` descending and keep *max_peaks*.

    Ties keep their ascending-index order.
    """
    if max_peaks < 1:
        raise ValueError(f"max_peaks must be at least 1, got {max_peaks}")

    indices = np.asarray(indices, dtype=np.intp)
    order = np.argsort(-np.asarray(values)[indices], kind="stable")
    return indices[order][:max_peaks]


def bins_to_frequencies(
    bins: np.ndarray,
    n_samples: int,
    sample_rate: int,
) -> np.ndarray:
    """Convert DFT bin indices to Hz for an *n_samples*-point transform."""
    if n_samples <= 0:
        raise ValueError(f"n_samples must be positive, got {n_samples}")
    return np.asarray(bins, dtype=np.float64) / n_samples * sample_rate


def extract_peaks(
    magnitudes: np.ndarray,
    n_samples: int,
    sample_rate: int,
    max_peaks: int = N_PEAKS,
    taps: int = SMOOTHING_TAPS,
) -> List[Peak]:
    """Find the strongest spectral peaks.

    Parameters
    ----------
    magnitudes : np.ndarray
        Output of :func:`~spectral_acr.data.preprocess.magnitude_spectrum`.
    n_samples : int
        Length of the transform that produced *magnitudes* (the number of
        time-domain samples, not ``len(magnitudes)``).
    sample_rate : int
        Sample rate of the recording in Hz.
    max_peaks : int
        Maximum number of peaks returned.
    taps : int
        Moving-average width used before peak picking.

    Returns
    -------
    list[Peak]
        Strongest first.  Empty when the spectrum has no strict local
        maximum.
    """
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")

    smoothed = smooth_spectrum(magnitudes, taps=taps)
    maxima = find_local_maxima(smoothed)
    if maxima.size == 0:
        logger.debug("No local maxima in %d smoothed bins", smoothed.size)
        return []

    ranked = rank_peaks(maxima, smoothed, max_peaks=max_peaks)
    bins = ranked + taps // 2
    freqs = bins_to_frequencies(bins, n_samples, sample_rate)

    peaks = [
        Peak(bin=int(b), magnitude=float(smoothed[j]), frequency=float(f))
        for j, b, f in zip(ranked, bins, freqs)
    ]
    logger.debug(
        "Kept %d of %d peaks at bins %s", len(peaks), maxima.size, bins.tolist()
    )
    return peaks


def extract_peak_frequencies(
    magnitudes: np.ndarray,
    n_samples: int,
    sample_rate: int,
    max_peaks: int = N_PEAKS,
    taps: int = SMOOTHING_TAPS,
) -> List[float]:
    """Like :func:`extract_peaks`, returning only the frequencies in Hz."""
    return [
        p.frequency
        for p in extract_peaks(
            magnitudes, n_samples, sample_rate, max_peaks=max_peaks, taps=taps
        )
    ]
