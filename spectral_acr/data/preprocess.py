"""
spectral_acr.data.preprocess
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Waveform loading, Hamming windowing and magnitude-spectrum extraction.

This is the only module that touches the filesystem.  Everything
downstream (:mod:`spectral_acr.data.peaks`,
:mod:`spectral_acr.models.classifier`) works on numpy arrays.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import librosa
import numpy as np

from spectral_acr.config import (
    DEFAULT_EXTENSION,
    HAMMING_ALPHA,
    INPUT_DIR,
    MAX_SPECTRUM_BINS,
)
from spectral_acr.exceptions import AudioFileNotFoundError, MalformedAudioError

logger = logging.getLogger(__name__)


def resolve_input_path(name: str, input_dir: str | Path = INPUT_DIR) -> Path:
    """Turn a recording name into a path under *input_dir*.

    A name without an extension gets :data:`~spectral_acr.config.DEFAULT_EXTENSION`
    appended, so ``'c_major'``, ``'c_major.'`` and ``'c_major.wav'`` all point at
    the same file.

    Parameters
    ----------
    name : str
        Recording name as typed by the user; surrounding whitespace is
        ignored.
    input_dir : str | Path
        Directory the name is resolved against.

    Returns
    -------
    Path
    """
    name = name.strip().rstrip(".")
    if not Path(name).suffix:
        name = f"{name}{DEFAULT_EXTENSION}"
    return Path(input_dir) / name


def load_waveform(path: str | Path) -> Tuple[np.ndarray, int]:
    """Decode a recording into normalised float samples.

    Integer PCM is scaled by its full-scale value into ``[-1, 1]``;
    floating-point data passes through unchanged.  Multi-channel audio
    is mixed down to mono and the native sample rate is kept.

    Parameters
    ----------
    path : str | Path
        Path to a ``.wav`` (or any other soundfile-readable) file.

    Returns
    -------
    tuple[np.ndarray, int]
        ``(samples, sample_rate)`` with ``samples`` as a 1-D float64 array.

    Raises
    ------
    AudioFileNotFoundError
        If *path* does not exist or is not a file.
    MalformedAudioError
        If the file cannot be decoded or holds no samples.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise AudioFileNotFoundError(f"File not found: {file_path}")

    try:
        # sr=None keeps the native rate; librosa defaults to resampling
        y, sr = librosa.load(file_path, sr=None, mono=True, dtype=np.float64)
    except Exception as exc:
        raise MalformedAudioError(
            f"Failed to decode audio file {file_path.name!r}: {exc}"
        ) from exc

    if y.size == 0:
        raise MalformedAudioError(f"Audio file {file_path.name!r} holds no samples")
    if sr <= 0:
        raise MalformedAudioError(
            f"Audio file {file_path.name!r} reports sample rate {sr}"
        )

    logger.debug("Loaded %s: %d samples at %d Hz", file_path, y.size, sr)
    return y, int(sr)


def hamming_window(n: int) -> np.ndarray:
    """Return the periodic Hamming window of length *n*.

    Coefficient ``i`` is ``0.54 - 0.46 * cos(2π·i / n)``, so the values
    lie in ``[0.08, 1.0]`` and ``w[i] == w[n - i]`` for ``0 < i < n``.

    Parameters
    ----------
    n : int
        Window length.  ``0`` gives an empty array and ``1`` gives
        ``[0.08]``, the formula evaluated at ``i = 0``.

    Returns
    -------
    np.ndarray, shape ``(n,)``

    Raises
    ------
    ValueError
        If *n* is negative.
    """
    if n < 0:
        raise ValueError(f"Window length must be non-negative, got {n}")
    if n == 0:
        return np.zeros(0, dtype=np.float64)
    if n == 1:
        # scipy returns [1.0] for any one-point window
        return np.array([HAMMING_ALPHA - (1 - HAMMING_ALPHA)])
    # fftbins=True selects the periodic (DFT-even) form: cos(2π·i / n)
    window = librosa.filters.get_window(
        ("general_hamming", HAMMING_ALPHA), n, fftbins=True
    )
    return np.asarray(window, dtype=np.float64)


def apply_window(samples: np.ndarray) -> np.ndarray:
    """Multiply *samples* by a Hamming window of the same length.

    The input is left untouched; a new array is returned.
    """
    samples = np.asarray(samples, dtype=np.float64)
    return samples * hamming_window(samples.shape[0])


def magnitude_spectrum(
    samples: np.ndarray,
    max_bins: int = MAX_SPECTRUM_BINS,
) -> np.ndarray:
    """Compute DFT magnitudes for the non-redundant half of the spectrum.

    Bin ``k`` of the result corresponds to ``k * sample_rate / len(samples)``
    Hz.  Only bins ``k < len(samples) // 2`` are kept (the spectrum of a
    real signal is Hermitian-symmetric), and at most *max_bins* of those.

    Parameters
    ----------
    samples : np.ndarray
        Real-valued (typically windowed) samples.
    max_bins : int
        High-frequency cutoff in bins.

    Returns
    -------
    np.ndarray, shape ``(min(len(samples) // 2, max_bins),)``
        Non-negative magnitudes.
    """
    if max_bins < 0:
        raise ValueError(f"max_bins must be non-negative, got {max_bins}")

    samples = np.asarray(samples, dtype=np.float64)
    n = samples.shape[0]
    if n == 0:
        return np.zeros(0, dtype=np.float64)

    # rfft yields bins 0..n//2, identical to the lower half of the full DFT
    spectrum = np.abs(np.fft.rfft(samples))
    magnitudes = spectrum[: min(n // 2, max_bins)]

    logger.debug(
        "Spectrum: %d samples -> %d bins (cutoff %d)", n, magnitudes.size, max_bins
    )
    return magnitudes
