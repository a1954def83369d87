"""
spectral_acr.models.classifier
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Rule-based chord classifier over a handful of peak frequencies.

The lowest frequency is taken as the root, anything an octave or more
above it is dropped, the rest are turned into semitone offsets from the
root, and the resulting interval set is looked up in
:data:`~spectral_acr.theory.vocabulary.CHORD_TEMPLATES`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from spectral_acr.config import SEMITONES_PER_OCTAVE
from spectral_acr.exceptions import NoChordDetectedError
from spectral_acr.theory.vocabulary import (
    UNCLASSIFIED,
    normalize_offsets,
    note_name,
    round_half_away,
    template_to_quality,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChordResult:
    """Outcome of classifying one set of candidate frequencies.

    Attributes
    ----------
    root_frequency : float
        Lowest usable candidate, in Hz.
    note : str
        Note name of the root (e.g. ``'A4'``).
    quality : str
        Chord-quality name, ``''`` when the intervals match no template.
    intervals : tuple[int, ...]
        Sorted, duplicate-free semitone offsets from the root.
    frequencies : tuple[float, ...]
        Candidates that fell within the octave above the root.
    """

    root_frequency: float
    note: str
    quality: str
    intervals: Tuple[int, ...]
    frequencies: Tuple[float, ...] = ()

    @property
    def is_classified(self) -> bool:
        """*True* if the intervals matched a chord template."""
        return self.quality != UNCLASSIFIED

    @property
    def label(self) -> str:
        """``'<note> <quality>'``, or just the note for a bare note."""
        return f"{self.note} {self.quality}" if self.is_classified else self.note

    def __str__(self) -> str:
        return self.label


def _usable(frequencies: Iterable[float]) -> np.ndarray:
    freqs = np.asarray(list(frequencies), dtype=np.float64)
    return freqs[np.isfinite(freqs) & (freqs > 0)]


def select_root(frequencies: Iterable[float]) -> float:
    """Pick the root: the lowest finite, positive candidate.

    NaN, infinite and non-positive values are ignored.

    Raises
    ------
    NoChordDetectedError
        If no usable candidate remains.
    """
    freqs = _usable(frequencies)
    if freqs.size == 0:
        raise NoChordDetectedError("No usable peak frequency to take as the root")
    return float(freqs.min())


def remove_octave_duplicates(
    frequencies: Iterable[float],
    root: float,
) -> List[float]:
    """Keep only candidates strictly below ``2 * root``.

    Octave doublings of the root and of the chord tones fold back onto
    the same offsets, so they add nothing to the interval set.
    """
    freqs = _usable(frequencies)
    return freqs[freqs < 2.0 * root].tolist()


def interval_offsets(
    frequencies: Iterable[float],
    root: float,
) -> Tuple[int, ...]:
    """Semitone offsets of *frequencies* above *root*, sorted and unique.

    Each offset is ``round(12 * log2(f / root))``.
    """
    return normalize_offsets(
        round_half_away(math.log2(f / root) * SEMITONES_PER_OCTAVE)
        for f in frequencies
    )


def classify_intervals(offsets: Iterable[int]) -> str:
    """Return the chord quality for *offsets*, or ``''`` if unknown."""
    return template_to_quality(offsets)


def analyze_chord(frequencies: Iterable[float]) -> ChordResult:
    """Classify the chord formed by a set of peak frequencies.

    Parameters
    ----------
    frequencies : iterable of float
        Candidate frequencies in Hz, in any order (typically the output
        of :func:`~spectral_acr.data.peaks.extract_peak_frequencies`).

    Returns
    -------
    ChordResult

    Raises
    ------
    NoChordDetectedError
        If *frequencies* holds no finite, positive value.
    """
    frequencies = list(frequencies)
    root = select_root(frequencies)
    in_octave = remove_octave_duplicates(frequencies, root)
    offsets = interval_offsets(in_octave, root)
    quality = classify_intervals(offsets)

    logger.debug("Root %.2f Hz, offsets %s -> %r", root, offsets, quality)
    return ChordResult(
        root_frequency=root,
        note=note_name(root),
        quality=quality,
        intervals=offsets,
        frequencies=tuple(in_octave),
    )


def classify_chord(frequencies: Iterable[float]) -> str:
    """Shorthand for ``analyze_chord(frequencies).label``.

    >>> classify_chord([440.0, 554.37, 659.25])
    'A4 major'
    """
    return analyze_chord(frequencies).label
