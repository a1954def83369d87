"""
spectral_acr.config
~~~~~~~~~~~~~~~~~~~

Global constants for windowing, peak picking and note naming.
Centralises all magic numbers so they can be imported once and
shared across every submodule.
"""

from typing import Final

# ── Input ────────────────────────────────────────────────────────────
INPUT_DIR: Final[str] = "chords"
"""Directory that bare recording names are resolved against."""

DEFAULT_EXTENSION: Final[str] = ".wav"
"""Extension appended to recording names given without one."""

# ── Window ───────────────────────────────────────────────────────────
HAMMING_ALPHA: Final[float] = 0.54
"""Constant term of the Hamming window (the cosine term is ``1 - alpha``)."""

# ── Spectrum / peaks ────────────────────────────────────────────────
MAX_SPECTRUM_BINS: Final[int] = 20000
"""High-frequency cutoff, in bins, applied regardless of sample rate."""

SMOOTHING_TAPS: Final[int] = 3
"""Width of the moving average applied before peak picking."""

N_PEAKS: Final[int] = 8
"""Number of strongest spectral peaks handed to the classifier."""

# ── Tuning ───────────────────────────────────────────────────────────
A4_FREQUENCY: Final[float] = 440.0
"""Reference pitch in Hz (equal temperament)."""

A4_OCTAVE: Final[int] = 4
"""Octave number of the reference pitch."""

SEMITONES_PER_OCTAVE: Final[int] = 12
"""Equal-tempered semitones per octave."""
