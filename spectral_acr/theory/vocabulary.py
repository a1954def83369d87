"""
spectral_acr.theory.vocabulary
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Chord templates, chord-quality labels, and frequency → note naming.

A chord template is the sorted, duplicate-free set of semitone offsets
a chord's tones sit at above its root (``(0, 4, 7)`` is a major triad).
The table below is the whole vocabulary the classifier understands;
anything else is reported as a bare note.

Keeps all *musical* logic (what *is* a "minor seventh"?) isolated from
the signal-processing code.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Final, Iterable, Mapping, Tuple

from spectral_acr.config import A4_FREQUENCY, A4_OCTAVE, SEMITONES_PER_OCTAVE

# ── Pitch classes, cyclic from the reference pitch A ────────────────
PITCH_CLASSES: Final[Tuple[str, ...]] = (
    "A", "A#", "B", "C", "C#", "D",
    "D#", "E", "F", "F#", "G", "G#",
)
"""Equal-tempered pitch-class names, starting at A (index 0)."""

# ── Chord templates (built once at import time, read-only) ──────────
CHORD_TEMPLATES: Final[Mapping[Tuple[int, ...], str]] = MappingProxyType({
    (0, 4, 7): "major",
    (0, 3, 7): "minor",
    (0, 4, 7, 10): "seventh",
    (0, 4, 7, 11): "major_seventh",
    (0, 3, 7, 10): "minor_seventh",
    (0, 3, 7, 11): "minor_major_seventh",
    (0, 4, 8): "augmented",
    (0, 3, 6): "diminished",
    (0, 3, 6, 9): "diminished_seventh",
    (0, 3, 6, 10): "minor_seventh_flat_five",
})
"""Root-position interval sets keyed to their chord-quality name."""

QUALITY_LABELS: Final[Tuple[str, ...]] = tuple(CHORD_TEMPLATES.values())
"""Supported chord quality labels in table order."""

UNCLASSIFIED: Final[str] = ""
"""Quality reported when the interval set matches no template."""

_QUALITY_TO_TEMPLATE: Final[Mapping[str, Tuple[int, ...]]] = MappingProxyType({
    quality: offsets for offsets, quality in CHORD_TEMPLATES.items()
})


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    :func:`round` uses banker's rounding (``round(2.5) == 2``), which
    would pull an exact quarter-tone toward even semitone numbers.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def normalize_offsets(offsets: Iterable[int]) -> Tuple[int, ...]:
    """Sort *offsets* ascending and drop duplicates.

    Idempotent: an already sorted, duplicate-free sequence comes back
    unchanged.

    >>> normalize_offsets([7, 0, 4, 0])
    (0, 4, 7)
    """
    return tuple(sorted(set(int(o) for o in offsets)))


def template_to_quality(offsets: Iterable[int]) -> str:
    """Look up the chord quality for an interval set.

    Matching is exact: a superset or subset of a template does not
    match it.

    Parameters
    ----------
    offsets : iterable of int
        Semitone offsets from the root. They are normalised first, so
        order and repeats do not matter.

    Returns
    -------
    str
        Quality name (e.g. ``'minor_seventh'``), or ``''`` when no
        template matches.
    """
    return CHORD_TEMPLATES.get(normalize_offsets(offsets), UNCLASSIFIED)


def quality_to_template(quality: str) -> Tuple[int, ...]:
    """Map a quality name (e.g. ``'diminished'``) back to its offsets.

    Raises
    ------
    KeyError
        If *quality* is not in the vocabulary.
    """
    return _QUALITY_TO_TEMPLATE[quality]


def note_name(freq: float) -> str:
    """Name the equal-tempered note closest to *freq*.

    Octaves are counted from A, so the octave number changes between
    G# and A rather than between B and C (``261.63 Hz`` is ``'C3'``).

    Examples
    --------
    >>> note_name(440.0)
    'A4'
    >>> note_name(880.0)
    'A5'
    >>> note_name(554.37)
    'C#4'

    Parameters
    ----------
    freq : float
        Frequency in Hz; must be finite and positive.

    Returns
    -------
    str
        Pitch class followed by the octave number.

    Raises
    ------
    ValueError
        If *freq* is not a finite positive number.
    """
    if not math.isfinite(freq) or freq <= 0:
        raise ValueError(f"Cannot name a note for frequency {freq!r}")

    position = A4_OCTAVE + math.log2(freq / A4_FREQUENCY)
    octave = math.floor(position)
    pitch_idx = round_half_away(position * SEMITONES_PER_OCTAVE) % SEMITONES_PER_OCTAVE
    return f"{PITCH_CLASSES[pitch_idx]}{octave}"
