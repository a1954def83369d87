"""spectral_acr.models — Chord classification from peak frequencies."""

from spectral_acr.models.classifier import (
    ChordResult,
    analyze_chord,
    classify_chord,
    classify_intervals,
    interval_offsets,
    remove_octave_duplicates,
    select_root,
)

__all__: list[str] = [
    "ChordResult",
    "analyze_chord",
    "classify_chord",
    "classify_intervals",
    "interval_offsets",
    "remove_octave_duplicates",
    "select_root",
]
