"""spectral_acr.theory — Chord templates and note naming."""

from spectral_acr.theory.vocabulary import (
    CHORD_TEMPLATES,
    PITCH_CLASSES,
    QUALITY_LABELS,
    UNCLASSIFIED,
    normalize_offsets,
    note_name,
    quality_to_template,
    round_half_away,
    template_to_quality,
)

__all__: list[str] = [
    "CHORD_TEMPLATES",
    "PITCH_CLASSES",
    "QUALITY_LABELS",
    "UNCLASSIFIED",
    "normalize_offsets",
    "note_name",
    "quality_to_template",
    "round_half_away",
    "template_to_quality",
]
