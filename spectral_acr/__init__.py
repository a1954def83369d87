"""
spectral_acr
~~~~~~~~~~~~

Spectral-peak chord recognition for short recordings.

Quick-start::

    import spectral_acr as acr

    # Full pipeline on a file
    result = acr.predict("chords/c_major.wav")
    print(result.label)                      # e.g. 'C3 major'

    # Already-decoded samples
    result = acr.identify_chord(samples, sample_rate=44100)

    # Classifier on its own
    acr.classify_chord([440.0, 554.37, 659.25])   # 'A4 major'
    acr.note_name(440.0)                          # 'A4'

Subpackages
-----------
data      Waveform loading, windowing, spectra, peak picking, batch runs.
models    Chord classifier over peak frequencies.
theory    Musical-domain knowledge (chord templates, note names).
"""

from __future__ import annotations

__version__: str = "0.1.0"

# ── Core pipeline ────────────────────────────────────────────────────
from spectral_acr.core import identify_chord, predict

# ── Data ─────────────────────────────────────────────────────────────
from spectral_acr.data.peaks import Peak, extract_peak_frequencies, extract_peaks
from spectral_acr.data.preprocess import (
    apply_window,
    hamming_window,
    load_waveform,
    magnitude_spectrum,
    resolve_input_path,
)

# ── Model ────────────────────────────────────────────────────────────
from spectral_acr.models.classifier import ChordResult, analyze_chord, classify_chord

# ── Theory ───────────────────────────────────────────────────────────
from spectral_acr.theory.vocabulary import (
    CHORD_TEMPLATES,
    PITCH_CLASSES,
    QUALITY_LABELS,
    note_name,
    template_to_quality,
)

# ── Errors ───────────────────────────────────────────────────────────
from spectral_acr.exceptions import (
    AudioFileNotFoundError,
    ChordDetectionError,
    MalformedAudioError,
    NoChordDetectedError,
)

# ── Config (re-export constants for convenience) ─────────────────────
from spectral_acr.config import A4_FREQUENCY, MAX_SPECTRUM_BINS, N_PEAKS, SMOOTHING_TAPS

__all__: list[str] = [
    # pipeline
    "identify_chord",
    "predict",
    # data
    "Peak",
    "extract_peaks",
    "extract_peak_frequencies",
    "apply_window",
    "hamming_window",
    "load_waveform",
    "magnitude_spectrum",
    "resolve_input_path",
    # model
    "ChordResult",
    "analyze_chord",
    "classify_chord",
    # theory
    "CHORD_TEMPLATES",
    "PITCH_CLASSES",
    "QUALITY_LABELS",
    "note_name",
    "template_to_quality",
    # errors
    "ChordDetectionError",
    "AudioFileNotFoundError",
    "MalformedAudioError",
    "NoChordDetectedError",
    # config
    "A4_FREQUENCY",
    "MAX_SPECTRUM_BINS",
    "N_PEAKS",
    "SMOOTHING_TAPS",
]
