"""spectral_acr.data — Waveform loading, spectra and peak picking."""

from spectral_acr.data.peaks import (
    Peak,
    extract_peak_frequencies,
    extract_peaks,
    find_local_maxima,
    smooth_spectrum,
)
from spectral_acr.data.preprocess import (
    apply_window,
    hamming_window,
    load_waveform,
    magnitude_spectrum,
    resolve_input_path,
)

__all__: list[str] = [
    "Peak",
    "extract_peak_frequencies",
    "extract_peaks",
    "find_local_maxima",
    "smooth_spectrum",
    "apply_window",
    "hamming_window",
    "load_waveform",
    "magnitude_spectrum",
    "resolve_input_path",
]
