"""
Shared fixtures for the test suite.

Signals are synthesised with numpy at integer frequencies over exactly
one second, so every tone lands on a single DFT bin and the windowed
spectrum is deterministic.  WAV files are written into ``tmp_path``
with soundfile; no real recordings are needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import numpy as np
import pytest
import soundfile as sf

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SAMPLE_RATE: int = 44100
"""One second at this rate gives 1 Hz per DFT bin."""


def _synth(
    freqs: Sequence[float],
    sample_rate: int = SAMPLE_RATE,
    duration: float = 1.0,
    amplitude: float = 0.1,
) -> np.ndarray:
    t = np.arange(int(sample_rate * duration)) / sample_rate
    return sum(amplitude * np.sin(2 * np.pi * f * t) for f in freqs)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def synth() -> Callable[..., np.ndarray]:
    """Return a function building a sum of equal-amplitude sines."""
    return _synth


@pytest.fixture
def write_wav(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a chord (or raw samples) to a WAV file."""

    def _write(
        name: str,
        freqs: Sequence[float] | None = None,
        samples: np.ndarray | None = None,
        sample_rate: int = SAMPLE_RATE,
        subtype: str = "PCM_16",
        channels: int = 1,
    ) -> Path:
        data = samples if samples is not None else _synth(freqs or [], sample_rate)
        if channels > 1:
            data = np.column_stack([data] * channels)
        path = tmp_path / name
        sf.write(path, data, sample_rate, subtype=subtype)
        return path

    return _write
