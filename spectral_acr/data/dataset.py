"""
spectral_acr.data.dataset
~~~~~~~~~~~~~~~~~~~~~~~~~

Batch runs over a folder of recordings, with optional ground truth.

Results come back as :class:`pandas.DataFrame` objects, one row per
file.  A file that fails (missing, undecodable, silent) does not stop
the batch: its row carries the error message and empty prediction
fields instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from spectral_acr.config import DEFAULT_EXTENSION, MAX_SPECTRUM_BINS, N_PEAKS
from spectral_acr.core import predict
from spectral_acr.exceptions import ChordDetectionError

logger = logging.getLogger(__name__)

RESULT_COLUMNS: list[str] = [
    "audio_file",
    "label",
    "note",
    "quality",
    "root_frequency",
    "error",
]


def _analyze_file(
    audio_path: Path,
    max_peaks: int = N_PEAKS,
    max_bins: int = MAX_SPECTRUM_BINS,
) -> Dict[str, Any]:
    row: Dict[str, Any] = {"audio_file": audio_path.name}
    try:
        result = predict(audio_path, max_peaks=max_peaks, max_bins=max_bins)
    except ChordDetectionError as exc:
        logger.warning("Skipping %s: %s", audio_path.name, exc)
        row.update(label=None, note=None, quality=None, root_frequency=None,
                   error=str(exc))
        return row

    row.update(
        label=result.label,
        note=result.note,
        quality=result.quality,
        root_frequency=result.root_frequency,
        error=None,
    )
    return row


def scan_directory(
    audio_dir: str | Path,
    extension: str = DEFAULT_EXTENSION,
    max_peaks: int = N_PEAKS,
    max_bins: int = MAX_SPECTRUM_BINS,
) -> pd.DataFrame:
    """Identify the chord of every recording in *audio_dir*.

    Parameters
    ----------
    audio_dir : str | Path
        Folder to scan (not recursive).
    extension : str
        Only files with this suffix are analysed.

    Returns
    -------
    pd.DataFrame
        Columns :data:`RESULT_COLUMNS`, sorted by file name.
    """
    audio_dir = Path(audio_dir)
    files = sorted(p for p in audio_dir.glob(f"*{extension}") if p.is_file())
    logger.debug("Found %d %s files in %s", len(files), extension, audio_dir)

    rows = [_analyze_file(p, max_peaks=max_peaks, max_bins=max_bins) for p in files]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def evaluate_index(
    index_file: str | Path,
    audio_dir: str | Path,
    max_peaks: int = N_PEAKS,
    max_bins: int = MAX_SPECTRUM_BINS,
) -> pd.DataFrame:
    """Compare predictions against a labelled index.

    Parameters
    ----------
    index_file : str | Path
        CSV with ``audio_file`` and ``chord`` columns, where ``chord`` is
        the expected label in the same form as :attr:`ChordResult.label`
        (e.g. ``'A4 minor'``, or ``'E3'`` for a bare note).
    audio_dir : str | Path
        Directory the ``audio_file`` entries are relative to.

    Returns
    -------
    pd.DataFrame
        :data:`RESULT_COLUMNS` plus ``chord`` (expected) and ``correct``
        (bool).  Accuracy is ``df["correct"].mean()``.
    """
    metadata = pd.read_csv(index_file)
    missing = {"audio_file", "chord"} - set(metadata.columns)
    if missing:
        raise ValueError(f"Index file {index_file} lacks columns {sorted(missing)}")
    unnamed = metadata["audio_file"].isna()
    if unnamed.any():
        logger.warning("Skipping %d index rows without an audio_file", int(unnamed.sum()))
        metadata = metadata[~unnamed]

    rows = []
    for _, entry in metadata.iterrows():
        row = _analyze_file(
            Path(audio_dir) / str(entry["audio_file"]),
            max_peaks=max_peaks,
            max_bins=max_bins,
        )
        row["audio_file"] = entry["audio_file"]
        row["chord"] = entry["chord"]
        rows.append(row)

    results = pd.DataFrame(rows, columns=[*RESULT_COLUMNS, "chord"])
    results["correct"] = results["label"] == results["chord"]
    return results
