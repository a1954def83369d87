"""Command-line entry point: name the chord in a recording.

Usage
-----
    # Prompt for a name, read chords/<name>.wav
    spectral-acr

    # Name on the command line (extension optional)
    spectral-acr c_major
    spectral-acr --input-dir samples c_major.wav

    # Every .wav in the input directory
    spectral-acr --batch

    # Accuracy against a CSV of audio_file,chord rows
    spectral-acr --index labels.csv

Exit codes
----------
    0  — chord reported
    1  — file not found, or no chord detected
    2  — the file could not be decoded
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from spectral_acr import __version__
from spectral_acr.config import INPUT_DIR, MAX_SPECTRUM_BINS, N_PEAKS
from spectral_acr.core import predict
from spectral_acr.data.dataset import evaluate_index, scan_directory
from spectral_acr.data.preprocess import resolve_input_path
from spectral_acr.exceptions import (
    AudioFileNotFoundError,
    MalformedAudioError,
    NoChordDetectedError,
)

PROMPT = "Enter a file name: "


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="spectral-acr",
        description="Identify the chord in a short recording",
    )
    p.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Recording name under the input directory (prompted for if omitted)",
    )
    p.add_argument(
        "--input-dir",
        default=INPUT_DIR,
        help=f"Directory recordings are read from (default: {INPUT_DIR})",
    )
    p.add_argument(
        "--max-peaks",
        type=_positive_int,
        default=N_PEAKS,
        help=f"Number of spectral peaks considered (default: {N_PEAKS})",
    )
    p.add_argument(
        "--max-bins",
        type=_non_negative_int,
        default=MAX_SPECTRUM_BINS,
        help=f"High-frequency cutoff in bins (default: {MAX_SPECTRUM_BINS})",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--batch",
        action="store_true",
        help="Analyse every recording in the input directory",
    )
    mode.add_argument(
        "--index",
        metavar="CSV",
        default=None,
        help="Evaluate against a CSV with audio_file and chord columns",
    )
    p.add_argument("--verbose", action="store_true", help="Log pipeline details")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def _run_single(args: argparse.Namespace) -> int:
    if args.name is not None:
        name = args.name
    else:
        try:
            name = input(PROMPT)
        except EOFError:
            print("\nNo file name given")
            return 1
    path = resolve_input_path(name, args.input_dir)

    try:
        result = predict(path, max_peaks=args.max_peaks, max_bins=args.max_bins)
    except AudioFileNotFoundError:
        print(f"File not found: {path}")
        return 1
    except NoChordDetectedError:
        print("No chord detected")
        return 1
    except MalformedAudioError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"The chord of this recording is {result.label}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.batch:
        results = scan_directory(
            args.input_dir, max_peaks=args.max_peaks, max_bins=args.max_bins
        )
        if results.empty:
            print(f"error: no audio files found in {args.input_dir}")
            return 1
        print(results.to_string(index=False))
        return 0

    if args.index is not None:
        results = evaluate_index(
            args.index, args.input_dir, max_peaks=args.max_peaks, max_bins=args.max_bins
        )
        print(results.to_string(index=False))
        if not results.empty:
            print(f"\nAccuracy: {results['correct'].mean():.3f} "
                  f"({int(results['correct'].sum())}/{len(results)})")
        return 0

    return _run_single(args)


if __name__ == "__main__":
    sys.exit(main())
