"""
spectral_acr.exceptions
~~~~~~~~~~~~~~~~~~~~~~~

Error types raised by the chord detection pipeline.

A missing recording and an undecodable one are kept apart so that
callers (the CLI, batch mode, tests) can report the former to the user
and treat the latter as a failed run.
"""

from __future__ import annotations


class ChordDetectionError(Exception):
    """Base class for every error raised by :mod:`spectral_acr`."""


class AudioFileNotFoundError(ChordDetectionError, FileNotFoundError):
    """The recording does not exist or is not a regular file."""


class MalformedAudioError(ChordDetectionError):
    """The recording exists but its samples could not be decoded."""


class NoChordDetectedError(ChordDetectionError):
    """The spectrum held no usable peak to anchor a chord on."""
