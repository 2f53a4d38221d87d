#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Frame-level feature assembly and manipulation utilities"""
from __future__ import annotations

import numpy as np

from .. import util
from ..util.exceptions import ParameterError
from ..core.pitch import estimate_pitch
from .spectral import mfcc, rms, zero_crossing_rate, spectral_centroid
from typing import Optional

__all__ = ["frame_and_extract", "quantize"]


def frame_and_extract(
    y: np.ndarray,
    *,
    sr: float,
    frame_length: int,
    hop_length: Optional[int] = None,
    n_mfcc: int = 13,
    n_mels: int = 26,
) -> np.ndarray:
    """Slice a signal into frames and compute a feature vector for each frame.

    Frame ``i`` covers samples ``[i * hop_length, i * hop_length + frame_length)``.
    Trailing samples that do not fill a complete frame are dropped.

    Each feature vector has ``n_mfcc + 4`` components, laid out as::

        [mfcc_0, ..., mfcc_{n_mfcc - 1}, rms, zcr, centroid, pitch]

    Parameters
    ----------
    y : np.ndarray [shape=(n,)]
        audio time series.  Must be one-dimensional and floating-point.
    sr : number > 0 [scalar]
        sampling rate of ``y``
    frame_length : int > 0 [scalar]
        number of samples per frame
    hop_length : int > 0 [scalar] or None
        number of samples between successive frames.
        If not provided, defaults to ``max(1, frame_length // 2)``.
    n_mfcc : int >= 0 [scalar]
        number of MFCCs per frame
    n_mels : int > 0 [scalar]
        number of mel filters used for the MFCCs

    Returns
    -------
    features : np.ndarray [shape=(n_frames, n_mfcc + 4)]
        one feature vector per row, in temporal order.
        If ``y`` is shorter than one frame, ``n_frames == 0``.

    Raises
    ------
    ParameterError
        If ``y`` is not valid audio,
        or ``frame_length`` or ``hop_length`` are not positive integers.

    See Also
    --------
    audioseq.util.frame
    audioseq.feature.mfcc
    audioseq.feature.rms
    audioseq.feature.zero_crossing_rate
    audioseq.feature.spectral_centroid
    audioseq.estimate_pitch

    Examples
    --------
    >>> sr = 16000
    >>> y = np.sin(2 * np.pi * 440 * np.arange(sr) / sr)
    >>> features = audioseq.feature.frame_and_extract(y, sr=sr, frame_length=512)
    >>> features.shape
    (61, 17)
    """
    util.valid_audio(y)

    if not util.is_positive_int(frame_length):
        raise ParameterError(f"Invalid frame_length={frame_length}")

    if hop_length is None:
        hop_length = max(1, frame_length // 2)

    frames = util.frame(y, frame_length=frame_length, hop_length=hop_length)
    n_frames = frames.shape[0]

    features = np.zeros((n_frames, n_mfcc + 4))

    if n_frames == 0:
        return features

    features[:, :n_mfcc] = mfcc(frames, sr=sr, n_mfcc=n_mfcc, n_mels=n_mels)
    features[:, n_mfcc] = rms(frames)
    features[:, n_mfcc + 1] = zero_crossing_rate(frames)
    features[:, n_mfcc + 2] = spectral_centroid(frames, sr=sr)
    features[:, n_mfcc + 3] = estimate_pitch(frames, sr=sr)

    return features


def quantize(
    x: np.ndarray,
    *,
    offset: float = 30.0,
    scale: float = 4.0,
    n_symbols: int = 256,
) -> np.ndarray:
    """Map continuous feature values onto a discrete observation vocabulary.

    ``symbol = clip(floor((x + offset) * scale + 0.5), 0, n_symbols - 1)``

    This is useful for turning a single feature track (e.g., the first
    MFCC of each frame) into observations for a discrete
    `audioseq.sequence.HiddenMarkovModel`.

    Parameters
    ----------
    x : np.ndarray
        feature values
    offset : float
        value added before scaling
    scale : float
        scaling factor
    n_symbols : int > 0
        vocabulary size

    Returns
    -------
    symbols : np.ndarray [shape=x.shape, dtype=int]
        observation symbols in ``[0, n_symbols)``

    Raises
    ------
    ParameterError
        If ``n_symbols`` is not a positive integer.

    Examples
    --------
    >>> audioseq.feature.quantize(np.array([-40.0, -30.0, 0.0, 40.0]))
    array([  0,   0, 120, 255])
    """
    if not util.is_positive_int(n_symbols):
        raise ParameterError(f"Invalid n_symbols={n_symbols}")

    x = np.asarray(x, dtype=float)

    symbols = np.floor((x + offset) * scale + 0.5)
    return np.clip(symbols, 0, n_symbols - 1).astype(int)
