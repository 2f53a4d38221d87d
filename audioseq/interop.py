#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Flat-buffer interface
=====================

Entry points that exchange only flat numeric buffers and scalars,
for callers that cannot construct structured arrays
(e.g., foreign-function or message-passing bridges).
Multi-dimensional parameters are passed as row-major flat buffers
together with their dimensions.

.. autosummary::
    :toctree: generated/

    extract_features
    extract_cepstral
    align_distance
    align_normalized_distance
    alignment_score
    decode
    sequence_likelihood
"""
from __future__ import annotations

import numpy as np

from . import feature
from . import sequence
from .util import is_positive_int
from .util.exceptions import ParameterError
from typing import Iterable, Optional, Tuple

__all__ = [
    "extract_features",
    "extract_cepstral",
    "align_distance",
    "align_normalized_distance",
    "alignment_score",
    "decode",
    "sequence_likelihood",
]


def _unflatten(buf: Iterable[float], shape: Tuple[int, ...], name: str) -> np.ndarray:
    arr = np.asarray(buf, dtype=float).ravel()

    if arr.size != np.prod(shape, dtype=int):
        raise ParameterError(
            f"{name} has {arr.size} values, expected {int(np.prod(shape))} for shape={shape}"
        )

    return arr.reshape(shape)


def _as_sequence(seq: Iterable[float], dim: int, name: str) -> np.ndarray:
    if not is_positive_int(dim):
        raise ParameterError(f"Invalid {name} dimension={dim}")

    arr = np.asarray(seq, dtype=float).ravel()

    if arr.size % dim != 0:
        raise ParameterError(
            f"{name} has {arr.size} values, which is not a multiple of dimension={dim}"
        )

    return arr.reshape((-1, dim))


def _model(
    transition: Iterable[float],
    emission: Iterable[float],
    initial: Iterable[float],
    n_states: int,
    n_symbols: int,
) -> sequence.HiddenMarkovModel:
    if not isinstance(n_states, (int, np.integer)) or n_states < 0:
        raise ParameterError(f"n_states={n_states} must be a non-negative integer")

    if not isinstance(n_symbols, (int, np.integer)) or n_symbols < 0:
        raise ParameterError(f"n_symbols={n_symbols} must be a non-negative integer")

    return sequence.HiddenMarkovModel(
        _unflatten(transition, (n_states, n_states), "transition"),
        _unflatten(emission, (n_states, n_symbols), "emission"),
        _unflatten(initial, (n_states,), "initial"),
    )


def extract_features(
    audio: Iterable[float],
    sr: float,
    frame_size: int,
    *,
    hop_size: Optional[int] = None,
    n_mfcc: int = 13,
) -> np.ndarray:
    """Frame an audio buffer and compute one feature vector per frame.

    Parameters
    ----------
    audio : iterable of float [shape=(n,)]
        audio samples
    sr : number > 0
        sampling rate
    frame_size : int > 0
        samples per frame
    hop_size : int > 0 or None
        samples between frames.  Defaults to ``max(1, frame_size // 2)``.
    n_mfcc : int >= 0
        number of cepstral coefficients per frame

    Returns
    -------
    features : np.ndarray [shape=(n_frames, n_mfcc + 4)]
        one row per frame:
        ``[mfcc_0, ..., mfcc_{n_mfcc - 1}, rms, zcr, centroid, pitch]``

    See Also
    --------
    audioseq.feature.frame_and_extract
    """
    y = np.asarray(audio, dtype=float).ravel()

    return feature.frame_and_extract(
        y, sr=sr, frame_length=frame_size, hop_length=hop_size, n_mfcc=n_mfcc
    )


def extract_cepstral(frame: Iterable[float], sr: float, n_coeffs: int) -> np.ndarray:
    """Mel-frequency cepstral coefficients of a single frame.

    Parameters
    ----------
    frame : iterable of float [shape=(n,)], n > 0
        audio samples
    sr : number > 0
        sampling rate
    n_coeffs : int >= 0
        number of coefficients

    Returns
    -------
    mfcc : np.ndarray [shape=(n_coeffs,)]

    See Also
    --------
    audioseq.feature.mfcc
    """
    y = np.asarray(frame, dtype=float).ravel()

    return feature.mfcc(y, sr=sr, n_mfcc=n_coeffs)


def align_distance(
    seq1: Iterable[float], dim1: int, seq2: Iterable[float], dim2: int
) -> float:
    """DTW distance between two flat, row-major feature sequences.

    Parameters
    ----------
    seq1 : iterable of float [shape=(n * dim1,)]
        first sequence, ``n`` vectors of ``dim1`` values
    dim1 : int > 0
        feature dimension of ``seq1``
    seq2 : iterable of float [shape=(m * dim2,)]
        second sequence, ``m`` vectors of ``dim2`` values
    dim2 : int > 0
        feature dimension of ``seq2``

    Returns
    -------
    dist : float
        Euclidean DTW distance, or ``+inf`` if ``dim1 != dim2``
        or either sequence is empty.

    Raises
    ------
    ParameterError
        If a buffer length is not a multiple of its dimension.

    See Also
    --------
    audioseq.sequence.dtw

    Examples
    --------
    >>> audioseq.interop.align_distance([0, 0, 1, 1], 2, [0, 0, 1, 2], 2)
    1.0
    >>> audioseq.interop.align_distance([0, 0, 1, 1], 2, [0, 0, 1], 3)
    inf
    """
    if dim1 != dim2:
        return np.inf

    dist, _ = sequence.dtw(_as_sequence(seq1, dim1, "seq1"), _as_sequence(seq2, dim2, "seq2"))
    return dist


def align_normalized_distance(
    seq1: Iterable[float], dim1: int, seq2: Iterable[float], dim2: int
) -> float:
    """Path-length normalized DTW distance between two flat feature sequences.

    Parameters and dimension handling are as in `align_distance`.

    See Also
    --------
    align_distance
    audioseq.sequence.dtw_normalized
    """
    if dim1 != dim2:
        return np.inf

    return sequence.dtw_normalized(
        _as_sequence(seq1, dim1, "seq1"), _as_sequence(seq2, dim2, "seq2")
    )


def alignment_score(distance: float, *, scale: float = 20.0) -> float:
    """Convert a normalized alignment distance to a score in ``[0, 100]``.

    ``score = max(0, 100 - distance * scale)``

    Parameters
    ----------
    distance : float >= 0
        normalized DTW distance, e.g. from `align_normalized_distance`
    scale : float > 0
        score points lost per unit of distance

    Returns
    -------
    score : float
        100 for identical sequences, 0 for infinitely distant ones.

    Examples
    --------
    >>> audioseq.interop.alignment_score(0.5)
    90.0
    >>> audioseq.interop.alignment_score(np.inf)
    0.0
    """
    if scale <= 0:
        raise ParameterError(f"scale={scale} must be strictly positive")

    return float(max(0.0, 100.0 - distance * scale))


def decode(
    observations: Iterable[int],
    transition: Iterable[float],
    emission: Iterable[float],
    initial: Iterable[float],
    n_states: int,
    n_symbols: int,
) -> np.ndarray:
    """Most likely state sequence under a flat-buffer model.

    Parameters
    ----------
    observations : iterable of int [shape=(T,)]
        observation symbols
    transition : iterable of float [shape=(n_states * n_states,)]
        row-major transition matrix
    emission : iterable of float [shape=(n_states * n_symbols,)]
        row-major emission matrix
    initial : iterable of float [shape=(n_states,)]
        initial state distribution
    n_states : int >= 0
        number of hidden states
    n_symbols : int >= 0
        observation vocabulary size

    Returns
    -------
    states : np.ndarray [shape=(T,), dtype=int]
        The Viterbi path.  Empty if ``T == 0`` or ``n_states == 0``.

    Raises
    ------
    ParameterError
        If a buffer length does not match the declared sizes.

    See Also
    --------
    audioseq.sequence.HiddenMarkovModel.viterbi
    """
    hmm = _model(transition, emission, initial, n_states, n_symbols)

    states: np.ndarray = hmm.viterbi(observations)
    return states


def sequence_likelihood(
    observations: Iterable[int],
    transition: Iterable[float],
    emission: Iterable[float],
    initial: Iterable[float],
    n_states: int,
    n_symbols: int,
) -> float:
    """Log-likelihood of an observation sequence under a flat-buffer model.

    Parameters are as in `decode`.

    Returns
    -------
    logp : float
        ``log P[observations]``, or ``-inf`` for an empty or
        impossible sequence.

    See Also
    --------
    audioseq.sequence.HiddenMarkovModel.likelihood
    """
    hmm = _model(transition, emission, initial, n_states, n_symbols)

    return hmm.likelihood(observations)
