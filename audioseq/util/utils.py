#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Utility functions"""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import as_strided

from .exceptions import ParameterError

__all__ = [
    "frame",
    "valid_audio",
    "valid_observations",
    "is_positive_int",
]


def frame(x: np.ndarray, *, frame_length: int, hop_length: int) -> np.ndarray:
    """Slice a time series into overlapping frames.

    This implementation uses low-level stride manipulation to avoid
    making a copy of the data.  The resulting frame representation
    is a read-only view of the input.

    Frames are laid out row-wise, so that each row of the output is
    one frame, and rows are in temporal order.
    Frames that would run past the end of ``x`` are dropped.

    Parameters
    ----------
    x : np.ndarray [shape=(n,)]
        Time series to frame. Must be one-dimensional.
    frame_length : int > 0 [scalar]
        Length of the frame in samples
    hop_length : int > 0 [scalar]
        Number of samples to hop between frames

    Returns
    -------
    x_frames : np.ndarray [shape=(n_frames, frame_length)]
        An array of frames sampled from ``x``:
        ``x_frames[i, j] == x[i * hop_length + j]``

        If ``len(x) < frame_length``, then ``n_frames == 0``.

    Raises
    ------
    ParameterError
        If ``x`` is not an ``np.ndarray`` or not one-dimensional.

        If ``frame_length < 1`` or ``hop_length < 1``.

    Examples
    --------
    >>> x = np.arange(10, dtype=float)
    >>> audioseq.util.frame(x, frame_length=4, hop_length=2)
    array([[0., 1., 2., 3.],
           [2., 3., 4., 5.],
           [4., 5., 6., 7.],
           [6., 7., 8., 9.]])
    """
    if not isinstance(x, np.ndarray):
        raise ParameterError(
            f"Input must be of type numpy.ndarray, given type(x)={type(x)}"
        )

    if x.ndim != 1:
        raise ParameterError(f"Input must be one-dimensional, given x.ndim={x.ndim}")

    if not is_positive_int(frame_length):
        raise ParameterError(f"Invalid frame_length={frame_length}")

    if not is_positive_int(hop_length):
        raise ParameterError(f"Invalid hop_length={hop_length}")

    # Compute the number of frames that will fit. The end may get truncated.
    n_frames = max(0, 1 + (len(x) - frame_length) // hop_length)

    if n_frames == 0:
        return np.empty((0, frame_length), dtype=x.dtype)

    x = np.ascontiguousarray(x)

    # Vertical stride is `hop_length` samples
    # Horizontal stride is one sample
    xw = as_strided(
        x,
        shape=(n_frames, frame_length),
        strides=(hop_length * x.itemsize, x.itemsize),
        writeable=False,
    )
    return xw


def valid_audio(y: np.ndarray) -> bool:
    """Determine whether a variable contains valid, monophonic audio data.

    Parameters
    ----------
    y : np.ndarray
        The input data to validate

    Returns
    -------
    valid : bool
        True if all tests pass

    Raises
    ------
    ParameterError
        In any of the following cases:
            - ``type(y)`` is not ``np.ndarray``
            - ``y.dtype`` is not floating-point
            - ``y.ndim != 1``
            - ``np.isfinite(y).all()`` is False

    Examples
    --------
    >>> audioseq.util.valid_audio(np.zeros(16))
    True
    """
    if not isinstance(y, np.ndarray):
        raise ParameterError("Audio data must be of type numpy.ndarray")

    if not np.issubdtype(y.dtype, np.floating):
        raise ParameterError("Audio data must be floating-point")

    if y.ndim != 1:
        raise ParameterError(
            f"Audio data must be one-dimensional, given y.shape={y.shape}"
        )

    if not np.isfinite(y).all():
        raise ParameterError("Audio buffer is not finite everywhere")

    return True


def valid_observations(observations) -> np.ndarray:
    """Coerce a discrete observation sequence to a 1-dimensional integer array.

    Symbols outside the model vocabulary are *not* rejected here;
    they are scored as impossible by the decoders.

    Parameters
    ----------
    observations : iterable of int
        The observation symbols

    Returns
    -------
    obs : np.ndarray [shape=(T,), dtype=int]

    Raises
    ------
    ParameterError
        If ``observations`` is not one-dimensional or holds
        non-integer values.
    """
    obs = np.asarray(observations)

    if obs.size == 0:
        return np.zeros(0, dtype=np.int64)

    if obs.ndim != 1:
        raise ParameterError(
            f"Observations must be one-dimensional, given shape={obs.shape}"
        )

    if not np.issubdtype(obs.dtype, np.integer):
        if not np.issubdtype(obs.dtype, np.floating) or np.any(obs != np.round(obs)):
            raise ParameterError(f"Observations must be integer symbols, given {obs!r}")

    return obs.astype(np.int64)


def is_positive_int(x: float) -> bool:
    """Check that x is a positive integer, i.e. 1 or greater.

    Parameters
    ----------
    x : number

    Returns
    -------
    positive : bool
    """
    # Check type first to catch None values.
    return isinstance(x, (int, np.integer)) and (x > 0)
