#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Pitch estimation"""
from __future__ import annotations

import numpy as np

from .audio import autocorrelate
from ..util.exceptions import ParameterError

__all__ = ["estimate_pitch"]


def estimate_pitch(
    y: np.ndarray,
    *,
    sr: float,
    fmin: float = 80.0,
    fmax: float = 800.0,
) -> np.ndarray:
    """Estimate the fundamental frequency of a frame by auto-correlation.

    The auto-correlation of each frame is searched over the lags
    corresponding to periods between ``1 / fmax`` and ``1 / fmin`` seconds,
    i.e. lags in ``[int(sr / fmax), int(sr / fmin)]``, clipped to
    ``[1, n - 1]``.  The lag with the largest auto-correlation
    determines the estimate ``sr / lag``.  Ties go to the shortest lag.

    If no lag in the search range has strictly positive auto-correlation,
    the frame is considered unvoiced and the estimate is 0.

    Parameters
    ----------
    y : np.ndarray [shape=(..., n)]
        audio frame(s)
    sr : number > 0 [scalar]
        sampling rate of ``y``
    fmin : number > 0 [scalar]
        lowest detectable frequency (Hz)
    fmax : number > fmin [scalar]
        highest detectable frequency (Hz)

    Returns
    -------
    f0 : np.ndarray [shape=(...)]
        estimated fundamental frequency (Hz) of each frame,
        or 0 for unvoiced frames.

    Raises
    ------
    ParameterError
        If ``sr``, ``fmin`` or ``fmax`` are not positive,
        or ``fmin > fmax``.

    See Also
    --------
    audioseq.autocorrelate

    Examples
    --------
    A 200 Hz tone at 16 kHz has period 80 samples

    >>> sr = 16000
    >>> y = np.sin(2 * np.pi * 200 * np.arange(1024) / sr)
    >>> audioseq.estimate_pitch(y, sr=sr)
    array(200.)
    """
    if sr <= 0 or fmin <= 0 or fmax <= 0:
        raise ParameterError(
            f"sr={sr}, fmin={fmin} and fmax={fmax} must be strictly positive"
        )

    if fmin > fmax:
        raise ParameterError(f"fmin={fmin} must not exceed fmax={fmax}")

    y = np.asarray(y, dtype=float)
    n = y.shape[-1]

    min_period = max(1, int(sr / fmax))
    max_period = min(int(sr / fmin), n - 1)

    f0 = np.zeros(y.shape[:-1])

    if max_period < min_period:
        return f0

    ac = autocorrelate(y, max_size=max_period + 1, axis=-1)
    ac = ac[..., min_period : max_period + 1]

    best = np.argmax(ac, axis=-1)
    peak = np.take_along_axis(ac, best[..., np.newaxis], axis=-1)[..., 0]

    voiced = peak > 0
    f0[voiced] = sr / (min_period + best[voiced])

    return f0
