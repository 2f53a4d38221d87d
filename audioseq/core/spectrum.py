#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Utilities for spectral processing"""
from __future__ import annotations

import numpy as np

from .fft import get_fftlib
from ..filters import get_window
from ..util.exceptions import ParameterError
from .._typing import _WindowSpec
from typing import Optional

__all__ = ["dft", "magnitude_spectrum", "windowed_spectrum"]


def dft(y: np.ndarray, *, axis: int = -1) -> np.ndarray:
    """Discrete Fourier transform of a real or complex signal.

    The output follows the textbook definition::

        D[k] = sum_j y[j] * exp(-2j * pi * k * j / n),  k, j in [0, n)

    for any length ``n`` (including lengths that are not powers of two).
    The computation is delegated to the FFT library returned by
    `audioseq.core.fft.get_fftlib`, which produces the same values
    in ``O(n log n)`` time.

    Parameters
    ----------
    y : np.ndarray [shape=(..., n, ...)]
        input signal
    axis : int
        axis along which to transform.
        By default, the last axis (-1) is taken.

    Returns
    -------
    D : np.ndarray [shape=(..., n, ...), dtype=complex]
        The complex Fourier coefficients of ``y``.
        ``D`` has the same shape as ``y``.

    See Also
    --------
    magnitude_spectrum
    audioseq.set_fftlib

    Examples
    --------
    >>> audioseq.dft(np.array([1.0, 0.0, 0.0, 0.0]))
    array([1.+0.j, 1.+0.j, 1.+0.j, 1.+0.j])
    """
    y = np.asarray(y)

    if y.ndim == 0:
        raise ParameterError("Input to dft must have at least one dimension")

    if y.shape[axis] == 0:
        return np.zeros(y.shape, dtype=np.complex128)

    fft = get_fftlib()

    D: np.ndarray = fft.fft(y, axis=axis)
    return D


def magnitude_spectrum(D: np.ndarray, *, axis: int = -1) -> np.ndarray:
    """Magnitude of the non-redundant half of a Fourier spectrum.

    For real-valued input signals, the spectrum is conjugate-symmetric,
    so only the first ``n // 2`` coefficients are retained.

    Parameters
    ----------
    D : np.ndarray [shape=(..., n, ...)]
        complex Fourier coefficients, as produced by `dft`
    axis : int
        axis along which the coefficients are ordered

    Returns
    -------
    S : np.ndarray [shape=(..., n // 2, ...)]
        ``S[k] = |D[k]|`` for ``k`` in ``[0, n // 2)``

    Examples
    --------
    >>> y = np.cos(2 * np.pi * np.arange(8) / 4)
    >>> audioseq.magnitude_spectrum(audioseq.dft(y))
    array([0., 0., 4., 0.])
    """
    D = np.asarray(D)

    idx = [slice(None)] * D.ndim
    idx[axis] = slice(0, D.shape[axis] // 2)

    S: np.ndarray = np.abs(D[tuple(idx)])
    return S


def windowed_spectrum(
    y: np.ndarray, *, window: Optional[_WindowSpec] = None
) -> np.ndarray:
    """Magnitude spectrum of one or more frames, with optional windowing.

    This is the composition ``magnitude_spectrum(dft(y * w))``
    along the last axis of ``y``.

    Parameters
    ----------
    y : np.ndarray [shape=(..., n)]
        audio frame(s)
    window : None or window specification
        If provided, each frame is multiplied by
        ``audioseq.filters.get_window(window, n)`` before transforming.

    Returns
    -------
    S : np.ndarray [shape=(..., n // 2)]
        magnitude spectrum of each frame

    See Also
    --------
    dft
    magnitude_spectrum
    audioseq.filters.get_window
    """
    y = np.asarray(y, dtype=float)

    if window is not None:
        y = y * get_window(window, y.shape[-1])

    return magnitude_spectrum(dft(y, axis=-1), axis=-1)
