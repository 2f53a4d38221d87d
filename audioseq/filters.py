#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Filters
=======

Filter bank construction
------------------------
.. autosummary::
    :toctree: generated/

    mel
    dct

Window functions
----------------
.. autosummary::
    :toctree: generated/

    get_window
"""
import warnings

import numpy as np
import scipy
import scipy.signal

from ._cache import cache
from .util.exceptions import ParameterError
from .core.convert import mel_frequencies
from ._typing import _WindowSpec

__all__ = ["mel", "dct", "get_window"]


@cache(level=10)
def mel(*, sr: float, n_fft: int, n_mels: int = 26) -> np.ndarray:
    """Create a triangular filter bank matrix to combine DFT bins into
    Mel-frequency bins.

    ``n_mels + 2`` points are placed uniformly on the mel scale between
    0 Hz and the Nyquist frequency ``sr / 2``.  Each point is converted back
    to Hz and then to a DFT bin index ``floor(hz * n_fft / sr)``.

    Filter ``i`` uses points ``i``, ``i + 1`` and ``i + 2`` as its
    left edge, center, and right edge: its weight rises linearly from 0 at the
    left edge to 1 at the center, and falls linearly back to 0 at the
    right edge.  All other bins have weight 0.
    Bins at or beyond ``n_fft // 2`` are discarded.

    Parameters
    ----------
    sr : number > 0 [scalar]
        sampling rate of the incoming signal
    n_fft : int > 0 [scalar]
        number of DFT components (the frame length)
    n_mels : int > 0 [scalar]
        number of Mel bands to generate

    Returns
    -------
    M : np.ndarray [shape=(n_mels, n_fft // 2)]
        Mel transform matrix. ``M[i, k]`` is the weight of bin ``k``
        in filter ``i``, and lies in ``[0, 1]``.

    Notes
    -----
    This function caches at level 10.

    Examples
    --------
    >>> melfb = audioseq.filters.mel(sr=16000, n_fft=512)
    >>> melfb.shape
    (26, 256)
    >>> melfb.max(axis=1)
    array([1., 1., ..., 1., 1.])
    """
    if sr <= 0:
        raise ParameterError(f"sr={sr} must be strictly positive")

    if n_fft < 1:
        raise ParameterError(f"n_fft={n_fft} must be a positive integer")

    n_mels = int(n_mels)
    n_bins = int(n_fft // 2)

    # Initialize the weights
    weights = np.zeros((n_mels, n_bins))

    # Band edges, uniformly spaced in mel between 0 and Nyquist
    hz_points = mel_frequencies(n_mels + 2, fmin=0.0, fmax=float(sr) / 2)
    bin_points = np.floor(hz_points * n_fft / sr).astype(int)

    for i in range(n_mels):
        left, center, right = bin_points[i : i + 3]

        # Rising edge: [left, center)
        k = np.arange(left, min(center, n_bins))
        weights[i, k] = (k - left) / (center - left)

        # Falling edge: [center, right)
        k = np.arange(center, min(right, n_bins))
        weights[i, k] = (right - k) / (right - center)

    if n_mels > 0 and not np.all(weights.max(axis=1, initial=0) > 0):
        # This means we have an empty channel somewhere
        warnings.warn(
            "Empty filters detected in mel frequency basis. "
            "Some channels will produce empty responses. "
            "Try increasing your frame length or "
            "reducing n_mels.",
            stacklevel=2,
        )

    return weights


@cache(level=10)
def dct(n_filters: int, n_input: int) -> np.ndarray:
    """Discrete cosine transform (DCT type-II) basis, without normalization.

    .. [#] http://en.wikipedia.org/wiki/Discrete_cosine_transform

    Applying the basis to a vector ``x`` of length ``n_input`` yields::

        out[k] = sum_j x[j] * cos(pi * k * (j + 0.5) / n_input)

    for ``k`` in ``[0, n_filters)``.

    Parameters
    ----------
    n_filters : int >= 0 [scalar]
        number of output components (DCT filters)
    n_input : int > 0 [scalar]
        number of input components (filter bank channels)

    Returns
    -------
    dct_basis : np.ndarray [shape=(n_filters, n_input)]
        DCT (type-II) basis vectors

    Notes
    -----
    This function caches at level 10.

    Examples
    --------
    >>> audioseq.filters.dct(3, 4)
    array([[ 1.   ,  1.   ,  1.   ,  1.   ],
           [ 0.924,  0.383, -0.383, -0.924],
           [ 0.707, -0.707, -0.707,  0.707]])
    """
    samples = (np.arange(n_input) + 0.5) * np.pi / n_input

    basis: np.ndarray = np.cos(np.outer(np.arange(n_filters), samples))
    return basis


@cache(level=10)
def get_window(window: _WindowSpec, Nx: int) -> np.ndarray:
    """Compute a symmetric window function.

    This is a wrapper for `scipy.signal.get_window` that additionally
    supports callable or pre-computed windows.

    The two windows used for feature extraction are

    - ``'hamming'``: ``w[i] = 0.54 - 0.46 * cos(2 * pi * i / (Nx - 1))``
    - ``'hann'``: ``w[i] = 0.5 * (1 - cos(2 * pi * i / (Nx - 1)))``

    A window of length 1 is ``[1.0]``, and a window of length 0 is empty.

    Parameters
    ----------
    window : string, tuple, number, callable, or list-like
        The window specification:

        - If string, it's the name of the window function (e.g., ``'hann'``)
        - If tuple, it's the name of the window function and any parameters
          (e.g., ``('kaiser', 4.0)``)
        - If numeric, it is treated as the beta parameter of the ``'kaiser'``
          window, as in `scipy.signal.get_window`.
        - If callable, it's a function that accepts one integer argument
          (the window length)
        - If list-like, it's a pre-computed window of the correct length ``Nx``

    Nx : int >= 0
        The length of the window

    Returns
    -------
    get_window : np.ndarray
        A window of length ``Nx`` and type ``window``

    See Also
    --------
    scipy.signal.get_window

    Notes
    -----
    This function caches at level 10.

    Raises
    ------
    ParameterError
        If ``window`` is supplied as a vector of length != ``Nx``,
        or is otherwise mis-specified.
    """
    if Nx < 0:
        raise ParameterError(f"Window length Nx={Nx} must be non-negative")

    if callable(window):
        return window(Nx)

    elif isinstance(window, (str, tuple)) or np.isscalar(window):
        if Nx == 0:
            return np.zeros(0)

        try:
            win: np.ndarray = scipy.signal.get_window(window, Nx, fftbins=False)
        except ValueError as exc:
            raise ParameterError(f"Invalid window specification: {window!r}") from exc

        return win

    elif isinstance(window, (np.ndarray, list)):
        if len(window) == Nx:
            return np.asarray(window)

        raise ParameterError(f"Window size mismatch: {len(window):d} != {Nx:d}")
    else:
        raise ParameterError(f"Invalid window specification: {window!r}")
