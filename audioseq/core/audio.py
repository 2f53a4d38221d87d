#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Core time-domain signal analysis"""
from __future__ import annotations

import numpy as np

from typing import Optional

__all__ = ["autocorrelate", "zero_crossings"]


def autocorrelate(
    y: np.ndarray, *, max_size: Optional[int] = None, axis: int = -1
) -> np.ndarray:
    """Bounded-lag auto-correlation

    ``z[lag] = sum_i y[i] * y[i + lag]`` for ``lag`` in ``[0, max_size)``.

    The sum is evaluated directly in the time domain, so lags with no
    correlation evaluate to exactly 0 rather than to FFT round-off.

    Parameters
    ----------
    y : np.ndarray
        array to autocorrelate
    max_size : int > 0 or None
        maximum correlation lag.
        If unspecified, defaults to ``y.shape[axis]`` (unbounded)
    axis : int
        The axis along which to autocorrelate.
        By default, the last axis (-1) is taken.

    Returns
    -------
    z : np.ndarray
        truncated autocorrelation ``y*y`` along the specified axis.
        If ``max_size`` is specified, then ``z.shape[axis]`` is bounded
        to ``max_size``.

    Examples
    --------
    Compute full autocorrelation of ``y``

    >>> y = np.array([1.0, 2.0, 3.0])
    >>> audioseq.autocorrelate(y)
    array([14.,  8.,  3.])

    Only the first two lags

    >>> audioseq.autocorrelate(y, max_size=2)
    array([14.,  8.])
    """
    y = np.asarray(y)
    n = y.shape[axis]

    if max_size is None:
        max_size = n

    max_size = int(max(0, min(max_size, n)))

    yi = np.moveaxis(y, axis, -1)
    autocorr = np.zeros(yi.shape[:-1] + (max_size,), dtype=yi.dtype)

    for lag in range(max_size):
        autocorr[..., lag] = np.sum(yi[..., : n - lag] * yi[..., lag:], axis=-1)

    return np.moveaxis(autocorr, -1, axis)


def zero_crossings(
    y: np.ndarray,
    *,
    threshold: float = 0.0,
    pad: bool = False,
    axis: int = -1,
) -> np.ndarray:
    """Find the zero-crossings of a signal ``y``: indices ``i`` such that
    ``sign(y[i]) != sign(y[i - 1])``.

    The value 0 is interpreted as having positive sign.

    If ``y`` is multi-dimensional, then zero-crossings are computed along
    the specified ``axis``.

    Parameters
    ----------
    y : np.ndarray
        The input array
    threshold : float >= 0
        If non-zero, values where ``-threshold <= y <= threshold`` are
        clipped to 0.
    pad : boolean
        If ``True``, then ``y[0]`` is considered a valid zero-crossing.
    axis : int
        Axis along which to compute zero-crossings.

    Returns
    -------
    zero_crossings : np.ndarray [shape=y.shape, dtype=boolean]
        Indicator array of zero-crossings in ``y`` along the selected axis.

    Examples
    --------
    >>> y = np.array([0.5, -0.5, -1.0, 0.0, 2.0, -3.0])
    >>> audioseq.zero_crossings(y)
    array([False,  True, False,  True, False,  True])
    """
    y = np.asarray(y)

    if threshold > 0:
        y = np.where(np.abs(y) <= threshold, 0, y)

    yi = np.moveaxis(y, axis, -1)
    zi = np.empty(yi.shape, dtype=bool)

    if yi.shape[-1] > 0:
        positive = yi >= 0
        zi[..., 1:] = positive[..., 1:] != positive[..., :-1]
        zi[..., 0] = pad

    return np.moveaxis(zi, -1, axis)
