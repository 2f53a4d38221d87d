#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Spectral feature extraction"""
from __future__ import annotations

import numpy as np

from .. import filters
from ..util.exceptions import ParameterError
from ..core.convert import fft_frequencies
from ..core.audio import zero_crossings
from ..core.spectrum import windowed_spectrum

__all__ = [
    "spectral_centroid",
    "spectral_rolloff",
    "rms",
    "zero_crossing_rate",
    "mfcc",
]


# -- Spectral features -- #
def spectral_centroid(y: np.ndarray, *, sr: float) -> np.ndarray:
    """Compute the spectral centroid.

    Each frame's magnitude spectrum is normalized and treated as a
    distribution over frequency bins, from which the mean (centroid) is
    extracted per frame.  No window is applied before the transform.

    Bin ``i`` of an ``m``-bin magnitude spectrum is assigned the
    frequency ``i * sr / (2 * m)``.

    Parameters
    ----------
    y : np.ndarray [shape=(..., n)]
        audio frame(s)
    sr : number > 0 [scalar]
        audio sampling rate of ``y``

    Returns
    -------
    centroid : np.ndarray [shape=(...)]
        centroid frequency of each frame.
        Frames with zero total magnitude have centroid 0.

    See Also
    --------
    audioseq.core.spectrum.magnitude_spectrum
    audioseq.core.convert.fft_frequencies

    Examples
    --------
    >>> sr = 16000
    >>> y = np.cos(2 * np.pi * 2000 * np.arange(16) / sr)
    >>> audioseq.feature.spectral_centroid(y, sr=sr)
    array(2000.)
    """
    S = windowed_spectrum(y)

    freq = fft_frequencies(sr=sr, n_bins=S.shape[-1])

    numerator = np.asarray(S @ freq)
    total = np.asarray(S.sum(axis=-1))

    centroid: np.ndarray = np.divide(
        numerator, total, out=np.zeros_like(numerator), where=total > 0
    )
    return centroid


def spectral_rolloff(
    y: np.ndarray, *, sr: float, roll_percent: float = 0.85
) -> np.ndarray:
    """Compute the roll-off frequency.

    The roll-off frequency is defined for each frame as the center frequency
    of the first spectrum bin such that at least ``roll_percent`` of the
    total magnitude of the frame's spectrum is contained in that bin
    and the bins below.

    Parameters
    ----------
    y : np.ndarray [shape=(..., n)]
        audio frame(s)
    sr : number > 0 [scalar]
        audio sampling rate of ``y``
    roll_percent : float (0 < roll_percent < 1)
        Roll-off percentage.

    Returns
    -------
    rolloff : np.ndarray [shape=(...)]
        roll-off frequency for each frame.
        Frames with zero total magnitude have roll-off 0.

    Raises
    ------
    ParameterError
        If ``roll_percent`` is not strictly between 0 and 1.

    Examples
    --------
    >>> sr = 16000
    >>> y = np.cos(2 * np.pi * 2000 * np.arange(16) / sr)
    >>> audioseq.feature.spectral_rolloff(y, sr=sr)
    array(2000.)
    """
    if not 0.0 < roll_percent < 1.0:
        raise ParameterError("roll_percent must lie in the range (0, 1)")

    S = windowed_spectrum(y)
    n_bins = S.shape[-1]

    if n_bins == 0:
        return np.zeros(S.shape[:-1])

    threshold = roll_percent * np.sum(S, axis=-1, keepdims=True)
    reached = np.cumsum(S, axis=-1) >= threshold

    # First bin meeting the threshold, or the Nyquist bin if none does
    idx = np.where(reached.any(axis=-1), np.argmax(reached, axis=-1), n_bins)

    rolloff: np.ndarray = idx * (float(sr) / (2 * n_bins))
    return rolloff


def rms(y: np.ndarray) -> np.ndarray:
    """Compute root-mean-square (RMS) energy of each frame.

    ``rms = sqrt(mean(y ** 2))``

    Parameters
    ----------
    y : np.ndarray [shape=(..., n)]
        audio frame(s)

    Returns
    -------
    rms : np.ndarray [shape=(...)]
        RMS value for each frame.  Empty frames have RMS 0.

    Examples
    --------
    >>> audioseq.feature.rms(np.array([3.0, -3.0, 3.0, -3.0]))
    array(3.)
    """
    y = np.asarray(y, dtype=float)

    if y.shape[-1] == 0:
        return np.zeros(y.shape[:-1])

    return np.sqrt(np.mean(np.abs(y) ** 2, axis=-1))


def zero_crossing_rate(y: np.ndarray) -> np.ndarray:
    """Compute the zero-crossing rate of each frame.

    A zero crossing is a pair of adjacent samples of different sign,
    where 0 counts as positive.  The rate is the number of crossings
    divided by the number of samples in the frame.

    Parameters
    ----------
    y : np.ndarray [shape=(..., n)]
        audio frame(s)

    Returns
    -------
    zcr : np.ndarray [shape=(...)]
        ``zcr[i]`` is the fraction of zero crossings in frame ``i``.
        Empty frames have rate 0.

    See Also
    --------
    audioseq.zero_crossings
        Compute zero-crossings in a time-series

    Examples
    --------
    >>> audioseq.feature.zero_crossing_rate(np.array([1.0, -1.0, 1.0, -1.0]))
    array(0.75)
    """
    y = np.asarray(y)

    if y.shape[-1] == 0:
        return np.zeros(y.shape[:-1])

    crossings = zero_crossings(y, pad=False, axis=-1)

    return np.mean(crossings, axis=-1)


def mfcc(
    y: np.ndarray,
    *,
    sr: float,
    n_mfcc: int = 13,
    n_mels: int = 26,
    amin: float = 1e-10,
) -> np.ndarray:
    """Mel-frequency cepstral coefficients (MFCCs) of one or more frames.

    Each frame is processed as follows:

    1. multiply by a Hamming window
    2. take the magnitude of the first half of its DFT
    3. accumulate the magnitudes into ``n_mels`` triangular mel filters
       (`audioseq.filters.mel`)
    4. take ``log(max(energy, amin))``
    5. apply an (unnormalized) type-II DCT (`audioseq.filters.dct`)

    and the first ``n_mfcc`` cepstral coefficients are retained.

    Parameters
    ----------
    y : np.ndarray [shape=(..., n)], n > 0
        audio frame(s)
    sr : number > 0 [scalar]
        sampling rate of ``y``
    n_mfcc : int >= 0 [scalar]
        number of MFCCs to return.
        If ``n_mfcc > n_mels``, the coefficients beyond ``n_mels``
        are zero.
    n_mels : int > 0 [scalar]
        number of mel filters
    amin : float > 0 [scalar]
        floor applied to filter energies before taking the logarithm

    Returns
    -------
    M : np.ndarray [shape=(..., n_mfcc)]
        MFCC vector of each frame

    Raises
    ------
    ParameterError
        If the frames are empty, or ``amin`` is not positive.

    See Also
    --------
    audioseq.filters.mel
    audioseq.filters.dct

    Examples
    --------
    >>> sr = 16000
    >>> y = np.sin(2 * np.pi * 440 * np.arange(512) / sr)
    >>> audioseq.feature.mfcc(y, sr=sr).shape
    (13,)
    """
    if amin <= 0:
        raise ParameterError("amin must be strictly positive")

    y = np.asarray(y, dtype=float)
    n = y.shape[-1]

    S = windowed_spectrum(y, window="hamming")

    mel_basis = filters.mel(sr=sr, n_fft=n, n_mels=n_mels)
    log_energy = np.log(np.maximum(S @ mel_basis.T, amin))

    n_dct = min(n_mfcc, n_mels)
    M = log_energy @ filters.dct(n_dct, n_mels).T

    if n_dct < n_mfcc:
        padding = [(0, 0)] * (M.ndim - 1) + [(0, n_mfcc - n_dct)]
        M = np.pad(M, padding, mode="constant")

    return M
