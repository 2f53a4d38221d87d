#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Unit conversion utilities"""
from __future__ import annotations

import numpy as np

from .._typing import _FloatLike_co, _IntLike_co, _ScalarOrSequence
from typing import Any, Union

__all__ = [
    "frames_to_samples",
    "frames_to_time",
    "samples_to_time",
    "hz_to_mel",
    "mel_to_hz",
    "mel_frequencies",
    "fft_frequencies",
]


def frames_to_samples(
    frames: _ScalarOrSequence[_IntLike_co], *, hop_length: int = 512
) -> Union[np.integer[Any], np.ndarray]:
    """Convert frame indices to audio sample indices.

    Frame ``i`` starts at sample ``i * hop_length``.

    Parameters
    ----------
    frames : number or np.ndarray [shape=(n,)]
        frame index or vector of frame indices
    hop_length : int > 0 [scalar]
        number of samples between successive frames

    Returns
    -------
    samples : number or np.ndarray [shape=(n,), dtype=int]
        first sample index of each frame

    Examples
    --------
    >>> audioseq.frames_to_samples([0, 1, 2], hop_length=256)
    array([  0, 256, 512])
    """
    return (np.asanyarray(frames) * hop_length).astype(int)


def samples_to_time(
    samples: _ScalarOrSequence[_IntLike_co], *, sr: float = 22050
) -> Union[np.floating[Any], np.ndarray]:
    """Convert sample indices to time (in seconds).

    Parameters
    ----------
    samples : np.ndarray
        Sample index or array of sample indices
    sr : number > 0
        Sampling rate

    Returns
    -------
    times : np.ndarray [shape=samples.shape]
        Time values corresponding to ``samples`` (in seconds)
    """
    return np.asanyarray(samples) / float(sr)


def frames_to_time(
    frames: _ScalarOrSequence[_IntLike_co],
    *,
    sr: float = 22050,
    hop_length: int = 512,
) -> Union[np.floating[Any], np.ndarray]:
    """Convert frame counts to time (seconds).

    Parameters
    ----------
    frames : np.ndarray [shape=(n,)]
        frame index or vector of frame indices
    sr : number > 0 [scalar]
        audio sampling rate
    hop_length : int > 0 [scalar]
        number of samples between successive frames

    Returns
    -------
    times : np.ndarray [shape=(n,)]
        time (in seconds) of each given frame number:
        ``times[i] = frames[i] * hop_length / sr``

    See Also
    --------
    frames_to_samples : convert frame indices to sample indices

    Examples
    --------
    >>> audioseq.frames_to_time(np.arange(4), sr=16000, hop_length=512)
    array([0.   , 0.032, 0.064, 0.096])
    """
    samples = frames_to_samples(frames, hop_length=hop_length)

    return samples_to_time(samples, sr=sr)


def hz_to_mel(
    frequencies: _ScalarOrSequence[_FloatLike_co],
) -> Union[np.floating[Any], np.ndarray]:
    """Convert Hz to Mels, using the HTK formula

    ``mel = 2595 * log10(1 + f / 700)``

    Parameters
    ----------
    frequencies : number or np.ndarray [shape=(n,)] , float
        scalar or array of frequencies

    Returns
    -------
    mels : number or np.ndarray [shape=(n,)]
        input frequencies in Mels

    See Also
    --------
    mel_to_hz

    Examples
    --------
    >>> audioseq.hz_to_mel(700)
    781.17...
    >>> audioseq.hz_to_mel([110, 220, 440])
    array([164.489, 307.999, 549.64 ])
    """
    frequencies = np.asanyarray(frequencies)

    return 2595.0 * np.log10(1.0 + frequencies / 700.0)


def mel_to_hz(
    mels: _ScalarOrSequence[_FloatLike_co],
) -> Union[np.floating[Any], np.ndarray]:
    """Convert mel bin numbers to frequencies, using the HTK formula

    ``f = 700 * (10 ** (mel / 2595) - 1)``

    Parameters
    ----------
    mels : np.ndarray [shape=(n,)], float
        mel bins to convert

    Returns
    -------
    frequencies : np.ndarray [shape=(n,)]
        input mels in Hz

    See Also
    --------
    hz_to_mel
    """
    mels = np.asanyarray(mels)

    return 700.0 * (10.0 ** (mels / 2595.0) - 1.0)


def mel_frequencies(
    n_mels: int = 128, *, fmin: float = 0.0, fmax: float = 11025.0
) -> np.ndarray:
    """Compute an array of acoustic frequencies tuned to the mel scale.

    The points are equally spaced in mel space between ``hz_to_mel(fmin)``
    and ``hz_to_mel(fmax)`` (both endpoints included), and then
    converted back to Hz.

    Parameters
    ----------
    n_mels : int > 0 [scalar]
        Number of mel bins.
    fmin : float >= 0 [scalar]
        Minimum frequency (Hz).
    fmax : float >= 0 [scalar]
        Maximum frequency (Hz).

    Returns
    -------
    bin_frequencies : ndarray [shape=(n_mels,)]
        Vector of ``n_mels`` frequencies in Hz which are uniformly spaced on the
        mel axis.

    See Also
    --------
    hz_to_mel
    mel_to_hz
    audioseq.filters.mel
    """
    # 'Center freqs' of mel bands - uniformly spaced between limits
    min_mel = hz_to_mel(fmin)
    max_mel = hz_to_mel(fmax)

    if n_mels > 1:
        mels = min_mel + (max_mel - min_mel) * np.arange(n_mels) / (n_mels - 1)
    else:
        mels = np.full(n_mels, min_mel, dtype=float)

    hz: np.ndarray = mel_to_hz(mels)
    return hz


def fft_frequencies(*, sr: float = 22050, n_bins: int) -> np.ndarray:
    """Center frequencies of the first ``n_bins`` bins of a
    half (magnitude) spectrum.

    Bin ``i`` is assigned frequency ``i * sr / (2 * n_bins)``,
    so the bins evenly tile ``[0, sr / 2)``.

    Parameters
    ----------
    sr : number > 0 [scalar]
        Audio sampling rate
    n_bins : int >= 0 [scalar]
        Number of magnitude-spectrum bins

    Returns
    -------
    freqs : np.ndarray [shape=(n_bins,)]
        Frequencies ``(0, sr/(2*n_bins), ..., sr * (n_bins - 1) / (2 * n_bins))``

    Examples
    --------
    >>> audioseq.fft_frequencies(sr=16000, n_bins=4)
    array([   0., 2000., 4000., 6000.])
    """
    if n_bins == 0:
        return np.zeros(0)

    return np.arange(n_bins) * (float(sr) / (2 * n_bins))
