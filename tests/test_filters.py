#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Tests for filter bank and window construction"""

import warnings

import numpy as np
import scipy.fft
import scipy.signal
import pytest

import audioseq


# -- windows --#
@pytest.mark.parametrize("n", [2, 3, 16, 401])
def test_get_window_hamming(n):
    i = np.arange(n)
    expected = 0.54 - 0.46 * np.cos(2 * np.pi * i / (n - 1))

    assert np.allclose(audioseq.filters.get_window("hamming", n), expected)


@pytest.mark.parametrize("n", [2, 3, 16, 401])
def test_get_window_hann(n):
    i = np.arange(n)
    expected = 0.5 * (1 - np.cos(2 * np.pi * i / (n - 1)))

    assert np.allclose(audioseq.filters.get_window("hann", n), expected)


@pytest.mark.parametrize("window", ["hamming", "hann"])
def test_get_window_size1(window):
    assert np.array_equal(audioseq.filters.get_window(window, 1), [1.0])


@pytest.mark.parametrize("window", ["hamming", "hann"])
def test_get_window_size0(window):
    assert audioseq.filters.get_window(window, 0).shape == (0,)


@pytest.mark.parametrize("window", ["hann", "blackman", ("kaiser", 4.0), 4.0])
def test_get_window_scipy(window):
    w = audioseq.filters.get_window(window, 32)
    assert np.allclose(w, scipy.signal.get_window(window, 32, fftbins=False))


def test_get_window_func():
    w = audioseq.filters.get_window(np.ones, 8)
    assert np.array_equal(w, np.ones(8))


@pytest.mark.parametrize("pre_win", [np.hanning(16), list(np.hanning(16))])
def test_get_window_pre(pre_win):
    win = audioseq.filters.get_window(pre_win, len(pre_win))
    assert np.allclose(win, pre_win)


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize(
    "window, n",
    [("not a window", 16), (np.ones(8), 16), ([1, 1], 3), (None, 8), ("hann", -1)],
    ids=["name", "array length", "list length", "none", "negative"],
)
def test_get_window_fail(window, n):
    audioseq.filters.get_window(window, n)


# -- mel filter bank --#
@pytest.mark.parametrize("n_fft", [64, 256, 512, 1023])
@pytest.mark.parametrize("n_mels", [13, 26])
def test_mel_shape(n_fft, n_mels):
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        M = audioseq.filters.mel(sr=16000, n_fft=n_fft, n_mels=n_mels)

    assert M.shape == (n_mels, n_fft // 2)
    assert np.all(M >= 0)
    assert np.all(M <= 1)


def test_mel_triangles():
    sr, n_fft, n_mels = 16000, 512, 26
    M = audioseq.filters.mel(sr=sr, n_fft=n_fft, n_mels=n_mels)

    hz = audioseq.mel_frequencies(n_mels + 2, fmin=0.0, fmax=sr / 2)
    edges = np.floor(hz * n_fft / sr).astype(int)

    for i in range(n_mels):
        left, center, right = edges[i : i + 3]

        # Peak of 1 at the center bin
        assert M[i, center] == 1.0
        assert np.argmax(M[i]) == center

        # Zero outside [left, right)
        assert not np.any(M[i, :left])
        assert not np.any(M[i, right:])

        # Rising then falling
        assert np.all(np.diff(M[i, left : center + 1]) >= 0)
        assert np.all(np.diff(M[i, center:right]) <= 0)


def test_mel_weights():
    M = audioseq.filters.mel(sr=16000, n_fft=512, n_mels=26)

    hz = audioseq.mel_frequencies(28, fmin=0.0, fmax=8000.0)
    left, center, right = np.floor(hz[:3] * 512 / 16000).astype(int)

    k = np.arange(left, center)
    assert np.allclose(M[0, k], (k - left) / (center - left))

    k = np.arange(center, right)
    assert np.allclose(M[0, k], (right - k) / (right - center))


def test_mel_empty_filters():
    # Too few bins for the number of filters
    with pytest.warns(UserWarning, match="Empty filters"):
        M = audioseq.filters.mel(sr=16000, n_fft=16, n_mels=26)

    assert M.shape == (26, 8)


def test_mel_frame_length1():
    with pytest.warns(UserWarning):
        M = audioseq.filters.mel(sr=16000, n_fft=1, n_mels=26)

    assert M.shape == (26, 0)


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize("sr, n_fft", [(0, 512), (-1, 512), (16000, 0)])
def test_mel_bad(sr, n_fft):
    audioseq.filters.mel(sr=sr, n_fft=n_fft)


# -- DCT --#
@pytest.mark.parametrize("n_filters", [1, 4, 13])
@pytest.mark.parametrize("n_input", [1, 8, 26])
def test_dct_definition(n_filters, n_input):
    basis = audioseq.filters.dct(n_filters, n_input)
    assert basis.shape == (n_filters, n_input)

    x = np.arange(n_input, dtype=float) ** 2
    out = basis @ x

    for k in range(n_filters):
        expected = sum(
            x[j] * np.cos(np.pi * k * (j + 0.5) / n_input) for j in range(n_input)
        )
        assert np.isclose(out[k], expected)


def test_dct_matches_scipy():
    # Unnormalized DCT-II is half of scipy's default (norm=None)
    x = np.random.randn(26)

    out = audioseq.filters.dct(26, 26) @ x
    assert np.allclose(out, scipy.fft.dct(x, type=2) / 2)


def test_dct_constant():
    # Only the zeroth coefficient responds to a constant input
    out = audioseq.filters.dct(13, 26) @ np.ones(26)

    assert np.isclose(out[0], 26)
    assert np.allclose(out[1:], 0)
