#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Tests for frame-level feature extraction"""

import warnings

import numpy as np
import pytest

import audioseq
from test_core import srand, tone


# -- mfcc --#
def test_mfcc_shape():
    srand()
    y = np.random.randn(512)

    M = audioseq.feature.mfcc(y, sr=16000)
    assert M.shape == (13,)
    assert np.all(np.isfinite(M))


def test_mfcc_silence():
    # All energies are floored, so only the zeroth coefficient is non-zero
    M = audioseq.feature.mfcc(np.zeros(512), sr=16000, n_mfcc=13, n_mels=26)

    assert np.isclose(M[0], 26 * np.log(1e-10))
    assert np.allclose(M[1:], 0, atol=1e-8)


def test_mfcc_manual():
    srand()
    sr, n = 16000, 400
    y = np.random.randn(n)

    S = np.abs(np.fft.fft(y * np.hamming(n)))[: n // 2]
    energy = audioseq.filters.mel(sr=sr, n_fft=n, n_mels=20) @ S
    log_energy = np.log(np.maximum(energy, 1e-10))

    expected = [
        np.sum(log_energy * np.cos(np.pi * k * (np.arange(20) + 0.5) / 20))
        for k in range(12)
    ]

    M = audioseq.feature.mfcc(y, sr=sr, n_mfcc=12, n_mels=20)
    assert np.allclose(M, expected)


def test_mfcc_zero_pad():
    srand()
    y = np.random.randn(256)

    M = audioseq.feature.mfcc(y, sr=8000, n_mfcc=30, n_mels=20)
    M_short = audioseq.feature.mfcc(y, sr=8000, n_mfcc=20, n_mels=20)

    assert M.shape == (30,)
    assert np.allclose(M[:20], M_short)
    assert np.all(M[20:] == 0)


def test_mfcc_frames():
    srand()
    frames = np.random.randn(4, 256)

    M = audioseq.feature.mfcc(frames, sr=16000)
    assert M.shape == (4, 13)

    for i in range(4):
        assert np.allclose(M[i], audioseq.feature.mfcc(frames[i], sr=16000))


def test_mfcc_frame_length1():
    with pytest.warns(UserWarning):
        M = audioseq.feature.mfcc(np.ones(1), sr=16000)

    assert np.isclose(M[0], 26 * np.log(1e-10))


@pytest.mark.xfail(raises=audioseq.ParameterError)
def test_mfcc_bad_amin():
    audioseq.feature.mfcc(np.ones(64), sr=16000, amin=0)


# -- rms --#
def test_rms():
    assert np.isclose(audioseq.feature.rms(np.array([3.0, -3.0, 3.0, -3.0])), 3.0)
    assert np.isclose(audioseq.feature.rms(np.array([1.0, 2.0, 3.0])), np.sqrt(14 / 3))


def test_rms_tone():
    y = tone(250, 16000, 1024)
    assert np.isclose(audioseq.feature.rms(y), 1 / np.sqrt(2), atol=1e-3)


def test_rms_frames():
    y = np.stack([np.zeros(8), np.ones(8), -2 * np.ones(8)])
    assert np.allclose(audioseq.feature.rms(y), [0, 1, 2])


def test_rms_empty():
    assert audioseq.feature.rms(np.zeros(0)) == 0
    assert audioseq.feature.rms(np.zeros((3, 0))).shape == (3,)


# -- zero-crossing rate --#
@pytest.mark.parametrize(
    "y, rate",
    [
        ([1.0, -1.0, 1.0, -1.0], 0.75),
        ([1.0, 1.0, 1.0, 1.0], 0.0),
        ([0.0, 0.0, 0.0, 0.0], 0.0),
        ([-1.0, 0.0, -1.0, 0.0], 0.75),
        ([1.0], 0.0),
    ],
)
def test_zero_crossing_rate(y, rate):
    assert np.isclose(audioseq.feature.zero_crossing_rate(np.asarray(y)), rate)


def test_zero_crossing_rate_empty():
    assert audioseq.feature.zero_crossing_rate(np.zeros(0)) == 0


def test_zero_crossing_rate_frames():
    y = np.array([[1.0, -1.0, 1.0, -1.0], [1.0, 1.0, -1.0, -1.0]])
    assert np.allclose(audioseq.feature.zero_crossing_rate(y), [0.75, 0.25])


# -- spectral centroid and rolloff --#
@pytest.mark.parametrize("freq", [1000.0, 2000.0, 5000.0])
def test_spectral_centroid_tone(freq):
    # Tones aligned to a bin center have all their energy in one bin
    sr = 16000
    y = np.cos(2 * np.pi * freq * np.arange(16) / sr)

    assert np.isclose(audioseq.feature.spectral_centroid(y, sr=sr), freq)


def test_spectral_centroid_dc():
    assert np.isclose(audioseq.feature.spectral_centroid(np.ones(64), sr=16000), 0.0)


def test_spectral_centroid_manual():
    srand()
    sr, n = 22050, 100
    y = np.random.randn(n)

    S = np.abs(np.fft.fft(y))[: n // 2]
    freqs = np.arange(n // 2) * sr / n

    expected = np.sum(S * freqs) / np.sum(S)
    assert np.isclose(audioseq.feature.spectral_centroid(y, sr=sr), expected)


@pytest.mark.parametrize("n", [0, 1, 64])
def test_spectral_centroid_silence(n):
    assert audioseq.feature.spectral_centroid(np.zeros(n), sr=16000) == 0


def test_spectral_rolloff_tone():
    sr = 16000
    y = np.cos(2 * np.pi * 2000 * np.arange(16) / sr)

    assert np.isclose(audioseq.feature.spectral_rolloff(y, sr=sr), 2000.0)


def test_spectral_rolloff_manual():
    srand()
    sr, n = 16000, 256
    y = np.random.randn(n)

    S = np.abs(np.fft.fft(y))[: n // 2]
    cumulative = np.cumsum(S)
    idx = np.flatnonzero(cumulative >= 0.5 * S.sum())[0]

    rolloff = audioseq.feature.spectral_rolloff(y, sr=sr, roll_percent=0.5)
    assert np.isclose(rolloff, idx * sr / n)


@pytest.mark.parametrize("n", [0, 1, 64])
def test_spectral_rolloff_silence(n):
    assert audioseq.feature.spectral_rolloff(np.zeros(n), sr=16000) == 0


def test_spectral_rolloff_frames():
    srand()
    y = np.random.randn(3, 128)

    rolloff = audioseq.feature.spectral_rolloff(y, sr=16000)
    assert rolloff.shape == (3,)

    for i in range(3):
        assert np.isclose(rolloff[i], audioseq.feature.spectral_rolloff(y[i], sr=16000))


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize("pct", [-1, 0, 1, 2])
def test_spectral_rolloff_bad(pct):
    audioseq.feature.spectral_rolloff(np.ones(64), sr=16000, roll_percent=pct)


# -- frame_and_extract --#
def test_frame_and_extract_shape():
    sr = 16000
    y = tone(440, sr, sr)

    features = audioseq.feature.frame_and_extract(y, sr=sr, frame_length=512)

    # Default hop is half a frame
    assert features.shape == (1 + (sr - 512) // 256, 17)
    assert np.all(np.isfinite(features))


@pytest.mark.parametrize("hop_length", [1, 100, 512, 600])
def test_frame_and_extract_hop(hop_length):
    srand()
    y = np.random.randn(2048)

    features = audioseq.feature.frame_and_extract(
        y, sr=16000, frame_length=512, hop_length=hop_length
    )
    assert features.shape[0] == 1 + (2048 - 512) // hop_length


def test_frame_and_extract_layout():
    srand()
    sr, frame_length, hop_length = 16000, 256, 128
    y = np.random.randn(1024)

    features = audioseq.feature.frame_and_extract(
        y, sr=sr, frame_length=frame_length, hop_length=hop_length, n_mfcc=10
    )
    assert features.shape == (7, 14)

    for i, row in enumerate(features):
        frame = y[i * hop_length : i * hop_length + frame_length]

        assert np.allclose(row[:10], audioseq.feature.mfcc(frame, sr=sr, n_mfcc=10))
        assert np.isclose(row[10], audioseq.feature.rms(frame))
        assert np.isclose(row[11], audioseq.feature.zero_crossing_rate(frame))
        assert np.isclose(row[12], audioseq.feature.spectral_centroid(frame, sr=sr))
        assert np.isclose(row[13], audioseq.estimate_pitch(frame, sr=sr))


def test_frame_and_extract_pitch():
    sr = 16000
    y = tone(200, sr, 4096)

    features = audioseq.feature.frame_and_extract(y, sr=sr, frame_length=1024)
    assert np.isclose(features[0, -1], 200.0)


def test_frame_and_extract_silence():
    features = audioseq.feature.frame_and_extract(
        np.zeros(2048), sr=16000, frame_length=512
    )

    # Energy, zero-crossing rate, centroid and pitch all vanish
    assert np.all(features[:, 13:] == 0)
    assert np.allclose(features[:, 0], 26 * np.log(1e-10))


@pytest.mark.parametrize("n", [0, 1, 511])
def test_frame_and_extract_short(n):
    features = audioseq.feature.frame_and_extract(
        np.zeros(n), sr=16000, frame_length=512
    )
    assert features.shape == (0, 17)


def test_frame_and_extract_frame_length1():
    srand()
    y = np.random.randn(10)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        features = audioseq.feature.frame_and_extract(y, sr=16000, frame_length=1)

    # Default hop is clamped to 1
    assert features.shape == (10, 17)
    assert np.allclose(features[:, 13], np.abs(y))
    assert np.all(features[:, 14:] == 0)


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize(
    "y, frame_length, hop_length",
    [
        (np.zeros(64), 0, None),
        (np.zeros(64), 16, 0),
        (np.zeros(64), 16.0, None),
        (np.zeros((2, 64)), 16, None),
        (np.arange(64), 16, None),
        (np.full(64, np.nan), 16, None),
        (list(np.zeros(64)), 16, None),
    ],
    ids=["frame_length", "hop_length", "float frame", "2d", "int", "nan", "list"],
)
def test_frame_and_extract_bad(y, frame_length, hop_length):
    audioseq.feature.frame_and_extract(
        y, sr=16000, frame_length=frame_length, hop_length=hop_length
    )


# -- quantize --#
def test_quantize():
    x = np.array([-40.0, -30.0, -29.9, 0.0, 33.75, 40.0])
    q = audioseq.feature.quantize(x)

    assert np.array_equal(q, [0, 0, 0, 120, 255, 255])
    assert np.issubdtype(q.dtype, np.integer)


def test_quantize_rounding():
    # Half-way values round up
    q = audioseq.feature.quantize(np.array([0.125, 0.1]), offset=0.0, scale=4.0)
    assert np.array_equal(q, [1, 0])


def test_quantize_symbols():
    q = audioseq.feature.quantize(np.linspace(-100, 100, 50), n_symbols=16)
    assert q.min() == 0
    assert q.max() == 15


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize("n_symbols", [0, -1, 2.5])
def test_quantize_bad(n_symbols):
    audioseq.feature.quantize(np.zeros(4), n_symbols=n_symbols)
