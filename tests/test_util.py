#!/usr/bin/env python
# -*- encoding: utf-8 -*-

import numpy as np

import pytest

import audioseq


@pytest.mark.parametrize("frame_length", [4, 8])
@pytest.mark.parametrize("hop_length", [1, 2, 4])
@pytest.mark.parametrize("y", [np.random.randn(32)])
def test_frame1d(frame_length, hop_length, y):

    y_frame = audioseq.util.frame(y, frame_length=frame_length, hop_length=hop_length)

    assert y_frame.shape == (1 + (len(y) - frame_length) // hop_length, frame_length)

    for i in range(y_frame.shape[0]):
        assert np.allclose(y_frame[i], y[i * hop_length : (i * hop_length + frame_length)])


def test_frame_truncate():
    # Samples that do not fill a whole frame are dropped
    x = np.arange(10, dtype=float)
    xf = audioseq.util.frame(x, frame_length=4, hop_length=3)

    assert np.array_equal(xf, [[0, 1, 2, 3], [3, 4, 5, 6], [6, 7, 8, 9]])

    xf = audioseq.util.frame(x, frame_length=4, hop_length=4)
    assert np.array_equal(xf, [[0, 1, 2, 3], [4, 5, 6, 7]])


@pytest.mark.parametrize("n", [0, 3, 16])
def test_frame_too_short(n):
    xf = audioseq.util.frame(np.zeros(n), frame_length=17, hop_length=1)
    assert xf.shape == (0, 17)


def test_frame_readonly():
    x = np.arange(8, dtype=float)
    xf = audioseq.util.frame(x, frame_length=4, hop_length=2)

    with pytest.raises(ValueError):
        xf[0, 0] = 1.0


def test_frame_noncontiguous():
    x = np.arange(20, dtype=float)[::2]
    xf = audioseq.util.frame(x, frame_length=3, hop_length=2)

    for i in range(xf.shape[0]):
        assert np.array_equal(xf[i], x[2 * i : 2 * i + 3])


@pytest.mark.xfail(raises=audioseq.ParameterError)
def test_frame_badtype():
    audioseq.util.frame([1, 2, 3, 4], frame_length=2, hop_length=1)


@pytest.mark.xfail(raises=audioseq.ParameterError)
def test_frame_bad_ndim():
    audioseq.util.frame(np.zeros((3, 3)), frame_length=2, hop_length=1)


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize(
    "frame_length, hop_length",
    [(0, 1), (-1, 1), (2.0, 1), (2, 0), (2, None)],
)
def test_frame_bad_params(frame_length, hop_length):
    audioseq.util.frame(np.arange(16), frame_length=frame_length, hop_length=hop_length)


@pytest.mark.parametrize("y", [np.zeros(0), np.zeros(8), np.zeros(8, dtype=np.float32)])
def test_valid_audio(y):
    assert audioseq.util.valid_audio(y)


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize(
    "y",
    [
        [0.0, 1.0],
        np.zeros(8, dtype=int),
        np.zeros((2, 8)),
        np.array([0.0, np.inf]),
        np.array([np.nan, 0.0]),
        np.zeros(4, dtype=complex),
    ],
    ids=["list", "int", "2d", "inf", "nan", "complex"],
)
def test_valid_audio_fail(y):
    audioseq.util.valid_audio(y)


@pytest.mark.parametrize(
    "obs, expected",
    [
        ([0, 1, 2], [0, 1, 2]),
        ((3, 3), [3, 3]),
        (np.array([1.0, 0.0]), [1, 0]),
        ([-1, 300], [-1, 300]),
        ([], []),
        (np.zeros((0, 3)), []),
    ],
)
def test_valid_observations(obs, expected):
    out = audioseq.util.valid_observations(obs)

    assert out.ndim == 1
    assert np.issubdtype(out.dtype, np.integer)
    assert np.array_equal(out, expected)


@pytest.mark.xfail(raises=audioseq.ParameterError)
@pytest.mark.parametrize(
    "obs", [[[0, 1]], [0.5], np.array([np.nan]), ["a"], 3], ids=["2d", "frac", "nan", "str", "scalar"]
)
def test_valid_observations_fail(obs):
    audioseq.util.valid_observations(obs)


@pytest.mark.parametrize(
    "x, result",
    [(1, True), (np.int64(7), True), (0, False), (-3, False), (2.0, False), (None, False)],
)
def test_is_positive_int(x, result):
    assert audioseq.util.is_positive_int(x) == result


def test_show_versions(capsys):
    audioseq.show_versions()
    out, _ = capsys.readouterr()

    assert "audioseq: {}".format(audioseq.__version__) in out
    assert "numba:" in out
