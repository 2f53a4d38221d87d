#!/usr/bin/env python
# Test configuration and customization

import numpy as np
import pytest

import audioseq


def pytest_addoption(parser):
    parser.addoption(
        "--audioseq-quick",
        action="store_true",
        default=False,
        help="Skip slow tests (long signals and randomized sweeps)",
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--audioseq-quick"):
        # User wants to run everything, so do nothing.
        return
    skip_slow = pytest.mark.skip(reason="testing in quick mode")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: mark tests that process long inputs or many random cases."
    )


@pytest.fixture
def hmm_2state():
    # transition, emission, and initial distributions of a 2-state, 2-symbol model
    return audioseq.sequence.HiddenMarkovModel(
        np.array([[0.7, 0.3], [0.4, 0.6]]),
        np.array([[0.5, 0.5], [0.1, 0.9]]),
        np.array([0.6, 0.4]),
    )


@pytest.fixture
def hmm_weather():
    # https://en.wikipedia.org/wiki/Viterbi_algorithm#Example
    # States: 0 = healthy, 1 = fever
    # Symbols: 0 = normal, 1 = cold, 2 = dizzy
    return audioseq.sequence.HiddenMarkovModel(
        np.array([[0.7, 0.3], [0.4, 0.6]]),
        np.array([[0.5, 0.4, 0.1], [0.1, 0.3, 0.6]]),
        np.array([0.6, 0.4]),
    )
