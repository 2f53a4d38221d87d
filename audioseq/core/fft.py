#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Fast Fourier Transform (FFT) library container"""
import scipy.fft

from types import ModuleType
from typing import Optional


__all__ = ["get_fftlib", "set_fftlib"]

# Object to hold FFT interfaces
__FFTLIB: Optional[ModuleType] = scipy.fft


def set_fftlib(lib: Optional[ModuleType] = None) -> None:
    """Set the FFT library used by audioseq.

    Parameters
    ----------
    lib : None or module
        Must implement an interface compatible with `scipy.fft`
        (or `numpy.fft`).
        If ``None``, reverts to `scipy.fft`.

    Examples
    --------
    Use `numpy.fft`:

    >>> import numpy as np
    >>> audioseq.set_fftlib(np.fft)

    Reset to default `scipy` implementation

    >>> audioseq.set_fftlib()
    """
    global __FFTLIB
    if lib is None:
        lib = scipy.fft

    __FFTLIB = lib


def get_fftlib() -> ModuleType:
    """Get the FFT library currently used by audioseq

    Returns
    -------
    fft : module
        The FFT library currently used by audioseq.
        Must API-compatible with `numpy.fft`.
    """
    if __FFTLIB is None:
        # This path should never occur because importing
        # this module will call set_fftlib
        assert False  # pragma: no cover

    return __FFTLIB
