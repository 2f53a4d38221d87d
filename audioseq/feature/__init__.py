#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Feature extraction
==================

Spectral features
-----------------

.. autosummary::
    :toctree: generated/

    mfcc
    rms
    spectral_centroid
    spectral_rolloff
    zero_crossing_rate

Frame-level feature vectors
---------------------------

.. autosummary::
    :toctree: generated/

    frame_and_extract
    quantize
"""

import lazy_loader as lazy

__getattr__, __dir__, __all__ = lazy.attach_stub(__name__, __file__)
