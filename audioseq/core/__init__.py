#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Core DSP functions"""

import lazy_loader as lazy

__getattr__, __dir__, __all__ = lazy.attach_stub(__name__, __file__)
