#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Exception classes for audioseq"""


class AudioseqError(Exception):
    """The root audioseq exception class"""

    pass


class ParameterError(AudioseqError):
    """Exception class for mal-formed inputs"""

    pass
