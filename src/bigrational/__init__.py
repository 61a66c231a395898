# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic with arbitrary precision."""

from .constants import E, PI
from .errors import (
    DivisionByZero, EmptyCollection, InvalidBound, InvalidDenominator,
    InversionOfZero, NonFiniteInput, RationalError,
)
from .rational import (
    APPROX_ONE, APPROX_ZERO, DEFAULT_MAX_DENOMINATOR, ONE, Rational, ZERO,
)
from .rounding import (
    Rounding, divide_rounded, get_dflt_rounding_mode, rounding_context,
    set_dflt_rounding_mode,
)
from .statistics import average, maximum, median, minimum
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'APPROX_ONE',
    'APPROX_ZERO',
    'DEFAULT_MAX_DENOMINATOR',
    'DivisionByZero',
    'E',
    'EmptyCollection',
    'InvalidBound',
    'InvalidDenominator',
    'InversionOfZero',
    'NonFiniteInput',
    'ONE',
    'PI',
    'Rational',
    'RationalError',
    'Rounding',
    'ZERO',
    'average',
    'divide_rounded',
    'get_dflt_rounding_mode',
    'maximum',
    'median',
    'minimum',
    'rounding_context',
    'set_dflt_rounding_mode',
]
