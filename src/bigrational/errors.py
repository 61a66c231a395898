# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exceptions raised by rational number operations."""


__all__ = [
    'RationalError',
    'InvalidDenominator',
    'DivisionByZero',
    'InversionOfZero',
    'NonFiniteInput',
    'InvalidBound',
    'EmptyCollection',
]


class RationalError(ArithmeticError):
    """Base class of all errors raised by package 'bigrational'."""


class InvalidDenominator(RationalError, ZeroDivisionError):
    """Denominator given to a constructor is 0."""


class DivisionByZero(RationalError, ZeroDivisionError):
    """Divisor is an exact or approximate zero."""


class InversionOfZero(RationalError, ZeroDivisionError):
    """Inverse of an exact or approximate zero requested."""


class NonFiniteInput(RationalError, ValueError):
    """NaN or infinite value can not be converted to a rational."""


class InvalidBound(RationalError, ValueError):
    """Maximum denominator for an approximation is not > 0."""


class EmptyCollection(RationalError, ValueError):
    """Statistic requested for an empty collection."""
