# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes used when converting rationals to decimals or integers."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from enum import Enum, unique
from typing import Iterator, Optional


__all__ = [
    'Rounding',
    'divide_rounded',
    'get_dflt_rounding_mode',
    'rounding_context',
    'set_dflt_rounding_mode',
]


# rounding modes equivalent to those defined in standard lib module 'decimal'
@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> Rounding:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_05UP = (1, 'Round away from zero if last digit after rounding '
                     'towards zero would have been 0 or 5; otherwise round '
                     'towards zero.')
    ROUND_CEILING = (2, 'Round towards Infinity.')
    ROUND_DOWN = (3, 'Round towards zero.')
    ROUND_FLOOR = (4, 'Round towards -Infinity.')
    ROUND_HALF_DOWN = (5, 'Round to nearest with ties going towards zero.')
    ROUND_HALF_EVEN = (6, 'Round to nearest with ties going to nearest even '
                          'integer.')
    ROUND_HALF_UP = (7, 'Round to nearest with ties going away from zero.')
    ROUND_UP = (8, 'Round away from zero.')


_dflt_rounding: ContextVar[Rounding] = \
    ContextVar("dflt_rounding", default=Rounding.ROUND_HALF_EVEN)


def get_dflt_rounding_mode() -> Rounding:
    """Return default rounding mode."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: Rounding) -> Token:
    """Set default rounding mode.

    Args:
        rounding (Rounding): rounding mode to be set as default

    Returns:
        Token: can be used to restore the previous default

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


@contextmanager
def rounding_context(rounding: Rounding) -> Iterator[Rounding]:
    """Temporarily set the default rounding mode to `rounding`."""
    token = set_dflt_rounding_mode(rounding)
    try:
        yield rounding
    finally:
        _dflt_rounding.reset(token)


def divide_rounded(dividend: int, divisor: int,
                   rounding: Optional[Rounding] = None) -> int:
    """Return `dividend` / `divisor` rounded to an integer.

    Args:
        dividend (int): number to be divided
        divisor (int): number to divide by, must not be 0
        rounding (Rounding): rounding mode to be applied; if None, the
            current default rounding mode is used

    Returns:
        int: rounded quotient

    Raises:
        ZeroDivisionError: `divisor` is 0
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if rounding is None:
        rounding = get_dflt_rounding_mode()
    elif not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    if divisor < 0:
        dividend, divisor = -dividend, -divisor
    floor, rem = divmod(dividend, divisor)
    if rem == 0:
        return floor
    ceil = floor + 1
    if dividend < 0:
        towards_zero, away_from_zero = ceil, floor
    else:
        towards_zero, away_from_zero = floor, ceil
    if rounding is Rounding.ROUND_FLOOR:
        return floor
    if rounding is Rounding.ROUND_CEILING:
        return ceil
    if rounding is Rounding.ROUND_DOWN:
        return towards_zero
    if rounding is Rounding.ROUND_UP:
        return away_from_zero
    if rounding is Rounding.ROUND_05UP:
        if abs(towards_zero) % 5 == 0:
            return away_from_zero
        return towards_zero
    # remaining modes round to nearest and differ only on ties
    twice_rem = 2 * rem
    if twice_rem < divisor:
        return floor
    if twice_rem > divisor:
        return ceil
    if rounding is Rounding.ROUND_HALF_UP:
        return away_from_zero
    if rounding is Rounding.ROUND_HALF_DOWN:
        return towards_zero
    return floor if floor % 2 == 0 else ceil
