# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Simple statistics over collections of rational numbers."""

from __future__ import annotations

from typing import Iterable, List

from .errors import EmptyCollection
from .rational import Rational


__all__ = ['average', 'maximum', 'median', 'minimum']


def _as_list(values: Iterable[Rational], statistic: str) -> List[Rational]:
    values = list(values)
    if not values:
        raise EmptyCollection(
            f"Cannot compute the {statistic} of an empty collection.")
    return values


def minimum(values: Iterable[Rational]) -> Rational:
    """Return the first least element of `values`.

    Raises:
        EmptyCollection: `values` is empty
    """
    values = _as_list(values, 'minimum')
    result = values[0]
    for value in values[1:]:
        result = result.min(value)
    return result


def maximum(values: Iterable[Rational]) -> Rational:
    """Return the first greatest element of `values`.

    Raises:
        EmptyCollection: `values` is empty
    """
    values = _as_list(values, 'maximum')
    result = values[0]
    for value in values[1:]:
        result = result.max(value)
    return result


def average(values: Iterable[Rational]) -> Rational:
    """Return the arithmetic mean of `values`.

    Raises:
        EmptyCollection: `values` is empty
    """
    values = _as_list(values, 'average')
    return Rational.sum(values).divide(Rational.of(len(values)))


def median(values: Iterable[Rational]) -> Rational:
    """Return the median of `values`.

    For an even number of values the mean of the two middle values is
    returned.

    Raises:
        EmptyCollection: `values` is empty
    """
    ordered = sorted(_as_list(values, 'median'))
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return ordered[middle - 1].add(ordered[middle]).divide(Rational.of(2))
