# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'bigrational' (statistics)."""

from fractions import Fraction
import statistics

import pytest
from hypothesis import given, strategies

from bigrational import (
    EmptyCollection, Rational, average, maximum, median, minimum)


VALUES = [Rational(1, 2), Rational(-3, 4), Rational(5, 3), Rational(2, 4),
          Rational(-6, 8), Rational(5, 3)]


@pytest.mark.parametrize("func", (minimum, maximum, average, median),
                         ids=lambda f: f.__name__)
def test_empty(func):
    with pytest.raises(EmptyCollection):
        func([])
    with pytest.raises(ValueError):
        func(iter(()))


@pytest.mark.parametrize("func", (minimum, maximum, average, median),
                         ids=lambda f: f.__name__)
def test_single_value(func):
    rn = Rational(7, 3)
    assert func([rn]).compare_to(rn) == 0


def test_minimum():
    res = minimum(VALUES)
    assert res is VALUES[1]
    assert minimum(reversed(VALUES)) is VALUES[4]


def test_maximum():
    res = maximum(VALUES)
    assert res is VALUES[2]
    assert maximum(reversed(VALUES)) is VALUES[5]


def test_min_max_generator():
    assert minimum(Rational(i, 7) for i in range(3, 10)) == Rational(3, 7)
    assert maximum(Rational(i, 7) for i in range(3, 10)) == Rational(9, 7)


def test_average():
    assert average(VALUES) == Rational(17, 36)
    assert average([Rational(1), Rational(2)]) == Rational(3, 2)


def test_average_approximate():
    res = average([Rational(1), Rational.approximate_of(2)])
    assert res.is_approximate
    assert res.compare_to(Rational(3, 2)) == 0


@pytest.mark.parametrize(("values", "result"),
                         (([Rational(3), Rational(1), Rational(2)],
                           Rational(2)),
                          ([Rational(4), Rational(1), Rational(3),
                            Rational(2)],
                           Rational(5, 2)),
                          ([Rational(1, 3), Rational(1, 2)],
                           Rational(5, 12)),
                          (VALUES, Rational(1, 2))),
                         ids=("odd", "even", "fractions", "values"))
def test_median(values, result):
    assert median(values) == result


@given(values=strategies.lists(strategies.fractions(max_denominator=1000),
                               min_size=1, max_size=20))
def test_statistics_hypo(values):
    rns = [Rational(f.numerator, f.denominator) for f in values]
    assert minimum(rns).as_fraction() == min(values)
    assert maximum(rns).as_fraction() == max(values)
    assert average(rns).as_fraction() == statistics.mean(values)
    assert median(rns).as_fraction() == Fraction(statistics.median(values))
