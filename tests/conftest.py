# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures."""

import pytest

from bigrational import (
    Rounding, get_dflt_rounding_mode, set_dflt_rounding_mode)


@pytest.fixture(scope="session",
                params=[rnd.name for rnd in Rounding],
                ids=[rnd.name for rnd in Rounding])
def rnd(request) -> Rounding:
    return Rounding[request.param]


def _with_dflt_rounding(rnd):
    prev_rnd = get_dflt_rounding_mode()
    set_dflt_rounding_mode(rnd)
    yield
    set_dflt_rounding_mode(prev_rnd)


@pytest.fixture()
def with_round_half_up():
    yield from _with_dflt_rounding(Rounding.ROUND_HALF_UP)


@pytest.fixture()
def with_round_half_even():
    yield from _with_dflt_rounding(Rounding.ROUND_HALF_EVEN)


@pytest.fixture()
def restore_rounding():
    prev_rnd = get_dflt_rounding_mode()
    yield
    set_dflt_rounding_mode(prev_rnd)
