# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'bigrational' (constants)."""

import math

import pytest

from bigrational import E, PI, Rational


PI_1000_DIGITS = Rational(
    "3.1415926535897932384626433832795028841971693993751058209749445923"
    "078164062862089986280348253421170679821480865132823066470938446095"
    "505822317253594081284811174502841027019385211055596446229489549303"
    "819644288109756659334461284756482337867831652712019091456485669234"
    "603486104543266482133936072602491412737245870066063155881748815209"
    "209628292540917153643678925903600113305305488204665213841469519415"
    "116094330572703657595919530921861173819326117931051185480744623799"
    "627495673518857527248912279381830119491298336733624406566430860213"
    "949463952247371907021798609437027705392171762931767523846748184676"
    "694051320005681271452635608277857713427577896091736371787214684409"
    "012249534301465495853710507922796892589235420199561121290219608640"
    "344181598136297747713099605187072113499999983729780499510597317328"
    "160963185950244594553469083026425223082533446850352619311881710100"
    "031378387528865875332083814206171776691473035982534904287554687311"
    "595628638823537875937519577818577805321712268066130019278766111959"
    "09216420198")

E_1000_DIGITS = Rational(
    "2.7182818284590452353602874713526624977572470936999595749669676277"
    "240766303535475945713821785251664274274663919320030599218174135966"
    "290435729003342952605956307381323286279434907632338298807531952510"
    "190115738341879307021540891499348841675092447614606680822648001684"
    "774118537423454424371075390777449920695517027618386062613313845830"
    "007520449338265602976067371132007093287091274437470472306969772093"
    "101416928368190255151086574637721112523897844250569536967707854499"
    "699679468644549059879316368892300987931277361782154249992295763514"
    "822082698951936680331825288693984964651058209392398294887933203625"
    "094431173012381970684161403970198376793206832823764648042953118023"
    "287825098194558153017567173613320698112509961818815930416903515988"
    "885193458072738667385894228792284998920868058257492796104841984443"
    "634632449684875602336248270419786232090021609902353043699418491463"
    "140934317381436405462531520961836908887070167683964243781405927145"
    "635490613031072085103837505101157477041718986106873969655212671546"
    "88957035035")


@pytest.mark.parametrize(("const", "precise", "flt"),
                         ((PI, PI_1000_DIGITS, math.pi),
                          (E, E_1000_DIGITS, math.e)),
                         ids=("pi", "e"))
def test_constant(const, precise, flt):
    assert const.is_approximate
    assert const.denominator == 2 ** 128
    assert const.compare_to(precise) != 0
    assert const.compare_to(precise.approximate()) == 0
    assert const.to_float() == flt
    assert float(const) == flt


@pytest.mark.parametrize("const", (PI, E), ids=("pi", "e"))
def test_constant_equals_only_itself(const):
    assert const == const
    assert const != Rational(const.numerator, const.denominator)
    assert const != Rational.approximate_of(const.numerator,
                                            const.denominator)


def test_pi_approximations():
    assert Rational(355, 113).compare_to(PI.approximate(113)) == 0
    assert Rational(22, 7).compare_to(PI.approximate(7)) == 0
    assert Rational(3).compare_to(PI.approximate(1)) == 0
    assert str(PI.approximate(113)) == "~355/113"
