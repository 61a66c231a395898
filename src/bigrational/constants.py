# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Approximate rational values of common mathematical constants.

Both values have 2 ** 128 as denominator, which is enough to give
`math.pi` and `math.e` when converted to float.
"""

from .rational import Rational


__all__ = ['E', 'PI']


PI = Rational.approximate_of(1069028584064966747859680373161870783301,
                             2 ** 128)

E = Rational.approximate_of(924983374546220337150911035843336795079,
                            2 ** 128)
