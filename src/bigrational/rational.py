# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Immutable rational numbers with arbitrary precision.

A :class:`Rational` is the quotient p/q of two integers, a numerator p and a
non-zero denominator q. Its terms are Python ints, so precision is only
limited by memory.

Rationals are never reduced automatically: ``Rational(6, 4)`` and
``Rational(3, 2)`` are different representations of the same value until
:meth:`Rational.canonical_form` is called. Long calculation chains can make the
terms grow rapidly; :meth:`Rational.magnitude` gives a cheap measure of the
representation size, :meth:`Rational.canonical_form` and
:meth:`Rational.approximate` can be used to keep it in check.

A rational can be flagged as *approximate*, i.e. standing in for some value
only known with limited precision (like an irrational constant). The flag is
propagated through arithmetic, and an approximate rational is equal (``==``)
only to itself, whereas :meth:`Rational.compare_to` and the ordering operators
ignore the flag. Thus ``x.compare_to(y) == 0`` does not imply ``x == y``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction
import math
from numbers import Integral, Rational as _RationalABC, Real
import re
from typing import Any, ClassVar, Iterable, Optional, Tuple, Union

from .errors import (
    DivisionByZero, InvalidBound, InvalidDenominator, InversionOfZero,
    NonFiniteInput,
)
from .rounding import Rounding, divide_rounded


__all__ = [
    'APPROX_ONE',
    'APPROX_ZERO',
    'DEFAULT_MAX_DENOMINATOR',
    'ONE',
    'Rational',
    'ZERO',
]


# bound used by Rational.approximate if none is given
DEFAULT_MAX_DENOMINATOR = 2 ** 128

# scale needed to represent any float exactly as Decimal
# (= -Decimal(5e-324).as_tuple().exponent)
DOUBLE_REQUIRED_SCALE = 1074

_RATIO_PATTERN = re.compile(r"\s*(?P<num>[+-]?\d+)\s*/\s*(?P<den>[+-]?\d+)\s*",
                            re.UNICODE)

Operand = Union['Rational', int, Fraction, Decimal]


def _as_int(value: Any) -> int:
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise TypeError(f"Can't convert {value!r} to int.")


def _div_trunc(dividend: int, divisor: int) -> int:
    # integer division rounding towards zero
    quot = abs(dividend) // abs(divisor)
    return quot if (dividend < 0) == (divisor < 0) else -quot


def _bit_length(value: int) -> int:
    # bits of the minimal two's-complement representation without sign bit
    return value.bit_length() if value >= 0 else (~value).bit_length()


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _single_precision_parts(num: int, den: int) -> Tuple[int, int]:
    # significand and binary exponent of num / den (both > 0) rounded once
    # to IEEE-754 single precision (24 bit significand, subnormals down to
    # 2 ** -149)
    exp = num.bit_length() - den.bit_length()
    if (num << max(-exp, 0)) < (den << max(exp, 0)):
        exp -= 1
    exp = max(exp - 23, -149)
    if exp >= 0:
        return divide_rounded(num, den << exp, Rounding.ROUND_HALF_EVEN), exp
    return divide_rounded(num << -exp, den, Rounding.ROUND_HALF_EVEN), exp


class Rational:

    """Immutable quotient of two arbitrary-precision integers.

    Args:
        numerator (int, str, Decimal, Fraction, float or Rational): value of
            the new Rational or its numerator if a denominator is given
        denominator (int or str): denominator of the new Rational

    If no `numerator` is given, `Rational.ZERO` is returned.

    For details about the accepted arguments see :meth:`Rational.of`.

    Raises:
        TypeError: arguments of wrong type given
        ValueError: string argument does not represent a number
        InvalidDenominator: `denominator` is 0
        NonFiniteInput: value is NaN or infinite
    """

    __slots__ = ('_numerator', '_denominator', '_approximate', '_str')

    ZERO: ClassVar[Rational]
    ONE: ClassVar[Rational]
    APPROX_ZERO: ClassVar[Rational]
    APPROX_ONE: ClassVar[Rational]

    def __new__(cls, numerator: Any = 0,
                denominator: Optional[Any] = None) -> Rational:
        return cls.of(numerator, denominator)

    @classmethod
    def _create(cls, numerator: int, denominator: int,
                approximate: bool) -> Rational:
        rn = object.__new__(cls)
        rn._numerator = numerator
        rn._denominator = denominator
        rn._approximate = approximate
        rn._str = None
        return rn

    @classmethod
    def _normalized(cls, numerator: int, denominator: int,
                    approximate: bool = False) -> Rational:
        """Return a Rational with positive denominator equal to the given
        quotient.

        The shared constants are returned for values 0 and n/n.
        """
        if denominator == 0:
            raise InvalidDenominator("Denominator can't be 0.")
        if numerator == 0:
            return APPROX_ZERO if approximate else ZERO
        if numerator == denominator:
            return APPROX_ONE if approximate else ONE
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return cls._create(numerator, denominator, approximate)

    @classmethod
    def of(cls, numerator: Any = 0,
           denominator: Optional[Any] = None) -> Rational:
        """Return a Rational equal to the given value or quotient.

        Args:
            numerator: value or numerator of the rational
            denominator: denominator of the rational (optional)

        With two arguments, both must be integral numbers or strings holding
        integer literals. With a single argument, the accepted types are:

        * an integral number (denominator 1),
        * a string holding a decimal literal or a quotient 'p/q', optionally
          prefixed with '~' to denote an approximate value,
        * a :class:`decimal.Decimal` (see :meth:`from_decimal`),
        * a :class:`numbers.Rational` like :class:`fractions.Fraction`,
        * a float or other real number providing `as_integer_ratio` (see
          :meth:`from_float`),
        * a :class:`Rational` (returned unchanged).

        The result is not reduced to lowest terms.

        Raises:
            TypeError: arguments of wrong type given
            ValueError: string argument does not represent a number
            InvalidDenominator: `denominator` is 0
            NonFiniteInput: value is NaN or infinite
        """
        if denominator is not None:
            return cls._normalized(_as_int(numerator), _as_int(denominator))
        if isinstance(numerator, Rational):
            return numerator
        if isinstance(numerator, Integral):
            return cls._normalized(int(numerator), 1)
        if isinstance(numerator, str):
            return cls.from_str(numerator)
        if isinstance(numerator, Decimal):
            return cls.from_decimal(numerator)
        if isinstance(numerator, _RationalABC):
            return cls._normalized(int(numerator.numerator),
                                   int(numerator.denominator))
        if isinstance(numerator, Real) \
                and hasattr(numerator, 'as_integer_ratio'):
            return cls._from_real(numerator)
        raise TypeError(f"Can't convert {numerator!r} to Rational.")

    @classmethod
    def approximate_of(cls, numerator: Any,
                       denominator: Any = 1) -> Rational:
        """Return an approximate Rational equal to `numerator / denominator`.

        Raises:
            TypeError: arguments are not integral numbers or strings
            ValueError: string argument is not an integer literal
            InvalidDenominator: `denominator` is 0
        """
        return cls._normalized(_as_int(numerator), _as_int(denominator),
                               True)

    @classmethod
    def from_str(cls, value: str) -> Rational:
        """Return a Rational equal to the number represented by `value`.

        `value` may hold a decimal literal as accepted by
        :class:`decimal.Decimal` or a quotient 'p/q' of two integer literals.
        A leading '~' marks the result as approximate, so that the output of
        `str()` can be read back.

        Raises:
            ValueError: `value` does not represent a number
            InvalidDenominator: denominator of a quotient is 0
            NonFiniteInput: `value` represents NaN or infinity
        """
        lit = value.strip()
        approximate = lit.startswith('~')
        if approximate:
            lit = lit[1:]
        match = _RATIO_PATTERN.fullmatch(lit)
        if match is not None:
            return cls._normalized(int(match['num']), int(match['den']),
                                   approximate)
        try:
            dec = Decimal(lit)
        except InvalidOperation as exc:
            raise ValueError(f"Can't convert {value!r} to Rational.") \
                from exc
        rn = cls.from_decimal(dec)
        if approximate and not rn._approximate:
            return cls._normalized(rn._numerator, rn._denominator, True)
        return rn

    @classmethod
    def from_decimal(cls, value: Union[Decimal, Integral]) -> Rational:
        """Return a Rational equal to `value`.

        The decimal is decomposed into its unscaled value and a power of ten
        as denominator, so Decimal('1.50') gives 150/100. Trailing zeros are
        kept in the representation, but the scale of the decimal is not.

        Raises:
            TypeError: `value` is not a Decimal or integral number
            NonFiniteInput: `value` is NaN or infinite
        """
        if isinstance(value, Integral):
            return cls._normalized(int(value), 1)
        if not isinstance(value, Decimal):
            raise TypeError(f"{value!r} is not a Decimal.")
        if not value.is_finite():
            raise NonFiniteInput(f"Can't convert {value} to Rational.")
        sign, digits, exp = value.as_tuple()
        coeff = int(Decimal((sign, digits, 0)))
        if exp >= 0:
            return cls._normalized(coeff * 10 ** exp, 1)
        return cls._normalized(coeff, 10 ** -exp)

    @classmethod
    def from_float(cls, value: Union[float, Integral]) -> Rational:
        """Return a Rational equal to the exact binary value of `value`.

        The result reflects the value the float actually encodes, not the
        decimal literal it may have been written as: 0.1 gives
        3602879701896397/36028797018963968.

        Raises:
            TypeError: `value` is not a float or integral number
            NonFiniteInput: `value` is NaN or infinite
        """
        if isinstance(value, Integral):
            return cls._normalized(int(value), 1)
        if not isinstance(value, float):
            raise TypeError(f"{value!r} is not a float.")
        return cls._from_real(value)

    @classmethod
    def _from_real(cls, value: Real) -> Rational:
        if math.isnan(value) or math.isinf(value):
            raise NonFiniteInput(f"Can't convert {value} to Rational.")
        num, den = value.as_integer_ratio()
        return cls._normalized(int(num), int(den))

    def canonical_form(self) -> Rational:
        """Return `self` reduced to lowest terms.

        Returns `self` if numerator and denominator are already coprime.
        Computing the gcd gets expensive for large terms.
        """
        gcd = math.gcd(self._numerator, self._denominator)
        if gcd == 1:
            return self
        return Rational._normalized(self._numerator // gcd,
                                    self._denominator // gcd,
                                    self._approximate)

    # properties

    @property
    def numerator(self) -> int:
        """Numerator of `self` (not necessarily in lowest terms)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` (always > 0)."""
        return self._denominator

    @property
    def is_approximate(self) -> bool:
        """True if `self` stands in for some imprecisely known value."""
        return self._approximate

    @property
    def real(self) -> Rational:
        """The real part of `self`."""
        return self

    @property
    def imag(self) -> int:
        """The imaginary part of `self`."""
        return 0

    def signum(self) -> int:
        """Return -1, 0 or 1 as `self` is negative, zero or positive."""
        return (self._numerator > 0) - (self._numerator < 0)

    def is_integer(self) -> bool:
        """Return True if `self` has an integral value."""
        return self._denominator == 1 \
            or self._numerator % self._denominator == 0

    def magnitude(self) -> int:
        """Return combined bit length of numerator and denominator.

        The sign bit of a negative numerator is not counted.
        """
        return _bit_length(self._numerator) + self._denominator.bit_length()

    # unary operations

    def negate(self) -> Rational:
        """Return -`self`."""
        if self._numerator == 0:
            return self
        return Rational._normalized(-self._numerator, self._denominator,
                                    self._approximate)

    def abs(self) -> Rational:
        """Return |`self`|."""
        if self._numerator >= 0:
            return self
        return self.negate()

    def inverse(self) -> Rational:
        """Return 1 / `self`.

        Raises:
            InversionOfZero: `self` is 0
        """
        if self._numerator == 0:
            raise InversionOfZero("Can't inverse zero.")
        return Rational._normalized(self._denominator, self._numerator,
                                    self._approximate)

    # binary arithmetic

    def add(self, other: Rational) -> Rational:
        """Return `self` + `other`."""
        result = _identity_operation(self, other, 0)
        if result is not None:
            return result
        return Rational._normalized(
            self._numerator * other._denominator
            + self._denominator * other._numerator,
            self._denominator * other._denominator,
            self._approximate or other._approximate)

    def subtract(self, other: Rational) -> Rational:
        """Return `self` - `other`."""
        result = _identity_operation(self, other, 0, commutative=False)
        if result is not None:
            return result
        return Rational._normalized(
            self._numerator * other._denominator
            - self._denominator * other._numerator,
            self._denominator * other._denominator,
            self._approximate or other._approximate)

    def multiply(self, other: Rational) -> Rational:
        """Return `self` * `other`.

        If one of the operands is 0, 0 is returned; it is approximate if the
        zero operand is.
        """
        self_zero = self._numerator == 0
        other_zero = other._numerator == 0
        if self_zero or other_zero:
            if (self_zero and self._approximate) \
                    or (other_zero and other._approximate):
                return APPROX_ZERO
            return ZERO
        result = _identity_operation(self, other, 1)
        if result is not None:
            return result
        return Rational._normalized(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
            self._approximate or other._approximate)

    def divide(self, other: Rational) -> Rational:
        """Return `self` / `other`.

        Raises:
            DivisionByZero: `other` is 0
        """
        if other._numerator == 0:
            raise DivisionByZero("Division by 0.")
        if self._numerator == 0:
            return self
        result = _identity_operation(self, other, 1, commutative=False)
        if result is not None:
            return result
        return Rational._normalized(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
            self._approximate or other._approximate)

    def pow(self, exponent: int) -> Rational:
        """Return `self` ** `exponent`.

        Any rational to the power of 0 is 1, including 0 ** 0.

        Raises:
            TypeError: `exponent` is not an integral number
            DivisionByZero: `self` is 0 and `exponent` is negative
        """
        if not isinstance(exponent, Integral):
            raise TypeError(f"Exponent must be an integer, not "
                            f"{type(exponent).__name__}.")
        exponent = int(exponent)
        if exponent == 0:
            return ONE
        if exponent == 1 or self._numerator == self._denominator:
            return self
        if exponent > 0:
            return Rational._normalized(self._numerator ** exponent,
                                        self._denominator ** exponent,
                                        self._approximate)
        if self._numerator == 0:
            raise DivisionByZero("Division by 0.")
        return Rational._normalized(self._denominator ** -exponent,
                                    self._numerator ** -exponent,
                                    self._approximate)

    @classmethod
    def sum(cls, values: Iterable[Rational]) -> Rational:
        """Return the sum of `values`, 0 if `values` is empty."""
        total = ZERO
        for value in values:
            total = total.add(value)
        return total

    @classmethod
    def product(cls, values: Iterable[Rational]) -> Rational:
        """Return the product of `values`, 1 if `values` is empty."""
        result = ONE
        for value in values:
            result = result.multiply(value)
        return result

    def add_all(self, *values: Rational) -> Rational:
        """Return `self` + sum(`values`)."""
        return self.add(Rational.sum(values))

    def multiply_all(self, *values: Rational) -> Rational:
        """Return `self` * product(`values`)."""
        return self.multiply(Rational.product(values))

    # comparison

    def compare_to(self, other: Rational) -> int:
        """Return -1, 0 or 1 as `self` is less than, equal to or greater than
        `other`.

        The approximate flag is ignored, so the result may be 0 even though
        `self` != `other`.
        """
        if self is other:
            return 0
        sign = self.signum()
        other_sign = other.signum()
        if sign != other_sign:
            return -1 if sign < other_sign else 1
        if self._denominator == other._denominator:
            lhs, rhs = self._numerator, other._numerator
        else:
            lhs = self._numerator * other._denominator
            rhs = other._numerator * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def gt(self, other: Rational) -> bool:
        """Return True if `self` > `other`."""
        return self.compare_to(other) > 0

    def ge(self, other: Rational) -> bool:
        """Return True if `self` >= `other`."""
        return self.compare_to(other) >= 0

    def lt(self, other: Rational) -> bool:
        """Return True if `self` < `other`."""
        return self.compare_to(other) < 0

    def le(self, other: Rational) -> bool:
        """Return True if `self` <= `other`."""
        return self.compare_to(other) <= 0

    def min(self, other: Rational) -> Rational:
        """Return the lesser of `self` and `other` (`self` on ties)."""
        return self if self.compare_to(other) <= 0 else other

    def max(self, other: Rational) -> Rational:
        """Return the greater of `self` and `other` (`self` on ties)."""
        return self if self.compare_to(other) >= 0 else other

    def __eq__(self, other: Any) -> bool:
        """self == other

        Approximate rationals are only equal to themselves.
        """
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        if self._approximate or other._approximate:
            return False
        return self._numerator * other._denominator \
            == other._numerator * self._denominator

    def __hash__(self) -> int:
        """hash(self)"""
        num, den = self._numerator, self._denominator
        if num == 0:
            return 0
        # truncated value (or that of the inverse) does not depend on the
        # representation
        if abs(num) > den:
            return hash(_div_trunc(num, den))
        return hash(_div_trunc(den, num))

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) >= 0

    # approximation

    def approximate(self, max_denominator: int = DEFAULT_MAX_DENOMINATOR) \
            -> Rational:
        """Return an approximation of `self` with a denominator not greater
        than `max_denominator`.

        Returns `self` if its denominator already fits. Otherwise two
        candidates with denominator `max_denominator` are derived: the
        numerator divided by `denominator // max_denominator` (truncated
        towards zero), and that quotient plus one. The candidate nearer to
        `self` is returned (the first one on ties), flagged approximate. If
        the first candidate equals `self`, it is returned as exact value.

        This is not necessarily the best approximation among all fractions
        with a denominator not greater than `max_denominator`.

        Raises:
            TypeError: `max_denominator` is not an integral number
            InvalidBound: `max_denominator` is not > 0
        """
        if not isinstance(max_denominator, Integral):
            raise TypeError("Maximum denominator must be an integer.")
        max_denominator = int(max_denominator)
        if max_denominator <= 0:
            raise InvalidBound("Maximum denominator must be > 0.")
        if self._denominator <= max_denominator:
            return self
        ratio = self._denominator // max_denominator
        trunc_numerator = _div_trunc(self._numerator, ratio)
        approx_trunc = Rational._normalized(trunc_numerator, max_denominator,
                                            True)
        epsilon_trunc = self.subtract(approx_trunc).abs()
        if epsilon_trunc.compare_to(ZERO) == 0:
            return Rational._normalized(trunc_numerator, max_denominator)
        approx_next = Rational._normalized(trunc_numerator + 1,
                                           max_denominator, True)
        epsilon_next = self.subtract(approx_next).abs()
        return approx_trunc if epsilon_trunc.le(epsilon_next) \
            else approx_next

    # conversion

    def to_int(self) -> int:
        """Return `self` truncated towards zero."""
        return _div_trunc(self._numerator, self._denominator)

    def to_int32(self) -> int:
        """Return `self` truncated towards zero and wrapped around to the
        range of a signed 32-bit integer."""
        return _wrap(self.to_int(), 32)

    def to_int64(self) -> int:
        """Return `self` truncated towards zero and wrapped around to the
        range of a signed 64-bit integer."""
        return _wrap(self.to_int(), 64)

    def to_decimal(self, rounding: Rounding = Rounding.ROUND_HALF_EVEN) \
            -> Decimal:
        """Return `self` as Decimal with 1074 fractional digits.

        Args:
            rounding (Rounding): rounding mode to be applied (default:
                ROUND_HALF_EVEN, independent of the current default rounding
                mode)

        The scale is sufficient to represent any float exactly, so that
        converting a rational created from a float back gives the same
        float.
        """
        coeff = divide_rounded(self._numerator * 10 ** DOUBLE_REQUIRED_SCALE,
                               self._denominator, rounding)
        sign, digits, _ = Decimal(coeff).as_tuple()
        return Decimal((sign, digits, -DOUBLE_REQUIRED_SCALE))

    def to_float(self) -> float:
        """Return `self` as nearest float."""
        if self._numerator == 0:
            return 0.0
        return float(self.to_decimal(Rounding.ROUND_HALF_EVEN))

    def to_float32(self) -> float:
        """Return `self` rounded to the nearest single precision value
        (ties to even).

        Values out of the range of single precision give +/- infinity.
        """
        num = self._numerator
        if num == 0:
            return 0.0
        significand, exp = _single_precision_parts(abs(num),
                                                   self._denominator)
        if significand.bit_length() + exp > 128:
            value = math.inf
        else:
            value = math.ldexp(significand, exp)
        return -value if num < 0 else value

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator in lowest terms."""
        canonical = self.canonical_form()
        return canonical._numerator, canonical._denominator

    def as_fraction(self) -> Fraction:
        """Return an instance of :class:`fractions.Fraction` equal to
        `self`."""
        return Fraction(self._numerator, self._denominator)

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __int__(self) -> int:
        """int(self)"""
        return self.to_int()

    def __float__(self) -> float:
        """float(self)"""
        return self.to_float()

    def __trunc__(self) -> int:
        """math.trunc(self)"""
        return self.to_int()

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._numerator // self._denominator)

    def __round__(self, ndigits: Optional[int] = None) \
            -> Union[int, Rational]:
        """round(self [, ndigits])

        Rounding is done with the current default rounding mode.
        """
        if ndigits is None:
            return divide_rounded(self._numerator, self._denominator)
        if not isinstance(ndigits, Integral):
            raise TypeError("ndigits must be an integer.")
        if ndigits >= 0:
            scale = 10 ** int(ndigits)
            return Rational._normalized(
                divide_rounded(self._numerator * scale, self._denominator),
                scale, self._approximate)
        scale = 10 ** -int(ndigits)
        return Rational._normalized(
            divide_rounded(self._numerator, self._denominator * scale)
            * scale, 1, self._approximate)

    def __str__(self) -> str:
        """str(self)"""
        out = self._str
        if out is None:
            out = ('~' if self._approximate else '') + str(self._numerator)
            if self._denominator != 1:
                out += '/' + str(self._denominator)
            self._str = out
        return out

    def __repr__(self) -> str:
        """repr(self)"""
        factory = type(self).__name__
        if self._approximate:
            factory += '.approximate_of'
        if self._denominator == 1:
            return f"{factory}({self._numerator})"
        return f"{factory}({self._numerator}, {self._denominator})"

    def __format__(self, fmt_spec: str) -> str:
        """format(self, fmt_spec)"""
        return format(str(self), fmt_spec)

    # copying and pickling

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        return self

    def __reduce__(self) -> Tuple[Any, Tuple[int, int]]:
        factory = Rational.approximate_of if self._approximate else Rational
        return factory, (self._numerator, self._denominator)

    # operators

    def __pos__(self) -> Rational:
        """+self"""
        return self

    def __neg__(self) -> Rational:
        """-self"""
        return self.negate()

    def __abs__(self) -> Rational:
        """abs(self)"""
        return self.abs()

    def __add__(self, other: Operand) -> Rational:
        """self + other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Operand) -> Rational:
        """other + self"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: Operand) -> Rational:
        """self - other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> Rational:
        """other - self"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Operand) -> Rational:
        """self * other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Operand) -> Rational:
        """other * self"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: Operand) -> Rational:
        """self / other"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Operand) -> Rational:
        """other / self"""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, exponent: Any) -> Rational:
        """self ** exponent"""
        if not isinstance(exponent, Integral):
            return NotImplemented
        return self.pow(exponent)


def _coerce(value: Any) -> Rational:
    # exact conversion of operands given to operators
    if isinstance(value, Rational):
        return value
    if isinstance(value, (_RationalABC, Decimal)):
        return Rational.of(value)
    return NotImplemented


def _promoted(value: Rational, approximate: bool) -> Rational:
    if approximate and not value._approximate:
        return Rational._normalized(value._numerator, value._denominator,
                                    True)
    return value


def _identity_operation(lhs: Rational, rhs: Rational, identity: int,
                        commutative: bool = True) -> Optional[Rational]:
    """Shortcut operations with an identity element (0 or 1).

    Returns the other operand if `rhs` (or `lhs`, if the operation is
    commutative) has the value `identity`, turned approximate if the
    identity operand is approximate. Returns None if no operand is an
    identity element.
    """
    if commutative and lhs._numerator == identity * lhs._denominator:
        return _promoted(rhs, lhs._approximate)
    if rhs._numerator == identity * rhs._denominator:
        return _promoted(lhs, rhs._approximate)
    return None


ZERO = Rational._create(0, 1, False)
ONE = Rational._create(1, 1, False)
APPROX_ZERO = Rational._create(0, 1, True)
APPROX_ONE = Rational._create(1, 1, True)

Rational.ZERO = ZERO
Rational.ONE = ONE
Rational.APPROX_ZERO = APPROX_ZERO
Rational.APPROX_ONE = APPROX_ONE
