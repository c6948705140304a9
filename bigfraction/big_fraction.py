#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Immutable fractions of whole numbers with exact arithmetic

A BigFraction holds a numerator and a denominator of arbitrary precision
(Python int). The pair is stored as given and is never reduced in place:
results of arithmetic stay unreduced and every observing operation
(formatting, comparison, equality, hashing) works on the normalized pair
computed by normalize().

A zero denominator is not an error. BigFraction(4, 0) represents the
value 0, in arithmetic as well as in formatting.

Example:
    >>> from bigfraction import BigFraction
    >>> x = BigFraction(5, -10).add(BigFraction(1, 3))
    >>> str(x)
    '(-1 / 6)'
    >>> x.compare_to(BigFraction(0))
    -1
"""

import logging
import numbers
from math import gcd
from typing import Iterable, Optional, Tuple

from .names import (OPEN_PAREN, CLOSE_PAREN, SEPARATOR, SIGN_NEGATIVE, SIGN_ZERO, SIGN_POSITIVE)

LOG = logging.getLogger(__name__)

__all__ = ['BigFraction', 'normalize', 'sum_all']


def normalize(numerator: int, denominator: int) -> Tuple[int, int]:
    """Canonical (numerator, denominator) pair of a fraction

    The denominator of the result is positive and shares no factor other
    than 1 with the numerator. A zero denominator yields (0, 1).

    Args:
        numerator (int): Numerator, any sign.
        denominator (int): Denominator, any sign, may be zero.

    Returns:
        (Tuple[int, int]):
        The normalized pair.
    """
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    if denominator == 0:
        return 0, 1
    g = gcd(numerator, denominator)
    return numerator // g, denominator // g


def _signed_terms(numerator: int, denominator: int) -> Tuple[int, int]:
    # sign moved to the numerator, zero denominator resolved, no gcd
    if denominator < 0:
        return -numerator, -denominator
    if denominator == 0:
        return 0, 1
    return numerator, denominator


def _integer(value, role: str) -> int:
    if value is None:
        raise ValueError(f"BigFraction {role} must not be None")
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"BigFraction {role} must be an integer, not {type(value).__name__}")
    return int(value)


def _coerce(value):
    """BigFraction for value, or NotImplemented if value is not an exact rational"""
    if isinstance(value, BigFraction):
        return value
    if isinstance(value, numbers.Integral):
        return BigFraction(int(value))
    if isinstance(value, numbers.Rational):
        return BigFraction(int(value.numerator), int(value.denominator))
    return NotImplemented


def _operand(value, operation: str) -> 'BigFraction':
    if value is None:
        raise ValueError(f"Cannot {operation} None")
    other = _coerce(value)
    if other is NotImplemented:
        raise TypeError(f"Cannot {operation} BigFraction and {type(value).__name__}")
    return other


class BigFraction:
    """Immutable fraction of two arbitrary-precision integers

    Args:
        numerator (int): The numerator, or the whole value if denominator is omitted.
        denominator (int): (Default: 1) The denominator. The value is 0 if the denominator is 0.
    """
    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator, denominator=1):
        self._numerator = _integer(numerator, 'numerator')
        self._denominator = _integer(denominator, 'denominator')

    # -------------------------------------------------------------------------
    # Normalization and formatting
    # -------------------------------------------------------------------------

    def _terms(self) -> Tuple[int, int]:
        return _signed_terms(self._numerator, self._denominator)

    def _normalized(self) -> Tuple[int, int]:
        return normalize(self._numerator, self._denominator)

    @property
    def numerator(self) -> int:
        """Numerator of the normalized pair"""
        return self._normalized()[0]

    @property
    def denominator(self) -> int:
        """Denominator of the normalized pair, always positive"""
        return self._normalized()[1]

    def as_integer_ratio(self) -> Tuple[int, int]:
        return self._normalized()

    def reduce(self) -> 'BigFraction':
        """New BigFraction holding the normalized pair"""
        return BigFraction(*self._normalized())

    def to_string(self) -> str:
        """Normalized text form of this fraction

        Integer values are rendered as the integer alone, all other values
        as "(N / D)" with a positive D. BigFraction(5, 3) and
        BigFraction(-10, -6) both give "(5 / 3)", BigFraction(-2) gives "-2"
        and BigFraction(4, 0) gives "0".
        """
        n, d = self._normalized()
        if d == 1:
            return str(n)
        return OPEN_PAREN + str(n) + SEPARATOR + str(d) + CLOSE_PAREN

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        n, d = self._normalized()
        return f"BigFraction({n}, {d})"

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other) -> 'BigFraction':
        """Returns this + other, (a*d + b*c)/(b*d)"""
        other = _operand(other, 'add')
        a, b = self._terms()
        c, d = other._terms()
        return BigFraction(a * d + b * c, b * d)

    def subtract(self, other) -> 'BigFraction':
        """Returns this - other, (a*d - b*c)/(b*d)"""
        other = _operand(other, 'subtract')
        a, b = self._terms()
        c, d = other._terms()
        return BigFraction(a * d - b * c, b * d)

    def multiply(self, other) -> 'BigFraction':
        """Returns this * other, (a*c)/(b*d)"""
        other = _operand(other, 'multiply')
        a, b = self._terms()
        c, d = other._terms()
        return BigFraction(a * c, b * d)

    def divide(self, other) -> 'BigFraction':
        """Returns this / other, (a*d)/(b*c)

        Raises:
            ZeroDivisionError: If the value of other is 0, also when other was
                constructed with a zero denominator.
        """
        other = _operand(other, 'divide')
        a, b = self._terms()
        c, d = other._terms()
        if c == 0:
            LOG.debug("Rejected division of %r by zero value %r", self, other)
            raise ZeroDivisionError(f"BigFraction division by zero: {self} / {other}")
        return BigFraction(a * d, b * c)

    def negate(self) -> 'BigFraction':
        a, b = self._terms()
        return BigFraction(-a, b)

    def invert(self) -> 'BigFraction':
        """Returns the reciprocal 1 / this

        Raises:
            ZeroDivisionError: If this fraction has the value 0.
        """
        a, b = self._terms()
        if a == 0:
            raise ZeroDivisionError("BigFraction inversion of zero")
        return BigFraction(b, a)

    def pow(self, exponent: int) -> 'BigFraction':
        """Returns this taken to the power of exponent

        exponent may be zero or negative: a^0 = 1 and a^e = (1/a)^(-e) for
        e < 0. The reciprocal is taken before raising to the power.

        Raises:
            TypeError: If exponent is not an int.
            ZeroDivisionError: For a negative exponent and the value 0.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Exponent must be an integer, not {type(exponent).__name__}")
        if exponent == 0:
            return BigFraction(1)
        if exponent == 1:
            return self
        a, b = self._terms()
        if exponent < 0:
            if a == 0:
                raise ZeroDivisionError("BigFraction zero raised to a negative power")
            return BigFraction(b**-exponent, a**-exponent)
        return BigFraction(a**exponent, b**exponent)

    def abs(self) -> 'BigFraction':
        if self.signum() < 0:
            return self.negate()
        return self

    # -------------------------------------------------------------------------
    # Sign, ordering and equality
    # -------------------------------------------------------------------------

    def signum(self) -> int:
        """Returns -1, 0 or 1 as the value is negative, zero or positive"""
        n = self._terms()[0]
        if n < 0:
            return SIGN_NEGATIVE
        if n == 0:
            return SIGN_ZERO
        return SIGN_POSITIVE

    def is_zero(self) -> bool:
        return self._terms()[0] == 0

    def is_one(self) -> bool:
        n, d = self._terms()
        return n == d

    def is_negative(self) -> bool:
        return self._terms()[0] < 0

    def is_integer(self) -> bool:
        return self._normalized()[1] == 1

    def compare_to(self, other) -> int:
        """Compares this fraction with other

        Returns:
            (int):
            -1, 0 or 1 as this fraction is numerically less than, equal to or
            greater than other.
        """
        other = _operand(other, 'compare')
        a, b = self._terms()
        c, d = other._terms()
        lhs = a * d
        rhs = c * b
        return (lhs > rhs) - (lhs < rhs)

    def min(self, other: 'BigFraction') -> 'BigFraction':
        """Returns the lesser of this and other (this on a tie), not a copy"""
        other = _operand(other, 'compare')
        if other.compare_to(self) < 0:
            return other
        return self

    def max(self, other: 'BigFraction') -> 'BigFraction':
        """Returns the greater of this and other (this on a tie), not a copy"""
        other = _operand(other, 'compare')
        if other.compare_to(self) > 0:
            return other
        return self

    def equals_value(self, other: Optional['BigFraction']) -> bool:
        """True if other is a BigFraction representing the same value

        other may be None or of any type, in which case the result is False.
        """
        if not isinstance(other, BigFraction):
            return False
        return self._normalized() == other._normalized()

    def __eq__(self, other) -> bool:
        return self.equals_value(other)

    def __hash__(self) -> int:
        return hash(self._normalized())

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare_to(other) >= 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    # Python operator overloading
    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    @staticmethod
    def sum_all(values: Iterable[Optional['BigFraction']]) -> Optional['BigFraction']:
        return sum_all(values)


def sum_all(values: Iterable[Optional[BigFraction]]) -> Optional[BigFraction]:
    """Sum of all fractions in values

    Args:
        values (iterable of BigFraction): Fractions to be summed up, slots may be None.

    Returns:
        (BigFraction or None):
        None if any element of values is None, otherwise the sum of all
        elements. An empty iterable sums to 0.
    """
    total = BigFraction(0)
    for i, value in enumerate(values):
        if value is None:
            LOG.debug("sum_all: element %d is absent", i)
            return None
        total = total.add(value)
    return total


# Constants
BigFraction.ZERO = BigFraction(0)
BigFraction.ONE = BigFraction(1)
