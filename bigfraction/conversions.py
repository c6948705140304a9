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
"""Exact conversions between BigFraction and other rational types

BigFraction values are exchanged losslessly with fractions.Fraction,
python-flint (fmpz, fmpq) and sympy (Integer, Rational). Conversions to
another type always go through the normalized pair, since none of these
types accepts a zero denominator.

Floats, decimals and strings are rejected: their conversion is not exact
and is left to the caller.

Example:
    >>> from fractions import Fraction
    >>> from bigfraction import BigFraction, to_fraction, value_of
    >>> to_fraction(BigFraction(5, -10))
    Fraction(-1, 2)
    >>> value_of(Fraction(4, 6))
    BigFraction(2, 3)
"""

import logging
import numbers
from fractions import Fraction
from typing import Union

from flint import fmpq, fmpz
from sympy import Rational

from .big_fraction import BigFraction

LOG = logging.getLogger(__name__)

__all__ = [
    'Exact', 'value_of', 'to_fraction', 'from_fraction', 'to_fmpq', 'from_fmpq', 'from_fmpz', 'to_sympy',
    'from_sympy'
]

# Types that can be converted to BigFraction without loss
Exact = Union[int, BigFraction, Fraction, fmpz, fmpq, Rational]


def to_fraction(value: BigFraction) -> Fraction:
    n, d = value.as_integer_ratio()
    return Fraction(n, d)


def from_fraction(value: Fraction) -> BigFraction:
    return BigFraction(value.numerator, value.denominator)


def to_fmpq(value: BigFraction) -> fmpq:
    """Convert a BigFraction to a python-flint fmpq"""
    n, d = value.as_integer_ratio()
    return fmpq(n, d)


def from_fmpq(value: fmpq) -> BigFraction:
    return BigFraction(int(value.p), int(value.q))


def from_fmpz(value: fmpz) -> BigFraction:
    return BigFraction(int(value))


def to_sympy(value: BigFraction) -> Rational:
    """Convert a BigFraction to a sympy Rational

    Integer values come back as sympy Integer, which sympy does on its own.
    """
    n, d = value.as_integer_ratio()
    return Rational(n, d)


def from_sympy(value: Rational) -> BigFraction:
    return BigFraction(int(value.p), int(value.q))


def value_of(value: Exact) -> BigFraction:
    """BigFraction with the exact value of its argument

    Args:
        value (int, BigFraction, Fraction, fmpz, fmpq or sympy Rational):
            The value to convert. A BigFraction is returned unchanged.

    Returns:
        (BigFraction):
        A BigFraction representing the same number.

    Raises:
        ValueError: If value is None.
        TypeError: For floats, strings and all other inexact or unknown types.
    """
    if value is None:
        raise ValueError("Cannot convert None to BigFraction")
    if isinstance(value, BigFraction):
        return value
    if isinstance(value, int):
        return BigFraction(value)
    if isinstance(value, fmpz):
        return from_fmpz(value)
    if isinstance(value, fmpq):
        return from_fmpq(value)
    if isinstance(value, Rational):
        return from_sympy(value)
    if isinstance(value, Fraction):
        return from_fraction(value)
    if isinstance(value, numbers.Integral):
        LOG.debug("Converting integral %s to BigFraction", type(value).__name__)
        return BigFraction(int(value))
    raise TypeError(f"Cannot convert {type(value).__name__} to BigFraction exactly")
