"""Arbitrary-precision integer support, backed by gmpy2.mpz.

Only non-negative values are used. The rest of the codec goes through
these helpers instead of touching gmpy2 directly.
"""

import numbers

import gmpy2
from gmpy2 import mpz

from .errors import RangeError

MPZ_TYPE = type(mpz(0))


def is_bignum(value) -> bool:
    """True if value carries the big-integer type tag."""
    return isinstance(value, MPZ_TYPE)


def bignum(value) -> mpz:
    """Convert a non-negative integer (int, mpz or whole float) to mpz."""
    if isinstance(value, bool) or not isinstance(value, (numbers.Integral, float)):
        raise TypeError(f"Cannot convert {type(value).__name__} to a big integer")
    if isinstance(value, float) and not value.is_integer():
        raise RangeError(f"Not a whole number: {value!r}")
    result = mpz(value)
    if result < 0:
        raise RangeError(f"Value must be non-negative, got {value!r}")
    return result


def floordiv(a, b) -> mpz:
    return gmpy2.f_div(mpz(a), mpz(b))


def mod(a, b) -> mpz:
    return gmpy2.f_mod(mpz(a), mpz(b))


def mul(a, b) -> mpz:
    return gmpy2.mul(mpz(a), mpz(b))


def add(a, b) -> mpz:
    return gmpy2.add(mpz(a), mpz(b))


def power(base, exponent: int) -> mpz:
    if exponent < 0:
        raise RangeError(f"Exponent must be non-negative, got {exponent}")
    return mpz(base) ** exponent


def compare(a, b) -> int:
    """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
    return gmpy2.cmp(mpz(a), mpz(b))


def word_count(value, base: int) -> int:
    """Smallest k >= 1 such that value < base**k."""
    value = mpz(value)
    k = 1
    while compare(value, power(base, k)) >= 0:
        k += 1
    return k


def to_digits(value, base: int) -> list[int]:
    """Big-endian base-`base` digits of value, minimal length (at least one)."""
    n = word_count(value, base)
    return [
        to_fixed_int(mod(floordiv(value, power(base, n - 1 - i)), base))
        for i in range(n)
    ]


def from_digits(digits, base: int) -> mpz:
    """Recombine big-endian digits: sum(d[i] * base**(n-1-i))."""
    n = len(digits)
    result = mpz(0)
    for i, digit in enumerate(digits):
        result = add(result, mul(digit, power(base, n - 1 - i)))
    return result


def to_fixed_int(value, bits: int = 32) -> int:
    """Extract value as a signed fixed-width int, raising if it does not fit."""
    limit = 2 ** (bits - 1) - 1
    if compare(value, limit) > 0 or compare(value, -limit - 1) < 0:
        raise OverflowError(f"Integer overflow: {value} does not fit in {bits} bits")
    return int(value)
