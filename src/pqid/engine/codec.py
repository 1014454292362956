"""Integers to and from multi-word proquints.

A value N becomes the minimal big-endian sequence of base-65536 digits,
each rendered as a word and joined by hyphens:

    0          -> babab
    25258      -> kapop
    0x7F000001 -> lusab-babad

Decoding always accumulates in arbitrary precision, then narrows to the
requested result mode:
  - INTEGER: int, at most 2**31 - 1
  - NUMERIC: float, below 2**53 (every integer there is exact)
  - BIGNUM:  gmpy2.mpz, unbounded

Anything that does not fit raises OverflowError; values are never wrapped
or promoted.
"""

import math
import numbers
import operator
import sys
from enum import Enum

from ..core import bigint
from ..core.alphabet import SEPARATOR, WORD_BASE, WORD_BITS
from ..core.errors import FormatError, RangeError
from ..core.validate import is_valid_proquint, invalid_proquints, quote_list
from ..core.words import decode_word, encode_word

INT32_MAX = 2 ** 31 - 1
FLOAT_LIMIT = int(2 / sys.float_info.epsilon)  # 2**53


class ResultMode(Enum):
    INTEGER = "integer"
    NUMERIC = "numeric"
    BIGNUM = "bignum"


def _result_mode(as_) -> ResultMode:
    if isinstance(as_, ResultMode):
        return as_
    try:
        return ResultMode(as_)
    except ValueError:
        options = ", ".join(m.value for m in ResultMode)
        raise ValueError(f"Result mode must be one of {options}, got {as_!r}") from None


def _native_digits(value) -> list[int]:
    """Digits of a native integer or whole float, most significant first."""
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise RangeError(f"Cannot encode non-integral value {value!r}")
        value = int(value)
    else:
        value = operator.index(value)
    if value < 0:
        raise RangeError(f"Cannot encode negative value {value!r}")
    n_words = max(1, -(-value.bit_length() // WORD_BITS))
    raw = value.to_bytes(2 * n_words, "big")
    return [int.from_bytes(raw[i:i + 2], "big") for i in range(0, len(raw), 2)]


def int_to_proquint(value, use_cache: bool = True) -> str:
    """Encode a non-negative integer (any Integral, whole float or mpz) as a proquint."""
    if bigint.is_bignum(value):
        digits = bigint.to_digits(bigint.bignum(value), WORD_BASE)
    elif isinstance(value, (numbers.Integral, float)) and not isinstance(value, bool):
        digits = _native_digits(value)
    else:
        raise TypeError(f"Invalid type for proquint value: {type(value).__name__}")
    return SEPARATOR.join(encode_word(d, use_cache, validate=False) for d in digits)


def _narrow(value, mode: ResultMode):
    if mode is ResultMode.BIGNUM:
        return value
    if mode is ResultMode.INTEGER:
        if bigint.compare(value, INT32_MAX) > 0:
            raise OverflowError("Integer overflow: cannot represent proquint as integer")
        return bigint.to_fixed_int(value, 32)
    if bigint.compare(value, FLOAT_LIMIT) >= 0:
        raise OverflowError("Numeric overflow: cannot represent proquint as numeric")
    return float(value)


def _combine(text: str, use_cache: bool):
    digits = [decode_word(w, use_cache, validate=False) for w in text.split(SEPARATOR)]
    return bigint.from_digits(digits, WORD_BASE)


def proquint_to_int(text: str, as_=ResultMode.NUMERIC, use_cache: bool = True):
    """Decode a proquint to a number of the requested result mode."""
    mode = _result_mode(as_)
    if not isinstance(text, str):
        raise TypeError(f"Expected a string proquint, got {type(text).__name__}")
    if not is_valid_proquint(text):
        raise FormatError(f"Invalid identifier: {text!r}")
    return _narrow(_combine(text, use_cache), mode)


def ints_to_proquints(values, use_cache: bool = True) -> list:
    """Encode a batch of integers. None entries stay None."""
    return [None if v is None else int_to_proquint(v, use_cache) for v in values]


def proquints_to_ints(texts, as_=ResultMode.NUMERIC, use_cache: bool = True) -> list:
    """Decode a batch of proquints. None entries stay None.

    Malformed entries are all reported in one FormatError.
    """
    mode = _result_mode(as_)
    texts = list(texts)
    wrong_type = [t for t in texts if t is not None and not isinstance(t, str)]
    if wrong_type:
        raise TypeError(f"Expected string proquints, got {quote_list(wrong_type)}")
    bad = invalid_proquints(texts)
    if bad:
        raise FormatError(f"Invalid identifier: {quote_list(bad)}")
    return [None if t is None else _narrow(_combine(t, use_cache), mode) for t in texts]
