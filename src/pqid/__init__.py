"""
pqid - pronounceable identifiers.

Proquints (PRO-nounceable QUINT-uplets, Wilkerson, arXiv:0901.4016) encode
non-negative integers as hyphen-joined five letter words, one word per
16 bits.

Usage:
    from pqid import int_to_proquint, proquint_to_int, ResultMode

    int_to_proquint(0x7F000001)                            # "lusab-babad"
    proquint_to_int("lusab-babad", ResultMode.INTEGER)     # 2130706433
    generate_proquints(3, n_words=4)
"""

from .core.errors import FormatError, RangeError

from .core.validate import (
    is_valid_word,
    is_valid_proquint,
)

from .core.words import (
    encode_word,
    decode_word,
    encode_words,
    decode_words,
    get_word_table,
)

from .core.bigint import (
    bignum,
    is_bignum,
)

from .engine.codec import (
    ResultMode,
    int_to_proquint,
    proquint_to_int,
    ints_to_proquints,
    proquints_to_ints,
)

from .engine.sampler import (
    sample_indices,
    sample_words,
)

from .engine.generate import (
    generate_proquints,
    proquint_generator,
)

__all__ = [
    # Errors
    "FormatError",
    "RangeError",
    # Validation
    "is_valid_word",
    "is_valid_proquint",
    # Words
    "encode_word",
    "decode_word",
    "encode_words",
    "decode_words",
    "get_word_table",
    # Big integers
    "bignum",
    "is_bignum",
    # Codec
    "ResultMode",
    "int_to_proquint",
    "proquint_to_int",
    "ints_to_proquints",
    "proquints_to_ints",
    # Random
    "sample_indices",
    "sample_words",
    "generate_proquints",
    "proquint_generator",
]
