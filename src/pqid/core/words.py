"""Single proquint words: a 16-bit index to and from five letters.

Two interchangeable paths:
  - arithmetic (index_to_word / word_to_index), no state
  - WordTable lookup, built once for all 65536 words on first use

Both give identical results; use_cache only changes speed.
"""

import logging
import numbers
import threading

from .alphabet import (
    CONSONANT_INDEX,
    MODULI,
    MULTIPLIERS,
    POOL,
    VOWEL_INDEX,
    VOWEL_OFFSET,
    VOWEL_POSITIONS,
    WORD_BASE,
    WORD_LENGTH,
)
from .errors import FormatError, RangeError
from .validate import is_valid_word, invalid_words, quote_list

logger = logging.getLogger(__name__)


def index_to_word(index: int) -> str:
    """Render an index 0-65535 as a word. No range check."""
    chars = []
    for pos in range(WORD_LENGTH):
        j = (index % MODULI[pos]) // MULTIPLIERS[pos]
        if pos in VOWEL_POSITIONS:
            j += VOWEL_OFFSET
        chars.append(POOL[j])
    return "".join(chars)


def word_to_index(word: str) -> int:
    """Recombine a five letter word into its index. No format check."""
    value = 0
    for pos, ch in enumerate(word):
        lookup = VOWEL_INDEX if pos in VOWEL_POSITIONS else CONSONANT_INDEX
        value += lookup[ch] * MULTIPLIERS[pos]
    return value


class WordTable:
    """All 65536 words in index order, with the reverse mapping."""

    def __init__(self):
        self._words = tuple(index_to_word(i) for i in range(WORD_BASE))
        self._indices = {w: i for i, w in enumerate(self._words)}

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def word_at(self, index: int) -> str:
        return self._words[index]

    def index_of(self, word: str) -> int:
        return self._indices[word]


_table = None
_table_lock = threading.Lock()


def get_word_table() -> WordTable:
    """Return the shared WordTable, building it exactly once."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                logger.debug("Building proquint word table (%d words)", WORD_BASE)
                _table = WordTable()
    return _table


def reset_word_table():
    """Drop the shared table so the next lookup rebuilds it."""
    global _table
    with _table_lock:
        _table = None


def check_index(index) -> int:
    """Return index as an int, or raise if it is not a word index 0-65535."""
    if isinstance(index, bool) or not isinstance(index, (numbers.Integral, float)):
        raise TypeError(f"Invalid proquint word index (not numeric): {index!r}")
    if isinstance(index, float) and not index.is_integer():
        raise RangeError(f"Invalid proquint word index (not a whole number): {index!r}")
    if not 0 <= index < WORD_BASE:
        raise RangeError(
            f"Invalid proquint word index (out of range 0-{WORD_BASE - 1}): {index!r}"
        )
    return int(index)


def encode_word(index: int, use_cache: bool = True, validate: bool = True) -> str:
    """Encode an integer 0-65535 as a five letter word.

    With validate=False the caller promises a valid int; anything else gives
    an unspecified result.
    """
    if validate:
        index = check_index(index)
    if use_cache:
        return get_word_table().word_at(index % WORD_BASE)
    return index_to_word(index)


def decode_word(word: str, use_cache: bool = True, validate: bool = True) -> int:
    """Decode a five letter word to its integer 0-65535."""
    if validate and not is_valid_word(word):
        raise FormatError(f"Invalid proquint word: {word!r}")
    if use_cache:
        return get_word_table().index_of(word)
    return word_to_index(word)


def encode_words(indices, use_cache: bool = True, validate: bool = True) -> list:
    """Encode a sequence of indices. None entries stay None."""
    if validate:
        indices = [None if i is None else check_index(i) for i in indices]
    return [None if i is None else encode_word(i, use_cache, False) for i in indices]


def decode_words(words, use_cache: bool = True, validate: bool = True) -> list:
    """Decode a sequence of words. None entries stay None.

    All malformed entries are reported together.
    """
    words = list(words)
    if validate:
        bad = invalid_words(words)
        if bad:
            raise FormatError(f"Invalid proquint word: {quote_list(bad)}")
    return [None if w is None else decode_word(w, use_cache, False) for w in words]
