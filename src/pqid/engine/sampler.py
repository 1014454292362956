"""Uniform random word indices.

Two sources:
  - default: the random module, so random.seed() makes draws repeatable
  - secure:  secrets.token_bytes, unaffected by any seed
"""

import random
import secrets

from ..core.alphabet import WORD_BASE
from ..core.words import encode_words


def sample_indices(n: int, secure: bool = False) -> list[int]:
    """Draw n independent indices in 0-65535."""
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")
    if secure:
        raw = secrets.token_bytes(2 * n)
        return [int.from_bytes(raw[i:i + 2], "big") for i in range(0, 2 * n, 2)]
    return [random.randrange(WORD_BASE) for _ in range(n)]


def sample_words(n: int, use_cache: bool = True, secure: bool = False) -> list[str]:
    """Draw n random words. The cache flag never changes which words are drawn."""
    return encode_words(sample_indices(n, secure), use_cache, validate=False)
