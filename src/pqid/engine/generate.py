"""Random proquint identifiers.

Each identifier is n_words random words joined by hyphens. A word has
2**16 possibilities, so a k-word identifier draws from 2**(16k): four
words give about 1.8e19 identifiers in 23 characters.
"""

from functools import partial

from ..core.alphabet import SEPARATOR
from .sampler import sample_words


def generate_proquints(n: int = 1, n_words: int = 2, use_cache: bool = True,
                       secure: bool = False) -> list[str]:
    """Generate n random proquints of n_words words each.

    All n * n_words words are drawn in one go, so for a fixed seed the
    result does not depend on use_cache.
    """
    if n < 0:
        raise ValueError(f"Number of identifiers must be non-negative, got {n}")
    if n_words < 1:
        raise ValueError(f"n_words must be at least 1, got {n_words}")
    words = sample_words(n * n_words, use_cache, secure)
    return [
        SEPARATOR.join(words[i * n_words:(i + 1) * n_words])
        for i in range(n)
    ]


def proquint_generator(n_words: int = 2, use_cache: bool = True, secure: bool = False):
    """Return gen(n=1) producing proquints with these settings bound."""
    if n_words < 1:
        raise ValueError(f"n_words must be at least 1, got {n_words}")
    return partial(generate_proquints, n_words=n_words, use_cache=use_cache, secure=secure)
