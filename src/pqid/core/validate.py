"""Strict format checks for proquint text.

Lowercase only. Words are joined by single hyphens with no empty segments
and no leading or trailing hyphen.
"""

import re

from .alphabet import WORD_PATTERN, PROQUINT_PATTERN

WORD_RE = re.compile(WORD_PATTERN)
PROQUINT_RE = re.compile(PROQUINT_PATTERN)


def is_valid_word(text) -> bool:
    """True if text is exactly one proquint word."""
    return isinstance(text, str) and WORD_RE.fullmatch(text) is not None


def is_valid_proquint(text) -> bool:
    """True if text is one or more hyphen-joined proquint words."""
    return isinstance(text, str) and PROQUINT_RE.fullmatch(text) is not None


def invalid_words(words) -> list:
    """Return the entries of a batch that are not single words. None is skipped."""
    return [w for w in words if w is not None and not is_valid_word(w)]


def invalid_proquints(texts) -> list:
    """Return the entries of a batch that are not proquints. None is skipped."""
    return [t for t in texts if t is not None and not is_valid_proquint(t)]


def quote_list(items) -> str:
    """Format offending entries for an error message: 'a', 'b'."""
    return ", ".join(f"{item!r}" for item in items)
