"""Defaults for the command line, read from the environment.

Environment:
    PQID_N_WORDS        Words per generated identifier (default: 2)
    PQID_USE_CACHE      Use the word table: true/false (default: true)
    PQID_RANDOM_SOURCE  default | secure (default: default)
    PQID_DECODE_AS      integer | numeric | bignum (default: numeric)
"""

import os
from dataclasses import dataclass

from .engine.codec import ResultMode

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")
RANDOM_SOURCES = ("default", "secure")


@dataclass(frozen=True)
class ProquintConfig:
    n_words: int = 2
    use_cache: bool = True
    secure: bool = False
    decode_as: ResultMode = ResultMode.NUMERIC


def _parse_bool(key, raw):
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean (true/false), got {raw!r}")


def load_config(environ=None) -> ProquintConfig:
    """Build a ProquintConfig from environment variables."""
    env = os.environ if environ is None else environ
    defaults = ProquintConfig()

    raw = env.get("PQID_N_WORDS")
    n_words = defaults.n_words
    if raw is not None:
        try:
            n_words = int(raw)
        except ValueError:
            raise ValueError(f"PQID_N_WORDS must be an integer, got {raw!r}") from None
        if n_words < 1:
            raise ValueError(f"PQID_N_WORDS must be at least 1, got {n_words}")

    raw = env.get("PQID_USE_CACHE")
    use_cache = defaults.use_cache if raw is None else _parse_bool("PQID_USE_CACHE", raw)

    source = env.get("PQID_RANDOM_SOURCE", "default").strip().lower()
    if source not in RANDOM_SOURCES:
        raise ValueError(f"PQID_RANDOM_SOURCE must be one of {', '.join(RANDOM_SOURCES)}, "
                         f"got {source!r}")

    raw = env.get("PQID_DECODE_AS", defaults.decode_as.value).strip().lower()
    try:
        decode_as = ResultMode(raw)
    except ValueError:
        raise ValueError(f"PQID_DECODE_AS must be integer, numeric or bignum, got {raw!r}") from None

    return ProquintConfig(n_words=n_words, use_cache=use_cache,
                          secure=source == "secure", decode_as=decode_as)
