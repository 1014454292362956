"""Proquint alphabet and word layout.

Consonants: b d f g h j k l m n p r s t v z (16, four bits each)
Vowels: a i o u (4, two bits each)
A word is consonant-vowel-consonant-vowel-consonant and encodes a value 0-65535.
A proquint is 1 or more hyphen-separated words, most significant first.
"""

# The 20-symbol pool: consonants occupy 0-15, vowels 16-19
CONSONANTS = "bdfghjklmnprstvz"
VOWELS = "aiou"
POOL = CONSONANTS + VOWELS
VOWEL_OFFSET = len(CONSONANTS)  # 16

# Reverse lookup: character -> sub-index within its class
CONSONANT_INDEX = {c: i for i, c in enumerate(CONSONANTS)}
VOWEL_INDEX = {c: i for i, c in enumerate(VOWELS)}

WORD_LENGTH = 5
WORD_BITS = 16
WORD_BASE = 2 ** WORD_BITS  # 65536
SEPARATOR = "-"

# Zero-indexed positions within a word
CONSONANT_POSITIONS = (0, 2, 4)
VOWEL_POSITIONS = (1, 3)

# Positional weights: c(4) v(2) c(4) v(2) c(4) bits, high to low
MULTIPLIERS = (16 * 4 * 16 * 4, 16 * 4 * 16, 16 * 4, 16, 1)  # 4096, 1024, 64, 16, 1
MODULI = (WORD_BASE,) + MULTIPLIERS[:-1]                      # 65536, 4096, 1024, 64, 16

_C = f"[{CONSONANTS}]"
_V = f"[{VOWELS}]"

# Grammar, to be used with re.fullmatch
WORD_PATTERN = _C + _V + _C + _V + _C
PROQUINT_PATTERN = f"{WORD_PATTERN}(?:{SEPARATOR}{WORD_PATTERN})*"

# Well-known words
WORD_ZERO = "babab"                  # 0
WORD_MAX = "zuzuz"                   # 65535
