"""
Command-line interface for pqid.

Usage:
    python -m pqid <command> [args...]

Commands:
    encode <values...>        Integers to proquints
    decode <proquints...>     Proquints to integers (--as integer|numeric|bignum)
    word <index|word...>      Single words in either direction
    generate                  Random proquints (-n, --words, --secure/--no-secure)
    validate <texts...>       Check proquint format; exit 1 if any is invalid

Defaults come from the PQID_* environment variables (see pqid.config).
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from gmpy2 import mpz

from .config import load_config
from .core.bigint import is_bignum
from .core.validate import is_valid_proquint, is_valid_word
from .core.words import decode_word, encode_word
from .engine.codec import ResultMode, ints_to_proquints, proquints_to_ints
from .engine.generate import generate_proquints
from .log import setup_logger

logger = logging.getLogger(__name__)

# Below the interpreter's int to str conversion limit (4300 digits)
_JSON_INT_DIGITS = 4000


def _parse_int(text: str) -> mpz:
    for base in (10, 0):
        try:
            return mpz(text, base)
        except ValueError:
            continue
    raise ValueError(f"Not an integer: {text!r}")


def _plain(value):
    """JSON-friendly form of a decoded value. Very long numbers become strings."""
    if is_bignum(value):
        return int(value) if value.num_digits(10) < _JSON_INT_DIGITS else str(value)
    return value


def _emit(args: argparse.Namespace, pairs: list[tuple]) -> None:
    if args.json:
        print(json.dumps([{"input": a, "output": _plain(b)} for a, b in pairs], indent=2))
        return
    for a, b in pairs:
        print(f"{a}\t{b}")


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode integers as proquints."""
    values = [_parse_int(v) for v in args.values]
    _emit(args, list(zip(args.values, ints_to_proquints(values, args.use_cache))))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode proquints to numbers."""
    results = proquints_to_ints(args.proquints, ResultMode(args.as_), args.use_cache)
    _emit(args, list(zip(args.proquints, results)))
    return 0


def cmd_word(args: argparse.Namespace) -> int:
    """Convert single words in either direction."""
    pairs = []
    for item in args.items:
        if item.isdigit():
            pairs.append((item, encode_word(int(item), args.use_cache)))
        else:
            pairs.append((item, decode_word(item, args.use_cache)))
    _emit(args, pairs)
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate random proquints."""
    ids = generate_proquints(args.n, args.words, args.use_cache, args.secure)
    if args.json:
        print(json.dumps(ids, indent=2))
    else:
        for pq in ids:
            print(pq)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Report whether each text is a valid proquint."""
    results = [is_valid_proquint(t) for t in args.texts]
    if args.json:
        _emit(args, list(zip(args.texts, results)))
    else:
        for t, valid in zip(args.texts, results):
            kind = "word" if is_valid_word(t) else "proquint"
            print(f"{t}\tvalid ({kind})" if valid else f"{t}\tinvalid")
    return 0 if all(results) else 1


def build_parser(config=None) -> argparse.ArgumentParser:
    config = config or load_config()

    parser = argparse.ArgumentParser(
        prog="pqid",
        description="pqid: pronounceable identifiers (proquints) to and from integers",
    )
    parser.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--cache", dest="use_cache", action=argparse.BooleanOptionalAction,
                        default=config.use_cache,
                        help="Look words up in the word table (--no-cache computes them)")

    sub = parser.add_subparsers(dest="command", required=True)

    # encode
    p_encode = sub.add_parser("encode", help="Integers to proquints")
    p_encode.add_argument("values", nargs="+", help="Non-negative integers (0x.. accepted)")

    # decode
    p_decode = sub.add_parser("decode", help="Proquints to integers")
    p_decode.add_argument("proquints", nargs="+", help="Proquints, e.g. lusab-babad")
    p_decode.add_argument("--as", dest="as_", choices=[m.value for m in ResultMode],
                          default=config.decode_as.value, help="Result type")

    # word
    p_word = sub.add_parser("word", help="Single word <-> index 0-65535")
    p_word.add_argument("items", nargs="+", help="Indices or five letter words")

    # generate
    p_generate = sub.add_parser("generate", help="Random proquints")
    p_generate.add_argument("-n", type=int, default=1, help="Number of identifiers")
    p_generate.add_argument("--words", type=int, default=config.n_words,
                            help=f"Words per identifier (default: {config.n_words})")
    p_generate.add_argument("--secure", action=argparse.BooleanOptionalAction,
                            default=config.secure,
                            help="Use the cryptographically strong random source")

    # validate
    p_validate = sub.add_parser("validate", help="Check proquint format")
    p_validate.add_argument("texts", nargs="+", help="Texts to check")

    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        parser = build_parser()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logger("pqid", logging.DEBUG)

    commands = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "word": cmd_word,
        "generate": cmd_generate,
        "validate": cmd_validate,
    }

    try:
        return commands[args.command](args)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
