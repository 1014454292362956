"""Tests for the pqid command line."""

import json
import logging

import pytest

from gmpy2 import mpz

from pqid.cli import build_parser, main
from pqid.config import load_config
from pqid.engine.codec import int_to_proquint


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("PQID_N_WORDS", "PQID_USE_CACHE", "PQID_RANDOM_SOURCE", "PQID_DECODE_AS"):
        monkeypatch.delenv(key, raising=False)


class TestEncode:
    def test_plain(self, capsys):
        assert main(["encode", "25258", "0x7F000001"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["25258\tkapop", "0x7F000001\tlusab-babad"]

    def test_json(self, capsys):
        assert main(["--json", "encode", "0"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"input": "0", "output": "babab"}]

    def test_not_an_integer(self, capsys):
        assert main(["encode", "twelve"]) == 1
        assert "ERROR: Not an integer" in capsys.readouterr().err

    def test_negative(self, capsys):
        assert main(["encode", "-5"]) == 1
        assert "negative" in capsys.readouterr().err


class TestDecode:
    def test_default_numeric(self, capsys):
        assert main(["decode", "kapop"]) == 0
        assert capsys.readouterr().out.strip() == "kapop\t25258.0"

    def test_integer(self, capsys):
        assert main(["decode", "lusab-babad", "--as", "integer"]) == 0
        assert capsys.readouterr().out.strip() == "lusab-babad\t2130706433"

    def test_bignum_json(self, capsys):
        text = "babad-babab-babab-babab-babab"
        assert main(["--json", "decode", text, "--as", "bignum"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"input": text, "output": 2 ** 64}]

    def test_env_default_mode(self, capsys, monkeypatch):
        monkeypatch.setenv("PQID_DECODE_AS", "integer")
        assert main(["decode", "kapop"]) == 0
        assert capsys.readouterr().out.strip() == "kapop\t25258"

    def test_overflow(self, capsys):
        assert main(["decode", "zuzuz-zuzuz", "--as", "integer"]) == 1
        assert "Integer overflow" in capsys.readouterr().err

    def test_malformed(self, capsys):
        assert main(["decode", "KAPOP"]) == 1
        assert "Invalid identifier" in capsys.readouterr().err


class TestWord:
    def test_both_directions(self, capsys):
        assert main(["word", "25258", "kapop"]) == 0
        assert capsys.readouterr().out.splitlines() == ["25258\tkapop", "kapop\t25258"]

    def test_out_of_range(self, capsys):
        assert main(["word", "65536"]) == 1
        assert "out of range" in capsys.readouterr().err

    def test_no_cache(self, capsys):
        assert main(["--no-cache", "word", "65535"]) == 0
        assert capsys.readouterr().out.strip() == "65535\tzuzuz"


class TestGenerate:
    def test_count_and_words(self, capsys):
        assert main(["generate", "-n", "3", "--words", "4"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert all(len(line.split("-")) == 4 for line in lines)

    def test_env_words(self, capsys, monkeypatch):
        monkeypatch.setenv("PQID_N_WORDS", "3")
        assert main(["--json", "generate", "--secure"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 1
        assert len(data[0].split("-")) == 3

    def test_bad_words(self, capsys):
        assert main(["generate", "--words", "0"]) == 1
        assert "n_words" in capsys.readouterr().err


class TestValidate:
    def test_all_valid(self, capsys):
        assert main(["validate", "kapop", "lusab-babad"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["kapop\tvalid (word)", "lusab-babad\tvalid (proquint)"]

    def test_some_invalid(self, capsys):
        assert main(["validate", "kapop", "KAPOP"]) == 1
        assert "KAPOP\tinvalid" in capsys.readouterr().out

    def test_json(self, capsys):
        assert main(["--json", "validate", "kapop", "kap"]) == 1
        assert json.loads(capsys.readouterr().out) == [
            {"input": "kapop", "output": True},
            {"input": "kap", "output": False},
        ]

    def test_json_keeps_duplicates(self, capsys):
        assert main(["--json", "validate", "kapop", "kapop", "KAPOP"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert [d["input"] for d in data] == ["kapop", "kapop", "KAPOP"]
        assert [d["output"] for d in data] == [True, True, False]


class TestConfigErrors:
    def test_bad_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("PQID_DECODE_AS", "float")
        assert main(["decode", "kapop"]) == 1
        assert "PQID_DECODE_AS" in capsys.readouterr().err


class TestVerbose:
    def test_verbose_attaches_one_handler(self, capsys):
        logger = logging.getLogger("pqid")
        saved = list(logger.handlers)
        logger.handlers.clear()
        try:
            assert main(["-v", "word", "kapop"]) == 0
            assert main(["-v", "word", "kapop"]) == 0
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
        finally:
            logger.handlers[:] = saved
            logger.setLevel(logging.NOTSET)


class TestLargeValues:
    """Values past the interpreter's 4300 digit int/str limit."""

    def test_encode_long_decimal(self, capsys):
        value = mpz(2) ** 16000
        assert main(["encode", str(value)]) == 0
        out = capsys.readouterr().out.strip()
        assert out.split("\t")[1] == int_to_proquint(value)
        assert out.split("\t")[1] == "-".join(["babad"] + ["babab"] * 1000)

    def test_decode_bignum_plain(self, capsys):
        text = "-".join(["zuzuz"] * 1000)
        assert main(["decode", text, "--as", "bignum"]) == 0
        out = capsys.readouterr().out.strip()
        assert out.split("\t")[1] == str(mpz(2) ** 16000 - 1)

    def test_decode_bignum_json_as_string(self, capsys):
        text = "-".join(["zuzuz"] * 1000)
        assert main(["--json", "decode", text, "--as", "bignum"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"input": text, "output": str(mpz(2) ** 16000 - 1)}]


class TestPairedFlags:
    """Command line flags override environment defaults in both directions."""

    def test_cache_back_on(self):
        config = load_config({"PQID_USE_CACHE": "false"})
        parser = build_parser(config)
        assert parser.parse_args(["word", "kapop"]).use_cache is False
        assert parser.parse_args(["--cache", "word", "kapop"]).use_cache is True

    def test_cache_off(self):
        parser = build_parser(load_config({}))
        assert parser.parse_args(["--no-cache", "word", "kapop"]).use_cache is False

    def test_secure_back_off(self):
        config = load_config({"PQID_RANDOM_SOURCE": "secure"})
        parser = build_parser(config)
        assert parser.parse_args(["generate"]).secure is True
        assert parser.parse_args(["generate", "--no-secure"]).secure is False

    def test_secure_on(self):
        parser = build_parser(load_config({}))
        assert parser.parse_args(["generate", "--secure"]).secure is True
