import logging

import pytest

from randpass import new_generator
from randpass.config import Config


def test_missing_file(tmp_path):
    cfg = Config(tmp_path / 'does-not-exist.conf')
    assert cfg.max_policy_attempts is None
    gen = new_generator(cfg.generator_input())
    assert gen.symbols == "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"


def test_load(tmp_path):
    config_file = tmp_path / 'randpass.conf'
    config_file.write_text("[randpass]\n"
                           "lower_letters = abcde\n"
                           "symbols = !@#$%\n"
                           "max_policy_attempts = 3\n", encoding='utf-8')
    cfg = Config(config_file)
    assert cfg.alphabet('lower_letters') == "abcde"
    assert cfg.alphabet('digits') == ""
    assert cfg.max_policy_attempts == 3
    gen = new_generator(cfg.generator_input())
    assert gen.lower_letters == "abcde"
    assert gen.symbols == "!@#$%"
    assert gen.digits == "0123456789"
    pw = gen.generate(10, 2, 3, False, False)
    assert set(pw) <= set("abcde0123456789!@#$%")


def test_random_source_passed_through(tmp_path, byte_sequence):
    src = byte_sequence([1, 0, 0])
    config_file = tmp_path / 'randpass.conf'
    config_file.write_text("[randpass]\nlower_letters = ab\ndigits = 01\n", encoding='utf-8')
    gen = new_generator(Config(config_file).generator_input(randombytes=src))
    assert gen.generate(2, 1, 0, False, True) == "0b"


def test_unknown_entries(tmp_path, caplog):
    config_file = tmp_path / 'randpass.conf'
    config_file.write_text("[other]\nfoo = 1\n[randpass]\nlength = 12\n", encoding='utf-8')
    with caplog.at_level(logging.WARNING, logger='randpass.config'):
        Config(config_file)
    messages = [r.getMessage() for r in caplog.records]
    assert any("unknown section 'other'" in m for m in messages)
    assert any("'length'" in m for m in messages)


@pytest.mark.parametrize('value', ['0', '-2', 'many'])
def test_bad_attempts(tmp_path, value):
    config_file = tmp_path / 'randpass.conf'
    config_file.write_text(f"[randpass]\nmax_policy_attempts = {value}\n", encoding='utf-8')
    with pytest.raises(ValueError):
        Config(config_file)
