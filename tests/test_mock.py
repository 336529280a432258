import pytest

from randpass import Generator, GeneratorError, GenerationAborted, RandomSourceError
from randpass.mock import MockGenerator


def create_account(user: str, generator: Generator) -> dict:
    return {'user': user, 'password': generator.generate(16, 2, 2, True, False)}


def test_result():
    gen = MockGenerator("hunter2")
    assert isinstance(gen, Generator)
    assert gen.generate(100, 10, 10, True, False) == "hunter2"
    assert gen.generate_with_policy(1, 0, 0, False, False, True, True, True, True) == "hunter2"
    assert gen.must_generate(5) == "hunter2"
    assert create_account("mona", gen) == {'user': 'mona', 'password': "hunter2"}


def test_error():
    err = RandomSourceError("no entropy")
    gen = MockGenerator(err=err)
    with pytest.raises(RandomSourceError):
        gen.generate(16)
    with pytest.raises(RandomSourceError):
        gen.generate_with_policy(16, needs_digit=True)
    with pytest.raises(GenerationAborted) as excinfo:
        gen.must_generate(16)
    assert excinfo.value.__cause__ is err


def test_error_takes_precedence():
    gen = MockGenerator("unused", GeneratorError())
    with pytest.raises(GeneratorError):
        create_account("lisa", gen)


def test_must_generate_aborts_on_any_error():
    err = OSError("boom")
    gen = MockGenerator(err=err)
    with pytest.raises(OSError):
        gen.generate(5)
    with pytest.raises(GenerationAborted) as excinfo:
        gen.must_generate(5)
    assert excinfo.value.__cause__ is err
