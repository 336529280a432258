# pwgen
# (random password generator)
#
# Usage:
#
#     from randpass import pwgen
#     pw = pwgen.generate(64, 10, 10, include_upper=True)
#
# A generator holds no per-call state. It is safe for concurrent use
# as long as its random byte source is.
#

import abc
import logging
import string
from typing import Callable, Optional

from . import backend
from .errors import (GenerationAborted, InvalidCount, InvalidConfig,
                     ExceedsTotalLength, LettersExceedsAvailable,
                     DigitsExceedsAvailable, SymbolsExceedsAvailable,
                     PolicyUnsatisfiable)
from .policy import is_legal_password
from .sampler import random_element, random_insert

log = logging.getLogger(__name__)

LOWER_LETTERS = string.ascii_lowercase
UPPER_LETTERS = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = string.punctuation


class Generator(abc.ABC):

    """Password generator capability.

    Depend on this rather than on a concrete generator, so that tests
    can pass a :class:`randpass.mock.MockGenerator` instead.

    """

    @abc.abstractmethod
    def generate(self, length: int, num_digits: int = 0, num_symbols: int = 0,
                 include_upper: bool = False, allow_repeat: bool = False) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def generate_with_policy(self, length: int, num_digits: int = 0, num_symbols: int = 0,
                             include_upper: bool = False, allow_repeat: bool = False,
                             needs_lower: bool = False, needs_upper: bool = False,
                             needs_digit: bool = False, needs_symbol: bool = False) -> str:
        raise NotImplementedError

    def must_generate(self, length: int, num_digits: int = 0, num_symbols: int = 0,
                      include_upper: bool = False, allow_repeat: bool = False) -> str:
        """Same as :meth:`generate`, but failure is not recoverable.

        :raises GenerationAborted: wrapping whatever :meth:`generate` raised

        """
        try:
            return self.generate(length, num_digits, num_symbols, include_upper, allow_repeat)
        except Exception as e:
            raise GenerationAborted(str(e)) from e


class GeneratorInput:

    """Overrides for :func:`new_generator`.

    Empty alphabets and a missing `randombytes` fall back to defaults.
    `randombytes(n)` must return `n` bytes from a secure source.
    `max_policy_attempts` of None lets :meth:`generate_with_policy`
    retry without limit.

    """

    def __init__(self,
                 lower_letters: str = '',
                 upper_letters: str = '',
                 digits: str = '',
                 symbols: str = '',
                 randombytes: Optional[Callable[[int], bytes]] = None,
                 max_policy_attempts: Optional[int] = None):
        self.lower_letters = lower_letters
        self.upper_letters = upper_letters
        self.digits = digits
        self.symbols = symbols
        self.randombytes = randombytes
        self.max_policy_attempts = max_policy_attempts

    def __repr__(self):
        return f"GeneratorInput(lower_letters={self.lower_letters!r}, " \
               f"upper_letters={self.upper_letters!r}, digits={self.digits!r}, " \
               f"symbols={self.symbols!r}, max_policy_attempts={self.max_policy_attempts!r})"


class StatefulGenerator(Generator):

    """Generator with customizable alphabets and random source."""

    def __init__(self, config: GeneratorInput):
        if config.max_policy_attempts is not None and config.max_policy_attempts <= 0:
            raise InvalidConfig(f"max_policy_attempts must be positive, "
                                f"got {config.max_policy_attempts}")
        self._lower_letters = config.lower_letters or LOWER_LETTERS
        self._upper_letters = config.upper_letters or UPPER_LETTERS
        self._digits = config.digits or DIGITS
        self._symbols = config.symbols or SYMBOLS
        self._randombytes = config.randombytes
        if self._randombytes is None:
            self._randombytes = backend.randombytes
        self._max_policy_attempts = config.max_policy_attempts

    @property
    def lower_letters(self) -> str:
        return self._lower_letters

    @property
    def upper_letters(self) -> str:
        return self._upper_letters

    @property
    def digits(self) -> str:
        return self._digits

    @property
    def symbols(self) -> str:
        return self._symbols

    def generate(self, length: int, num_digits: int = 0, num_symbols: int = 0,
                 include_upper: bool = False, allow_repeat: bool = False) -> str:
        """Generate a password with the given composition.

        :param length: Total number of characters
        :param num_digits: How many of them are digits
        :param num_symbols: How many of them are symbols
        :param include_upper: Draw letters from upper case too
        :param allow_repeat: Allow a character to occur more than once
        :returns: The password.
        :raises CompositionError: if the composition cannot be satisfied
        :raises RandomSourceError: if the random source fails

        Each character is inserted at a random position of the partial
        result, so the character classes are not clustered.

        """
        letters = self._lower_letters
        if include_upper:
            letters += self._upper_letters

        chars = length - num_digits - num_symbols
        if chars < 0:
            raise ExceedsTotalLength()
        if num_digits < 0 or num_symbols < 0:
            raise InvalidCount()
        if not allow_repeat and chars > len(set(letters)):
            raise LettersExceedsAvailable()
        if not allow_repeat and num_digits > len(set(self._digits)):
            raise DigitsExceedsAvailable()
        if not allow_repeat and num_symbols > len(set(self._symbols)):
            raise SymbolsExceedsAvailable()

        result = ''
        result = self._add_chars(result, letters, chars, allow_repeat)
        result = self._add_chars(result, self._digits, num_digits, allow_repeat)
        result = self._add_chars(result, self._symbols, num_symbols, allow_repeat)
        return result

    def _add_chars(self, result: str, alphabet: str, count: int, allow_repeat: bool) -> str:
        added = 0
        while added < count:
            ch = random_element(self._randombytes, alphabet)
            if not allow_repeat and ch in result:
                continue
            result = random_insert(self._randombytes, result, ch)
            added += 1
        return result

    def generate_with_policy(self, length: int, num_digits: int = 0, num_symbols: int = 0,
                             include_upper: bool = False, allow_repeat: bool = False,
                             needs_lower: bool = False, needs_upper: bool = False,
                             needs_digit: bool = False, needs_symbol: bool = False) -> str:
        """Same as :meth:`generate`, but regenerate until the result
        contains each of the requested character classes.

        Feasibility of the policy is not checked. Without
        `max_policy_attempts`, an impossible policy (e.g. `needs_symbol`
        with no symbols) never returns.

        :raises PolicyUnsatisfiable: when `max_policy_attempts` is exhausted

        """
        attempt = 0
        while True:
            result = self.generate(length, num_digits, num_symbols, include_upper, allow_repeat)
            attempt += 1
            if is_legal_password(result, needs_lower, needs_upper, needs_digit, needs_symbol):
                return result
            log.debug("attempt %d does not match policy, regenerating", attempt)
            if self._max_policy_attempts is not None and attempt >= self._max_policy_attempts:
                raise PolicyUnsatisfiable(
                    f"no password matched the policy in {attempt} attempts")


def new_generator(config: Optional[GeneratorInput] = None) -> StatefulGenerator:
    """Create a generator from `config` (defaults when None).

    :raises InvalidConfig: if `max_policy_attempts` is not positive

    """
    if config is None:
        config = GeneratorInput()
    return StatefulGenerator(config)


def generate(length: int, num_digits: int = 0, num_symbols: int = 0,
             include_upper: bool = False, allow_repeat: bool = False) -> str:
    """Shortcut for :meth:`StatefulGenerator.generate` with defaults."""
    return new_generator().generate(length, num_digits, num_symbols, include_upper, allow_repeat)


def generate_with_policy(length: int, num_digits: int = 0, num_symbols: int = 0,
                         include_upper: bool = False, allow_repeat: bool = False,
                         needs_lower: bool = False, needs_upper: bool = False,
                         needs_digit: bool = False, needs_symbol: bool = False) -> str:
    """Shortcut for :meth:`StatefulGenerator.generate_with_policy` with defaults."""
    return new_generator().generate_with_policy(
        length, num_digits, num_symbols, include_upper, allow_repeat,
        needs_lower, needs_upper, needs_digit, needs_symbol)


def must_generate(length: int, num_digits: int = 0, num_symbols: int = 0,
                  include_upper: bool = False, allow_repeat: bool = False) -> str:
    """Shortcut for :meth:`Generator.must_generate` with defaults."""
    return new_generator().must_generate(length, num_digits, num_symbols, include_upper, allow_repeat)

