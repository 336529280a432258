# config
# (generator settings from an INI file)
#
# Example ~/.randpass/randpass.conf:
#
#     [randpass]
#     symbols = !@#$%
#     max_policy_attempts = 1000
#

import logging
import configparser
from pathlib import Path

from .pwgen import GeneratorInput

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('~/.randpass/randpass.conf')
SECTION = 'randpass'
ALPHABET_KEYS = ('lower_letters', 'upper_letters', 'digits', 'symbols')


class Config:

    def __init__(self, config_file=DEFAULT_CONFIG_PATH):
        self._alphabets = {}
        self._max_policy_attempts = None
        self.load(config_file)

    def load(self, config_file):
        """Read `config_file`. A missing file leaves the defaults in place.

        :raises ValueError: if `max_policy_attempts` is not a positive integer

        """
        config_file = Path(config_file).expanduser()
        log.debug("Loading config %r", str(config_file))
        config = configparser.ConfigParser(interpolation=None)
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != SECTION:
                log.warning("unknown section %r in config %r", section, str(config_file))
                continue
            section = config[section]
            for key in section:
                if key in ALPHABET_KEYS:
                    self._alphabets[key] = section[key]
                elif key == 'max_policy_attempts':
                    value = section.getint(key)
                    if value <= 0:
                        raise ValueError(f"max_policy_attempts must be positive, got {value}")
                    self._max_policy_attempts = value
                else:
                    log.warning("unknown key [%r] %r in config %r",
                                section.name, key, str(config_file))

    @property
    def max_policy_attempts(self):
        return self._max_policy_attempts

    def alphabet(self, key: str) -> str:
        """Configured alphabet for `key`, empty string means default."""
        return self._alphabets.get(key, '')

    def generator_input(self, randombytes=None) -> GeneratorInput:
        return GeneratorInput(lower_letters=self.alphabet('lower_letters'),
                              upper_letters=self.alphabet('upper_letters'),
                              digits=self.alphabet('digits'),
                              symbols=self.alphabet('symbols'),
                              randombytes=randombytes,
                              max_policy_attempts=self._max_policy_attempts)
