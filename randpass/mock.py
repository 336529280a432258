# mock
# (deterministic stand-in for tests of code depending on a Generator)
#

from typing import Optional

from .pwgen import Generator


class MockGenerator(Generator):

    """Return `result` regardless of arguments, or raise `err` if given.

    Useful where a component takes a :class:`randpass.Generator`
    and the test needs a predictable password.

    """

    def __init__(self, result: str = '', err: Optional[Exception] = None):
        self._result = result
        self._err = err

    def generate(self, length=0, num_digits=0, num_symbols=0,
                 include_upper=False, allow_repeat=False) -> str:
        if self._err is not None:
            raise self._err
        return self._result

    def generate_with_policy(self, length=0, num_digits=0, num_symbols=0,
                             include_upper=False, allow_repeat=False,
                             needs_lower=False, needs_upper=False,
                             needs_digit=False, needs_symbol=False) -> str:
        return self.generate()
